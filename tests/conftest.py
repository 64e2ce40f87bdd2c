import pytest

from transcript_remix import create_app
from transcript_remix.captions import CaptionProvider, CaptionSegment
from transcript_remix.generation import GenerationProvider


class FakeCaptionProvider(CaptionProvider):
    def __init__(self, texts=None, error=None):
        self.texts = texts if texts is not None else ["hello &amp; welcome", "[music]", "to the show"]
        self.error = error
        self.calls = []

    def fetch(self, video_id):
        self.calls.append(video_id)
        if self.error is not None:
            raise self.error
        return [CaptionSegment(text=t, start=float(i)) for i, t in enumerate(self.texts)]


class FakeGenerationProvider(GenerationProvider):
    def __init__(self, candidates=None, error=None):
        self.candidates = candidates if candidates is not None else ["generated text"]
        self.error = error
        self.calls = []

    def complete(self, model, messages, temperature, max_tokens):
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return list(self.candidates)


@pytest.fixture
def captions():
    return FakeCaptionProvider()


@pytest.fixture
def generator():
    return FakeGenerationProvider()


@pytest.fixture
def app(captions, generator):
    return create_app(
        {"TESTING": True, "GENERATION_MODEL": "test-model"},
        caption_provider=captions,
        generation_provider=generator,
    )


@pytest.fixture
def client(app):
    return app.test_client()
