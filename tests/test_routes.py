import pytest

from transcript_remix.errors import GenerationFailed, InvalidReference, NoCaptionsAvailable
from transcript_remix.prompts import NOTES, REMIX, SUMMARY

from .conftest import FakeCaptionProvider


class TestTranscriptEndpoint:
    def test_returns_cleaned_transcript(self, client, captions):
        response = client.post("/transcript", json={"url": "https://youtu.be/dQw4w9WgXcQ"})
        assert response.status_code == 200
        assert response.get_json() == {"transcript": "hello & welcome to the show"}
        assert captions.calls == ["dQw4w9WgXcQ"]

    def test_accepts_bare_id(self, client, captions):
        response = client.post("/transcript", json={"url": "dQw4w9WgXcQ"})
        assert response.status_code == 200
        assert captions.calls == ["dQw4w9WgXcQ"]

    @pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": "   "}, {"url": 12}])
    def test_missing_url(self, client, captions, body):
        response = client.post("/transcript", json=body)
        assert response.status_code == 400
        assert response.get_json() == {"error": "URL is required"}
        assert captions.calls == []

    def test_non_json_body_is_missing_url(self, client):
        response = client.post("/transcript", data="nope", content_type="text/plain")
        assert response.status_code == 400

    def test_unrecognized_url(self, client, captions):
        response = client.post("/transcript", json={"url": "https://example.com/video"})
        assert response.status_code == 400
        assert response.get_json() == {"error": InvalidReference.default_message}
        assert captions.calls == []

    def test_no_captions(self, app, client, captions):
        captions.error = RuntimeError("TranscriptsDisabled")
        response = client.post("/transcript", json={"url": "https://youtu.be/dQw4w9WgXcQ"})
        assert response.status_code == 404
        assert response.get_json() == {"error": NoCaptionsAvailable.default_message}

    def test_unexpected_error_is_500(self, app, client, monkeypatch):
        def explode(*args, **kwargs):
            raise ValueError("bug")

        monkeypatch.setattr("transcript_remix.routes.fetch_transcript", explode)
        response = client.post("/transcript", json={"url": "https://youtu.be/dQw4w9WgXcQ"})
        assert response.status_code == 500
        assert "error" in response.get_json()


@pytest.mark.parametrize(
    "path, task",
    [("/summary", SUMMARY), ("/remix", REMIX), ("/notes", NOTES)],
)
class TestGenerationEndpoints:
    def test_default_instruction(self, client, generator, path, task):
        response = client.post(path, json={"transcript": "the transcript"})
        assert response.status_code == 200
        assert response.get_json() == {task.response_key: "generated text"}

        call = generator.calls[0]
        assert call["model"] == "test-model"
        assert call["max_tokens"] == task.max_tokens
        assert call["messages"][0] == {"role": "system", "content": task.default_prompt}
        assert call["messages"][1]["role"] == "user"
        assert "the transcript" in call["messages"][1]["content"]

    def test_instruction_override(self, client, generator, path, task):
        response = client.post(path, json={"transcript": "t", "systemPrompt": "be terse"})
        assert response.status_code == 200
        assert generator.calls[0]["messages"][0]["content"] == "be terse"

    @pytest.mark.parametrize("body", [{}, {"transcript": ""}, {"transcript": None}])
    def test_missing_transcript(self, client, generator, path, task, body):
        response = client.post(path, json=body)
        assert response.status_code == 400
        assert response.get_json() == {"error": "Transcript is required"}
        assert generator.calls == []

    def test_provider_failure(self, client, generator, path, task):
        generator.error = RuntimeError("overloaded")
        response = client.post(path, json={"transcript": "t"})
        assert response.status_code == 500
        assert response.get_json() == {"error": task.failure_message}

    def test_get_not_allowed(self, client, path, task):
        assert client.get(path).status_code == 405


def test_paragraphs_endpoint(client):
    text = " ".join(["word"] * 61)
    response = client.post("/paragraphs", json={"transcript": text})
    assert response.status_code == 200
    paragraphs = response.get_json()["paragraphs"]
    assert len(paragraphs) == 2
    assert paragraphs[1] == "Word"


def test_paragraphs_requires_transcript(client):
    assert client.post("/paragraphs", json={}).status_code == 400


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Transcript Remix" in response.data
    assert SUMMARY.default_prompt.splitlines()[0].encode() in response.data


def test_providers_are_built_once_per_app(monkeypatch):
    from transcript_remix import create_app

    built = []

    class CountingProvider(FakeCaptionProvider):
        def __init__(self, *args, **kwargs):
            built.append(1)
            super().__init__()

    monkeypatch.setattr("transcript_remix.YouTubeCaptionProvider", CountingProvider)
    app = create_app({"TESTING": True})
    client = app.test_client()
    client.post("/transcript", json={"url": "dQw4w9WgXcQ"})
    client.post("/transcript", json={"url": "dQw4w9WgXcQ"})
    assert len(built) == 1


def test_generation_failed_is_a_500():
    assert GenerationFailed("x").status_code == 500
