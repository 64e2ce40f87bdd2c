import logging
from dataclasses import dataclass

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import WebshareProxyConfig

from .cleaning import normalize_segments
from .errors import NoCaptionsAvailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptionSegment:
    text: str
    start: float = 0.0
    duration: float = 0.0


class CaptionProvider:
    """Anything that can turn a video id into an ordered list of CaptionSegments."""

    def fetch(self, video_id):
        raise NotImplementedError


def _to_segments(fetched):
    return [
        CaptionSegment(text=item.text, start=item.start, duration=item.duration)
        for item in fetched
    ]


class YouTubeCaptionProvider(CaptionProvider):
    def __init__(self, languages, proxy_user=None, proxy_pass=None):
        self.languages = list(languages)
        self.proxy_user = proxy_user
        self.proxy_pass = proxy_pass

    def create_client(self):
        """Create YouTubeTranscriptApi client with proxy if configured."""
        if self.proxy_user and self.proxy_pass:
            proxy_config = WebshareProxyConfig(
                proxy_username=self.proxy_user,
                proxy_password=self.proxy_pass,
            )
            return YouTubeTranscriptApi(proxy_config=proxy_config)
        return YouTubeTranscriptApi()

    def fetch(self, video_id):
        ytt = self.create_client()

        # Try 1: one of the preferred languages
        try:
            segments = _to_segments(ytt.fetch(video_id, languages=self.languages))
            if segments:
                return segments
        except Exception as e:
            logger.debug("Preferred-language captions unavailable for %s: %s", video_id, e)

        # Try 2: whatever is listed, translated to English when possible
        for transcript in ytt.list(video_id):
            try:
                if transcript.is_translatable:
                    fetched = transcript.translate("en").fetch()
                else:
                    fetched = transcript.fetch()
            except Exception as e:
                logger.debug(
                    "Skipping %s captions for %s: %s", transcript.language_code, video_id, e
                )
                continue
            segments = _to_segments(fetched)
            if segments:
                return segments

        return []


def fetch_transcript(video_id, provider):
    """
    Fetch captions for ``video_id`` and return the normalized transcript text.

    Every failure mode collapses into NoCaptionsAvailable; the real cause is
    only logged.
    """
    try:
        segments = provider.fetch(video_id)
    except Exception:
        logger.exception("Failed to fetch transcript for %s", video_id)
        raise NoCaptionsAvailable()

    transcript = normalize_segments(segment.text for segment in segments or [])
    if not transcript:
        logger.warning("No usable caption text for %s", video_id)
        raise NoCaptionsAvailable()

    logger.info("Fetched %d caption segments for %s", len(segments), video_id)
    return transcript
