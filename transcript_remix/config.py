import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CAPTION_LANGUAGES = "en,en-US,en-GB,en-AU"


def _split_languages(value):
    return [lang.strip() for lang in value.split(",") if lang.strip()]


class Config:
    ANTHROPIC_API_KEY = os.environ.get("ANTHROPIC_API_KEY")
    GENERATION_MODEL = os.environ.get("GENERATION_MODEL", "claude-sonnet-4-20250514")
    CAPTION_LANGUAGES = _split_languages(
        os.environ.get("CAPTION_LANGUAGES", DEFAULT_CAPTION_LANGUAGES)
    )

    # Webshare rotating proxy, only used when both are set
    PROXY_USER = os.environ.get("PROXY_USER")
    PROXY_PASS = os.environ.get("PROXY_PASS")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", 5000))
