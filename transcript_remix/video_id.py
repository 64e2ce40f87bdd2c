"""
Turn whatever the user pasted into an 11-character YouTube video id.

URL shapes are always tried before the bare-id shape, so a string with URL
markers is never accepted just because it happens to be 11 characters long.
"""

import re

from .errors import InvalidReference

# watch?v=, embed/, v/, e/, shorts/, live/, youtu.be/ and /<a>/<b>/<id> share paths
URL_PATTERN = re.compile(
    r"(?:youtube(?:-nocookie)?\.com/"
    r"(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts|live)/|.*[?&]v=)"
    r"|youtu\.be/)"
    r"([^\"&?/\s]{11})",
    re.IGNORECASE,
)
BARE_ID_PATTERN = re.compile(r"^([a-zA-Z0-9_-]{11})$")

EXTRACTION_PATTERNS = (URL_PATTERN, BARE_ID_PATTERN)

# Only full canonical links enable the fetch button
STRICT_URL_PATTERN = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com/(watch\?v=|shorts/)|youtu\.be/)([a-zA-Z0-9_-]{11})"
)


def extract_video_id(raw):
    """Return the video id embedded in ``raw`` or raise InvalidReference."""
    if not raw or not isinstance(raw, str):
        raise InvalidReference()

    candidate = raw.strip()
    for pattern in EXTRACTION_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    raise InvalidReference()


def is_valid_video_url(raw):
    if not raw or not isinstance(raw, str):
        return False
    return STRICT_URL_PATTERN.match(raw.strip()) is not None
