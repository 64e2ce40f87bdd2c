"""
Caption text cleanup.

Caption providers hand back HTML-escaped fragments with stage directions
like ``[music]`` mixed in. ``clean_segment_text`` fixes a single fragment,
``normalize_segments`` turns a whole track into one readable string.
"""

import re

# Order matters: &quot; is decoded before &amp; so "&amp;quot;" survives one pass
SEGMENT_ENTITIES = (
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&#39;", "'"),
)

EXTENDED_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&nbsp;": " ",
    "&ndash;": "–",
    "&mdash;": "—",
    "&hellip;": "…",
    "&trade;": "™",
    "&copy;": "©",
    "&reg;": "®",
    "&deg;": "°",
    "&plusmn;": "±",
    "&para;": "¶",
    "&sect;": "§",
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&lsquo;": "'",
    "&rsquo;": "'",
}

BRACKETED = re.compile(r"\[.*?\]")
WHITESPACE = re.compile(r"\s+")
ENTITY = re.compile(r"&[#\w]+;")


def clean_segment_text(text):
    if not text:
        return ""
    for entity, char in SEGMENT_ENTITIES:
        text = text.replace(entity, char)
    text = BRACKETED.sub("", text)
    return WHITESPACE.sub(" ", text).strip()


def normalize_segments(texts):
    """Clean every segment, drop the empty ones and join the rest with a space."""
    cleaned = (clean_segment_text(text) for text in texts)
    return " ".join(text for text in cleaned if text)


def decode_html_entities(text):
    """Decode the extended entity table. Unknown entities are left as they are."""
    return ENTITY.sub(lambda m: EXTENDED_ENTITIES.get(m.group(0), m.group(0)), text)
