from .cleaning import WHITESPACE, decode_html_entities

WORDS_PER_PARAGRAPH = 60
NO_CONTENT_PARAGRAPH = "No valid content could be formatted"


def _finish_paragraph(words):
    paragraph = " ".join(words).strip()
    if not paragraph:
        return None
    decoded = decode_html_entities(paragraph)
    return decoded[:1].upper() + decoded[1:]


def split_paragraphs(text, words_per_paragraph=WORDS_PER_PARAGRAPH):
    """
    Break a transcript into fixed-size word windows.

    The trailing window is always emitted, however short it is.
    """
    if not text:
        return []

    words = WHITESPACE.sub(" ", text.replace("&amp;", "&")).strip().split()
    paragraphs = []
    current = []
    for word in words:
        current.append(word)
        if len(current) >= words_per_paragraph:
            paragraph = _finish_paragraph(current)
            if paragraph:
                paragraphs.append(paragraph)
            current = []

    if current:
        paragraph = _finish_paragraph(current)
        if paragraph:
            paragraphs.append(paragraph)

    return paragraphs


def format_transcript(text):
    """Paragraphs for display, or a single placeholder when nothing survives."""
    return split_paragraphs(text) or [NO_CONTENT_PARAGRAPH]
