# jobboard/services/text.py
import re

_SOFT_HYPHEN = re.compile("\u00ad")
# "develop-\nment" -> "development"
_HYPHEN_BREAK = re.compile(r"-[ \t]*\r?\n")
_BULLETS = re.compile("[\u2022\u25aa\u25e6\u00b7]")
_NEWLINES = re.compile(r"\n+")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(raw: str) -> str:
    """
    Prepares text pulled out of a PDF/DOCX for skill matching:
    drops soft hyphens, rejoins words split across lines, turns bullets and
    line breaks into spaces and collapses whitespace.

    Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).
    """
    if not raw:
        return ""
    text = _SOFT_HYPHEN.sub("", str(raw))
    text = _HYPHEN_BREAK.sub("", text)
    text = text.replace("\r", "\n")
    text = _BULLETS.sub(" ", text)
    text = _NEWLINES.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()
