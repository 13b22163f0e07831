"""Cleanup of model text output before it is shown in the UI."""

import re


_CODE_FENCE = re.compile(r"^```[\w-]*\s*$", re.MULTILINE)
_HEADING = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_BOLD = re.compile(r"(\*\*|__)(.+?)\1", re.DOTALL)
_ITALIC = re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?![\w*])")
_BULLET = re.compile(r"^(\s*)[*+]\s+", re.MULTILINE)
_INLINE_CODE = re.compile(r"`([^`]*)`")
_BLANK_LINES = re.compile(r"\n{3,}")


def clean_ai_text(text: str) -> str:
    """Strip markdown punctuation from model output.

    Headings lose their hashes, bold/italic markers and backticks are
    removed, ``*``/``+`` bullets become ``-`` and runs of blank lines are
    collapsed.
    """
    if not text:
        return ""
    text = _CODE_FENCE.sub("", text)
    text = _HEADING.sub("", text)
    text = _BOLD.sub(r"\2", text)
    text = _BULLET.sub(r"\1- ", text)
    text = _ITALIC.sub(r"\1", text)
    text = _INLINE_CODE.sub(r"\1", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()
