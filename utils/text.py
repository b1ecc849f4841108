"""
Text Processing Utilities
Cleanup of free-form model output before field extraction
"""

import re
import emoji

MARKDOWN_CHARS_PATTERN = re.compile(r'[*#_]')


def shorten(text, max_length=50):
    """
    Shorten text for logging

    Args:
        text: Text to shorten
        max_length: Maximum length

    Returns:
        Shortened text with ellipsis if needed
    """
    if not isinstance(text, str):
        text = str(text)
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def strip_markdown(text):
    """
    Remove emphasis and heading characters (*, #, _)

    Idempotent: strip_markdown(strip_markdown(t)) == strip_markdown(t)
    """
    if not text:
        return ""
    return MARKDOWN_CHARS_PATTERN.sub('', text)


def clean_text(text):
    """
    Remove emoji, newlines, and excessive whitespace

    Args:
        text: Text to clean

    Returns:
        Cleaned text
    """
    if not text:
        return ""
    text = emoji.replace_emoji(text, replace=" ")
    text = re.sub(r"\s+", " ", text).strip()
    return text
