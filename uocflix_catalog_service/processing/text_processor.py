"""Text normalization utilities for user display names."""
from typing import Optional

from uocflix_catalog_service.config import get_name_blank_chars


def trim_blanks(text: str, blank_chars: Optional[str] = None) -> str:
    """
    Remove leading and trailing blank characters.

    Args:
        text: Text to trim
        blank_chars: Characters treated as blanks (default from config)

    Returns:
        Trimmed text. Interior blanks are kept as they are.
    """
    if blank_chars is None:
        blank_chars = get_name_blank_chars()
    return text.strip(blank_chars)


def capitalize_words(text: str, blank_chars: Optional[str] = None) -> str:
    """
    Upper-case the first letter of every blank-separated word and
    lower-case the rest of it.

    Args:
        text: Text to re-case
        blank_chars: Characters treated as word separators (default from config)

    Returns:
        Re-cased text with the same length and separators
    """
    if blank_chars is None:
        blank_chars = get_name_blank_chars()

    chars = []
    start_of_word = True
    for char in text:
        if char in blank_chars:
            start_of_word = True
            chars.append(char)
        elif start_of_word:
            chars.append(char.upper())
            start_of_word = False
        else:
            chars.append(char.lower())

    return "".join(chars)


def trim_capitalize(text: str | None, blank_chars: Optional[str] = None) -> str:
    """
    Normalize a display name: trim edge blanks, then capitalize each word.

    Args:
        text: Raw name; must contain at least one non-blank character
        blank_chars: Characters treated as blanks (default from config)

    Returns:
        Normalized name

    Raises:
        ValueError: If text is missing or made only of blanks
    """
    if text is None:
        raise ValueError("name is required")

    if blank_chars is None:
        blank_chars = get_name_blank_chars()

    trimmed = trim_blanks(str(text), blank_chars)
    if not trimmed:
        raise ValueError("name must contain at least one non-blank character")

    return capitalize_words(trimmed, blank_chars)
