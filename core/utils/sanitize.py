"""
Sanitize text for use in meta tags.
"""

import re
from typing import Optional

from core.domain.constants import MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH


def _strip_html(text: str) -> str:
    text = re.sub(r"<[^>]*>", "", text)   # tags
    text = re.sub(r"&[^;]+;", "", text)   # entities (basic)
    text = re.sub(r"[<>]", "", text)
    return text.strip()


def _normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def sanitize_for_meta(text: Optional[str], max_length: Optional[int] = None) -> str:
    """Strip markup, collapse whitespace and optionally cap length with '...'"""
    if not text:
        return ""

    sanitized = _normalize_whitespace(_strip_html(text))

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length - 3] + "..."

    return sanitized


def sanitize_title(text: Optional[str]) -> str:
    return sanitize_for_meta(text, MAX_TITLE_LENGTH)


def sanitize_description(text: Optional[str]) -> str:
    return sanitize_for_meta(text, MAX_DESCRIPTION_LENGTH)
