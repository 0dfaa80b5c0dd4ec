"""Text formatting utilities."""

import re
from typing import Optional

_URL_PATTERN = re.compile(r"https?://[^\s]+")


def extract_url(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    match = _URL_PATTERN.search(text)
    return match.group(0) if match else None


def format_sender_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return " ".join(part for part in (first_name, last_name) if part)
