"""E-mail address extraction."""

import re
from typing import Pattern

EMAIL_PATTERN: Pattern[str] = re.compile(r'[A-Z0-9._%+\-]+@[A-Z0-9.\-]+\.[A-Z]{2,}', re.IGNORECASE | re.ASCII)


def extract_email(text: str) -> str | None:
    """Return the first e-mail address found in text, or None."""
    if not text:
        return None
    
    match = EMAIL_PATTERN.search(text)
    if match:
        return match.group(0)
    
    return None
