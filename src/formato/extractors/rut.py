"""RUT (Chilean national ID) formatting and extraction."""

import re
from typing import Pattern

from .normalize import clean

# 12.345.678-5 / 12345678-K / 12 345 678-9
RUT_PATTERN: Pattern[str] = re.compile(r'\b(\d{1,3}(?:[.\s]?\d{3}){1,2}-[0-9kK])\b', re.ASCII)


def format_rut(rut: str | None) -> str:
    """
    Format RUT as XX.XXX.XXX-Y.
    
    The last character is taken as the check digit as-is, it is not
    verified.
    
    Args:
        rut: Raw RUT string with any formatting
        
    Returns:
        Formatted RUT, or the trimmed input if it is too short to format
    """
    raw = re.sub(r'[^0-9kK]', '', rut or '').upper()
    if len(raw) < 2:
        return clean(rut)
    
    body, check = raw[:-1], raw[-1]
    
    groups: list[str] = []
    while body:
        groups.insert(0, body[-3:])
        body = body[:-3]
    
    return f"{'.'.join(groups)}-{check}"


def extract_rut(text: str) -> str | None:
    """
    Find first RUT-looking identifier in free text.
    
    Args:
        text: Text containing a RUT
        
    Returns:
        Formatted RUT or None
    """
    if not text:
        return None
    
    match = RUT_PATTERN.search(text)
    if match:
        return format_rut(match.group(1))
    
    return None
