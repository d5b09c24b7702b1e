"""Phone number cleaning and extraction."""

import re
from typing import Pattern

# Chilean mobile/landline: optional +56 country code, then 9-11 digits.
# Applied to text with separators already removed.
PHONE_PATTERN: Pattern[str] = re.compile(r'(?:\+?56)?\d{9,11}\b', re.ASCII)

# Separators people type inside phone numbers
PHONE_SEPARATORS: Pattern[str] = re.compile(r'[\s()\-]')


def clean_phone(phone: str | None) -> str:
    """
    Keep only digits and a leading plus sign.
    
    Args:
        phone: Raw phone string with any formatting
        
    Returns:
        Compact phone like +56912345678 (empty string if no digits)
    """
    value = (phone or "").strip()
    digits = re.sub(r'\D', '', value, flags=re.ASCII)
    if not digits:
        return ""
    
    if value.startswith('+'):
        return f"+{digits}"
    
    return digits


def extract_phone(text: str) -> str | None:
    """
    Extract phone number from free text.
    
    Supports formats:
    - +56 9 1234 5678
    - (9) 1234-5678
    - 56912345678
    - 912345678
    
    Args:
        text: Text containing phone number
        
    Returns:
        Phone without separators or None
    """
    if not text:
        return None
    
    compact = PHONE_SEPARATORS.sub('', text)
    match = PHONE_PATTERN.search(compact)
    if match:
        return match.group(0)
    
    return None
