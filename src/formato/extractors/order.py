"""Order (pre-sale) number extraction."""

import re
from typing import Pattern

# PREVENTA #27967 / Pre-venta N° 27967 / preventa: 27967 / PRE VENTA No. 27967
ORDER_PATTERNS: list[Pattern[str]] = [
    re.compile(
        r'pre[\s\-]*venta\s*'
        r'(?:(?:n\s*[°º]|no\.?|n[uúÚ]mero|num\.?|number|#|:)\s*)?'
        r'[#:]?\s*([0-9]{3,})',
        re.IGNORECASE,
    ),
]


def extract_order_number(text: str) -> str | None:
    """
    Extract pre-sale order number from text.
    
    Supports formats:
    - PREVENTA #27967
    - Pre-venta N° 27967
    - preventa: 27967
    - Pre Venta numero 27967
    
    Args:
        text: Text containing order number
        
    Returns:
        Order number as string or None
    """
    if not text:
        return None
    
    for pattern in ORDER_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    
    return None
