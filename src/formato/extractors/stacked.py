"""Parser for stacked "label line / value line" order blocks.

The order-management UI copies customer data as::

    Nombre
    Juan Pérez
    Teléfono
    +56 9 1234 5678

Each known label takes the next meaningful line as its value.
"""

import logging
import re

from .labels import is_known_label, is_skip_line, map_label_to_field
from .models import ShippingRecord
from .normalize import clean
from .phone import clean_phone
from .rut import format_rut

logger = logging.getLogger(__name__)

# Field -> formatter applied when the value is assigned
VALUE_FORMATTERS = {
    "national_id": format_rut,
    "phone": clean_phone,
}

# Fields that may be filled by a repeated label if still empty
REFILLABLE_FIELDS = frozenset({"phone"})


def split_lines(text: str | None) -> list[str]:
    """Split on any line ending, trim, drop blank lines."""
    lines = (clean(line) for line in re.split(r'\r\n|\r|\n', text or ''))
    return [line for line in lines if line]


def format_value(field: str, value: str) -> str:
    """Apply the field-specific formatting to a raw value line."""
    formatter = VALUE_FORMATTERS.get(field)
    if formatter:
        return formatter(value)
    return clean(value)


def _is_value_candidate(line: str) -> bool:
    return bool(line) and not is_skip_line(line) and not is_known_label(line)


def parse_stacked_pairs(text: str | None) -> ShippingRecord:
    """
    Extract fields from label/value line pairs.
    
    The first value seen for a field wins. A repeated label only
    refills a field listed in REFILLABLE_FIELDS, and only while it is
    still empty (the generic "Número" label shows up in more than one
    section of the block).
    
    Args:
        text: Raw pasted text
        
    Returns:
        Partially filled ShippingRecord
    """
    record = ShippingRecord()
    lines = split_lines(text)
    used: set[str] = set()
    
    i = 0
    while i < len(lines):
        line = lines[i]
        if is_skip_line(line) or not is_known_label(line):
            i += 1
            continue
        
        # Next line that is neither noise nor another label
        j = i + 1
        while j < len(lines) and not _is_value_candidate(lines[j]):
            j += 1
        
        if j < len(lines):
            field = map_label_to_field(line)
            value = format_value(field, lines[j])
            
            if field not in used:
                setattr(record, field, value)
                used.add(field)
                logger.debug(f"{line!r} -> {field} = {value!r}")
            elif field in REFILLABLE_FIELDS and not getattr(record, field):
                setattr(record, field, value)
                logger.debug(f"{line!r} -> {field} = {value!r} (refill)")
            else:
                logger.debug(f"{line!r} -> {field} already set, ignoring {value!r}")
        
        i = max(i, j - 1) + 1
    
    return record
