"""Full extraction pipeline: stacked pairs, regex fallbacks, flags."""

import logging
from dataclasses import dataclass
from typing import Callable

from .email import extract_email
from .flags import infer_flags
from .models import ExtractionResult, ShippingRecord
from .order import extract_order_number
from .phone import extract_phone
from .rut import extract_rut
from .stacked import parse_stacked_pairs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackRule:
    """Whole-text extractor that fills a field the pair parser missed."""
    field: str
    extract: Callable[[str], str | None]


# Applied in this order, each only to a still-empty field
FALLBACK_RULES: list[FallbackRule] = [
    FallbackRule("order_number", extract_order_number),
    FallbackRule("email", extract_email),
    FallbackRule("national_id", extract_rut),
    FallbackRule("phone", extract_phone),
]


def apply_fallbacks(text: str, record: ShippingRecord) -> ShippingRecord:
    """
    Fill empty fields of record from whole-text patterns.
    
    Args:
        text: Original pasted text (case preserved)
        record: Record produced by the stacked-pair parser, updated in place
        
    Returns:
        The same record
    """
    for rule in FALLBACK_RULES:
        if getattr(record, rule.field):
            continue
        value = rule.extract(text)
        if value:
            setattr(record, rule.field, value)
            logger.debug(f"Fallback filled {rule.field} = {value!r}")
    return record


def extract(text: str | None) -> ExtractionResult:
    """
    Extract shipping data from a pasted order block.
    
    Never raises for string input: anything not found stays empty.
    
    Args:
        text: Raw pasted text
        
    Returns:
        ExtractionResult with the record and freshly inferred flags
    """
    text = text or ""
    record = parse_stacked_pairs(text)
    apply_fallbacks(text, record)
    flags = infer_flags(text)
    
    filled = [name for name in record.field_names() if getattr(record, name)]
    logger.info(f"Extracted {len(filled)} fields: {', '.join(filled) or '-'}")
    
    return ExtractionResult(record=record, flags=flags)
