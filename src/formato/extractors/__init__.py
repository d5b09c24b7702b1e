"""Extractors package - structured shipping data from pasted text."""

from .normalize import normalize_text, clean
from .rut import format_rut, extract_rut
from .phone import clean_phone, extract_phone
from .order import extract_order_number
from .email import extract_email
from .labels import LABELS, SKIP_LINES, is_known_label, map_label_to_field
from .models import ShippingRecord, FlagSet, ExtractionResult
from .stacked import parse_stacked_pairs
from .flags import infer_flags
from .shipping import extract, apply_fallbacks

__all__ = [
    "normalize_text",
    "clean",
    "format_rut",
    "extract_rut",
    "clean_phone",
    "extract_phone",
    "extract_order_number",
    "extract_email",
    "LABELS",
    "SKIP_LINES",
    "is_known_label",
    "map_label_to_field",
    "ShippingRecord",
    "FlagSet",
    "ExtractionResult",
    "parse_stacked_pairs",
    "infer_flags",
    "extract",
    "apply_fallbacks",
]
