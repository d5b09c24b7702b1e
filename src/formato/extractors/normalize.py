"""Text normalization helpers shared by every extractor."""

import unicodedata


def normalize_text(value: str | None) -> str:
    """
    Normalize text for accent- and case-insensitive comparison.
    
    "  Teléfono " -> "telefono"
    
    Args:
        value: Any string (None is treated as empty)
        
    Returns:
        Lowercase, trimmed text without diacritics
    """
    if not value:
        return ""
    
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower().strip()


def clean(value: str | None) -> str:
    """Trim surrounding whitespace, None-safe."""
    return (value or "").strip()
