"""Label table and skip list for the pasted order block.

All strings are stored normalized (see normalize_text), so lookups are
accent- and case-insensitive.
"""

from .normalize import normalize_text

# Record field -> label lines that introduce its value.
# Order matters: the first field listing a label wins.
LABELS: dict[str, tuple[str, ...]] = {
    "full_name": ("nombre", "nombres", "cliente"),
    "national_id": ("documento de identidad", "rut", "r.u.t"),
    "phone": ("telefono", "numero"),
    "email": ("correo", "email", "e-mail"),
    "locality": ("comuna", "ciudad"),
    "street_address": ("direccion",),
    "notes": ("indicaciones", "observaciones"),
    "region": ("region",),
    "order_type": ("tipo de pedido",),
    "branch": ("sucursal",),
}

# UI chrome, section headers and empty-value placeholders
SKIP_LINES: frozenset[str] = frozenset({
    "person",
    "local_shipping",
    "envio",
    "datos del cliente",
    "rango de despacho",
    "quien recibe",
    "-",
})

_FIELD_BY_LABEL: dict[str, str] = {}
for _field, _labels in LABELS.items():
    for _label in _labels:
        _FIELD_BY_LABEL.setdefault(_label, _field)


def is_skip_line(line: str) -> bool:
    """Check if line is UI noise that is never a label or value."""
    return normalize_text(line) in SKIP_LINES


def map_label_to_field(line: str) -> str | None:
    """
    Resolve a label line to its record field.
    
    Args:
        line: Raw line of pasted text
        
    Returns:
        Field name or None if the line is not a known label
    """
    return _FIELD_BY_LABEL.get(normalize_text(line))


def is_known_label(line: str) -> bool:
    """Check if line is one of the known labels."""
    return map_label_to_field(line) is not None
