"""Plain-text printable dispatch sheet."""

import textwrap

from ..config import DEFAULT_SHEET_WIDTH, Config
from .state import ShippingForm

# Checkbox captions, in print order
FLAG_CAPTIONS: list[tuple[str, str]] = [
    ("cash_on_delivery", "Por Pagar"),
    ("prepaid", "Pagado"),
    ("pickup_at_branch", "Agencia"),
    ("home_delivery", "Domicilio"),
    ("on_account", "CTA CTE"),
]

# Printed rows, in print order
FIELD_CAPTIONS: list[tuple[str, str]] = [
    ("national_id", "RUT"),
    ("full_name", "NOMBRES"),
    ("street_address", "DOMICILIO"),
    ("locality", "COMUNA"),
    ("phone", "TELÉFONO"),
    ("email", "CORREO"),
    ("notes", "INDICACIONES"),
]


def _checkbox_lines(form: ShippingForm, width: int) -> list[str]:
    boxes = [
        f"[{'x' if getattr(form.flags, flag) else ' '}] {caption}"
        for flag, caption in FLAG_CAPTIONS
    ]
    lines: list[str] = []
    current = ""
    for box in boxes:
        candidate = f"{current}  {box}" if current else box
        if current and len(candidate) > width:
            lines.append(current)
            current = box
        else:
            current = candidate
    lines.append(current)
    return lines


def render_dispatch_sheet(form: ShippingForm, config: Config | None = None) -> str:
    """
    Render the form as a fixed-width sheet ready to print.
    
    Args:
        form: Current form state
        config: Title and width settings (defaults when None)
        
    Returns:
        Multi-line text
    """
    title = config.sheet_title if config else "Despacho"
    width = config.sheet_width if config else DEFAULT_SHEET_WIDTH
    
    order_number = form.record.order_number
    header = f"{title} N°{order_number}" if order_number else title
    
    label_width = max(len(caption) for _, caption in FIELD_CAPTIONS) + 2
    value_width = max(width - label_width, 10)
    
    lines = [header, "=" * width]
    lines.extend(_checkbox_lines(form, width))
    lines.append("-" * width)
    
    for name, caption in FIELD_CAPTIONS:
        value = getattr(form.record, name)
        wrapped = textwrap.wrap(value, value_width) or [""]
        lines.append(f"{caption + ':':<{label_width}}{wrapped[0]}".rstrip())
        for extra in wrapped[1:]:
            lines.append(" " * label_width + extra)
    
    return "\n".join(lines)
