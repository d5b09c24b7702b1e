"""Form package - editable and printable dispatch form."""

from .state import ShippingForm
from .printable import render_dispatch_sheet

__all__ = ["ShippingForm", "render_dispatch_sheet"]
