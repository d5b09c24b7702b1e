"""Data structures produced by the extractors."""

from dataclasses import dataclass, field, fields


@dataclass
class ShippingRecord:
    """Customer/shipping fields recovered from a pasted order block."""
    national_id: str = ""
    full_name: str = ""
    street_address: str = ""
    locality: str = ""      # Comuna / ciudad
    phone: str = ""
    email: str = ""
    notes: str = ""         # Indicaciones / observaciones
    order_number: str = ""
    region: str = ""
    order_type: str = ""
    branch: str = ""        # Sucursal de retiro
    
    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]
    
    def to_dict(self) -> dict[str, str]:
        """Return fields keyed by their camelCase output names."""
        return {_camel(name): getattr(self, name) for name in self.field_names()}


@dataclass
class FlagSet:
    """Shipping flags shown as checkboxes on the dispatch sheet."""
    cash_on_delivery: bool = False   # Por pagar
    prepaid: bool = False            # Pagado
    pickup_at_branch: bool = False   # Agencia / sucursal
    home_delivery: bool = False      # Domicilio
    on_account: bool = False         # Cuenta corriente, only set by hand
    
    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]
    
    def to_dict(self) -> dict[str, bool]:
        """Return flags keyed by their camelCase output names."""
        return {_camel(name): getattr(self, name) for name in self.field_names()}


@dataclass
class ExtractionResult:
    """Output of a single extraction pass."""
    record: ShippingRecord = field(default_factory=ShippingRecord)
    flags: FlagSet = field(default_factory=FlagSet)
    
    def to_dict(self) -> dict[str, dict]:
        return {"record": self.record.to_dict(), "flags": self.flags.to_dict()}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
