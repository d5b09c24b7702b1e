"""Editable dispatch form fed by paste events."""

import logging
from dataclasses import dataclass, field

from ..extractors import ExtractionResult, FlagSet, ShippingRecord, extract
from ..parsers import parse_clipboard

logger = logging.getLogger(__name__)


@dataclass
class ShippingForm:
    """
    Live form state: last pasted payload, editable fields and flags.
    
    Paste events go through the extractor; user edits overwrite single
    fields or flags directly.
    """
    raw_paste: str = ""
    record: ShippingRecord = field(default_factory=ShippingRecord)
    flags: FlagSet = field(default_factory=FlagSet)
    
    def apply_paste(self, payload: str | None) -> ExtractionResult:
        """
        Run the extractor on a pasted payload and merge the result.
        
        Fields the extractor left empty keep their current value.
        Flags are replaced as a whole.
        
        Args:
            payload: Clipboard content (plain text or HTML)
            
        Returns:
            The raw extraction result
        """
        self.raw_paste = payload or ""
        result = extract(parse_clipboard(self.raw_paste))
        
        for name in ShippingRecord.field_names():
            value = getattr(result.record, name)
            if value:
                setattr(self.record, name, value)
        
        self.flags = result.flags
        return result
    
    def update_field(self, name: str, value: str) -> None:
        """Overwrite one record field with a user edit."""
        if name not in ShippingRecord.field_names():
            raise KeyError(f"Unknown field: {name}")
        setattr(self.record, name, value)
    
    def set_flag(self, name: str, checked: bool) -> None:
        """Toggle one flag from its checkbox."""
        if name not in FlagSet.field_names():
            raise KeyError(f"Unknown flag: {name}")
        setattr(self.flags, name, bool(checked))
    
    def to_dict(self) -> dict:
        return {"record": self.record.to_dict(), "flags": self.flags.to_dict()}
