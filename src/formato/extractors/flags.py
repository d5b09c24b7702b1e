"""Shipping flag inference from keywords in the pasted block."""

import re
from dataclasses import dataclass
from typing import Callable, Pattern

from .models import FlagSet
from .normalize import normalize_text

POR_PAGAR: Pattern[str] = re.compile(r'\bpor\s*pagar\b', re.ASCII)
PAGADO: Pattern[str] = re.compile(r'\bpagado\b', re.ASCII)
DESPACHO_A_DOMICILIO: Pattern[str] = re.compile(r'\bdespacho\s*a\s*domicilio\b', re.ASCII)
DOMICILIO: Pattern[str] = re.compile(r'\bdomicilio\b', re.ASCII)
SUCURSAL: Pattern[str] = re.compile(r'\bsucursal\b', re.ASCII)

# Couriers that deliver to a branch office
COURIERS: tuple[str, ...] = ("starken", "chilexpress", "correos")
COURIER_PATTERNS: list[Pattern[str]] = [re.compile(rf'\b{name}\b', re.ASCII) for name in COURIERS]


@dataclass(frozen=True)
class FlagRule:
    """Named predicate over the normalized text."""
    flag: str
    test: Callable[[str], bool]


FLAG_RULES: list[FlagRule] = [
    FlagRule("cash_on_delivery", lambda n: bool(POR_PAGAR.search(n))),
    FlagRule(
        "prepaid",
        lambda n: bool(PAGADO.search(n)) and not POR_PAGAR.search(n),
    ),
    FlagRule(
        "home_delivery",
        lambda n: bool(DESPACHO_A_DOMICILIO.search(n) or DOMICILIO.search(n)),
    ),
    FlagRule(
        "pickup_at_branch",
        lambda n: bool(SUCURSAL.search(n)) or any(p.search(n) for p in COURIER_PATTERNS),
    ),
    # on_account (cuenta corriente) is never inferred
]


def infer_flags(text: str | None) -> FlagSet:
    """
    Derive a fresh FlagSet from the whole pasted text.
    
    Args:
        text: Raw pasted text
        
    Returns:
        FlagSet with every inferable flag recomputed
    """
    normalized = normalize_text(text)
    flags = FlagSet()
    for rule in FLAG_RULES:
        setattr(flags, rule.flag, rule.test(normalized))
    return flags
