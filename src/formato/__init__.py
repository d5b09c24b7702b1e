"""Formato - shipping data extraction from pasted order blocks."""

from .extractors import extract, ExtractionResult, FlagSet, ShippingRecord

__all__ = ["extract", "ExtractionResult", "FlagSet", "ShippingRecord"]
