"""Parsers package - turn clipboard payloads into plain text."""

from .html_parser import parse_html, parse_clipboard, looks_like_html

__all__ = ["parse_html", "parse_clipboard", "looks_like_html"]
