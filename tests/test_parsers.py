"""Tests for clipboard parsers."""

import pytest
from formato.parsers.html_parser import parse_html, parse_clipboard, looks_like_html


class TestHtmlParser:
    """Test cases for HTML parser."""
    
    def test_cells_become_lines(self):
        """Test label and value cells end up on separate lines."""
        html = """
        <table>
            <tr><td>Nombre</td><td>Juan Pérez</td></tr>
            <tr><td>Teléfono</td><td>+56 9 1234 5678</td></tr>
        </table>
        """
        lines = parse_html(html).split("\n")
        assert lines == ["Nombre", "Juan Pérez", "Teléfono", "+56 9 1234 5678"]
    
    def test_strips_scripts_and_styles(self):
        """Test that script and style tags are removed."""
        html = """
        <html>
        <head><style>.red { color: red; }</style></head>
        <body>
            <script>alert('bad')</script>
            <div>Comuna</div><div>Ñuñoa</div>
        </body>
        </html>
        """
        result = parse_html(html)
        assert "alert" not in result
        assert "color" not in result
        assert result == "Comuna\nÑuñoa"
    
    def test_collapses_inner_spaces(self):
        """Test non-breaking and repeated spaces."""
        assert parse_html("<p>Av.&nbsp;&nbsp;Irarrázaval   1234</p>") == "Av. Irarrázaval 1234"
    
    def test_empty_input(self):
        """Test handling of empty input."""
        assert parse_html("") == ""
        assert parse_html(None) == ""


class TestClipboard:
    """Test cases for clipboard payload detection."""
    
    def test_detects_html(self):
        """Test HTML fragment detection."""
        assert looks_like_html("<div>Nombre</div>")
        assert looks_like_html('<span class="x">a</span>')
    
    def test_plain_text_with_angle_bracket(self):
        """Test comparison sign is not HTML."""
        assert not looks_like_html("monto < 5000")
        assert not looks_like_html("")
    
    def test_angle_brackets_in_plain_text(self):
        """Test bracketed notes are not taken for tags."""
        text = "Nombre\nAna Soto\nIndicaciones\n<dejar en conserjeria>\n"
        assert not looks_like_html(text)
        assert parse_clipboard(text) == text

    def test_detects_closing_and_void_tags(self):
        """Test closing tags and <br/>."""
        assert looks_like_html("Nombre<br/>Ana")
        assert looks_like_html("Ana</TD>")

    def test_plain_text_passthrough(self):
        """Test plain text is returned unchanged."""
        text = "Nombre\nJuan Pérez\n"
        assert parse_clipboard(text) == text
    
    def test_html_payload(self):
        """Test HTML payload is flattened."""
        assert parse_clipboard("<div>Nombre</div><div>Ana</div>") == "Nombre\nAna"
    
    def test_empty_payload(self):
        """Test None payload."""
        assert parse_clipboard(None) == ""
