"""HTML clipboard payload to stacked plain text."""

import re

from bs4 import BeautifulSoup

# Tags the order screen puts on the clipboard. Other <...> runs are
# plain text, e.g. "<dejar en conserjería>" in delivery notes.
HTML_TAGS: tuple[str, ...] = (
    "html", "head", "body", "meta", "style", "script",
    "div", "span", "p", "br", "section", "label", "strong",
    "table", "thead", "tbody", "tr", "td", "th",
    "ul", "ol", "li", "h1", "h2", "h3", "h4", "h5", "h6",
)

HTML_TAG = re.compile(
    r'<\s*/?\s*(?:' + '|'.join(HTML_TAGS) + r')(?:\s+[a-zA-Z\-]+(?:\s*=\s*(?:"[^"]*"|\'[^\']*\'|[^\s>]+))?)*\s*/?\s*>',
    re.IGNORECASE | re.ASCII,
)


def looks_like_html(content: str) -> bool:
    """Check if content contains known HTML tags."""
    return bool(content) and bool(HTML_TAG.search(content))


def parse_html(html_content: str | None) -> str:
    """
    Convert HTML content to plain text, one text node per line.
    
    Table cells and <div>s copied from the order screen become
    separate lines, so "label" and "value" cells stay stacked.
    
    Args:
        html_content: Raw HTML string
        
    Returns:
        Clean plain text
    """
    if not html_content:
        return ""
    
    soup = BeautifulSoup(html_content, "html.parser")
    
    # Remove script and style elements
    for element in soup(["script", "style", "head", "meta", "link"]):
        element.decompose()
    
    lines = (
        re.sub(r'[ \t\xa0]+', ' ', line).strip()
        for line in soup.get_text(separator="\n").splitlines()
    )
    return "\n".join(line for line in lines if line)


def parse_clipboard(payload: str | None) -> str:
    """
    Turn a clipboard payload into text for the extractors.
    
    Args:
        payload: Plain text or an HTML fragment
        
    Returns:
        Plain text
    """
    if not payload:
        return ""
    
    if looks_like_html(payload):
        return parse_html(payload)
    
    return payload
