"""
Formato - Command Line Entry Point

Reads a pasted order block from a file (or stdin), extracts the
shipping fields and prints them as JSON or as a printable sheet.
"""

import json
import logging
import sys
from pathlib import Path

from .config import Config, load_config
from .form import ShippingForm, render_dispatch_sheet

logger = logging.getLogger(__name__)

USAGE = """Usage: python -m formato.main [extract|print] [file]
  extract - print extracted fields and flags as JSON (default)
  print   - print the dispatch sheet
  file    - text or HTML file with the pasted block (stdin if omitted)"""


def setup_logging(config: Config) -> None:
    """Configure root logging from config."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def read_input(path: str | None) -> str:
    """Read the pasted block from path or stdin."""
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    
    config = load_config()
    setup_logging(config)
    
    mode = args[0] if args else "extract"
    path = args[1] if len(args) > 1 else None
    
    if mode not in ("extract", "print") or len(args) > 2:
        print(USAGE)
        return 2
    
    try:
        payload = read_input(path)
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1
    
    form = ShippingForm()
    form.apply_paste(payload)
    
    if mode == "extract":
        print(json.dumps(form.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(render_dispatch_sheet(form, config))
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
