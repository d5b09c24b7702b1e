"""Configuration loader from .env file."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_SHEET_WIDTH = 48


@dataclass
class Config:
    """Application configuration."""
    
    # Logging
    log_level: str
    log_file: str
    
    # Printable dispatch sheet
    sheet_title: str
    sheet_width: int


def _int_env(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, ""))
    except ValueError:
        return default
    return value if value > 0 else default


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from .env file."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()
    
    return Config(
        log_level=os.getenv("FORMATO_LOG_LEVEL", "WARNING").upper(),
        log_file=os.getenv("FORMATO_LOG_FILE", ""),
        
        sheet_title=os.getenv("FORMATO_SHEET_TITLE", "Despacho"),
        sheet_width=_int_env("FORMATO_SHEET_WIDTH", DEFAULT_SHEET_WIDTH),
    )
