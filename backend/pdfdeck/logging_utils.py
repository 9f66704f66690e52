"""Logging helpers for consistent console output."""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> None:
    """Configure root logging for the service."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    handlers = [logging.StreamHandler()]
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            handlers.append(logging.FileHandler(log_path, mode="a", encoding="utf-8"))
        except OSError as exc:
            print(
                f"[WARN] Failed to open log file at {log_path} ({exc}). "
                "Continuing without file logging.",
                file=sys.stderr,
            )
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
