from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any, Callable, Optional


def setup_logger(log_dir: str | Path, name: str = "tm-suggest") -> logging.Logger:
    """Create a simple file+console logger."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Avoid adding multiple handlers on repeated runs in one process
    if logger.handlers:
        return logger

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    fh = logging.FileHandler(log_dir / "app.log", encoding="utf-8")
    fh.setLevel(logging.INFO)
    fh.setFormatter(fmt)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger


def sha1_text(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def field_getter(field: Optional[str]) -> Callable[[Any], str]:
    """
    Accessor for the English string of an item.

    Plain strings are returned as is; mappings are read at ``field``.
    Missing values become "".
    """

    def _get(item: Any) -> str:
        if isinstance(item, str):
            return item
        if field and isinstance(item, dict):
            return item.get(field) or ""
        return ""

    return _get
