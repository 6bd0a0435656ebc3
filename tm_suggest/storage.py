from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


def _ensure_exists(path: Path) -> Path:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def read_json(path: str | Path) -> Any:
    p = _ensure_exists(Path(path))
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str | Path, obj: Any, indent: int = 2) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=indent)


def write_rows_csv(path: str | Path, rows: List[Dict[str, Any]]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(rows)
    df.to_csv(p, index=False, encoding="utf-8")


def read_rows_csv(path: str | Path) -> List[Dict[str, Any]]:
    """Read a CSV into row dicts; empty cells become None, every cell a string."""
    p = _ensure_exists(Path(path))
    df = pd.read_csv(p, dtype=str, keep_default_na=False, na_values=[""])
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def read_items(path: str | Path) -> List[Any]:
    """Items are either a JSON list (strings or objects) or CSV rows."""
    if Path(path).suffix.lower() == ".csv":
        return read_rows_csv(path)
    items = read_json(path)
    if not isinstance(items, list):
        raise ValueError(f"Expected a JSON list of items in {path}")
    return items


def read_reference_pairs(
    path: str | Path,
    english_col: str = "english",
    translated_col: str = "translated",
) -> List[Tuple[Optional[str], Optional[str]]]:
    """
    Load [englishStr, translatedStr] pairs.

    JSON files hold a list of 2-element lists (or objects with the two column
    keys); CSV files hold one pair per row.
    """
    if Path(path).suffix.lower() == ".csv":
        rows: List[Any] = read_rows_csv(path)
    else:
        rows = read_json(path)
        if not isinstance(rows, list):
            raise ValueError(f"Expected a JSON list of pairs in {path}")

    pairs: List[Tuple[Optional[str], Optional[str]]] = []
    for row in rows:
        if isinstance(row, dict):
            pairs.append((row.get(english_col), row.get(translated_col)))
        elif isinstance(row, (list, tuple)) and len(row) == 2:
            pairs.append((row[0], row[1]))
        else:
            raise ValueError(f"Malformed reference pair: {row!r}")
    return pairs
