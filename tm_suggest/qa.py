from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from .errors import MappingMismatchError
from .patterns import MATCHERS, SpecialKind
from .template import create_template, untranslate_math
from .utils import sha1_text


def special_substrings_check(english_str: str, translated_str: str, lang: str = "") -> List[str]:
    """
    Simple consistency check: math, graphies and widgets should survive
    translation unchanged (Portuguese sen counts as sin).
    Returns list of warnings.
    """
    warnings: List[str] = []
    for matcher in MATCHERS:
        src = Counter(matcher.match(english_str))
        found = matcher.match(translated_str)
        if matcher.kind is SpecialKind.MATH:
            found = [untranslate_math(m, lang) for m in found]
        tr = Counter(found)
        if src != tr:
            warnings.append(f"{matcher.kind.value.capitalize()} changed: src={dict(src)} vs trans={dict(tr)}")
    return warnings


def check_reference_pairs(
    translation_pairs: Sequence[Sequence[Optional[str]]],
    lang: str,
) -> List[Dict[str, Any]]:
    """
    Report, for every usable reference pair, whether a template can be built:
      - ok: template built
      - error: mismatch message when it can't
      - warnings: special substrings dropped or added by the translator
    Pairs with an empty side are skipped.
    """
    rows: List[Dict[str, Any]] = []
    for index, pair in enumerate(translation_pairs):
        if len(pair) < 2 or not pair[0] or not pair[1]:
            continue
        english_str, translated_str = pair[0], pair[1]
        row: Dict[str, Any] = {
            "index": index,
            "id": sha1_text(english_str),
            "ok": True,
            "error": None,
            "warnings": special_substrings_check(english_str, translated_str, lang),
        }
        try:
            create_template(english_str, translated_str, lang)
        except MappingMismatchError as exc:
            row["ok"] = False
            row["error"] = str(exc)
        rows.append(row)
    return rows
