from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .errors import MappingMismatchError, NoTranslationPairError
from .normalize import group, identity, normalize_string
from .patterns import GRAPHIE_PLACEHOLDER, MATH_PLACEHOLDER, WIDGET_PLACEHOLDER
from .template import create_template, populate_template, translate_math


SuggestionPair = Tuple[Any, Optional[str]]

_AUTO_TRANSLATABLE = {MATH_PLACEHOLDER, GRAPHIE_PLACEHOLDER, WIDGET_PLACEHOLDER}


class AuditTrail:
    """Lightweight collector for batch decisions (template vs. fallback)."""

    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []

    def record(self, kind: str, payload: Dict[str, Any]) -> None:
        entry = {"kind": kind, **payload}
        self.records.append(entry)

    def as_list(self) -> List[Dict[str, Any]]:
        return list(self.records)


def auto_translate_placeholders(
    items: Sequence[Any],
    lang: str,
    get_english_str: Callable[[Any], str] = identity,
) -> List[SuggestionPair]:
    """
    Translate items whose English string is a single math, graphie or widget.

    Graphies and widgets are copied as is, math goes through translate_math.
    Math containing \\text is skipped since it may hold natural language.
    Every other item gets None.
    """
    pairs: List[SuggestionPair] = []
    for item in items:
        english_str = get_english_str(item)
        normal_str = normalize_string(english_str)

        if normal_str not in _AUTO_TRANSLATABLE:
            pairs.append((item, None))
            continue

        translated_str: Optional[str] = english_str
        if normal_str == MATH_PLACEHOLDER:
            if "\\text" in english_str:
                translated_str = None
            else:
                translated_str = translate_math(english_str, lang)
        pairs.append((item, translated_str))
    return pairs


def find_translation_pair(translation_pairs: Sequence[Sequence[Optional[str]]]) -> Tuple[str, str]:
    """Return the first pair whose English and translated strings are both non-empty."""
    for pair in translation_pairs:
        if len(pair) >= 2 and pair[0] and pair[1]:
            return pair[0], pair[1]
    raise NoTranslationPairError()


def suggest(
    translation_pairs: Sequence[Sequence[Optional[str]]],
    items: Sequence[Any],
    lang: str,
    get_english_str: Callable[[Any], str] = identity,
    logger: Optional[logging.Logger] = None,
    audit: Optional[AuditTrail] = None,
) -> List[SuggestionPair]:
    """
    Suggest translations for ``items`` from a reference English/translated pair.

    When a usable pair exists and every item normalizes to the same string, a
    template is built from the pair and populated with each item's math,
    graphies and widgets. Otherwise items only get the placeholder
    auto-translation. A reference pair whose special substrings don't line up
    raises MappingMismatchError for the whole batch.
    """
    pair: Optional[Tuple[str, str]] = None
    reason = ""
    try:
        pair = find_translation_pair(translation_pairs)
    except NoTranslationPairError as exc:
        reason = str(exc)

    groups = group(items, get_english_str)

    if pair is None or len(groups) > 1:
        if pair is not None:
            reason = f"{len(groups)} distinct groups"
        if logger:
            logger.info("Falling back to placeholder auto-translation (%s).", reason)
        if audit:
            audit.record("fallback", {"reason": reason, "items": len(items), "groups": len(groups)})
        return auto_translate_placeholders(items, lang, get_english_str)

    try:
        template = create_template(pair[0], pair[1], lang)
    except MappingMismatchError as exc:
        if logger:
            logger.warning("Reference pair rejected: %s (%r)", exc, exc.occurrence)
        if audit:
            audit.record("template_error", {"error": str(exc), "occurrence": exc.occurrence})
        raise

    if logger:
        logger.info("Built template with %s line(s) for %s item(s).", len(template.lines), len(items))
    if audit:
        audit.record(
            "template",
            {
                "lines": len(template.lines),
                "math_mapping": template.math_mapping,
                "graphie_mapping": template.graphie_mapping,
                "widget_mapping": template.widget_mapping,
                "items": len(items),
            },
        )

    return [(item, populate_template(template, get_english_str(item), lang)) for item in items]
