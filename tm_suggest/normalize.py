from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from .patterns import BOLD_RE, LINE_BREAK, MATH_WIDGET_GAP_RE, TRIM_RE, mask_special_substrings


def identity(value: Any) -> Any:
    return value


def normalize_string(text: str) -> str:
    """
    Build the grouping key for an English string:
    - math, graphies and widgets -> __MATH__, __GRAPHIE__, __WIDGET__
    - tabs/spaces between __MATH__ and __WIDGET__ -> a single space
    - bold markup dropped (content kept)
    - each paragraph trimmed
    Strings differing only in embedded content share the same key.
    """
    text = mask_special_substrings(text)
    text = MATH_WIDGET_GAP_RE.sub("__MATH__ __WIDGET__", text)
    text = BOLD_RE.sub(lambda m: m.group(0)[2:-2], text)
    return LINE_BREAK.join(TRIM_RE.sub("", line) for line in text.split(LINE_BREAK))


def group(
    items: Iterable[Any],
    get_english_str: Callable[[Any], str] = identity,
) -> Dict[str, List[Any]]:
    """
    Bucket items by the normalized form of their English string.

    Buckets are created in first-seen order and keep the input order of their
    items, e.g. "simplify $2/4$" and "simplify $3/12$" both land under
    "simplify __MATH__".
    """
    groups: Dict[str, List[Any]] = {}
    for item in items:
        key = normalize_string(get_english_str(item))
        groups.setdefault(key, []).append(item)
    return groups
