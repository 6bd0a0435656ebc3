from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import MappingMismatchError
from .patterns import (
    GRAPHIE,
    LINE_BREAK,
    MATCHERS,
    MATCHERS_BY_PLACEHOLDER,
    MATH,
    PLACEHOLDER_RE,
    WIDGET,
    SpecialKind,
    SpecialMatcher,
)


# Per-language notation rewrites applied to math, as (english, translated).
_MATH_TRANSLATIONS: Dict[str, List[Tuple[str, str]]] = {
    "pt": [("\\sin", "\\operatorname{sen}")],
}


def translate_math(math: str, lang: str) -> str:
    """Apply language specific notation, e.g. Portuguese uses sen instead of sin."""
    for english, translated in _MATH_TRANSLATIONS.get(lang, []):
        math = math.replace(english, translated)
    return math


def untranslate_math(math: str, lang: str) -> str:
    """Inverse of translate_math, used to compare translated math to English math."""
    for english, translated in _MATH_TRANSLATIONS.get(lang, []):
        math = math.replace(translated, english)
    return math


@dataclass
class Template:
    """Translated paragraphs with placeholders plus per-kind index mappings."""

    lines: List[str]
    math_mapping: List[int] = field(default_factory=list)
    graphie_mapping: List[int] = field(default_factory=list)
    widget_mapping: List[int] = field(default_factory=list)

    def mapping_for(self, kind: SpecialKind) -> List[int]:
        if kind is SpecialKind.MATH:
            return self.math_mapping
        if kind is SpecialKind.GRAPHIE:
            return self.graphie_mapping
        return self.widget_mapping


def get_mapping(english_str: str, translated_str: str, lang: str, matcher: SpecialMatcher) -> List[int]:
    """
    Map each occurrence in the translation to the index of the equal occurrence
    in the English string.

    For "simplify $2/4$\\n\\nhint: the denominator is $2$" translated as
    "hint: da denom $2$ iz $2$\\n\\nsimplifz $2/4$" the math mapping is [1, 1, 0].
    Lookups always return the first equal English occurrence, so two translated
    occurrences may point at the same English one.
    """
    inputs = matcher.match(english_str)
    outputs = matcher.match(translated_str)

    mapping: List[int] = []
    for output in outputs:
        if matcher.kind is SpecialKind.MATH:
            output = untranslate_math(output, lang)
        try:
            mapping.append(inputs.index(output))
        except ValueError:
            raise MappingMismatchError(matcher.kind, output) from None
    return mapping


def create_template(english_str: str, translated_str: str, lang: str) -> Template:
    """
    Build a template from a reference English/translated pair.

    Raises MappingMismatchError when the translation contains math, a graphie
    or a widget that does not appear in the English string.
    """
    lines = []
    for line in translated_str.split(LINE_BREAK):
        for matcher in MATCHERS:
            line = matcher.mask(line)
        lines.append(line)

    return Template(
        lines=lines,
        math_mapping=get_mapping(english_str, translated_str, lang, MATH),
        graphie_mapping=get_mapping(english_str, translated_str, lang, GRAPHIE),
        widget_mapping=get_mapping(english_str, translated_str, lang, WIDGET),
    )


def populate_template(template: Template, english_str: str, lang: str) -> str:
    """
    Fill a template with the math, graphies and widgets of ``english_str``.

    ``english_str`` must normalize to the same string as the template's source;
    otherwise the mappings can point past its occurrences and IndexError is raised.
    """
    occurrences = {matcher.kind: matcher.match(english_str) for matcher in MATCHERS}
    occurrences[SpecialKind.MATH] = [translate_math(m, lang) for m in occurrences[SpecialKind.MATH]]

    # Counters run across the whole document, not per paragraph.
    counters = {matcher.kind: 0 for matcher in MATCHERS}

    def _repl(match: re.Match[str]) -> str:
        kind = MATCHERS_BY_PLACEHOLDER[match.group(0)].kind
        index = template.mapping_for(kind)[counters[kind]]
        counters[kind] += 1
        return occurrences[kind][index]

    english_lines = english_str.split(LINE_BREAK)
    return LINE_BREAK.join(
        PLACEHOLDER_RE.sub(_repl, template.lines[index]) for index in range(len(english_lines))
    )
