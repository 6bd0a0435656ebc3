from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Pattern


class SpecialKind(Enum):
    """Kinds of non-translatable substrings embedded in exercise text."""

    MATH = "math"
    GRAPHIE = "graphie"
    WIDGET = "widget"


@dataclass(frozen=True)
class SpecialMatcher:
    """Finds one kind of special substring and knows its placeholder."""

    kind: SpecialKind
    pattern: Pattern[str]
    placeholder: str
    mismatch_message: str

    def match(self, text: str) -> List[str]:
        """Return the occurrences of this kind in encounter order."""
        return [m.group(0) for m in self.pattern.finditer(text)]

    def mask(self, text: str) -> str:
        return self.pattern.sub(self.placeholder, text)


# $x^2 + 2x + 1 = 0$, $\text{cost} = \$4$
MATH_RE = re.compile(r"\$(?:\\\$|[^$])+\$")

# ![](web+graphie://ka-perseus-graphie.s3.amazonaws.com/542f2b4e...)
GRAPHIE_RE = re.compile(r"!\[\]\([^)]+\)")

# [[☃ Expression 1]]
WIDGET_RE = re.compile(r"\[\[☃[^\]]+\]\]")

# Greedy on purpose: spans from the first ** to the last ** on a line.
# A line ends at \n, \r, \u2028 or \u2029, so CRLF text never merges spans across lines.
BOLD_RE = re.compile(r"\*\*[^\n\r\u2028\u2029]*\*\*")

# Paragraph trimming also drops a byte order mark.
TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

MATH_PLACEHOLDER = "__MATH__"
GRAPHIE_PLACEHOLDER = "__GRAPHIE__"
WIDGET_PLACEHOLDER = "__WIDGET__"

PLACEHOLDER_RE = re.compile(r"__(?:MATH|GRAPHIE|WIDGET)__")
MATH_WIDGET_GAP_RE = re.compile(r"__MATH__[\t ]*__WIDGET__")

# Markdown paragraphs are separated by a blank line.
LINE_BREAK = "\n\n"

MATH = SpecialMatcher(SpecialKind.MATH, MATH_RE, MATH_PLACEHOLDER, "math doesn't match")
GRAPHIE = SpecialMatcher(SpecialKind.GRAPHIE, GRAPHIE_RE, GRAPHIE_PLACEHOLDER, "graphies don't match")
WIDGET = SpecialMatcher(SpecialKind.WIDGET, WIDGET_RE, WIDGET_PLACEHOLDER, "widgets don't match")

# Masking order matters: math first, then graphies, then widgets.
MATCHERS = (MATH, GRAPHIE, WIDGET)
MATCHERS_BY_KIND = {m.kind: m for m in MATCHERS}
MATCHERS_BY_PLACEHOLDER = {m.placeholder: m for m in MATCHERS}


def mask_special_substrings(text: str) -> str:
    """Replace math, graphies and widgets with their placeholder tokens."""
    for matcher in MATCHERS:
        text = matcher.mask(text)
    return text
