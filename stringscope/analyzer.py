"""Per-character analysis of a text buffer.

The analyser walks the buffer one UTF-16 code unit at a time, which is how an
editor reports selection lengths.  Characters outside the basic multilingual
plane are therefore split into their surrogate halves and each half receives
its own :class:`CharacterDescriptor`.  Every descriptor records the numeric
value of its unit together with the category and display glyph chosen by the
rule tables in :mod:`stringscope.categories`.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Tuple

from .categories import ASCII_MAX, CharCategory, classify_char, display_glyph


logger = logging.getLogger(__name__)


_UNIT_SIZE = 2
_UNICODE_WIDTH = 4


def iter_code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of ``text`` in order.

    Lone surrogates are passed through unchanged so that the iteration never
    fails, whatever the origin of the string.
    """

    encoded = text.encode("utf-16-le", "surrogatepass")
    for offset in range(0, len(encoded), _UNIT_SIZE):
        yield int.from_bytes(encoded[offset : offset + _UNIT_SIZE], "little")


@dataclass(frozen=True)
class CharacterDescriptor:
    """Facts about a single code unit of the analysed buffer."""

    index: int
    raw_char: str
    code_point: int
    display_glyph: str
    category: CharCategory
    is_ascii: bool
    hex_value: str

    @property
    def unicode_label(self) -> str:
        return f"U+{self.code_point:0{_UNICODE_WIDTH}X}"

    @property
    def ascii_label(self) -> str:
        if self.is_ascii:
            return f"ASCII: {self.code_point}"
        return "Non-ASCII"

    @property
    def hex_label(self) -> str:
        return f"0x{self.hex_value}"

    @property
    def decimal_label(self) -> str:
        return f"Decimal: {self.code_point}"

    def is_surrogate(self) -> bool:
        return 0xD800 <= self.code_point <= 0xDFFF


@dataclass(frozen=True)
class AnalysisResult:
    """Ordered descriptors for a buffer along with its code unit length."""

    source_length: int
    descriptors: Tuple[CharacterDescriptor, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __iter__(self) -> Iterator[CharacterDescriptor]:
        return iter(self.descriptors)

    def category_counts(self) -> Mapping[CharCategory, int]:
        return Counter(descriptor.category for descriptor in self.descriptors)

    def non_ascii_count(self) -> int:
        return sum(1 for descriptor in self.descriptors if not descriptor.is_ascii)

    def is_consistent(self) -> bool:
        if len(self.descriptors) != self.source_length:
            return False
        return all(descriptor.index == index for index, descriptor in enumerate(self.descriptors))


def describe_code_unit(index: int, code_point: int) -> CharacterDescriptor:
    char = chr(code_point)
    return CharacterDescriptor(
        index=index,
        raw_char=char,
        code_point=code_point,
        display_glyph=display_glyph(char, code_point),
        category=classify_char(char, code_point),
        is_ascii=code_point <= ASCII_MAX,
        hex_value=f"{code_point:X}",
    )


class CharacterAnalyzer:
    """Build :class:`AnalysisResult` objects.  Holds no state between calls."""

    def analyze(self, text: str) -> AnalysisResult:
        descriptors: List[CharacterDescriptor] = [
            describe_code_unit(index, unit) for index, unit in enumerate(iter_code_units(text))
        ]
        logger.debug("analysed %d code units", len(descriptors))
        return AnalysisResult(source_length=len(descriptors), descriptors=tuple(descriptors))


GLOBAL_CHARACTER_ANALYZER = CharacterAnalyzer()


def analyze(text: str) -> AnalysisResult:
    """Return the per-code-unit analysis of ``text``."""

    return GLOBAL_CHARACTER_ANALYZER.analyze(text)


__all__ = [
    "AnalysisResult",
    "CharacterAnalyzer",
    "CharacterDescriptor",
    "GLOBAL_CHARACTER_ANALYZER",
    "analyze",
    "describe_code_unit",
    "iter_code_units",
]
