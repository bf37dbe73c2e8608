"""Ordered rule tables that classify and render individual code units.

Both tables are evaluated first-match-wins.  Exact character rules always
precede the range checks so that, for example, a space is reported as
:attr:`CharCategory.SPACE` rather than as a generic printable character.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


PRINTABLE_LOW = 32
PRINTABLE_HIGH = 126
ASCII_MAX = 127
DELETE = 0x7F


class CharCategory(Enum):
    """Classification of a single code unit."""

    SPACE = "Space"
    LINE_FEED = "Line Feed (LF)"
    CARRIAGE_RETURN = "Carriage Return (CR)"
    TAB = "Horizontal Tab"
    VERTICAL_TAB = "Vertical Tab"
    FORM_FEED = "Form Feed"
    BACKSPACE = "Backspace"
    NULL = "Null"
    PRINTABLE_ASCII = "Printable ASCII"
    NON_PRINTABLE = "Non-printable"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryRule:
    """Match either a single character or an inclusive code point range."""

    category: CharCategory
    char: Optional[str] = None
    low: Optional[int] = None
    high: Optional[int] = None

    def __post_init__(self) -> None:
        if self.char is None and (self.low is None or self.high is None):
            raise ValueError("category rule needs a character or a full range")

    def matches(self, char: str, code_point: int) -> bool:
        if self.char is not None:
            return char == self.char
        return self.low <= code_point <= self.high  # type: ignore[operator]


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(CharCategory.SPACE, char=" "),
    CategoryRule(CharCategory.LINE_FEED, char="\n"),
    CategoryRule(CharCategory.CARRIAGE_RETURN, char="\r"),
    CategoryRule(CharCategory.TAB, char="\t"),
    CategoryRule(CharCategory.VERTICAL_TAB, char="\v"),
    CategoryRule(CharCategory.FORM_FEED, char="\f"),
    CategoryRule(CharCategory.BACKSPACE, char="\b"),
    CategoryRule(CharCategory.NULL, char="\0"),
    CategoryRule(CharCategory.PRINTABLE_ASCII, low=PRINTABLE_LOW, high=PRINTABLE_HIGH),
)

FALLBACK_CATEGORY = CharCategory.NON_PRINTABLE


# Carriage return shares the line feed arrow.
GLYPH_RULES: Tuple[Tuple[str, str], ...] = (
    (" ", "␣"),
    ("\n", "↵"),
    ("\t", "⇥"),
    ("\r", "↵"),
    ("\0", "␀"),
)


def classify_char(char: str, code_point: int) -> CharCategory:
    """Return the first category whose rule accepts ``char``."""

    for rule in CATEGORY_RULES:
        if rule.matches(char, code_point):
            return rule.category
    return FALLBACK_CATEGORY


def is_control_code(code_point: int) -> bool:
    return code_point < PRINTABLE_LOW or code_point == DELETE


def display_glyph(char: str, code_point: int) -> str:
    """Return a rendering of ``char`` that is safe to show in a listing."""

    for source, glyph in GLYPH_RULES:
        if char == source:
            return glyph
    if is_control_code(code_point):
        return f"[{code_point}]"
    return char


__all__ = [
    "ASCII_MAX",
    "CATEGORY_RULES",
    "CategoryRule",
    "CharCategory",
    "FALLBACK_CATEGORY",
    "GLYPH_RULES",
    "classify_char",
    "display_glyph",
    "is_control_code",
]
