"""Recognise selections that are written as quoted string literals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


logger = logging.getLogger(__name__)


QUOTE_CHARACTERS: Tuple[str, ...] = ('"', "'")


@dataclass(frozen=True)
class StringLiteral:
    """A quoted selection split into its delimiter and inner content."""

    quote: str
    content: str


class StringLiteralDetector:
    """Strip a matching pair of quotes from the ends of a selection.

    No escape processing takes place: ``'"a"b"'`` yields ``a"b`` and an empty
    pair of quotes yields an empty string.  Mismatched delimiters or inputs
    shorter than two characters are not literals.
    """

    def __init__(self, quotes: Optional[Iterable[str]] = None) -> None:
        self.quotes = tuple(quotes) if quotes is not None else QUOTE_CHARACTERS

    def match(self, text: str) -> Optional[StringLiteral]:
        if len(text) < 2:
            return None
        first, last = text[0], text[-1]
        for quote in self.quotes:
            if first == quote and last == quote:
                return StringLiteral(quote=quote, content=text[1:-1])
        return None

    def detect(self, text: str) -> Optional[str]:
        literal = self.match(text)
        if literal is None:
            logger.debug("selection of length %d is not a string literal", len(text))
            return None
        logger.debug("detected %s-quoted literal with %d inner characters", literal.quote, len(literal.content))
        return literal.content


GLOBAL_LITERAL_DETECTOR = StringLiteralDetector()


def detect(text: str) -> Optional[str]:
    """Return the content of ``text`` if it is a quoted literal, else ``None``."""

    return GLOBAL_LITERAL_DETECTOR.detect(text)


__all__ = [
    "GLOBAL_LITERAL_DETECTOR",
    "QUOTE_CHARACTERS",
    "StringLiteral",
    "StringLiteralDetector",
    "detect",
]
