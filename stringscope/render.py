"""Text renderings of an :class:`~stringscope.analyzer.AnalysisResult`.

The helpers here produce the strings an editor front-end displays: a compact
status indicator, the title and placeholder of the detail listing and one
:class:`DetailItem` per analysed code unit.  :func:`render_listing` joins the
same pieces into a plain text report and :func:`to_dict` exposes a JSON
friendly view.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from .analyzer import AnalysisResult, CharacterDescriptor


STATUS_LABEL = "StringScope"
STATUS_TOOLTIP = "Click to view character details (index, ASCII, Unicode)"


@dataclass(frozen=True)
class DetailItem:
    """One row of the per-character listing."""

    label: str
    description: str
    detail: str

    def render(self) -> str:
        return f"{self.label:<10} {self.description:<22} {self.detail}"


def status_text(result: AnalysisResult, icon: Optional[str] = None) -> str:
    text = f"{STATUS_LABEL}: {result.source_length}"
    if icon:
        return f"{icon} {text}"
    return text


def detail_title(result: AnalysisResult) -> str:
    return f"{STATUS_LABEL} - Character Details (Length: {result.source_length})"


def detail_placeholder(text: str) -> str:
    return f"Text: {json.dumps(text, ensure_ascii=False)}"


def detail_item(descriptor: CharacterDescriptor) -> DetailItem:
    return DetailItem(
        label=f"{descriptor.index}: {descriptor.display_glyph}",
        description=f"{descriptor.ascii_label} | {descriptor.unicode_label}",
        detail=(
            f"{descriptor.category.label} | {descriptor.decimal_label} | "
            f"Hex: {descriptor.hex_label}"
        ),
    )


def _check_indices(result: AnalysisResult) -> None:
    if len(result.descriptors) != result.source_length:
        raise ValueError(
            f"analysis length mismatch: {len(result.descriptors)} descriptors for length {result.source_length}"
        )
    for position, descriptor in enumerate(result.descriptors):
        if descriptor.index != position:
            raise ValueError(f"descriptor index mismatch at position {position}")


def detail_items(result: AnalysisResult) -> Tuple[DetailItem, ...]:
    """Return the listing rows for ``result`` in index order."""

    _check_indices(result)
    return tuple(detail_item(descriptor) for descriptor in result.descriptors)


def render_listing(result: AnalysisResult, text: str) -> str:
    lines: List[str] = [detail_title(result), detail_placeholder(text)]
    for item in detail_items(result):
        lines.append("  " + item.render())
    return "\n".join(lines)


def descriptor_to_dict(descriptor: CharacterDescriptor) -> Mapping[str, object]:
    return {
        "index": descriptor.index,
        "char": descriptor.raw_char,
        "glyph": descriptor.display_glyph,
        "code_point": descriptor.code_point,
        "category": descriptor.category.name,
        "name": descriptor.category.label,
        "is_ascii": descriptor.is_ascii,
        "hex": descriptor.hex_value,
        "unicode": descriptor.unicode_label,
        "surrogate": descriptor.is_surrogate(),
    }


def to_dict(result: AnalysisResult) -> Mapping[str, object]:
    _check_indices(result)
    return {
        "length": result.source_length,
        "non_ascii": result.non_ascii_count(),
        "categories": {
            category.name: count for category, count in sorted(
                result.category_counts().items(), key=lambda item: item[0].name
            )
        },
        "descriptors": [descriptor_to_dict(descriptor) for descriptor in result.descriptors],
    }


__all__ = [
    "DetailItem",
    "STATUS_LABEL",
    "STATUS_TOOLTIP",
    "descriptor_to_dict",
    "detail_item",
    "detail_items",
    "detail_placeholder",
    "detail_title",
    "render_listing",
    "status_text",
    "to_dict",
]
