"""Turn editor selection events into status updates and detail views.

An editor integration calls :meth:`SelectionInspector.on_selection_changed`
whenever the selection or the active editor changes and shows the returned
:class:`StatusUpdate`.  When the user activates the status indicator the same
update is handed to :meth:`SelectionInspector.show_details`, so the detail view
is built from the analysis captured at selection time and no "current
selection" has to be remembered in between.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .analyzer import GLOBAL_CHARACTER_ANALYZER, AnalysisResult, CharacterAnalyzer
from .literal import GLOBAL_LITERAL_DETECTOR, StringLiteralDetector
from .render import (
    STATUS_TOOLTIP,
    DetailItem,
    detail_items,
    detail_placeholder,
    detail_title,
    status_text,
)


logger = logging.getLogger(__name__)


SHOW_DETAILS_COMMAND = "stringscope.showCharacterIndices"
STATUS_ICON = "$(symbol-string)"


@dataclass(frozen=True)
class InspectedSelection:
    """The analysed form of one selection."""

    raw_text: str
    analysed_text: str
    is_literal: bool
    result: AnalysisResult


@dataclass(frozen=True)
class StatusUpdate:
    """What the status indicator should show after a selection event."""

    visible: bool
    text: str = ""
    tooltip: str = ""
    command: str = SHOW_DETAILS_COMMAND
    selection: Optional[InspectedSelection] = None

    @classmethod
    def hidden(cls) -> "StatusUpdate":
        return cls(visible=False)


@dataclass(frozen=True)
class DetailView:
    title: str
    placeholder: str
    items: Tuple[DetailItem, ...] = field(default_factory=tuple)
    can_select_many: bool = False


class SelectionInspector:
    """Stateless glue between selection events and the analysis engine."""

    def __init__(
        self,
        detector: Optional[StringLiteralDetector] = None,
        analyzer: Optional[CharacterAnalyzer] = None,
        *,
        detect_literals: bool = True,
        icon: Optional[str] = STATUS_ICON,
    ) -> None:
        self.detector = detector or GLOBAL_LITERAL_DETECTOR
        self.analyzer = analyzer or GLOBAL_CHARACTER_ANALYZER
        self.detect_literals = detect_literals
        self.icon = icon

    def inspect(self, text: str) -> InspectedSelection:
        content = self.detector.detect(text) if self.detect_literals else None
        analysed = text if content is None else content
        return InspectedSelection(
            raw_text=text,
            analysed_text=analysed,
            is_literal=content is not None,
            result=self.analyzer.analyze(analysed),
        )

    def on_selection_changed(self, selected_text: Optional[str]) -> StatusUpdate:
        # None means no active editor; "" means a bare cursor.
        if not selected_text:
            return StatusUpdate.hidden()
        selection = self.inspect(selected_text)
        logger.debug(
            "selection updated: literal=%s length=%d",
            selection.is_literal,
            selection.result.source_length,
        )
        return StatusUpdate(
            visible=True,
            text=status_text(selection.result, icon=self.icon),
            tooltip=STATUS_TOOLTIP,
            selection=selection,
        )

    def show_details(self, update: StatusUpdate) -> Optional[DetailView]:
        selection = update.selection
        if not update.visible or selection is None:
            return None
        return DetailView(
            title=detail_title(selection.result),
            placeholder=detail_placeholder(selection.analysed_text),
            items=detail_items(selection.result),
        )


__all__ = [
    "DetailView",
    "InspectedSelection",
    "SHOW_DETAILS_COMMAND",
    "STATUS_ICON",
    "SelectionInspector",
    "StatusUpdate",
]
