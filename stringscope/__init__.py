"""Public package exports for the StringScope character inspector."""

from .analyzer import AnalysisResult, CharacterAnalyzer, CharacterDescriptor, analyze
from .categories import CharCategory
from .literal import StringLiteral, StringLiteralDetector, detect
from .session import DetailView, SelectionInspector, StatusUpdate

__all__ = [
    "AnalysisResult",
    "CharacterAnalyzer",
    "CharacterDescriptor",
    "CharCategory",
    "DetailView",
    "SelectionInspector",
    "StatusUpdate",
    "StringLiteral",
    "StringLiteralDetector",
    "analyze",
    "detect",
]
