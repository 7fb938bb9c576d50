"""
Keyword-based analysis components for voice entries.

This package provides:
- Idea trigger detection
- Ordered attribute rule tables
"""

from voice_ideas.semantic.rules import KeywordRule, RuleTable
from voice_ideas.semantic.triggers import IdeaTriggers, detect_triggers

__all__ = [
    "KeywordRule",
    "RuleTable",
    "IdeaTriggers",
    "detect_triggers",
]
