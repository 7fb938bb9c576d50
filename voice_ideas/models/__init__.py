"""
Data models for the voice ideas package.

This package contains Pydantic models for:
- entry: voice diary input records
- idea: detected ideas and the aggregate classification result
"""

from voice_ideas.models.entry import VoiceEntry
from voice_ideas.models.idea import (
    BeliefLevel,
    DueDate,
    IdeaCategory,
    IdeaRecord,
    IdeaStatus,
    OriginType,
    ProcessedResult,
    RefinementLevel,
    Tone,
)

__all__ = [
    # Input models
    "VoiceEntry",
    # Output models
    "IdeaRecord",
    "ProcessedResult",
    "IdeaStatus",
    "IdeaCategory",
    "DueDate",
    "OriginType",
    "Tone",
    "RefinementLevel",
    "BeliefLevel",
]
