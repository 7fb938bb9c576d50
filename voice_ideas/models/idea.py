"""
Data models for classification output.

These models represent the result of a classification pass: the
enriched idea records and the aggregate result holding tag counts.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IdeaStatus(str, Enum):
    """Progress state of an idea."""

    NEW = "new"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"


class IdeaCategory(str, Enum):
    """Life area an idea belongs to."""

    GENERAL = "general"
    HEALTH = "health"
    LEARNING = "learning"
    WORK = "work"
    PERSONAL = "personal"


class DueDate(str, Enum):
    """Relative due dates recognised in transcripts."""

    TOMORROW = "tomorrow"
    NEXT_WEEK = "next week"
    THIS_WEEKEND = "this weekend"


class OriginType(str, Enum):
    """Whether an idea surfaced spontaneously or was planned."""

    SPONTANEOUS = "spontaneous"
    PLANNED = "planned"


class Tone(str, Enum):
    """Coarse sentiment bucket derived from the emotion score."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class RefinementLevel(str, Enum):
    """How worked-out an idea is."""

    INITIAL = "initial"
    DETAILED = "detailed"
    CONCEPTUAL = "conceptual"


class BeliefLevel(str, Enum):
    """How committed the speaker sounds."""

    MEDIUM = "medium"
    HIGH = "high"
    LOW = "low"


class IdeaRecord(BaseModel):
    """
    An entry judged to contain an idea, with heuristic attributes.
    """

    model_config = ConfigDict(frozen=True)

    task_text: str = Field(description="Verbatim transcript of the source entry")
    status: IdeaStatus = Field(default=IdeaStatus.NEW)
    category: IdeaCategory = Field(default=IdeaCategory.GENERAL)
    due_date: Optional[DueDate] = Field(default=None)
    origin_type: OriginType = Field(default=OriginType.PLANNED)
    tone: Tone = Field(default=Tone.NEUTRAL)
    refinement_level: RefinementLevel = Field(default=RefinementLevel.INITIAL)
    belief_level: BeliefLevel = Field(default=BeliefLevel.MEDIUM)


class ProcessedResult(BaseModel):
    """
    Aggregate result of one classification pass.

    Serializes with `by_alias=True` to the `summary` / `tagFrequencies` /
    `ideas` shape.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str = Field(description="Human-readable summary line")
    tag_frequencies: dict[str, int] = Field(
        default_factory=dict,
        alias="tagFrequencies",
        description="Occurrences of each user tag across all entries",
    )
    ideas: list[IdeaRecord] = Field(
        default_factory=list,
        description="Detected ideas in source order",
    )

    @property
    def idea_count(self) -> int:
        """Number of detected ideas."""
        return len(self.ideas)
