"""
Attribute rule tables for detected ideas.

Every attribute is resolved from an ordered table: the first rule that
matches wins, otherwise the table default applies. Keyword matching is
plain substring matching on lower-cased text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from voice_ideas.models.idea import (
    BeliefLevel,
    DueDate,
    IdeaCategory,
    IdeaStatus,
    OriginType,
    RefinementLevel,
    Tone,
)
from voice_ideas.semantic.triggers import IdeaTriggers, contains_any

LabelT = TypeVar("LabelT", bound=Enum)


@dataclass(frozen=True)
class KeywordRule(Generic[LabelT]):
    """Assigns `label` when any keyword occurs in the text."""

    label: LabelT
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return contains_any(text, self.keywords)


@dataclass(frozen=True)
class RuleTable(Generic[LabelT]):
    """Ordered keyword rules with a fallback label."""

    name: str
    rules: tuple[KeywordRule[LabelT], ...]
    default: Optional[LabelT]

    def resolve(self, text: str) -> Optional[LabelT]:
        """
        Return the label of the first matching rule.

        Args:
            text: Lower-cased transcript

        Returns:
            Matching label, or the table default
        """
        for rule in self.rules:
            if rule.matches(text):
                return rule.label
        return self.default


STATUS_RULES: RuleTable[IdeaStatus] = RuleTable(
    name="status",
    rules=(
        KeywordRule(IdeaStatus.IN_PROGRESS, ("already started", "in progress", "working on")),
        KeywordRule(IdeaStatus.COMPLETED, ("finished", "completed", "done")),
    ),
    default=IdeaStatus.NEW,
)

# Order matters: a transcript touching several areas gets the first one
CATEGORY_RULES: RuleTable[IdeaCategory] = RuleTable(
    name="category",
    rules=(
        KeywordRule(IdeaCategory.HEALTH, ("health", "exercise", "workout", "diet")),
        KeywordRule(IdeaCategory.LEARNING, ("learn", "study", "course", "read")),
        KeywordRule(IdeaCategory.WORK, ("work", "job", "career", "business")),
        KeywordRule(IdeaCategory.PERSONAL, ("personal", "life", "relationship")),
    ),
    default=IdeaCategory.GENERAL,
)

DUE_DATE_RULES: RuleTable[DueDate] = RuleTable(
    name="due_date",
    rules=(
        KeywordRule(DueDate.TOMORROW, ("tomorrow",)),
        KeywordRule(DueDate.NEXT_WEEK, ("next week",)),
        KeywordRule(DueDate.THIS_WEEKEND, ("this weekend",)),
    ),
    default=None,
)

REFINEMENT_RULES: RuleTable[RefinementLevel] = RuleTable(
    name="refinement_level",
    rules=(
        KeywordRule(RefinementLevel.DETAILED, ("detailed plan", "steps to", "process for")),
        KeywordRule(RefinementLevel.CONCEPTUAL, ("thinking about", "considering")),
    ),
    default=RefinementLevel.INITIAL,
)

BELIEF_RULES: RuleTable[BeliefLevel] = RuleTable(
    name="belief_level",
    rules=(
        KeywordRule(BeliefLevel.HIGH, ("definitely", "absolutely", "must", "will")),
        KeywordRule(BeliefLevel.LOW, ("maybe", "perhaps", "might", "could")),
    ),
    default=BeliefLevel.MEDIUM,
)


POSITIVE_TONE_THRESHOLD = 0.3
NEGATIVE_TONE_THRESHOLD = -0.1

# Both bounds are strict: 0.3 and -0.1 themselves are neutral
TONE_RULES: tuple[tuple[Callable[[float], bool], Tone], ...] = (
    (lambda score: score > POSITIVE_TONE_THRESHOLD, Tone.POSITIVE),
    (lambda score: score < NEGATIVE_TONE_THRESHOLD, Tone.NEGATIVE),
)
DEFAULT_TONE = Tone.NEUTRAL


def resolve_status(text: str) -> IdeaStatus:
    return STATUS_RULES.resolve(text)


def resolve_category(text: str) -> IdeaCategory:
    return CATEGORY_RULES.resolve(text)


def resolve_due_date(text: str) -> Optional[DueDate]:
    return DUE_DATE_RULES.resolve(text)


def resolve_refinement_level(text: str) -> RefinementLevel:
    return REFINEMENT_RULES.resolve(text)


def resolve_belief_level(text: str) -> BeliefLevel:
    return BELIEF_RULES.resolve(text)


def resolve_tone(score: Optional[float]) -> Tone:
    """Bucket an emotion score; a missing score is neutral."""
    if score is None:
        return DEFAULT_TONE
    for predicate, tone in TONE_RULES:
        if predicate(score):
            return tone
    return DEFAULT_TONE


def resolve_origin_type(triggers: IdeaTriggers) -> OriginType:
    """Spontaneous only when an idea phrase fired; verbs and intent do not count."""
    if triggers.has_idea_phrases:
        return OriginType.SPONTANEOUS
    return OriginType.PLANNED
