"""Data models for the scoring engine.

All results are frozen snapshots: presentation widgets read them, nothing
writes back into the roster or layout.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from src.scoring_engine.config import DIVERSITY_TIERS, RPS_BASELINE_TOTAL


class CoverageLabel(str, Enum):
    EXCEPTIONAL = "exceptional"
    SOLID = "solid"
    FOCUSED = "focused"

    @property
    def phrase(self) -> str:
        return {
            CoverageLabel.EXCEPTIONAL: "exceptional type coverage",
            CoverageLabel.SOLID: "solid type diversity",
            CoverageLabel.FOCUSED: "focused type strategy",
        }[self]


class StatBalance(str, Enum):
    OFFENSIVE = "offensive"
    DEFENSIVE = "defensive"
    BALANCED = "balanced"

    @property
    def style(self) -> str:
        return {
            StatBalance.OFFENSIVE: "aggressive",
            StatBalance.DEFENSIVE: "resilient",
            StatBalance.BALANCED: "versatile",
        }[self]


class DiversityGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def score(self) -> int:
        return _GRADE_SCORES[self]

    @classmethod
    def for_unique_count(cls, unique_count: int) -> "DiversityGrade":
        for min_count, grade, _ in DIVERSITY_TIERS:
            if unique_count >= min_count:
                return cls(grade)
        return cls.F


_GRADE_SCORES = {DiversityGrade(grade): score for _, grade, score in DIVERSITY_TIERS}


@dataclass(frozen=True)
class TypeAnalysis:
    dominant: str
    coverage: CoverageLabel
    unique_count: int


@dataclass(frozen=True)
class StatAnalysis:
    balance: StatBalance
    average_offense: float
    average_defense: float

    @property
    def style(self) -> str:
        return self.balance.style


@dataclass(frozen=True)
class ScoreResult:
    """Quantitative assessment of a complete roster."""

    rps: float
    unique_type_count: int
    diversity_grade: DiversityGrade
    ds: float
    overall_score: float
    average_stats: Dict[str, float] = field(default_factory=dict)
    type_distribution: Dict[str, int] = field(default_factory=dict)

    @property
    def average_total_stats(self) -> float:
        return self.rps / 100 * RPS_BASELINE_TOTAL

    def display_values(self) -> Dict[str, float]:
        """One-decimal values for consumers that print them directly."""
        return {
            "rps": round(self.rps, 1),
            "ds": round(self.ds, 1),
            "overall_score": round(self.overall_score, 1),
            "average_total_stats": round(self.average_total_stats, 1),
        }


@dataclass(frozen=True)
class NarrativeResult:
    """Generated text describing the trainer and their team."""

    qualities: str
    user_statement: str
    team_synergy: str
    type_analysis: TypeAnalysis
    stat_analysis: StatAnalysis


@dataclass(frozen=True)
class ScoreTier:
    title: str
    message: str
    suggestions: Tuple[str, ...]


@dataclass(frozen=True)
class TeamAssessment:
    """Everything produced by one assessment request."""

    scores: ScoreResult
    narrative: NarrativeResult
    tier: ScoreTier
