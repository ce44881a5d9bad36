"""Team scorer - turns a complete roster plus personality inputs into an assessment.

Scoring is pure: the same roster and personality always produce equal
results, and nothing here mutates the roster.
"""

import logging
from typing import Dict, List

import pandas as pd

from src.party_manager.entity import STAT_NAMES, Entity
from src.party_manager.roster import Roster
from src.scoring_engine.config import (
    COVERAGE_EXCEPTIONAL_MIN,
    COVERAGE_SOLID_MIN,
    DEFAULT_DOMINANT_TYPE,
    DEFAULT_QUALITIES,
    DS_WEIGHT,
    ORDINAL_FALLBACKS,
    ROOKIE_TIER_MAX,
    RPS_BASELINE_TOTAL,
    RPS_WEIGHT,
    SOLID_TIER_MAX,
    STAT_BALANCE_RATIO,
)
from src.scoring_engine.models import (
    CoverageLabel,
    DiversityGrade,
    NarrativeResult,
    ScoreResult,
    ScoreTier,
    StatAnalysis,
    StatBalance,
    TeamAssessment,
    TypeAnalysis,
)
from src.scoring_engine.personality import PersonalityInputs, describe_quality
from src.scoring_engine.scoring_rules import ScoringRules, ValidationError

logger = logging.getLogger(__name__)

ROOKIE_TIER = ScoreTier(
    title="Rookie Team",
    message=(
        "Your team shows promise, but statistical power is currently below "
        "competitive standards. The type coverage is thin, leaving significant "
        "vulnerabilities that opponents could exploit. Consider diversifying your "
        "type selection and incorporating Pokémon with higher base stat totals to "
        "create a more formidable foundation. Every champion starts somewhere, and "
        "with strategic adjustments, your team can evolve into something truly remarkable."
    ),
    suggestions=(
        "Focus on adding Pokémon with base stat totals above 500",
        "Aim for at least 6-8 different types across your team",
        "Balance offensive and defensive capabilities",
        "Consider legendary or pseudo-legendary Pokémon for power boosts",
    ),
)

SOLID_TIER = ScoreTier(
    title="Solid Team",
    message=(
        "You've built a respectable foundation that demonstrates solid understanding "
        "of team composition. Your statistical averages are balanced, and type "
        "diversity shows thoughtful consideration. However, there's room to push "
        "beyond good into greatness. Adding a bit more statistical muscle or "
        "expanding type variety could elevate your team from solid to exceptional. "
        "The framework is there; now it's time to refine and perfect."
    ),
    suggestions=(
        "Consider replacing lower-stat Pokémon with higher-tier options",
        "Expand type coverage to 8+ unique types",
        "Optimize stat distribution for your battle strategy",
        "Experiment with different type combinations for better synergy",
    ),
)

ELITE_TIER = ScoreTier(
    title="Elite Team",
    message=(
        "Congratulations! You've assembled a team worthy of the highest competitive "
        "arenas. Your statistical prowess is exceptional, and your type diversity "
        "creates a nearly impenetrable defensive and offensive matrix. This team "
        "demonstrates master-level understanding of Pokémon synergy, stat "
        "optimization, and strategic coverage. You've created something that can "
        "stand toe-to-toe with the best trainers in the world. The path to victory "
        "is clear; now go claim your glory!"
    ),
    suggestions=(
        "Your team is ready for competitive play",
        "Consider fine-tuning move sets for maximum synergy",
        "Experiment with different battle strategies",
        "Share your team composition with others to inspire",
    ),
)


def score_tier(overall_score: float) -> ScoreTier:
    """Pick the headline tier for an overall score."""
    if overall_score < ROOKIE_TIER_MAX:
        return ROOKIE_TIER
    if overall_score < SOLID_TIER_MAX:
        return SOLID_TIER
    return ELITE_TIER


class TeamScorer:
    """Computes scores and narrative text for a completed roster."""

    def __init__(self, rules: ScoringRules = None):
        self.rules = rules or ScoringRules()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assess(self, roster: Roster, personality: PersonalityInputs) -> TeamAssessment:
        """Validate the request, then score and narrate the roster.

        Raises:
            ValidationError: If the roster is incomplete or a personality
                field is missing.
        """
        is_valid, error_msg = self.rules.validate(roster, personality)
        if not is_valid:
            logger.warning("Assessment refused: %s", error_msg)
            raise ValidationError(error_msg)

        members = roster.members()
        scores = self.calculate_scores(members)
        narrative = self.generate_narrative(members, personality)
        tier = score_tier(scores.overall_score)

        logger.info(
            "Assessed team: RPS=%.1f DS=%.1f (grade %s) overall=%.1f -> %s",
            scores.rps,
            scores.ds,
            scores.diversity_grade.value,
            scores.overall_score,
            tier.title,
        )
        return TeamAssessment(scores=scores, narrative=narrative, tier=tier)

    def analyze_types(self, members: List[Entity]) -> TypeAnalysis:
        """Dominant type, coverage label and unique type count.

        Ties for dominant type go to the type seen first.
        """
        counts = self.type_distribution(members)
        if not counts:
            return TypeAnalysis(
                dominant=DEFAULT_DOMINANT_TYPE,
                coverage=CoverageLabel.FOCUSED,
                unique_count=0,
            )

        dominant = max(counts.items(), key=lambda item: item[1])[0]
        unique_count = len(counts)

        if unique_count >= COVERAGE_EXCEPTIONAL_MIN:
            coverage = CoverageLabel.EXCEPTIONAL
        elif unique_count >= COVERAGE_SOLID_MIN:
            coverage = CoverageLabel.SOLID
        else:
            coverage = CoverageLabel.FOCUSED

        return TypeAnalysis(dominant=dominant, coverage=coverage, unique_count=unique_count)

    def analyze_stats(self, members: List[Entity]) -> StatAnalysis:
        """Compare average offense (Atk + SpA) against defense (Def + SpD)."""
        frame = self._stats_frame(members)
        if frame.empty:
            return StatAnalysis(StatBalance.BALANCED, 0.0, 0.0)

        offense = float((frame["attack"] + frame["sp_attack"]).mean())
        defense = float((frame["defense"] + frame["sp_defense"]).mean())

        if offense > defense * STAT_BALANCE_RATIO:
            balance = StatBalance.OFFENSIVE
        elif defense > offense * STAT_BALANCE_RATIO:
            balance = StatBalance.DEFENSIVE
        else:
            balance = StatBalance.BALANCED

        return StatAnalysis(balance=balance, average_offense=offense, average_defense=defense)

    def calculate_scores(self, members: List[Entity]) -> ScoreResult:
        """Compute RPS, DS, overall score and per-stat averages."""
        if not members:
            raise ValueError("Cannot score an empty team")

        frame = self._stats_frame(members)
        average_total = float(frame["total"].mean())
        rps = average_total / RPS_BASELINE_TOTAL * 100

        distribution = self.type_distribution(members)
        grade = DiversityGrade.for_unique_count(len(distribution))
        ds = float(grade.score)

        overall = rps * RPS_WEIGHT + ds * DS_WEIGHT

        average_stats = {name: float(frame[name].mean()) for name in STAT_NAMES}

        return ScoreResult(
            rps=rps,
            unique_type_count=len(distribution),
            diversity_grade=grade,
            ds=ds,
            overall_score=overall,
            average_stats=average_stats,
            type_distribution=distribution,
        )

    def generate_narrative(
        self, members: List[Entity], personality: PersonalityInputs
    ) -> NarrativeResult:
        """Build the qualities phrase, personal statement and team synergy text."""
        qualities = personality.qualities()
        qualities_phrase = (
            ", ".join(q.value for q in qualities) if qualities else DEFAULT_QUALITIES
        )
        qualities_text = " ".join(describe_quality(q) for q in qualities)

        type_analysis = self.analyze_types(members)
        stat_analysis = self.analyze_stats(members)
        names = self._member_names(members)

        user_statement = (
            f"Young Champion, your journey is illuminated by {qualities_phrase}. "
            f"{qualities_text} These qualities are not just traits; they are the very "
            "essence of your path, guiding each decision and shaping every victory."
        )

        team_synergy = (
            "Your assembled team tells a story of strategic brilliance. "
            f"{names[0]} stands as your foundation, {names[1]} brings "
            f"{type_analysis.dominant} energy, while {names[2]} and {names[3]} "
            f"create a {stat_analysis.balance.value} dynamic. {names[4]} and "
            f"{names[5]} complete the symphony, their {type_analysis.coverage.phrase} "
            "ensuring no opponent can find an easy weakness. Together, they form more "
            "than a team; they are a testament to your vision."
        )

        return NarrativeResult(
            qualities=f"The {qualities_phrase}",
            user_statement=user_statement,
            team_synergy=team_synergy,
            type_analysis=type_analysis,
            stat_analysis=stat_analysis,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def type_distribution(members: List[Entity]) -> Dict[str, int]:
        """Count type tags across the team, in first-seen order."""
        counts: Dict[str, int] = {}
        for member in members:
            for poke_type in member.types:
                counts[poke_type.value] = counts.get(poke_type.value, 0) + 1
        return counts

    @staticmethod
    def _stats_frame(members: List[Entity]) -> pd.DataFrame:
        rows = []
        for member in members:
            row = member.stats.as_dict()
            row["total"] = member.total_stats
            rows.append(row)
        return pd.DataFrame(rows, columns=list(STAT_NAMES) + ["total"])

    @staticmethod
    def _member_names(members: List[Entity]) -> List[str]:
        """Display names padded with ordinal fallbacks for gaps or blanks."""
        names = []
        for index, fallback in enumerate(ORDINAL_FALLBACKS):
            name = members[index].name if index < len(members) else ""
            names.append(name or fallback)
        return names
