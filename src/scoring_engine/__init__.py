from src.scoring_engine.models import NarrativeResult, ScoreResult, TeamAssessment
from src.scoring_engine.personality import PersonalityInputs
from src.scoring_engine.scoring_rules import ScoringRules, ValidationError
from src.scoring_engine.team_scorer import TeamScorer

__all__ = [
    "NarrativeResult",
    "PersonalityInputs",
    "ScoreResult",
    "ScoringRules",
    "TeamAssessment",
    "TeamScorer",
    "ValidationError",
]
