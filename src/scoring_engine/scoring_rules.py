"""Assessment preconditions."""

from typing import Optional, Tuple

from src.party_manager.roster import Roster


class ValidationError(Exception):
    """Raised when an assessment is requested with incomplete inputs."""

    pass


class ScoringRules:
    """Checks that a roster and personality inputs can be scored."""

    def validate(self, roster: Roster, personality) -> Tuple[bool, Optional[str]]:
        """
        Validate an assessment request.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Every slot filled
        if not roster.is_complete:
            return (
                False,
                f"Team is incomplete ({roster.filled_count}/{roster.size} slots filled)",
            )

        # Check 2: All personality fields chosen
        missing = personality.missing_fields()
        if missing:
            return (
                False,
                "Please fill in all personality fields "
                f"(missing: {', '.join(missing)})",
            )

        return True, None
