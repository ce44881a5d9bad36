"""Personality vocabularies and their quality lookups.

Each of the three personality inputs is a closed enumeration. Every member
maps to exactly one ``Quality``, and every ``Quality`` maps to exactly one
descriptive sentence, so a lookup can never come back empty.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar

from src.scoring_engine.scoring_rules import ValidationError


class ZodiacSign(str, Enum):
    RAT = "Rat"
    OX = "Ox"
    TIGER = "Tiger"
    RABBIT = "Rabbit"
    DRAGON = "Dragon"
    SNAKE = "Snake"
    HORSE = "Horse"
    GOAT = "Goat"
    MONKEY = "Monkey"
    ROOSTER = "Rooster"
    DOG = "Dog"
    PIG = "Pig"


class AstralSign(str, Enum):
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


class FavoriteColor(str, Enum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    PURPLE = "Purple"
    ORANGE = "Orange"
    PINK = "Pink"
    BLACK = "Black"
    WHITE = "White"
    SILVER = "Silver"
    GOLD = "Gold"
    CYAN = "Cyan"


class Quality(str, Enum):
    # Zodiac
    CLEVER_ADAPTABILITY = "clever adaptability"
    PATIENT_STRENGTH = "patient strength"
    BOLD_COURAGE = "bold courage"
    GENTLE_WISDOM = "gentle wisdom"
    MAJESTIC_POWER = "majestic power"
    MYSTERIOUS_INSIGHT = "mysterious insight"
    FREE_SPIRITED_ENERGY = "free-spirited energy"
    CREATIVE_HARMONY = "creative harmony"
    PLAYFUL_INTELLIGENCE = "playful intelligence"
    PRECISE_CONFIDENCE = "precise confidence"
    LOYAL_DETERMINATION = "loyal determination"
    GENEROUS_CONTENTMENT = "generous contentment"
    # Astral
    FIERY_DETERMINATION = "fiery determination"
    CELESTIAL_PATIENCE = "celestial patience"
    DUAL_CREATIVITY = "dual creativity"
    NURTURING_INTUITION = "nurturing intuition"
    RADIANT_LEADERSHIP = "radiant leadership"
    METICULOUS_PERFECTION = "meticulous perfection"
    BALANCED_HARMONY = "balanced harmony"
    INTENSE_TRANSFORMATION = "intense transformation"
    ADVENTUROUS_FREEDOM = "adventurous freedom"
    AMBITIOUS_DISCIPLINE = "ambitious discipline"
    INNOVATIVE_VISION = "innovative vision"
    DREAMY_EMPATHY = "dreamy empathy"
    # Colour
    PASSIONATE_INTENSITY = "passionate intensity"
    CALM_WISDOM = "calm wisdom"
    NATURAL_GROWTH = "natural growth"
    BRIGHT_OPTIMISM = "bright optimism"
    MYSTICAL_DEPTH = "mystical depth"
    VIBRANT_ENTHUSIASM = "vibrant enthusiasm"
    GENTLE_COMPASSION = "gentle compassion"
    MYSTERIOUS_DEPTH = "mysterious depth"
    PURE_CLARITY = "pure clarity"
    REFINED_ELEGANCE = "refined elegance"
    NOBLE_EXCELLENCE = "noble excellence"
    FRESH_INNOVATION = "fresh innovation"


ZODIAC_QUALITIES: Dict[ZodiacSign, Quality] = {
    ZodiacSign.RAT: Quality.CLEVER_ADAPTABILITY,
    ZodiacSign.OX: Quality.PATIENT_STRENGTH,
    ZodiacSign.TIGER: Quality.BOLD_COURAGE,
    ZodiacSign.RABBIT: Quality.GENTLE_WISDOM,
    ZodiacSign.DRAGON: Quality.MAJESTIC_POWER,
    ZodiacSign.SNAKE: Quality.MYSTERIOUS_INSIGHT,
    ZodiacSign.HORSE: Quality.FREE_SPIRITED_ENERGY,
    ZodiacSign.GOAT: Quality.CREATIVE_HARMONY,
    ZodiacSign.MONKEY: Quality.PLAYFUL_INTELLIGENCE,
    ZodiacSign.ROOSTER: Quality.PRECISE_CONFIDENCE,
    ZodiacSign.DOG: Quality.LOYAL_DETERMINATION,
    ZodiacSign.PIG: Quality.GENEROUS_CONTENTMENT,
}

ASTRAL_QUALITIES: Dict[AstralSign, Quality] = {
    AstralSign.ARIES: Quality.FIERY_DETERMINATION,
    AstralSign.TAURUS: Quality.CELESTIAL_PATIENCE,
    AstralSign.GEMINI: Quality.DUAL_CREATIVITY,
    AstralSign.CANCER: Quality.NURTURING_INTUITION,
    AstralSign.LEO: Quality.RADIANT_LEADERSHIP,
    AstralSign.VIRGO: Quality.METICULOUS_PERFECTION,
    AstralSign.LIBRA: Quality.BALANCED_HARMONY,
    AstralSign.SCORPIO: Quality.INTENSE_TRANSFORMATION,
    AstralSign.SAGITTARIUS: Quality.ADVENTUROUS_FREEDOM,
    AstralSign.CAPRICORN: Quality.AMBITIOUS_DISCIPLINE,
    AstralSign.AQUARIUS: Quality.INNOVATIVE_VISION,
    AstralSign.PISCES: Quality.DREAMY_EMPATHY,
}

COLOR_QUALITIES: Dict[FavoriteColor, Quality] = {
    FavoriteColor.RED: Quality.PASSIONATE_INTENSITY,
    FavoriteColor.BLUE: Quality.CALM_WISDOM,
    FavoriteColor.GREEN: Quality.NATURAL_GROWTH,
    FavoriteColor.YELLOW: Quality.BRIGHT_OPTIMISM,
    FavoriteColor.PURPLE: Quality.MYSTICAL_DEPTH,
    FavoriteColor.ORANGE: Quality.VIBRANT_ENTHUSIASM,
    FavoriteColor.PINK: Quality.GENTLE_COMPASSION,
    FavoriteColor.BLACK: Quality.MYSTERIOUS_DEPTH,
    FavoriteColor.WHITE: Quality.PURE_CLARITY,
    FavoriteColor.SILVER: Quality.REFINED_ELEGANCE,
    FavoriteColor.GOLD: Quality.NOBLE_EXCELLENCE,
    FavoriteColor.CYAN: Quality.FRESH_INNOVATION,
}

# Only the zodiac sentences come from the established narrative copy, where
# astral and colour qualities were echoed as bare phrases. Their sentences
# here are newer additions, so narratives for those inputs read differently
# from the earlier phrase-only text.
QUALITY_DESCRIPTIONS: Dict[Quality, str] = {
    Quality.CLEVER_ADAPTABILITY: (
        "Your mind moves like water, flowing around obstacles with ingenious "
        "solutions that others might miss. You see patterns where chaos seems to reign."
    ),
    Quality.PATIENT_STRENGTH: (
        "Like a mountain that has weathered countless storms, your resolve is "
        "unshakeable. You understand that true power comes not from haste, but "
        "from unwavering commitment."
    ),
    Quality.BOLD_COURAGE: (
        "You charge forward where others hesitate, your heart beating with the "
        "rhythm of adventure. Fear is but a whisper you choose to ignore."
    ),
    Quality.GENTLE_WISDOM: (
        "Your knowledge flows like a gentle stream, nurturing growth in yourself "
        "and others. You see the beauty in quiet moments of understanding."
    ),
    Quality.MAJESTIC_POWER: (
        "There is a regal quality to your presence, a natural authority that "
        "commands respect. You carry yourself with the dignity of ancient royalty."
    ),
    Quality.MYSTERIOUS_INSIGHT: (
        "You peer into the depths where others see only surface, uncovering "
        "truths hidden in shadow. Your intuition is a compass pointing toward "
        "hidden knowledge."
    ),
    Quality.FREE_SPIRITED_ENERGY: (
        "Your soul dances to a rhythm all its own, unbound by convention. You find "
        "freedom in movement, in exploration, in the endless possibilities of the horizon."
    ),
    Quality.CREATIVE_HARMONY: (
        "You weave together disparate threads into something beautiful, finding "
        "balance where others see conflict. Your creativity is a bridge between worlds."
    ),
    Quality.PLAYFUL_INTELLIGENCE: (
        "Your mind is a playground of ideas, where serious concepts dance with "
        "whimsy. You solve problems with a smile, making the complex seem simple."
    ),
    Quality.PRECISE_CONFIDENCE: (
        "Every action is measured, every word chosen with care. You move through "
        "the world with the certainty of a master craftsman, knowing exactly where "
        "each piece fits."
    ),
    Quality.LOYAL_DETERMINATION: (
        "Your commitment runs deep, a bond that time cannot erode. You stand by "
        "those you care for with the steadfastness of an ancient oak."
    ),
    Quality.GENEROUS_CONTENTMENT: (
        "You find joy in giving, in sharing the abundance of your spirit. Your "
        "happiness multiplies when shared, creating ripples of warmth around you."
    ),
    Quality.FIERY_DETERMINATION: (
        "A flame burns at your core that no setback can smother. Once you set "
        "your sights on a goal, you pursue it with relentless heat."
    ),
    Quality.CELESTIAL_PATIENCE: (
        "You move with the slow certainty of the stars, trusting that every "
        "season arrives in its time. Your calm is a quiet kind of strength."
    ),
    Quality.DUAL_CREATIVITY: (
        "Two minds seem to live within you, each sparking ideas off the other. "
        "You see every problem from both sides and invent answers in between."
    ),
    Quality.NURTURING_INTUITION: (
        "You sense what others need before they say a word. Those around you "
        "grow stronger simply by being in your care."
    ),
    Quality.RADIANT_LEADERSHIP: (
        "You shine at the centre of every gathering, and others rally to your "
        "light. Where you lead, confidence follows."
    ),
    Quality.METICULOUS_PERFECTION: (
        "No detail escapes your notice. You polish every plan until it gleams, "
        "leaving nothing to chance."
    ),
    Quality.BALANCED_HARMONY: (
        "You hold opposing forces in gentle equilibrium, weighing every choice "
        "with fairness. Peace follows in your footsteps."
    ),
    Quality.INTENSE_TRANSFORMATION: (
        "You are forever remaking yourself, emerging stronger from every trial. "
        "Change does not frighten you; it fuels you."
    ),
    Quality.ADVENTUROUS_FREEDOM: (
        "The open road calls to you louder than any comfort. You chase the "
        "horizon for the joy of seeing what lies beyond it."
    ),
    Quality.AMBITIOUS_DISCIPLINE: (
        "You climb steadily toward the summit, one deliberate step at a time. "
        "Your discipline turns distant dreams into certain outcomes."
    ),
    Quality.INNOVATIVE_VISION: (
        "You see the world not as it is but as it could be. Your ideas arrive "
        "ahead of their time, waiting for everyone else to catch up."
    ),
    Quality.DREAMY_EMPATHY: (
        "You feel the currents of every heart around you as if they were your "
        "own. Your dreams are wide enough to hold them all."
    ),
    Quality.PASSIONATE_INTENSITY: (
        "Everything you do burns bright and fierce. You pour your whole heart "
        "into every moment, and the world feels your warmth."
    ),
    Quality.CALM_WISDOM: (
        "Like a still lake reflecting the sky, your clarity steadies those "
        "around you. You answer storms with quiet understanding."
    ),
    Quality.NATURAL_GROWTH: (
        "You flourish the way a forest does, patiently and in every direction. "
        "Each experience becomes another ring in your strength."
    ),
    Quality.BRIGHT_OPTIMISM: (
        "You carry sunlight into every room. Even on the darkest path, you are "
        "the first to spot the dawn."
    ),
    Quality.MYSTICAL_DEPTH: (
        "There is more to you than meets the eye, layers of meaning that unfold "
        "slowly. Others sense a quiet magic in your presence."
    ),
    Quality.VIBRANT_ENTHUSIASM: (
        "Your energy is contagious, lifting everyone who crosses your path. You "
        "greet each challenge as the start of a new adventure."
    ),
    Quality.GENTLE_COMPASSION: (
        "Kindness is your natural language. You soften hard moments and make "
        "room for everyone to belong."
    ),
    Quality.MYSTERIOUS_DEPTH: (
        "You keep your own counsel, and your silences speak volumes. Beneath "
        "your calm surface lies a depth few ever fully see."
    ),
    Quality.PURE_CLARITY: (
        "You see straight to the heart of things, untroubled by noise. Your "
        "honesty is a lantern others steer by."
    ),
    Quality.REFINED_ELEGANCE: (
        "Grace marks everything you touch. You solve problems with a poise that "
        "makes difficult things look effortless."
    ),
    Quality.NOBLE_EXCELLENCE: (
        "You hold yourself to the highest standard and meet it. Your "
        "achievements carry the quiet weight of true nobility."
    ),
    Quality.FRESH_INNOVATION: (
        "You bring a new breeze to old ideas, seeing possibilities others "
        "overlooked. Wherever you go, things start to change for the better."
    ),
}


def zodiac_quality(sign: ZodiacSign) -> Quality:
    return ZODIAC_QUALITIES[sign]


def astral_quality(sign: AstralSign) -> Quality:
    return ASTRAL_QUALITIES[sign]


def color_quality(color: FavoriteColor) -> Quality:
    return COLOR_QUALITIES[color]


def describe_quality(quality: Quality) -> str:
    return QUALITY_DESCRIPTIONS[quality]


E = TypeVar("E", bound=Enum)


def _parse_choice(enum_cls: Type[E], value: Optional[str], field_name: str) -> Optional[E]:
    """Parse a form value into *enum_cls*; blank means unset."""
    if value is None or not str(value).strip():
        return None
    text = str(value).strip()
    for member in enum_cls:
        if member.value.lower() == text.lower():
            return member
    raise ValidationError(f"Unknown {field_name} value: {text!r}")


@dataclass(frozen=True)
class PersonalityInputs:
    """The three personality selections supplied with an assessment request."""

    zodiac: Optional[ZodiacSign] = None
    astral: Optional[AstralSign] = None
    color: Optional[FavoriteColor] = None

    @classmethod
    def from_strings(
        cls,
        zodiac: Optional[str] = None,
        astral: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "PersonalityInputs":
        """Build from raw form values (case-insensitive).

        Raises:
            ValidationError: If a non-blank value is not in its vocabulary.
        """
        return cls(
            zodiac=_parse_choice(ZodiacSign, zodiac, "zodiac"),
            astral=_parse_choice(AstralSign, astral, "astral sign"),
            color=_parse_choice(FavoriteColor, color, "color"),
        )

    def missing_fields(self) -> List[str]:
        missing = []
        if self.zodiac is None:
            missing.append("zodiac")
        if self.astral is None:
            missing.append("astral")
        if self.color is None:
            missing.append("color")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def qualities(self) -> List[Quality]:
        """Resolved qualities in zodiac, astral, colour order; unset inputs skipped."""
        resolved = []
        if self.zodiac is not None:
            resolved.append(zodiac_quality(self.zodiac))
        if self.astral is not None:
            resolved.append(astral_quality(self.astral))
        if self.color is not None:
            resolved.append(color_quality(self.color))
        return resolved
