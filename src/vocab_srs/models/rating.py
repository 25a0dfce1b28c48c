"""Review rating taxonomy for vocab_srs.

A rating is the learner's self-assessed recall quality for one review.
It is an ordinal with four fixed values; each value carries a label, a
presentation color and a SuperMemo quality score (0-5 scale).
"""

from enum import IntEnum, StrEnum

__all__ = [
    "Rating",
    "RatingColor",
    "color_of",
    "describe_outcome",
    "label_of",
    "parse_rating",
    "quality_of",
    "rating_from_key",
]


class Rating(IntEnum):
    """Recall rating for a completed review.

    Serialized as 0-3 at the UI boundary.
    """

    AGAIN = 0
    HARD = 1
    GOOD = 2
    EASY = 3


class RatingColor(StrEnum):
    """Semantic color token per rating, for presentation only."""

    RED = "red"
    ORANGE = "orange"
    GREEN = "green"
    BLUE = "blue"


_LABELS: dict[Rating, str] = {
    Rating.AGAIN: "Again",
    Rating.HARD: "Hard",
    Rating.GOOD: "Good",
    Rating.EASY: "Easy",
}

_COLORS: dict[Rating, RatingColor] = {
    Rating.AGAIN: RatingColor.RED,
    Rating.HARD: RatingColor.ORANGE,
    Rating.GOOD: RatingColor.GREEN,
    Rating.EASY: RatingColor.BLUE,
}

# SuperMemo quality (0-5) used by the ease factor formula
_QUALITY: dict[Rating, int] = {
    Rating.AGAIN: 0,
    Rating.HARD: 3,
    Rating.GOOD: 4,
    Rating.EASY: 5,
}

# Keyboard shortcuts "1".."4" in button order
_KEYS: dict[str, Rating] = {
    "1": Rating.AGAIN,
    "2": Rating.HARD,
    "3": Rating.GOOD,
    "4": Rating.EASY,
}

_OUTCOME_PHRASES: dict[Rating, str] = {
    Rating.AGAIN: "again",
    Rating.HARD: "with some difficulty",
    Rating.GOOD: "correctly",
    Rating.EASY: "easily",
}


def label_of(rating: Rating) -> str:
    """Get the human label for a rating."""
    return _LABELS[rating]


def color_of(rating: Rating) -> RatingColor:
    """Get the presentation color token for a rating."""
    return _COLORS[rating]


def quality_of(rating: Rating) -> int:
    """Map a rating to its SuperMemo quality score.

    Again -> 0, Hard -> 3, Good -> 4, Easy -> 5.
    """
    return _QUALITY[rating]


def rating_from_key(key: str) -> Rating | None:
    """Map a keyboard shortcut to a rating.

    Args:
        key: Pressed key, "1" to "4"

    Returns:
        The matching Rating, or None for any other key
    """
    return _KEYS.get(key.strip())


def parse_rating(value: "Rating | int | str") -> Rating:
    """Coerce a UI-boundary value into a Rating.

    Accepts a Rating, an integer 0-3, a numeric string, or a label
    (case-insensitive).

    Raises:
        ValueError: If the value does not name one of the four ratings
    """
    if isinstance(value, Rating):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid rating: {value!r}")
    if isinstance(value, int):
        try:
            return Rating(value)
        except ValueError:
            raise ValueError(f"Invalid rating: {value!r}") from None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return parse_rating(int(text))
        for rating, label in _LABELS.items():
            if label.lower() == text.lower():
                return rating
    raise ValueError(f"Invalid rating: {value!r}")


def describe_outcome(rating: Rating, interval_days: int) -> str:
    """Build the confirmation message shown after a review.

    Example:
        >>> describe_outcome(Rating.EASY, 4)
        'Recalled easily! Next review in 4 day(s).'
    """
    return f"Recalled {_OUTCOME_PHRASES[rating]}! Next review in {interval_days} day(s)."
