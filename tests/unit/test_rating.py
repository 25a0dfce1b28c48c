"""Unit tests for the rating taxonomy."""

import pytest

from vocab_srs.models.rating import (
    Rating,
    RatingColor,
    color_of,
    describe_outcome,
    label_of,
    parse_rating,
    quality_of,
    rating_from_key,
)


class TestRating:
    """Tests for Rating values and their attributes."""

    def test_wire_values(self) -> None:
        assert [r.value for r in Rating] == [0, 1, 2, 3]
        assert Rating.AGAIN < Rating.HARD < Rating.GOOD < Rating.EASY

    @pytest.mark.parametrize(
        ("rating", "label", "color", "quality"),
        [
            (Rating.AGAIN, "Again", RatingColor.RED, 0),
            (Rating.HARD, "Hard", RatingColor.ORANGE, 3),
            (Rating.GOOD, "Good", RatingColor.GREEN, 4),
            (Rating.EASY, "Easy", RatingColor.BLUE, 5),
        ],
    )
    def test_attributes(
        self, rating: Rating, label: str, color: RatingColor, quality: int
    ) -> None:
        assert label_of(rating) == label
        assert color_of(rating) == color
        assert quality_of(rating) == quality


class TestKeyboardShortcuts:
    """Tests for rating_from_key."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("1", Rating.AGAIN), ("2", Rating.HARD), ("3", Rating.GOOD), ("4", Rating.EASY)],
    )
    def test_known_keys(self, key: str, expected: Rating) -> None:
        assert rating_from_key(key) == expected

    @pytest.mark.parametrize("key", ["0", "5", " ", "a", "", "12"])
    def test_other_keys_ignored(self, key: str) -> None:
        assert rating_from_key(key) is None


class TestParseRating:
    """Tests for coercing UI values into ratings."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Rating.HARD, Rating.HARD),
            (0, Rating.AGAIN),
            (3, Rating.EASY),
            ("2", Rating.GOOD),
            (" 1 ", Rating.HARD),
            ("easy", Rating.EASY),
            ("AGAIN", Rating.AGAIN),
            ("Good", Rating.GOOD),
        ],
    )
    def test_valid_values(self, value: object, expected: Rating) -> None:
        assert parse_rating(value) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [-1, 4, "7", "perfect", "", True, None, 2.0])
    def test_invalid_values(self, value: object) -> None:
        with pytest.raises(ValueError, match="Invalid rating"):
            parse_rating(value)  # type: ignore[arg-type]


class TestDescribeOutcome:
    def test_messages(self) -> None:
        assert describe_outcome(Rating.EASY, 4) == "Recalled easily! Next review in 4 day(s)."
        assert describe_outcome(Rating.AGAIN, 1) == "Recalled again! Next review in 1 day(s)."
        assert describe_outcome(Rating.HARD, 1).startswith("Recalled with some difficulty!")
