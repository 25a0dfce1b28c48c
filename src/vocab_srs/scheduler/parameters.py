"""Numeric tuning for the SM-2 scheduler."""

from pydantic import BaseModel, Field

__all__ = [
    "DEFAULT_PARAMETERS",
    "SM2Parameters",
]


class SM2Parameters(BaseModel, frozen=True):
    """Constants of the SM-2 scheduling policy.

    Attributes:
        initial_ease_factor: Ease factor of a never-reviewed word
        min_ease_factor: Floor for the ease factor on every path
        failure_ease_penalty: Ease factor decrease on an Again rating
        first_interval_days: Interval after the first success (and after a failure)
        second_interval_days: Interval after the second consecutive success
        hard_interval_multiplier: One-shot interval modifier for Hard
        easy_interval_multiplier: One-shot interval modifier for Easy
        max_interval_days: Hard cap on any interval
    """

    initial_ease_factor: float = Field(default=2.5, gt=0)
    min_ease_factor: float = Field(default=1.3, gt=0)
    failure_ease_penalty: float = Field(default=0.2, ge=0)
    first_interval_days: int = Field(default=1, ge=1)
    second_interval_days: int = Field(default=6, ge=1)
    hard_interval_multiplier: float = Field(default=0.7, gt=0)
    easy_interval_multiplier: float = Field(default=1.3, gt=0)
    max_interval_days: int = Field(default=365, ge=1)


DEFAULT_PARAMETERS = SM2Parameters()
