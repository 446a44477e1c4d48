from __future__ import annotations

import enum


class Wrapping(enum.Enum):
    """Where to put the synthetic ``(last, first)`` pair, if anywhere.

    With :attr:`NONE` the result is one pair shorter than the input.
    The other two options close the loop, so the result has as many
    pairs as the input has elements.
    """

    NONE = 0
    "Doesn't wrap at all."
    LAST_FIRST = 1
    "The ``(last, first)`` pair comes before all others."
    FIRST_LAST = 2
    "The ``(last, first)`` pair comes after all others."

    @staticmethod
    def parse(wrapping: Wrapping | str | None) -> Wrapping:
        if wrapping is None:
            return Wrapping.NONE
        elif isinstance(wrapping, str):
            return Wrapping[wrapping.upper()]
        return Wrapping(wrapping)
