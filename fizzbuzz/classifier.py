"""FizzBuzz labels with data-driven rules."""

from __future__ import annotations

from .constants import BUZZ_DIVISOR, BUZZ_LABEL, FIZZ_DIVISOR, FIZZ_LABEL

RULES: tuple[tuple[int, str], ...] = ((FIZZ_DIVISOR, FIZZ_LABEL), (BUZZ_DIVISOR, BUZZ_LABEL))


def classify(index: int) -> str:
    """Return the FizzBuzz label for ``index``.

    Multiples of 3 become "fizz", multiples of 5 become "buzz", and
    multiples of both become "fizzbuzz". Any other integer, negative ones
    included, becomes its decimal string.
    """
    word = "".join(text for divisor, text in RULES if index % divisor == 0)
    return word if word else str(index)
