"""
IdGenerator - random unique id allocation with retry on collision.
"""

import logging
import random
from collections.abc import Callable

from academy_index.models.exceptions import IdSpaceExhaustedError


class IdGenerator:
    """
    Draws ids uniformly from [0, 10**digits) until one is free.

    The trees themselves never retry; collision handling lives here.
    """

    DEFAULT_DIGITS = 4
    DEFAULT_MAX_ATTEMPTS = 10_000

    def __init__(
        self,
        rng: random.Random | None = None,
        digits: int = DEFAULT_DIGITS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """
        Initialize the generator.

        Args:
            rng: Source of randomness; a fresh random.Random() if omitted.
            digits: Ids are drawn below 10**digits.
            max_attempts: Draws allowed before giving up.
        """
        if digits <= 0:
            raise ValueError(f"digits must be positive, got {digits}")
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self._rng = rng or random.Random()
        self._upper_bound = 10**digits
        self._max_attempts = max_attempts

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    def generate(self, exists: Callable[[int], bool]) -> int:
        """
        Draw an id for which exists() returns False.

        Args:
            exists: Predicate telling whether an id is already taken.

        Returns:
            A free id.

        Raises:
            IdSpaceExhaustedError: If every draw collided.
        """
        for attempt in range(1, self._max_attempts + 1):
            candidate = self._rng.randrange(self._upper_bound)
            if not exists(candidate):
                return candidate
            logging.warning(f"Id {candidate} already taken (attempt {attempt})")
        raise IdSpaceExhaustedError(self._max_attempts, self._upper_bound)
