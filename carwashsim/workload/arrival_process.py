"""Per-minute car arrival modeling."""

from typing import Optional

import numpy as np

from ..utils.logger import setup_logger

# Maps a uniform draw from {0, 1, 2, 3} to the number of arriving cars:
# half of all minutes see no car, a quarter one car, a quarter two cars.
ARRIVALS_BY_DRAW = (0, 0, 1, 2)


class ArrivalProcess:
    """Discrete arrival distribution sampled once per minute.

    The generator is created once and keeps advancing across calls, so
    consecutive simulation runs continue the same random stream.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize arrival process.

        Args:
            seed: Random seed, or None to seed from OS entropy
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.logger = setup_logger(self.__class__.__name__)
        self.logger.debug(f"Arrival process seeded with {seed!r}")

    def arrivals_this_minute(self) -> int:
        """Draw the number of cars arriving in the current minute.

        Returns:
            0, 1 or 2
        """
        draw = int(self.rng.integers(0, len(ARRIVALS_BY_DRAW)))
        return ARRIVALS_BY_DRAW[draw]
