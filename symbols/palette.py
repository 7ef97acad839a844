"""
symbols/palette.py
Cyclic palette stream

Every color channel drawn by the generator comes from here. The cursor
is shared by all shapes of a run, so the color of object N depends only
on how many channels were drawn before it.
"""

from typing import Sequence, Tuple

from .config import COLOR_TRIPLETS


class PaletteCycler:
    """
    Fixed ordered sequence of channel values read with a wrapping cursor.

    Example:
        cycler = PaletteCycler((1, 2, 3, 4))
        [cycler.next() for _ in range(6)] -> [1, 2, 3, 4, 1, 2]
    """

    def __init__(self, values: Sequence[float] = COLOR_TRIPLETS, start: int = 0):
        if len(values) == 0:
            raise ValueError("Palette must contain at least one value")
        self._values: Tuple[float, ...] = tuple(values)
        self._cursor = start % len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> Tuple[float, ...]:
        return self._values

    @property
    def cursor(self) -> int:
        """Index of the value the next call returns."""
        return self._cursor

    def next(self) -> float:
        """Return the value under the cursor and advance it."""
        val = self._values[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._values)
        return float(val)

    def next_rgb(self) -> Tuple[float, float, float]:
        """Three successive values, in red, green, blue order."""
        r = self.next()
        g = self.next()
        b = self.next()
        return r, g, b
