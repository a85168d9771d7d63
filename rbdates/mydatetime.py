"""A simple calendar timestamp with 30-day months and field-wise ordering."""

from __future__ import annotations

import dataclasses
import functools
import sys
from dataclasses import dataclass


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


@functools.total_ordering
@dataclass(eq=False)
class MyDateTime:
    """A date and time of day, ordered by year, month, day, hour, minute, second.

    Incrementing and decrementing move by one day on a calendar where every
    month has 30 days. Field values are not validated.
    """

    day: int = 1
    month: int = 1
    year: int = 1970
    hour: int = 0
    minute: int = 0
    sec: int = 0

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.sec)

    def compare_to(self, other: MyDateTime) -> int:
        """Return -1, 0 or 1 as this moment is before, equal to or after ``other``."""
        for mine, theirs in zip(self._key(), other._key()):
            result = _sign(mine, theirs)
            if result:
                return result
        return 0

    def copy(self) -> MyDateTime:
        """Return an independent copy."""
        return dataclasses.replace(self)

    def increment(self) -> MyDateTime:
        """Advance by one day in place and return self."""
        self.day += 1
        if self.day > 30:
            self.month += 1
            self.day = 1
        if self.month > 12:
            self.year += 1
            self.month = 1
        return self

    def decrement(self) -> MyDateTime:
        """Go back by one day in place and return self."""
        self.day -= 1
        if self.day == 0:
            self.day = 30
            self.month -= 1
        if self.month == 0:
            self.month = 12
            self.year -= 1
        return self

    def post_increment(self) -> MyDateTime:
        """Advance by one day in place and return the value held before."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> MyDateTime:
        """Go back by one day in place and return the value held before."""
        previous = self.copy()
        self.decrement()
        return previous

    def formatted(self) -> str:
        """Return the zero-padded ``DD-MM-YYYY hh:mm:ss`` form."""
        return (
            f"{self.day:02d}-{self.month:02d}-{self.year:4d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.sec:02d}"
        )

    def print(self) -> None:
        """Write the padded form to standard output, followed by a blank line."""
        out = sys.stdout
        out.write(self.formatted())
        out.write("\n\n")
        out.flush()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MyDateTime):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MyDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return (
            f"{self.day}.{self.month}.{self.year} "
            f"{self.hour}:{self.minute}:{self.sec}"
        )