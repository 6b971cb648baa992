"""Fixed-capacity history of signed power samples."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class PowerHistory:
    """Oldest-first FIFO of power samples with running extrema.

    Once ``capacity`` samples are held, every push evicts exactly the
    oldest one. ``max_value``/``min_value`` track the current contents and
    are 0.0 while the buffer is empty.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._values: deque[float] = deque()
        self.max_value = 0.0
        self.min_value = 0.0

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"PowerHistory(capacity={self.capacity}, values={list(self._values)!r})"

    @property
    def upper_index(self) -> int:
        return self.capacity - 1

    @property
    def is_full(self) -> bool:
        return len(self._values) >= self.capacity

    def values(self) -> list[float]:
        """Return a copy of the samples, oldest first."""
        return list(self._values)

    def push(self, value: float) -> None:
        """Append a sample, evicting the oldest one when full."""
        if len(self._values) >= self.capacity:
            self._values.popleft()
        self._values.append(value)
        self.recompute_aggregates()

    def recompute_aggregates(self) -> None:
        """Rescan the contents for max and min.

        Unordered comparisons (NaN) count as ties and never raise. Ties
        resolve to the later sample for the max and the earlier one for the
        min, so a NaN is displaced as max by whatever follows it but kept as
        min once chosen.
        """
        if not self._values:
            self.max_value = 0.0
            self.min_value = 0.0
            return

        it = iter(self._values)
        hi = lo = next(it)
        for value in it:
            if not value < hi:
                hi = value
            if value < lo:
                lo = value
        self.max_value = hi
        self.min_value = lo

    def project_to_grid(self) -> list[tuple[float, float]]:
        """Return chart points, newest first.

        The k-th newest sample is placed at ``x = capacity - 1 - k`` so the
        latest reading is always at the right edge and history scrolls left.
        """
        upper = self.upper_index
        return [
            (float(upper - idx), value)
            for idx, value in enumerate(reversed(self._values))
        ]

    @property
    def front(self) -> float:
        """Oldest retained sample (0.0 when empty)."""
        return self._values[0] if self._values else 0.0

    @property
    def back(self) -> float:
        """Newest sample (0.0 when empty)."""
        return self._values[-1] if self._values else 0.0

    @property
    def average(self) -> float:
        """Mean of the retained samples (0.0 when empty)."""
        if not self._values:
            return 0.0
        return sum(self._values) / len(self._values)
