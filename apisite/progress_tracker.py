"""Console progress bar over a known amount of work."""

import sys
from typing import TextIO

BAR_WIDTH = 50


class ProgressTracker:
    """Monotonic counter that redraws a text bar on every step."""

    def __init__(self, maximum: int, stream: TextIO | None = None) -> None:
        """Initialize the tracker with the total number of steps."""
        self.maximum = max(maximum, 1)
        self.value = 0
        self.stream = stream if stream is not None else sys.stderr

    def increment(self) -> None:
        """Advance by one step, never past the maximum."""
        if self.value < self.maximum:
            self.value += 1
        self._draw()

    @property
    def percent(self) -> int:
        return self.value * 100 // self.maximum

    def render(self) -> str:
        """Text form of the bar, e.g. ``[=====>    ]  42%``."""
        filled = self.value * BAR_WIDTH // self.maximum
        if filled < BAR_WIDTH:
            bar = "=" * filled + ">" + " " * (BAR_WIDTH - filled - 1)
        else:
            bar = "=" * BAR_WIDTH
        return f"[{bar}] {self.percent:3d}%"

    def _draw(self) -> None:
        end = "\n" if self.value >= self.maximum else ""
        print(f"\r{self.render()}", end=end, file=self.stream, flush=True)


class NullProgressTracker(ProgressTracker):
    """Counts steps without drawing anything."""

    def __init__(self, maximum: int = 1) -> None:
        """Initialize a silent tracker."""
        super().__init__(maximum, stream=sys.stderr)

    def _draw(self) -> None:
        pass
