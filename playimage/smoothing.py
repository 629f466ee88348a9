"""
playimage.smoothing - Forward moving-average filter.

Pipeline Stage 3. Each value becomes the truncated mean of itself and the
next depth - 1 values of the original sequence. The last `depth` values
have no full window and are left untouched.
"""

from __future__ import annotations

from collections.abc import Sequence


class SmoothingFilter:
    """Forward-looking moving average with integer truncation."""

    def __init__(self, depth: int = 4) -> None:
        if depth < 1:
            raise ValueError(f"Filter depth must be at least 1, got {depth}")
        self.depth = depth

    def apply(self, values: Sequence[int]) -> list[int]:
        """Smooth a sequence without mutating it.

        Args:
            values: Non-negative integer samples

        Returns:
            New list of the same length
        """
        original = list(values)
        smoothed = list(original)
        for i in range(len(original) - self.depth):
            window = original[i : i + self.depth]
            # truncate, do not round
            smoothed[i] = int(sum(window) / self.depth)
        return smoothed
