"""Nesting depth limiting for recursion protection.

Every nugget-valued parameter (|||(((...)))) recurses once into a nested
zone and once into the nugget inside it. Adversarial input nested a few
hundred levels deep would otherwise overflow the Python stack.

Thread-safe: depth travels as an explicit immutable value, no thread-local
storage.
Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
import sys
from dataclasses import dataclass

from nuggetlex.constants import FRAMES_PER_NESTING_LEVEL, MAX_DEPTH, STACK_RESERVE_FRAMES

__all__ = ["NestingDepth", "depth_clamp", "stack_depth", "stack_headroom"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NestingDepth:
    """Immutable nesting depth tracker threaded through recursive parsing.

    Usage:
        depth = NestingDepth(max_depth=50)
        if depth.is_exceeded():
            ...  # fail safe
        inner = depth.enter()

    Attributes:
        max_depth: Maximum allowed nesting depth (default: MAX_DEPTH)
        current_depth: Current nesting depth (0 = top level)
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_exceeded(self) -> bool:
        """Check if entering one more level would exceed the limit."""
        return self.current_depth >= self.max_depth

    def enter(self) -> NestingDepth:
        """Create new tracker with incremented depth for a nested zone."""
        return NestingDepth(
            max_depth=self.max_depth,
            current_depth=self.current_depth + 1,
        )


def stack_depth() -> int:
    """Count the frames on the calling thread's stack."""
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = STACK_RESERVE_FRAMES,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs. The frames already on the caller's stack are not
    known yet; parsing narrows the limit again with stack_headroom().

    Args:
        requested_depth: Desired maximum nesting depth
        frames_per_level: Stack frames consumed by one nesting level
        reserve_frames: Stack frames to reserve for call overhead
            (default: STACK_RESERVE_FRAMES)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(300)
        >>> depth_clamp(50)  # OK, 100 frames fit
        50
        >>> depth_clamp(500)  # Exceeds limit, clamped to (300 - 100) // 2
        100
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // frames_per_level
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


def stack_headroom(
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = STACK_RESERVE_FRAMES,
) -> int:
    """Nesting levels that still fit on the calling thread's stack.

    Unlike depth_clamp(), accounts for the frames the caller has already
    used, so a parse started deep inside an application (or a test runner)
    stops nesting before the recursion limit is reached.

    Args:
        frames_per_level: Stack frames consumed by one nesting level
        reserve_frames: Stack frames to reserve above the deepest level

    Returns:
        Number of levels, never negative
    """
    free_frames = sys.getrecursionlimit() - stack_depth() - reserve_frames
    return max(0, free_frames // frames_per_level)
