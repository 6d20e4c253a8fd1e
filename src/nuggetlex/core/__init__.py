"""Core utilities shared across the syntax and integration layers.

Exports:
    NestingDepth: Immutable nesting depth tracker
    depth_clamp: Clamp a depth limit against the Python recursion limit
    stack_depth: Number of frames on the calling thread's stack
    stack_headroom: Nesting levels left on the calling thread's stack

Python 3.13+.
"""

from .depth_guard import NestingDepth, depth_clamp, stack_depth, stack_headroom

__all__ = ["NestingDepth", "depth_clamp", "stack_depth", "stack_headroom"]
