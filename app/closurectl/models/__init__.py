"""Data models for closurectl.

This module exports the core data structures used throughout the application.
"""

from closurectl.models.closure import (
    ClosureResult,
    DependencyEdge,
    EdgeKind,
    NodeStatus,
    NormalizedPath,
    Seed,
    SeedKind,
)

__all__ = [
    "ClosureResult",
    "DependencyEdge",
    "EdgeKind",
    "NodeStatus",
    "NormalizedPath",
    "Seed",
    "SeedKind",
]
