from __future__ import annotations

from diffable.core import (
    Diffable,
    DiffableError,
    DiffableModel,
    DiffableResult,
    ValueShape,
    is_diffable,
    track,
)
from diffable.testing import assert_no_divergence

__version__ = "0.1.0"

__all__ = [
    "Diffable",
    "DiffableError",
    "DiffableModel",
    "DiffableResult",
    "ValueShape",
    "__version__",
    "assert_no_divergence",
    "is_diffable",
    "track",
]
