"""Diffable core — the divergence report, the comparable contract and shape dispatch.

This package holds the whole comparison engine. It depends on the standard
library only: no typer, no yaml, no CLI or config concerns.
"""
from __future__ import annotations

from diffable.core.errors import DiffableError
from diffable.core.model import DiffableModel
from diffable.core.protocol import Diffable, is_diffable
from diffable.core.result import DiffableResult
from diffable.core.shapes import ValueShape, track

__all__ = [
    "Diffable",
    "DiffableError",
    "DiffableModel",
    "DiffableResult",
    "ValueShape",
    "is_diffable",
    "track",
]
