"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry operator input from the CLI into the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the operator typed (product code + quantity)."""

    product_code: str
    quantity: int = 1
