"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps the store-assigned integer id
    - DEFAULT_ID_CEILING is the largest id accepted on creation unless configured
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)

DEFAULT_ID_CEILING = 10_000
