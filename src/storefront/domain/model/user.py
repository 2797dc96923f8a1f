"""User record as seen by the ordering core.

Account management lives elsewhere; carts and orders only need an id,
a display name, the email used for lookups and a default address.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    id: int | None
    username: str
    email: str
    address: str | None = None
