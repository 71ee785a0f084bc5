"""Random quote selection."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import Quote


def pick_random_quote(
    quotes: Sequence[Quote],
    *,
    rng: random.Random | None = None,
) -> Quote | None:
    if not quotes:
        return None
    return (rng or random).choice(quotes)
