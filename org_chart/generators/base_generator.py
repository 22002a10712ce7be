"""
Base generator with seeded randomness.

All generators inherit from this. Provides:
- A per-instance random source (seedable for reproducible output)
- Sampling helpers that tolerate empty ranges
- Opaque id creation
- File I/O for generated data
"""

import json
import logging
import random
import string
from pathlib import Path
from typing import Any, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 11


class BaseGenerator:
    """Base class for all data generators."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self.rng = rng or random.Random(seed)

    def pick(self, items: Sequence[T]) -> T:
        """Choose one item uniformly."""
        return self.rng.choice(items)

    def draw_below(self, upper: int) -> int:
        """Uniform integer in [0, upper). A bound of zero or less yields 0."""
        if upper <= 0:
            return 0
        return self.rng.randrange(upper)

    def draw_between(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive."""
        return self.rng.randint(low, high)

    def make_id(self, length: int = ID_LENGTH) -> str:
        """Random base-36 token. Unique in practice, not guaranteed."""
        return "".join(self.rng.choice(ID_ALPHABET) for _ in range(length))

    @staticmethod
    def save_json(data: Any, path: Path) -> None:
        """Save data to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {path} ({len(data) if isinstance(data, list) else 1} items)")
