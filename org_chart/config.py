"""
Configuration for org chart generation.

Centralizes generation parameters (node budget, depth, seed) and
output paths. Service-level settings read from the environment live in
settings/config.py and feed their defaults into GenerationConfig.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Relative to the working directory, like the --output default
DATA_DIR = Path("data")

DEFAULT_NODE_BUDGET = 10000
DEFAULT_MAX_LEVEL = 8

# Generation recurses once per level; keep well under the interpreter limit
MAX_SUPPORTED_LEVEL = 64

# Nodes at this level or nearer the root are managerial
MANAGERIAL_MAX_LEVEL = 5


@dataclass
class GenerationConfig:
    """Bounds and randomness for one generator instance.

    Usage:
        # Defaults: 10,000 node budget, 8 levels below the root
        config = GenerationConfig()

        # Reproducible, smaller chart
        config = GenerationConfig(node_budget=500, seed=42)
    """
    node_budget: int = DEFAULT_NODE_BUDGET
    max_level: int = DEFAULT_MAX_LEVEL
    seed: Optional[int] = None

    def __post_init__(self):
        if self.node_budget < 1:
            raise ValueError(f"node_budget must be at least 1, got {self.node_budget}")
        if not 0 <= self.max_level <= MAX_SUPPORTED_LEVEL:
            raise ValueError(
                f"max_level must be between 0 and {MAX_SUPPORTED_LEVEL}, got {self.max_level}"
            )

    @classmethod
    def from_settings(cls, settings=None, **overrides) -> "GenerationConfig":
        """Build a config from service settings, letting explicit values win."""
        if settings is None:
            from settings.config import get_settings
            settings = get_settings()
        values = {
            "node_budget": settings.node_budget,
            "max_level": settings.max_level,
            "seed": settings.seed,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass
class OutputConfig:
    """Output file paths for generated charts."""
    base_dir: Path = field(default_factory=lambda: DATA_DIR)

    @property
    def tree_file(self) -> Path:
        return self.base_dir / "org_chart.json"

    @property
    def rows_file(self) -> Path:
        return self.base_dir / "org_chart_rows.json"
