"""
Org tree generator.

Builds a bounded random org chart: level-dependent branching,
headcount and titles, with a node budget shared by the whole tree.

Root (CEO) -> C-suite -> VPs -> Directors -> Managers -> Leads -> ... -> Junior staff

The budget is a per-call object threaded through the recursion, so a
generator holds no state between runs beyond its random source.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from org_chart import catalog
from org_chart.config import MANAGERIAL_MAX_LEVEL, GenerationConfig
from org_chart.generators.base_generator import BaseGenerator
from org_chart.models.org_node import Headcount, OrgNode

logger = logging.getLogger(__name__)


# Children per node: (min, max) inclusive
TOP_BRANCHING: Tuple[int, int] = (2, 4)
LOWER_BRANCHING: Tuple[int, int] = (1, 6)
# Levels below this use TOP_BRANCHING
TOP_BRANCHING_LEVELS = 2


@dataclass
class NodeBudget:
    """Nodes left to produce in one generation run."""
    limit: int
    used: int = 0

    @property
    def remaining(self) -> int:
        return max(self.limit - self.used, 0)

    @property
    def exhausted(self) -> bool:
        return self.used >= self.limit

    def consume(self) -> None:
        self.used += 1


def branching_range(level: int) -> Tuple[int, int]:
    """Uncapped (min, max) children for a node at `level`."""
    return TOP_BRANCHING if level < TOP_BRANCHING_LEVELS else LOWER_BRANCHING


def capped_branching_range(level: int, max_level: int, remaining: int) -> Tuple[int, int]:
    """Branching range with the upper bound capped by the remaining budget.

    The cap spreads what is left over the levels still to build. When it
    drops below the lower bound the range collapses to [cap, cap].
    """
    low, high = branching_range(level)
    cap = remaining // (max_level - level)
    high = min(high, cap)
    if high < low:
        return high, high
    return low, high


class OrgTreeGenerator(BaseGenerator):
    """Generates a random org chart within a node budget."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GenerationConfig()
        super().__init__(seed=self.config.seed, rng=rng)

    def generate(self) -> OrgNode:
        """Build one org chart and return its root."""
        start = time.time()
        budget = NodeBudget(limit=self.config.node_budget)
        root = self._build_node(0, self.config.max_level, budget)
        logger.info(
            f"Generated org chart: {budget.used} nodes "
            f"(budget {budget.limit}, max level {self.config.max_level}) "
            f"in {time.time() - start:.3f}s"
        )
        return root

    def _build_node(self, level: int, max_level: int, budget: NodeBudget) -> Optional[OrgNode]:
        """Build a node and its subtree. Returns None once the budget is spent."""
        if budget.exhausted:
            return None

        department = self.pick(catalog.DEPARTMENTS)
        node_id = self.make_id()
        name = self._random_name()
        position = self.pick(catalog.titles_for_level(level))
        job_function = catalog.job_function_for_department(department)
        headcount = self._headcount_for_level(level)

        budget.consume()

        children: List[OrgNode] = []
        if level < max_level and not budget.exhausted:
            low, high = capped_branching_range(level, max_level, budget.remaining)
            num_children = self.draw_between(low, high)
            for _ in range(num_children):
                if budget.exhausted:
                    logger.debug(
                        f"Budget exhausted at level {level}: built "
                        f"{len(children)}/{num_children} children"
                    )
                    break
                child = self._build_node(level + 1, max_level, budget)
                if child is not None:
                    children.append(child)

        return OrgNode(
            id=node_id,
            name=name,
            position=position,
            department=department,
            job_function=job_function,
            headcount=headcount,
            level=level,
            is_managerial=level <= MANAGERIAL_MAX_LEVEL,
            children=tuple(children),
        )

    def _random_name(self) -> str:
        return f"{self.pick(catalog.FIRST_NAMES)} {self.pick(catalog.LAST_NAMES)}"

    def _headcount_for_level(self, level: int) -> Headcount:
        if level <= catalog.FIXED_HEADCOUNT_MAX_LEVEL:
            return catalog.FIXED_HEADCOUNT
        active, inactive, open_ = catalog.headcount_range_for_level(level)
        return Headcount.of(
            active=self.draw_below(active),
            inactive=self.draw_below(inactive),
            open=self.draw_below(open_),
        )


def generate_org_chart(config: Optional[GenerationConfig] = None) -> OrgNode:
    """Generate an org chart with a fresh generator."""
    return OrgTreeGenerator(config).generate()
