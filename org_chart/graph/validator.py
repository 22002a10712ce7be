"""
Org chart integrity validation.

Walks a generated tree and counts violations of its structural rules:
- node count within the budget, depth within the maximum level
- every child exactly one level below its parent
- managerial flag matching the level (headcount totals are enforced by
  Headcount itself)
- job function consistent with the department lookup
- no children below the maximum level

Duplicate ids are reported but tolerated, since ids are random tokens.
"""

import logging
from collections import Counter
from typing import Any, Dict

from org_chart import catalog
from org_chart.config import DEFAULT_MAX_LEVEL, DEFAULT_NODE_BUDGET, MANAGERIAL_MAX_LEVEL
from org_chart.models.org_node import OrgNode

logger = logging.getLogger(__name__)


class TreeValidator:
    """Validates org chart integrity."""

    def __init__(self, node_budget: int = DEFAULT_NODE_BUDGET, max_level: int = DEFAULT_MAX_LEVEL):
        self.node_budget = node_budget
        self.max_level = max_level

    def validate(self, root: OrgNode) -> Dict[str, Any]:
        """Run all checks and return a report."""
        node_count = 0
        max_depth = 0
        level_mismatches = 0
        managerial_mismatches = 0
        job_function_mismatches = 0
        children_past_max_level = 0
        id_counts: Counter = Counter()

        root_ok = root.level == 0 and root.headcount == catalog.FIXED_HEADCOUNT

        for node in root.iter_nodes():
            node_count += 1
            max_depth = max(max_depth, node.level)
            id_counts[node.id] += 1

            if node.is_managerial != (node.level <= MANAGERIAL_MAX_LEVEL):
                managerial_mismatches += 1
            expected_id = catalog.job_function_id_for_department(node.department)
            if node.job_function.job_function_id != expected_id:
                job_function_mismatches += 1
            if node.level >= self.max_level and node.children:
                children_past_max_level += 1
            level_mismatches += sum(1 for child in node.children if child.level != node.level + 1)

        duplicate_ids = sum(count - 1 for count in id_counts.values() if count > 1)
        within_budget = node_count <= self.node_budget

        report = {
            "node_count": node_count,
            "max_depth": max_depth,
            "root_ok": root_ok,
            "within_budget": within_budget,
            "level_mismatches": level_mismatches,
            "managerial_mismatches": managerial_mismatches,
            "job_function_mismatches": job_function_mismatches,
            "children_past_max_level": children_past_max_level,
            "duplicate_ids": duplicate_ids,
            "is_valid": (
                root_ok
                and within_budget
                and max_depth <= self.max_level
                and level_mismatches == 0
                and managerial_mismatches == 0
                and job_function_mismatches == 0
                and children_past_max_level == 0
            ),
        }

        logger.info(f"Validation report: {report}")
        return report
