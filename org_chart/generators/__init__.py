"""Org chart generators."""

from org_chart.generators.org_tree_generator import (
    NodeBudget,
    OrgTreeGenerator,
    generate_org_chart,
)

__all__ = [
    "NodeBudget",
    "OrgTreeGenerator",
    "generate_org_chart",
]
