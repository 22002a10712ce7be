"""
Org Chart - synthetic organizational hierarchy generator.

Builds a bounded random org chart for stress-testing grid UIs.

Architecture:
    - catalog.py: fixed seed data (names, departments, titles, headcount ranges)
    - models/: OrgNode, JobFunction, Headcount
    - generators/: recursive tree generator with a node budget
    - graph/: tree validation and aggregation
    - scripts/: command line entry points

Usage:
    from org_chart import generate_org_chart
    root = generate_org_chart()
"""

__version__ = "0.1.0"

from org_chart.config import GenerationConfig
from org_chart.generators.org_tree_generator import OrgTreeGenerator, generate_org_chart
from org_chart.models.org_node import OrgNode, JobFunction, Headcount

__all__ = [
    "GenerationConfig",
    "OrgTreeGenerator",
    "generate_org_chart",
    "OrgNode",
    "JobFunction",
    "Headcount",
]
