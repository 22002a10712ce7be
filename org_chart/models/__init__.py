"""Org chart data models."""

from org_chart.models.org_node import OrgNode, JobFunction, Headcount

__all__ = [
    "OrgNode",
    "JobFunction",
    "Headcount",
]
