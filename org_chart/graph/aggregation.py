"""
Bottom-up aggregation over a generated org chart.

Computes the figures a grid view shows next to the tree:
  node counts per level and per department, depth,
  headcount rolled up to the root and broken down per level,
  and a flattened row list (id, parentId, path) for tree-data grids.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from org_chart.models.org_node import Headcount, OrgNode

logger = logging.getLogger(__name__)


def count_nodes(root: OrgNode) -> int:
    return sum(1 for _ in root.iter_nodes())


def max_depth(root: OrgNode) -> int:
    return max(node.level for node in root.iter_nodes())


def nodes_per_level(root: OrgNode) -> Dict[int, int]:
    counts = Counter(node.level for node in root.iter_nodes())
    return dict(sorted(counts.items()))


def nodes_per_department(root: OrgNode) -> Dict[str, int]:
    counts = Counter(node.department for node in root.iter_nodes())
    return dict(counts.most_common())


def rollup_headcount(root: OrgNode) -> Headcount:
    """Sum of every headcount in the subtree under `root`, root included."""
    active = inactive = open_ = 0
    for node in root.iter_nodes():
        active += node.headcount.active
        inactive += node.headcount.inactive
        open_ += node.headcount.open
    return Headcount.of(active=active, inactive=inactive, open=open_)


def headcount_by_level(root: OrgNode) -> Dict[int, Dict[str, int]]:
    totals: Dict[int, Dict[str, int]] = {}
    for node in root.iter_nodes():
        bucket = totals.setdefault(node.level, {"active": 0, "inactive": 0, "open": 0, "total": 0})
        for key, value in node.headcount.to_dict().items():
            bucket[key] += value
    return dict(sorted(totals.items()))


def flatten(root: OrgNode) -> List[Dict[str, Any]]:
    """Pre-order grid rows. `path` holds names from the root down to the row."""
    rows: List[Dict[str, Any]] = []
    stack: List[tuple] = [(root, None, [])]
    while stack:
        node, parent_id, parent_path = stack.pop()
        path = parent_path + [node.name]
        rows.append({
            "id": node.id,
            "parentId": parent_id,
            "path": path,
            "name": node.name,
            "position": node.position,
            "department": node.department,
            "jobFunctionId": node.job_function.job_function_id,
            "function": node.job_function.function,
            "level": node.level,
            "isManagerial": node.is_managerial,
            "active": node.headcount.active,
            "inactive": node.headcount.inactive,
            "open": node.headcount.open,
            "total": node.headcount.total,
            "childCount": len(node.children),
        })
        for child in reversed(node.children):
            stack.append((child, node.id, path))
    return rows


def summarize(root: OrgNode, seed: Optional[int] = None) -> Dict[str, Any]:
    """Summary statistics for one chart."""
    summary = {
        "seed": seed,
        "node_count": count_nodes(root),
        "max_depth": max_depth(root),
        "leaf_count": sum(1 for node in root.iter_nodes() if node.is_leaf),
        "managerial_count": sum(1 for node in root.iter_nodes() if node.is_managerial),
        "nodes_per_level": nodes_per_level(root),
        "nodes_per_department": nodes_per_department(root),
        "headcount": rollup_headcount(root).to_dict(),
        "headcount_by_level": headcount_by_level(root),
    }
    logger.info(
        f"Summary: {summary['node_count']} nodes, depth {summary['max_depth']}, "
        f"headcount {summary['headcount']['total']}"
    )
    return summary
