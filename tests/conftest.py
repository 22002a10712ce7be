"""
Pytest configuration and shared fixtures for Org Chart tests.

This file provides:
- Generated charts (default size and small)
- A node factory for hand-built trees
- FastAPI test client with a small node budget
"""

import pytest
from typing import Generator

from org_chart import catalog
from org_chart.config import GenerationConfig
from org_chart.generators.org_tree_generator import OrgTreeGenerator
from org_chart.models.org_node import Headcount, OrgNode


# ============================================================================
# Generated Chart Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def default_tree() -> OrgNode:
    """Full-size chart with default budget and depth."""
    return OrgTreeGenerator(GenerationConfig(seed=1234)).generate()


@pytest.fixture
def small_config() -> GenerationConfig:
    """Small, reproducible generation config."""
    return GenerationConfig(node_budget=200, seed=42)


@pytest.fixture
def small_tree(small_config) -> OrgNode:
    """Small chart built from small_config."""
    return OrgTreeGenerator(small_config).generate()


# ============================================================================
# Hand-built Tree Fixtures
# ============================================================================

@pytest.fixture
def make_node():
    """Factory for consistent nodes; override any field by keyword."""
    counter = {"n": 0}

    def _make(level=0, department="Engineering", children=(), **overrides):
        counter["n"] += 1
        values = {
            "id": f"node{counter['n']}",
            "name": f"Person {counter['n']}",
            "position": catalog.titles_for_level(level)[0],
            "department": department,
            "job_function": catalog.job_function_for_department(department),
            "headcount": catalog.FIXED_HEADCOUNT if level <= 1 else Headcount.of(3, 1, 0),
            "level": level,
            "is_managerial": level <= 5,
            "children": tuple(children),
        }
        values.update(overrides)
        return OrgNode(**values)

    return _make


@pytest.fixture
def sample_tree(make_node) -> OrgNode:
    """Root -> two children -> one grandchild under the first child.

    CEO (Engineering, level 0)
    ├── level 1, Sales
    │   └── level 2, Legal, headcount 3/1/0
    └── level 1, Finance
    """
    grandchild = make_node(level=2, department="Legal")
    first = make_node(level=1, department="Sales", children=[grandchild])
    second = make_node(level=1, department="Finance")
    return make_node(level=0, department="Engineering", children=[first, second])


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def client(monkeypatch) -> Generator:
    """FastAPI test client; charts are capped at 300 nodes."""
    from fastapi.testclient import TestClient
    from settings.config import get_settings

    monkeypatch.setenv("ORG_CHART_NODE_BUDGET", "300")
    monkeypatch.delenv("DATADOG_API_KEY", raising=False)
    get_settings.cache_clear()

    from settings.server import org_chart_app

    with TestClient(org_chart_app) as test_client:
        yield test_client

    get_settings.cache_clear()
