"""
API Tests for the Org Chart service.

Tests for the REST API endpoints:
- GET /org-chart - Nested tree
- GET /org-chart/rows - Flattened grid rows
- GET /org-chart/summary - Statistics and validation report
- GET /health - Health check

Run with:
    pytest tests/test_api.py -v
"""

from unittest.mock import patch

from fastapi.testclient import TestClient


# ============================================================================
# Health Endpoint Tests
# ============================================================================

class TestHealthEndpoint:
    """Tests for / and /health."""

    def test_root_returns_message(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert "running" in response.json()["message"]

    def test_health_check_returns_healthy(self, client: TestClient):
        response = client.get("/health")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert "timestamp" in data


# ============================================================================
# Org Chart Endpoint Tests
# ============================================================================

class TestOrgChartEndpoint:
    """Tests for /org-chart."""

    def test_returns_tree(self, client: TestClient):
        response = client.get("/org-chart", params={"seed": 3})
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "success"
        assert data["data"]["level"] == 0
        assert data["data"]["headcount"] == {"active": 1, "inactive": 0, "open": 0, "total": 1}
        assert isinstance(data["data"]["children"], list)

    def test_uses_camel_case_keys(self, client: TestClient):
        node = client.get("/org-chart", params={"seed": 3}).json()["data"]

        assert "jobFunction" in node
        assert "jobFunctionId" in node["jobFunction"]
        assert "isManagerial" in node

    def test_same_seed_same_tree(self, client: TestClient):
        first = client.get("/org-chart", params={"seed": 5}).json()
        second = client.get("/org-chart", params={"seed": 5}).json()
        assert first == second

    def test_respects_configured_budget(self, client: TestClient):
        node = client.get("/org-chart", params={"seed": 1}).json()["data"]

        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(current["children"])
        assert count <= 300

    def test_invalid_seed_rejected(self, client: TestClient):
        response = client.get("/org-chart", params={"seed": "abc"})
        assert response.status_code == 422

    def test_generation_failure_returns_failure_body(self, client: TestClient):
        with patch("api.org_chart.OrgTreeGenerator.generate", side_effect=RuntimeError("boom")):
            response = client.get("/org-chart")
        data = response.json()

        assert response.status_code == 500
        assert data["status"] == "failure"
        assert data["data"] is None
        assert "boom" in data["errors"][0]


# ============================================================================
# Rows Endpoint Tests
# ============================================================================

class TestRowsEndpoint:
    """Tests for /org-chart/rows."""

    def test_returns_rows(self, client: TestClient):
        response = client.get("/org-chart/rows", params={"seed": 4})
        data = response.json()

        assert response.status_code == 200
        assert data["total_count"] == len(data["data"]) <= 300
        assert data["data"][0]["parentId"] is None
        assert data["data"][0]["path"] == [data["data"][0]["name"]]

    def test_every_parent_precedes_its_children(self, client: TestClient):
        rows = client.get("/org-chart/rows", params={"seed": 4}).json()["data"]

        seen = set()
        for row in rows:
            if row["parentId"] is not None:
                assert row["parentId"] in seen
            seen.add(row["id"])


# ============================================================================
# Summary Endpoint Tests
# ============================================================================

class TestSummaryEndpoint:
    """Tests for /org-chart/summary."""

    def test_returns_summary_and_validation(self, client: TestClient):
        response = client.get("/org-chart/summary", params={"seed": 6})
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["seed"] == 6
        assert data["nodeCount"] <= 300
        assert data["maxDepth"] <= 8
        assert data["validation"]["isValid"] is True
        assert data["headcount"]["total"] >= 1

    def test_per_level_counts_add_up(self, client: TestClient):
        data = client.get("/org-chart/summary", params={"seed": 6}).json()["data"]
        assert sum(data["nodesPerLevel"].values()) == data["nodeCount"]
