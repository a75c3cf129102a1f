"""
Dashboard, overview and reports endpoint tests
"""
import pytest

from conftest import by_sku


class TestRoot:
    def test_root(self, client):
        response = client.get("/api/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"


class TestDashboardStats:
    """Tests for GET /api/stats/dashboard"""

    def test_summary_cards(self, client):
        data = client.get("/api/stats/dashboard").json()
        assert data == {
            "total_items": 4,
            "total_value": 7819.19,
            "category_count": 3,
            "low_stock_count": 2,
        }
        print(f"✓ Dashboard stats: {data}")

    def test_summary_recomputed_after_mutation(self, client, store):
        item = by_sku(store.list(), "WH-001")
        client.delete(f"/api/stock/{item.id}")
        data = client.get("/api/stats/dashboard").json()
        assert data["total_items"] == 3
        assert data["total_value"] == pytest.approx(3319.64)

    def test_empty_store(self, client, store):
        store.clear()
        data = client.get("/api/stats/dashboard").json()
        assert data["total_items"] == 0
        assert data["total_value"] == 0


class TestOverview:
    """Tests for GET /api/stats/overview"""

    def test_low_stock_alerts(self, client):
        data = client.get("/api/stats/overview").json()
        assert [i["sku"] for i in data["low_stock_alerts"]] == ["OC-002", "BS-004"]
        assert data["high_stock_items"] == []

    def test_stock_levels(self, client):
        levels = client.get("/api/stats/overview").json()["stock_levels"]
        headphones = levels[0]
        assert headphones["fill_percent"] == 45.0
        assert headphones["is_low"] is False

    def test_zero_max_stock_level(self, client, store):
        store.add({"name": "Sample", "sku": "SM-1", "category": "Other", "quantity": 3})
        levels = client.get("/api/stats/overview").json()["stock_levels"]
        assert levels[-1]["fill_percent"] == 0.0
        assert levels[-1]["progress"] == 0.0
        assert levels[-1]["is_high"] is True

    def test_category_distribution(self, client):
        data = client.get("/api/stats/overview").json()
        assert data["category_distribution"] == {"Electronics": 2, "Furniture": 1, "Accessories": 1}

    def test_recent_updates(self, client):
        recent = client.get("/api/stats/overview").json()["recent_updates"]
        assert [i["sku"] for i in recent] == ["LS-003", "WH-001", "OC-002", "BS-004"]


class TestReports:
    """Tests for GET /api/reports"""

    def test_summary(self, client):
        summary = client.get("/api/reports").json()["summary"]
        assert summary["total_value"] == 7819.19
        assert summary["average_stock_level"] == 20
        assert summary["category_count"] == 3

    def test_top_value_items(self, client):
        top = client.get("/api/reports").json()["top_value_items"]
        assert [i["total_value"] for i in top] == [4499.55, 1999.92, 919.77, 399.95]

    def test_category_data(self, client):
        data = client.get("/api/reports").json()
        rows = data["category_data"]
        assert [r["category"] for r in rows] == ["Electronics", "Furniture", "Accessories"]
        assert rows[0]["value"] == 4899.5
        assert rows[0]["color"] == "#0088FE"
        assert sum(r["count"] for r in rows) == 4
        assert [r["category"] for r in data["category_values"]] == ["Electronics", "Furniture", "Accessories"]

    def test_stock_level_series(self, client):
        series = client.get("/api/reports").json()["stock_levels"]
        assert series[3] == {"name": "Bluetooth Speaker", "quantity": 5, "min_stock": 12, "max_stock": 60}

    def test_empty_store(self, client, store):
        """Average on an empty store is the 0 sentinel, not an error"""
        store.clear()
        response = client.get("/api/reports")
        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["average_stock_level"] == 0.0
        assert data["top_value_items"] == []
        assert data["category_data"] == []

    def test_stock_level_chart_capped_at_six(self, client, store):
        """The bar chart only plots the first six items"""
        for n in range(4):
            store.add({"name": f"Extra {n}", "sku": f"EX-{n}", "category": "Other"})
        series = client.get("/api/reports").json()["stock_levels"]
        assert len(series) == 6
        assert series[-1]["name"] == "Extra 1"

    def test_average_in_whole_units(self, client, store):
        store.add({"name": "Bolts", "sku": "BT-1", "category": "Tools", "quantity": 100})
        summary = client.get("/api/reports").json()["summary"]
        assert summary["average_stock_level"] == 36
        assert isinstance(summary["average_stock_level"], int)
