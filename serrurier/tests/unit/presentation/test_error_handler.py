"""
Unit tests for the route listing used in 404 responses.

Usage:
    python -m tests.unit.presentation.test_error_handler
    laborant serrurier --unit
"""

from types import SimpleNamespace

from fastapi.routing import APIRoute

from serrurier.presentation.api.middleware.error_handler import list_routes
from shared.tests import LaborantTest


async def _endpoint():
    return {}


class _WrappedRouter:
    """Router container that is not itself an APIRoute."""

    def __init__(self, routes):
        self.routes = routes


class TestListRoutes(LaborantTest):
    """Unit tests for list_routes."""

    component_name = "serrurier"
    test_category = "unit"

    def _request(self, routes):
        return SimpleNamespace(app=SimpleNamespace(routes=routes))

    def test_top_level_routes(self):
        """Test plain routes are listed once per method."""
        self.reporter.info("Testing top-level routes", context="Test")

        route = APIRoute("/wallet", _endpoint, methods=["POST", "DELETE"])

        assert list_routes(self._request([route])) == [
            "DELETE /wallet",
            "POST /wallet",
        ]

        self.reporter.info("Top-level routes listed", context="Test")

    def test_nested_routers_are_walked(self):
        """Test routes inside wrapped routers are listed."""
        self.reporter.info("Testing nested routers", context="Test")

        auth = APIRoute("/auth", _endpoint, methods=["POST"])
        connect = APIRoute("/wallet/connect", _endpoint, methods=["POST"])
        metrics = APIRoute("/metrics", _endpoint, methods=["GET"])

        routes = list_routes(
            self._request(
                [
                    _WrappedRouter([auth]),
                    _WrappedRouter([_WrappedRouter([connect])]),
                    metrics,
                ]
            )
        )

        assert routes == ["POST /auth", "POST /wallet/connect", "GET /metrics"]

        self.reporter.info(f"Listed {routes}", context="Test")

    def test_duplicates_and_empty_containers(self):
        """Test repeated routes collapse and empty containers are skipped."""
        self.reporter.info("Testing duplicates", context="Test")

        health = APIRoute("/health", _endpoint, methods=["GET"])

        routes = list_routes(
            self._request([health, _WrappedRouter([]), _WrappedRouter([health])])
        )

        assert routes == ["GET /health"]

        self.reporter.info("Duplicates collapsed", context="Test")


if __name__ == "__main__":
    TestListRoutes.run_as_main()
