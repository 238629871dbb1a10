"""
Base class for all component tests.

Provides standardized test structure with:
- pytest collection (test_* methods, sync or async)
- Per-test lifecycle hooks (setup_test/teardown_test)
- Integrated SystemReporter
- Standalone execution via run_as_main()

All component tests should inherit from LaborantTest.
"""

import inspect
import sys
from typing import Optional

import pytest

from shared.reporter.system_reporter import SystemReporter


class LaborantTest:
    """
    Base class for component tests.

    Tests inherit from this and define test_* methods (sync or async;
    async tests run under pytest-asyncio).

    Required class attributes:
        component_name: str - Name of component being tested
        test_category: str - Category: "unit", "integration", or "e2e"

    Optional class attributes:
        log_dir: str - Write a log file per test class there

    Lifecycle hooks (all optional):
        setup_test() - Before each test
        teardown_test() - After each test

    Example:
        class TestMath(LaborantTest):
            component_name = "calculator"
            test_category = "unit"

            def test_addition(self):
                assert 2 + 2 == 4

        if __name__ == "__main__":
            TestMath.run_as_main()
    """

    component_name: str = "unknown"
    test_category: str = "unit"
    log_dir: Optional[str] = None

    # ================================================================
    # PYTEST INTEGRATION (Do not override)
    # ================================================================

    def setup_method(self, method) -> None:
        """Create the reporter, then run the per-test hook."""
        self.reporter = SystemReporter(
            name=f"{self.component_name}.{self.__class__.__name__}",
            log_dir=self.log_dir,
            level=20,  # INFO
            verbose=1,
        )
        self.setup_test()

    def teardown_method(self, method) -> None:
        """Run the per-test hook, then release the reporter."""
        try:
            self.teardown_test()
        finally:
            self.reporter.close()

    # ================================================================
    # LIFECYCLE HOOKS (Override in subclass if needed)
    # ================================================================

    def setup_test(self) -> None:
        """Optional: setup before each test."""

    def teardown_test(self) -> None:
        """Optional: cleanup after each test."""

    # ================================================================
    # STANDARD ENTRY POINT (Do not override)
    # ================================================================

    @classmethod
    def run_as_main(cls) -> None:
        """
        Run this test class with pytest.

        Call this in if __name__ == "__main__" block.
        """
        test_file = inspect.getfile(cls)
        sys.exit(pytest.main([f"{test_file}::{cls.__name__}", "-v"]))
