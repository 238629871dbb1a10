"""
Shared testing utilities.

Provides standardized test structure:
- LaborantTest: Base class for all tests

All tests MUST inherit from LaborantTest.
"""

from shared.tests.test_base import LaborantTest

__all__ = [
    "LaborantTest",
]
