"""
Dependency injection package.
"""

from serrurier.di.container import DIContainer

__all__ = [
    "DIContainer",
]
