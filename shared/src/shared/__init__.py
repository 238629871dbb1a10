"""
Shared utilities for platform components.
"""
