"""
Serrurier - Ethereum wallet authentication and account binding.
"""

__version__ = "0.1.0"
