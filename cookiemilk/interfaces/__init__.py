"""
cookiemilk.interfaces - User interfaces for Cookies & Milk

This package contains the command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
