"""
cookiemilk - Cookies & Milk, a four-in-a-row drop game engine

This package provides the walled 5x6 board, gravity placement, win and tie
detection, seeded random boards and a lock-guarded session that many
concurrent callers can share.
"""

# Version number
__version__ = '0.1.0'
