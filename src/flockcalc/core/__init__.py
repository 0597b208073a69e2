"""
Core domain models, mathematical primitives, and contracts.

This package is independent of the app around it (remote tables, screens,
caches): it only sees plain numbers, dates and rows.
"""
