"""
Core domain models, decimal math primitives, and JSON contracts.

This module contains the pure calculation building blocks of the trade
planner. Nothing here performs I/O beyond loading packaged JSON schemas.
"""
