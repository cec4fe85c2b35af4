"""
Test suite for dca-trade-planner

Contains:
- tests/unit/          : Unit tests for core math, models, contracts and planner
"""
