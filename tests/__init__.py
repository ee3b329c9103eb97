"""
Test suite for the interpolation primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
