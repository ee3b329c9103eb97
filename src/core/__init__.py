"""
Core math primitives, value objects, and contracts.

This module contains the foundational building blocks that are independent
of any rendering or layout system.
"""
