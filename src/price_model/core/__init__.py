"""
Core domain models, mathematical primitives, and valuation formulas.

This module contains the pure building blocks of the price model that are
independent of any presentation layer or data source.
"""
