"""
Test suite for price_model

Contains:
- tests/unit/          : Unit tests for individual modules
"""
