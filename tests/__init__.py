"""
Test suite for price_producer

Contains:
- tests/unit/          : Unit tests for individual modules
"""
