"""
Test suite for pairmax

Contains:
- tests/unit/          : Unit tests for individual modules
"""
