"""
Test suite for extended_math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
