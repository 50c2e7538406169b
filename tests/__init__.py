"""
Test suite for limbint

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
