"""
Test suite for numerus

Contains:
- tests/unit/          : Unit tests for individual modules
"""
