"""
Test suite for flockcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
