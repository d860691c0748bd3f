"""
Test suite for decimal-bigint

Contains:
- tests/unit/          : Unit tests for the value type, engines, results, and demo driver
"""
