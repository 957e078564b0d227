"""Architecture validation tests.

These tests verify that the codebase follows its layering and
dependency-direction constraints.
"""
