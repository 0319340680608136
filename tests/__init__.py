"""
Tests Package.

This package contains test suites for the wave background, including unit
tests for the graph records, union-find and topology, engine lifecycle tests,
and renderer/driver tests.
"""

# Tests Package
