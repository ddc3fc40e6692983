"""
Test suite for cellfit - terminal-safe text shaping.

This package contains comprehensive tests including:
- Unit tests for width measurement, truncation and clamping
- File sampling tests against temporary files
- Crash/edge case tests for malformed input
"""
