"""Unit tests for fileops.

This directory contains tests for individual modules. They run against real
files under pytest's tmp_path and patch the standard library only to simulate
failures that are hard to provoke on a real filesystem.

For integration tests that test full command execution, see tests/integration/.
"""
