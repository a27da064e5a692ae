"""Integration tests for fileops CLI commands.

This directory contains end-to-end integration tests that exercise full command
execution with real filesystem operations. These tests use Click's CliRunner
and pytest's tmp_path fixture to test commands in isolation.
"""
