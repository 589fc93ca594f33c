"""Shared test fixtures package.

Provides record types shared by all test suites. Pytest fixtures themselves
live in conftest.py.
"""
