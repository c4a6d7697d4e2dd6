"""Unit tests.

Purpose
- Verify a single module/function in isolation.

Guidelines
- No real I/O; every helper under test is a pure function.
- Prefer behavior-centric assertions over implementation details.
"""
