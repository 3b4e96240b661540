"""Unit tests.

Purpose
- Verify a single module/class in isolation: domain models, the user
  service and the logging helpers.

Guidelines
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
