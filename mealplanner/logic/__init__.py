"""Core business logic layer.

Subpackages:
- planning: the weekly planner state machine
- shopping: building shopping lists from a completed plan
"""
__all__ = ["planning", "shopping"]
