"""Core business logic layer.

Subpackages:
- planning: preference filtering, weekly selection, generation
- shopping: building shopping lists
"""
__all__ = ["planning", "shopping"]
