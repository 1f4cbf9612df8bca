"""Core business logic layer.

Subpackages:
- recipes: catalog lookup and search
- shopping: grocery list aggregation
"""
__all__ = ["recipes", "shopping"]
