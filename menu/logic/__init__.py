"""Core menu logic layer.

Subpackages:
- catalog: resolving, grouping, filtering and category selection
- browser: the stateful menu browser driving the pipeline
"""
__all__ = ["catalog", "browser"]
