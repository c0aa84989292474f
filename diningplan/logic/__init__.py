"""Core business logic layer.

Subpackages:
- categorize: keyword based food-group classification
- menu: raw menu item normalization
- selection: greedy per-meal item selection
- reporting: nutrition aggregation and plain-text output
- planning: day plan generation across meal slots
"""
__all__ = ["categorize", "menu", "selection", "reporting", "planning"]
