"""Geometry types, proportional layouts and a responsive layout."""

__all__ = ["canvas", "portion", "responsive"]