"""Toolkit-independent layouts, Adwaita colours, widget models and data bindings."""

__version__ = "0.1.0"

__all__ = ["data", "layout", "theme", "widget"]