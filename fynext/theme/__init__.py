"""Adwaita colour schemes and the tools that generate colour and icon modules."""

__all__ = ["adwaita", "colorgen", "icongen"]