"""Calendar and completion-entry widget models."""

__all__ = ["calendar", "completion"]