"""Small shared helpers — time formatting."""
from .misc import format_time

__all__ = ["format_time"]
