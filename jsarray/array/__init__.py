from .core import JSArray

__all__ = ("JSArray",)
