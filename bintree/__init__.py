"""Binary tree nodes with traversals, measurements and structural checks."""

__version__ = "0.1.0"
__all__ = ["node"]