"""2-3-4 trees with operation statistics, red-black trees, conversion between them, and a menu-driven command."""

__version__ = "0.1.0"
__all__ = ["btree", "redblack", "conversion", "cli"]