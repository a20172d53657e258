"""String-keyed hash table with separate chaining and automatic resizing, plus a demo."""

__version__ = "0.1.0"
__all__ = ["hashtable", "demo"]