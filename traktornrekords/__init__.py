"""Convert Traktor NML collections to Rekordbox XML collections."""

__version__ = "1.0.0"
__all__ = ["__version__"]