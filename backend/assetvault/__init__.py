"""assetvault — polymorphic asset repository with favourite-aware keyset pagination."""

__version__ = "1.0.0"
