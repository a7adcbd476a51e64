"""Infrastructure — database sessions and logging setup."""
