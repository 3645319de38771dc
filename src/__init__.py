"""uuidcache — persistent UUID-to-name cache with batched lookups."""

__version__ = "0.1.0"
