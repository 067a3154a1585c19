"""City Explorer API: location-based weather, events, movies, and reviews with TTL caching."""

__version__ = "0.1.0"
