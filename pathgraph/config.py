"""Configuration classes for PathGraph components."""

from dataclasses import dataclass


@dataclass
class KeyedMapConfig:
    """Sizing policy for the chained hash table backing node indexes."""

    # Bucket count when no capacity is requested
    default_capacity: int = 64

    # Grow once size / capacity reaches this ratio
    load_factor: float = 0.8

    # Capacity multiplier applied on growth
    growth_factor: int = 2

    def should_grow(self, size: int, capacity: int) -> bool:
        """Return True if a table holding ``size`` entries must grow."""
        return size / capacity >= self.load_factor

    def next_capacity(self, capacity: int) -> int:
        """Return the capacity that follows ``capacity`` on growth."""
        return capacity * self.growth_factor


# Global configuration instance
MAP_CONFIG = KeyedMapConfig()
