"""Configuration models."""

from container_fleet.config.ship import ShipConfig

__all__ = [
    "ShipConfig",
]
