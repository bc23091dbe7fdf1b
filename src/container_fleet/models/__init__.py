"""Domain kinds and report models."""

from container_fleet.models.kinds import (
    ContainerKind,
    ProductKind,
    STORAGE_TEMPERATURES,
    minimum_storage_temperature,
)
from container_fleet.models.results import ContainerReport, ShipReport

__all__ = [
    "ContainerKind",
    "ProductKind",
    "STORAGE_TEMPERATURES",
    "minimum_storage_temperature",
    "ContainerReport",
    "ShipReport",
]
