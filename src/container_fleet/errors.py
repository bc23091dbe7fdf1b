"""Exceptions raised by container and ship operations.

Construction-time field checks (negative dimensions, refrigerated
temperatures below the product minimum) surface as pydantic
``ValidationError`` instead; everything raised after construction
derives from ``ContainerFleetError``.
"""

from __future__ import annotations


class ContainerFleetError(Exception):
    """Base exception for container and ship operations."""

    def __init__(self, message: str, serial_number: str | None = None):
        super().__init__(message)
        self.message = message
        self.serial_number = serial_number


class OverfillError(ContainerFleetError):
    """Raised when a load exceeds the capacity rule of the container's kind."""

    def __init__(self, serial_number: str, requested_kg: float, limit_kg: float):
        super().__init__(
            f"Overfill: container {serial_number} cannot take {requested_kg}kg "
            f"(limit {limit_kg}kg)",
            serial_number=serial_number,
        )
        self.requested_kg = requested_kg
        self.limit_kg = limit_kg


class ShipLoadError(ContainerFleetError):
    """Base for ship-side rejections of a container."""


class ShipCapacityError(ShipLoadError):
    """Raised when the ship already carries its maximum container count."""

    def __init__(self, serial_number: str, max_container_count: int):
        super().__init__(
            f"Cannot load container {serial_number}, ship has reached max "
            f"container count ({max_container_count})",
            serial_number=serial_number,
        )
        self.max_container_count = max_container_count


class WeightLimitError(ShipLoadError):
    """Raised when loading would push the ship over its weight limit."""

    def __init__(self, serial_number: str, projected_kg: float, limit_kg: float):
        super().__init__(
            f"Cannot load container {serial_number}, ship would exceed max weight "
            f"({projected_kg}kg > {limit_kg}kg)",
            serial_number=serial_number,
        )
        self.projected_kg = projected_kg
        self.limit_kg = limit_kg


class DuplicateContainerError(ShipLoadError):
    """Raised when a serial number is already on board."""

    def __init__(self, serial_number: str):
        super().__init__(
            f"Container with serial number {serial_number} is already on the ship",
            serial_number=serial_number,
        )


class ContainerNotFoundError(ContainerFleetError, LookupError):
    """Raised when no container on the ship carries the given serial number."""

    def __init__(self, serial_number: str):
        super().__init__(
            f"Container with serial number {serial_number} not found on the ship",
            serial_number=serial_number,
        )
