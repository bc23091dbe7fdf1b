"""Engine — containers, serial numbers and ship operations."""

from container_fleet.engine.serials import DEFAULT_SERIALS, SerialNumberGenerator
from container_fleet.engine.containers import (
    Container,
    GasContainer,
    HazardNotifier,
    LiquidContainer,
    RefrigeratedContainer,
)
from container_fleet.engine.ship import ContainerShip

__all__ = [
    "DEFAULT_SERIALS",
    "SerialNumberGenerator",
    "Container",
    "GasContainer",
    "HazardNotifier",
    "LiquidContainer",
    "RefrigeratedContainer",
    "ContainerShip",
]
