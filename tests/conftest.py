"""Shared test fixtures — a fresh serial sequence per test, sample containers and ships."""

from __future__ import annotations

from typing import Callable

import pytest

from container_fleet.config import ShipConfig
from container_fleet.engine import (
    ContainerShip,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    SerialNumberGenerator,
)
from container_fleet.models import ProductKind


@pytest.fixture
def serials() -> SerialNumberGenerator:
    return SerialNumberGenerator()


@pytest.fixture
def hazardous_liquid(serials: SerialNumberGenerator) -> LiquidContainer:
    """Effective cap = 10 000 × 0.5 = 5 000 kg."""
    return LiquidContainer(
        height_cm=250,
        depth_cm=600,
        empty_weight_kg=2_000,
        max_payload_kg=10_000,
        hazardous=True,
        serials=serials,
    )


@pytest.fixture
def safe_liquid(serials: SerialNumberGenerator) -> LiquidContainer:
    """Effective cap = min(2 000 × 0.9, 10 000) = 1 800 kg."""
    return LiquidContainer(
        height_cm=250,
        depth_cm=600,
        empty_weight_kg=2_000,
        max_payload_kg=10_000,
        hazardous=False,
        serials=serials,
    )


@pytest.fixture
def gas(serials: SerialNumberGenerator) -> GasContainer:
    """Residual after emptying = 4 000 × 0.05 = 200 kg."""
    return GasContainer(
        height_cm=260,
        depth_cm=1_200,
        empty_weight_kg=1_500,
        max_payload_kg=4_000,
        pressure_atm=12.5,
        serials=serials,
    )


@pytest.fixture
def meat_reefer(serials: SerialNumberGenerator) -> RefrigeratedContainer:
    return RefrigeratedContainer(
        height_cm=260,
        depth_cm=1_200,
        empty_weight_kg=3_000,
        max_payload_kg=20_000,
        product=ProductKind.MEAT,
        temperature_c=-15.0,
        serials=serials,
    )


@pytest.fixture
def make_reefer(serials: SerialNumberGenerator) -> Callable[..., RefrigeratedContainer]:
    """Build a dairy container with a given tare and cargo mass (kg)."""

    def _make(empty_weight_kg: float = 3_000, load_kg: float = 0) -> RefrigeratedContainer:
        container = RefrigeratedContainer(
            height_cm=260,
            depth_cm=1_200,
            empty_weight_kg=empty_weight_kg,
            max_payload_kg=20_000,
            product=ProductKind.DAIRY,
            temperature_c=8.0,
            serials=serials,
        )
        if load_kg:
            container.load_container(load_kg)
        return container

    return _make


@pytest.fixture
def small_ship_config() -> ShipConfig:
    return ShipConfig(
        name="Small Feeder",
        max_speed_knots=20,
        max_container_count=2,
        max_total_weight_t=10,
    )


@pytest.fixture
def small_ship(small_ship_config: ShipConfig) -> ContainerShip:
    """2 slots, 10 t (10 000 kg) total."""
    return ContainerShip(small_ship_config)


@pytest.fixture
def large_ship() -> ContainerShip:
    """10 slots, 100 t total."""
    return ContainerShip(ShipConfig(
        name="Ocean Carrier",
        max_speed_knots=24.5,
        max_container_count=10,
        max_total_weight_t=100,
    ))
