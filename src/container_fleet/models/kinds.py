"""Container and product kinds, storage temperatures, capacity ratios."""

from __future__ import annotations

from enum import Enum


class ContainerKind(str, Enum):
    """The closed set of container kinds a ship can carry."""

    LIQUID = "Liquid"
    GAS = "Gas"
    REFRIGERATED = "Refrigerated"

    def __str__(self) -> str:
        return self.value

    @property
    def type_code(self) -> str:
        """One-letter code embedded in serial numbers (``KON-L-0``)."""
        return _TYPE_CODES[self]

    @property
    def label(self) -> str:
        """Lower-case name used in hazard warnings."""
        return self.value.lower()


_TYPE_CODES: dict[ContainerKind, str] = {
    ContainerKind.LIQUID: "L",
    ContainerKind.GAS: "G",
    ContainerKind.REFRIGERATED: "R",
}


class ProductKind(str, Enum):
    """Products a refrigerated container can hold."""

    FRUIT = "Fruit"
    MEAT = "Meat"
    DAIRY = "Dairy"

    def __str__(self) -> str:
        return self.value


# Minimum storage temperature per product (°C)
STORAGE_TEMPERATURES: dict[ProductKind, float] = {
    ProductKind.FRUIT: 13.3,
    ProductKind.MEAT: -15.0,
    ProductKind.DAIRY: 7.2,
}


def minimum_storage_temperature(product: ProductKind) -> float:
    """Lowest temperature (°C) at which ``product`` may be stored."""
    return STORAGE_TEMPERATURES[ProductKind(product)]


# ── Capacity ratios ────────────────────────────────────────────────────
HAZARDOUS_LIQUID_FILL_RATIO = 0.5
"""Hazardous liquids may fill half of the max payload."""

SAFE_LIQUID_FILL_RATIO = 0.9
"""Non-hazardous liquid cap, applied to the container's empty weight."""

GAS_RESIDUAL_RATIO = 0.05
"""Fraction of max payload left behind when a gas container is emptied."""

KG_PER_TONNE = 1_000
