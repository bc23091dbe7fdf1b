"""Report types — immutable snapshots of containers and ships.

Containers and ships are mutable while cargo moves around; these models
freeze their state at one instant for callers that want structured data
instead of the ``info()`` text.  Kind-specific fields default to ``None``
so every kind shares one report shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from container_fleet.models.kinds import ContainerKind, ProductKind


# ═══════════════════════════════════════════════════════════════════════════
# Container snapshot
# ═══════════════════════════════════════════════════════════════════════════

class ContainerReport(BaseModel):
    """State of one container at the time it was reported."""

    model_config = ConfigDict(frozen=True)

    serial_number: str
    kind: ContainerKind
    load_mass_kg: float
    total_weight_kg: float
    """empty_weight_kg + load_mass_kg."""
    max_payload_kg: float

    # --- Kind-specific ---
    hazardous: bool | None = None
    """Liquid only."""
    pressure_atm: float | None = None
    """Gas only."""
    product: ProductKind | None = None
    """Refrigerated only."""
    temperature_c: float | None = None
    """Refrigerated only."""


# ═══════════════════════════════════════════════════════════════════════════
# Ship snapshot
# ═══════════════════════════════════════════════════════════════════════════

class ShipReport(BaseModel):
    """Occupancy and weight of a ship plus a report per container, in load order."""

    model_config = ConfigDict(frozen=True)

    name: str
    max_speed_knots: float
    container_count: int
    max_container_count: int
    total_weight_t: float
    """Sum of container total weights, in tonnes."""
    max_total_weight_t: float
    containers: list[ContainerReport]

    @property
    def free_slots(self) -> int:
        return self.max_container_count - self.container_count

    @property
    def weight_headroom_t(self) -> float:
        return self.max_total_weight_t - self.total_weight_t
