"""Containers — shared fields, per-kind load rules, hazard warnings.

The set of kinds is closed: liquid, gas, refrigerated.  Every kind goes
through the same ``load_container`` path; what differs per kind is the
capacity limit, what "empty" means, and whether an overfill raises a
hazard warning first.

  Kind           capacity limit                         empty leaves   hazard
  ───────────    ────────────────────────────────────   ────────────   ──────
  Liquid         max_payload × 0.5 if hazardous,        0              yes
                 else min(empty_weight × 0.9,
                          max_payload)
  Gas            max_payload                            5% payload     yes
  Refrigerated   max_payload                            0              no

Dimensions are frozen after construction; only ``load_mass_kg`` moves.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from container_fleet.engine.formatting import format_number
from container_fleet.engine.serials import DEFAULT_SERIALS, SerialNumberGenerator
from container_fleet.errors import OverfillError
from container_fleet.models.kinds import (
    GAS_RESIDUAL_RATIO,
    HAZARDOUS_LIQUID_FILL_RATIO,
    SAFE_LIQUID_FILL_RATIO,
    ContainerKind,
    ProductKind,
    minimum_storage_temperature,
)
from container_fleet.models.results import ContainerReport

logger = logging.getLogger(__name__)
hazard_logger = logging.getLogger("container_fleet.hazards")


# ═══════════════════════════════════════════════════════════════════════════
# Hazard capability
# ═══════════════════════════════════════════════════════════════════════════

@runtime_checkable
class HazardNotifier(Protocol):
    """Anything that can raise a hazard warning for a serial number."""

    def notify(self, serial_number: str) -> None: ...


def emit_hazard_warning(kind: ContainerKind, serial_number: str) -> None:
    hazard_logger.warning("Hazard warning in %s container %s", kind.label, serial_number)


# ═══════════════════════════════════════════════════════════════════════════
# Base container
# ═══════════════════════════════════════════════════════════════════════════

class Container(BaseModel):
    """Fields and load/empty/report behaviour shared by every kind.

    Not instantiated directly; use one of the concrete kinds.  The serial
    number is drawn from ``serials`` (or the process-wide default) before
    the fields are validated, so a rejected construction still uses up
    its sequence number.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: ClassVar[ContainerKind]

    serial_number: str = Field(frozen=True, description="KON-<TypeCode>-<sequence>")
    height_cm: float = Field(gt=0, frozen=True, description="External height (cm)")
    depth_cm: float = Field(gt=0, frozen=True, description="External depth (cm)")
    empty_weight_kg: float = Field(gt=0, frozen=True, description="Tare weight (kg)")
    max_payload_kg: float = Field(gt=0, frozen=True, description="Rated payload (kg)")
    load_mass_kg: float = Field(default=0.0, ge=0, description="Current cargo mass (kg)")

    def __init__(self, *, serials: SerialNumberGenerator | None = None, **data: Any) -> None:
        if type(self) is Container:
            raise TypeError("Container is abstract; build a Liquid, Gas or Refrigerated container")
        if "serial_number" not in data:
            source = DEFAULT_SERIALS if serials is None else serials
            data["serial_number"] = source.next_serial(type(self).kind)
        super().__init__(**data)

    @field_validator("load_mass_kg")
    @classmethod
    def check_load_within_payload(cls, value: float, info: ValidationInfo) -> float:
        # Checked before the value is stored; a rejected assignment keeps the old load
        max_payload = info.data.get("max_payload_kg")
        if max_payload is not None and value > max_payload:
            raise ValueError(f"load_mass_kg ({value}) exceeds max_payload_kg ({max_payload})")
        return value

    # ── Load policy ────────────────────────────────────────────────────

    def capacity_limit_kg(self) -> float:
        """Largest mass ``load_container`` accepts for this container."""
        return self.max_payload_kg

    def load_container(self, mass: float) -> None:
        """Replace the current load with ``mass`` kg.

        Raises ``OverfillError`` above ``capacity_limit_kg()``; hazard-capable
        kinds warn before raising.
        """
        limit = self.capacity_limit_kg()
        if mass > limit:
            if isinstance(self, HazardNotifier):
                self.notify(self.serial_number)
            raise OverfillError(self.serial_number, mass, limit)
        self.load_mass_kg = mass
        logger.debug("Container %s loaded with %skg", self.serial_number, format_number(mass))

    def empty_container(self) -> None:
        self.load_mass_kg = 0.0

    def total_weight(self) -> float:
        return self.empty_weight_kg + self.load_mass_kg

    # ── Reporting ──────────────────────────────────────────────────────

    def info(self) -> str:
        return (
            f"Serial number: {self.serial_number} Type: {self.kind} "
            f"Load: {format_number(self.load_mass_kg)}kg "
            f"Total Weight: {format_number(self.total_weight())}kg "
            f"Max payload: {format_number(self.max_payload_kg)}kg"
        )

    def _report_fields(self) -> dict[str, Any]:
        return {
            "serial_number": self.serial_number,
            "kind": self.kind,
            "load_mass_kg": self.load_mass_kg,
            "total_weight_kg": self.total_weight(),
            "max_payload_kg": self.max_payload_kg,
        }

    def to_report(self) -> ContainerReport:
        """Convert to an immutable snapshot."""
        return ContainerReport(**self._report_fields())


# ═══════════════════════════════════════════════════════════════════════════
# Liquid
# ═══════════════════════════════════════════════════════════════════════════

class LiquidContainer(Container):
    """Liquid cargo; hazardous liquids may only fill half the payload.

    Non-hazardous liquids are capped at 90% of the tare weight, and never
    above ``max_payload_kg``: a load between the payload rating and
    ``empty_weight_kg × 0.9`` is an overfill.
    """

    kind: ClassVar[ContainerKind] = ContainerKind.LIQUID

    hazardous: bool = Field(default=False, frozen=True)

    def notify(self, serial_number: str) -> None:
        emit_hazard_warning(self.kind, serial_number)

    def capacity_limit_kg(self) -> float:
        if self.hazardous:
            return self.max_payload_kg * HAZARDOUS_LIQUID_FILL_RATIO
        # Non-hazardous cap is measured against the tare weight
        return min(self.empty_weight_kg * SAFE_LIQUID_FILL_RATIO, self.max_payload_kg)

    def info(self) -> str:
        return super().info() + f", Hazardous: {self.hazardous}"

    def _report_fields(self) -> dict[str, Any]:
        return {**super()._report_fields(), "hazardous": self.hazardous}


# ═══════════════════════════════════════════════════════════════════════════
# Gas
# ═══════════════════════════════════════════════════════════════════════════

class GasContainer(Container):
    """Pressurised gas; emptying leaves a residual 5% of the payload."""

    kind: ClassVar[ContainerKind] = ContainerKind.GAS

    pressure_atm: float = Field(frozen=True, description="Informational only, not range-checked")

    def notify(self, serial_number: str) -> None:
        emit_hazard_warning(self.kind, serial_number)

    def empty_container(self) -> None:
        self.load_mass_kg = self.max_payload_kg * GAS_RESIDUAL_RATIO

    def info(self) -> str:
        return super().info() + f", Pressure: {format_number(self.pressure_atm)}"

    def _report_fields(self) -> dict[str, Any]:
        return {**super()._report_fields(), "pressure_atm": self.pressure_atm}


# ═══════════════════════════════════════════════════════════════════════════
# Refrigerated
# ═══════════════════════════════════════════════════════════════════════════

class RefrigeratedContainer(Container):
    """Chilled cargo of a single product kind, held at a fixed temperature."""

    kind: ClassVar[ContainerKind] = ContainerKind.REFRIGERATED

    product: ProductKind = Field(frozen=True)
    temperature_c: float = Field(
        frozen=True, allow_inf_nan=False, description="Set-point temperature (°C)",
    )

    @model_validator(mode="after")
    def check_temperature_for_product(self) -> RefrigeratedContainer:
        minimum = minimum_storage_temperature(self.product)
        if self.temperature_c < minimum:
            raise ValueError(
                f"Temperature in refrigerated container is too low: "
                f"{self.temperature_c} < {minimum} for {self.product}"
            )
        return self

    def info(self) -> str:
        return (
            super().info()
            + f", Product: {self.product}, Temperature: {format_number(self.temperature_c)}"
        )

    def _report_fields(self) -> dict[str, Any]:
        return {
            **super()._report_fields(),
            "product": self.product,
            "temperature_c": self.temperature_c,
        }
