"""Pydantic validation tests — invalid containers and ship configs are rejected.

Construction-time checks: positive dimensions, refrigerated temperature
against the product minimum, frozen fields, and the load invariant when
``load_mass_kg`` is assigned directly.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from container_fleet.config import ShipConfig
from container_fleet.engine.containers import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from container_fleet.engine.serials import SerialNumberGenerator
from container_fleet.models.kinds import (
    STORAGE_TEMPERATURES,
    ProductKind,
    minimum_storage_temperature,
)


def _reefer(serials: SerialNumberGenerator, product: ProductKind, temperature_c: float) -> RefrigeratedContainer:
    return RefrigeratedContainer(
        height_cm=260,
        depth_cm=1_200,
        empty_weight_kg=3_000,
        max_payload_kg=20_000,
        product=product,
        temperature_c=temperature_c,
        serials=serials,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Storage temperature table
# ═══════════════════════════════════════════════════════════════════════════

class TestStorageTemperatures:

    def test_table_values(self):
        assert minimum_storage_temperature(ProductKind.FRUIT) == 13.3
        assert minimum_storage_temperature(ProductKind.MEAT) == -15.0
        assert minimum_storage_temperature(ProductKind.DAIRY) == 7.2

    def test_every_product_has_a_minimum(self):
        assert set(STORAGE_TEMPERATURES) == set(ProductKind)

    def test_unknown_product_rejected(self):
        with pytest.raises(ValueError):
            minimum_storage_temperature("Fish")


# ═══════════════════════════════════════════════════════════════════════════
# RefrigeratedContainer temperature
# ═══════════════════════════════════════════════════════════════════════════

class TestRefrigeratedValidation:

    @pytest.mark.parametrize("product", list(ProductKind))
    def test_boundary_temperature_accepted(self, serials: SerialNumberGenerator, product: ProductKind):
        minimum = minimum_storage_temperature(product)
        c = _reefer(serials, product, minimum)
        assert c.temperature_c == minimum

    @pytest.mark.parametrize("product", list(ProductKind))
    def test_below_minimum_rejected(self, serials: SerialNumberGenerator, product: ProductKind):
        with pytest.raises(ValidationError, match="too low"):
            _reefer(serials, product, minimum_storage_temperature(product) - 0.1)

    def test_fruit_cannot_be_frozen(self, serials: SerialNumberGenerator):
        with pytest.raises(ValidationError):
            _reefer(serials, ProductKind.FRUIT, -15.0)

    def test_rejected_construction_consumes_a_serial(self, serials: SerialNumberGenerator):
        with pytest.raises(ValidationError):
            _reefer(serials, ProductKind.DAIRY, 0.0)
        ok = _reefer(serials, ProductKind.DAIRY, 7.2)
        assert ok.serial_number == "KON-R-1"

    def test_unknown_product_rejected(self, serials: SerialNumberGenerator):
        with pytest.raises(ValidationError):
            _reefer(serials, "Fish", 20.0)

    @pytest.mark.parametrize("temperature_c", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_temperature_rejected(self, serials: SerialNumberGenerator, temperature_c: float):
        with pytest.raises(ValidationError):
            _reefer(serials, ProductKind.FRUIT, temperature_c)


# ═══════════════════════════════════════════════════════════════════════════
# Dimensions & frozen fields
# ═══════════════════════════════════════════════════════════════════════════

class TestContainerFields:

    @pytest.mark.parametrize("field", ["height_cm", "depth_cm", "empty_weight_kg", "max_payload_kg"])
    def test_non_positive_dimension_rejected(self, serials: SerialNumberGenerator, field: str):
        values = dict(height_cm=250, depth_cm=600, empty_weight_kg=2_000, max_payload_kg=10_000)
        values[field] = 0
        with pytest.raises(ValidationError):
            LiquidContainer(serials=serials, **values)

    def test_gas_requires_pressure(self, serials: SerialNumberGenerator):
        with pytest.raises(ValidationError):
            GasContainer(height_cm=1, depth_cm=1, empty_weight_kg=1, max_payload_kg=1, serials=serials)

    def test_pressure_not_range_checked(self, serials: SerialNumberGenerator):
        g = GasContainer(height_cm=1, depth_cm=1, empty_weight_kg=1, max_payload_kg=1,
                         pressure_atm=-3.0, serials=serials)
        assert g.pressure_atm == -3.0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("serial_number", "KON-L-999"),
            ("height_cm", 1.0),
            ("empty_weight_kg", 1.0),
            ("max_payload_kg", 1.0),
            ("hazardous", False),
        ],
    )
    def test_static_fields_frozen(self, hazardous_liquid: LiquidContainer, field: str, value):
        with pytest.raises(ValidationError):
            setattr(hazardous_liquid, field, value)

    def test_refrigerated_settings_frozen(self, meat_reefer: RefrigeratedContainer):
        with pytest.raises(ValidationError):
            meat_reefer.temperature_c = -30.0
        with pytest.raises(ValidationError):
            meat_reefer.product = ProductKind.FRUIT

    def test_negative_load_rejected(self, meat_reefer: RefrigeratedContainer):
        with pytest.raises(ValidationError):
            meat_reefer.load_container(-1)
        assert meat_reefer.load_mass_kg == 0

    def test_direct_assignment_above_payload_rejected(self, meat_reefer: RefrigeratedContainer):
        meat_reefer.load_container(5_000)
        with pytest.raises(ValidationError):
            meat_reefer.load_mass_kg = 20_001
        assert meat_reefer.load_mass_kg == 5_000
        assert meat_reefer.total_weight() == 8_000

    def test_direct_assignment_within_payload_accepted(self, meat_reefer: RefrigeratedContainer):
        meat_reefer.load_mass_kg = 20_000
        assert meat_reefer.load_mass_kg == 20_000

    def test_construction_load_above_payload_rejected(self, serials: SerialNumberGenerator):
        with pytest.raises(ValidationError, match="exceeds max_payload_kg"):
            GasContainer(height_cm=1, depth_cm=1, empty_weight_kg=1, max_payload_kg=100,
                         pressure_atm=1, load_mass_kg=101, serials=serials)


# ═══════════════════════════════════════════════════════════════════════════
# ShipConfig
# ═══════════════════════════════════════════════════════════════════════════

class TestShipConfigValidation:

    def test_defaults_are_valid(self):
        c = ShipConfig()
        assert c.max_container_count >= 1
        assert c.max_total_weight_kg == c.max_total_weight_t * 1_000

    def test_zero_speed_rejected(self):
        with pytest.raises(ValidationError):
            ShipConfig(max_speed_knots=0)

    def test_zero_container_count_rejected(self):
        with pytest.raises(ValidationError):
            ShipConfig(max_container_count=0)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            ShipConfig(max_total_weight_t=-1)

    def test_tonnes_converted_to_kg(self):
        assert ShipConfig(max_total_weight_t=10).max_total_weight_kg == 10_000
