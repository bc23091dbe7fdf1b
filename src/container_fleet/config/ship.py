"""Ship limits — speed, container count, total weight."""

from pydantic import BaseModel, Field

from container_fleet.models.kinds import KG_PER_TONNE


class ShipConfig(BaseModel):
    """Fixed limits of one container ship."""

    name: str = Field(default="", description="Human label, used in logs")
    max_speed_knots: float = Field(default=20.0, gt=0, description="Top speed (knots)")
    max_container_count: int = Field(default=100, ge=1, description="Container slots on deck")
    max_total_weight_t: float = Field(
        default=40_000.0, gt=0,
        description="Max combined total weight of all containers (tonnes). "
                    "Compared against container weights in kg after ×1000.",
    )

    @property
    def max_total_weight_kg(self) -> float:
        return self.max_total_weight_t * KG_PER_TONNE
