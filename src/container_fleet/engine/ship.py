"""Container ship — owns an ordered collection of containers.

After every successful mutating operation the ship satisfies:

  len(containers)                       ≤ max_container_count
  Σ container.total_weight()  (kg)      ≤ max_total_weight_t × 1000
  serial numbers on board               unique

The weight limit is checked only when a ship operation runs.  Reloading
a container that is already on board (``container.load_container``)
goes through the container's own rules alone and can push the ship past
its limit; ``total_weight_kg()`` always reports the real figure.

Containers are kept in an insertion-ordered ``dict`` keyed by serial
number: iteration follows load order (what the reports print) and
lookups by serial are O(1).

Each ship carries a re-entrant lock held for the duration of every
mutating operation, so the read-then-write of the count/weight checks
stays consistent if ships are shared between threads.  A transfer holds
both ships' locks, taken in ``id()`` order.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import IO, Iterable, Iterator

from container_fleet.config.ship import ShipConfig
from container_fleet.engine.containers import Container
from container_fleet.engine.formatting import format_number
from container_fleet.errors import (
    ContainerNotFoundError,
    DuplicateContainerError,
    ShipCapacityError,
    ShipLoadError,
    WeightLimitError,
)
from container_fleet.models.kinds import KG_PER_TONNE
from container_fleet.models.results import ShipReport

logger = logging.getLogger(__name__)


class ContainerShip:
    """A ship that loads, unloads, replaces and transfers containers.

    Usage::

        ship = ContainerShip(ShipConfig(max_speed_knots=20,
                                        max_container_count=2,
                                        max_total_weight_t=10))
        ship.load_container(tank)
        ship.transfer_container(tank.serial_number, other_ship)

    Parameters
    ----------
    config : ShipConfig | None
        Speed, count and weight limits.  Defaults to ``ShipConfig()``.
    """

    def __init__(self, config: ShipConfig | None = None) -> None:
        self._config = config if config is not None else ShipConfig()
        self._containers: dict[str, Container] = {}
        self._lock = threading.RLock()

    @classmethod
    def build(
        cls,
        max_speed_knots: float,
        max_container_count: int,
        max_total_weight_t: float,
        name: str = "",
    ) -> ContainerShip:
        """Shorthand for ``ContainerShip(ShipConfig(...))``."""
        return cls(ShipConfig(
            name=name,
            max_speed_knots=max_speed_knots,
            max_container_count=max_container_count,
            max_total_weight_t=max_total_weight_t,
        ))

    # ── Limits ─────────────────────────────────────────────────────────

    @property
    def config(self) -> ShipConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def max_speed_knots(self) -> float:
        return self._config.max_speed_knots

    @property
    def max_container_count(self) -> int:
        return self._config.max_container_count

    @property
    def max_total_weight_t(self) -> float:
        return self._config.max_total_weight_t

    # ── Queries ────────────────────────────────────────────────────────

    @property
    def containers(self) -> tuple[Container, ...]:
        """Containers on board, in load order."""
        return tuple(self._containers.values())

    def __len__(self) -> int:
        return len(self._containers)

    def __iter__(self) -> Iterator[Container]:
        return iter(self.containers)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Container):
            return self._containers.get(item.serial_number) is item
        return item in self._containers

    def __repr__(self) -> str:
        return (
            f"ContainerShip(name={self.name!r}, containers={len(self)}/"
            f"{self.max_container_count})"
        )

    def get_container(self, serial_number: str) -> Container:
        try:
            return self._containers[serial_number]
        except KeyError:
            raise ContainerNotFoundError(serial_number) from None

    def total_weight_kg(self) -> float:
        """Sum of every container's total weight (kg)."""
        return math.fsum(c.total_weight() for c in self._containers.values())

    # ── Load checks ────────────────────────────────────────────────────

    def _check_can_load(self, container: Container, replacing: str | None = None) -> None:
        """Raise the ``ShipLoadError`` that loading ``container`` would hit.

        With ``replacing`` set, the container under that serial number is
        treated as already gone (its slot and weight are freed).
        """
        serial = container.serial_number
        occupied = len(self._containers) - (1 if replacing is not None else 0)
        if occupied >= self.max_container_count:
            raise ShipCapacityError(serial, self.max_container_count)

        if serial in self._containers and serial != replacing:
            raise DuplicateContainerError(serial)

        projected = math.fsum([
            *(c.total_weight() for s, c in self._containers.items() if s != replacing),
            container.total_weight(),
        ])
        limit = self._config.max_total_weight_kg
        if projected > limit:
            raise WeightLimitError(serial, projected, limit)

    def can_load(self, container: Container) -> None:
        """Run every load check without mutating; raises on the first failure."""
        with self._lock:
            self._check_can_load(container)

    # ── Mutating operations ────────────────────────────────────────────

    def load_container(self, container: Container) -> None:
        """Put ``container`` on board after the count, duplicate and weight checks."""
        with self._lock:
            try:
                self._check_can_load(container)
            except ShipLoadError as exc:
                logger.info("Ship %r rejected %s: %s", self.name, container.serial_number, exc)
                raise
            self._containers[container.serial_number] = container
        logger.debug("Ship %r loaded %s", self.name, container.serial_number)

    def load_containers(self, containers: Iterable[Container]) -> None:
        """Load in order, stopping at the first failure.

        Containers loaded before the failing one stay on board.
        """
        for container in containers:
            self.load_container(container)

    def unload_container(self, serial_number: str) -> Container:
        """Take the container off the ship and hand it back to the caller."""
        with self._lock:
            try:
                container = self._containers.pop(serial_number)
            except KeyError:
                raise ContainerNotFoundError(serial_number) from None
        logger.debug("Ship %r unloaded %s", self.name, serial_number)
        return container

    def replace_container(self, serial_number: str, new_container: Container) -> Container:
        """Swap the container in ``serial_number``'s slot for ``new_container``.

        The slot keeps its position in load order.  The swap is checked like
        a load with the old container already removed: the new serial must
        not be elsewhere on board, and the weight limit must still hold.
        Returns the container that was taken off.
        """
        with self._lock:
            old = self.get_container(serial_number)
            try:
                self._check_can_load(new_container, replacing=serial_number)
            except ShipLoadError as exc:
                logger.info(
                    "Ship %r rejected %s as replacement for %s: %s",
                    self.name, new_container.serial_number, serial_number, exc,
                )
                raise
            self._containers = {
                (new_container.serial_number if key == serial_number else key):
                    (new_container if key == serial_number else c)
                for key, c in self._containers.items()
            }
        logger.debug(
            "Ship %r replaced %s with %s",
            self.name, serial_number, new_container.serial_number,
        )
        return old

    def transfer_container(self, serial_number: str, target_ship: ContainerShip) -> Container:
        """Move a container to ``target_ship``.

        The target's load checks run before anything moves; if they fail
        the container stays on this ship and the error propagates.
        """
        if target_ship is self:
            raise ValueError("Cannot transfer a container to the ship it is already on")

        first, second = sorted((self, target_ship), key=id)
        with first._lock, second._lock:
            container = self.get_container(serial_number)
            try:
                target_ship._check_can_load(container)
            except ShipLoadError as exc:
                logger.info(
                    "Transfer of %s from %r to %r refused: %s",
                    serial_number, self.name, target_ship.name, exc,
                )
                raise
            del self._containers[serial_number]
            target_ship._containers[serial_number] = container
        logger.debug("Transferred %s from %r to %r", serial_number, self.name, target_ship.name)
        return container

    # ── Reporting ──────────────────────────────────────────────────────

    def get_ship_info(self) -> str:
        total_weight_t = self.total_weight_kg() / KG_PER_TONNE
        return (
            f"Ship info: Speed {format_number(self.max_speed_knots)} knots, "
            f"Containers: {len(self)}/{self.max_container_count}, "
            f"Weight: {total_weight_t:.2f}/{format_number(self.max_total_weight_t)}t"
        )

    def containers_info(self) -> list[str]:
        """Header line followed by each container's ``info()``, in load order."""
        containers = self.containers
        lines = [f"Containers on ship ({len(containers)}):"]
        lines.extend(c.info() for c in containers)
        return lines

    def print_containers_info(self, file: IO[str] | None = None) -> None:
        for line in self.containers_info():
            print(line, file=file)

    def to_report(self) -> ShipReport:
        """Convert to an immutable snapshot."""
        with self._lock:
            containers = self.containers
            total_weight_kg = self.total_weight_kg()
        return ShipReport(
            name=self.name,
            max_speed_knots=self.max_speed_knots,
            container_count=len(containers),
            max_container_count=self.max_container_count,
            total_weight_t=total_weight_kg / KG_PER_TONNE,
            max_total_weight_t=self.max_total_weight_t,
            containers=[c.to_report() for c in containers],
        )
