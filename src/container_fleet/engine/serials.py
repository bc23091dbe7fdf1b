"""Serial number sequence — ``KON-<TypeCode>-<sequence>``.

One counter is shared by every container kind, so sequence numbers are
unique across kinds::

    serials = SerialNumberGenerator()
    serials.next_serial(ContainerKind.LIQUID)   # "KON-L-0"
    serials.next_serial(ContainerKind.GAS)      # "KON-G-1"

Containers built without an explicit generator draw from
``DEFAULT_SERIALS``, which lives for the whole process.
"""

from __future__ import annotations

import threading

from container_fleet.models.kinds import ContainerKind

SERIAL_PREFIX = "KON"


class SerialNumberGenerator:
    """Thread-safe, monotonically increasing serial number source."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_serial(self, kind: ContainerKind) -> str:
        """Reserve the next sequence number and format it for ``kind``."""
        kind = ContainerKind(kind)
        with self._lock:
            sequence = self._next
            self._next += 1
        return f"{SERIAL_PREFIX}-{kind.type_code}-{sequence}"

    def peek(self) -> int:
        """Sequence number the next call to ``next_serial`` will use."""
        with self._lock:
            return self._next

    def reset(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        with self._lock:
            self._next = start


DEFAULT_SERIALS = SerialNumberGenerator()
