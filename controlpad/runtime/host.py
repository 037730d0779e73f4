"""Host bridge adapters for controller-type announcements."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

PRIMARY = "primary"
ADDITIONAL = "additional"


class LoggingHostBridge:
    """Host bridge used when no embedding host is attached."""

    def announce_primary_controller_type(self, controller_type: str) -> None:
        logger.info("host_controller_requested", extra={"controller_type": controller_type, "kind": PRIMARY})

    def announce_additional_controller_type(self, controller_type: str) -> None:
        logger.info(
            "host_controller_requested",
            extra={"controller_type": controller_type, "kind": ADDITIONAL},
        )


@dataclass(slots=True)
class RecordingHostBridge:
    """Host bridge keeping announcements in call order."""

    announcements: list[tuple[str, str]] = field(default_factory=list)

    def announce_primary_controller_type(self, controller_type: str) -> None:
        self.announcements.append((PRIMARY, controller_type))

    def announce_additional_controller_type(self, controller_type: str) -> None:
        self.announcements.append((ADDITIONAL, controller_type))

    @property
    def primary_types(self) -> tuple[str, ...]:
        return tuple(value for kind, value in self.announcements if kind == PRIMARY)

    @property
    def additional_types(self) -> tuple[str, ...]:
        return tuple(value for kind, value in self.announcements if kind == ADDITIONAL)
