"""Lease database configuration."""

from typing import Any, Dict

from pydantic import ConfigDict, Field

from .base import KeaSection

DEFAULT_LEASE_TYPE = "memfile"
DEFAULT_LEASE_NAME = "/var/lib/kea/dhcp4.leases"


class LeaseDatabase(KeaSection):
    """Describes where and how the server persists leases.

    ``kind`` is the storage backend (``memfile``, ``mysql``, ...) and
    ``location`` the file path or connection string. The descriptor is only
    valid when both are non-empty; ``persist`` plays no part in validity.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(default=DEFAULT_LEASE_TYPE, description="Lease storage backend")
    persist: bool = Field(default=True, description="Keep leases across restarts")
    location: str = Field(default=DEFAULT_LEASE_NAME, description="Path or connection string")

    def __init__(
        self,
        kind: str = DEFAULT_LEASE_TYPE,
        persist: bool = True,
        location: str = DEFAULT_LEASE_NAME,
        **data: Any,
    ):
        super().__init__(kind=kind, persist=persist, location=location, **data)

    def is_valid(self) -> bool:
        """Check that both the backend and its location are set."""
        return bool(self.kind) and bool(self.location)

    def render(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "persist": self.persist,
            "name": self.location,
        }
