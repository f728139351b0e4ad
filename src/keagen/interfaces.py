"""Listening interface configuration."""

from typing import Any, Dict, List, Sequence

from pydantic import ConfigDict, Field

from .base import KeaSection


class InterfacesConfig(KeaSection):
    """The network interfaces the DHCP server listens on.

    The list is kept as given: no deduplication and no sorting. It cannot be
    changed after construction; assign a new ``InterfacesConfig`` instead.
    """

    model_config = ConfigDict(frozen=True)

    interfaces: List[str] = Field(default_factory=list, description="Interface names, e.g. 'eth0'")

    def __init__(self, interfaces: Sequence[str] = (), **data: Any):
        super().__init__(interfaces=list(interfaces), **data)

    def is_empty(self) -> bool:
        """Check whether no interfaces are configured."""
        return not self.interfaces

    def render(self) -> Dict[str, Any]:
        return {"interfaces": list(self.interfaces)}
