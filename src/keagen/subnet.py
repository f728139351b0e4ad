"""IPv4 subnet and address pool components."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, PrivateAttr

from .base import KeaSection

logger = logging.getLogger(__name__)


class Pool(KeaSection):
    """A range of addresses available for lease, kept as "low - high"."""

    model_config = ConfigDict(frozen=True)

    range: str = Field(..., description="Pool range, e.g. '192.168.1.100 - 192.168.1.200'")

    @classmethod
    def from_bounds(cls, low: str, high: str) -> "Pool":
        """Build a pool from its lowest and highest address."""
        return cls(range=f"{low} - {high}")

    def render(self) -> Dict[str, Any]:
        return {"pool": self.range}


class SubnetConfig(KeaSection):
    """A single IPv4 subnet with its address pools.

    Pools are unique by their range string and rendered in lexicographic
    order of that string, so "10.0.0.100 - ..." comes before "10.0.0.50 - ...".
    """

    id: int = Field(..., ge=1, description="Registry-assigned subnet id")
    subnet: str = Field(..., description="Subnet in CIDR notation, e.g. '192.168.1.0/24'")
    pools: Dict[str, Pool] = Field(default_factory=dict)

    def add_pool(self, low: str, high: str) -> None:
        pool = Pool.from_bounds(low, high)
        self.pools.setdefault(pool.range, pool)

    def render(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "subnet": self.subnet,
            "pools": [self.pools[key].render() for key in sorted(self.pools)],
        }


class Subnet4(KeaSection):
    """Registry of IPv4 subnets.

    Ids are handed out from a counter that starts at 1 and only ever grows,
    so an id is never reused.
    """

    configs: Dict[int, SubnetConfig] = Field(default_factory=dict)
    _next_id: int = PrivateAttr(default=1)

    def model_post_init(self, __context: Any) -> None:
        """Resume the id counter after the highest id already present."""
        self._next_id = max(self.configs, default=0) + 1

    @property
    def next_id(self) -> int:
        """The id the next added subnet will receive."""
        return self._next_id

    def add_subnet(self, subnet: str) -> int:
        """
        Add a subnet with no pools.

        Args:
            subnet: Subnet in CIDR notation

        Returns:
            The id assigned to the new subnet
        """
        subnet_id = self._next_id
        while subnet_id in self.configs:
            subnet_id += 1
        self._next_id = subnet_id + 1
        self.configs[subnet_id] = SubnetConfig(id=subnet_id, subnet=subnet)
        return subnet_id

    def add_pool(self, subnet_id: int, low: str, high: str) -> bool:
        """
        Attach the pool "low - high" to an existing subnet.

        Adding a range the subnet already has is a no-op.

        Returns:
            True if the subnet exists, False if the id is unknown
        """
        cfg = self.configs.get(subnet_id)
        if cfg is None:
            logger.debug("no subnet with id %s, pool %s - %s not added", subnet_id, low, high)
            return False
        cfg.add_pool(low, high)
        return True

    def get(self, subnet_id: int) -> Optional[SubnetConfig]:
        return self.configs.get(subnet_id)

    def is_empty(self) -> bool:
        return not self.configs

    def __len__(self) -> int:
        return len(self.configs)

    def render(self) -> List[Dict[str, Any]]:
        # Sorted by id so that generated files are stable between runs.
        return [self.configs[subnet_id].render() for subnet_id in sorted(self.configs)]
