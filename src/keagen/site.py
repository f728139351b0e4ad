"""Site description files: a YAML/JSON recipe for one DHCPv4 service."""

from pathlib import Path
from typing import List

from omegaconf import OmegaConf
from pydantic import BaseModel, Field

from .config import KeaConfig
from .dhcp4 import Dhcp4
from .lease import DEFAULT_LEASE_NAME, DEFAULT_LEASE_TYPE


class SitePool(BaseModel):
    """An address range inside a subnet."""

    low: str = Field(..., description="First address of the pool")
    high: str = Field(..., description="Last address of the pool")


class SiteSubnet(BaseModel):
    """A subnet and the pools to attach to it."""

    subnet: str = Field(..., description="Subnet in CIDR notation")
    pools: List[SitePool] = Field(default_factory=list)


class SiteOption(BaseModel):
    """A DHCP option to advertise."""

    name: str = Field(..., description="Option name")
    data: str = Field(..., description="Option value")
    always_send: bool = Field(default=False, description="Send in every response")


class SiteLeaseDatabase(BaseModel):
    """Lease storage settings."""

    type: str = Field(default=DEFAULT_LEASE_TYPE, description="Lease storage backend")
    persist: bool = Field(default=True, description="Keep leases across restarts")
    name: str = Field(default=DEFAULT_LEASE_NAME, description="Path or connection string")


class SiteConfig(BaseModel):
    """Site description for one DHCPv4 service."""

    lifetime: int = Field(..., ge=0, description="Valid lease lifetime in seconds")
    interfaces: List[str] = Field(default_factory=list, description="Interfaces to listen on")
    lease_database: SiteLeaseDatabase = Field(default_factory=SiteLeaseDatabase)
    subnets: List[SiteSubnet] = Field(default_factory=list)
    options: List[SiteOption] = Field(default_factory=list)


def load_site(site_file: str) -> SiteConfig:
    """
    Load a site description file.

    Uses OmegaConf for variable interpolation including:
    - Environment variables: ${oc.env:VAR_NAME}
    - References to other keys: ${lifetime}

    JSON files load the same way, JSON being valid YAML.

    Args:
        site_file: Path to the site YAML or JSON file

    Returns:
        SiteConfig instance
    """
    site_path = Path(site_file)
    if not site_path.exists():
        raise FileNotFoundError(f"Site file not found: {site_file}")

    with open(site_path, "r") as f:
        yaml_content = f.read()

    omega_conf = OmegaConf.create(yaml_content)

    data = OmegaConf.to_container(omega_conf, resolve=True)
    if not isinstance(data, dict):
        raise ValueError("Site file must be a YAML dictionary")

    return SiteConfig.model_validate(data)


def build_config(site: SiteConfig) -> KeaConfig:
    """
    Build a KeaConfig by replaying a site description.

    Subnets receive their ids in file order. Options follow the usual
    first-write-wins rule, so a repeated option name keeps its first entry.
    """
    lease = site.lease_database
    dhcp4 = Dhcp4(
        site.lifetime,
        site.interfaces,
        lease_type=lease.type,
        lease_persist=lease.persist,
        lease_name=lease.name,
    )

    for entry in site.subnets:
        subnet_id = dhcp4.add_subnet(entry.subnet)
        for pool in entry.pools:
            dhcp4.add_pool(subnet_id, pool.low, pool.high)

    for option in site.options:
        dhcp4.add_option(option.name, option.data, option.always_send)

    return KeaConfig(dhcp4)
