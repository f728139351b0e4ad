"""keagen - Build and render Kea DHCPv4 server configuration."""

from .config import KeaConfig
from .dhcp4 import Dhcp4
from .interfaces import InterfacesConfig
from .lease import LeaseDatabase
from .options import Option, OptionData
from .subnet import Pool, SubnetConfig, Subnet4
from .result import Diagnostic, DiagnosticCode, IncompleteConfigError, RenderResult
from .site import SiteConfig, build_config, load_site

__version__ = "0.1.0"

__all__ = [
    "KeaConfig",
    "Dhcp4",
    "InterfacesConfig",
    "LeaseDatabase",
    "Option",
    "OptionData",
    "Pool",
    "SubnetConfig",
    "Subnet4",
    # Render outcome
    "Diagnostic",
    "DiagnosticCode",
    "IncompleteConfigError",
    "RenderResult",
    # Site files
    "SiteConfig",
    "build_config",
    "load_site",
]
