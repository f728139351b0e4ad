"""DHCPv4 service configuration and its rendering."""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import Field

from .base import KeaSection
from .interfaces import InterfacesConfig
from .lease import DEFAULT_LEASE_NAME, DEFAULT_LEASE_TYPE, LeaseDatabase
from .options import OptionData
from .result import Diagnostic, DiagnosticCode, RenderResult
from .subnet import Subnet4

logger = logging.getLogger(__name__)


class Dhcp4(KeaSection):
    """A DHCPv4 service definition.

    Owns the interface list, lease database, subnet registry and option set.
    Mutate them through the attributes (or the convenience methods below) and
    call ``render()`` to produce the ``Dhcp4`` document body.
    """

    lifetime: int = Field(default=0, ge=0, strict=True, description="Valid lease lifetime in seconds")
    interfaces: InterfacesConfig = Field(default_factory=InterfacesConfig)
    lease_store: LeaseDatabase = Field(default_factory=LeaseDatabase)
    subnets: Subnet4 = Field(default_factory=Subnet4)
    options: OptionData = Field(default_factory=OptionData)

    def __init__(
        self,
        lifetime: int = 0,
        interfaces: Union[InterfacesConfig, Sequence[str]] = (),
        lease_type: Optional[str] = None,
        lease_persist: Optional[bool] = None,
        lease_name: Optional[str] = None,
        **data: Any,
    ):
        if not isinstance(interfaces, InterfacesConfig):
            interfaces = InterfacesConfig(interfaces)
        lease_args = (lease_type, lease_persist, lease_name)
        if "lease_store" in data:
            if any(arg is not None for arg in lease_args):
                raise TypeError("pass either lease_store or lease_type/lease_persist/lease_name, not both")
        else:
            data["lease_store"] = LeaseDatabase(
                DEFAULT_LEASE_TYPE if lease_type is None else lease_type,
                True if lease_persist is None else lease_persist,
                DEFAULT_LEASE_NAME if lease_name is None else lease_name,
            )
        super().__init__(lifetime=lifetime, interfaces=interfaces, **data)
        if self.interfaces.is_empty():
            logger.warning("Dhcp4 created with empty interfaces-config")

    # Convenience methods delegating to the owned components
    def add_subnet(self, subnet: str) -> int:
        """Add a subnet and return its id."""
        return self.subnets.add_subnet(subnet)

    def add_pool(self, subnet_id: int, low: str, high: str) -> bool:
        """Add a pool to a subnet; False if the subnet id is unknown."""
        return self.subnets.add_pool(subnet_id, low, high)

    def add_option(self, name: str, value: str, always_send: bool = False) -> bool:
        return self.options.add(name, value, always_send)

    def add_option_always(self, name: str, value: str) -> bool:
        return self.options.add_always(name, value)

    def _stop(self, result: RenderResult, code: DiagnosticCode, stage: str, message: str) -> RenderResult:
        result.diagnostic = Diagnostic(code=code, message=message, stage=stage)
        logger.warning("%s during rendering, document is incomplete", message)
        return result

    def render(self) -> RenderResult:  # type: ignore[override]
        """
        Render the service definition.

        Sections are emitted in order and each required one gates the next:
        interfaces, then the lease database, then subnets. When a required
        section is missing, rendering stops and the result carries the
        partial document together with a diagnostic. Options are optional:
        the ``option-data`` key is simply left out when there are none.

        Returns:
            RenderResult with the document and, if incomplete, a diagnostic
        """
        result = RenderResult(document={"valid-lifetime": self.lifetime})
        document = result.document

        if self.interfaces.is_empty():
            return self._stop(
                result, DiagnosticCode.MISSING_INTERFACES, "interfaces-config",
                "interfaces-config is empty",
            )
        document["interfaces-config"] = self.interfaces.render()

        if not self.lease_store.is_valid():
            return self._stop(
                result, DiagnosticCode.INVALID_LEASE_DATABASE, "lease-database",
                "lease-database needs both a type and a name",
            )
        document["lease-database"] = self.lease_store.render()

        if self.subnets.is_empty():
            return self._stop(
                result, DiagnosticCode.MISSING_SUBNETS, "subnet4",
                "subnet4 is empty",
            )
        document["subnet4"] = self.subnets.render()

        if not self.options.is_empty():
            document["option-data"] = self.options.render()

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Return the rendered document, partial if rendering stopped early."""
        return self.render().document
