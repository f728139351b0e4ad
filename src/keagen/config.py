"""Top-level Kea configuration document."""

import json
from typing import Any, Dict

import yaml
from pydantic import Field

from .base import KeaSection
from .dhcp4 import Dhcp4
from .result import RenderResult

DHCP4_KEY = "Dhcp4"


class KeaConfig(KeaSection):
    """The configuration document handed to the Kea DHCPv4 server.

    Wraps a single service definition under the ``Dhcp4`` key.
    """

    dhcp4: Dhcp4 = Field(...)

    def __init__(self, dhcp4: Dhcp4, **data: Any):
        super().__init__(dhcp4=dhcp4, **data)

    def render(self) -> RenderResult:  # type: ignore[override]
        """Render the document; the diagnostic of the service body is passed on."""
        body = self.dhcp4.render()
        return RenderResult(document={DHCP4_KEY: body.document}, diagnostic=body.diagnostic)

    def to_dict(self) -> Dict[str, Any]:
        return self.render().document

    def save_to_file(self, filename: str, format: str = "json") -> RenderResult:
        """
        Render the document and write it to a file.

        The document is written even when incomplete; check the returned
        result before pointing the server at the file.

        Args:
            filename: Path to the output file
            format: "json" or "yaml"

        Returns:
            The RenderResult that was written
        """
        result = self.render()
        text = dump_document(result.document, format)
        with open(filename, 'w') as f:
            f.write(text)
        return result


def dump_document(document: Dict[str, Any], format: str = "json", indent: int = 2) -> str:
    """Serialize a rendered document as JSON or YAML, keeping key order."""
    if format == "json":
        return json.dumps(document, indent=indent) + "\n"
    if format == "yaml":
        return yaml.dump(document, default_flow_style=False, sort_keys=False)
    raise ValueError(f"Unknown output format: {format}")
