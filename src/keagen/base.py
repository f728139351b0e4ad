"""Base class for Kea configuration components."""

import json
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict


class KeaSection(BaseModel):
    """Base class for Kea configuration components using Pydantic.

    Every component renders itself explicitly into the fragment of the
    Kea document it stands for; nothing is converted implicitly.
    """

    model_config = ConfigDict(validate_assignment=True)

    def render(self) -> Any:
        """Render this component into its document fragment."""
        raise NotImplementedError(f"{type(self).__name__} does not implement render()")

    # Serialization methods
    def to_dict(self) -> Any:
        """Return the rendered document fragment."""
        return self.render()

    def to_json(self, indent: int = 2) -> str:
        """
        Convert the rendered fragment to a JSON string.

        Args:
            indent: Indentation level for pretty printing

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        """Convert the rendered fragment to a YAML string, keeping key order."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
