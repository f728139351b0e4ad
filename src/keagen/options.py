"""DHCP option data components."""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from .base import KeaSection


class Option(KeaSection):
    """A single DHCP option advertised to clients."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Option name, e.g. 'domain-name-servers'")
    value: str = Field(..., description="Option value, e.g. '8.8.8.8, 1.1.1.1'")
    always_send: bool = Field(default=False, description="Send even if the client did not ask")

    def __init__(self, name: str, value: str, always_send: bool = False, **data: Any):
        super().__init__(name=name, value=value, always_send=always_send, **data)

    def render(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "data": self.value,
            "always-send": self.always_send,
        }


class OptionData(KeaSection):
    """Set of DHCP options, unique by name and rendered in name order.

    The first option added under a name wins: adding another option with the
    same name later leaves the existing entry untouched.
    """

    options: Dict[str, Option] = Field(default_factory=dict)

    def add(self, name: str, value: str, always_send: bool = False) -> bool:
        """
        Add an option unless one with the same name already exists.

        Returns:
            True if the option was stored, False if the name was taken
        """
        if name in self.options:
            return False
        self.options[name] = Option(name, value, always_send)
        return True

    def add_always(self, name: str, value: str) -> bool:
        """Add an option that is sent in every response."""
        return self.add(name, value, always_send=True)

    def get(self, name: str) -> Optional[Option]:
        return self.options.get(name)

    def is_empty(self) -> bool:
        return not self.options

    def __len__(self) -> int:
        return len(self.options)

    def __contains__(self, name: object) -> bool:
        return name in self.options

    def render(self) -> List[Dict[str, Any]]:
        return [self.options[name].render() for name in sorted(self.options)]
