"""Outcome of rendering a service configuration."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class DiagnosticCode(str, Enum):
    """Reasons rendering can stop before the document is complete."""

    MISSING_INTERFACES = "missing-interfaces"
    INVALID_LEASE_DATABASE = "invalid-lease-database"
    MISSING_SUBNETS = "missing-subnets"


@dataclass(frozen=True)
class Diagnostic:
    """Why rendering stopped and at which document key."""

    code: DiagnosticCode
    message: str
    stage: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class IncompleteConfigError(Exception):
    """Raised by RenderResult.unwrap() when the document is partial."""

    def __init__(self, diagnostic: Diagnostic, document: Dict[str, Any]):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic
        self.document = document


@dataclass
class RenderResult:
    """A rendered document and, if rendering stopped early, the reason.

    A result with a diagnostic holds a partial document that must not be
    handed to the DHCP server as configuration.
    """

    document: Dict[str, Any] = field(default_factory=dict)
    diagnostic: Optional[Diagnostic] = None

    @property
    def complete(self) -> bool:
        return self.diagnostic is None

    def unwrap(self) -> Dict[str, Any]:
        """Return the document, raising IncompleteConfigError if it is partial."""
        if self.diagnostic is not None:
            raise IncompleteConfigError(self.diagnostic, self.document)
        return self.document
