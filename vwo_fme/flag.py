"""Result of a feature flag evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FlagVariable:
    """A variable value delivered with a flag decision."""

    key: str = ""
    value: Any = None
    type: str = ""
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Mapping with ``key``, ``value``, ``type`` and ``id``."""
        return {"key": self.key, "value": self.value, "type": self.type, "id": self.id}


@dataclass
class GetFlag:
    """Whether a flag is enabled for a user, and its variables."""

    enabled: bool = False
    variables: list[FlagVariable] = field(default_factory=list)
    reason: str = ""

    def is_enabled(self) -> bool:
        """Whether the flag is enabled."""
        return self.enabled

    def get_variable(self, key: str, default: Any = None) -> Any:
        """Value of the first variable named ``key``, or ``default``."""
        return next((v.value for v in self.variables if v.key == key), default)

    def get_variables(self) -> list[dict[str, Any]]:
        """All variables as mappings, in order."""
        return [variable.to_dict() for variable in self.variables]