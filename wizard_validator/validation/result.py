"""Validation result container for wizard definition validation."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .messages import DEFAULT_MESSAGES, MessageKey


class _MissingParam(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


@dataclass(frozen=True)
class ErrorEntry:
    """
    One validation error: a stable message key plus its named parameters.

    Attributes:
        key: Identifier of the error kind.
        params: Interpolation parameters (property name, wizard id, ...).
    """

    key: MessageKey
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy of the given mapping
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.key, frozenset(self.params.items())))

    def render(self, catalog: Optional[Mapping[MessageKey, str]] = None) -> str:
        """Render the entry to text using ``catalog`` (default: English)."""
        catalog = catalog if catalog is not None else DEFAULT_MESSAGES
        template = catalog.get(self.key, self.key.value)
        return template.format_map(_MissingParam(self.params))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {"key": self.key.value, "params": dict(self.params)}


@dataclass
class ValidationResult:
    """
    Ordered, append-only sink of wizard validation errors.

    The wizard is accepted iff no error was recorded.

    Examples:
        >>> result = ValidationResult()
        >>> result.accepted
        True
        >>> result.add_error(MessageKey.REQUIRED_PROPERTY_MISSING, property="name")
        >>> result.accepted
        False
        >>> print(result)
        Validation FAILED with 1 error(s)
        ...
    """

    errors: List[ErrorEntry] = field(default_factory=list)

    def add_error(self, key: MessageKey, **params: Any) -> ErrorEntry:
        """Record an error; parameter values are stored as strings."""
        entry = ErrorEntry(
            key=MessageKey(key),
            params={name: str(value) for name, value in params.items()},
        )
        self.errors.append(entry)
        return entry

    @property
    def accepted(self) -> bool:
        """True if no errors were recorded."""
        return not self.errors

    def has_error(self, key: MessageKey, **params: Any) -> bool:
        """True if an error with ``key`` (and matching ``params``) was recorded."""
        wanted = {name: str(value) for name, value in params.items()}
        return any(
            entry.key == key
            and all(entry.params.get(name) == value for name, value in wanted.items())
            for entry in self.errors
        )

    def messages(self, catalog: Optional[Mapping[MessageKey, str]] = None) -> List[str]:
        """Rendered error messages, in recording order."""
        return [entry.render(catalog) for entry in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{"accepted": bool, "errors": [...]}``."""
        return {
            "accepted": self.accepted,
            "errors": [entry.to_dict() for entry in self.errors],
        }

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        """Pretty formatted validation report."""
        if self.accepted:
            return "Validation passed: no errors."

        lines: List[str] = [
            f"Validation FAILED with {len(self.errors)} error(s)",
            "",
            "ERRORS:",
        ]
        for i, message in enumerate(self.messages(), 1):
            lines.append(f"  {i}. {message}")
        return "\n".join(lines)

    def __bool__(self) -> bool:
        """Allow boolean context: ``if result: ...``."""
        return self.accepted
