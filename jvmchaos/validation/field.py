"""Field paths and violation records produced by JVMChaos validation."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple


class FieldPath:
    """Dotted path to a field of the validated object, e.g. ``spec.flags.time``."""

    def __init__(self, *parts: str):
        self._parts: Tuple[str, ...] = tuple(parts)

    def child(self, name: str) -> "FieldPath":
        return FieldPath(*self._parts, name)

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._parts

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"FieldPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldPath):
            return self._parts == other._parts
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._parts)


class ViolationKind(str, Enum):
    """Category of a reported problem."""

    TARGET_UNKNOWN = "TargetUnknown"
    ACTION_UNSUPPORTED = "ActionUnsupported"
    REQUIRED_MISSING = "RequiredMissing"
    EMPTY_VALUE = "EmptyValue"
    TYPE_MISMATCH = "TypeMismatch"

    @property
    def error_type(self) -> str:
        """Kubernetes field error type this kind is reported as."""
        if self is ViolationKind.REQUIRED_MISSING:
            return "Required value"
        return "Invalid value"


def quote(value: Any) -> str:
    """Render a value the way field errors quote it."""
    if isinstance(value, str):
        return json.dumps(value)
    return repr(value)


@dataclass(frozen=True)
class Violation:
    """One schema-conformance problem, addressed at a field."""

    kind: ViolationKind
    field: FieldPath
    value: Any
    message: str

    def __str__(self) -> str:
        if self.kind is ViolationKind.REQUIRED_MISSING:
            return f"{self.field}: {self.kind.error_type}: {self.message}"
        return f"{self.field}: {self.kind.error_type}: {quote(self.value)}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to a dictionary."""
        return {
            "kind": self.kind.value,
            "field": str(self.field),
            "value": self.value,
            "message": self.message,
        }


def not_supported_message(path: FieldPath, value: Any, supported: Iterable[str]) -> str:
    """Message for a value outside a closed set of supported values."""
    choices = ", ".join(quote(s) for s in supported)
    return f"{path}: Unsupported value: {quote(value)}: supported values: {choices}"


def aggregate_message(violations: List[Violation]) -> str:
    """Combine violations into one rejection message.

    A single violation renders as itself; several are bracketed and
    comma-separated. Duplicate messages are reported once.
    """
    messages: List[str] = []
    for violation in violations:
        text = str(violation)
        if text not in messages:
            messages.append(text)
    if len(messages) == 1:
        return messages[0]
    return "[" + ", ".join(messages) + "]"
