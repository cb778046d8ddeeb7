"""Schema and parameter validation for JVMChaos documents."""

from typing import Any, Callable, Dict, List, Sequence

import jsonschema

from jvmchaos.validation.field import FieldPath, Violation, aggregate_message
from jvmchaos.validation.validator import validate_parameters

# Validators owned by other layers (scheduler/duration, pod mode, ...).
# Each receives the document and the spec root path and returns violations.
ExternalValidator = Callable[[Dict[str, Any], FieldPath], List[Violation]]

STRING_MAP = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string"},
}

# JSON Schema for the shape of a JVMChaos document. Targets and actions are
# not enumerated here; the rule catalog reports unknown values.
JVMCHAOS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["apiVersion", "kind", "metadata", "spec"],
    "properties": {
        "apiVersion": {
            "type": "string",
            "pattern": "^chaos-mesh\\.org/v\\d+.*$"
        },
        "kind": {
            "type": "string",
            "enum": ["JVMChaos"]
        },
        "metadata": {
            "type": "object",
            "required": ["name"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "namespace": {"type": "string"}
            }
        },
        "spec": {
            "type": "object",
            "required": ["target", "action"],
            "properties": {
                "target": {"type": "string"},
                "action": {"type": "string"},
                "flags": STRING_MAP,
                "matchers": STRING_MAP,
                "mode": {"type": "string"},
                "value": {"type": "string"},
                "selector": {"type": "object"},
                "duration": {"type": ["string", "null"]},
                "scheduler": {"type": ["object", "null"]}
            }
        }
    }
}


class ValidationError(Exception):
    """Exception raised when JVMChaos validation fails."""

    def __init__(self, message: str, errors: List[str] = None):
        super().__init__(message)
        self.errors = errors or []


def schema_errors(document: Any) -> List[str]:
    """List every structural problem of a document, sorted by location."""
    validator = jsonschema.Draft202012Validator(JVMCHAOS_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.absolute_path)))
    messages = []
    for error in errors:
        location = ".".join(str(p) for p in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages


def collect_violations(
    document: Dict[str, Any],
    extra_validators: Sequence[ExternalValidator] = (),
) -> List[Violation]:
    """Run external validators and the parameter check over a document.

    Assumes the document already passed the schema check. Violations from
    ``extra_validators`` come first, in the order given, followed by the
    JVM parameter violations.
    """
    spec_field = FieldPath("spec")
    spec = document.get("spec", {})

    violations: List[Violation] = []
    for extra in extra_validators:
        violations.extend(extra(document, spec_field))

    violations.extend(
        validate_parameters(
            spec.get("target"),
            spec.get("action"),
            spec.get("flags"),
            spec.get("matchers"),
            path=spec_field,
        )
    )
    return violations


def validate_chaos(
    document: Dict[str, Any],
    extra_validators: Sequence[ExternalValidator] = (),
) -> bool:
    """Validate a JVMChaos document.

    Args:
        document: The parsed JVMChaos document.
        extra_validators: Validators for concerns outside the JVM rules,
            merged ahead of the parameter violations.

    Returns:
        True if validation passes.

    Raises:
        ValidationError: If the document is malformed or any violation is found.
    """
    errors = schema_errors(document)
    if errors:
        raise ValidationError(f"Schema validation failed: {errors[0]}", errors)

    violations = collect_violations(document, extra_validators)
    if violations:
        raise ValidationError(
            aggregate_message(violations), [str(v) for v in violations]
        )

    return True
