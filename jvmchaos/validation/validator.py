"""Validation of a JVMChaos target/action pair and its parameters."""

from typing import Any, List, Mapping, Optional

from jvmchaos.rules.catalog import RuleCatalog, get_catalog
from jvmchaos.validation.checker import check_parameters
from jvmchaos.validation.field import (
    FieldPath,
    Violation,
    ViolationKind,
    not_supported_message,
)


def _value_of(member: Any) -> Any:
    return getattr(member, "value", member)


def validate_parameters(
    target: Any,
    action: Any,
    flags: Optional[Mapping[str, str]] = None,
    matchers: Optional[Mapping[str, str]] = None,
    path: Optional[FieldPath] = None,
    catalog: Optional[RuleCatalog] = None,
) -> List[Violation]:
    """Validate flags and matchers for a target/action pair.

    An unknown target or an action the target does not support yields a
    single violation and no parameter checks. Otherwise flag violations are
    returned followed by matcher violations.

    Args:
        target: Target enum member or its string value.
        action: Action enum member or its string value.
        flags: Submitted flag parameters.
        matchers: Submitted matcher parameters.
        path: Root path of the experiment spec (default ``spec``).
        catalog: Rule catalog to resolve against (default: the built-in one).

    Returns:
        List of violations; empty when the parameters are valid.
    """
    path = path or FieldPath("spec")
    catalog = catalog or get_catalog()

    target_field = path.child("target")
    action_field = path.child("action")
    target_value = _value_of(target)
    action_value = _value_of(action)

    actions, found = catalog.lookup_target(target)
    if not found:
        return [
            Violation(
                ViolationKind.TARGET_UNKNOWN,
                target_field,
                target_value,
                "unknown JVM chaos target",
            )
        ]

    rules, found = catalog.lookup(target, action)
    if not found:
        supported = sorted(a.value for a in actions.keys())
        detail = not_supported_message(action_field, action_value, supported)
        return [
            Violation(
                ViolationKind.ACTION_UNSUPPORTED,
                target_field,
                target_value,
                f"target: {target_value} does not match action: {action_value}, "
                f"action detail error: {detail}",
            )
        ]

    context = f"with {target_field}: {target_value}, {action_field}: {action_value}"
    violations = check_parameters(flags, rules.flags, path.child("flags"), context)
    violations.extend(
        check_parameters(matchers, rules.matchers, path.child("matcher"), context)
    )
    return violations
