"""Parameter checking against a list of rules.

Parameter values always travel as strings, so type conformance is a parse
check on the string. The accepted forms are those of the agent's flag
parser: signed decimal integers that fit in 64 bits, and the boolean
literals ``1 t T TRUE true True`` / ``0 f F FALSE false False``.
"""

import re
from typing import List, Mapping, Optional, Sequence

from jvmchaos.rules.types import ParameterRule, ParameterType
from jvmchaos.validation.field import FieldPath, Violation, ViolationKind

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parses_as_int(value: str) -> bool:
    """Check that a string is a signed decimal integer within int64 range."""
    if not isinstance(value, str) or not INT_PATTERN.fullmatch(value):
        return False
    return INT64_MIN <= int(value) <= INT64_MAX


def parses_as_bool(value: str) -> bool:
    """Check that a string is one of the accepted boolean literals."""
    return isinstance(value, str) and (value in TRUE_LITERALS or value in FALSE_LITERALS)


def check_parameters(
    values: Optional[Mapping[str, str]],
    rules: Sequence[ParameterRule],
    prefix: FieldPath,
    context: str = "",
) -> List[Violation]:
    """Check submitted parameter values against a rule list.

    Every rule is checked; nothing stops at the first problem. Keys in
    ``values`` that no rule names are ignored.

    Args:
        values: Submitted parameters, or None for none at all.
        rules: Rules to enforce, in report order.
        prefix: Path under which each parameter is addressed.
        context: Text naming the target and action, used in messages for
            missing parameters.

    Returns:
        List of violations, in rule order.
    """
    values = values or {}
    violations: List[Violation] = []

    for rule in rules:
        path = prefix.child(rule.name)
        exist = rule.name in values
        value = values.get(rule.name, "")

        if rule.required and not exist:
            violations.append(
                Violation(ViolationKind.REQUIRED_MISSING, path, "", context)
            )
            continue

        if exist and rule.required and rule.type is ParameterType.STRING:
            if value == "":
                violations.append(
                    Violation(
                        ViolationKind.EMPTY_VALUE,
                        path,
                        value,
                        f"{path}:{value} cannot be empty",
                    )
                )

        if exist and rule.type is ParameterType.INT and not parses_as_int(value):
            violations.append(
                Violation(
                    ViolationKind.TYPE_MISMATCH,
                    path,
                    value,
                    f"{path}:{value} cannot parse as Int",
                )
            )

        if exist and rule.type is ParameterType.BOOL and not parses_as_bool(value):
            violations.append(
                Violation(
                    ViolationKind.TYPE_MISMATCH,
                    path,
                    value,
                    f"{path}:{value} cannot parse as boolean",
                )
            )

    return violations
