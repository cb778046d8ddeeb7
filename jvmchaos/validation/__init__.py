"""Parameter validation engine for JVMChaos experiments."""

from jvmchaos.validation.checker import check_parameters
from jvmchaos.validation.field import FieldPath, Violation, ViolationKind, aggregate_message
from jvmchaos.validation.validator import validate_parameters

__all__ = [
    "check_parameters",
    "FieldPath",
    "Violation",
    "ViolationKind",
    "aggregate_message",
    "validate_parameters",
]
