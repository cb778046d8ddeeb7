"""Rule catalog for JVMChaos targets and actions."""

from jvmchaos.rules.catalog import JVM_SPEC, RuleCatalog, get_catalog
from jvmchaos.rules.types import (
    ActionRuleSet,
    JVMChaosAction,
    JVMChaosTarget,
    ParameterRule,
    ParameterType,
)

__all__ = [
    "JVM_SPEC",
    "RuleCatalog",
    "get_catalog",
    "ActionRuleSet",
    "JVMChaosAction",
    "JVMChaosTarget",
    "ParameterRule",
    "ParameterType",
]
