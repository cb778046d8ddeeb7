"""Rule catalog mapping every supported (target, action) pair to its rules.

The table mirrors the chaosblade JVM spec (chaosblade-jvm-spec.yaml). It is
built once at import time and frozen; lookups never mutate it.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from jvmchaos.rules.types import (
    ActionRuleSet,
    JVMChaosAction,
    JVMChaosTarget,
    ParameterRule,
    ParameterType,
)

INT = ParameterType.INT
BOOL = ParameterType.BOOL

# Matchers shared by every action that samples the calls it affects
EFFECT_MATCHERS = (
    ParameterRule("effect-count", INT),
    ParameterRule("effect-percent", INT),
)

DELAY_FLAGS = (
    ParameterRule("time", INT, required=True),
    ParameterRule("offset", INT),
)

EXCEPTION_FLAGS = (
    ParameterRule("exception", required=True),
    ParameterRule("exception-message"),
)

SERVLET_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("method"),
    ParameterRule("querystring"),
    ParameterRule("requestpath"),
)

SQL_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("sqltype"),
    ParameterRule("database"),
    ParameterRule("port", INT),
    ParameterRule("host"),
    ParameterRule("table"),
)

JEDIS_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("cmd"),
    ParameterRule("key"),
)

HTTP_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("httpclient4", BOOL),
    ParameterRule("rest", BOOL),
    ParameterRule("httpclient3", BOOL),
    ParameterRule("uri", required=True),
)

ROCKETMQ_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("producerGroup"),
    ParameterRule("topic"),
    ParameterRule("consumerGroup"),
)

TARS_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("servant", BOOL),
    ParameterRule("functionname"),
    ParameterRule("client", BOOL),
    ParameterRule("servantname", required=True),
)

DUBBO_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("appname"),
    ParameterRule("provider", BOOL),
    ParameterRule("service"),
    ParameterRule("version"),
    ParameterRule("consumer", BOOL),
    ParameterRule("group"),
)

METHOD_MATCHERS = EFFECT_MATCHERS + (
    ParameterRule("classname", required=True),
    ParameterRule("after", BOOL),
    ParameterRule("methodname", required=True),
)


def _delay_and_exception(matchers: Tuple[ParameterRule, ...]) -> Dict[JVMChaosAction, ActionRuleSet]:
    return {
        JVMChaosAction.DELAY: ActionRuleSet(flags=DELAY_FLAGS, matchers=matchers),
        JVMChaosAction.EXCEPTION: ActionRuleSet(flags=EXCEPTION_FLAGS, matchers=matchers),
    }


JVM_SPEC: Dict[JVMChaosTarget, Dict[JVMChaosAction, ActionRuleSet]] = {
    JVMChaosTarget.SERVLET: _delay_and_exception(SERVLET_MATCHERS),
    JVMChaosTarget.PSQL: _delay_and_exception(SQL_MATCHERS),
    JVMChaosTarget.MYSQL: _delay_and_exception(SQL_MATCHERS),
    JVMChaosTarget.JEDIS: _delay_and_exception(JEDIS_MATCHERS),
    JVMChaosTarget.HTTP: _delay_and_exception(HTTP_MATCHERS),
    JVMChaosTarget.ROCKETMQ: _delay_and_exception(ROCKETMQ_MATCHERS),
    JVMChaosTarget.TARS: _delay_and_exception(TARS_MATCHERS),
    JVMChaosTarget.DUBBO: {
        **_delay_and_exception(DUBBO_MATCHERS),
        JVMChaosAction.THREAD_POOL_FULL: ActionRuleSet(
            matchers=EFFECT_MATCHERS + (ParameterRule("provider", BOOL),),
        ),
    },
    JVMChaosTarget.JVM: {
        **_delay_and_exception(METHOD_MATCHERS),
        JVMChaosAction.CODE_CACHE_FILLING: ActionRuleSet(),
        JVMChaosAction.CPU_FULLLOAD: ActionRuleSet(
            flags=(ParameterRule("cpu-count", INT),),
        ),
        JVMChaosAction.THROW_DECLARED_EXCEPTION: ActionRuleSet(matchers=METHOD_MATCHERS),
        JVMChaosAction.RETURN: ActionRuleSet(
            flags=(ParameterRule("value", required=True),),
            matchers=METHOD_MATCHERS,
        ),
        JVMChaosAction.SCRIPT: ActionRuleSet(
            flags=(
                ParameterRule("script-file"),
                ParameterRule("script-type"),
                ParameterRule("script-content"),
                ParameterRule("script-name"),
            ),
            matchers=METHOD_MATCHERS,
        ),
        JVMChaosAction.OOM: ActionRuleSet(
            flags=(
                ParameterRule("area", required=True),
                ParameterRule("wild-mode", BOOL),
                ParameterRule("interval", INT),
                ParameterRule("block", INT),
            ),
        ),
    },
    JVMChaosTarget.DRUID: {
        JVMChaosAction.CONNECTION_POOL_FULL: ActionRuleSet(matchers=EFFECT_MATCHERS),
    },
}


TargetLike = Union[JVMChaosTarget, str]
ActionLike = Union[JVMChaosAction, str]


def _as_target(target: Any) -> Optional[JVMChaosTarget]:
    try:
        return JVMChaosTarget(target)
    except ValueError:
        return None


def _as_action(action: Any) -> Optional[JVMChaosAction]:
    try:
        return JVMChaosAction(action)
    except ValueError:
        return None


class RuleCatalog:
    """Read-only view over a target -> action -> rule set table."""

    def __init__(self, spec: Mapping[JVMChaosTarget, Mapping[JVMChaosAction, ActionRuleSet]]):
        self._spec = MappingProxyType(
            {target: MappingProxyType(dict(actions)) for target, actions in spec.items()}
        )

    def lookup_target(
        self, target: TargetLike
    ) -> Tuple[Optional[Mapping[JVMChaosAction, ActionRuleSet]], bool]:
        """Resolve a target to its action table.

        Args:
            target: Target enum member or its string value.

        Returns:
            Tuple of (action table or None, found).
        """
        resolved = _as_target(target)
        if resolved is None or resolved not in self._spec:
            return None, False
        return self._spec[resolved], True

    def lookup(
        self, target: TargetLike, action: ActionLike
    ) -> Tuple[Optional[ActionRuleSet], bool]:
        """Resolve a (target, action) pair to its rule set."""
        actions, found = self.lookup_target(target)
        if not found:
            return None, False
        resolved = _as_action(action)
        if resolved is None or resolved not in actions:
            return None, False
        return actions[resolved], True

    def targets(self) -> List[JVMChaosTarget]:
        """List all targets in the catalog."""
        return list(self._spec.keys())

    def actions_for(self, target: TargetLike) -> List[JVMChaosAction]:
        """List the actions supported by a target (empty if unknown)."""
        actions, found = self.lookup_target(target)
        if not found:
            return []
        return list(actions.keys())

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Serialise the whole catalog keyed by string values."""
        return {
            target.value: {
                action.value: rules.to_dict() for action, rules in actions.items()
            }
            for target, actions in self._spec.items()
        }


CATALOG = RuleCatalog(JVM_SPEC)


def get_catalog() -> RuleCatalog:
    """Return the process-wide rule catalog."""
    return CATALOG
