"""Target, action and parameter-rule definitions for JVMChaos experiments.

A JVMChaos experiment names a *target* (the instrumented library being
faulted) and an *action* (the kind of fault). Every supported pair carries
two rule lists:

- flags:    parameters that configure how the action behaves
- matchers: parameters that scope which calls the action applies to
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class JVMChaosTarget(str, Enum):
    """Integration point instrumented by the JVM agent."""

    SERVLET = "servlet"
    PSQL = "psql"
    MYSQL = "mysql"
    JEDIS = "jedis"
    HTTP = "http"
    ROCKETMQ = "rocketmq"
    TARS = "tars"
    DUBBO = "dubbo"
    JVM = "jvm"
    DRUID = "druid"


class JVMChaosAction(str, Enum):
    """Fault injected into the target."""

    DELAY = "delay"
    RETURN = "return"
    SCRIPT = "script"
    CPU_FULLLOAD = "cpu-fullload"
    OOM = "oom"
    CODE_CACHE_FILLING = "code-cache-filling"
    EXCEPTION = "exception"
    THROW_DECLARED_EXCEPTION = "throw-declared-exception"
    CONNECTION_POOL_FULL = "connection-pool-full"
    THREAD_POOL_FULL = "thread-pool-full"


class ParameterType(str, Enum):
    """Primitive type a parameter value must parse as."""

    INT = "int"
    BOOL = "bool"
    STRING = "string"


@dataclass(frozen=True)
class ParameterRule:
    """Constraint on a single named parameter."""

    name: str
    type: ParameterType = ParameterType.STRING
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "required": self.required,
        }


@dataclass(frozen=True)
class ActionRuleSet:
    """Flag and matcher rules for one (target, action) pair.

    An empty tuple means the action takes no parameters of that kind.
    """

    flags: Tuple[ParameterRule, ...] = field(default_factory=tuple)
    matchers: Tuple[ParameterRule, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to a dictionary."""
        return {
            "flags": [rule.to_dict() for rule in self.flags],
            "matchers": [rule.to_dict() for rule in self.matchers],
        }
