"""Core types shared by the property-test runner: results, hook info, configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

DEFAULT_TRIALS = 100
"""Number of trials run when the configuration does not say otherwise."""

MAX_ARITY = 7
"""A property can take at most this many generated arguments."""

DEFAULT_MAX_COLUMNS = 72
"""Column after which progress output wraps."""

DEFAULT_EXIT_TIMEOUT_MSEC = 100
"""Grace period for a timed-out worker before it is killed outright."""


class TheftError(Exception):
    """Base class for errors raised by the runner."""


class ConfigError(TheftError, ValueError):
    """The run configuration is unusable."""


class Skip(Exception):
    """Raised from an ``alloc`` callback to skip the current trial."""


class TrialResult(enum.Enum):
    """Result of a single trial."""

    PASS = 0
    FAIL = 1
    SKIP = 2
    DUP = 3
    ERROR = 4


class RunResult(enum.IntEnum):
    """Result of a whole run (a group of trials)."""

    PASS = 0
    FAIL = 1
    SKIP = 2
    ERROR = 3


class ShrinkOutcome(enum.Enum):
    """Non-instance results a ``shrink`` callback may return."""

    OK = 0
    DEAD_END = 1
    NO_MORE_TACTICS = 2
    ERROR = 3


class HookResult(enum.Enum):
    """What a hook asks the runner to do next.

    Not every hook accepts every value: ``HALT`` is meaningful for the
    gen-args-pre, trial-pre and shrink-pre hooks, ``REPEAT`` and
    ``REPEAT_ONCE`` for the trial-post and shrink-trial-post hooks.
    ``ERROR`` always halts everything.
    """

    ERROR = 0
    CONTINUE = 1
    HALT = 2
    REPEAT = 3
    REPEAT_ONCE = 4


class ShrinkPostState(enum.Enum):
    """Outcome of one shrinking attempt, reported to the shrink-post hook."""

    SHRINK_FAILED = 0
    SHRUNK = 1
    DONE_SHRINKING = 2


@dataclass
class RunReport:
    """Trial counts after a run."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    dup: int = 0


@dataclass
class RunPreInfo:
    prop_name: Optional[str]
    total_trials: int
    run_seed: int


@dataclass
class RunPostInfo:
    prop_name: Optional[str]
    total_trials: int
    run_seed: int
    report: RunReport


@dataclass
class GenArgsPreInfo:
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    failures: int
    run_seed: int
    trial_seed: int
    arity: int


@dataclass
class TrialPreInfo:
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    failures: int
    run_seed: int
    trial_seed: int
    arity: int
    args: list = field(default_factory=list)


@dataclass
class ForkPostInfo:
    t: Any
    prop_name: Optional[str]
    total_trials: int
    failures: int
    run_seed: int
    arity: int
    args: list = field(default_factory=list)


@dataclass
class TrialPostInfo:
    t: Any
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    failures: int
    run_seed: int
    trial_seed: int
    arity: int
    args: list
    result: TrialResult
    repeat: bool = False


@dataclass
class CounterexampleInfo:
    t: Any
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    trial_seed: int
    arity: int
    type_info: Sequence["TypeInfo"]
    args: list


@dataclass
class ShrinkPreInfo:
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    failures: int
    run_seed: int
    trial_seed: int
    arity: int
    shrink_count: int
    successful_shrinks: int
    failed_shrinks: int
    arg_index: int
    arg: Any
    tactic: int


@dataclass
class ShrinkPostInfo:
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    run_seed: int
    trial_seed: int
    arity: int
    shrink_count: int
    successful_shrinks: int
    failed_shrinks: int
    arg_index: int
    arg: Any
    tactic: int
    state: ShrinkPostState


@dataclass
class ShrinkTrialPostInfo:
    prop_name: Optional[str]
    total_trials: int
    trial_id: int
    failures: int
    run_seed: int
    trial_seed: int
    arity: int
    shrink_count: int
    successful_shrinks: int
    failed_shrinks: int
    arg_index: int
    args: list
    tactic: int
    result: TrialResult


@dataclass
class TypeInfo:
    """Callbacks describing how to generate and handle one property argument.

    ``alloc(t, env)`` returns a new instance drawn from the runner's random
    stream, or raises :class:`Skip`. ``free(instance, env)`` releases it,
    ``hash(instance, env)`` returns a 64-bit hash, ``print(stream, instance,
    env)`` writes it out, and ``shrink(t, instance, tactic, env)`` returns a
    simpler instance or one of ``ShrinkOutcome.DEAD_END``,
    ``ShrinkOutcome.NO_MORE_TACTICS`` or ``ShrinkOutcome.ERROR``.
    """

    alloc: Callable[[Any, Any], Any]
    free: Optional[Callable[[Any, Any], None]] = None
    hash: Optional[Callable[[Any, Any], int]] = None
    print: Optional[Callable[[Any, Any, Any], None]] = None
    shrink: Optional[Callable[[Any, Any, int, Any], Any]] = None
    env: Any = None

    def __post_init__(self) -> None:
        if not callable(self.alloc):
            raise ConfigError("type info needs a callable alloc")
        for name in ("free", "hash", "print", "shrink"):
            cb = getattr(self, name)
            if cb is not None and not callable(cb):
                raise ConfigError(f"type info {name} must be callable")


@dataclass
class ForkConfig:
    """Run each trial in a forked worker, with an optional timeout (msec)."""

    enable: bool = False
    timeout: int = 0
    signal: int = 0
    exit_timeout: int = 0


@dataclass
class Hooks:
    """Optional hooks called as a run progresses; each gets ``(info, env)``."""

    run_pre: Optional[Callable[[RunPreInfo, Any], HookResult]] = None
    run_post: Optional[Callable[[RunPostInfo, Any], HookResult]] = None
    gen_args_pre: Optional[Callable[[GenArgsPreInfo, Any], HookResult]] = None
    trial_pre: Optional[Callable[[TrialPreInfo, Any], HookResult]] = None
    fork_post: Optional[Callable[[ForkPostInfo, Any], HookResult]] = None
    trial_post: Optional[Callable[[TrialPostInfo, Any], HookResult]] = None
    counterexample: Optional[Callable[[CounterexampleInfo, Any], HookResult]] = None
    shrink_pre: Optional[Callable[[ShrinkPreInfo, Any], HookResult]] = None
    shrink_post: Optional[Callable[[ShrinkPostInfo, Any], HookResult]] = None
    shrink_trial_post: Optional[
        Callable[[ShrinkTrialPostInfo, Any], HookResult]
    ] = None
    env: Any = None


@dataclass
class RunConfig:
    """Configuration for a run of a property.

    ``prop(t, *args)`` is called with one generated argument per entry in
    ``type_info`` and returns a :class:`TrialResult`.
    """

    prop: Callable[..., TrialResult]
    type_info: Sequence[TypeInfo]
    name: Optional[str] = None
    always_seeds: Sequence[int] = ()
    trials: int = DEFAULT_TRIALS
    seed: int = 0
    fork: ForkConfig = field(default_factory=ForkConfig)
    hooks: Hooks = field(default_factory=Hooks)

    def __post_init__(self) -> None:
        if not callable(self.prop):
            raise ConfigError("property must be callable")
        self.type_info = tuple(self.type_info)
        self.always_seeds = tuple(self.always_seeds or ())
        if self.trials < 0:
            raise ConfigError("trial count cannot be negative")
        if self.trials == 0:
            self.trials = DEFAULT_TRIALS

    def arity(self) -> int:
        """Number of generated arguments the property takes."""
        count = len(self.type_info)
        if count == 0:
            raise ConfigError("property needs at least one argument")
        if count > MAX_ARITY:
            raise ConfigError(f"property takes at most {MAX_ARITY} arguments")
        if any(ti is None for ti in self.type_info):
            raise ConfigError("type info entries cannot be None")
        return count