import pytest

from theft.types import (
    DEFAULT_TRIALS,
    MAX_ARITY,
    ConfigError,
    Hooks,
    RunConfig,
    RunReport,
    TheftError,
    TrialPostInfo,
    TrialResult,
    TypeInfo,
)


def _alloc(t, env):
    return 0


def _prop(t, *args):
    return TrialResult.PASS


def _info():
    return TypeInfo(alloc=_alloc)


@pytest.mark.parametrize("count", [1, 3, MAX_ARITY])
def test_arity_counts_type_infos(count):
    cfg = RunConfig(prop=_prop, type_info=[_info() for _ in range(count)])
    assert cfg.arity() == count


def test_arity_zero_is_config_error():
    cfg = RunConfig(prop=_prop, type_info=[])
    with pytest.raises(ConfigError):
        cfg.arity()


def test_arity_too_large_is_config_error():
    cfg = RunConfig(prop=_prop, type_info=[_info() for _ in range(MAX_ARITY + 1)])
    with pytest.raises(ConfigError):
        cfg.arity()


def test_zero_trials_means_default():
    cfg = RunConfig(prop=_prop, type_info=[_info()], trials=0)
    assert cfg.trials == DEFAULT_TRIALS


def test_explicit_trials_kept():
    cfg = RunConfig(prop=_prop, type_info=[_info()], trials=5)
    assert cfg.trials == 5


def test_negative_trials_rejected():
    with pytest.raises(ConfigError):
        RunConfig(prop=_prop, type_info=[_info()], trials=-1)


def test_sequences_become_tuples():
    cfg = RunConfig(prop=_prop, type_info=[_info()], always_seeds=[1, 2])
    assert cfg.always_seeds == (1, 2)
    assert isinstance(cfg.type_info, tuple) and len(cfg.type_info) == 1


def test_type_info_requires_callable_alloc():
    with pytest.raises(ConfigError):
        TypeInfo(alloc=None)


def test_type_info_rejects_non_callable_hash():
    with pytest.raises(ConfigError):
        TypeInfo(alloc=_alloc, hash=42)


def test_config_error_is_theft_error_and_value_error():
    with pytest.raises(TheftError):
        RunConfig(prop="not callable", type_info=[_info()])
    with pytest.raises(ValueError):
        RunConfig(prop="not callable", type_info=[_info()])


def test_hooks_default_to_none():
    hooks = Hooks()
    assert hooks.trial_post is None and hooks.run_pre is None and hooks.env is None


def test_run_report_starts_at_zero():
    report = RunReport()
    assert (report.passed, report.failed, report.skipped, report.dup) == (0, 0, 0, 0)


def test_trial_post_info_not_repeat_by_default():
    info = TrialPostInfo(
        t=None, prop_name="p", total_trials=1, trial_id=0, failures=0,
        run_seed=1, trial_seed=2, arity=1, args=[3], result=TrialResult.FAIL,
    )
    assert info.repeat is False
    info.repeat = True
    assert info.repeat is True