import pytest

from pr_manager.core.errors import InvalidOptionError
from pr_manager.core.options import (
    DEFAULT_MERGE_STRATEGY,
    MERGE_METHOD_CHOICES,
    MergeStrategy,
    WorkflowOptions,
)


def test_choices_cover_every_strategy() -> None:
    assert MERGE_METHOD_CHOICES == ("merge", "squash", "rebase", "auto")


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_flag_round_trip(strategy: MergeStrategy) -> None:
    assert MergeStrategy.from_flag(strategy.flag) is strategy
    assert MergeStrategy.from_value(strategy.display) is strategy


def test_flags_are_distinct() -> None:
    flags = [strategy.flag for strategy in MergeStrategy]

    assert len(set(flags)) == len(flags)


@pytest.mark.parametrize("value", ["fast-forward", "SQUASH", "", " merge"])
def test_from_value_rejects_unknown(value: str) -> None:
    with pytest.raises(InvalidOptionError, match="unknown merge method"):
        MergeStrategy.from_value(value)


def test_from_flag_rejects_unknown() -> None:
    with pytest.raises(InvalidOptionError):
        MergeStrategy.from_flag("--ff-only")


def test_workflow_options_default_strategy() -> None:
    options = WorkflowOptions(auto=False, verbose=False)

    assert options.merge_strategy is DEFAULT_MERGE_STRATEGY is MergeStrategy.MERGE
