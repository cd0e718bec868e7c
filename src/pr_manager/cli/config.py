import tomllib
from dataclasses import dataclass
from pathlib import Path

from pr_manager.core.errors import InvalidOptionError
from pr_manager.core.options import (
    DEFAULT_MERGE_STRATEGY,
    MergeStrategy,
    WorkflowOptions,
)


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `.pr-manager/config.toml`."""

    merge_method: str | None  # None = use built-in default
    auto: bool


def load_config(config_dir: Path) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Example config:
      [workflow]
      merge_method = "squash"
      auto = false
    """

    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return LoadedConfig(merge_method=None, auto=False)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidOptionError(f"invalid config file {cfg_path}: {e}") from e

    workflow = data.get("workflow", {})
    if not isinstance(workflow, dict):
        raise InvalidOptionError(f"invalid config file {cfg_path}: [workflow] must be a table")

    merge_method = workflow.get("merge_method")
    if merge_method is not None and not isinstance(merge_method, str):
        raise InvalidOptionError(
            f"invalid config file {cfg_path}: 'merge_method' must be a string"
        )

    auto = workflow.get("auto", False)
    if not isinstance(auto, bool):
        raise InvalidOptionError(f"invalid config file {cfg_path}: 'auto' must be true or false")

    return LoadedConfig(merge_method=merge_method, auto=auto)


def build_workflow_options(
    config: LoadedConfig,
    *,
    auto: bool,
    verbose: bool,
    merge_method: str | None,
) -> WorkflowOptions:
    """Combine command-line flags with config.

    Precedence: command-line flag, then config file, then built-in default.
    A flag can only turn automatic mode on, never off.

    Raises:
        InvalidOptionError: If the effective merge method is not recognized
    """
    if merge_method is not None:
        strategy = MergeStrategy.from_value(merge_method)
    elif config.merge_method is not None:
        strategy = MergeStrategy.from_value(config.merge_method)
    else:
        strategy = DEFAULT_MERGE_STRATEGY

    return WorkflowOptions(
        auto=auto or config.auto,
        verbose=verbose,
        merge_strategy=strategy,
    )
