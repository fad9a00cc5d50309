"""
Config handling shared by the `multibag` commands.

Each command describes its options with a dataclass. Values are then layered as: dataclass
defaults, command-specific `defaults`, yaml files passed with `--config`, and finally
`key=value` overrides from the command line.
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

R = TypeVar("R")

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_error_message_for_missing_value(name: str, possible_values: List[str]) -> str:
    return f"{name} should be set to one of [{', '.join(possible_values)}]"


def _split_argv(argv: Optional[List[str]]) -> Tuple[List[str], List[str]]:
    """Separate `--config` files from `key=value` overrides."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(prog="multibag", allow_abbrev=False)
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file. "
        "Argument can be repeated multiple times, with later configs overwriting previous ones.",
    )
    args, overrides = parser.parse_known_args(argv)
    return args.config, overrides


def load_config(
    config_cls: Callable[..., R],
    config_files: Sequence[str] = (),
    overrides: Sequence[str] = (),
    defaults: Optional[Dict[str, Any]] = None,
) -> R:
    """Merge all config sources on top of the `config_cls` schema; the result is read-only."""
    sources: List[Union[DictConfig, ListConfig]] = []
    if defaults:
        sources.append(OmegaConf.create(defaults))

    sources += [OmegaConf.load(path) for path in config_files]
    sources.append(OmegaConf.from_cli(list(overrides)))

    config = OmegaConf.merge(OmegaConf.structured(config_cls), *sources)
    OmegaConf.set_readonly(config, True)
    return cast(R, config)


def check_log_level(config: Any) -> None:
    if str(config.log_level).upper() not in LOG_LEVELS:
        raise ValueError(get_error_message_for_missing_value("log_level", LOG_LEVELS))


def configure_logging(log_level: str) -> None:
    """Set up the root logger for a command; the library itself never adds handlers."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


def get_config(
    argv: Optional[List[str]],
    config_cls: Callable[..., R],
    defaults: Optional[Dict[str, Any]] = None,
    checks: Sequence[Callable[[R], None]] = (),
) -> R:
    """
    Build the config for a command and prepare the process to run it.

    Args:
        argv: Either a list of command line arguments to parse, or `None`. If `None`, this argument
            is set from `sys.argv`.
        config_cls: Dataclass specifying the config structure. It should be the class itself,
            not an instance of the class.
        defaults: Optional overrides of the dataclass defaults, applied before any config files.
        checks: Functions validating the merged config; they raise `ValueError` on bad values.

    Returns:
        Read-only config object, which will pass as an instance of `config_cls`. If the config has
        a `log_level` field, it is validated and used to configure logging.
    """
    config_files, overrides = _split_argv(argv)
    config = load_config(config_cls, config_files, overrides, defaults=defaults)

    has_log_level = "log_level" in cast(DictConfig, config)
    if has_log_level:
        check_log_level(config)

    for check in checks:
        check(config)

    if has_log_level:
        configure_logging(cast(Any, config).log_level)

    return config
