"""Flags shared by every verb, and applying them before a command runs."""

from __future__ import annotations

import argparse

from gcal.commands.flags import FlagSet
from gcal.config import GcalConfig, load_config
from gcal.logging_config import setup_logging


def register_global_flags(flags: FlagSet) -> None:
    flags.add_flag("--config", metavar="PATH", help="settings file (default ~/.config/gcal/gcal.yaml)")
    flags.add_flag("--log-level", metavar="LEVEL", help="log level: debug, info, warning, error")


def apply_global_options(options: argparse.Namespace) -> GcalConfig:
    """Load settings and configure logging from the parsed global flags.

    Precedence for each logging setting: flag, then settings file, then the
    GCAL_LOG_LEVEL / GCAL_LOG_FORMAT environment variables.
    """
    flag_level = getattr(options, "log_level", None)

    # settings file problems are logged, so install a handler first
    setup_logging(flag_level)
    config = load_config(getattr(options, "config", None))

    log_format = config.logging.format
    setup_logging(
        flag_level or config.logging.level,
        json_output=None if log_format is None else log_format == "json",
    )
    return config


__all__ = ["apply_global_options", "register_global_flags"]
