# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/command/assembler.py

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..errors import ConfigurationError
from ..schedule.splay import SeedOverride, splay_sleep_time

CONFIG_FILE_NAME = "client.rb"
FAILURE_MESSAGE = "Chef Infra Client execution failed"


class LogMode(str, Enum):
    STDOUT = "stdout"
    APPEND_FILE = "append-file"
    TRUNCATE_REDIRECT = "truncate-redirect"


@dataclass(frozen=True)
class JobCommandSpec:
    """
    Everything needed to write the cron command for one client run.
    """
    binary_path: str
    config_directory: str
    daemon_options: Tuple[str, ...] = field(default_factory=tuple)
    accept_license: bool = False
    log_mode: LogMode = LogMode.STDOUT
    log_file_path: Optional[str] = None
    mailto: Optional[str] = None

    def __post_init__(self):
        # accept lists from config and keep the value hashable
        object.__setattr__(self, "daemon_options", tuple(self.daemon_options))
        try:
            object.__setattr__(self, "log_mode", LogMode(self.log_mode))
        except ValueError:
            valid = ", ".join(m.value for m in LogMode)
            raise ConfigurationError(
                f"Unknown log mode '{self.log_mode}'\nValid modes: {valid}"
            ) from None
        if self.log_mode is not LogMode.STDOUT and not self.log_file_path:
            raise ConfigurationError(
                f"log mode '{self.log_mode.value}' requires a log file path"
            )

    @property
    def config_file_path(self) -> str:
        return posixpath.join(self.config_directory, CONFIG_FILE_NAME)


def log_clause(spec: JobCommandSpec) -> str:
    """The part of the cron command that decides where client output goes."""
    if spec.log_mode is LogMode.APPEND_FILE:
        return f"-L {spec.log_file_path}"
    if spec.log_mode is LogMode.TRUNCATE_REDIRECT:
        return f"> {spec.log_file_path} 2>&1"
    return ""


def cron_command(spec: JobCommandSpec, offset: int) -> str:
    """
    The complete cron command for a client run that sleeps ``offset``
    seconds first.
    """
    cmd = f"/bin/sleep {offset}; "
    cmd += f"{spec.binary_path} "
    if spec.daemon_options:
        cmd += f"{' '.join(spec.daemon_options)} "
    cmd += f"-c {spec.config_file_path} "
    if spec.accept_license:
        cmd += "--chef-license accept "
    cmd += log_clause(spec)
    # cron only mails when the job prints something
    if spec.mailto:
        cmd += f' || echo "{FAILURE_MESSAGE}"'
    return cmd


def build_cron_command(
    spec: JobCommandSpec,
    node_name: Optional[str],
    splay: int,
    shard_seed: Optional[SeedOverride] = None,
) -> str:
    return cron_command(spec, splay_sleep_time(node_name, splay, shard_seed))
