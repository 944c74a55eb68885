# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/config/models.py

from __future__ import annotations

import posixpath
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, StrictInt, field_validator

from ..command.assembler import JobCommandSpec, LogMode
from ..schedule.backend import PlatformFamily, parse_platform_family
from ..schedule.interval import interval_schedule
from ..schedule.splay import coerce_shard_seed


class ClientCronConfig(BaseModel):
    """
    Settings for the periodic client run on one node.

    Field names follow the periodic-run resource so existing attribute
    files map straight across.
    """

    job_name: str = "chef-client"
    user: str = "root"

    # schedule: explicit cron fields win over interval
    interval: StrictInt = Field(default=30, gt=0)
    minute: Optional[str] = None
    hour: Optional[str] = None
    day: str = "*"
    month: str = "*"
    weekday: str = "*"

    splay: StrictInt = Field(default=300, ge=0)
    shard_seed: Optional[Union[StrictInt, str]] = None

    mailto: Optional[str] = None
    path: Optional[str] = None
    environment: Dict[str, str] = Field(default_factory=dict)

    chef_binary_path: str = "/opt/chef/bin/chef-client"
    daemon_options: List[str] = Field(default_factory=list)
    config_directory: str = "/etc/chef"
    accept_chef_license: bool = False

    log_directory: str = "/var/log/chef"
    log_file_name: str = "client.log"
    append_log_file: bool = True
    log_to_stdout: bool = False

    platform_family: PlatformFamily = PlatformFamily.LINUX

    model_config = {
        "extra": "forbid"
    }

    @field_validator("platform_family", mode="before")
    @classmethod
    def _platform_family(cls, v):
        return parse_platform_family(v)

    @field_validator("shard_seed")
    @classmethod
    def _shard_seed(cls, v):
        if v is not None:
            coerce_shard_seed(v)
        return v

    @field_validator("interval")
    @classmethod
    def _interval(cls, v):
        interval_schedule(v)
        return v

    @property
    def log_mode(self) -> LogMode:
        if self.log_to_stdout:
            return LogMode.STDOUT
        if self.append_log_file:
            return LogMode.APPEND_FILE
        return LogMode.TRUNCATE_REDIRECT

    @property
    def log_file_path(self) -> Optional[str]:
        if self.log_mode is LogMode.STDOUT:
            return None
        return posixpath.join(self.log_directory, self.log_file_name)

    def command_spec(self) -> JobCommandSpec:
        return JobCommandSpec(
            binary_path=self.chef_binary_path,
            config_directory=self.config_directory,
            daemon_options=tuple(self.daemon_options),
            accept_license=self.accept_chef_license,
            log_mode=self.log_mode,
            log_file_path=self.log_file_path,
            mailto=self.mailto,
        )
