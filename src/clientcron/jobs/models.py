# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/jobs/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..schedule.backend import CronBackend


@dataclass(frozen=True)
class CronSchedule:
    """
    Cron timing fields, in crontab syntax.
    """
    minute: str = "0,30"
    hour: str = "*"
    day: str = "*"
    month: str = "*"
    weekday: str = "*"

    def expression(self) -> str:
        return f"{self.minute} {self.hour} {self.day} {self.month} {self.weekday}"


@dataclass(frozen=True)
class CronJobPlan:
    """
    What the job-registration step needs to write one periodic client run.
    """
    job_name: str
    backend: CronBackend
    schedule: CronSchedule
    user: str
    offset: int                   # seconds slept before the run
    command: str
    mailto: Optional[str] = None
    path: Optional[str] = None
    environment: Dict[str, str] = field(default_factory=dict)
