# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/schedule/interval.py

from __future__ import annotations

from ..errors import ConfigurationError
from ..jobs.models import CronSchedule


def interval_schedule(interval_minutes: int) -> CronSchedule:
    """
    Cron minute/hour fields that fire every ``interval_minutes``.

    Sub-hour intervals must divide the hour; longer ones must be whole
    hours that divide the day.
    """
    if interval_minutes <= 0:
        raise ConfigurationError(f"interval must be > 0 minutes, got {interval_minutes}")

    if interval_minutes < 60:
        if 60 % interval_minutes:
            raise ConfigurationError(
                f"interval of {interval_minutes} minutes does not divide an hour"
            )
        minutes = ",".join(str(m) for m in range(0, 60, interval_minutes))
        return CronSchedule(minute=minutes, hour="*")

    hours, rest = divmod(interval_minutes, 60)
    if rest or 24 % hours:
        raise ConfigurationError(
            f"interval of {interval_minutes} minutes must be whole hours dividing a day"
        )
    if hours == 1:
        return CronSchedule(minute="0", hour="*")
    if hours == 24:
        return CronSchedule(minute="0", hour="0")
    return CronSchedule(minute="0", hour=f"*/{hours}")
