# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/schedule/backend.py

from __future__ import annotations

from enum import Enum
from typing import Union

from ..errors import ConfigurationError


class PlatformFamily(str, Enum):
    LINUX = "linux"
    AIX = "aix"
    SOLARIS = "solaris"
    FREEBSD = "freebsd"
    OPENBSD = "openbsd"
    NETBSD = "netbsd"
    DARWIN = "darwin"


class CronBackend(str, Enum):
    CRON_D = "cron_d"      # drop file in /etc/cron.d
    CRONTAB = "crontab"    # legacy per-user crontab


_ALIASES = {
    "mac_os_x": PlatformFamily.DARWIN,
    "macos": PlatformFamily.DARWIN,
    "solaris2": PlatformFamily.SOLARIS,
}


def parse_platform_family(value: Union[str, PlatformFamily]) -> PlatformFamily:
    if isinstance(value, PlatformFamily):
        return value

    key = str(value).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return PlatformFamily(key)
    except ValueError:
        valid = ", ".join(sorted(p.value for p in PlatformFamily))
        raise ConfigurationError(
            f"Unsupported platform family '{value}'\nValid families: {valid}"
        ) from None


def select_backend(platform_family: Union[str, PlatformFamily]) -> CronBackend:
    """
    Linux hosts all support /etc/cron.d; Solaris, AIX and the BSDs only
    have the crontab.
    """
    family = parse_platform_family(platform_family)
    if family is PlatformFamily.LINUX:
        return CronBackend.CRON_D
    return CronBackend.CRONTAB
