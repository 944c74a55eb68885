import pytest

from clientcron.errors import ConfigurationError
from clientcron.schedule.backend import (
    CronBackend,
    PlatformFamily,
    parse_platform_family,
    select_backend,
)


def test_linux_uses_cron_d():
    assert select_backend(PlatformFamily.LINUX) is CronBackend.CRON_D
    assert select_backend("Linux") is CronBackend.CRON_D


@pytest.mark.parametrize(
    "family",
    [p for p in PlatformFamily if p is not PlatformFamily.LINUX],
)
def test_other_unix_uses_crontab(family):
    assert select_backend(family) is CronBackend.CRONTAB


def test_aliases():
    assert parse_platform_family("mac_os_x") is PlatformFamily.DARWIN
    assert parse_platform_family("solaris2") is PlatformFamily.SOLARIS
    assert select_backend("solaris2") is CronBackend.CRONTAB


@pytest.mark.parametrize("value", ["windows", "", "plan9"])
def test_unknown_family_rejected(value):
    with pytest.raises(ConfigurationError) as ei:
        select_backend(value)
    assert "Valid families" in str(ei.value)
