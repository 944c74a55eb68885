import pytest

from clientcron.config.models import ClientCronConfig
from clientcron.errors import ConfigurationError, InvalidNodeIdentityError
from clientcron.jobs.models import CronSchedule
from clientcron.jobs.planner import plan_job, resolve_schedule
from clientcron.schedule.interval import interval_schedule
from clientcron.observers.dispatcher import EventBus
from clientcron.observers.events import JobPlanFailed, JobPlanned
from clientcron.schedule.backend import CronBackend
from clientcron.schedule.splay import splay_sleep_time

class Capture:
    def __init__(self): self.events = []
    def notify(self, ev): self.events.append(ev)


@pytest.mark.parametrize(
    "interval,minute,hour",
    [
        (30, "0,30", "*"),
        (15, "0,15,30,45", "*"),
        (1, ",".join(str(m) for m in range(60)), "*"),
        (60, "0", "*"),
        (120, "0", "*/2"),
        (1440, "0", "0"),
    ],
)
def test_interval_schedule(interval, minute, hour):
    s = interval_schedule(interval)
    assert (s.minute, s.hour) == (minute, hour)


@pytest.mark.parametrize("interval", [0, -5, 7, 45, 90, 300])
def test_interval_schedule_rejects_uneven(interval):
    with pytest.raises(ConfigurationError):
        interval_schedule(interval)


def test_explicit_cron_fields_win():
    cfg = ClientCronConfig(interval=30, minute="*/10", weekday="1-5")
    assert resolve_schedule(cfg) == CronSchedule(minute="*/10", hour="*", weekday="1-5")
    assert resolve_schedule(cfg).expression() == "*/10 * * * 1-5"


def test_plan_job_and_emits_event():
    cfg = ClientCronConfig(
        splay=300,
        mailto="ops@example.com",
        chef_binary_path="/usr/bin/chef-client",
        environment={"PATH": "/usr/bin"},
    )
    cap = Capture()
    job = plan_job(cfg, "web-01", bus=EventBus([cap]))

    offset = splay_sleep_time("web-01", 300)
    assert job.offset == offset
    assert job.backend is CronBackend.CRON_D
    assert job.schedule.expression() == "0,30 * * * *"
    assert job.user == "root"
    assert job.environment == {"PATH": "/usr/bin"}
    assert job.command == (
        f"/bin/sleep {offset}; /usr/bin/chef-client -c /etc/chef/client.rb "
        '-L /var/log/chef/client.log || echo "Chef Infra Client execution failed"'
    )

    pe = next(e for e in cap.events if isinstance(e, JobPlanned))
    assert pe.node == "web-01"
    assert pe.backend == "cron_d"
    assert pe.command == job.command


def test_plan_job_is_repeatable():
    cfg = ClientCronConfig(platform_family="freebsd")
    assert plan_job(cfg, "bsd-1") == plan_job(cfg, "bsd-1")
    assert plan_job(cfg, "bsd-1").backend is CronBackend.CRONTAB


def test_plan_job_with_shard_seed_needs_no_node_name():
    cfg = ClientCronConfig(shard_seed=4, splay=60)
    assert plan_job(cfg, None).offset == splay_sleep_time(None, 60, 4)


def test_plan_job_failure_emits_and_raises():
    cap = Capture()
    with pytest.raises(InvalidNodeIdentityError):
        plan_job(ClientCronConfig(), "", bus=EventBus([cap]))
    pf = next(e for e in cap.events if isinstance(e, JobPlanFailed))
    assert "node name is required" in pf.error


def test_broken_observer_does_not_break_planning():
    class Broken:
        def notify(self, ev): raise RuntimeError("boom")
    cap = Capture()
    job = plan_job(ClientCronConfig(), "web-01", bus=EventBus([Broken(), cap]))
    assert job.job_name == "chef-client"
    assert len(cap.events) == 1
