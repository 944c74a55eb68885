import logging

from clientcron.observers.dispatcher import EventBus
from clientcron.observers.events import JobPlanFailed, JobPlanned, new_ctx
from clientcron.observers.logger import LoggerObserver


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []
    def emit(self, record):
        self.records.append(record)


def _logger():
    logger = logging.getLogger("clientcron.test-observer")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = _ListHandler()
    logger.handlers = [handler]
    return logger, handler


def test_new_ctx_keeps_run_id():
    ctx = new_ctx(node="web-01", run_id="run-1")
    assert ctx["run_id"] == "run-1"
    assert ctx["node"] == "web-01"
    assert ctx["ts"].endswith("Z")
    assert new_ctx(node=None)["run_id"]


def test_logger_observer_reports_planned_and_failed():
    logger, handler = _logger()
    bus = EventBus([LoggerObserver(logger)])
    ctx = new_ctx(node="web-01")

    bus.emit(JobPlanned(job_name="chef-client", backend="cron_d", offset=17, command="/bin/sleep 17; x", **ctx))
    bus.emit(JobPlanFailed(error="bad splay", **ctx))

    levels = [r.levelno for r in handler.records]
    messages = [r.getMessage() for r in handler.records]
    assert logging.INFO in levels and logging.ERROR in levels
    assert any("splay 17s" in m for m in messages)
    assert any("bad splay" in m for m in messages)


def test_event_dict():
    ev = JobPlanFailed(error="x", **new_ctx(node="n", run_id="r"))
    assert ev.dict()["error"] == "x"
    assert ev.dict()["run_id"] == "r"
