# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/observers/logger.py
from __future__ import annotations
import logging
from .events import BaseEvent, JobPlanFailed, JobPlanned


class LoggerObserver:
    def __init__(self, logger: logging.Logger | None = None):
        self._log = logger or logging.getLogger("clientcron")

    def notify(self, event: BaseEvent) -> None:
        if isinstance(event, JobPlanned):
            self._log.info(
                f"[{event.node}] planned {event.job_name} via {event.backend}, "
                f"splay {event.offset}s"
            )
            self._log.debug(f"[{event.node}] command: {event.command}")
        elif isinstance(event, JobPlanFailed):
            self._log.error(f"[{event.node}] planning failed: {event.error}")
        else:
            self._log.debug(f"event {type(event).__name__}: {event.dict()}")
