# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/jobs/planner.py

from __future__ import annotations

import logging
from typing import Optional

from ..command.assembler import cron_command
from ..config.models import ClientCronConfig
from ..observers.dispatcher import EventBus
from ..observers.events import JobPlanFailed, JobPlanned, new_ctx
from ..schedule.backend import select_backend
from ..schedule.interval import interval_schedule
from ..schedule.splay import splay_sleep_time
from .models import CronJobPlan, CronSchedule

log = logging.getLogger("clientcron")


def resolve_schedule(cfg: ClientCronConfig) -> CronSchedule:
    base = interval_schedule(cfg.interval)
    return CronSchedule(
        minute=cfg.minute or base.minute,
        hour=cfg.hour or base.hour,
        day=cfg.day,
        month=cfg.month,
        weekday=cfg.weekday,
    )


def plan_job(
    cfg: ClientCronConfig,
    node_name: Optional[str],
    bus: Optional[EventBus] = None,
    run_ctx: Optional[dict] = None,
) -> CronJobPlan:
    """
    Compute the full periodic-run job for one node.
    Emits JobPlanned / JobPlanFailed if an EventBus is provided.
    """
    ctx = run_ctx or new_ctx(node=node_name)
    try:
        offset = splay_sleep_time(node_name, cfg.splay, cfg.shard_seed)
        command = cron_command(cfg.command_spec(), offset)
        backend = select_backend(cfg.platform_family)

        plan = CronJobPlan(
            job_name=cfg.job_name,
            backend=backend,
            schedule=resolve_schedule(cfg),
            user=cfg.user,
            offset=offset,
            command=command,
            mailto=cfg.mailto,
            path=cfg.path,
            environment=dict(cfg.environment),
        )
        log.debug(f"planned {plan.job_name} for {node_name}: {plan.schedule.expression()}")

        if bus:
            bus.emit(JobPlanned(
                job_name=plan.job_name,
                backend=backend.value,
                offset=offset,
                command=command,
                **ctx,
            ))
        return plan

    except Exception as e:
        if bus:
            bus.emit(JobPlanFailed(error=str(e), **ctx))
        raise
