# src/clientcron/cli/app.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from clientcron.command.assembler import build_cron_command
from clientcron.config.loader import load_config
from clientcron.errors import ClientCronError
from clientcron.jobs.planner import plan_job
from clientcron.logging.log import init_logging
from clientcron.observers.dispatcher import EventBus
from clientcron.observers.events import new_ctx
from clientcron.observers.logger import LoggerObserver
from clientcron.schedule.backend import select_backend
from clientcron.schedule.splay import splay_sleep_time
from clientcron.utils.serialize import to_jsonable


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(help="Periodic client run planner")


def _fail(exc: ClientCronError) -> typer.Exit:
    typer.echo(f"error: {exc}", err=True)
    return typer.Exit(code=1)


# ------------------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------------------

@app.command()
def splay(
    node_name: str = typer.Argument(..., help="Node name the offset is derived from"),
    window: int = typer.Option(300, "--splay", help="Splay window in seconds"),
    shard_seed: Optional[int] = typer.Option(None, "--shard-seed"),
):
    """Print the per-node sleep offset."""
    try:
        typer.echo(splay_sleep_time(node_name, window, shard_seed))
    except ClientCronError as e:
        raise _fail(e)


@app.command()
def backend(
    platform_family: str = typer.Argument(..., help="Platform family, e.g. linux or aix"),
):
    """Print which cron mechanism the platform uses."""
    try:
        typer.echo(select_backend(platform_family).value)
    except ClientCronError as e:
        raise _fail(e)


@app.command()
def command(
    config: Path = typer.Argument(..., help="clientcron YAML config"),
    node_name: str = typer.Option(..., "--node-name"),
):
    """Print the cron command for a node."""
    try:
        cfg = load_config(config)
        typer.echo(build_cron_command(cfg.command_spec(), node_name, cfg.splay, cfg.shard_seed))
    except ClientCronError as e:
        raise _fail(e)


@app.command()
def plan(
    config: Path = typer.Argument(..., help="clientcron YAML config"),
    node_name: str = typer.Option(..., "--node-name"),
    as_json: bool = typer.Option(False, "--json", help="Emit the plan as JSON"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir"),
    debug: bool = typer.Option(False, "--debug"),
):
    """Print the full job plan for a node."""
    logger, run_id, _ = init_logging(log_dir=log_dir, verbose=debug)
    bus = EventBus(observers=[LoggerObserver(logger)])

    try:
        cfg = load_config(config)
        job = plan_job(cfg, node_name, bus=bus, run_ctx=new_ctx(node=node_name, run_id=run_id))
    except ClientCronError as e:
        raise _fail(e)

    if as_json:
        typer.echo(json.dumps(to_jsonable(job), indent=2, sort_keys=True))
        return

    typer.echo(f"  Job      : {job.job_name}")
    typer.echo(f"  Backend  : {job.backend.value}")
    typer.echo(f"  Schedule : {job.schedule.expression()}")
    typer.echo(f"  User     : {job.user}")
    typer.echo(f"  Splay    : {job.offset}s")
    typer.echo(f"  Command  : {job.command}")


if __name__ == "__main__":
    app()
