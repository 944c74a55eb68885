# src/clientcron/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import uuid


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events in a single convergence pass
    node: Optional[str]

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(node: Optional[str], run_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "run_id": run_id or str(uuid.uuid4()),
        "node": node,
    }


# ---------------------------------------------------------------------
# Job planning
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class JobPlanned(BaseEvent):
    job_name: str
    backend: str
    offset: int
    command: str

@dataclass(frozen=True)
class JobPlanFailed(BaseEvent):
    error: str
