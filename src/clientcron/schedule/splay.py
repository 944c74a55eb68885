# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/schedule/splay.py

from __future__ import annotations

import hashlib
import logging
import random
from typing import Optional, Union

from ..errors import ConfigurationError, InvalidNodeIdentityError

log = logging.getLogger("clientcron")

SeedOverride = Union[int, str]


def coerce_shard_seed(shard_seed: SeedOverride) -> int:
    if isinstance(shard_seed, bool):
        raise ConfigurationError(f"shard_seed must be an integer, got {shard_seed!r}")
    try:
        value = int(shard_seed)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"shard_seed must be an integer, got {shard_seed!r}") from exc
    return abs(value)


def derive_seed(node_name: Optional[str], shard_seed: Optional[SeedOverride] = None) -> int:
    """
    Seed for the splay generator.

    An explicit ``shard_seed`` wins and is used as an unsigned integer.
    Otherwise the MD5 hex digest of the node name is read as a base-16
    integer, so every node lands on its own stable seed.
    """
    if shard_seed is not None:
        return coerce_shard_seed(shard_seed)

    if not node_name:
        raise InvalidNodeIdentityError(
            "node name is required to derive a splay seed when no shard_seed is set"
        )

    digest = hashlib.md5(node_name.encode("utf-8"), usedforsecurity=False).hexdigest()
    return int(digest, 16)


def splay_sleep_time(
    node_name: Optional[str],
    splay: int,
    shard_seed: Optional[SeedOverride] = None,
) -> int:
    """
    Uniformly distributed, per-node sleep time in ``[0, splay)``.

    The generator is CPython's ``random.Random`` (MT19937) seeded with
    :func:`derive_seed`; sampling is ``randrange(splay)``. Same seed and
    same window always give the same offset.
    """
    if isinstance(splay, bool) or not isinstance(splay, int):
        raise ConfigurationError(f"splay must be an integer number of seconds, got {splay!r}")
    if splay < 0:
        raise ConfigurationError(f"splay must be >= 0, got {splay}")

    seed = derive_seed(node_name, shard_seed)
    if splay == 0:
        return 0

    offset = random.Random(seed).randrange(splay)
    log.debug(f"splay for {node_name or '<override>'}: {offset}s of {splay}s")
    return offset
