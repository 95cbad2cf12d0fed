# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dependency closure resolution against batched package metadata."""

from __future__ import annotations

import logging
from collections.abc import Container, Iterable

from dtmgr.config.models import DtMgrConfig
from dtmgr.core.config.constants import ARCH_SUFFIX, BASE_SEEDS
from dtmgr.platform.capabilities import PlatformCapability
from dtmgr.tlmgr.models import BatchQuery, PackageRecord

LOGGER = logging.getLogger(__name__)


def resolve_arch(dependency: str, platform: str) -> str:
    """Substitute ``platform`` for a trailing ``.ARCH`` marker.

    Only a marker at the very end of the name is substituted; ``foo.ARCH.bar``
    is returned unchanged.

    Args:
        dependency: Dependency name as declared by a package.
        platform: Current TeX Live platform identifier.

    Returns:
        str: The concrete package name to query.
    """

    if dependency.endswith(ARCH_SUFFIX):
        return f"{dependency[: -len(ARCH_SUFFIX)]}.{platform}"
    return dependency


def default_seeds(config: DtMgrConfig, capability: PlatformCapability) -> set[str]:
    """Return the initial frontier for ``config`` on the host platform.

    The seeds are the TeX Live infrastructure packages every overlay needs,
    any host-specific extras, and each declared dependency.
    """

    seeds = set(BASE_SEEDS)
    seeds.update(capability.extra_seeds)
    seeds.update(config.dependencies)
    return seeds


def resolve_closure(
    seeds: Iterable[str],
    platform: str,
    query: BatchQuery,
) -> dict[str, PackageRecord]:
    """Return every package reachable from ``seeds``.

    The metadata provider is called once per round with the whole frontier,
    so the number of calls is bounded by the depth of the dependency graph
    rather than its size. A name is queried at most once per run, which also
    guarantees termination on cyclic graphs and on names the provider never
    returns.

    Args:
        seeds: Package names to start from.
        platform: Platform identifier used for ``.ARCH`` substitution.
        query: Batched metadata lookup.

    Returns:
        dict[str, PackageRecord]: Resolved records keyed by package name.

    Raises:
        MetadataUnavailable: Propagated from ``query`` when a lookup fails.
        MetadataMalformed: Propagated from ``query`` when a response is invalid.
    """

    resolved: dict[str, PackageRecord] = {}
    queried: set[str] = set()
    frontier: set[str] = set(seeds)
    rounds = 0

    while frontier:
        rounds += 1
        LOGGER.debug("metadata round %d: %d package(s)", rounds, len(frontier))
        queried.update(frontier)
        records = query(frozenset(frontier))
        frontier = set()

        for record in records:
            if record.name in resolved:
                continue
            resolved[record.name] = record
            frontier.update(_pending_dependencies(record, platform, resolved))

        frontier.difference_update(resolved)
        frontier.difference_update(queried)

    LOGGER.debug("resolved %d package(s) in %d round(s)", len(resolved), rounds)
    return resolved


def _pending_dependencies(
    record: PackageRecord,
    platform: str,
    resolved: Container[str],
) -> set[str]:
    pending: set[str] = set()
    for dependency in record.dependencies:
        name = resolve_arch(dependency, platform)
        if name not in resolved:
            pending.add(name)
    return pending


__all__ = ["default_seeds", "resolve_arch", "resolve_closure"]
