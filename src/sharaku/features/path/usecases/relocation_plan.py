"""
Summary: Compute where every folder work moves under a new template.
Why: Preview and execution must agree on the same collision-free plan.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import count
from pathlib import Path

from sharaku.platform.logging import logger as default_logger
from sharaku.shared.works import WorkDetail

from ..domain.plan import RelocationPlanItem
from .path_resolver import is_invalid_path, path_taken, resolve_work_path, with_suffix


@dataclass(slots=True)
class _Candidate:
    work: WorkDetail
    current: Path
    base: Path
    target: Path


def _reservation_key(path: Path) -> str:
    return str(path).casefold()


def _variants(base: Path) -> Iterable[Path]:
    return (with_suffix(base, f"{i:04x}") for i in count(1))


def _assign_targets(
    candidates: list[_Candidate],
    owners: dict[str, int],
    vacating: set[int],
    exists: Callable[[Path], bool],
) -> None:
    """Give each candidate ``base`` or its first free numbered variant.

    A path recorded for another work is free only when that work moves away
    in this plan. Paths no work owns are free when nothing is on disk there.
    """

    reserved: set[str] = set()
    for candidate in candidates:
        work_id = candidate.work.id

        def is_free(path: Path) -> bool:
            key = _reservation_key(path)
            if key in reserved:
                return False
            owner = owners.get(key)
            if owner is None:
                return not exists(path)
            if owner == work_id and path == candidate.current:
                return True
            return owner in vacating

        base = candidate.base
        target = base if is_free(base) else next(p for p in _variants(base) if is_free(p))
        candidate.target = target
        reserved.add(_reservation_key(target))


def _order_moves(
    moves: list[_Candidate],
    taken: set[str],
    exists: Callable[[Path], bool],
) -> list[RelocationPlanItem]:
    """Emit each move after the move that vacates its target.

    Moves chained into a cycle cannot wait on each other; the first one is
    parked at a numbered staging path and finished after the rest of the
    cycle has moved.
    """

    vacated_by = {_reservation_key(move.current): move for move in moves}
    emitted: set[int] = set()
    plan: list[RelocationPlanItem] = []

    def item(move: _Candidate, old: Path, new: Path) -> RelocationPlanItem:
        return RelocationPlanItem(
            work_id=move.work.id,
            title=move.work.title,
            old_path=str(old),
            new_path=str(new),
        )

    for start in moves:
        chain: list[_Candidate] = []
        on_chain: set[int] = set()
        node: _Candidate | None = start
        while node is not None and node.work.id not in emitted and node.work.id not in on_chain:
            chain.append(node)
            on_chain.add(node.work.id)
            node = vacated_by.get(_reservation_key(node.target))

        staged: dict[int, Path] = {}
        if node is not None and node.work.id in on_chain:
            staging = next(
                p for p in _variants(node.target) if _reservation_key(p) not in taken and not exists(p)
            )
            taken.add(_reservation_key(staging))
            staged[node.work.id] = staging
            plan.append(item(node, node.current, staging))

        for move in reversed(chain):
            plan.append(item(move, staged.get(move.work.id, move.current), move.target))
            emitted.add(move.work.id)

    return plan


def compute_relocation_plan(
    works: Iterable[WorkDetail],
    library_root: Path,
    template: str,
    type_label: str,
    *,
    exists: Callable[[Path], bool] = path_taken,
    logger: logging.Logger | None = None,
) -> list[RelocationPlanItem]:
    """Return the moves needed so each work lives at its rendered path.

    A base path claimed by an earlier work, held by a work that stays put
    (including one whose directory is missing and will be skipped), or present
    on disk without an owner is replaced by the first free ``_0001``,
    ``_0002``, ... variant. A base path held by a work that itself moves is
    kept, and that work's move is ordered first. Cycles of such moves go
    through a staging path, so one work can appear twice in the plan. Works
    that already sit at their destination are omitted.
    """

    log = logger or default_logger
    listed = list(works)
    owners = {_reservation_key(Path(work.path)): work.id for work in listed}

    candidates: list[_Candidate] = []
    for work in listed:
        base = resolve_work_path(library_root, template, work.to_metadata(type_label))
        if is_invalid_path(base, library_root):
            log.warning("Skipping %s: template resolves outside the library root", work.title)
            continue
        candidates.append(_Candidate(work=work, current=Path(work.path), base=base, target=base))

    # Only works whose directory exists actually free their path; missing ones are skipped.
    vacating = {c.work.id for c in candidates if c.base != c.current and exists(c.current)}
    while True:
        _assign_targets(candidates, owners, vacating, exists)
        moving = {c.work.id for c in candidates if c.work.id in vacating and c.target != c.current}
        if moving == vacating:
            break
        vacating = moving

    moves = [c for c in candidates if c.target != c.current]
    taken = {_reservation_key(c.target) for c in candidates} | set(owners)
    return _order_moves(moves, taken, exists)


__all__ = ["compute_relocation_plan"]
