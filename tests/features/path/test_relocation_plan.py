"""Tests for relocation planning."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sharaku.features.path import RelocationPlanItem, compute_relocation_plan, invalid_path
from sharaku.features.path.usecases import relocation_plan
from sharaku.shared.works import WorkDetail, WorkType


def _work(work_id: int, path: Path, title: str, artist: str | None = None) -> WorkDetail:
    return WorkDetail(
        id=work_id,
        title=title,
        path=str(path),
        work_type=WorkType.FOLDER,
        page_count=1,
        created_at="2025-01-01 00:00:00",
        artist=artist,
    )


def test_plan_moves_work_to_rendered_path(library_root: Path) -> None:
    old = library_root / "old"
    old.mkdir()
    works = [_work(1, old, "Title", "Artist")]

    plan = compute_relocation_plan(works, library_root, "{artist}/{title}", "Folder")

    assert len(plan) == 1
    assert plan[0].work_id == 1
    assert plan[0].old_path == str(old)
    assert plan[0].new_path == str(library_root / "Artist" / "Title")


def test_plan_omits_works_already_in_place(library_root: Path) -> None:
    current = library_root / "Artist" / "Title"
    current.mkdir(parents=True)

    plan = compute_relocation_plan(
        [_work(1, current, "Title", "Artist")],
        library_root,
        "{artist}/{title}",
        "Folder",
    )

    assert plan == []


def test_plan_gives_colliding_works_distinct_paths(library_root: Path) -> None:
    works = [
        _work(1, library_root / "a", "Same"),
        _work(2, library_root / "b", "Same"),
        _work(3, library_root / "c", "Same"),
    ]
    for work in works:
        Path(work.path).mkdir()

    plan = compute_relocation_plan(works, library_root, "{title}", "Folder")

    new_paths = [item.new_path for item in plan]
    assert new_paths == [
        str(library_root / "Same"),
        str(library_root / "Same_0001"),
        str(library_root / "Same_0002"),
    ]


def test_plan_avoids_existing_directories(library_root: Path) -> None:
    (library_root / "Title").mkdir()
    old = library_root / "old"
    old.mkdir()

    plan = compute_relocation_plan([_work(1, old, "Title")], library_root, "{title}", "Folder")

    assert plan[0].new_path == str(library_root / "Title_0001")


def test_plan_treats_case_variants_as_collisions(library_root: Path) -> None:
    works = [_work(1, library_root / "x", "Work"), _work(2, library_root / "y", "WORK")]

    plan = compute_relocation_plan(works, library_root, "{title}", "Folder", exists=lambda _p: False)

    assert [item.new_path for item in plan] == [
        str(library_root / "Work"),
        str(library_root / "WORK_0001"),
    ]


def test_plan_is_idempotent_for_suffixed_paths(library_root: Path) -> None:
    first = library_root / "Same"
    second = library_root / "Same_0001"
    first.mkdir()
    second.mkdir()
    works = [_work(1, first, "Same"), _work(2, second, "Same")]

    assert compute_relocation_plan(works, library_root, "{title}", "Folder") == []


def test_unchanged_work_reserves_its_path(library_root: Path) -> None:
    works = [
        _work(1, library_root / "Same", "Same"),
        _work(2, library_root / "elsewhere", "Same"),
    ]

    plan = compute_relocation_plan(works, library_root, "{title}", "Folder", exists=lambda _p: False)

    assert [item.work_id for item in plan] == [2]
    assert plan[0].new_path == str(library_root / "Same_0001")


def test_plan_uses_type_label(library_root: Path) -> None:
    plan = compute_relocation_plan(
        [_work(1, library_root / "old", "T")],
        library_root,
        "{type}/{title}",
        "Manga",
        exists=lambda _p: False,
    )

    assert plan[0].new_path == str(library_root / "Manga" / "T")


def test_plan_skips_works_resolving_outside_root(
    library_root: Path,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        relocation_plan,
        "resolve_work_path",
        lambda root, _template, _metadata: invalid_path(root),
    )
    test_logger = logging.getLogger("tests.plan")

    with caplog.at_level(logging.WARNING, logger="tests.plan"):
        plan = compute_relocation_plan(
            [_work(1, library_root / "old", "T")],
            library_root,
            "{title}",
            "Folder",
            exists=lambda _p: False,
            logger=test_logger,
        )

    assert plan == []
    assert "outside the library root" in caplog.text


def _moves(plan: list[RelocationPlanItem]) -> list[tuple[int, str, str]]:
    return [(item.work_id, item.old_path, item.new_path) for item in plan]


def test_plan_avoids_path_recorded_for_work_with_missing_directory(library_root: Path) -> None:
    old = library_root / "old" / "A"
    old.mkdir(parents=True)
    vanished = library_root / "Unknown" / "A"
    works = [_work(1, old, "A"), _work(2, vanished, "B")]

    plan = compute_relocation_plan(works, library_root, "{artist}/{title}", "Folder")

    assert _moves(plan) == [
        (1, str(old), str(library_root / "Unknown" / "A_0001")),
        (2, str(vanished), str(library_root / "Unknown" / "B")),
    ]


def test_plan_orders_move_after_work_vacating_its_target(library_root: Path) -> None:
    works = [_work(1, library_root / "A", "B"), _work(2, library_root / "B", "C")]
    for work in works:
        Path(work.path).mkdir()

    plan = compute_relocation_plan(works, library_root, "{title}", "Folder")

    assert _moves(plan) == [
        (2, str(library_root / "B"), str(library_root / "C")),
        (1, str(library_root / "A"), str(library_root / "B")),
    ]


def test_plan_swaps_works_through_staging_path(library_root: Path) -> None:
    works = [_work(1, library_root / "Y", "X"), _work(2, library_root / "X", "Y")]
    for work in works:
        Path(work.path).mkdir()

    plan = compute_relocation_plan(works, library_root, "{title}", "Folder")

    assert _moves(plan) == [
        (1, str(library_root / "Y"), str(library_root / "X_0001")),
        (2, str(library_root / "X"), str(library_root / "Y")),
        (1, str(library_root / "X_0001"), str(library_root / "X")),
    ]
    new_paths = [item.new_path for item in plan]
    assert len(set(new_paths)) == len(new_paths)


def test_plan_renames_case_only_change_through_staging_path(library_root: Path) -> None:
    current = library_root / "title"
    current.mkdir()

    plan = compute_relocation_plan([_work(1, current, "Title")], library_root, "{title}", "Folder")

    assert _moves(plan) == [
        (1, str(current), str(library_root / "Title_0001")),
        (1, str(library_root / "Title_0001"), str(library_root / "Title")),
    ]
