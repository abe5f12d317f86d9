"""Tests for wiping generated output before a new run."""

import logging
from pathlib import Path
from typing import Any

from apisite.wipe_out_target import execute_wipe, plan_wipe, wipe_out_target


def _populate(target: Path) -> None:
    (target / "resources" / "img").mkdir(parents=True)
    (target / "resources" / "style.css").write_text("css")
    (target / "resources" / "img" / "logo.png").write_bytes(b"png")
    (target / "index.html").write_text("overview")
    (target / "elementlist.js").write_text("js")
    (target / "class-A.Foo.html").write_text("foo")
    (target / "namespace-A.html").write_text("ns")
    (target / "package-None.html").write_text("pkg")
    (target / "source-A.Foo.php.html").write_text("src")


def test_wipe_removes_generated_files_only(
    tmp_path: Path, config: dict[str, Any]
) -> None:
    """Verify that generated files go and hand-authored files stay."""
    _populate(tmp_path)
    (tmp_path / ".htaccess").write_text("deny")
    (tmp_path / "notes.txt").write_text("keep")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.svg").write_text("keep")

    assert wipe_out_target(tmp_path, config)

    remaining = sorted(p.relative_to(tmp_path).as_posix() for p in tmp_path.rglob("*"))
    assert remaining == [".htaccess", "assets", "assets/logo.svg", "notes.txt"]


def test_wipe_matches_patterns_in_subdirectories(
    tmp_path: Path, config: dict[str, Any]
) -> None:
    """Verify that generated pages are found below the target root."""
    (tmp_path / "old").mkdir()
    (tmp_path / "old" / "class-Gone.html").write_text("stale")
    (tmp_path / "old" / "index.html").write_text("stale")
    (tmp_path / "old" / "readme.html").write_text("keep")

    assert wipe_out_target(tmp_path, config)

    assert not (tmp_path / "old" / "class-Gone.html").exists()
    assert not (tmp_path / "old" / "index.html").exists()
    assert (tmp_path / "old" / "readme.html").exists()


def test_wipe_missing_or_empty_target_succeeds(
    tmp_path: Path, config: dict[str, Any]
) -> None:
    """Verify that wiping is idempotent."""
    assert wipe_out_target(tmp_path / "missing", config)
    assert wipe_out_target(tmp_path, config)
    _populate(tmp_path)
    assert wipe_out_target(tmp_path, config)
    assert wipe_out_target(tmp_path, config)
    assert list(tmp_path.iterdir()) == []


def test_plan_lists_resource_children_before_parents(
    tmp_path: Path, config: dict[str, Any]
) -> None:
    """Verify bottom-up ordering and that nothing is listed twice."""
    _populate(tmp_path)
    (tmp_path / "resources" / "class-X.html").write_text("inside resources")
    plan = plan_wipe(tmp_path, config)

    steps = plan.steps()
    assert len(steps) == len(set(steps))
    res = tmp_path / "resources"
    assert plan.resource_entries[-1] == res
    assert steps.index(res / "img" / "logo.png") < steps.index(res / "img")
    assert res / "class-X.html" not in plan.generated_files
    assert plan.common_files == [tmp_path / "elementlist.js", tmp_path / "index.html"]


def test_wipe_stops_at_first_failure(
    tmp_path: Path, config: dict[str, Any], caplog
) -> None:
    """Verify that a failed deletion returns False and records progress."""
    _populate(tmp_path)
    plan = plan_wipe(tmp_path, config)
    # Make one planned directory non-empty so removing it fails.
    (tmp_path / "resources" / "img" / "late.txt").write_text("appeared")

    with caplog.at_level(logging.WARNING):
        assert execute_wipe(plan) is False

    assert plan.completed == plan.steps().index(tmp_path / "resources" / "img")
    assert "Cannot remove" in caplog.text
    assert (tmp_path / "index.html").exists()

    (tmp_path / "resources" / "img" / "late.txt").unlink()
    assert execute_wipe(plan) is True
    assert not (tmp_path / "index.html").exists()


def test_wipe_keeps_the_directory_part_of_patterns(
    tmp_path: Path, config: dict[str, Any]
) -> None:
    """Verify that a pattern with a directory only removes files in it."""
    config["filenames"]["class"] = "classes/%s.html"
    (tmp_path / "classes").mkdir()
    (tmp_path / "classes" / "A.Foo.html").write_text("foo")
    (tmp_path / "about.html").write_text("keep")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.html").write_text("keep")

    assert wipe_out_target(tmp_path, config)

    assert not (tmp_path / "classes" / "A.Foo.html").exists()
    assert (tmp_path / "about.html").exists()
    assert (tmp_path / "docs" / "guide.html").exists()
