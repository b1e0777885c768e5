# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint run orchestration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from unitlint.analysis import RuleSelection
from unitlint.discovery.targets import MixedTargetsError
from unitlint.orchestrator import Orchestrator
from unitlint.reporting import Reporter
from unitlint.resolution import PackageResolver


def _write(path: Path, text: str = "x = 1\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _orchestrator(analyzer, logger, min_confidence: float = 0.8, search_path: list[str] | None = None) -> Orchestrator:
    reporter = Reporter(analyzer=analyzer, rules=RuleSelection(), min_confidence=min_confidence, logger=logger)
    resolver = PackageResolver(search_path=search_path or [])
    return Orchestrator(resolver=resolver, reporter=reporter, logger=logger)


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    _write(tmp_path / "root" / "a.py")
    _write(tmp_path / "root" / "sub" / "notes.txt", "nothing to lint\n")
    _write(tmp_path / "root" / "deep" / "b.py")
    _write(tmp_path / "other" / "c.py")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def library(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    lib = tmp_path / "lib"
    _write(lib / "mypkg" / "__init__.py")
    _write(lib / "mypkg" / "child" / "__init__.py")
    _write(lib / "mypkg" / "assets" / "logo.svg", "<svg/>\n")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return lib


@pytest.mark.usefixtures("tree")
def test_no_arguments_lints_current_directory(fake_analyzer, logger, capsys: pytest.CaptureFixture[str]) -> None:
    _write(Path("main.py"))
    fake_analyzer.add("main.py", 0.9, "looks odd", line=4)

    tally = _orchestrator(fake_analyzer, logger).run([])

    assert fake_analyzer.calls == [("main.py",)]
    assert capsys.readouterr().out == "main.py:4: looks odd\n"
    assert tally.suggestions == 1
    assert tally.units == 1


@pytest.mark.usefixtures("tree")
def test_directory_targets_are_deduplicated(fake_analyzer, logger) -> None:
    tally = _orchestrator(fake_analyzer, logger).run(["root", "root/", "./root", "root/..."])

    assert fake_analyzer.calls == [
        (os.path.join("root", "a.py"),),
        (os.path.join("root", "deep", "b.py"),),
    ]
    assert tally.units == 2


@pytest.mark.usefixtures("tree")
def test_recursive_directory_below_threshold(fake_analyzer, logger, capsys: pytest.CaptureFixture[str]) -> None:
    fake_analyzer.add(os.path.join("root", "a.py"), 0.5)
    os.remove(os.path.join("root", "deep", "b.py"))

    tally = _orchestrator(fake_analyzer, logger).run(["root/..."])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert tally.suggestions == 0
    assert tally.units == 1


@pytest.mark.usefixtures("tree")
def test_directory_without_sources_is_silent(fake_analyzer, logger, capsys: pytest.CaptureFixture[str]) -> None:
    tally = _orchestrator(fake_analyzer, logger).run(["root/sub"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert tally.units == 0
    assert fake_analyzer.calls == []


@pytest.mark.usefixtures("tree")
def test_unreadable_directory_error_is_reported(fake_analyzer, logger, capsys: pytest.CaptureFixture[str]) -> None:
    orchestrator = _orchestrator(fake_analyzer, logger)
    os.chmod("other", 0o000)
    try:
        if os.access("other", os.R_OK):
            pytest.skip("permissions are not enforced for this user")
        tally = orchestrator.run(["other", "root"])
    finally:
        os.chmod("other", 0o755)

    assert "cannot read directory other" in capsys.readouterr().err
    assert tally.units == 1


@pytest.mark.usefixtures("tree")
def test_files_from_different_directories_form_one_unit(
    fake_analyzer, logger, capsys: pytest.CaptureFixture[str]
) -> None:
    first = os.path.join("root", "a.py")
    second = os.path.join("other", "c.py")
    fake_analyzer.error = "cannot analyse mixed unit"

    tally = _orchestrator(fake_analyzer, logger).run([first, second, first])

    assert fake_analyzer.calls == [(first, second)]
    assert "cannot analyse mixed unit" in capsys.readouterr().err
    assert tally.units == 1
    assert tally.suggestions == 0


@pytest.mark.usefixtures("tree")
def test_mixed_targets_fail_before_linting(fake_analyzer, logger) -> None:
    with pytest.raises(MixedTargetsError):
        _orchestrator(fake_analyzer, logger).run(["root", os.path.join("other", "c.py")])
    assert fake_analyzer.calls == []


def test_package_targets_expand_and_deduplicate(library: Path, fake_analyzer, logger) -> None:
    orchestrator = _orchestrator(fake_analyzer, logger, search_path=[str(library)])
    tally = orchestrator.run(["mypkg/...", "mypkg.child", "mypkg"])

    assert fake_analyzer.calls == [
        (str(library / "mypkg" / "__init__.py"),),
        (str(library / "mypkg" / "child" / "__init__.py"),),
    ]
    assert tally.units == 2


def test_unknown_package_is_reported_and_run_continues(
    library: Path, fake_analyzer, logger, capsys: pytest.CaptureFixture[str]
) -> None:
    orchestrator = _orchestrator(fake_analyzer, logger, search_path=[str(library)])
    tally = orchestrator.run(["nosuchpkg", "nosuchroot/...", "mypkg"])

    err = capsys.readouterr().err
    assert "nosuchpkg" in err
    assert "nosuchroot" in err
    assert tally.units == 1


@pytest.mark.usefixtures("tree")
def test_rerun_is_deterministic(fake_analyzer, logger, capsys: pytest.CaptureFixture[str]) -> None:
    fake_analyzer.add(os.path.join("root", "a.py"), 0.9, "first")
    fake_analyzer.add(os.path.join("root", "deep", "b.py"), 0.85, "second")

    outputs = []
    for _ in range(2):
        tally = _orchestrator(fake_analyzer, logger).run(["root/..."])
        outputs.append((capsys.readouterr().out, tally.suggestions))

    assert outputs[0] == outputs[1]
    assert outputs[0][1] == 2
