"""Tests for moving directories to the trash."""

import subprocess
from datetime import datetime

import pytest

from gwh.errors import OperationFailedError, TrashUnavailableError
from gwh.worktree import trash


def _no_commands(monkeypatch):
    monkeypatch.setattr(trash.shutil, "which", lambda name: None)


@pytest.mark.unit
class TestMoveToTrashWithCommand:

    def test_prefers_first_available_command(self, monkeypatch, tmp_path):
        available = {"gio": "/usr/bin/gio", "trash-put": "/usr/bin/trash-put"}
        monkeypatch.setattr(trash.shutil, "which", available.get)
        runs = []

        def fake_run(cmd, **kwargs):
            runs.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

        monkeypatch.setattr(trash.subprocess, "run", fake_run)

        trash.move_to_trash(str(tmp_path / "feat"))

        assert runs == [["/usr/bin/gio", "trash", str(tmp_path / "feat")]]

    def test_command_failure_raises(self, monkeypatch, tmp_path):
        monkeypatch.setattr(trash.shutil, "which", {"trash": "/usr/bin/trash"}.get)
        monkeypatch.setattr(
            trash.subprocess,
            "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout="", stderr="permission denied"),
        )

        with pytest.raises(OperationFailedError, match="permission denied"):
            trash.move_to_trash(str(tmp_path / "feat"))


@pytest.mark.unit
class TestMoveToTrashFallback:

    def test_renames_into_home_trash_with_timestamp(self, monkeypatch, tmp_path):
        _no_commands(monkeypatch)
        home = tmp_path / "home"
        (home / ".Trash").mkdir(parents=True)
        target = tmp_path / "feat"
        target.mkdir()

        trash.move_to_trash(str(target), home=str(home), now=datetime(2024, 5, 6, 7, 8, 9))

        assert not target.exists()
        assert (home / ".Trash" / "feat.20240506070809").is_dir()

    def test_without_trash_directory_suggests_force(self, monkeypatch, tmp_path):
        _no_commands(monkeypatch)
        target = tmp_path / "feat"
        target.mkdir()

        with pytest.raises(TrashUnavailableError, match="use --force"):
            trash.move_to_trash(str(target), home=str(tmp_path / "home"))
        assert target.is_dir()
