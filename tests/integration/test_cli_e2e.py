"""Integration tests for the ``eclipse-scaffold`` command line.

These tests drive ``main()`` with real arguments against a temporary
workspace and verify the project that lands on disk.  No prompts are shown:
every run passes ``--no-input`` or supplies all answers.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from eclipse_scaffold.command import main
from eclipse_scaffold.config import Config


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.mark.integration
class TestCli:
    def test_creates_project(self, tmp_workspace: Path, expected_classpath_xml: str):
        code = _run(["-w", str(tmp_workspace), "--no-input", "--name", "Test-Project"])

        assert code == 0
        project_dir = tmp_workspace / "Test-Project"
        assert sorted(os.listdir(project_dir)) == [".classpath", ".project", "bin", "src"]
        assert (project_dir / ".classpath").read_text(encoding="utf-8") == expected_classpath_xml
        root = ET.parse(project_dir / ".project").getroot()
        assert root.find("name").text == "Test-Project"

    def test_java_version_flag(self, tmp_workspace: Path):
        assert _run(["-w", str(tmp_workspace), "-n", "Demo", "-j", "JavaSE-17"]) == 0
        classpath = (tmp_workspace / "Demo" / ".classpath").read_text(encoding="utf-8")
        assert "StandardVMType/JavaSE-17" in classpath

    def test_env_default_java_version(self, tmp_workspace: Path, monkeypatch):
        monkeypatch.setenv("ECLIPSE_SCAFFOLD_JAVA_VERSION", "JavaSE-21")
        monkeypatch.setenv("ECLIPSE_SCAFFOLD_WORKSPACE", str(tmp_workspace))

        assert _run(["--no-input", "--name", "Demo"]) == 0
        classpath = (tmp_workspace / "Demo" / ".classpath").read_text(encoding="utf-8")
        assert "StandardVMType/JavaSE-21" in classpath

    def test_defaults_to_current_directory(self, tmp_workspace: Path, monkeypatch):
        monkeypatch.chdir(tmp_workspace)
        assert _run(["--no-input", "--name", "Demo"]) == 0
        assert (tmp_workspace / "Demo" / ".project").is_file()

    def test_multiple_workspaces_pick_folder(self, tmp_path: Path):
        apps = tmp_path / "apps"
        libs = tmp_path / "libs"
        apps.mkdir()
        libs.mkdir()

        code = _run(["-w", str(apps), "-w", str(libs), "--folder", "libs", "--no-input", "-n", "Demo"])

        assert code == 0
        assert (libs / "Demo").is_dir()
        assert not (apps / "Demo").exists()

    def test_existing_project_fails(self, tmp_workspace: Path, capsys):
        (tmp_workspace / "Demo").mkdir()
        assert _run(["-w", str(tmp_workspace), "--no-input", "-n", "Demo"]) == 1
        assert "already exists" in " ".join(capsys.readouterr().out.split())
        assert list((tmp_workspace / "Demo").iterdir()) == []

    def test_no_name_creates_nothing(self, tmp_workspace: Path):
        assert _run(["-w", str(tmp_workspace), "--no-input"]) == 0
        assert list(tmp_workspace.iterdir()) == []

    def test_dry_run_writes_nothing(self, tmp_workspace: Path, capsys):
        assert _run(["-w", str(tmp_workspace), "--no-input", "--dry-run", "-n", "Demo"]) == 0
        assert list(tmp_workspace.iterdir()) == []
        assert ".classpath" in capsys.readouterr().out

    def test_config_file(self, tmp_path: Path, tmp_workspace: Path):
        config_path = Config(
            default_java_version="JavaSE-11",
            workspace_folders=[tmp_workspace],
        ).save(tmp_path / "config.json")

        assert _run(["--config", str(config_path), "--no-input", "-n", "Demo"]) == 0
        classpath = (tmp_workspace / "Demo" / ".classpath").read_text(encoding="utf-8")
        assert "StandardVMType/JavaSE-11" in classpath

    def test_missing_config_file(self, tmp_path: Path, capsys):
        assert _run(["--config", str(tmp_path / "nope.json"), "-n", "Demo"]) == 1
        assert "Config file not found" in " ".join(capsys.readouterr().out.split())
