"""Shared pytest fixtures for the eclipse-scaffold test suite.

Provides reusable fixtures for:
- In-memory and on-disk workspaces
- The exact descriptor documents Eclipse expects
- Isolation from ``ECLIPSE_SCAFFOLD_*`` environment variables
"""

from __future__ import annotations

from pathlib import Path, PurePath

import pytest

from eclipse_scaffold.scaffolder import MemoryFileSystem


# ---------------------------------------------------------------------------
# Expected descriptor documents
# ---------------------------------------------------------------------------

EXPECTED_PROJECT_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<projectDescription>
  <name>Test-Project</name>
  <comment/>
  <projects/>
  <buildSpec>
    <buildCommand>
      <name>org.eclipse.jdt.core.javabuilder</name>
      <arguments/>
    </buildCommand>
  </buildSpec>
  <natures>
    <nature>org.eclipse.jdt.core.javanature</nature>
  </natures>
</projectDescription>"""

EXPECTED_CLASSPATH_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<classpath>
  <classpathentry kind="con" path="org.eclipse.jdt.launching.JRE_CONTAINER/org.eclipse.jdt.internal.debug.ui.launcher.StandardVMType/JavaSE-10">
    <attributes>
      <attribute name="module" value="true"/>
    </attributes>
  </classpathentry>
  <classpathentry kind="src" path="src"/>
  <classpathentry kind="output" path="bin"/>
</classpath>"""


@pytest.fixture
def expected_project_xml() -> str:
    """``.project`` content for a project named ``Test-Project``."""
    return EXPECTED_PROJECT_XML


@pytest.fixture
def expected_classpath_xml() -> str:
    """``.classpath`` content for ``JavaSE-10``."""
    return EXPECTED_CLASSPATH_XML


# ---------------------------------------------------------------------------
# Workspaces
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_root() -> PurePath:
    """Root folder that exists in the ``memory_fs`` fixture."""
    return PurePath("/workspace")


@pytest.fixture
def memory_fs(memory_root: PurePath) -> MemoryFileSystem:
    """In-memory filesystem containing only ``memory_root``."""
    return MemoryFileSystem([memory_root])


@pytest.fixture
def tmp_workspace(tmp_path: Path) -> Path:
    """Empty on-disk workspace folder (auto-cleanup)."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's own settings never leak into tests."""
    monkeypatch.delenv("ECLIPSE_SCAFFOLD_JAVA_VERSION", raising=False)
    monkeypatch.delenv("ECLIPSE_SCAFFOLD_WORKSPACE", raising=False)
