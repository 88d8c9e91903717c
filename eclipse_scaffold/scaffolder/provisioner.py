"""Folder provisioning for new Eclipse Java projects.

Creates ``<root>/<project_name>`` containing ``.project``, ``.classpath`` and
empty ``src`` and ``bin`` folders.  The target is checked before anything is
written: an existing entry aborts the call without touching the disk.  Failures
after that point are reported as-is; already-created entries are left in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .descriptors import (
    CLASSPATH_FILE,
    OUTPUT_DIR,
    PROJECT_FILE,
    SOURCE_DIR,
    build_classpath_descriptor,
    build_project_descriptor,
)
from .filesystem import FileSystem, LocalFileSystem


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ProvisionError(Exception):
    """Base class for project provisioning failures."""


class AlreadyExistsError(ProvisionError):
    """Raised when the project folder is already present.

    Recoverable: the caller can retry with another name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A folder with the name {name} already exists.")


class FilesystemFailure(ProvisionError):
    """Raised when creating a folder or writing a descriptor fails.

    ``cause`` is the underlying ``OSError``, or the ``ValueError`` raised for
    a path the operating system cannot represent.
    """

    def __init__(self, cause: OSError | ValueError) -> None:
        self.cause = cause
        super().__init__(f"Could not create project: {cause}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectLayout:
    """Paths of everything a successful provisioning call created."""

    project_dir: Path

    @property
    def project_file(self) -> Path:
        return self.project_dir / PROJECT_FILE

    @property
    def classpath_file(self) -> Path:
        return self.project_dir / CLASSPATH_FILE

    @property
    def source_dir(self) -> Path:
        return self.project_dir / SOURCE_DIR

    @property
    def output_dir(self) -> Path:
        return self.project_dir / OUTPUT_DIR


# ---------------------------------------------------------------------------
# Provisioner
# ---------------------------------------------------------------------------


class ProjectProvisioner:
    """Creates Eclipse Java project skeletons on a :class:`FileSystem`."""

    def __init__(self, fs: FileSystem | None = None) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()

    async def provision(
        self, root: str | Path, project_name: str, java_version: str
    ) -> ProjectLayout:
        """Create the project folder, its descriptors and ``src``/``bin``.

        Args:
            root: Existing directory the project folder is created in.
            project_name: Folder name and Eclipse project name.
            java_version: Execution environment, e.g. ``"JavaSE-10"``.

        Returns:
            The layout that was created.

        Raises:
            ValueError: If *project_name* or *java_version* is empty.
            AlreadyExistsError: If ``root/project_name`` already exists.
            FilesystemFailure: If any filesystem operation fails, including
                a missing or read-only *root* and names the OS rejects.
        """
        if not project_name:
            raise ValueError("project_name must not be empty")
        if not java_version:
            raise ValueError("java_version must not be empty")

        layout = ProjectLayout(project_dir=Path(root) / project_name)

        try:
            if await self.fs.exists(layout.project_dir):
                raise AlreadyExistsError(project_name)

            await self.fs.mkdir(layout.project_dir)
            await self.fs.write_file(
                layout.project_file, build_project_descriptor(project_name)
            )
            await self.fs.write_file(
                layout.classpath_file, build_classpath_descriptor(java_version)
            )
            await self.fs.mkdir(layout.source_dir)
            await self.fs.mkdir(layout.output_dir)
        except (OSError, ValueError) as exc:
            # ValueError: paths the OS cannot represent, e.g. an embedded NUL.
            raise FilesystemFailure(exc) from exc

        return layout


async def provision_project(
    root: str | Path,
    project_name: str,
    java_version: str,
    fs: FileSystem | None = None,
) -> ProjectLayout:
    """Provision a new project under *root*; see :meth:`ProjectProvisioner.provision`."""
    return await ProjectProvisioner(fs).provision(root, project_name, java_version)
