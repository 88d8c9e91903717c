"""Choosing the workspace folder a new project is created in."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class WorkspaceError(Exception):
    """Raised when no usable workspace folder can be determined."""


def find_folder_in_workspace(base_name: str, folders: Sequence[Path]) -> Path | None:
    """Return the first folder whose base name equals *base_name*, if any."""
    for folder in folders:
        if Path(folder).name == base_name:
            return Path(folder)
    return None


def get_workspace_root(
    folders: Sequence[Path], base_name: str | None = None
) -> Path | None:
    """Pick the folder to create the project in.

    A single-folder workspace is used directly and *base_name* is ignored.
    With several folders, *base_name* selects one; an empty or missing
    *base_name* means the user cancelled and ``None`` is returned.

    Raises:
        WorkspaceError: If there are no folders, or *base_name* matches none
            of them.
    """
    if not folders:
        raise WorkspaceError(
            "You don't have any folders in your workspace. "
            "Please add a folder to your workspace and try again."
        )
    if len(folders) == 1:
        return Path(folders[0])
    if not base_name:
        return None

    folder = find_folder_in_workspace(base_name, folders)
    if folder is None:
        raise WorkspaceError(
            f"Could not find the folder {base_name} in your workspace. "
            "Please try again."
        )
    return folder
