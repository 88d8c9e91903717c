"""eclipse-scaffold configuration.

Typed configuration for the ``eclipse-scaffold`` command.  Settings use
Pydantic v2 models so they are validated at construction time and can be
loaded from JSON files or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_JAVA_VERSION = "JavaSE-10"


class Config(BaseModel):
    """Settings for a scaffolding run.

    Attributes:
        default_java_version: Offered as the default answer when prompting,
            and used as-is in non-interactive mode.
        workspace_folders: Candidate parent folders for the new project.
            With a single folder it is used directly; with several the user
            picks one by base name.
        dry_run: Provision into memory and print the result instead of
            touching the disk.
    """

    default_java_version: str = Field(default=DEFAULT_JAVA_VERSION, min_length=1)
    workspace_folders: list[Path] = Field(default_factory=list)
    dry_run: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ECLIPSE_SCAFFOLD_JAVA_VERSION, ECLIPSE_SCAFFOLD_WORKSPACE
            (``os.pathsep``-separated list of folders).
        """
        workspace = os.environ.get("ECLIPSE_SCAFFOLD_WORKSPACE", "")
        folders = [Path(p) for p in workspace.split(os.pathsep) if p.strip()]

        return cls(
            default_java_version=os.environ.get(
                "ECLIPSE_SCAFFOLD_JAVA_VERSION", DEFAULT_JAVA_VERSION
            ),
            workspace_folders=folders,
        )
