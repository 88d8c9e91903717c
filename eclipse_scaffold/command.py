"""The ``eclipse-scaffold`` command: create a new Eclipse Java project.

Resolves the workspace folder, project name and Java version, then provisions
the project folder and reports the outcome on the console.

Usage::

    eclipse-scaffold --name HelloWorld --java-version JavaSE-17
    eclipse-scaffold -w ~/ws/apps -w ~/ws/libs --folder apps --name Demo
    python -m eclipse_scaffold.command --dry-run --no-input --name Demo
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path, PurePath

from rich.markup import escape
from rich.syntax import Syntax
from rich.tree import Tree

from eclipse_scaffold.config import Config
from eclipse_scaffold.interaction import (
    InteractionResolver,
    PromptResolver,
    ScriptedResolver,
)
from eclipse_scaffold.scaffolder import (
    FileSystem,
    LocalFileSystem,
    MemoryFileSystem,
    ProjectLayout,
    ProjectProvisioner,
    ProvisionError,
)
from eclipse_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from eclipse_scaffold.workspace import WorkspaceError, get_workspace_root


class NewProjectCommand:
    """End-to-end "New Java Project" flow.

    Attributes:
        config: Workspace folders and defaults.
        resolver: Where the folder, name and Java version answers come from.
        fs: Filesystem the project is written to.  Defaults to the local
            disk, or to an in-memory filesystem when ``config.dry_run`` is set.
    """

    def __init__(
        self,
        config: Config,
        resolver: InteractionResolver,
        fs: FileSystem | None = None,
    ) -> None:
        self.config = config
        self.resolver = resolver
        if fs is None:
            fs = (
                MemoryFileSystem(config.workspace_folders)
                if config.dry_run
                else LocalFileSystem()
            )
        self.fs = fs

    def resolve_root(self) -> Path | None:
        """Return the folder to create the project in, or ``None`` if cancelled.

        Only asks for a folder name when the workspace has several folders.
        """
        folders = self.config.workspace_folders
        base_name = self.resolver.ask_folder() if len(folders) > 1 else None
        return get_workspace_root(folders, base_name)

    async def run(self) -> int:
        """Run the command and return a process exit code."""
        try:
            root = self.resolve_root()
        except WorkspaceError as exc:
            print_error(str(exc))
            return 1
        if root is None:
            return 0

        project_name = self.resolver.ask_project_name()
        java_version = self.resolver.ask_java_version()
        if not java_version:
            print_error("Invalid Java Version.")
            return 1
        if not project_name:
            print_warning("No project name given; nothing was created.")
            return 0

        console.print(
            f"[cyan]Creating project[/cyan] [bold]{escape(project_name)}[/bold] "
            f"([green]{escape(java_version)}[/green]) in {escape(str(root))}...",
            highlight=False,
        )
        provisioner = ProjectProvisioner(self.fs)
        try:
            layout = await provisioner.provision(root, project_name, java_version)
        except ProvisionError as exc:
            print_error(str(exc))
            return 1

        print_success(f"Created Java project {project_name}")
        print_summary_table(
            {
                "Project": project_name,
                "Java version": java_version,
                "Location": str(layout.project_dir),
            },
            title="New Java Project",
        )
        if self.config.dry_run and isinstance(self.fs, MemoryFileSystem):
            _print_dry_run(self.fs, layout)
        return 0


def _print_dry_run(fs: MemoryFileSystem, layout: ProjectLayout) -> None:
    """Show the in-memory project tree followed by both descriptors."""
    print_warning("Dry run: nothing was written to disk.")
    tree = Tree(f"[bold]{escape(layout.project_dir.name)}/[/bold]")
    _add_children(tree, fs, PurePath(layout.project_dir))
    console.print(tree)
    for path in (layout.project_file, layout.classpath_file):
        console.print()
        console.print(f"[dim]{escape(path.name)}[/dim]")
        console.print(Syntax(fs.read_file(path), "xml"))


def _add_children(tree: Tree, fs: MemoryFileSystem, path: PurePath) -> None:
    for name in fs.listdir(path):
        child = path / name
        if fs.is_dir(child):
            _add_children(tree.add(f"{escape(name)}/"), fs, child)
        else:
            tree.add(escape(name))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``eclipse-scaffold`` / ``python -m eclipse_scaffold.command``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="eclipse-scaffold",
        description="Create an Eclipse Java project (.project, .classpath, src/, bin/)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  eclipse-scaffold --name HelloWorld\n"
            "  eclipse-scaffold -w ./apps -w ./libs --folder apps --name Demo\n"
            "  eclipse-scaffold --no-input --dry-run --name Demo -j JavaSE-17\n"
        ),
    )

    parser.add_argument(
        "--workspace", "-w",
        action="append",
        default=None,
        help="Workspace folder (repeatable; default: $ECLIPSE_SCAFFOLD_WORKSPACE or the current directory)",
    )
    parser.add_argument(
        "--folder",
        default=None,
        help="Base name of the workspace folder to use when there are several",
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name, also used as the project folder name",
    )
    parser.add_argument(
        "--java-version", "-j",
        default=None,
        help="Eclipse execution environment, e.g. JavaSE-8 or JavaSE-17",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read from the environment)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without writing to disk",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; use the configured default Java version when none is given",
    )

    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            console.print(f"[bold red]Error:[/bold red] Config file not found: {escape(str(config_path))}")
            sys.exit(1)
        config = Config.load(config_path)
    else:
        config = Config.from_env()

    if args.workspace:
        config.workspace_folders = [Path(p) for p in args.workspace]
    if not config.workspace_folders:
        config.workspace_folders = [Path.cwd()]
    if args.dry_run:
        config.dry_run = True

    if args.no_input:
        resolver: InteractionResolver = ScriptedResolver(
            folder=args.folder,
            project_name=args.name,
            java_version=args.java_version or config.default_java_version,
        )
    else:
        resolver = ScriptedResolver(
            folder=args.folder,
            project_name=args.name,
            java_version=args.java_version,
            fallback=PromptResolver(config.default_java_version),
        )

    command = NewProjectCommand(config, resolver)
    sys.exit(asyncio.run(command.run()))


if __name__ == "__main__":
    main()
