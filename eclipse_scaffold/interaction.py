"""Sources for the three answers a new project needs.

A resolver supplies the workspace folder, the project name and the Java
version.  Every method returns ``None`` when the user gives no answer, which
the command treats as a cancellation.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from eclipse_scaffold.config import DEFAULT_JAVA_VERSION
from eclipse_scaffold.utils import console as default_console


class InteractionResolver(Protocol):
    def ask_folder(self) -> str | None: ...

    def ask_project_name(self) -> str | None: ...

    def ask_java_version(self) -> str | None: ...


class PromptResolver:
    """Asks the user on the terminal with Rich prompts."""

    def __init__(
        self,
        default_java_version: str = DEFAULT_JAVA_VERSION,
        console: Console | None = None,
    ) -> None:
        self.default_java_version = default_java_version
        self.console = console or default_console

    def _ask(self, prompt: str, default: str = "") -> str | None:
        try:
            return Prompt.ask(
                prompt,
                default=default,
                show_default=bool(default),
                console=self.console,
            )
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None

    def ask_folder(self) -> str | None:
        return self._ask(
            "Folder name to create project folder in. Must be in your workspace"
        )

    def ask_project_name(self) -> str | None:
        return self._ask(
            "Project name. Will be used as the folder name of your java project"
        )

    def ask_java_version(self) -> str | None:
        return self._ask(
            "The Eclipse java version to build with. (Ex: JavaSE-8, JavaSE-10)",
            default=self.default_java_version,
        )


class ScriptedResolver:
    """Returns pre-supplied answers.

    Answers left as ``None`` are delegated to *fallback* when one is given,
    so command-line values can be mixed with interactive prompts.
    """

    def __init__(
        self,
        folder: str | None = None,
        project_name: str | None = None,
        java_version: str | None = None,
        fallback: InteractionResolver | None = None,
    ) -> None:
        self.folder = folder
        self.project_name = project_name
        self.java_version = java_version
        self.fallback = fallback

    def ask_folder(self) -> str | None:
        if self.folder is None and self.fallback is not None:
            return self.fallback.ask_folder()
        return self.folder

    def ask_project_name(self) -> str | None:
        if self.project_name is None and self.fallback is not None:
            return self.fallback.ask_project_name()
        return self.project_name

    def ask_java_version(self) -> str | None:
        if self.java_version is None and self.fallback is not None:
            return self.fallback.ask_java_version()
        return self.java_version
