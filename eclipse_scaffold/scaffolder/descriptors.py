"""Eclipse ``.project`` and ``.classpath`` descriptor generation.

The builders are pure functions: the same input always renders the same
document, and no input makes them fail.  Every value is XML-escaped by the
template layer, so ``parse_*(build_*(value))`` reconstructs the original
record for any string that XML can represent.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pydantic import BaseModel, ConfigDict

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fixed Eclipse identifiers
# ---------------------------------------------------------------------------

JAVA_BUILDER = "org.eclipse.jdt.core.javabuilder"
JAVA_NATURE = "org.eclipse.jdt.core.javanature"
JRE_CONTAINER = (
    "org.eclipse.jdt.launching.JRE_CONTAINER/"
    "org.eclipse.jdt.internal.debug.ui.launcher.StandardVMType"
)

SOURCE_DIR = "src"
OUTPUT_DIR = "bin"

PROJECT_FILE = ".project"
CLASSPATH_FILE = ".classpath"

_PROJECT_TEMPLATE = "project.xml.j2"
_CLASSPATH_TEMPLATE = "classpath.xml.j2"

_renderer = TemplateRenderer()


class DescriptorError(ValueError):
    """Raised when descriptor text cannot be read back into a record."""


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class ProjectDescriptor(BaseModel):
    """The ``.project`` file: build identity of a Java project."""

    model_config = ConfigDict(frozen=True)

    name: str

    def to_xml(self) -> str:
        return _renderer.render(
            _PROJECT_TEMPLATE,
            {"name": self.name, "builder": JAVA_BUILDER, "nature": JAVA_NATURE},
        )


class ClasspathDescriptor(BaseModel):
    """The ``.classpath`` file: JRE container, source and output folders.

    Entry order is ``con``, ``src``, ``output`` and is fixed by the template.
    """

    model_config = ConfigDict(frozen=True)

    java_version: str

    @property
    def container_path(self) -> str:
        return f"{JRE_CONTAINER}/{self.java_version}"

    def to_xml(self) -> str:
        return _renderer.render(
            _CLASSPATH_TEMPLATE,
            {
                "container_path": self.container_path,
                "source_path": SOURCE_DIR,
                "output_path": OUTPUT_DIR,
            },
        )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_project_descriptor(project_name: str) -> str:
    """Return the ``.project`` XML for *project_name*.

    The name is not checked for filesystem safety; that is the caller's job.
    """
    return ProjectDescriptor(name=project_name).to_xml()


def build_classpath_descriptor(java_version: str) -> str:
    """Return the ``.classpath`` XML targeting the *java_version* execution
    environment (e.g. ``"JavaSE-10"``).
    """
    return ClasspathDescriptor(java_version=java_version).to_xml()


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _parse_root(text: str, expected_tag: str) -> ET.Element:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise DescriptorError(f"Malformed descriptor XML: {exc}") from exc
    if root.tag != expected_tag:
        raise DescriptorError(
            f"Expected root element <{expected_tag}>, got <{root.tag}>"
        )
    return root


def parse_project_descriptor(text: str) -> ProjectDescriptor:
    """Read ``.project`` XML back into a :class:`ProjectDescriptor`.

    Raises:
        DescriptorError: If the text is not a project description or has no
            ``<name>`` element.
    """
    root = _parse_root(text, "projectDescription")
    name = root.find("name")
    if name is None:
        raise DescriptorError("Project descriptor has no <name> element")
    return ProjectDescriptor(name=name.text or "")


def parse_classpath_descriptor(text: str) -> ClasspathDescriptor:
    """Read ``.classpath`` XML back into a :class:`ClasspathDescriptor`.

    The Java version is the part of the JRE container path after the VM type.

    Raises:
        DescriptorError: If the text is not a classpath or lacks a JRE
            container entry.
    """
    root = _parse_root(text, "classpath")
    prefix = JRE_CONTAINER + "/"
    for entry in root.findall("classpathentry"):
        if entry.get("kind") != "con":
            continue
        path = entry.get("path", "")
        if path.startswith(prefix):
            return ClasspathDescriptor(java_version=path[len(prefix):])
    raise DescriptorError("Classpath descriptor has no JRE container entry")
