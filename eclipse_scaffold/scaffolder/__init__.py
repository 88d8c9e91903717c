"""Eclipse Java project scaffolder.

Builds the ``.project`` and ``.classpath`` descriptors and lays out a new
project folder next to them.

Quick usage::

    from eclipse_scaffold.scaffolder import provision_project

    layout = await provision_project("/workspace", "HelloWorld", "JavaSE-17")
"""

from eclipse_scaffold.scaffolder.descriptors import (
    ClasspathDescriptor,
    DescriptorError,
    ProjectDescriptor,
    build_classpath_descriptor,
    build_project_descriptor,
    parse_classpath_descriptor,
    parse_project_descriptor,
)
from eclipse_scaffold.scaffolder.filesystem import (
    FileSystem,
    LocalFileSystem,
    MemoryFileSystem,
)
from eclipse_scaffold.scaffolder.provisioner import (
    AlreadyExistsError,
    FilesystemFailure,
    ProjectLayout,
    ProjectProvisioner,
    ProvisionError,
    provision_project,
)
from eclipse_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "AlreadyExistsError",
    "ClasspathDescriptor",
    "DescriptorError",
    "FileSystem",
    "FilesystemFailure",
    "LocalFileSystem",
    "MemoryFileSystem",
    "ProjectDescriptor",
    "ProjectLayout",
    "ProjectProvisioner",
    "ProvisionError",
    "TemplateRenderer",
    "build_classpath_descriptor",
    "build_project_descriptor",
    "parse_classpath_descriptor",
    "parse_project_descriptor",
    "provision_project",
]
