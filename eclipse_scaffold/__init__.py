"""eclipse-scaffold: create Eclipse Java projects from the command line."""

__version__ = "1.0.1"
