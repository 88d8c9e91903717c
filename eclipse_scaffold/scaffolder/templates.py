"""Jinja2 template rendering for Eclipse descriptor files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``eclipse_scaffold/scaffolder/templates/`` directory and renders them with
descriptor-specific context data.  Templates ending in ``.xml.j2`` are
rendered with XML autoescaping so project names and Java versions containing
``<``, ``&`` or ``"`` still produce well-formed documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for descriptor files.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Descriptor files are consumed byte-for-byte by IDE
    tooling, so the final newline of each template is dropped and the output
    ends on the closing root tag.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["xml.j2"]),
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["xml_text"] = _xml_text_filter
        self.env.filters["xml_attr"] = _xml_attr_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"project.xml.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

# Same entities as xmlbuilder: quotes stay literal in text; attributes use
# &quot; and character references for whitespace.
_TEXT_REFS = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ("\r", "&#xD;"))
_ATTR_REFS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    ('"', "&quot;"),
    ("\t", "&#x9;"),
    ("\n", "&#xA;"),
    ("\r", "&#xD;"),
)


def _replace_all(value: Any, refs: tuple[tuple[str, str], ...]) -> Markup:
    escaped = str(value)
    for char, ref in refs:
        escaped = escaped.replace(char, ref)
    return Markup(escaped)


def _xml_text_filter(value: Any) -> Markup:
    """Escape *value* for XML element content."""
    return _replace_all(value, _TEXT_REFS)


def _xml_attr_filter(value: Any) -> Markup:
    """Escape *value* for a double-quoted XML attribute value."""
    return _replace_all(value, _ATTR_REFS)
