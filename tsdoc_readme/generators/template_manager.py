"""Template manager for loading and rendering Jinja2 README templates.

Provides a centralized interface for rendering the API documentation
tables from Jinja2 templates stored in the templates/ directory.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader

from tsdoc_readme.parsers.structure import ModuleRecord

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent.parent / "templates"
_DEFAULT_TABLE_TEMPLATE = "api_table.j2"


class TemplateManager:
    """Loads and renders Jinja2 templates for README generation.

    Output is not HTML-escaped: method signatures and comments are
    inserted into Markdown as written.
    """

    def __init__(
        self,
        templates_dir: Optional[str] = None,
        table_template: str = _DEFAULT_TABLE_TEMPLATE,
    ) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                default templates/ directory if not specified.
            table_template: Name of the API table template.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )
        self.table_template = table_template

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_api_table(self, modules: list[ModuleRecord]) -> str:
        """Render the API table for a README.

        Args:
            modules: Sorted module records to document.

        Returns:
            Rendered Markdown fragment.
        """
        return self._render(self.table_template, modules=modules)

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Args:
            template_name: Name of the template file to render.
            **kwargs: Template context variables.

        Returns:
            Rendered template string.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files.

        Returns:
            List of template file names.
        """
        return self._env.list_templates()
