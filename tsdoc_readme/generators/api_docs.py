"""API documentation generation for package READMEs.

Drives the full pipeline: extracts documentation from TypeScript
sources, transforms it into module records grouped by README
directory, renders an API table per directory and splices it into
the directory's README.
"""

import logging
from pathlib import Path
from typing import Optional

from tsdoc_readme.generators.template_manager import TemplateManager
from tsdoc_readme.generators.transformer import ModuleTransformer
from tsdoc_readme.output.markdown import ReadmeWriter
from tsdoc_readme.parsers.extractor import DocumentationExtractor
from tsdoc_readme.parsers.structure import (
    DirectoryGroup,
    DocumentationEntry,
    ModuleRecord,
)
from tsdoc_readme.utils.config import AppConfig, load_config

logger = logging.getLogger(__name__)

FOUNDATION = "foundation"
ADAPTER = "adapter"


def module_tier(module_name: str) -> int:
    """Rank a module by its naming-convention tier.

    Args:
        module_name: Name of the module.

    Returns:
        0 for components, 1 for adapters, 2 for foundations.
    """
    name = module_name.lower()
    if FOUNDATION in name:
        return 2
    if ADAPTER in name:
        return 1
    return 0


def sort_modules(modules: list[ModuleRecord]) -> list[ModuleRecord]:
    """Sort modules as components, then adapters, then foundations.

    Adapters and foundations are alphabetized by lowercase name within
    their tier; components keep their original order.

    Args:
        modules: Module records to sort.

    Returns:
        A new sorted list.
    """

    def sort_key(module: ModuleRecord) -> tuple[int, str]:
        tier = module_tier(module.module_name)
        return tier, module.module_name.lower() if tier else ""

    return sorted(modules, key=sort_key)


class ApiDocsGenerator:
    """Generates API tables and writes them into package READMEs.

    Module records accumulate in a DirectoryGroup keyed by README
    directory; only directories matching the configured allow-list
    are rendered and written.
    """

    def __init__(
        self,
        root: str = ".",
        config: Optional[AppConfig] = None,
        template_manager: Optional[TemplateManager] = None,
        writer: Optional[ReadmeWriter] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            root: Project root containing the packages directory.
            config: Application configuration.
            template_manager: Template manager for the API table.
            writer: Writer used to rewrite READMEs.
        """
        self.root = Path(root)
        self.config = config or load_config()
        self.templates = template_manager or TemplateManager(
            templates_dir=self.config.readme.templates_dir,
            table_template=self.config.readme.template,
        )
        self.writer = writer or ReadmeWriter()
        self.transformer = ModuleTransformer(root=self.root, config=self.config.readme)
        self.groups = DirectoryGroup()

    def extract(self) -> dict[str, DocumentationEntry]:
        """Extract raw documentation for every module under the root.

        Returns:
            Mapping of module name to documentation entry.
        """
        extractor = DocumentationExtractor(
            root=str(self.root), config=self.config.extraction
        )
        return extractor.extract()

    def run(self, dry_run: bool = False) -> Optional[list[Path]]:
        """Run extraction and generation end to end.

        Args:
            dry_run: Render tables but leave READMEs untouched.

        Returns:
            Paths of the READMEs generated, or None if extraction failed.
        """
        try:
            docs = self.extract()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Documentation extraction failed: %s", e)
            return None
        return self.generate_docs(docs, dry_run=dry_run)

    def generate_docs(
        self, docs: dict[str, DocumentationEntry], dry_run: bool = False
    ) -> list[Path]:
        """Build records for every module, then write the READMEs.

        Args:
            docs: Mapping of module name to documentation entry.
            dry_run: Render tables but leave READMEs untouched.

        Returns:
            Paths of the READMEs generated.
        """
        for module_name, entry in docs.items():
            logger.info("-- generating docs for %s", module_name)
            self.generate_docs_for_module(module_name, entry)

        return self.generate_markdown_files(dry_run=dry_run)

    def generate_docs_for_module(
        self, module_name: str, entry: DocumentationEntry
    ) -> Optional[ModuleRecord]:
        """Transform one module and add it to its directory group.

        Args:
            module_name: Name the module is documented under.
            entry: The module's raw documentation.

        Returns:
            The record added, or None if the module was skipped.
        """
        record = self.transformer.transform(module_name, entry)
        if record is not None:
            self.groups.add(record)
        return record

    def is_allowed(self, directory: str) -> bool:
        """Check a README directory against the allow-list.

        Args:
            directory: Directory relative to the packages root.

        Returns:
            True if any allow-list entry occurs in the directory path.
        """
        return any(allowed in directory for allowed in self.config.readme.allow_list)

    def readme_path(self, directory: str) -> Path:
        """Path of the README for a directory under the packages root."""
        readme = self.config.readme
        return self.root / readme.packages_dir / directory / readme.file_name

    def render_directory(self, directory: str) -> Optional[str]:
        """Render the API table for one README directory.

        Args:
            directory: Directory relative to the packages root.

        Returns:
            The rendered Markdown, or None if no module has anything
            to document.
        """
        modules = [m for m in self.groups.get(directory) if not m.is_empty]
        if not modules:
            logger.debug("Nothing to document in %s", directory)
            return None
        return self.templates.render_api_table(sort_modules(modules)).strip()

    def generate_markdown_files(self, dry_run: bool = False) -> list[Path]:
        """Render and write a README for each allowed directory.

        Args:
            dry_run: Render tables but leave READMEs untouched.

        Returns:
            Paths of the READMEs generated (or that would be, in a
            dry run).
        """
        generated = []
        for directory in self.groups.directories():
            # TODO: drop the allow-list once every package README carries the markers
            if not self.is_allowed(directory):
                continue

            table = self.render_directory(directory)
            if table is None:
                continue

            readme_path = self.readme_path(directory)
            if dry_run:
                logger.info("Would generate %s", readme_path)
                generated.append(readme_path)
            elif self.writer.write(readme_path, table):
                generated.append(readme_path)
        return generated
