"""Documentation extraction over a glob of TypeScript sources.

Collects the files matching the configured glob and include pattern,
runs the TypeScript parser over each one and returns the combined
module-name to documentation-entry mapping.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from tsdoc_readme.parsers.structure import DocumentationEntry
from tsdoc_readme.parsers.ts_parser import TSParser
from tsdoc_readme.utils.config import ExtractionConfig

logger = logging.getLogger(__name__)


class DocumentationExtractor:
    """Extracts raw documentation for every module under a project root."""

    def __init__(
        self,
        root: str = ".",
        config: Optional[ExtractionConfig] = None,
        parser: Optional[TSParser] = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            root: Project root the glob and recorded file names are
                relative to.
            config: Extraction settings. Uses defaults if not given.
            parser: Parser used for each file.
        """
        self.root = Path(root).resolve()
        self.config = config or ExtractionConfig()
        self._parser = parser or TSParser()
        self._include = re.compile(self.config.include_pattern)

    def collect_files(self) -> list[Path]:
        """Collect all source files selected by the configuration.

        Returns:
            Sorted list of matching file paths.
        """
        exclude = set(self.config.exclude_paths)
        files = []
        for path in sorted(self.root.glob(self.config.glob)):
            if not path.is_file():
                continue
            relative = path.relative_to(self.root)
            if any(part in exclude for part in relative.parts):
                continue
            if not self._include.search(relative.as_posix()):
                continue
            if not self.config.include_declarations and path.name.endswith(".d.ts"):
                continue
            files.append(path)
        return files

    def extract(self) -> dict[str, DocumentationEntry]:
        """Extract documentation from every collected file.

        Returns:
            Mapping of module name to its documentation entry. A name
            declared in several files maps to the last one parsed.

        Raises:
            OSError: If a source file cannot be read.
            UnicodeDecodeError: If a source file is not valid UTF-8.
        """
        files = self.collect_files()
        logger.info("Extracting documentation from %d files", len(files))

        docs: dict[str, DocumentationEntry] = {}
        for file_path in files:
            for entry in self._parser.parse_file(str(file_path), str(self.root)):
                if entry.name in docs:
                    logger.debug(
                        "%s redeclared in %s (was %s)",
                        entry.name,
                        entry.file_name,
                        docs[entry.name].file_name,
                    )
                docs[entry.name] = entry
        return docs
