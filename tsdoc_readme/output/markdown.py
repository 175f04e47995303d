"""README rewriting for generated API tables.

Splices a rendered Markdown fragment into the region of an existing
README delimited by the docgen replacer comments.
"""

import logging
import re
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

START_TOKEN = (
    "<!-- docgen-tsdoc-replacer:start "
    "__DO NOT EDIT, This section is automatically generated__ -->"
)
END_TOKEN = "<!-- docgen-tsdoc-replacer:end -->"

_REPLACER_PATTERN = re.compile(
    rf"^{re.escape(START_TOKEN)}(\r?\n).*{re.escape(END_TOKEN)}(?=\r?$)",
    re.MULTILINE | re.DOTALL,
)


def insert_table(readme: str, table: str) -> tuple[str, int]:
    """Replace the generated region of a README with a new table.

    The region keeps the line ending used after the start marker.

    Args:
        readme: Current README text.
        table: Rendered Markdown fragment to insert.

    Returns:
        The updated text and the number of regions replaced.
    """

    def replace(match: re.Match) -> str:
        newline = match.group(1)
        body = table.replace("\n", newline) if newline != "\n" else table
        return f"{START_TOKEN}{newline}{body}{newline}{END_TOKEN}"

    return _REPLACER_PATTERN.subn(replace, readme)


class ReadmeWriter:
    """Writes generated API tables into README files in place."""

    def write(self, readme_path: Union[str, Path], table: str) -> bool:
        """Insert a table into a README and write the file back.

        Line endings outside the generated region are kept as they are.
        A README without the generated section markers is not touched.
        Read and write failures are logged and reported through the
        return value.

        Args:
            readme_path: Path to the README to rewrite.
            table: Rendered Markdown fragment to insert.

        Returns:
            True if a table was written, False if the markers are
            missing or on an I/O error.
        """
        path = Path(readme_path)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                readme = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", path, e)
            return False

        updated, count = insert_table(readme, table)
        if count == 0:
            logger.warning("No generated section markers found in %s", path)
            return False

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(updated)
        except OSError as e:
            logger.error("Could not write %s: %s", path, e)
            return False

        logger.info("~~ generated %s", path)
        return True
