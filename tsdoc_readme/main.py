"""Entry point for the TSDoc README generator.

Runs the 'tsdoc' command group, so ``python -m tsdoc_readme.main
generate`` behaves like the installed ``tsdoc-readme`` script.
"""

from tsdoc_readme.cli.commands import tsdoc


def main() -> None:
    """Launch the CLI."""
    tsdoc()


if __name__ == "__main__":
    main()
