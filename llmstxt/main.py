# llmstxt/main.py
"""Main entry point for the llmstxt CLI application."""

from llmstxt.cli.interface import main_cli_group


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli_group(prog_name="llmstxt")

if __name__ == '__main__':
    entrypoint()
