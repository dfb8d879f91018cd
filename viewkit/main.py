# viewkit/main.py
"""Main entry point for the viewkit CLI application."""
from viewkit.cli.interface import main_cli_group


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli_group(prog_name="viewkit")

if __name__ == '__main__':
    entrypoint()
