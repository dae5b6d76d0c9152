"""Run the cronbuilder CLI.

Usage:
    python -m cronbuilder expression build --add hour=5
"""

from cronbuilder.cli.main import cli

if __name__ == "__main__":
    cli()
