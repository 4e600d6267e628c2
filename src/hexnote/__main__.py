"""Entry point for ``python -m hexnote``."""

from hexnote.interfaces.cli.app import run_cli

if __name__ == "__main__":
    run_cli()
