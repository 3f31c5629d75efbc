"""
Entry point for the `create-gaarf-wf` command-line interface.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the create-gaarf-wf CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
