"""Main CLI application module."""

from .reference_commands import reference_app

# The reference commands make up the whole CLI
app = reference_app


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
