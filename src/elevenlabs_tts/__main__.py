"""Entry point for running elevenlabs_tts as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the elevenlabs-tts CLI application."""
    app()


if __name__ == "__main__":
    main()
