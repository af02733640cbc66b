"""Permite ``python -m wish115``."""

from wish115.cli import app

if __name__ == "__main__":
    app()
