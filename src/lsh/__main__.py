"""lsh CLI bootstrap."""

from lsh.cli import app

if __name__ == "__main__":
    app()
