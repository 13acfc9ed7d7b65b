"""dbrowser CLI bootstrap."""

from dbrowser.cli import app

if __name__ == "__main__":
    app()
