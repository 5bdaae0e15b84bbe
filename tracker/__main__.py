"""Module entrypoint for `python -m tracker`."""

from tracker.cli.tracker_cli import run

if __name__ == "__main__":
    run()
