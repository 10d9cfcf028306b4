"""Entry point for ``python -m sftp_canary``."""

from sftp_canary.cli import run

if __name__ == "__main__":
    run()
