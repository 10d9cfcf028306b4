"""SFTP Canary - DNS, TCP and SFTP login checks for SFTP endpoints."""

__version__ = "0.1.0"
