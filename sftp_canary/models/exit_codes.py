"""Process exit codes for the canary."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the canary.

    Automation keys off these values, so they must stay stable:

    * 0: every stage that ran succeeded
    * 1: usage or configuration error (nothing was probed)
    * 2: TCP connectivity failure
    * 3: SFTP login, listing or logout failure
    * 70: unhandled internal error (EX_SOFTWARE in sysexits.h)
    * 130: interrupted by SIGINT
    """

    SUCCESS = 0
    USAGE_ERROR = 1
    TCP_FAILURE = 2
    SFTP_FAILURE = 3
    INTERNAL_ERROR = 70
    INTERRUPTED = 130
