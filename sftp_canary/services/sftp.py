"""SFTP login/list/logout stage."""

import logging
from datetime import datetime

import asyncssh

from sftp_canary.config import CanaryConfig
from sftp_canary.models import RemoteEntry, SftpResult

logger = logging.getLogger(__name__)

LIST_PATH = "/"
PSEUDO_ENTRIES = frozenset({".", ".."})

# Password-only login: no client keys, no agent
AUTH_METHODS = "password,keyboard-interactive"


def _to_entry(name: "asyncssh.SFTPName") -> RemoteEntry:
    """Convert an asyncssh directory entry to a RemoteEntry."""
    filename = name.filename
    if isinstance(filename, bytes):
        filename = filename.decode("utf-8", errors="replace")

    mtime = name.attrs.mtime
    modified = datetime.fromtimestamp(mtime) if mtime is not None else None
    return RemoteEntry(name=filename, size=name.attrs.size, modified=modified)


async def _list_entries(conn: asyncssh.SSHClientConnection) -> list[RemoteEntry]:
    """List the root directory, skipping the self/parent entries."""
    async with conn.start_sftp_client() as sftp:
        names = await sftp.readdir(LIST_PATH)

    entries = []
    for name in names:
        entry = _to_entry(name)
        if entry.name in PSEUDO_ENTRIES:
            continue
        entries.append(entry)
    return entries


async def probe_sftp(config: CanaryConfig) -> SftpResult:
    """Log in over SFTP, list the root directory, then log out.

    All connect, authentication, listing and disconnect failures are
    captured in the result; the session is released on every path.

    Args:
        config: Run configuration with host, port and credentials.

    Returns:
        SftpResult describing how far the session got.
    """
    user = config.user or ""
    result = SftpResult(host=config.host, port=config.port, user=user)

    logger.info(
        "Opening SFTP session to %s@%s:%d",
        user,
        config.host,
        config.port,
    )

    try:
        async with asyncssh.connect(
            config.host,
            port=config.port,
            username=user,
            password=config.password,
            known_hosts=config.known_hosts,
            client_keys=None,
            agent_path=None,
            preferred_auth=AUTH_METHODS,
            connect_timeout=config.sftp_timeout,
            login_timeout=config.sftp_timeout,
        ) as conn:
            result.connected = True
            logger.info("SFTP login to %s:%d succeeded", config.host, config.port)

            result.entries = await _list_entries(conn)
            logger.debug("Listed %d entries in %s", len(result.entries), LIST_PATH)

            conn.close()
            await conn.wait_closed()
            result.logged_out = True
    except asyncssh.PermissionDenied as e:
        logger.warning("SFTP authentication failed for %s: %s", user, e.reason)
        result.error = f"Permission denied: {e.reason}"
    except asyncssh.HostKeyNotVerifiable as e:
        logger.error(
            "Host key verification failed for %s: %s. Add the host key to %s",
            config.host,
            e.reason,
            config.known_hosts,
        )
        result.error = f"Host key not verifiable: {e.reason}"
    except asyncssh.DisconnectError as e:
        logger.warning("SSH session to %s:%d ended: %s", config.host, config.port, e)
        result.error = e.reason or str(e)
    except asyncssh.SFTPError as e:
        logger.warning("SFTP listing of %s failed: %s", LIST_PATH, e.reason)
        result.error = f"SFTP error: {e.reason}"
    except TimeoutError:
        logger.warning(
            "SFTP session to %s:%d timed out after %ss",
            config.host,
            config.port,
            config.sftp_timeout,
        )
        result.error = f"Timed out after {config.sftp_timeout:g} seconds"
    except (asyncssh.Error, OSError) as e:
        logger.warning("SFTP session to %s:%d failed: %s", config.host, config.port, e)
        result.error = str(e) or repr(e)

    return result
