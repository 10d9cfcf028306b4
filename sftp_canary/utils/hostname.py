"""Host extraction for canary targets."""

from urllib.parse import urlsplit


def extract_host(target: str) -> str:
    """Extract the host from a URI or bare hostname.

    <parameters>
    target: Raw ``--uri`` value, e.g. ``sftp://files.example.com/in`` or
        ``files.example.com``
    </parameters>

    <returns>
    Host component of an absolute URI (lowercase, without userinfo, port
    or IPv6 brackets), otherwise the stripped input unchanged
    </returns>
    """
    target = target.strip()

    try:
        parts = urlsplit(target)
        hostname = parts.hostname
    except ValueError:
        # Malformed netloc such as an unterminated IPv6 bracket
        return target

    # Absolute URIs need both a scheme and an authority ("host:22" has neither)
    if not parts.scheme or not parts.netloc or not hostname:
        return target

    return hostname
