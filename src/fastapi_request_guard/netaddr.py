"""Remote address helpers — ``host:port`` splitting and formatting."""

from __future__ import annotations

from starlette.requests import HTTPConnection


def split_host_port(address: str) -> tuple[str, str]:
    """Split ``host:port``, ``[host]:port`` or ``[ipv6%zone]:port``.

    Raises ``ValueError`` for a missing port, a missing or misplaced bracket,
    or an unbracketed host that contains a colon.
    """
    i = address.rfind(":")
    if i < 0:
        raise ValueError(f"{address!r}: missing port in address")

    j = k = 0
    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise ValueError(f"{address!r}: missing ']' in address")
        if end + 1 == len(address):
            raise ValueError(f"{address!r}: missing port in address")
        if end + 1 != i:
            if address[end + 1] == ":":
                raise ValueError(f"{address!r}: too many colons in address")
            raise ValueError(f"{address!r}: missing port in address")
        host = address[1:end]
        j, k = 1, end + 1
    else:
        host = address[:i]
        if ":" in host:
            raise ValueError(f"{address!r}: too many colons in address")

    if "[" in address[j:]:
        raise ValueError(f"{address!r}: unexpected '[' in address")
    if "]" in address[k:]:
        raise ValueError(f"{address!r}: unexpected ']' in address")

    return host, address[i + 1 :]


def join_host_port(host: str, port: int | str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def remote_address(conn: HTTPConnection) -> str:
    """Peer address of the connection as ``host:port``; empty when unknown."""
    client = conn.client
    if client is None:
        return ""
    return join_host_port(client.host, client.port)
