"""
Utilities for checking availability of network ports.

A probe binds a listener and releases it straight away, so nothing stops
another process from taking the port before the caller binds it.
"""
import socket
from contextlib import contextmanager
from typing import Iterator

from ..MODELS.port_range import MAX_PORT, MIN_PORT
from ..MODELS.prober_config import DEFAULT_HOST


def is_available(port: int, host: str = DEFAULT_HOST) -> bool:
    """
    Checks if a TCP port can be bound on the given host.

    :param port: Port number to probe.
    :param host: Address to bind, loopback by default.
    :return: True when a listener could be opened, False on any bind error.
    """
    if not MIN_PORT <= port <= MAX_PORT:
        return False
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            s.bind((host, port))
            s.listen(1)
        except OSError:
            return False
    return True


@contextmanager
def hold_port(port: int, host: str = DEFAULT_HOST) -> Iterator[socket.socket]:
    """
    Keeps a listener bound to a port for the duration of the block.

    :raises OSError: If the port cannot be bound.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind((host, port))
        s.listen(1)
        yield s
    finally:
        s.close()
