"""Locality guard for Docker Desktop.

Decides whether a `DOCKER_HOST` value addresses the Docker Desktop instance
running on this machine. Every mutating admin call goes through
`is_local_docker_desktop`; the result is never cached because `DOCKER_HOST`
can change between invocations.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from core.domain.platform import OperatingSystem

_PIPE_PREFIX = "//./pipe/"


def is_local_docker_desktop(docker_host: str | None, os: str) -> bool:
    """Return True only when `docker_host` is the local Docker Desktop on `os`.

    Fails closed: unknown operating systems, blank or unparseable endpoints,
    TCP endpoints (even loopback ones, which may be tunnels to a remote
    engine) and anything else not recognised as local resolve to False.
    """

    system = OperatingSystem.parse(os)
    if system is None:
        return False

    # Only an unset DOCKER_HOST means the default local endpoint.
    if not docker_host:
        return True
    if docker_host != docker_host.strip():
        return False

    try:
        parts = urlsplit(docker_host)
    except ValueError:
        return False

    scheme = parts.scheme.lower()
    if scheme == "unix":
        return system in (OperatingSystem.DARWIN, OperatingSystem.LINUX) and _is_socket_path(
            parts.netloc + parts.path
        )
    if scheme == "npipe":
        return system is OperatingSystem.WINDOWS and _is_pipe_path(parts.netloc + parts.path)
    return False


def _is_socket_path(path: str) -> bool:
    # unix:///var/run/docker.sock -> netloc "" + path "/var/run/docker.sock"
    return path.startswith("/") and len(path) > 1


def _is_pipe_path(path: str) -> bool:
    # npipe:////./pipe/docker_engine -> netloc "" + path "//./pipe/docker_engine"
    normalized = path.replace("\\", "/")
    return normalized.startswith(_PIPE_PREFIX) and len(normalized) > len(_PIPE_PREFIX)
