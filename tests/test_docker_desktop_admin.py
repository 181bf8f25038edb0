import asyncio

import pytest

from core.domain.errors import TransportError, UnsupportedFeature, WrongEnvironment
from core.domain.models import Cluster, Registry
from core.services.docker_desktop_admin import DockerDesktopAdmin


def _admin(client, docker_host="", os="darwin", is_local=None):
    kwargs = {}
    if is_local is not None:
        kwargs["is_local"] = is_local
    return DockerDesktopAdmin(docker_host=docker_host, os=os, client_factory=lambda: client, **kwargs)


def _cluster():
    return Cluster.for_product("docker-desktop")


def _transport_error(operation):
    return TransportError(f"{operation} failed", operation=operation, endpoint="unix:///tmp/backend.sock")


@pytest.mark.asyncio
async def test_ensure_installed_is_noop(settings_client):
    assert await _admin(settings_client).ensure_installed() is None
    assert settings_client.calls == []


@pytest.mark.asyncio
async def test_create_on_local_desktop_succeeds_without_daemon_calls(settings_client):
    await _admin(settings_client).create(_cluster(), None)

    assert settings_client.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("docker_host", ["", "tcp://10.0.0.5:2376"])
async def test_create_with_registry_is_unsupported_regardless_of_locality(settings_client, docker_host):
    with pytest.raises(UnsupportedFeature):
        await _admin(settings_client, docker_host=docker_host).create(_cluster(), Registry(name="kind-registry"))


@pytest.mark.asyncio
async def test_create_on_remote_host_is_wrong_environment(settings_client):
    with pytest.raises(WrongEnvironment) as excinfo:
        await _admin(settings_client, docker_host="tcp://10.0.0.5:2376").create(_cluster(), None)

    assert excinfo.value.docker_host == "tcp://10.0.0.5:2376"
    assert excinfo.value.operation == "create"
    assert "tcp://10.0.0.5:2376" in str(excinfo.value)


@pytest.mark.asyncio
async def test_delete_on_remote_host_never_touches_daemon(settings_client):
    with pytest.raises(WrongEnvironment) as excinfo:
        await _admin(settings_client, docker_host="ssh://dev@remote").delete(_cluster())

    assert excinfo.value.operation == "delete"
    assert settings_client.calls == []


@pytest.mark.asyncio
async def test_delete_resets_then_disables_kubernetes(settings_client, daemon):
    await _admin(settings_client).delete(_cluster())

    assert settings_client.calls == ["reset_cluster", "read_settings", "set_flag", "write_settings"]
    assert daemon.settings["vm"]["kubernetes"]["enabled"]["value"] is False
    assert daemon.settings["vm"]["resources"] == {"cpus": {"value": 4}}
    assert daemon.resets == 1


@pytest.mark.asyncio
async def test_second_delete_skips_write(settings_client, daemon):
    admin = _admin(settings_client)

    await admin.delete(_cluster())
    await admin.delete(_cluster())

    assert settings_client.count("reset_cluster") == 2
    assert settings_client.count("read_settings") == 2
    assert settings_client.count("write_settings") == 1


@pytest.mark.asyncio
async def test_reset_failure_is_returned_unchanged(settings_client):
    error = _transport_error("reset-cluster")
    settings_client.reset_error = error

    with pytest.raises(TransportError) as excinfo:
        await _admin(settings_client).delete(_cluster())

    assert excinfo.value is error
    assert settings_client.count("read_settings") == 0
    assert settings_client.count("write_settings") == 0


@pytest.mark.asyncio
async def test_read_failure_never_writes(settings_client):
    settings_client.read_error = _transport_error("read-settings")

    with pytest.raises(TransportError):
        await _admin(settings_client).delete(_cluster())

    assert settings_client.count("write_settings") == 0


@pytest.mark.asyncio
async def test_write_failure_propagates(settings_client, daemon):
    error = _transport_error("write-settings")
    settings_client.write_error = error

    with pytest.raises(TransportError) as excinfo:
        await _admin(settings_client).delete(_cluster())

    assert excinfo.value is error
    assert daemon.settings["vm"]["kubernetes"]["enabled"]["value"] is True


@pytest.mark.asyncio
async def test_concurrent_external_edit_is_overwritten(settings_client, daemon):
    # The read-modify-write is last-writer-wins, not compare-and-swap.
    def user_edits_settings(state):
        state.settings["autoStart"] = True

    settings_client.after_read = user_edits_settings

    await _admin(settings_client).delete(_cluster())

    assert daemon.settings["autoStart"] is False
    assert daemon.settings["vm"]["kubernetes"]["enabled"]["value"] is False


@pytest.mark.asyncio
async def test_locality_is_checked_on_every_call(settings_client):
    verdicts = iter([True, False])
    seen = []

    def is_local(docker_host, os):
        seen.append((docker_host, os))
        return next(verdicts)

    admin = _admin(settings_client, is_local=is_local)
    await admin.create(_cluster(), None)
    with pytest.raises(WrongEnvironment):
        await admin.delete(_cluster())

    assert seen == [("", "darwin"), ("", "darwin")]


@pytest.mark.asyncio
async def test_cancelled_reset_propagates_and_stops(settings_client):
    started = asyncio.Event()

    async def hanging_reset():
        settings_client.calls.append("reset_cluster")
        started.set()
        await asyncio.sleep(3600)

    settings_client.reset_cluster = hanging_reset

    task = asyncio.create_task(_admin(settings_client).delete(_cluster()))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert settings_client.calls == ["reset_cluster"]


@pytest.mark.asyncio
async def test_local_registry_hosting_is_always_none(settings_client):
    admin = _admin(settings_client, docker_host="tcp://10.0.0.5:2376")

    assert await admin.local_registry_hosting(_cluster(), Registry(name="kind-registry")) is None
    assert await admin.local_registry_hosting(_cluster(), None) is None
