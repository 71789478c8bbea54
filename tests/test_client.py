"""Tests for RokuClient request shapes against a recording transport."""

import pytest

from conftest import BASE_URL, RecordingTransport, load_fixture
from roku_remote import RokuClient
from roku_remote.errors import (
    AmbiguousActiveApp,
    IconFetchFailed,
    InvalidInput,
    TransportFailure,
)


def test_base_url_is_normalised():
    client = RokuClient(BASE_URL + "/", transport=RecordingTransport())

    assert client.base_url == BASE_URL


@pytest.mark.asyncio
async def test_apps_returns_typed_collection(client, transport):
    transport.respond("/query/apps", load_fixture("apps"))

    apps = await client.apps()

    assert transport.calls == [("GET", f"{BASE_URL}/query/apps")]
    assert len(apps) == 8
    for app in apps:
        assert isinstance(app.id, str) and app.id
        assert isinstance(app.name, str) and app.name
        assert isinstance(app.type, str) and app.type
        assert isinstance(app.version, str) and app.version


@pytest.mark.asyncio
async def test_apps_is_idempotent(client, transport):
    transport.respond("/query/apps", load_fixture("apps"))

    first = await client.apps()
    second = await client.apps()

    assert first == second
    assert first is not second


@pytest.mark.asyncio
async def test_active_returns_app(client, transport):
    transport.respond("/query/active-app", load_fixture("active-app"))

    app = await client.active()

    assert transport.urls == [f"{BASE_URL}/query/active-app"]
    assert app is not None
    assert app.id == "12"
    assert app.name == "Netflix"


@pytest.mark.asyncio
async def test_active_returns_none_without_active_app(client, transport):
    transport.respond("/query/active-app", load_fixture("active-app-none"))

    assert await client.active() is None


@pytest.mark.asyncio
async def test_active_rejects_multiple_apps(client, transport):
    transport.respond("/query/active-app", load_fixture("active-multiple"))

    with pytest.raises(AmbiguousActiveApp):
        await client.active()


@pytest.mark.asyncio
async def test_info_returns_camel_cased_fields(client, transport):
    transport.respond("/query/device-info", load_fixture("info"))

    info = await client.info()

    assert transport.urls == [f"{BASE_URL}/query/device-info"]
    assert len(info) == 29
    assert "model-name" not in info
    assert info["modelName"] == "Roku 3"


@pytest.mark.asyncio
async def test_keypress_named_key(client, transport):
    await client.keypress("Home")

    assert transport.calls == [("POST", f"{BASE_URL}/keypress/Home")]


@pytest.mark.asyncio
async def test_keypress_single_character_sends_literal(client, transport):
    await client.keypress("a")

    assert transport.calls == [("POST", f"{BASE_URL}/keypress/Lit_a")]


@pytest.mark.asyncio
async def test_keypress_url_encodes_utf8_literal(client, transport):
    await client.keypress("€")

    assert transport.calls == [("POST", f"{BASE_URL}/keypress/Lit_%E2%82%AC")]


@pytest.mark.asyncio
async def test_keydown_holds_key(client, transport):
    await client.keydown("Pause")

    assert transport.calls == [("POST", f"{BASE_URL}/keydown/Pause")]


@pytest.mark.asyncio
async def test_keyup_releases_key(client, transport):
    await client.keyup("Info")

    assert transport.calls == [("POST", f"{BASE_URL}/keyup/Info")]


@pytest.mark.asyncio
async def test_invalid_key_is_rejected_before_any_request(client, transport):
    with pytest.raises(InvalidInput):
        await client.keypress("NotAKey")

    assert transport.calls == []


@pytest.mark.asyncio
async def test_launch_posts_app_id(client, transport):
    await client.launch("12345")

    assert transport.calls == [("POST", f"{BASE_URL}/launch/12345")]


@pytest.mark.asyncio
async def test_launch_rejects_empty_app_id(client, transport):
    with pytest.raises(InvalidInput):
        await client.launch("")

    assert transport.calls == []


@pytest.mark.asyncio
async def test_text_sends_one_literal_per_character(client, transport):
    await client.text("hello")

    assert transport.calls == [
        ("POST", f"{BASE_URL}/keypress/Lit_h"),
        ("POST", f"{BASE_URL}/keypress/Lit_e"),
        ("POST", f"{BASE_URL}/keypress/Lit_l"),
        ("POST", f"{BASE_URL}/keypress/Lit_l"),
        ("POST", f"{BASE_URL}/keypress/Lit_o"),
    ]


@pytest.mark.asyncio
async def test_non_2xx_response_raises_transport_failure(client, transport):
    transport.respond("/keypress/Home", b"Not Found", status=404)

    with pytest.raises(TransportFailure) as excinfo:
        await client.keypress("Home")

    assert excinfo.value.status == 404
    assert excinfo.value.url == f"{BASE_URL}/keypress/Home"


@pytest.mark.asyncio
async def test_text_stops_at_first_failure(client, transport):
    transport.respond("/keypress/Lit_b", status=503)

    with pytest.raises(TransportFailure):
        await client.text("abc")

    assert transport.urls == [
        f"{BASE_URL}/keypress/Lit_a",
        f"{BASE_URL}/keypress/Lit_b",
    ]


@pytest.mark.asyncio
async def test_icon_writes_binary_body(client, transport, tmp_path):
    data = bytes(range(256)) * 4
    transport.respond("/icon/12", data, headers={"Content-Type": "image/jpeg"})

    path = await client.icon("12")

    assert transport.calls == [("GET", f"{BASE_URL}/icon/12")]
    assert path == tmp_path / "12.jpeg"
    assert path.read_bytes() == data


@pytest.mark.asyncio
async def test_icon_honours_directory_override(client, transport, tmp_path):
    transport.respond("/icon/837", b"\x89PNG", headers={"content-type": "image/png; charset=binary"})

    path = await client.icon("837", tmp_path / "icons")

    assert path == tmp_path / "icons" / "837.png"
    assert path.read_bytes() == b"\x89PNG"


@pytest.mark.asyncio
async def test_icon_rejects_unknown_content_type(client, transport, tmp_path):
    transport.respond("/icon/12", b"<html/>", headers={"Content-Type": "text/html"})

    with pytest.raises(IconFetchFailed) as excinfo:
        await client.icon("12")

    assert excinfo.value.app_id == "12"
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_icon_rejects_error_status(client, transport):
    transport.respond("/icon/99", status=404, headers={"Content-Type": "image/png"})

    with pytest.raises(IconFetchFailed):
        await client.icon("99")


@pytest.mark.asyncio
async def test_close_leaves_injected_transport_open(transport):
    async with RokuClient(BASE_URL, transport=transport):
        pass

    assert transport.closed is False


@pytest.mark.asyncio
async def test_text_rejects_non_string_before_any_request(client, transport):
    with pytest.raises(InvalidInput):
        await client.text(["h", "i"])  # type: ignore[arg-type]

    assert transport.calls == []
