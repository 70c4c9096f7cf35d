"""Change notifications arrive in one shape, whichever backend produced them."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from settings_store.core.types import NAMESPACE_LOCAL, StorageChange
from settings_store.host import MemoryOrigin, StorageEvent
from settings_store.listeners import normalize_changes, storage_event_listener
from settings_store.storage import SettingsStorage
from tests.fakes import make_extension_host

THEME_CHANGE = {"theme": StorageChange(old_value="dark", new_value="light")}


@pytest.mark.parametrize("kind", ["chrome", "browser"])
def test_extension_change_is_normalized(kind):
    host = make_extension_host(kind)
    storage = SettingsStorage(host, always_attach_local_listener=False)
    calls = []
    storage.add_listener(lambda changes, namespace: calls.append((changes, namespace)))

    getattr(host, kind).storage.on_changed.emit({"theme": {"oldValue": "dark", "newValue": "light"}}, "sync")
    assert calls == [(THEME_CHANGE, "sync")]


def test_local_change_is_normalized():
    origin = MemoryOrigin()
    host = origin.new_context()
    writer = origin.new_context()
    writer.local_storage.set_item("theme", "dark")
    storage = SettingsStorage(host)
    calls = []
    storage.add_listener(lambda changes, namespace: calls.append((changes, namespace)))

    writer.local_storage.set_item("theme", "light")
    assert calls == [(THEME_CHANGE, NAMESPACE_LOCAL)]


@pytest.mark.asyncio
async def test_extension_set_notifies_listener():
    host = make_extension_host("chrome")
    storage = SettingsStorage(host)
    calls = []
    storage.add_listener(lambda changes, namespace: calls.append(changes))

    await storage.set({"theme": "dark"})
    await storage.set({"theme": "light"})
    assert calls == [
        {"theme": StorageChange(old_value=None, new_value="dark")},
        THEME_CHANGE,
    ]


def test_extension_backend_does_not_listen_to_local_by_default():
    origin = MemoryOrigin()
    host = origin.new_context()
    host.chrome = make_extension_host("chrome").chrome
    storage = SettingsStorage(host, always_attach_local_listener=False)
    calls = []
    storage.add_listener(lambda changes, namespace: calls.append(namespace))

    origin.new_context().local_storage.set_item("theme", "light")
    assert calls == []
    assert host.window.listener_count("storage") == 0


def test_always_attach_local_adds_storage_event_listener():
    origin = MemoryOrigin()
    host = origin.new_context()
    host.chrome = make_extension_host("chrome").chrome
    storage = SettingsStorage(host, always_attach_local_listener=True)
    calls = []
    storage.add_listener(lambda changes, namespace: calls.append((changes, namespace)))

    host.chrome.storage.on_changed.emit({"theme": {"oldValue": "dark", "newValue": "light"}}, "sync")
    origin.new_context().local_storage.set_item("theme", "light")
    assert calls == [
        (THEME_CHANGE, "sync"),
        ({"theme": StorageChange(old_value=None, new_value="light")}, NAMESPACE_LOCAL),
    ]


def test_each_add_listener_call_installs_one_subscription():
    host = make_extension_host("chrome")
    storage = SettingsStorage(host)
    storage.add_listener(lambda changes, namespace: None)
    storage.add_listener(lambda changes, namespace: None)
    assert len(host.chrome.storage.on_changed.listeners) == 2


def test_rapid_events_are_delivered_individually():
    origin = MemoryOrigin()
    host = origin.new_context()
    writer = origin.new_context()
    storage = SettingsStorage(host)
    seen = []
    storage.add_listener(lambda changes, namespace: seen.extend(changes))

    for size in ("12", "13", "14"):
        writer.local_storage.set_item("font_size", size)
    assert seen == ["font_size", "font_size", "font_size"]


def test_normalize_changes_accepts_host_shapes():
    raw = {
        "a": {"oldValue": 1, "newValue": 2},
        "b": {},
        "c": StorageChange(old_value="x", new_value="y"),
        "d": SimpleNamespace(old_value=None, new_value=3),
    }
    assert normalize_changes(raw) == {
        "a": StorageChange(1, 2),
        "b": StorageChange(None, None),
        "c": StorageChange("x", "y"),
        "d": StorageChange(None, 3),
    }


def test_storage_change_as_dict():
    assert StorageChange("dark", "light").as_dict() == {"oldValue": "dark", "newValue": "light"}


def test_storage_event_listener_skips_empty_key():
    calls = []
    listener = storage_event_listener(lambda changes, namespace: calls.append(changes))
    listener(StorageEvent(key=None))
    listener(StorageEvent(key=""))
    listener(StorageEvent(key="theme", old_value=None, new_value="dark"))
    assert calls == [{"theme": StorageChange(None, "dark")}]


def test_changes_index_like_host_shape_on_every_backend():
    origin = MemoryOrigin()
    local_host = origin.new_context()
    chrome_host = make_extension_host("chrome")
    browser_host = make_extension_host("browser")
    new_values = []

    def handler(changes, namespace):
        new_values.append((changes["theme"]["oldValue"], changes["theme"]["newValue"], namespace))

    for host in (chrome_host, browser_host, local_host):
        SettingsStorage(host, always_attach_local_listener=False).add_listener(handler)

    raw = {"theme": {"oldValue": "dark", "newValue": "light"}}
    chrome_host.chrome.storage.on_changed.emit(raw, "sync")
    browser_host.browser.storage.on_changed.emit(raw, "sync")
    writer = origin.new_context()
    writer.local_storage.set_item("theme", "dark")
    writer.local_storage.set_item("theme", "light")

    assert new_values == [
        ("dark", "light", "sync"),
        ("dark", "light", "sync"),
        (None, "dark", NAMESPACE_LOCAL),
        ("dark", "light", NAMESPACE_LOCAL),
    ]


def test_storage_change_equals_host_dict():
    change = StorageChange("dark", "light")
    assert change == {"oldValue": "dark", "newValue": "light"}
    assert {"theme": change} == {"theme": {"oldValue": "dark", "newValue": "light"}}
    assert dict(change) == change.as_dict()
    assert list(change) == ["oldValue", "newValue"]
    with pytest.raises(KeyError):
        change["old_value"]
