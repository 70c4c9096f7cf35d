"""In-process host: shared items per origin, storage events to other contexts, process host."""

from __future__ import annotations

from settings_store import host as host_mod
from settings_store.host import HostEnvironment, MemoryOrigin, StorageEvent, get_host, set_host


def test_contexts_share_items():
    origin = MemoryOrigin()
    a = origin.new_context()
    b = origin.new_context()
    a.local_storage.set_item("theme", "dark")
    assert b.local_storage.get_item("theme") == "dark"
    assert len(b.local_storage) == 1
    assert list(b.local_storage.keys()) == ["theme"]


def test_values_are_stored_as_strings():
    ctx = MemoryOrigin().new_context()
    ctx.local_storage.set_item("n", 5)
    assert ctx.local_storage.get_item("n") == "5"


def test_events_go_to_other_contexts():
    origin = MemoryOrigin()
    a = origin.new_context()
    b = origin.new_context()
    seen_a, seen_b = [], []
    a.window.add_event_listener("storage", seen_a.append)
    b.window.add_event_listener("storage", seen_b.append)

    a.local_storage.set_item("theme", "dark")
    a.local_storage.set_item("theme", "dark")
    a.local_storage.remove_item("theme")
    a.local_storage.set_item("x", "1")
    a.local_storage.clear()

    assert seen_a == []
    assert seen_b == [
        StorageEvent(key="theme", old_value=None, new_value="dark"),
        StorageEvent(key="theme", old_value="dark", new_value=None),
        StorageEvent(key="x", old_value=None, new_value="1"),
        StorageEvent(key=None),
    ]


def test_process_host_default_and_override(monkeypatch):
    monkeypatch.setattr(host_mod, "_host", None)
    default = get_host()
    assert default.local_storage is not None
    assert default.chrome is None and default.browser is None
    assert get_host() is default

    custom = HostEnvironment()
    set_host(custom)
    assert get_host() is custom
