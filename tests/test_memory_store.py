"""Tests for InMemoryConfigStore."""

from toastr.config_store import InMemoryConfigStore, StoreEvent, join_path


def _recorder(events, name):
    return lambda key, value: events.append((name, key, value))


class TestInMemoryConfigStore:
    def test_child_events_in_order(self):
        store = InMemoryConfigStore()
        events = []
        for event in (StoreEvent.CHILD_ADDED, StoreEvent.CHILD_CHANGED, StoreEvent.CHILD_REMOVED):
            store.subscribe("a/commands", event, _recorder(events, event.value))

        store.set_child("a/commands", "hi", {"say": "1"})
        store.set_child("a/commands", "hi", {"say": "2"})
        store.remove_child("a/commands", "hi")

        assert events == [
            ("child_added", "hi", {"say": "1"}),
            ("child_changed", "hi", {"say": "2"}),
            ("child_removed", "hi", {"say": "2"}),
        ]

    def test_subscribe_replays_existing_children(self):
        store = InMemoryConfigStore()
        store.set_child("a/commands", "one", 1)
        store.set_child("a/commands", "two", 2)
        events = []

        store.subscribe("a/commands", StoreEvent.CHILD_ADDED, _recorder(events, "added"))

        assert events == [("added", "one", 1), ("added", "two", 2)]

    def test_value_listener_gets_current_and_later_values(self):
        store = InMemoryConfigStore()
        store.set_value("a/prefixes", ["!"])
        events = []

        store.subscribe("a/prefixes", "value", _recorder(events, "value"))
        store.set_value("a/prefixes", ["?"])
        store.set_value("a/prefixes", None)

        assert events == [
            ("value", "a/prefixes", ["!"]),
            ("value", "a/prefixes", ["?"]),
            ("value", "a/prefixes", None),
        ]
        assert store.get("a/prefixes") is None

    def test_listeners_receive_copies(self):
        store = InMemoryConfigStore()
        received = []
        store.subscribe("a/permissions", StoreEvent.CHILD_ADDED, lambda key, value: received.append(value))

        payload = ["mods"]
        store.set_child("a/permissions", "kick", payload)
        received[0].append("alice")

        assert store.get("a/permissions") == {"kick": ["mods"]}

    def test_removing_missing_child_is_noop(self):
        store = InMemoryConfigStore()
        events = []
        store.subscribe("a/commands", StoreEvent.CHILD_REMOVED, _recorder(events, "removed"))
        store.remove_child("a/commands", "ghost")
        assert events == []

    def test_join_path(self):
        assert join_path("twitch", "foo", "commands") == "twitch/foo/commands"
        assert join_path("twitch/", "/foo") == "twitch/foo"
