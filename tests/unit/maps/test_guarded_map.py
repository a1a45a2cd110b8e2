"""Unit tests for GuardedMap."""

import pytest

from utility_maps import GuardedMap, KeyNotFoundError, MapEntry, TypeMismatchError


@pytest.fixture
def guarded() -> GuardedMap:
    return GuardedMap.from_basic_map({"a": 1, "b": 2, "c": 3})


class TestGuardedMapEncapsulation:
    """Entries are only reachable through the map operations."""

    def test_no_item_access(self, guarded: GuardedMap) -> None:
        with pytest.raises(TypeError):
            guarded["a"]  # type: ignore[index]
        with pytest.raises(TypeError):
            guarded["a"] = 5  # type: ignore[index]

    def test_no_attribute_access_to_entries(self, guarded: GuardedMap) -> None:
        assert not hasattr(guarded, "a")

    def test_to_objects_array_does_not_expose_internal_list(
        self, guarded: GuardedMap
    ) -> None:
        objects = guarded.to_objects_array()
        objects.append({"key": "z", "value": 26})
        objects[0]["value"] = 100
        assert guarded.size() == 3
        assert guarded.get("a") == 1
        assert guarded.to_objects_array() is not guarded.to_objects_array()

    def test_entries_snapshot(self, guarded: GuardedMap) -> None:
        entries = guarded.entries()
        assert [e.key for e in entries] == ["a", "b", "c"]
        assert all(isinstance(e, MapEntry) for e in entries)
        entries.pop()
        assert guarded.size() == 3


class TestGuardedMapStorage:
    """Explicit key search over the entry list."""

    def test_values_are_kept_by_reference(self) -> None:
        payload = {"nested": [1, 2]}
        m = GuardedMap()
        m.add("p", payload)
        assert m.get("p") is payload
        assert m.includes(payload) is True
        assert m.key_of(payload) == "p"

    def test_set_replaces_in_place(self, guarded: GuardedMap) -> None:
        before = guarded.entries()
        guarded.set("b", 20)
        after = guarded.entries()
        assert [e.key for e in after] == ["a", "b", "c"]
        assert after[1].value == 20
        # old records are immutable and untouched
        assert before[1].value == 2
        assert after[0] is before[0]

    def test_remove_filters(self, guarded: GuardedMap) -> None:
        guarded.remove("a")
        assert guarded.keys_to_array() == ["b", "c"]
        assert guarded.values_to_array() == [2, 3]

    def test_none_value_round_trip(self) -> None:
        m = GuardedMap()
        m.add("nothing", None)
        assert m.includes_key("nothing") is True
        assert m.get("nothing") is None
        assert m.includes(None) is True
        assert m.key_of(None) == "nothing"

    def test_missing_key_message(self, guarded: GuardedMap) -> None:
        with pytest.raises(KeyNotFoundError, match="so cannot remove it"):
            guarded.remove("zzz")

    @pytest.mark.parametrize("bad_key", [None, 0, "", b"a"])
    def test_invalid_keys_rejected(self, guarded: GuardedMap, bad_key) -> None:
        with pytest.raises(TypeMismatchError, match="non-empty strings"):
            guarded.add(bad_key, 1)
        assert guarded.size() == 3

    def test_len(self, guarded: GuardedMap) -> None:
        assert len(guarded) == 3
        assert len(GuardedMap()) == 0
