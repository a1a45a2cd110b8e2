"""Unit tests for BaseUtilityMap abstract class."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from utility_maps.core.common.base_map import (
    BaseUtilityMap,
    default_compare,
    is_valid_key,
)
from utility_maps.exceptions import (
    KeyConflictError,
    KeyNotFoundError,
    TypeMismatchError,
)

# -------- Concrete fakes for testing --------


class RecordingMap(BaseUtilityMap):
    """Minimal concrete map recording which primitives ran."""

    def __init__(self) -> None:
        super().__init__()
        self.data: dict[str, object] = {}
        self.calls: list[str] = []

    def _contains(self, key: str) -> bool:
        return key in self.data

    def _fetch(self, key: str) -> object:
        self.calls.append(f"fetch:{key}")
        return self.data[key]

    def _store(self, key: str, value: object) -> None:
        self.calls.append(f"store:{key}")
        self.data[key] = value

    def _replace(self, key: str, value: object) -> None:
        self.calls.append(f"replace:{key}")
        self.data[key] = value

    def _discard(self, key: str) -> None:
        self.calls.append(f"discard:{key}")
        del self.data[key]

    def _iter_items(self) -> Iterator[tuple[str, object]]:
        return iter(self.data.items())

    def size(self) -> int:
        return len(self.data)


# ------------------------- Tests -------------------------


class TestBaseUtilityMap:
    @pytest.fixture
    def fake(self) -> RecordingMap:
        return RecordingMap()

    def test_cannot_instantiate_abstract_base(self) -> None:
        with pytest.raises(TypeError):
            BaseUtilityMap()  # type: ignore[abstract]

    def test_add_routes_to_store(self, fake: RecordingMap) -> None:
        fake.add("k", 1)
        assert fake.calls == ["store:k"]

    def test_failed_add_touches_nothing(self, fake: RecordingMap) -> None:
        fake.add("k", 1)
        fake.calls.clear()
        with pytest.raises(KeyConflictError):
            fake.add("k", 2)
        assert fake.calls == []
        assert fake.data == {"k": 1}

    @pytest.mark.parametrize("op", ["get", "remove"])
    def test_missing_key_touches_nothing(self, fake: RecordingMap, op: str) -> None:
        with pytest.raises(KeyNotFoundError):
            getattr(fake, op)("k")
        assert fake.calls == []

    def test_set_routes_to_replace(self, fake: RecordingMap) -> None:
        fake.add("k", 1)
        fake.set("k", 2)
        assert fake.calls == ["store:k", "replace:k"]

    @pytest.mark.parametrize("op", ["add", "set"])
    def test_invalid_key_rejected_before_storage(
        self, fake: RecordingMap, op: str
    ) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            getattr(fake, op)(42, "v")
        assert exc_info.value.key == 42
        assert isinstance(exc_info.value, TypeError)
        assert fake.calls == []

    def test_items_is_a_snapshot(self, fake: RecordingMap) -> None:
        fake.add("a", 1)
        fake.add("b", 2)
        for key, _ in fake.items():
            fake.remove(key)
        assert fake.size() == 0

    def test_classmethods_build_subclass(self) -> None:
        built = RecordingMap.from_array(["x"], "_s")
        assert isinstance(built, RecordingMap)
        assert built.data == {"0_s": "x"}

    def test_logs_mutations(
        self, fake: RecordingMap, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="utility_maps")
        fake.add("k", 1)
        fake.set("k", 2)
        fake.remove("k")
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["Added 'k'", "Updated 'k'", "Removed 'k'"]
        assert caplog.records[0].name.endswith("base_map.RecordingMap")

    def test_logs_rejections_as_warnings(
        self, fake: RecordingMap, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="utility_maps")
        with pytest.raises(KeyNotFoundError):
            fake.get("missing")
        assert caplog.records[-1].levelno == logging.WARNING
        assert "get() on missing key 'missing'" in caplog.text


class TestHelpers:
    @pytest.mark.parametrize(
        "key,expected",
        [("a", True), ("", False), (None, False), (1, False), (b"a", False)],
    )
    def test_is_valid_key(self, key, expected: bool) -> None:
        assert is_valid_key(key) is expected

    def test_default_compare(self) -> None:
        nan = float("nan")
        assert default_compare(nan, nan) is True
        assert default_compare([1], [1]) is True
        assert default_compare(1, 2) is False

    def test_package_logger_has_no_handlers(self) -> None:
        RecordingMap().add("k", 1)
        assert logging.getLogger("utility_maps").handlers == []
