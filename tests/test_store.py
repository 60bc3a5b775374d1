"""Tests for the JSON badge store."""

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest

from badgeboard.badges.store import BadgeStore
from badgeboard.errors import NotFoundError, PersistenceError

from tests.helpers import read_badges, write_badges

VIP = {"tooltip": "VIP", "badge": "http://x/img.png"}
A = {"tooltip": "A", "badge": "http://x/a.png"}
B = {"tooltip": "B", "badge": "http://x/b.png"}


@pytest.fixture
def path(tmp_path):
    return tmp_path / "badges.json"


@pytest.fixture
def badge_store(path):
    return BadgeStore(str(path))


def test_read_all_missing_file(badge_store):
    assert badge_store.read_all() == {}  # nosec B101


def test_read_all_corrupt_file(path, badge_store):
    path.write_text("{not json", encoding="utf-8")
    assert badge_store.read_all() == {}  # nosec B101


def test_read_all_non_object(path, badge_store):
    path.write_text("[1, 2]", encoding="utf-8")
    assert badge_store.read_all() == {}  # nosec B101


def test_read_all_skips_users_without_a_list(path, badge_store):
    write_badges(path, {"42": {"a": 1}, "7": "abc", "1": [A]})

    assert badge_store.read_all() == {"1": [A]}  # nosec B101


def test_delete_from_malformed_user_is_not_found(path, badge_store):
    write_badges(path, {"42": {"a": 1}})
    before = path.read_bytes()

    with pytest.raises(NotFoundError):
        badge_store.delete_badge("42", 0)

    assert path.read_bytes() == before  # nosec B101


def test_add_to_malformed_user_starts_a_new_list(path, badge_store):
    write_badges(path, {"42": "abc", "7": [B]})

    badge_store.add_badge("42", "VIP", "http://x/img.png")

    assert read_badges(path) == {"7": [B], "42": [VIP]}  # nosec B101


def test_ensure_exists_creates_empty_file(path, badge_store):
    assert badge_store.ensure_exists() is True  # nosec B101
    assert read_badges(path) == {}  # nosec B101
    assert badge_store.ensure_exists() is False  # nosec B101


def test_ensure_exists_keeps_existing_file(path, badge_store):
    write_badges(path, {"42": [A]})
    assert badge_store.ensure_exists() is False  # nosec B101
    assert read_badges(path) == {"42": [A]}  # nosec B101


def test_add_to_empty_store(path, badge_store):
    badge_store.add_badge("42", "VIP", "http://x/img.png")

    assert badge_store.read_all() == {"42": [VIP]}  # nosec B101
    assert read_badges(path) == {"42": [VIP]}  # nosec B101


def test_add_appends_in_order(path, badge_store):
    write_badges(path, {"42": [A], "7": [B]})

    badge_store.add_badge("42", "B", "http://x/b.png")
    badge_store.add_badge("100", "VIP", "http://x/img.png")

    badges = badge_store.read_all()
    assert badges["42"] == [A, B]  # nosec B101
    assert badges["100"] == [VIP]  # nosec B101
    assert list(badges) == ["42", "7", "100"]  # nosec B101


def test_write_then_read_preserves_order(badge_store):
    collection = {"b": [B, A], "a": [A], "c": [VIP, B, A]}
    badge_store.write_all(collection)

    result = badge_store.read_all()
    assert result == collection  # nosec B101
    assert list(result) == ["b", "a", "c"]  # nosec B101


def test_delete_first_of_two(path, badge_store):
    write_badges(path, {"42": [A, B]})

    badge_store.delete_badge("42", 0)

    assert read_badges(path) == {"42": [B]}  # nosec B101


def test_delete_middle_shifts_later_badges(path, badge_store):
    write_badges(path, {"42": [A, VIP, B]})

    badge_store.delete_badge("42", 1)

    assert badge_store.read_all() == {"42": [A, B]}  # nosec B101


def test_delete_last_badge_removes_user(path, badge_store):
    write_badges(path, {"42": [A], "7": [B]})

    badge_store.delete_badge("42", 0)

    assert read_badges(path) == {"7": [B]}  # nosec B101


def test_delete_only_badge_leaves_empty_store(path, badge_store):
    write_badges(path, {"42": [A]})

    badge_store.delete_badge("42", 0)

    assert read_badges(path) == {}  # nosec B101


@pytest.mark.parametrize(
    ("user_id", "index"),
    [("99", 0), ("42", 2), ("42", -1), ("42", 100)],
)
def test_delete_not_found_leaves_store_unchanged(path, badge_store, user_id, index):
    write_badges(path, {"42": [A, B]})
    before = path.read_bytes()

    with pytest.raises(NotFoundError):
        badge_store.delete_badge(user_id, index)

    assert path.read_bytes() == before  # nosec B101


def test_add_write_failure_raises_and_keeps_file(path, badge_store):
    write_badges(path, {"42": [A]})

    with patch("badgeboard.badges.store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistenceError):
            badge_store.add_badge("42", "B", "http://x/b.png")

    assert badge_store.read_all() == {"42": [A]}  # nosec B101
    leftovers = [p.name for p in path.parent.iterdir() if p.name != path.name]
    assert leftovers == []  # nosec B101


def test_delete_write_failure_raises(path, badge_store):
    write_badges(path, {"42": [A]})

    with patch("badgeboard.badges.store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistenceError):
            badge_store.delete_badge("42", 0)

    assert badge_store.read_all() == {"42": [A]}  # nosec B101


def test_concurrent_adds_are_not_lost(badge_store):
    threads = [
        threading.Thread(
            target=badge_store.add_badge, args=("42", f"t{i}", f"http://x/{i}.png")
        )
        for i in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(badge_store.read_all()["42"]) == 20  # nosec B101
