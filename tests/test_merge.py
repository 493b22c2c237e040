"""Tests for the tag/category merge."""

import pytest

from catalogsync.exceptions import ValidationError
from catalogsync.models.bulk_edit import MergeAction
from catalogsync.services.merge import merge


def test_add_appends_new_items_in_delta_order():
    assert merge(["new", "art"], "add", ["sale", "new", "gift", "sale"]) == ["new", "art", "sale", "gift"]


def test_add_is_idempotent():
    once = merge(["new"], MergeAction.ADD, ["sale", "limited"])
    assert merge(once, MergeAction.ADD, ["sale", "limited"]) == once


def test_remove_drops_every_delta_item():
    result = merge(["new", "sale", "art", "sale"], "remove", ["sale", "missing"])

    assert result == ["new", "art"]
    assert set(result) & {"sale", "missing"} == set()


def test_remove_is_idempotent():
    once = merge(["a", "b", "c"], "remove", ["b"])
    assert merge(once, "remove", ["b"]) == once


def test_duplicates_in_current_collapse():
    assert merge(["a", "a", "b"], "add", []) == ["a", "b"]


def test_unknown_action_rejected():
    with pytest.raises(ValidationError):
        merge(["a"], "replace", ["b"])
