"""Tests for phrasebook.i18n.store module."""

from phrasebook.i18n import Leaf, Node, PhraseStore
from tests.factories.i18n import make_dictionary


class TestPhraseStore:
    """Tests for PhraseStore flattening and mutation."""

    def test_extend_flattens_nested_keys(self):
        """extend() joins nested keys with dots."""
        store = PhraseStore()
        store.extend({"nav": {"menu": {"open": "Open"}}, "title": "T"})
        assert store.as_dict() == {"nav.menu.open": "Open", "title": "T"}

    def test_extend_with_prefix(self):
        """extend() prepends the prefix to every key."""
        store = PhraseStore()
        store.extend({"open": "Open", "sub": {"close": "Close"}}, "menu")
        assert store.keys() == ["menu.open", "menu.sub.close"]

    def test_extend_overwrites(self):
        """Later extend() calls overwrite existing keys."""
        store = PhraseStore({"a": "first"})
        store.extend({"a": "second"})
        assert store.get("a") == "second"

    def test_extend_accepts_node(self):
        """extend() accepts a pre-built tree."""
        store = PhraseStore()
        store.extend(Node({"a": Node({"b": Leaf("B")})}))
        assert store.get("a.b") == "B"

    def test_flat_map_never_holds_nested_values(self):
        """Every stored value is a string."""
        store = PhraseStore(make_dictionary())
        assert all(isinstance(value, str) for value in store.as_dict().values())

    def test_unset_single_key(self):
        """unset() with a string removes exactly that key."""
        store = PhraseStore({"a": {"b": "B", "c": "C"}})
        store.unset("a.b")
        assert store.as_dict() == {"a.c": "C"}

    def test_unset_absent_key_is_noop(self):
        store = PhraseStore({"a": "A"})
        store.unset("missing.key")
        store.unset({"missing": {"key": "x"}})
        assert store.as_dict() == {"a": "A"}

    def test_unset_tree_with_prefix(self):
        """unset() removes the leaves a tree would add under a prefix."""
        store = PhraseStore({"keep": "K"})
        tree = {"open": "Open", "sub": {"close": "Close"}}
        store.extend(tree, "menu")
        store.unset(tree, "menu")
        assert store.as_dict() == {"keep": "K"}

    def test_extend_then_unset_round_trip(self):
        """extend(T, p) followed by unset(T, p) restores the prior state."""
        store = PhraseStore({"existing": {"key": "value"}, "other": "x"})
        before = store.as_dict()
        tree = make_dictionary()
        store.extend(tree, "extra")
        assert len(store) > len(before)
        store.unset(tree, "extra")
        assert store.as_dict() == before

    def test_clear(self):
        store = PhraseStore(make_dictionary())
        store.clear()
        assert len(store) == 0

    def test_replace_keeps_only_new_keys(self):
        """replace() makes has() true exactly for the new flattened keys."""
        store = PhraseStore(make_dictionary())
        store.replace({"x": {"y": "Y"}, "z": "Z"})
        assert set(store.keys()) == {"x.y", "z"}
        assert store.has("x.y")
        assert not store.has("greeting.hello")
        assert not store.has("x")

    def test_has_requires_exact_key(self):
        """has() does not match prefixes or branch names."""
        store = PhraseStore({"a": {"b": "B"}})
        assert store.has("a.b")
        assert not store.has("a")
        assert "a.b" in store
        assert "a" not in store
