"""Flat phrase storage built from nested dictionary trees."""

from typing import Dict, Iterator, List, Optional, Union

from phrasebook.i18n.models import Node, PhraseSource, as_tree


def _join(prefix: Optional[str], key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


class PhraseStore:
    """Dotted key -> phrase template mapping.

    Nested trees are flattened on the way in: ``{"a": {"b": "x"}}`` is stored
    as ``{"a.b": "x"}``. The flat map never holds a nested value.
    """

    def __init__(self, phrases: Optional[PhraseSource] = None):
        self._phrases: Dict[str, str] = {}
        if phrases:
            self.extend(phrases)

    def extend(self, tree: Optional[PhraseSource], prefix: Optional[str] = None) -> None:
        """Add every leaf of ``tree``, overwriting existing keys.

        Args:
            tree: Node or nested mapping of phrases.
            prefix: Optional dotted prefix prepended to every key.
        """
        self._extend(as_tree(tree), prefix)

    def _extend(self, node: Node, prefix: Optional[str]) -> None:
        for key, child in node.items():
            full_key = _join(prefix, key)
            if isinstance(child, Node):
                self._extend(child, full_key)
            else:
                self._phrases[full_key] = child.text

    def unset(
        self, target: Union[str, PhraseSource, None], prefix: Optional[str] = None
    ) -> None:
        """Remove a key, or every leaf a tree would have added.

        Absent keys are ignored.

        Args:
            target: Dotted key, or Node / nested mapping mirroring extend().
            prefix: Optional dotted prefix, as in extend().
        """
        if isinstance(target, str):
            self._phrases.pop(target, None)
            return
        self._unset(as_tree(target), prefix)

    def _unset(self, node: Node, prefix: Optional[str]) -> None:
        for key, child in node.items():
            full_key = _join(prefix, key)
            if isinstance(child, Node):
                self._unset(child, full_key)
            else:
                self._phrases.pop(full_key, None)

    def clear(self) -> None:
        self._phrases = {}

    def replace(self, tree: Optional[PhraseSource]) -> None:
        """Drop all phrases and load ``tree`` instead."""
        self.clear()
        self.extend(tree)

    def has(self, key: str) -> bool:
        return key in self._phrases

    def get(self, key: str) -> Optional[str]:
        return self._phrases.get(key)

    def keys(self) -> List[str]:
        return list(self._phrases.keys())

    def as_dict(self) -> Dict[str, str]:
        """Snapshot copy of the flat map."""
        return dict(self._phrases)

    def __contains__(self, key: object) -> bool:
        return key in self._phrases

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._phrases))


