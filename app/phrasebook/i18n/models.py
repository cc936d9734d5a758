"""Translation models for the i18n system.

Defines the dictionary tree structure phrases are loaded from and the
interpolation configuration shared by the engine components.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

PLURAL_DELIMITER = "||||"
DEFAULT_PREFIX = "%{"
DEFAULT_SUFFIX = "}"


@dataclass(frozen=True)
class Leaf:
    """A phrase template at the bottom of a dictionary tree.

    Attributes:
        text: Template string, possibly holding plural variants and placeholders.
    """

    text: str


@dataclass(frozen=True)
class Node:
    """A nested level of a dictionary tree.

    Attributes:
        children: Mapping of key segment to Leaf or Node.
    """

    children: Dict[str, "DictionaryTree"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def items(self):
        return self.children.items()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Node":
        """Build a tree from plain nested mappings.

        ``None`` values are treated as empty branches.

        Args:
            data: Nested mapping whose leaves are strings.

        Returns:
            Node mirroring the mapping.

        Raises:
            TypeError: If a leaf is neither a string nor a mapping.
        """
        return _parse_node(data, path="")


DictionaryTree = Union[Leaf, Node]
PhraseSource = Union[Node, Mapping[str, Any]]


def _parse_node(data: Optional[Mapping[str, Any]], path: str) -> Node:
    if data is None:
        return Node()
    if isinstance(data, Node):
        return data
    if not isinstance(data, Mapping):
        raise TypeError(
            f"Dictionary tree at {path or '<root>'!r} must be a mapping, "
            f"got {type(data).__name__}"
        )

    children: Dict[str, DictionaryTree] = {}
    for key, value in data.items():
        key = str(key)
        child_path = f"{path}.{key}" if path else key
        if isinstance(value, (Leaf, Node)):
            children[key] = value
        elif isinstance(value, str):
            children[key] = Leaf(value)
        elif value is None or isinstance(value, Mapping):
            children[key] = _parse_node(value, child_path)
        elif isinstance(value, bool):
            raise TypeError(
                f"Phrase at {child_path!r} must be a string, got bool; YAML reads "
                "unquoted yes/no/on/off/true/false as booleans, quote the text"
            )
        else:
            raise TypeError(
                f"Phrase at {child_path!r} must be a string, got {type(value).__name__}"
            )
    return Node(children)


def as_tree(source: Optional[PhraseSource]) -> Node:
    """Coerce a Node or plain mapping into a Node."""
    if isinstance(source, Node):
        return source
    return Node.from_mapping(source)


@dataclass(frozen=True)
class InterpolationOptions:
    """Placeholder delimiters.

    Attributes:
        prefix: Opening delimiter (default ``%{``).
        suffix: Closing delimiter (default ``}``).
    """

    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX

    @classmethod
    def from_value(
        cls, value: Optional[Union["InterpolationOptions", Mapping[str, Any]]]
    ) -> "InterpolationOptions":
        """Accept an InterpolationOptions, a ``{prefix, suffix}`` mapping or None.

        Empty delimiters fall back to the defaults.
        """
        if isinstance(value, InterpolationOptions):
            return value
        value = value or {}
        return cls(
            prefix=value.get("prefix") or DEFAULT_PREFIX,
            suffix=value.get("suffix") or DEFAULT_SUFFIX,
        )
