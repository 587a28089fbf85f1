"""Declaration naming: deriving type names from property keys, and keeping them
unique within one conversion."""

from __future__ import annotations

import re
from typing import Dict, Iterator, Set, Tuple

_FALLBACK_NAME = "Item"
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]+")


def singularize(key: str) -> str:
    """Heuristic English singular of a property key, e.g. `categories` ->
    `category`. The first matching rule wins."""
    if key.endswith("ies"):
        return key[:-3] + "y"
    elif key.endswith("es"):
        return key[:-2]
    elif key.endswith("s") and not key.endswith("ss"):
        return key[:-1]
    return key


def _capitalize(word: str) -> str:
    # Unlike str.capitalize(), this leaves the rest of the word alone.
    return word[:1].upper() + word[1:]


def suggest_name(key: str) -> str:
    """Derive a candidate declaration name from a property key.

    The key is singularized and capitalized. Characters that can't appear in a
    TypeScript identifier split the key into words, which are joined in
    PascalCase: `user-accounts` -> `UserAccount`. Keys that leave nothing
    behind map to `Item`.
    """
    words = [word for word in _NON_IDENTIFIER.split(singularize(key)) if word]
    name = words[0] + "".join(map(_capitalize, words[1:])) if words else ""
    if name[:1].isdigit():
        name = "_" + name
    return _capitalize(name) or _FALLBACK_NAME


class DeclarationRegistry:
    """Insertion-ordered mapping from declaration name to declaration text,
    scoped to a single conversion.

    Names are reserved while a declaration is being composed, and only inserted
    once its text is complete. Nested declarations are therefore inserted
    before their parents.
    """

    def __init__(self) -> None:
        self._declarations: Dict[str, str] = {}
        self._pending: Set[str] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._declarations or name in self._pending

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __getitem__(self, name: str) -> str:
        return self._declarations[name]

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._declarations.items())

    def reserve(self, candidate: str) -> str:
        """Reserve a unique name based on `candidate`, appending `1`, `2`, ...
        if the candidate is already taken.

        Returns:
            The reserved name.
        """
        name = candidate
        counter = 1
        while name in self:
            name = f"{candidate}{counter}"
            counter += 1
        self._pending.add(name)
        return name

    def insert(self, name: str, text: str) -> None:
        """Store the finished text for a previously reserved name."""
        if name not in self._pending:
            raise ValueError(f"Declaration name {name} was never reserved")
        self._pending.remove(name)
        self._declarations[name] = text
