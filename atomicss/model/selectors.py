"""Per-molecule atom selectors derived from accumulated content.

Every atom carries a "hashable content" accumulator. Each append recomputes
and overwrites the atom's selector, so a selector is only final once the
molecule is fully built. `${atom}` placeholders in the molecule's CSS are
substituted at render time for that reason.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

from atomicss.errors import UnknownAtomError

PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]+)\}")

HASH_DIGEST_SIZE: Final[int] = 4


class SelectorMode(StrEnum):
    HASHED = "hashed"
    READABLE = "readable"


def content_hash(content: str) -> str:
    """Short BLAKE2s hex digest of the accumulated content."""
    return hashlib.blake2s(content.encode("utf-8"), digest_size=HASH_DIGEST_SIZE).hexdigest()


def make_selector(molecule: str, atom: str, content: str, mode: SelectorMode = SelectorMode.HASHED) -> str:
    if mode == SelectorMode.READABLE:
        return f".{molecule}_{atom}"
    return f".{molecule}_{atom}_{content_hash(content)}"


def get_variables(css: str) -> list[str]:
    """Placeholder names in order of occurrence, repeats included."""
    return PLACEHOLDER_PATTERN.findall(css)


@dataclass(slots=True)
class HashedAtoms:
    """Side table of accumulated content and current selector per atom."""

    molecule_name: str
    mode: SelectorMode = SelectorMode.HASHED
    selectors: dict[str, str] = field(default_factory=dict)
    hashable_contents: dict[str, str] = field(default_factory=dict)

    def update_atom_hashable_contents(self, atom_name: str, content: str) -> None:
        previous = self.hashable_contents.get(atom_name, "")
        self.hashable_contents[atom_name] = previous + content
        self._update_atom_selector(atom_name)

    def _update_atom_selector(self, atom_name: str) -> None:
        self.selectors[atom_name] = make_selector(
            self.molecule_name,
            atom_name,
            self.hashable_contents[atom_name],
            self.mode,
        )

    def selector(self, atom_name: str) -> str:
        try:
            return self.selectors[atom_name]
        except KeyError:
            raise UnknownAtomError(self.molecule_name, atom_name) from None

    def hashable_content(self, atom_name: str) -> str:
        try:
            return self.hashable_contents[atom_name]
        except KeyError:
            raise UnknownAtomError(self.molecule_name, atom_name) from None

    def template(self, css: str) -> str:
        """Substitute every `${atom}` placeholder with the atom's final selector."""
        return PLACEHOLDER_PATTERN.sub(lambda match: self.selector(match.group(1)), css)
