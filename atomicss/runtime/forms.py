"""Builtin form names, one vocabulary per nesting context.

The same identifier can mean different things depending on where it
appears; `&` and `@` are rules inside a molecule and nested rules inside a
rule body.
"""

from enum import StrEnum


class OrganismForm(StrEnum):
    ELECTRON = "electron"
    MOLECULE = "molecule"
    DEF = "def"
    LOG = "log"
    DBG = "dbg"


class MoleculeForm(StrEnum):
    ATOM = "atom"
    RULE = "&"
    AT_RULE = "@"


class AtomForm(StrEnum):
    ELECTRONS = "electrons"
    IMPORT = "import"


class RuleForm(StrEnum):
    """Inside `&`/`@` bodies; any other name is a declaration."""

    RULE = "&"
    AT_RULE = "@"


def form_kind[T: StrEnum](vocabulary: type[T], name: str) -> T | None:
    """Look a form name up in one context's vocabulary."""
    try:
        return vocabulary(name)
    except ValueError:
        return None
