"""Compile modes and interpreter configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from atomicss.model import SelectorMode


class CompileMode(StrEnum):
    """Top-level compilation behavior profile."""

    RELEASE = "release"
    DEBUG = "debug"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class InterpreterOptions:
    """Flags controlling selector output and how unknown forms are treated."""

    mode: CompileMode = CompileMode.RELEASE
    selector_mode: SelectorMode = SelectorMode.HASHED
    strict_forms: bool = False

    @staticmethod
    def for_mode(mode: CompileMode) -> "InterpreterOptions":
        if mode == CompileMode.DEBUG:
            return InterpreterOptions(
                mode=mode,
                selector_mode=SelectorMode.READABLE,
                strict_forms=False,
            )

        if mode == CompileMode.STRICT:
            return InterpreterOptions(
                mode=mode,
                selector_mode=SelectorMode.HASHED,
                strict_forms=True,
            )

        return InterpreterOptions(
            mode=mode,
            selector_mode=SelectorMode.HASHED,
            strict_forms=False,
        )
