"""Electrons: single named CSS declarations."""

from dataclasses import dataclass

type ElectronName = str


@dataclass(frozen=True, slots=True)
class Electron:
    """A declaration addressable by name, exported as a utility class."""

    name: ElectronName
    property: str
    value: str

    def get_css(self) -> str:
        return f".{self.name} {{ {self.property}: {self.value} }}"
