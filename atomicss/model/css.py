"""CSS rule trees.

Selectors and at-rule params are kept verbatim, including any `${atom}`
placeholders; substitution happens when the owning molecule renders.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CSSDeclaration:
    property: str
    value: str

    def get_css(self) -> str:
        return f"{self.property}:{self.value};"

    def __str__(self) -> str:
        return f"#CSSDeclaration({self.property}: {self.value})"


@dataclass(slots=True)
class CSSRule:
    """`selector{...}`."""

    selector: str
    children: list[CSSNode] = field(default_factory=list)

    def get_css(self) -> str:
        return f"{self.selector}{{{_children_css(self.children)}}}"

    def insert_declaration(self, declaration: CSSDeclaration) -> None:
        self.children.append(declaration)

    def insert_rule(self, rule: CSSRule) -> None:
        self.children.append(rule)

    def insert_at_rule(self, at_rule: CSSAtRule) -> None:
        self.children.append(at_rule)

    def with_declaration(self, declaration: CSSDeclaration) -> CSSRule:
        self.insert_declaration(declaration)
        return self

    def with_rule(self, rule: CSSRule) -> CSSRule:
        self.insert_rule(rule)
        return self

    def with_at_rule(self, at_rule: CSSAtRule) -> CSSRule:
        self.insert_at_rule(at_rule)
        return self

    def __str__(self) -> str:
        return f"#CSSRule({self.selector} {{ ... }})"


@dataclass(slots=True)
class CSSAtRule:
    """`@name params{...}`, or `@name params;` when it has no children."""

    name: str
    params: str | None = None
    children: list[CSSNode] = field(default_factory=list)

    def get_css(self) -> str:
        css = f"@{self.name}"
        if self.params is not None:
            css += f" {self.params}"
        if not self.children:
            return css + ";"
        return f"{css}{{{_children_css(self.children)}}}"

    def insert_declaration(self, declaration: CSSDeclaration) -> None:
        self.children.append(declaration)

    def insert_rule(self, rule: CSSRule) -> None:
        self.children.append(rule)

    def insert_at_rule(self, at_rule: CSSAtRule) -> None:
        self.children.append(at_rule)

    def with_declaration(self, declaration: CSSDeclaration) -> CSSAtRule:
        self.insert_declaration(declaration)
        return self

    def with_rule(self, rule: CSSRule) -> CSSAtRule:
        self.insert_rule(rule)
        return self

    def with_at_rule(self, at_rule: CSSAtRule) -> CSSAtRule:
        self.insert_at_rule(at_rule)
        return self

    def __str__(self) -> str:
        return f"#CSSAtRule(@{self.name} {self.params!r} {{ ... }})"


type CSSNode = CSSDeclaration | CSSRule | CSSAtRule


def _children_css(children: list[CSSNode]) -> str:
    return "".join(child.get_css() for child in children)


__all__ = [
    "CSSAtRule",
    "CSSDeclaration",
    "CSSNode",
    "CSSRule",
]
