import logging

import pytest

from atomicss.errors import EvalError
from atomicss.model import CSSAtRule, CSSDeclaration, CSSRule, Electron, content_hash
from atomicss.parser import parse
from atomicss.runtime import CompileMode, Interpreter, InterpreterOptions
from tests._debug import debug_dump_organism
from tests._shared_cases import CYCLIC, FLAG_AND_BUTTON, FLAG_ROOT_CONTENT, SOURCE_CASES


def _run(text: str, mode: CompileMode = CompileMode.RELEASE) -> Interpreter:
    interpreter = Interpreter(InterpreterOptions.for_mode(mode))
    interpreter.run(text)
    return interpreter


def _eval_error(text: str, mode: CompileMode = CompileMode.RELEASE) -> EvalError:
    with pytest.raises(EvalError) as exc_info:
        _run(text, mode)
    return exc_info.value


def test_flag_and_button_end_to_end() -> None:
    organism = _run(FLAG_AND_BUTTON).organism
    organism.update_exports()
    debug_dump_organism("flag_and_button_end_to_end", organism)

    root_class = f"flag_root_{content_hash(FLAG_ROOT_CONTENT)}"
    root_selector = f".{root_class}"

    assert organism.dependency_graph.topological_order() == ["button", "flag"]
    assert organism.get_exports("flag")["root"] == frozenset({"bg_green", root_class})
    assert organism.get_exports("flag")["label"] == frozenset({"red"})
    assert organism.get_exports("button")["label"] == frozenset({"red"})

    flag_css = (
        f"{root_selector}{{padding:1rem;}}"
        "@foo;"
        "@bar baz;"
        f"@media (min-width: 1024px){{{root_selector}{{padding:1.5rem;}}}}"
    )
    assert organism.molecules["flag"].get_css() == flag_css
    assert organism.molecules["button"].get_css() == ""
    assert "${" not in organism.get_css()
    assert organism.get_css() == (
        ".red { color: #ff0000 }.bg_green { background-color: #00ff00 }" + flag_css
    )


def test_flag_root_content_accumulates_every_reference() -> None:
    flag = _run(FLAG_AND_BUTTON).organism.molecules["flag"]

    assert flag.hashed_atoms.hashable_content("root") == FLAG_ROOT_CONTENT
    assert flag.hashed_atoms.hashable_content("label") == ""


def test_debug_mode_uses_readable_selectors() -> None:
    organism = _run(FLAG_AND_BUTTON, CompileMode.DEBUG).organism
    organism.update_exports()

    assert organism.molecules["flag"].get_css().startswith(".flag_root{padding:1rem;}")
    assert organism.exported_classes("flag", "root") == ["bg_green", "flag_root"]


def test_same_source_compiles_identically() -> None:
    first = _run(FLAG_AND_BUTTON).organism
    second = _run(FLAG_AND_BUTTON).organism

    assert first.get_css() == second.get_css()
    assert first.molecules["flag"].hashed_atoms.selectors == second.molecules["flag"].hashed_atoms.selectors


def test_molecule_range_is_recorded() -> None:
    interpreter = _run("(molecule `m`)\n(molecule `n` (atom `a`))")

    assert interpreter.molecule_ranges["m"].as_tuple() == (0, 14)
    assert interpreter.molecule_ranges["n"].as_tuple() == (15, 40)


def test_cyclic_source_evaluates() -> None:
    organism = _run(CYCLIC).organism

    assert set(organism.molecules) == {"a", "b", "c"}
    assert organism.dependency_graph.edges == {("a", "b"), ("b", "c"), ("c", "a")}


def test_electron_values_and_names() -> None:
    electron = _run("(electron `bg` (background-color `#00ff00`))").organism.electrons["bg"]

    assert electron == Electron("bg", "background-color", "#00ff00")


@pytest.mark.parametrize(
    ("source", "code"),
    [
        ("(electron `x` `y`)", "EVAL_INVALID_ELECTRON_FORM"),
        ("(electron `x`)", "EVAL_INVALID_ELECTRON_FORM"),
        ("(electron `x` (color `a` `b`))", "EVAL_INVALID_ELECTRON_FORM"),
        ("(electron x (color `a`))", "EVAL_INVALID_ELECTRON_FORM"),
        ("(molecule)", "EVAL_INVALID_MOLECULE_FORM"),
        ("(molecule name)", "EVAL_INVALID_MOLECULE_FORM"),
        ("(molecule `m` `oops`)", "EVAL_INVALID_MOLECULE_FORM"),
        ("(molecule `m` (atom))", "EVAL_INVALID_ATOM_FORM"),
        ("(molecule `m` (atom `a` `b`))", "EVAL_INVALID_ATOM_FORM"),
        ("(molecule `m` (atom `a` (electrons)))", "EVAL_INVALID_ELECTRONS_FORM"),
        ("(molecule `m` (atom `a` (electrons red)))", "EVAL_INVALID_ELECTRONS_FORM"),
        ("(molecule `m` (atom `a` (import `b`)))", "EVAL_INVALID_IMPORT_FORM"),
        ("(molecule `m` (atom `a` (import `b` `c` `d`)))", "EVAL_INVALID_IMPORT_FORM"),
        ("(molecule `m` (& (x `y`)))", "EVAL_INVALID_RULE_FORM"),
        ("(molecule `m` (& `a` `b`))", "EVAL_INVALID_RULE_FORM"),
        ("(molecule `m` (@))", "EVAL_INVALID_AT_RULE_FORM"),
        ("(molecule `m` (@ `media` `print` `oops`))", "EVAL_INVALID_AT_RULE_FORM"),
        ("(molecule `m` (& `a` (padding)))", "EVAL_INVALID_DECLARATION"),
        ("(molecule `m` (& `a` (padding `1` `2`)))", "EVAL_INVALID_DECLARATION"),
        ("(def x)", "EVAL_INVALID_VARIABLE_FORM"),
        ("(def (x) `1`)", "EVAL_INVALID_VARIABLE_FORM"),
        ("(electron `red` (color primary))", "EVAL_VARIABLE_NOT_FOUND"),
    ],
)
def test_invalid_forms(source: str, code: str) -> None:
    assert _eval_error(source).code == code


def test_invalid_electron_range_covers_arguments() -> None:
    error = _eval_error("(electron `x` `y`)")

    assert error.message == "Invalid electron `electron`"
    assert error.range.as_tuple() == (10, 17)


def test_form_without_arguments_points_at_form() -> None:
    error = _eval_error("  (molecule)")

    assert error.range.as_tuple() == (2, 12)


@pytest.mark.parametrize(
    "source",
    [
        "(frobnicate `x`)",
        "(molecule `m` (frobnicate))",
        "(molecule `m` (atom `a` (frobnicate)))",
    ],
)
def test_unknown_forms_are_ignored_by_default(source: str) -> None:
    interpreter = _run(source)

    assert interpreter.organism.electrons == {}


@pytest.mark.parametrize(
    "source",
    [
        "(frobnicate `x`)",
        "(molecule `m` (frobnicate))",
        "(molecule `m` (atom `a` (frobnicate)))",
    ],
)
def test_unknown_forms_fail_in_strict_mode(source: str) -> None:
    error = _eval_error(source, CompileMode.STRICT)

    assert error.code == "EVAL_UNKNOWN_FORM"
    assert "frobnicate" in error.message


def test_unknown_rule_body_name_is_a_declaration() -> None:
    organism = _run("(molecule `m` (atom `a`) (& `${a}` (frobnicate `1`)))", CompileMode.STRICT).organism

    assert organism.molecules["m"].css == "${a}{frobnicate:1;}"


def test_earlier_forms_survive_a_failure() -> None:
    interpreter = Interpreter()
    source = (
        "(electron `red` (color `#f00`))\n"
        "(molecule `ok` (atom `a`))\n"
        "(molecule `bad` (atom `a`) (atom))\n"
        "(electron `blue` (color `#00f`))"
    )

    with pytest.raises(EvalError):
        interpreter.run(source)

    assert list(interpreter.organism.electrons) == ["red"]
    assert list(interpreter.organism.molecules) == ["ok"]
    assert "bad" not in interpreter.organism.dependency_graph


def test_rule_builders_do_not_touch_the_organism() -> None:
    interpreter = Interpreter()
    (form,) = parse(
        "(& `${body}` (margin `0`) (& `&:hover` (color `red`)) (@ `supports` `(display: grid)` (display `grid`)))"
    )

    css_rule = interpreter.build_rule(form)

    assert css_rule == CSSRule(
        "${body}",
        [
            CSSDeclaration("margin", "0"),
            CSSRule("&:hover", [CSSDeclaration("color", "red")]),
            CSSAtRule("supports", "(display: grid)", [CSSDeclaration("display", "grid")]),
        ],
    )
    assert interpreter.organism.molecules == {}


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("(@ `foo`)", CSSAtRule("foo")),
        ("(@ `bar` `baz`)", CSSAtRule("bar", "baz")),
        ("(@ `media` `print` (& `a` (x `y`)))", CSSAtRule("media", "print", [CSSRule("a", [CSSDeclaration("x", "y")])])),
    ],
)
def test_at_rule_shapes(source: str, expected: CSSAtRule) -> None:
    (form,) = parse(source)

    assert Interpreter().build_at_rule(form) == expected


def test_nested_rules_case_renders() -> None:
    nested = next(case for case in SOURCE_CASES if case.name == "nested_rules")
    organism = _run(nested.source, CompileMode.DEBUG).organism

    assert organism.get_css() == ".card_body{margin:0;&:hover{color:red;}@supports (display: grid){display:grid;}}"


def test_def_variables_are_substituted() -> None:
    interpreter = _run(
        "(def primary `#f00`)\n"
        "(def `accent` primary)\n"
        "(electron `red` (color accent))\n"
        "(molecule `m` (atom `a`) (& `${a}` (color primary)))",
        CompileMode.DEBUG,
    )

    assert interpreter.variables == {"primary": "#f00", "accent": "#f00"}
    assert interpreter.organism.electrons["red"].value == "#f00"
    assert interpreter.organism.get_css() == ".red { color: #f00 }.m_a{color:#f00;}"


def test_def_can_be_redefined() -> None:
    interpreter = _run("(def x `1`)(def x `2`)")

    assert interpreter.variables["x"] == "2"


def test_log_writes_info(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="atomicss.runtime.interpreter"):
        _run("(def name `world`)(log `hello` name)")

    assert "hello world" in caplog.messages


def test_dbg_writes_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="atomicss.runtime.interpreter"):
        _run("(def x `1`)(dbg x `lit`)(electron `red` (color `r`))(dbg)")

    assert "x='1', <string>='lit'" in caplog.messages
    assert any(message.startswith("Organism") and "red: color: r" in message for message in caplog.messages)


def test_call_organism_function_returns_value() -> None:
    interpreter = Interpreter()
    (form,) = parse("(electron `red` (color `r`))")

    assert interpreter.call_organism_function(form) == Electron("red", "color", "r")
