from atomicss.model import SelectorMode, content_hash
from atomicss.parser import MAX_NESTING_DEPTH, parse
from atomicss.pipeline import run_compile
from atomicss.runtime import CompileMode, InterpreterOptions
from tests._shared_cases import CYCLIC, FLAG_AND_BUTTON, FLAG_ROOT_CONTENT


def test_run_compile_succeeds_on_reference_fixture() -> None:
    result = run_compile(FLAG_AND_BUTTON)

    assert result.has_errors is False
    assert result.diagnostics == []
    assert result.forms is not None and len(result.forms) == 4
    assert result.exports_resolved is True
    assert result.css is not None
    assert f".flag_root_{content_hash(FLAG_ROOT_CONTENT)}{{padding:1rem;}}" in result.css
    assert result.export_table() == {
        "button": {"label": ["red"]},
        "flag": {
            "label": ["red"],
            "root": sorted(["bg_green", f"flag_root_{content_hash(FLAG_ROOT_CONTENT)}"]),
        },
    }


def test_run_compile_is_deterministic() -> None:
    first = run_compile(FLAG_AND_BUTTON)
    second = run_compile(FLAG_AND_BUTTON)

    assert first.css == second.css
    assert first.export_table() == second.export_table()


def test_run_compile_reports_parse_errors() -> None:
    source = "(molecule `m`\n  (atom `a`)"

    result = run_compile(source)

    assert result.has_errors is True
    assert result.forms is None
    assert result.css is None
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].code == "PARSER_UNMATCHED_PAREN"
    assert result.diagnostics[0].range.as_tuple() == (0, len(source))


def test_run_compile_reports_lex_errors() -> None:
    result = run_compile("(electron `red` (color #ff0000))")

    assert [diagnostic.code for diagnostic in result.diagnostics] == ["LEXER_UNRECOGNIZED_TOKEN"]
    assert result.diagnostics[0].range.as_tuple() == (23, 24)


def test_run_compile_keeps_partial_organism_on_eval_error() -> None:
    result = run_compile("(electron `red` (color `#f00`))\n(electron `x` `y`)")

    assert result.forms is not None
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["EVAL_INVALID_ELECTRON_FORM"]
    assert list(result.organism.electrons) == ["red"]
    assert result.exports_resolved is False
    assert result.css is None


def test_run_compile_renders_css_despite_cycle() -> None:
    result = run_compile(CYCLIC)

    assert [diagnostic.code for diagnostic in result.diagnostics] == ["GRAPH_CYCLIC_DEPENDENCY"]
    assert result.exports_resolved is False
    assert result.export_table() is None
    assert result.css == ""


def test_cycle_diagnostic_points_at_molecule_form() -> None:
    result = run_compile(CYCLIC)
    molecule_ranges = {form.range for form in parse(CYCLIC)}

    assert result.diagnostics[0].range in molecule_ranges


def test_run_compile_reports_render_errors() -> None:
    source = "(electron `r` (color `x`))\n(molecule `m` (atom `a`) (& `${ghost}` (x `y`)))"

    result = run_compile(source)

    assert [diagnostic.code for diagnostic in result.diagnostics] == ["RENDER_UNKNOWN_ATOM"]
    assert result.diagnostics[0].range == parse(source)[1].range
    assert result.exports_resolved is True
    assert result.css is None


def test_run_compile_can_skip_export_resolution() -> None:
    result = run_compile(CYCLIC, resolve_exports=False)

    assert result.diagnostics == []
    assert result.exports_resolved is False
    assert result.css == ""


def test_run_compile_mode_selects_options() -> None:
    debug = run_compile(FLAG_AND_BUTTON, mode=CompileMode.DEBUG)
    strict = run_compile("(frobnicate)", mode=CompileMode.STRICT)

    assert debug.options.selector_mode == SelectorMode.READABLE
    assert debug.css is not None and ".flag_root{padding:1rem;}" in debug.css
    assert [diagnostic.code for diagnostic in strict.diagnostics] == ["EVAL_UNKNOWN_FORM"]


def test_run_compile_accepts_explicit_options() -> None:
    options = InterpreterOptions(selector_mode=SelectorMode.READABLE, strict_forms=True)

    result = run_compile("(molecule `m` (atom `a`) (& `${a}` (x `y`)))", options)

    assert result.options is options
    assert result.css == ".m_a{x:y;}"


def test_run_compile_rejects_options_with_mode() -> None:
    try:
        run_compile("", InterpreterOptions(), mode=CompileMode.DEBUG)
    except ValueError as exc:
        assert "Pass either options or mode, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing options and mode together")


def test_run_compile_of_empty_source() -> None:
    result = run_compile("")

    assert result.has_errors is False
    assert result.forms == ()
    assert result.css == ""
    assert result.export_table() == {}


def _nested_rules(levels: int) -> str:
    return "(molecule `m` (atom `a`) " + "(& `a` " * levels + "(x `y`)" + ")" * levels + ")"


def test_run_compile_reports_too_deep_nesting() -> None:
    result = run_compile(_nested_rules(1500))

    assert [diagnostic.code for diagnostic in result.diagnostics] == ["PARSER_NESTING_TOO_DEEP"]
    assert result.diagnostics[0].range.start.value == 0
    assert result.forms is None
    assert result.css is None


def test_run_compile_accepts_nesting_at_limit() -> None:
    # The molecule and the innermost declaration take one level each.
    levels = MAX_NESTING_DEPTH - 2

    result = run_compile(_nested_rules(levels))

    assert result.diagnostics == []
    assert result.css == "a{" * levels + "x:y;" + "}" * levels


def test_run_compile_reports_dangling_references_as_warnings() -> None:
    source = (
        "(molecule `flag` (atom `label`\n"
        "  (electrons `ghost`) (import `button` `label`) (import `nowhere` `x`)))\n"
        "(molecule `button` (atom `icon`))"
    )

    result = run_compile(source)

    assert [diagnostic.code for diagnostic in result.diagnostics] == [
        "RESOLVE_UNDEFINED_ELECTRON",
        "RESOLVE_UNDEFINED_ATOM",
        "RESOLVE_UNDEFINED_MOLECULE",
    ]
    assert all(diagnostic.severity == "warning" for diagnostic in result.diagnostics)
    assert all(diagnostic.range == parse(source)[0].range for diagnostic in result.diagnostics)
    assert result.has_errors is False
    assert result.errors == []
    assert result.export_table() == {
        "button": {"icon": []},
        "flag": {"label": ["ghost"]},
        "nowhere": {},
    }
