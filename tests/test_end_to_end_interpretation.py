import io
import sys

import pytest

from environment import Environment, UndefinedVariableError
from main import run_program, process_program
from tests.utils import run_src


def test_reference_program(reference_program):
    env, out, err = run_src(reference_program)
    assert out == "15\n"
    assert err == ""
    assert env.as_dict() == {"a": 10}


def test_redeclaration_overwrites():
    env, out, _ = run_src("variable x = 1; variable x = 2; print(x);")
    assert out == "2\n"
    assert env.as_dict() == {"x": 2}


def test_chained_addition():
    env, out, _ = run_src("variable b = 1 + 2 + 3;")
    assert out == ""
    assert env.as_dict() == {"b": 6}


def test_values_seen_are_the_latest_assignment():
    src = """
    variable a = 1;
    print(a);
    variable b = a + a;
    variable a = b + 10;
    print(a + b);
    """
    env, out, _ = run_src(src)
    assert out == "1\n14\n"
    assert env.as_dict() == {"a": 12, "b": 2}


def test_undefined_variable_produces_no_output():
    out = io.StringIO()
    with pytest.raises(UndefinedVariableError, match="Undefined variable 'a'"):
        run_program("print(a);", out=out, err=io.StringIO())
    assert out.getvalue() == ""


def test_runtime_error_halts_remaining_statements():
    out = io.StringIO()
    env = Environment()
    with pytest.raises(UndefinedVariableError):
        run_program("print(1); print(zz); print(2); variable q = 3;", env=env, out=out)
    assert out.getvalue() == "1\n"
    assert "q" not in env


def test_syntax_error_after_earlier_statements_ran():
    out = io.StringIO()
    env = Environment()
    with pytest.raises(SyntaxError, match="Expected '='"):
        run_program("variable a = 1; print(a); variable b 2; print(b);", env=env, out=out)
    assert out.getvalue() == "1\n"
    assert env.as_dict() == {"a": 1}


def test_unknown_characters_warn_but_do_not_stop_the_run():
    env, out, err = run_src("variable a = 4 $; print(a);")
    assert out == "4\n"
    assert err == "Unknown token: $\n"


def test_independent_runs_do_not_share_state():
    run_src("variable a = 1;")
    with pytest.raises(UndefinedVariableError):
        run_src("print(a);")


def test_process_program_success_status():
    out, err = io.StringIO(), io.StringIO()
    assert process_program("print(2 + 2);", out=out, err=err) == 0
    assert out.getvalue() == "4\n"
    assert err.getvalue() == ""


def test_process_program_reports_syntax_error():
    out, err = io.StringIO(), io.StringIO()
    status = process_program("print(1);\nprint(2", out=out, err=err)
    assert status == 1
    assert out.getvalue() == "1\n"
    assert err.getvalue() == (
        "Syntax Error: Expected ')' in print statement at line 2, column 8\n"
    )


def test_process_program_reports_runtime_error():
    out, err = io.StringIO(), io.StringIO()
    assert process_program("print(a);", out=out, err=err) == 1
    assert out.getvalue() == ""
    assert err.getvalue() == "Runtime Error: Undefined variable 'a'\n"


def test_process_program_reports_oversized_literal():
    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if not limit:
        pytest.skip("no integer string-conversion limit on this interpreter")
    out, err = io.StringIO(), io.StringIO()
    status = process_program(
        "print(1); variable a = " + "9" * (limit + 1) + "; print(2);", out=out, err=err
    )
    assert status == 1
    assert out.getvalue() == "1\n"
    assert err.getvalue().startswith("Runtime Error: Number too large:")
