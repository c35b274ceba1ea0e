import io

import pytest

from spcompiler.vm import MAX_VARS, VMError, VirtualMachine, is_number, main


def make_vm():
    out = io.StringIO()
    return VirtualMachine(out), out


def test_eval_single_number():
    vm, _ = make_vm()
    assert vm.eval_expr("7") == 7


def test_precedence_multiplication_binds_tighter():
    vm, _ = make_vm()
    assert vm.eval_expr("2 + 3 * 4") == vm.eval_expr("2 + (3 * 4)")
    assert vm.eval_expr("2 + 3 * 4") != vm.eval_expr("(2 + 3) * 4")


def test_division_truncates_toward_zero():
    vm, _ = make_vm()
    assert vm.eval_expr("-7 / 2") == -vm.eval_expr("7 / 2")


def test_modulo_sign_follows_dividend():
    vm, _ = make_vm()
    assert vm.eval_expr("-7 % 3") == -vm.eval_expr("7 % 3")


def test_subtraction_is_left_associative():
    vm, _ = make_vm()
    assert vm.eval_expr("10 - 4 - 3") == vm.eval_expr("(10 - 4) - 3")


def test_variables_in_expressions():
    vm, _ = make_vm()
    vm.set("x", 6)
    assert vm.eval_expr("x") == 6
    assert vm.eval_expr("-x") == -6


def test_unknown_variable_reads_zero():
    vm, _ = make_vm()
    assert vm.eval_expr("missing") == 0


def test_long_identifier_truncated():
    vm, _ = make_vm()
    vm.set("a" * 63, 9)
    assert vm.eval_expr("a" * 70) == 9


@pytest.mark.parametrize(
    "expr, message",
    [
        ("1 / 0", "division by zero"),
        ("1 % 0", "modulo by zero"),
        ("(1 + 2", "missing closing parenthesis"),
        ("1 2", "unexpected characters at end of expression"),
        ("-(1)", "unexpected character"),
        ("", "unexpected character"),
    ],
)
def test_eval_errors(expr, message):
    vm, _ = make_vm()
    with pytest.raises(VMError, match=message):
        vm.eval_expr(expr)


def test_set_get_round_trip_and_update():
    vm, _ = make_vm()
    vm.set("v", 3)
    vm.set("v", 5)
    assert vm.get("v") == 5
    assert vm.variables == {"v": 5}


def test_variable_limit():
    vm, _ = make_vm()
    for i in range(MAX_VARS):
        vm.set(f"v{i}", i + 1)
    vm.set("extra", 5)
    assert vm.get("extra") == 0
    assert len(vm.variables) == MAX_VARS
    vm.set("v0", 42)
    assert vm.get("v0") == 42


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("-5", True), ("+5", True), ("", True), ("x1", False), ("1a", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_print_quoted_string():
    vm, out = make_vm()
    vm.handle_print(' "hello world" ')
    assert out.getvalue() == "hello world\n"


def test_print_number_and_variable():
    vm, out = make_vm()
    vm.set("y", 8)
    vm.handle_print("42")
    vm.handle_print("y")
    assert out.getvalue() == "42\n8\n"


def test_print_expression_matches_eval():
    vm, out = make_vm()
    vm.handle_print("3 * 5 + 1")
    assert out.getvalue() == f"{vm.eval_expr('3 * 5 + 1')}\n"


def test_run_program():
    vm, out = make_vm()
    vm.run(["x = 5\n", "y = x * 2\n", "", "print y\n"])
    assert vm.get("x") == 5
    assert vm.get("y") == vm.eval_expr("x * 2")
    assert out.getvalue() == f"{vm.get('y')}\n"


def test_function_body_skipped():
    vm, out = make_vm()
    vm.run(["function f:", "z = 1", "print z", "endfunction", "print z"])
    assert vm.get("z") == 0
    assert out.getvalue() == "0\n"


def test_call_and_unknown_instructions():
    vm, out = make_vm()
    vm.run(["call foo", "L0:"])
    assert out.getvalue() == "Function call: foo\nUnknown instruction: L0:\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.icg")]) == 1
    assert "Cannot open file" in capsys.readouterr().err


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "prog.icg"
    path.write_text('a = 4\nprint a\nprint "done"\n')
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "4\ndone\n"


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.icg"
    path.write_text("a = 1 / 0\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error: division by zero\n"