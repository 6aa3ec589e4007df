import pytest

from skeme.config import Scoping
from skeme.errors import SkemeArityError, SkemeRuntimeError, SkemeUserError
from skeme.interpreter import Interpreter, interpret
from skeme.types.symbol import Symbol


def test_global_variables():
    nodes = [
        [Symbol("define"), Symbol("x"), 2],
        [Symbol("+"), Symbol("x"), Symbol("x"), Symbol("x")],
    ]
    assert interpret(nodes) == 6


def test_global_function_definition():
    nodes = [
        [Symbol("define"), Symbol("double"),
         [Symbol("lambda"), [Symbol("x")], [Symbol("+"), Symbol("x"), Symbol("x")]]],
        [Symbol("double"), 8],
    ]
    assert interpret(nodes) == 16


def test_list_of_quoted_symbol_and_bound_value(interp):
    assert interp.eval("(define b 5) (list (quote a) b)") == [Symbol("a"), 5]


def test_wrong_arity_names_expected_count(interp):
    interp.eval("(define double (lambda (x) (+ x x)))")
    with pytest.raises(SkemeArityError, match="exactly 1 arguments"):
        interp.eval("(double 1 2)")


def test_interpret_empty_program():
    assert interpret([]) == []


def test_interpret_accepts_any_iterable():
    assert interpret(iter([1, 2, 3])) == 3


def test_interpret_uses_fresh_environment():
    interpret([[Symbol("define"), Symbol("x"), 1]])
    # a second run does not see the first one's definitions
    assert interpret([[Symbol("define"), Symbol("x"), 2], Symbol("x")]) == 2


def test_interpreter_keeps_definitions_between_calls(interp):
    interp.eval("(define counter 0)")
    interp.eval("(set! counter (+ counter 1))")
    assert interp.eval("counter") == 1


def test_interpreter_eval_nodes(interp):
    assert interp.eval_nodes([[Symbol("list"), 1, "two"]]) == [1, "two"]


def test_interpreter_scoping_argument():
    assert Interpreter("lexical").scoping is Scoping.LEXICAL
    assert Interpreter(Scoping.DYNAMIC).scoping is Scoping.DYNAMIC


def test_first_failure_aborts_run():
    nodes = [
        [Symbol("error"), "stop"],
        [Symbol("error"), "never"],
    ]
    with pytest.raises(SkemeUserError, match='"stop"'):
        interpret(nodes)


def test_recursive_procedure(interp):
    source = """
    (define depth
      (lambda (done)
        (if done 0 (+ 1 (depth #t)))))
    (depth #f)
    """
    assert interp.eval(source) == 1


def test_runaway_recursion_exhausts_the_stack(interp):
    interp.eval("(define loop (lambda (n) (loop (+ n 1))))")
    with pytest.raises(RecursionError):
        interp.eval("(loop 0)")


def test_quasiquote_built_from_arguments(interp):
    source = """
    (define make-pair (lambda (a b) (list a b)))
    (define swap (lambda (p) (quasiquote ((unquote (and p 2)) 1))))
    (list (make-pair 1 2) (swap (make-pair 1 2)))
    """
    assert interp.eval(source) == [[1, 2], [2, 1]]


def test_errors_are_runtime_errors(interp):
    with pytest.raises(SkemeRuntimeError):
        interp.eval("(undefined-procedure 1)")
