# Core type aliases for skeme's data model.
# We use plain Python types (int, bool, str, list) plus Symbol to represent both
# code (syntax nodes) and runtime values. There is no separate node class.
#
# Naming guidance:
# - SyntaxNode: Use in reader and special-form code to denote unevaluated syntax.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the variants they may hold are listed in
# skeme.types.values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parser output, consumed unevaluated by native procedures
SyntaxNode = Any

# Evaluator function type: passed to native procedures so they can evaluate
# the argument nodes they need
EvaluatorFn = Callable[..., LispValue]
