from skeme.types.symbol import Symbol
from skeme.types.environment import Environment
from skeme.types.lambda_fn import Lambda
from skeme.types.native_fn import NativeProcedure
from skeme.types.values import values_equal, is_integer, is_procedure, type_name

__all__ = [
    "Symbol",
    "Environment",
    "Lambda",
    "NativeProcedure",
    "values_equal",
    "is_integer",
    "is_procedure",
    "type_name",
]
