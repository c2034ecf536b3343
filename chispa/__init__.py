# Core type aliases for Chispa's data model.
# Runtime values are instances of the classes in chispa.types.primitive and
# chispa.types.complex; AST nodes live in chispa.reader.ast.
#
# Naming guidance:
# - Node:         Use in reader/parser/unparse code to denote syntax tree nodes.
# - RuntimeValue: Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` so the leaf modules can import them without cycles.

import logging
from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
RuntimeValue = Any
# Syntax tree node alias
Node = Any

# Evaluator function type: passed into statement/expression handlers
EvaluatorFn = Callable[..., RuntimeValue]

# Library logging is silent unless the host application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())
