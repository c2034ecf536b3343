"""Function application for Chispa.

Native functions receive `(this, args)` and may return either a runtime value
or a plain host value, which is converted with `from_host`. User functions
run their body in a fresh scope whose parent is the closure environment.
"""

from __future__ import annotations

import logging
import sys

from chispa import EvaluatorFn, RuntimeValue
from chispa.config import get_max_depth
from chispa.errors import ChispaRecursionError, ChispaTypeError
from chispa.evaluation.control import ReturnSignal
from chispa.types.complex import FunctionVal, from_host
from chispa.types.primitive import Null

logger = logging.getLogger(__name__)

# NOTE: process-global; the evaluator is single-threaded.
_call_depth = 0

# Python frames consumed per Chispa call, with room for nested expressions.
_FRAMES_PER_CALL = 16
_FRAME_HEADROOM = 1000


def reserve_stack(max_depth: int) -> int:
    """Raise the host recursion limit so `max_depth` Chispa calls fit.

    The limit is never lowered. Returns the limit now in effect.
    """
    needed = max_depth * _FRAMES_PER_CALL + _FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug("raising recursion limit to %d", needed)
        sys.setrecursionlimit(needed)
    return sys.getrecursionlimit()


def bind_arguments(fn: FunctionVal, args: list[RuntimeValue]):
    """Create the call scope and bind parameters positionally.

    Missing arguments bind to null; extra arguments are ignored.
    """
    env = fn.env()
    for i, param in enumerate(fn.params):
        env.declare_var(param, args[i] if i < len(args) else Null)
    return env


def apply(
    fn: RuntimeValue,
    args: list[RuntimeValue],
    evaluate_fn: EvaluatorFn,
    this: RuntimeValue = None,
) -> RuntimeValue:
    """Call `fn` with already-evaluated `args`."""
    global _call_depth

    if not isinstance(fn, FunctionVal):
        raise ChispaTypeError(f"No se puede llamar a un valor de tipo {fn.type_name()}")

    if fn.native is not None:
        return from_host(fn.native(fn if this is None else this, list(args)))

    max_depth = get_max_depth()
    if _call_depth == 0:
        reserve_stack(max_depth)
    if _call_depth >= max_depth:
        raise ChispaRecursionError(
            f"Profundidad maxima de llamadas excedida en {fn.name or '<anonima>'}"
        )

    logger.debug("calling %s with %d argument(s)", fn.name or "<anonima>", len(args))
    env = bind_arguments(fn, args)
    _call_depth += 1
    try:
        for stmt in fn.body:
            evaluate_fn(stmt, env)
    except ReturnSignal as signal:
        return signal.value
    except RecursionError as exc:
        raise ChispaRecursionError("Pila de llamadas agotada") from exc
    finally:
        _call_depth -= 1
    return Null
