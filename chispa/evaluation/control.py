"""Non-local exits used by the evaluator."""

from chispa import RuntimeValue


class ReturnSignal(Exception):
    """Unwinds statement lists from a `retorna` up to the enclosing call.

    Caught only at function-call and program boundaries, so no statement
    after a return runs at any nesting level in between.
    """

    def __init__(self, value: RuntimeValue):
        super().__init__("retorna fuera de contexto")
        self.value = value
