from __future__ import annotations

import logging
from typing import Literal

from chispa import RuntimeValue
from chispa.config import get_log_level, log_level_configured
from chispa.evaluation import evaluate
from chispa.reader.parser import parse
from chispa.types.environment import Environment
from chispa.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Chispa code.
    Owns the global Environment, which persists across `eval` calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        # the package logger is left alone unless a level was asked for
        if log_level_configured():
            logging.getLogger("chispa").setLevel(get_log_level())
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from chispa.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError:
                logger.debug("no prelude directory found; continuing without prelude")
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        evaluate(parse(code), self.env)

    def eval(self, code: str) -> RuntimeValue:
        """Parse and evaluate `code`; returns the program's value."""
        program = parse(code)
        logger.debug("evaluating program with %d statement(s)", len(program.body))
        return evaluate(program, self.env)
