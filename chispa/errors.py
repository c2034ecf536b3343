
class ChispaError(Exception):
    """ Base class for all Chispa errors"""
    pass

class InvalidSyntax(ChispaError):
    """ Raised when the lexer meets a character it does not recognise"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"{message} (linea {line}, columna {column})")
        self.line = line
        self.column = column

class ChispaSyntaxError(ChispaError):
    """ Raised when the parser meets an unexpected token"""

class RedeclarationError(ChispaError):
    """ Raised when a name is declared twice in the same scope"""

class UndeclaredVariableError(ChispaError):
    """ Raised when a name is used or assigned before it is declared"""

class ConstAssignmentError(ChispaError):
    """ Raised when a constant binding is reassigned"""

class ChispaTypeError(ChispaError):
    """ Raised when an operation is applied to values of the wrong kind"""

class EvaluationError(ChispaError):
    """ Raised when the evaluator has no rule for a node or target"""

class ChispaZeroDivisionError(EvaluationError):
    """ Raised when dividing (or taking a remainder) by zero"""

class ChispaRecursionError(EvaluationError):
    """ Raised when user function calls nest deeper than the configured limit"""
