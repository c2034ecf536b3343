"""Tree-walking evaluation of Chispa syntax trees."""

from chispa.evaluation.evaluator import evaluate, EVALUATORS

__all__ = ["evaluate", "EVALUATORS"]
