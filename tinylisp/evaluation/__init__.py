from tinylisp.evaluation.evaluator import evaluate
from tinylisp.evaluation.apply import apply_procedure

__all__ = ["evaluate", "apply_procedure"]
