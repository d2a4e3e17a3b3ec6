"""Evaluation engine: the evaluator, the operation registry and the built-in forms."""
