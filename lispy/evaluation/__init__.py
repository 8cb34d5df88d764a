"""Evaluation: AST reading, the tree-walking evaluator and function application."""
