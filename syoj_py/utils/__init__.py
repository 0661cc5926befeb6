"""Utility functions."""

from .languages import DEFAULT_LANGUAGE, infer_language
from .log import make_logger
from .terminal import format_error, problem_to_markdown, render_problem

__all__ = [
    "DEFAULT_LANGUAGE",
    "infer_language",
    "make_logger",
    "format_error",
    "problem_to_markdown",
    "render_problem",
]
