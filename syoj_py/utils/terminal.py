"""Utility functions for terminal output."""

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape

from ..client.models import Problem


WRAP_WIDTH = 100


def problem_to_markdown(problem: Problem) -> str:
    """Convert a problem to markdown."""
    parts = [f"# {problem.title}\n\n"]

    meta = [
        f"- **Problem ID:** {problem.id}",
        f"- **Time limit:** {problem.time_limit} ms",
        f"- **Memory limit:** {problem.memory_limit} MB",
        f"- **Difficulty:** {problem.difficulty}",
    ]
    if problem.author.display_name:
        meta.append(f"- **Author:** {problem.author.display_name}")
    if problem.tags:
        meta.append("- **Tags:** " + ", ".join(tag.name for tag in problem.tags))
    if problem.allowed_languages:
        meta.append(
            "- **Languages:** "
            + ", ".join(lang.name or lang.value for lang in problem.allowed_languages)
        )
    parts.append("  \n".join(meta) + "\n\n")

    if problem.description:
        parts.append(f"## Description\n\n{problem.description}\n\n")

    for section in problem.sections:
        parts.append(f"## {section.title}\n\n{section.content}\n\n")

    # Group numbering follows the judge's indices, so empty groups leave gaps
    for i, group in enumerate(problem.test_case_groups):
        if not group.test_cases:
            continue
        parts.append(f"## Sample Testcase Group {i}\n\n")
        for j, case in enumerate(group.test_cases):
            parts.append(f"### Testcase {i}.{j}\n\n")
            if case.input:
                parts.append(f"#### Input\n\n```\n{case.input}\n```\n\n")
            if case.output:
                parts.append(f"#### Output\n\n```\n{case.output}\n```\n\n")

    if problem.notes:
        parts.append(f"## Notes\n\n{problem.notes}\n\n")

    return "".join(parts)


def render_problem(console: Console, problem: Problem) -> None:
    """Print a problem as rendered markdown."""
    width = min(console.width, WRAP_WIDTH)
    console.print(Markdown(problem_to_markdown(problem)), width=width)


def format_error(message: str) -> str:
    """Format an error line for the console."""
    return f"[red]{escape(message)}[/red]"
