"""Guess the judge language tag from a source file name."""

from pathlib import Path
from typing import Optional


DEFAULT_LANGUAGE = "cpp20"

EXTENSION_LANGUAGES = {
    ".cpp": "cpp20",
    ".cc": "cpp20",
    ".cxx": "cpp20",
    ".c": "c",
    ".py": "python",
    ".js": "javascript",
    ".go": "go",
    ".java": "java",
    ".rs": "rust",
    ".cs": "csharp",
}


def infer_language(path: Path) -> Optional[str]:
    """Return the language for the file extension, or None if unknown."""
    return EXTENSION_LANGUAGES.get(Path(path).suffix)
