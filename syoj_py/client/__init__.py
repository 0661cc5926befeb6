"""Client module for SYOJ interaction."""

from .client import JudgeClient
from .models import (
    Author,
    Language,
    Problem,
    Section,
    SubmissionRequest,
    SubmissionResponse,
    Tag,
    TestCase,
    TestCaseGroup,
)

__all__ = [
    "JudgeClient",
    "Author",
    "Language",
    "Problem",
    "Section",
    "SubmissionRequest",
    "SubmissionResponse",
    "Tag",
    "TestCase",
    "TestCaseGroup",
]
