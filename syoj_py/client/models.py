"""Data models for SYOJ entities."""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Type, TypeVar

from ..exceptions import ParseError


T = TypeVar("T")


def _field(data: dict, key: str, kind: Type[T], default: T) -> T:
    """Read `key`, using `default` when it is absent or null."""
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass; a JSON true is not a time limit
    if isinstance(value, bool) and kind is not bool:
        raise ParseError(f"field {key!r} must be {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise ParseError(
            f"field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ParseError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _items(data: dict, key: str, parse: Callable[[dict], T]) -> List[T]:
    # a null item decodes to the zero value, like a null field
    return [
        parse({} if item is None else _object(item, f"item of {key!r}"))
        for item in _field(data, key, list, [])
    ]


@dataclass(frozen=True)
class Tag:
    """A named problem tag."""

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Tag":
        return cls(id=_field(data, "id", int, 0), name=_field(data, "name", str, ""))


@dataclass(frozen=True)
class Language:
    """A language the judge accepts for a problem."""

    id: int = 0
    name: str = ""
    value: str = ""
    highlight: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Language":
        return cls(
            id=_field(data, "id", int, 0),
            name=_field(data, "name", str, ""),
            value=_field(data, "value", str, ""),
            highlight=_field(data, "highlight", str, ""),
        )


@dataclass(frozen=True)
class Author:
    """Problem author."""

    display_name: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Author":
        return cls(display_name=_field(data, "displayName", str, ""))


@dataclass(frozen=True)
class Section:
    """A labelled part of the statement (Input, Output, Constraints, ...)."""

    id: int = 0
    title: str = ""
    content: str = ""
    order: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Section":
        return cls(
            id=_field(data, "id", int, 0),
            title=_field(data, "title", str, ""),
            content=_field(data, "content", str, ""),
            order=_field(data, "order", int, 0),
        )


@dataclass(frozen=True)
class TestCase:
    """A sample input/output pair."""

    __test__ = False

    input: str = ""
    output: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "TestCase":
        return cls(input=_field(data, "input", str, ""), output=_field(data, "output", str, ""))


@dataclass(frozen=True)
class TestCaseGroup:
    """An ordered group of sample test cases."""

    __test__ = False

    test_cases: List[TestCase] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "TestCaseGroup":
        return cls(test_cases=_items(data, "testCases", TestCase.from_dict))


@dataclass(frozen=True)
class Problem:
    """Represents a problem statement with its limits and samples."""

    id: str = ""
    title: str = ""
    description: str = ""
    difficulty: str = ""
    time_limit: int = 0
    memory_limit: int = 0
    notes: str = ""
    tags: List[Tag] = field(default_factory=list)
    allowed_languages: List[Language] = field(default_factory=list)
    author: Author = field(default_factory=Author)
    sections: List[Section] = field(default_factory=list)
    test_case_groups: List[TestCaseGroup] = field(default_factory=list)
    allow_submit: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Problem":
        """
        Build a problem from the judge's JSON.
        Absent or null fields fall back to empty values; fields of the wrong
        type raise ParseError.
        """
        data = _object(data, "problem")
        author: Optional[dict] = data.get("author")
        return cls(
            id=_field(data, "id", str, ""),
            title=_field(data, "title", str, ""),
            description=_field(data, "description", str, ""),
            difficulty=_field(data, "difficulty", str, ""),
            time_limit=_field(data, "timeLimit", int, 0),
            memory_limit=_field(data, "memoryLimit", int, 0),
            notes=_field(data, "notes", str, ""),
            tags=_items(data, "tags", Tag.from_dict),
            allowed_languages=_items(data, "allowedLanguages", Language.from_dict),
            author=Author() if author is None else Author.from_dict(_object(author, "author")),
            sections=_items(data, "ProblemSection", Section.from_dict),
            test_case_groups=_items(data, "testCases", TestCaseGroup.from_dict),
            allow_submit=_field(data, "allowSubmit", bool, False),
        )


@dataclass(frozen=True)
class SubmissionRequest:
    """Code sent to the judge for a problem."""

    problem_id: str
    code: str
    language: str

    def to_dict(self) -> dict:
        return {"code": self.code, "language": self.language, "problemId": self.problem_id}


@dataclass(frozen=True)
class SubmissionResponse:
    """The judge's reply to a submission."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "SubmissionResponse":
        data = _object(data, "submission response")
        return cls(message=_field(data, "message", str, ""))
