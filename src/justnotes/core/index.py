"""Content index for the curriculum hierarchy.

Holds the parsed curriculum document in a deep-frozen form and provides
typed views over its nodes. Two historical shapes coexist in one document:
a flat ``branches`` mapping and a ``schemes`` mapping that adds a scheme
level above branches. Nodes are converted to dataclasses lazily, when a
route touches them, so a malformed corner of the document only affects the
pages that live under it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

_EMPTY: Mapping[str, object] = MappingProxyType({})

RESOURCE_TYPE_KEYS = ("notes", "pyqs", "questionBanks")


def freeze(value: object) -> object:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value


def child_mapping(parent: object, key: str) -> Mapping[str, object] | None:
    """Return ``parent[key]`` if both levels are mappings, else None."""
    if not isinstance(parent, Mapping):
        return None
    child = parent.get(key)
    if not isinstance(child, Mapping):
        return None
    return child


def _optional(data: Mapping[str, object], key: str, kind: type) -> object | None:
    value = data.get(key)
    if isinstance(value, bool) and kind is not bool:
        return None
    return value if isinstance(value, kind) else None


def _require_str(data: Mapping[str, object], key: str, node: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{node}.{key} must be a string")
    return value


@dataclass(frozen=True)
class Resource:
    """One downloadable item: a note, paper, question bank or similar."""

    title: str
    url: str
    description: str | None = None
    file_type: str | None = None
    module: int | None = None
    exam_month: str | None = None
    exam_year: int | None = None
    set_number: int | None = None
    is_official: bool = False
    target_exam: str | None = None

    @classmethod
    def from_mapping(cls, data: object) -> Resource:
        """Build a resource from an index entry.

        Only ``title`` and ``url`` are mandatory. Optional fields of the wrong
        type are dropped rather than rejected since they are purely decorative.

        Raises:
            ValueError: If the entry is not a mapping or lacks title/url
        """
        if not isinstance(data, Mapping):
            raise ValueError("resource must be a mapping")

        return cls(
            title=_require_str(data, "title", "resource"),
            url=_require_str(data, "url", "resource"),
            description=_optional(data, "description", str),
            file_type=_optional(data, "fileType", str),
            module=_optional(data, "module", int),
            exam_month=_optional(data, "examMonth", str),
            exam_year=_optional(data, "examYear", int),
            set_number=_optional(data, "set", int),
            is_official=data.get("isOfficial") is True,
            target_exam=_optional(data, "targetExam", str),
        )


def parse_resources(value: object) -> tuple[Resource, ...]:
    """Parse a resource list; an absent list is an empty one."""
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ValueError("resource list must be a list")
    return tuple(Resource.from_mapping(item) for item in value)


@dataclass(frozen=True)
class Branch:
    """Engineering branch with its semester mapping.

    ``semesters`` is the index's own read-only mapping, not a copy.
    """

    code: str
    label: str
    short_label: str
    semesters: Mapping[str, object]

    @classmethod
    def from_mapping(cls, code: str, data: object) -> Branch:
        if not isinstance(data, Mapping):
            raise ValueError(f"branch {code} must be a mapping")

        label = _require_str(data, "label", "branch")

        short_label = data.get("shortLabel", code.upper())
        if not isinstance(short_label, str):
            raise ValueError("branch.shortLabel must be a string")

        semesters = data.get("semesters", _EMPTY)
        if not isinstance(semesters, Mapping):
            raise ValueError("branch.semesters must be a mapping")

        return cls(code=code, label=label, short_label=short_label, semesters=semesters)

    @property
    def semester_count(self) -> int:
        return len(self.semesters)


def _has_any(data: Mapping[str, object], keys: Sequence[str]) -> bool:
    return any(key in data for key in keys)


@dataclass(frozen=True)
class ResourceTypeSemester:
    """Semester grouped by resource type (flat index shape)."""

    notes: tuple[Resource, ...]
    pyqs: tuple[Resource, ...]
    question_banks: tuple[Resource, ...]

    @classmethod
    def from_mapping(cls, data: object) -> ResourceTypeSemester:
        """Build a resource-type semester.

        Raises:
            ValueError: If the node is not a mapping, or is a subject-shaped
                semester with no resource-type lists at all
        """
        return cls(
            notes=resource_list(data, "notes"),
            pyqs=resource_list(data, "pyqs"),
            question_banks=resource_list(data, "questionBanks"),
        )


def resource_list(semester: object, key: str) -> tuple[Resource, ...]:
    """Parse one resource-type list of a flat-shape semester.

    Only the named list is parsed, so a malformed sibling list doesn't
    affect it.

    Raises:
        ValueError: If the semester is not a mapping, is subject-shaped,
            or the list itself is malformed
    """
    if not isinstance(semester, Mapping):
        raise ValueError("semester must be a mapping")
    if "subjects" in semester and not _has_any(semester, RESOURCE_TYPE_KEYS):
        raise ValueError("semester is subject-shaped")
    return parse_resources(semester.get(key))


@dataclass(frozen=True)
class Subject:
    """A single course with its five resource families."""

    code: str
    name: str
    credits: int | float
    notes: tuple[Resource, ...]
    pyqs: tuple[Resource, ...]
    model_papers: tuple[Resource, ...]
    question_banks: tuple[Resource, ...]
    important_questions: tuple[Resource, ...]

    @classmethod
    def from_mapping(cls, key: str, data: object) -> Subject:
        if not isinstance(data, Mapping):
            raise ValueError(f"subject {key} must be a mapping")

        code = data.get("code", key.upper())
        if not isinstance(code, str):
            raise ValueError("subject.code must be a string")

        credits = data.get("credits", 0)
        if isinstance(credits, bool) or not isinstance(credits, int | float):
            raise ValueError("subject.credits must be a number")

        return cls(
            code=code,
            name=_require_str(data, "name", "subject"),
            credits=credits,
            notes=parse_resources(data.get("notes")),
            pyqs=parse_resources(data.get("pyqs")),
            model_papers=parse_resources(data.get("modelPapers")),
            question_banks=parse_resources(data.get("questionBanks")),
            important_questions=parse_resources(data.get("importantQuestions")),
        )

    @property
    def resource_count(self) -> int:
        return (
            len(self.notes)
            + len(self.pyqs)
            + len(self.model_papers)
            + len(self.question_banks)
            + len(self.important_questions)
        )


@dataclass(frozen=True)
class SubjectSemester:
    """Semester grouped by subject (scheme index shape)."""

    subjects: Mapping[str, object]

    @classmethod
    def from_mapping(cls, data: object) -> SubjectSemester:
        """Build a subject semester.

        Raises:
            ValueError: If the node is not a mapping, or is a resource-type
                semester without a subjects mapping
        """
        if not isinstance(data, Mapping):
            raise ValueError("semester must be a mapping")
        if "subjects" not in data and _has_any(data, RESOURCE_TYPE_KEYS):
            raise ValueError("semester is resource-type-shaped")

        subjects = data.get("subjects", _EMPTY)
        if not isinstance(subjects, Mapping):
            raise ValueError("semester.subjects must be a mapping")
        return cls(subjects=subjects)

    def get_subject(self, code: str) -> Subject | None:
        """Look up a subject by code, case-insensitively."""
        key = code.lower()
        if key not in self.subjects:
            return None
        return Subject.from_mapping(key, self.subjects[key])

    def get_subjects(self) -> dict[str, Subject]:
        """Well-formed subjects keyed by index key, in index order.

        Malformed subjects are left out.
        """
        subjects = {}
        for key, data in self.subjects.items():
            try:
                subjects[key] = Subject.from_mapping(key, data)
            except ValueError:
                continue
        return subjects


class ContentIndex:
    """Read-only curriculum index shared by every resolution.

    The document is frozen on construction: mappings become
    ``MappingProxyType`` and lists become tuples, so no caller can mutate it.
    """

    __slots__ = ("_document", "_source_path")

    def __init__(
        self,
        document: Mapping[str, object],
        source_path: Path | None = None,
    ) -> None:
        """Initialize index.

        Args:
            document: Parsed curriculum document
            source_path: File the document was read from, if any
        """
        if not isinstance(document, Mapping):
            raise ValueError("Content index must be a JSON object")
        self._document: Mapping[str, object] = freeze(document)  # type: ignore[assignment]
        self._source_path = source_path

    @classmethod
    def from_file(cls, path: Path) -> ContentIndex:
        """Load and freeze a curriculum JSON document.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file isn't valid JSON or not a JSON object
        """
        if not path.exists():
            raise FileNotFoundError(f"Content index not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Content index must be a JSON object")

        return cls(data, source_path=path)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    @property
    def branches(self) -> Mapping[str, object]:
        """Flat-shape branch mapping, empty if the index has none."""
        return child_mapping(self._document, "branches") or _EMPTY

    @property
    def schemes(self) -> Mapping[str, object]:
        """Scheme mapping, empty if the index has none."""
        return child_mapping(self._document, "schemes") or _EMPTY

    def get_scheme_branches(self, scheme: str) -> Mapping[str, object] | None:
        """Branch mapping under a scheme, None if missing or malformed."""
        return child_mapping(child_mapping(self.schemes, scheme), "branches")
