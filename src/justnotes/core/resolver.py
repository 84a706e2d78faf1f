"""Path resolution over the content index.

Walks the index for one route family and returns a typed node, or raises
NotFoundError. Resolution is a pure lookup: any missing or malformed level
on the requested path ends in NotFoundError. Listing pages leave out
malformed entries instead of failing as a whole.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from justnotes.core.index import (
    Branch,
    ContentIndex,
    Resource,
    ResourceTypeSemester,
    Subject,
    SubjectSemester,
    child_mapping,
    resource_list,
)
from justnotes.core.types import ROUTE_SEGMENTS, RouteFamily, build_path


class NotFoundError(LookupError):
    """Route segments do not resolve against the content index."""

    def __init__(self, family: RouteFamily, segments: Sequence[str]) -> None:
        self.family = family
        self.segments = tuple(segments)
        super().__init__(f"Content not found: {build_path(*self.segments)}")


@dataclass(frozen=True)
class ResourceTypeConfig:
    """Display configuration for a resource-type route token."""

    label: str
    key: str
    description: str


RESOURCE_TYPES: dict[str, ResourceTypeConfig] = {
    "notes": ResourceTypeConfig(
        label="Notes",
        key="notes",
        description="Module-wise PDF notes for all subjects.",
    ),
    "pyqs": ResourceTypeConfig(
        label="Question Papers",
        key="pyqs",
        description="Previous year exam papers from all recent VTU examinations.",
    ),
    "question-banks": ResourceTypeConfig(
        label="Question Bank",
        key="questionBanks",
        description="Compiled 2-mark and 10-mark questions across all subjects.",
    ),
}


@dataclass(frozen=True)
class HomeNode:
    schemes: tuple[str, ...]
    branches: tuple[Branch, ...]


@dataclass(frozen=True)
class BranchNode:
    branch: Branch


@dataclass(frozen=True)
class SemesterNode:
    branch: Branch
    sem: str
    semester: ResourceTypeSemester


@dataclass(frozen=True)
class ResourceListNode:
    branch: Branch
    sem: str
    type: str
    config: ResourceTypeConfig
    resources: tuple[Resource, ...]


@dataclass(frozen=True)
class SchemeNode:
    scheme: str
    branches: tuple[Branch, ...]


@dataclass(frozen=True)
class SchemeBranchNode:
    scheme: str
    branch: Branch


@dataclass(frozen=True)
class SchemeSemesterNode:
    scheme: str
    branch: Branch
    sem: str
    subjects: Mapping[str, Subject]


@dataclass(frozen=True)
class SubjectNode:
    scheme: str
    branch: Branch
    sem: str
    code: str
    subject: Subject


ResolvedNode = (
    HomeNode
    | BranchNode
    | SemesterNode
    | ResourceListNode
    | SchemeNode
    | SchemeBranchNode
    | SchemeSemesterNode
    | SubjectNode
)


def resolve(
    index: ContentIndex,
    family: RouteFamily | str,
    segments: Sequence[str],
) -> ResolvedNode:
    """Resolve route segments to a content node.

    Args:
        index: Content index to resolve against
        family: Route family deciding which index shape is walked
        segments: Route segment values in route order

    Returns:
        Node for the requested page

    Raises:
        NotFoundError: If any segment fails to resolve, the segment count
            doesn't match the family, or the index lacks the required shape
        ValueError: If family is not a known route family
    """
    family = RouteFamily(family)
    segments = tuple(segments)
    if len(segments) != len(ROUTE_SEGMENTS[family]):
        raise NotFoundError(family, segments)

    try:
        node = _RESOLVERS[family](index, *segments)
    except ValueError as e:
        raise NotFoundError(family, segments) from e

    if node is None:
        raise NotFoundError(family, segments)
    return node


def _branch_from(branches: object, code: str) -> Branch | None:
    data = child_mapping(branches, code)
    if data is None:
        return None
    return Branch.from_mapping(code, data)


def _parse_branches(branches: Mapping[str, object]) -> tuple[Branch, ...]:
    """Well-formed branches in index order, leaving out malformed ones."""
    parsed = []
    for code, data in branches.items():
        try:
            parsed.append(Branch.from_mapping(code, data))
        except ValueError:
            continue
    return tuple(parsed)


def _resolve_home(index: ContentIndex) -> HomeNode:
    return HomeNode(
        schemes=tuple(index.schemes),
        branches=_parse_branches(index.branches),
    )


def _resolve_branch(index: ContentIndex, branch_code: str) -> BranchNode | None:
    branch = _branch_from(index.branches, branch_code)
    if branch is None:
        return None
    return BranchNode(branch=branch)


def _resolve_semester(
    index: ContentIndex, branch_code: str, sem: str
) -> SemesterNode | None:
    branch = _branch_from(index.branches, branch_code)
    if branch is None or sem not in branch.semesters:
        return None
    semester = ResourceTypeSemester.from_mapping(branch.semesters[sem])
    return SemesterNode(branch=branch, sem=sem, semester=semester)


def _resolve_resource_type(
    index: ContentIndex, branch_code: str, sem: str, type_token: str
) -> ResourceListNode | None:
    config = RESOURCE_TYPES.get(type_token)
    if config is None:
        return None

    branch = _branch_from(index.branches, branch_code)
    if branch is None or sem not in branch.semesters:
        return None

    return ResourceListNode(
        branch=branch,
        sem=sem,
        type=type_token,
        config=config,
        resources=resource_list(branch.semesters[sem], config.key),
    )


def _resolve_scheme(index: ContentIndex, scheme: str) -> SchemeNode | None:
    branches = index.get_scheme_branches(scheme)
    if branches is None:
        return None
    return SchemeNode(
        scheme=scheme,
        branches=_parse_branches(branches),
    )


def _resolve_scheme_branch(
    index: ContentIndex, scheme: str, branch_code: str
) -> SchemeBranchNode | None:
    branch = _branch_from(index.get_scheme_branches(scheme), branch_code)
    if branch is None:
        return None
    return SchemeBranchNode(scheme=scheme, branch=branch)


def _subject_semester(
    index: ContentIndex, scheme: str, branch_code: str, sem: str
) -> tuple[Branch, SubjectSemester] | None:
    branch = _branch_from(index.get_scheme_branches(scheme), branch_code)
    if branch is None or sem not in branch.semesters:
        return None
    return branch, SubjectSemester.from_mapping(branch.semesters[sem])


def _resolve_scheme_semester(
    index: ContentIndex, scheme: str, branch_code: str, sem: str
) -> SchemeSemesterNode | None:
    found = _subject_semester(index, scheme, branch_code, sem)
    if found is None:
        return None
    branch, semester = found
    return SchemeSemesterNode(
        scheme=scheme,
        branch=branch,
        sem=sem,
        subjects=semester.get_subjects(),
    )


def _resolve_subject(
    index: ContentIndex, scheme: str, branch_code: str, sem: str, code: str
) -> SubjectNode | None:
    found = _subject_semester(index, scheme, branch_code, sem)
    if found is None:
        return None
    branch, semester = found
    subject = semester.get_subject(code)
    if subject is None:
        return None
    return SubjectNode(
        scheme=scheme,
        branch=branch,
        sem=sem,
        code=code,
        subject=subject,
    )


_RESOLVERS: dict[RouteFamily, Callable[..., ResolvedNode | None]] = {
    RouteFamily.HOME: _resolve_home,
    RouteFamily.BRANCH: _resolve_branch,
    RouteFamily.SEMESTER: _resolve_semester,
    RouteFamily.RESOURCE_TYPE: _resolve_resource_type,
    RouteFamily.SCHEME: _resolve_scheme,
    RouteFamily.SCHEME_BRANCH: _resolve_scheme_branch,
    RouteFamily.SCHEME_SEMESTER: _resolve_scheme_semester,
    RouteFamily.SUBJECT: _resolve_subject,
}
