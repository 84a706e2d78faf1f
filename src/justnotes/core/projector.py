"""Display facts for resolved content nodes.

Projects resolver nodes into plain data a page renderer needs: labels,
counts, per-resource tags, breadcrumbs and page metadata. Projection is a
view layer over the index and never touches it beyond reading the node.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar

from justnotes.core.index import Branch, Resource, ResourceTypeSemester
from justnotes.core.resolver import (
    RESOURCE_TYPES,
    BranchNode,
    HomeNode,
    ResolvedNode,
    ResourceListNode,
    SchemeBranchNode,
    SchemeNode,
    SchemeSemesterNode,
    SemesterNode,
    SubjectNode,
)
from justnotes.core.types import SEMESTER_NUMBERS, URLPath, build_path

SITE_NAME = "JustNotes"


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    title: str
    path: URLPath

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "path": self.path}


@dataclass(frozen=True)
class PageMeta:
    """Title and description strings for a page's head."""

    title: str
    description: str
    canonical: URLPath
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceView:
    """A single resource row."""

    number: str
    title: str
    url: str
    description: str | None
    tags: tuple[str, ...]


@dataclass(frozen=True)
class ResourceSection:
    """One resource family on a subject page."""

    id: str
    heading: str
    nav_label: str
    count: int
    items: tuple[ResourceView, ...]


@dataclass(frozen=True)
class ResourceTypeCard:
    """Link card for one resource type on a semester page."""

    id: str
    label: str
    description: str
    count: int
    path: URLPath


@dataclass(frozen=True)
class SemesterLink:
    number: str
    label: str
    path: URLPath
    available: bool


@dataclass(frozen=True)
class BranchLink:
    code: str
    label: str
    short_label: str
    path: URLPath
    semester_count: int


@dataclass(frozen=True)
class SchemeLink:
    id: str
    label: str
    path: URLPath


@dataclass(frozen=True)
class SubjectLink:
    code: str
    name: str
    credits: int | float
    path: URLPath
    resource_count: int


class _Facts:
    kind: ClassVar[str]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class HomeFacts(_Facts):
    kind: ClassVar[str] = "home"

    schemes: tuple[SchemeLink, ...]
    branches: tuple[BranchLink, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class BranchFacts(_Facts):
    kind: ClassVar[str] = "branch"

    code: str
    label: str
    short_label: str
    semesters: tuple[SemesterLink, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class SemesterFacts(_Facts):
    kind: ClassVar[str] = "semester"

    label: str
    short_label: str
    sem: str
    cards: tuple[ResourceTypeCard, ...]
    counts: dict[str, int]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class ResourceListFacts(_Facts):
    kind: ClassVar[str] = "resource-type"

    type: str
    label: str
    description: str
    branch_label: str
    short_label: str
    sem: str
    count: int
    items: tuple[ResourceView, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class SchemeFacts(_Facts):
    kind: ClassVar[str] = "scheme"

    scheme: str
    label: str
    branches: tuple[BranchLink, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class SchemeBranchFacts(_Facts):
    kind: ClassVar[str] = "scheme-branch"

    scheme: str
    code: str
    label: str
    short_label: str
    semesters: tuple[SemesterLink, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class SchemeSemesterFacts(_Facts):
    kind: ClassVar[str] = "scheme-semester"

    scheme: str
    label: str
    short_label: str
    sem: str
    subjects: tuple[SubjectLink, ...]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


@dataclass(frozen=True)
class SubjectFacts(_Facts):
    kind: ClassVar[str] = "subject"

    code: str
    name: str
    credits: int | float
    scheme: str
    scheme_label: str
    branch_label: str
    sem: str
    sections: tuple[ResourceSection, ...]
    counts: dict[str, int]
    breadcrumbs: tuple[BreadcrumbItem, ...]
    meta: PageMeta


DisplayFacts = (
    HomeFacts
    | BranchFacts
    | SemesterFacts
    | ResourceListFacts
    | SchemeFacts
    | SchemeBranchFacts
    | SchemeSemesterFacts
    | SubjectFacts
)

# (attribute, section id, heading, jump-nav label), in page order
SUBJECT_SECTIONS: tuple[tuple[str, str, str, str], ...] = (
    ("notes", "notes", "Module-wise Notes", "Notes"),
    ("pyqs", "pyqs", "Previous Year Question Papers (PYQs)", "PYQs"),
    ("model_papers", "model-papers", "Official Model Question Papers", "Model Papers"),
    ("question_banks", "question-banks", "Question Banks", "Question Banks"),
    (
        "important_questions",
        "important-questions",
        "Important Questions — Exam Prep",
        "Important Qs",
    ),
)

_SEMESTER_CARD_DESCRIPTIONS = {
    "notes": "Module-wise PDF notes for all subjects this semester.",
    "pyqs": "Previous year exam papers (PYQs) from all recent examinations.",
    "question-banks": "Compiled 2-mark and 10-mark questions across all subjects.",
}


def resource_tags(resource: Resource) -> list[str]:
    """Build the display tags for a resource.

    Order is fixed: module, exam session, set, target exam, official marker,
    file type. Absent fields are omitted.
    """
    tags: list[str] = []
    if resource.module:
        tags.append(f"Module {resource.module}")
    if resource.exam_month and resource.exam_year:
        tags.append(f"{resource.exam_month} {resource.exam_year}")
    if resource.set_number:
        tags.append(f"Set {resource.set_number}")
    if resource.target_exam:
        tags.append(resource.target_exam)
    if resource.is_official:
        tags.append("Official VTU")
    if resource.file_type:
        tags.append(resource.file_type.upper())
    return tags


def resource_views(resources: tuple[Resource, ...]) -> tuple[ResourceView, ...]:
    """Number resources from 01 and attach their tags, keeping index order."""
    return tuple(
        ResourceView(
            number=f"{i:02d}",
            title=resource.title,
            url=resource.url,
            description=resource.description,
            tags=tuple(resource_tags(resource)),
        )
        for i, resource in enumerate(resources, start=1)
    )


def scheme_label(scheme: str) -> str:
    return f"{scheme} Scheme"


def _home_crumb() -> BreadcrumbItem:
    return BreadcrumbItem(title="Home", path=build_path())


def _flat_crumbs(branch: Branch, *rest: tuple[str, str]) -> tuple[BreadcrumbItem, ...]:
    crumbs = [_home_crumb(), BreadcrumbItem(branch.short_label, build_path(branch.code))]
    segments = [branch.code]
    for title, segment in rest:
        segments.append(segment)
        crumbs.append(BreadcrumbItem(title, build_path(*segments)))
    return tuple(crumbs)


def _scheme_crumbs(
    scheme: str, branch: Branch | None = None, *rest: tuple[str, str]
) -> tuple[BreadcrumbItem, ...]:
    crumbs = [_home_crumb(), BreadcrumbItem(scheme_label(scheme), build_path(scheme))]
    if branch is None:
        return tuple(crumbs)
    segments = [scheme, branch.code]
    crumbs.append(BreadcrumbItem(branch.short_label, build_path(*segments)))
    for title, segment in rest:
        segments.append(segment)
        crumbs.append(BreadcrumbItem(title, build_path(*segments)))
    return tuple(crumbs)


def _semester_links(branch: Branch, *prefix: str) -> tuple[SemesterLink, ...]:
    return tuple(
        SemesterLink(
            number=sem,
            label=f"Semester {sem}",
            path=build_path(*prefix, branch.code, sem),
            available=sem in branch.semesters,
        )
        for sem in SEMESTER_NUMBERS
    )


def _branch_links(branches: tuple[Branch, ...], *prefix: str) -> tuple[BranchLink, ...]:
    return tuple(
        BranchLink(
            code=branch.code,
            label=branch.label,
            short_label=branch.short_label,
            path=build_path(*prefix, branch.code),
            semester_count=branch.semester_count,
        )
        for branch in branches
    )


def _semester_counts(semester: ResourceTypeSemester) -> dict[str, int]:
    return {
        "notes": len(semester.notes),
        "pyqs": len(semester.pyqs),
        "question-banks": len(semester.question_banks),
    }


def project_home(node: HomeNode) -> HomeFacts:
    return HomeFacts(
        schemes=tuple(
            SchemeLink(id=scheme, label=scheme_label(scheme), path=build_path(scheme))
            for scheme in node.schemes
        ),
        branches=_branch_links(node.branches),
        breadcrumbs=(_home_crumb(),),
        meta=PageMeta(
            title=f"{SITE_NAME} – Free VTU Notes, PYQs & Study Materials",
            description=(
                f"{SITE_NAME} is a free, open-source repository of VTU study "
                "materials. Access module-wise notes, previous year question "
                "papers, model papers, and important questions."
            ),
            canonical=build_path(),
        ),
    )


def project_branch(node: BranchNode) -> BranchFacts:
    branch = node.branch
    return BranchFacts(
        code=branch.code,
        label=branch.label,
        short_label=branch.short_label,
        semesters=_semester_links(branch),
        breadcrumbs=_flat_crumbs(branch),
        meta=PageMeta(
            title=f"{branch.short_label} VTU Notes, PYQs & Question Banks — All Semesters",
            description=(
                f"Download free VTU {branch.label} notes, previous year question "
                "papers (PYQs), and question banks for all 8 semesters."
            ),
            canonical=build_path(branch.code),
        ),
    )


def project_semester(node: SemesterNode) -> SemesterFacts:
    branch = node.branch
    counts = _semester_counts(node.semester)
    cards = tuple(
        ResourceTypeCard(
            id=token,
            label=config.label,
            description=_SEMESTER_CARD_DESCRIPTIONS[token],
            count=counts[token],
            path=build_path(branch.code, node.sem, token),
        )
        for token, config in RESOURCE_TYPES.items()
    )
    return SemesterFacts(
        label=branch.label,
        short_label=branch.short_label,
        sem=node.sem,
        cards=cards,
        counts=counts,
        breadcrumbs=_flat_crumbs(branch, (f"Semester {node.sem}", node.sem)),
        meta=PageMeta(
            title=f"{branch.short_label} Semester {node.sem} VTU Notes, PYQs & Question Banks",
            description=(
                f"Download free VTU {branch.label} Semester {node.sem} notes, "
                "previous year question papers (PYQs), and question banks."
            ),
            canonical=build_path(branch.code, node.sem),
        ),
    )


def project_resource_list(node: ResourceListNode) -> ResourceListFacts:
    branch = node.branch
    config = node.config
    return ResourceListFacts(
        type=node.type,
        label=config.label,
        description=config.description,
        branch_label=branch.label,
        short_label=branch.short_label,
        sem=node.sem,
        count=len(node.resources),
        items=resource_views(node.resources),
        breadcrumbs=_flat_crumbs(
            branch,
            (f"Semester {node.sem}", node.sem),
            (config.label, node.type),
        ),
        meta=PageMeta(
            title=f"VTU {branch.short_label} Sem {node.sem} {config.label} — Free PDF Download",
            description=f"{config.description} VTU {branch.label}, Semester {node.sem}.",
            canonical=build_path(branch.code, node.sem, node.type),
        ),
    )


def project_scheme(node: SchemeNode) -> SchemeFacts:
    label = scheme_label(node.scheme)
    short_labels = ", ".join(branch.short_label for branch in node.branches)
    return SchemeFacts(
        scheme=node.scheme,
        label=label,
        branches=_branch_links(node.branches, node.scheme),
        breadcrumbs=_scheme_crumbs(node.scheme),
        meta=PageMeta(
            title=f"VTU {label} Notes, PYQs & Study Materials – All Branches",
            description=(
                f"Browse VTU {node.scheme} scheme study materials by branch. Access "
                "free notes, PYQs, model papers and important questions"
                + (f" for {short_labels}." if short_labels else ".")
            ),
            canonical=build_path(node.scheme),
        ),
    )


def project_scheme_branch(node: SchemeBranchNode) -> SchemeBranchFacts:
    branch = node.branch
    return SchemeBranchFacts(
        scheme=node.scheme,
        code=branch.code,
        label=branch.label,
        short_label=branch.short_label,
        semesters=_semester_links(branch, node.scheme),
        breadcrumbs=_scheme_crumbs(node.scheme, branch),
        meta=PageMeta(
            title=f"{branch.short_label} VTU {scheme_label(node.scheme)} Notes & PYQs",
            description=(
                f"Semester-wise VTU {branch.label} subjects for the {node.scheme} "
                "scheme with notes, PYQs and model papers."
            ),
            canonical=build_path(node.scheme, branch.code),
        ),
    )


def project_scheme_semester(node: SchemeSemesterNode) -> SchemeSemesterFacts:
    branch = node.branch
    subjects = tuple(
        SubjectLink(
            code=subject.code,
            name=subject.name,
            credits=subject.credits,
            path=build_path(node.scheme, branch.code, node.sem, key),
            resource_count=subject.resource_count,
        )
        for key, subject in node.subjects.items()
    )
    return SchemeSemesterFacts(
        scheme=node.scheme,
        label=branch.label,
        short_label=branch.short_label,
        sem=node.sem,
        subjects=subjects,
        breadcrumbs=_scheme_crumbs(node.scheme, branch, (f"Sem {node.sem}", node.sem)),
        meta=PageMeta(
            title=f"{branch.short_label} Sem {node.sem} VTU {scheme_label(node.scheme)} Subjects",
            description=(
                f"VTU {branch.label} Semester {node.sem} subjects for the "
                f"{node.scheme} scheme."
            ),
            canonical=build_path(node.scheme, branch.code, node.sem),
        ),
    )


def project_subject(node: SubjectNode) -> SubjectFacts:
    subject = node.subject
    sections = tuple(
        ResourceSection(
            id=section_id,
            heading=heading,
            nav_label=nav_label,
            count=len(getattr(subject, attr)),
            items=resource_views(getattr(subject, attr)),
        )
        for attr, section_id, heading, nav_label in SUBJECT_SECTIONS
    )
    title = (
        f"{subject.code} {subject.name} VTU Notes, PYQs & Model Papers | "
        f"{scheme_label(node.scheme)}"
    )
    return SubjectFacts(
        code=subject.code,
        name=subject.name,
        credits=subject.credits,
        scheme=node.scheme,
        scheme_label=scheme_label(node.scheme),
        branch_label=node.branch.label,
        sem=node.sem,
        sections=sections,
        counts={section.id: section.count for section in sections},
        breadcrumbs=_scheme_crumbs(
            node.scheme,
            node.branch,
            (f"Sem {node.sem}", node.sem),
            (subject.code, node.code),
        ),
        meta=PageMeta(
            title=title,
            description=(
                f"Download comprehensive VTU study materials for {subject.name} "
                f"({subject.code}). Access free PDF notes, previous year question "
                "papers (PYQs), official model papers, and important questions. "
                f"Fully updated for the VTU {node.scheme} scheme."
            ),
            canonical=build_path(
                node.scheme, node.branch.code, node.sem, node.code.lower()
            ),
            keywords=(
                f"{subject.code} notes",
                f"{subject.code} VTU notes",
                f"{subject.name} VTU",
                f"{subject.code} previous year question papers",
                f"{subject.code} PYQ",
                f"{subject.code} model question paper",
                f"VTU {node.scheme} scheme {node.sem}sem notes",
                f"{subject.name} notes PDF",
                f"VTU {subject.code} important questions",
            ),
        ),
    )


def project(node: ResolvedNode) -> DisplayFacts:
    """Derive display facts for a resolved node.

    Args:
        node: Node returned by the resolver

    Returns:
        Facts dataclass matching the node kind

    Raises:
        TypeError: If node is not a resolver node
    """
    if isinstance(node, HomeNode):
        return project_home(node)
    if isinstance(node, BranchNode):
        return project_branch(node)
    if isinstance(node, SemesterNode):
        return project_semester(node)
    if isinstance(node, ResourceListNode):
        return project_resource_list(node)
    if isinstance(node, SchemeNode):
        return project_scheme(node)
    if isinstance(node, SchemeBranchNode):
        return project_scheme_branch(node)
    if isinstance(node, SchemeSemesterNode):
        return project_scheme_semester(node)
    if isinstance(node, SubjectNode):
        return project_subject(node)
    raise TypeError(f"Cannot project {type(node).__name__}")
