"""Core type definitions."""

from enum import StrEnum
from typing import NewType

# Site path of a page (e.g., "/cse/3/notes", "/2022/cse/3/bcs301")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# Route segment name -> value, e.g. {"branch": "cse", "sem": "3"}
ParamSet = dict[str, str]


class RouteFamily(StrEnum):
    """Route families understood by the resolver and enumerator."""

    HOME = "home"
    BRANCH = "branch"
    SEMESTER = "semester"
    RESOURCE_TYPE = "resource-type"
    SCHEME = "scheme"
    SCHEME_BRANCH = "scheme-branch"
    SCHEME_SEMESTER = "scheme-semester"
    SUBJECT = "subject"


# Segment names in route order for each family
ROUTE_SEGMENTS: dict[RouteFamily, tuple[str, ...]] = {
    RouteFamily.HOME: (),
    RouteFamily.BRANCH: ("branch",),
    RouteFamily.SEMESTER: ("branch", "sem"),
    RouteFamily.RESOURCE_TYPE: ("branch", "sem", "type"),
    RouteFamily.SCHEME: ("scheme",),
    RouteFamily.SCHEME_BRANCH: ("scheme", "branch"),
    RouteFamily.SCHEME_SEMESTER: ("scheme", "branch", "sem"),
    RouteFamily.SUBJECT: ("scheme", "branch", "sem", "code"),
}

# Semesters are numbered densely by convention
SEMESTER_NUMBERS: tuple[str, ...] = tuple(str(n) for n in range(1, 9))


def build_path(*segments: str) -> URLPath:
    """Join route segments into a site path with a leading slash."""
    return URLPath("/" + "/".join(segments)) if segments else URLPath("/")
