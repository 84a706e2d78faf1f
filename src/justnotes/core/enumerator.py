"""Route enumeration for ahead-of-time page generation.

Produces every parameter set a route family can serve. Semester numbers are
walked densely (1-8) by default, so some generated sets may later resolve to
NotFound when a branch doesn't define that semester.
"""

from collections.abc import Callable, Iterator, Mapping

from justnotes.core.index import ContentIndex, child_mapping
from justnotes.core.resolver import RESOURCE_TYPES
from justnotes.core.types import (
    ROUTE_SEGMENTS,
    SEMESTER_NUMBERS,
    ParamSet,
    RouteFamily,
    URLPath,
    build_path,
)


def enumerate_params(
    index: ContentIndex,
    family: RouteFamily | str,
    *,
    dense: bool = True,
) -> list[ParamSet]:
    """Enumerate route parameter sets for a family.

    Args:
        index: Content index to walk
        family: Route family to enumerate
        dense: Walk semesters 1-8 regardless of what a branch defines.
            When False, only semesters present in the index are emitted.

    Returns:
        Parameter sets in index order, stable for a stable index

    Raises:
        ValueError: If family is not a known route family
    """
    family = RouteFamily(family)
    return list(_ENUMERATORS[family](index, dense))


def enumerate_paths(
    index: ContentIndex,
    family: RouteFamily | str,
    *,
    dense: bool = True,
) -> list[URLPath]:
    """Enumerate site paths for a family (e.g. "/cse/3/notes")."""
    family = RouteFamily(family)
    names = ROUTE_SEGMENTS[family]
    return [
        build_path(*(params[name] for name in names))
        for params in enumerate_params(index, family, dense=dense)
    ]


def _semesters(branch_data: object, dense: bool) -> tuple[str, ...]:
    if dense:
        return SEMESTER_NUMBERS
    semesters = child_mapping(branch_data, "semesters")
    if semesters is None:
        return ()
    return tuple(semesters)


def _scheme_branches(index: ContentIndex) -> Iterator[tuple[str, str, object]]:
    for scheme in index.schemes:
        branches: Mapping[str, object] = index.get_scheme_branches(scheme) or {}
        for branch, branch_data in branches.items():
            yield scheme, branch, branch_data


def _home(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    yield {}


def _branches(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for branch in index.branches:
        yield {"branch": branch}


def _semester_params(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for branch, branch_data in index.branches.items():
        for sem in _semesters(branch_data, dense):
            yield {"branch": branch, "sem": sem}


def _resource_types(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for params in _semester_params(index, dense):
        for type_token in RESOURCE_TYPES:
            yield {**params, "type": type_token}


def _schemes(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for scheme in index.schemes:
        yield {"scheme": scheme}


def _scheme_branch_params(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for scheme, branch, _ in _scheme_branches(index):
        yield {"scheme": scheme, "branch": branch}


def _scheme_semesters(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for scheme, branch, branch_data in _scheme_branches(index):
        for sem in _semesters(branch_data, dense):
            yield {"scheme": scheme, "branch": branch, "sem": sem}


def _subjects(index: ContentIndex, dense: bool) -> Iterator[ParamSet]:
    for scheme, branch, branch_data in _scheme_branches(index):
        semesters = child_mapping(branch_data, "semesters")
        for sem in _semesters(branch_data, dense):
            subjects = child_mapping(child_mapping(semesters, sem), "subjects") or {}
            for code in subjects:
                yield {"scheme": scheme, "branch": branch, "sem": sem, "code": code}


_ENUMERATORS: dict[RouteFamily, Callable[[ContentIndex, bool], Iterator[ParamSet]]] = {
    RouteFamily.HOME: _home,
    RouteFamily.BRANCH: _branches,
    RouteFamily.SEMESTER: _semester_params,
    RouteFamily.RESOURCE_TYPE: _resource_types,
    RouteFamily.SCHEME: _schemes,
    RouteFamily.SCHEME_BRANCH: _scheme_branch_params,
    RouteFamily.SCHEME_SEMESTER: _scheme_semesters,
    RouteFamily.SUBJECT: _subjects,
}
