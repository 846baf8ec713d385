"""
String level helpers around IRIRef.

- 'resolve()' turns a reference into an IRI, using a base IRI if one is given.
- 'unresolve()' turns an IRI into the shortest reference relative to a base IRI.
- 'remove_dot_segments()' removes the dot segments of a bare path.
"""

from typing import Optional

from .iri_path import IRIPath
from .iri_ref import IRIRef, NonAbsoluteBaseError, RelativeTargetError


def remove_dot_segments(path: str) -> str:
    """
    Removes dot segments ('.' and '..') from a path,
    as described in https://www.ietf.org/rfc/rfc3986.txt (section 5.2.4).

    :param path: the path to remove dot segments from, without query or
      fragment.

    :return: the path without dot segments; a rooted path stays rooted.
    """
    iri_path = IRIPath.from_string(path)
    iri_path.remove_dot_segments()
    return iri_path.recompose()


def _parse_base(base_iri: str, value: str) -> IRIRef:
    base = IRIRef(base_iri)
    if not base.is_absolute():
        raise NonAbsoluteBaseError(
            f"Found invalid base IRI '{base_iri}' for value '{value}'")
    return base


def resolve(relative_iri: str, base_iri: Optional[str] = None,
            strict: bool = True) -> str:
    """
    Resolves a given relative IRI to an absolute IRI.

    :param relative_iri: the relative IRI.
    :param base_iri: the base IRI, None or '' for no base.
    :param strict: False to read 'http:g' as 'g' against an 'http' base.

    :return: the absolute IRI.
    """
    iri = IRIRef(relative_iri)
    if not base_iri:
        # without a base only full IRIs can be resolved
        if iri.is_relative():
            raise RelativeTargetError(
                f"Found invalid relative IRI '{relative_iri}' for a missing "
                "base IRI")
        return iri.remove_dot_segments().recompose()

    base = _parse_base(base_iri, relative_iri)
    return iri.resolve(base, strict).recompose()


def unresolve(absolute_iri: str, base_iri: str = '') -> str:
    """
    Unresolves a given absolute IRI to an IRI relative to the given base IRI.

    :param absolute_iri: the absolute IRI.
    :param base_iri: the base IRI, '' to leave the IRI untouched.

    :return: the relative IRI if relative to base, otherwise the absolute IRI.
    """
    # skip IRI processing
    if not base_iri:
        return absolute_iri

    base = _parse_base(base_iri, absolute_iri)
    return IRIRef(absolute_iri).relativize(base).recompose()
