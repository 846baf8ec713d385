"""
IRI references (RFC 3987) with resolution, relativization and
normalization.

.. module:: iri_ref
  :synopsis: Immutable IRI reference values
"""

import enum
import logging

from .iri_authority import IRIAuthority
from .iri_parser import (
    IRIError, IRIParseError, IRIType, IRIValidator, parse)
from .iri_path import IRIPath

__all__ = [
    'IRIRef', 'IRIType', 'Part', 'IRIError', 'IRIParseError',
    'NonAbsoluteBaseError', 'RelativeTargetError'
]

log = logging.getLogger(__name__)


class NonAbsoluteBaseError(IRIError):
    """
    Raised when a base IRI has no scheme or has a fragment.
    """
    pass


class RelativeTargetError(IRIError):
    """
    Raised when an operation needs an IRI with a scheme and gets a
    relative reference.
    """
    pass


class Part(enum.Enum):
    """
    The components of an IRI, as seen by normalizers.
    """
    SCHEME = 'scheme'
    AUTHORITY = 'authority'
    USERINFO = 'userinfo'
    HOST = 'host'
    PORT = 'port'
    PATH = 'path'
    SEGMENT = 'segment'
    QUERY = 'query'
    FRAGMENT = 'fragment'


_validator = IRIValidator()


class IRIRef(object):
    """
    An IRI or a relative IRI reference.

    IRIRef values never change once built: resolve(), relativize(),
    normalize() and remove_dot_segments() all return new values. Two
    references are equal when they recompose to the same string, and a
    reference is also equal to that string.
    """

    __slots__ = ('_scheme', '_authority', '_path', '_query', '_fragment')

    def __init__(self, text, type=IRIType.ANY, preparator=None):
        """
        Parses a new IRI reference.

        :param text: the string to parse.
        :param type: the IRIType the whole string must match.
        :param preparator: an optional StringPreparator applied to text
          before parsing.
        """
        if preparator is not None:
            text = preparator.transform(text)
        parsed = parse(text, type)
        self._scheme = parsed.scheme
        if parsed.has_authority:
            self._authority = IRIAuthority(
                parsed.user, parsed.host, parsed.port)
        else:
            self._authority = None
        self._path = IRIPath(parsed.segments)
        self._query = parsed.query
        self._fragment = parsed.fragment

    @classmethod
    def from_components(
            cls, scheme=None, authority=None, path=None, query=None,
            fragment=None, validate=False):
        """
        Builds a reference from its components without parsing.

        :param scheme: the scheme or None.
        :param authority: an IRIAuthority or None.
        :param path: an IRIPath, a path string or None for the empty path.
        :param query: the query or None.
        :param fragment: the fragment or None.
        :param validate: True to check every component against its RFC 3987
          production first.

        :return: the new IRIRef.
        """
        if isinstance(path, str):
            path = IRIPath.from_string(path)
        elif path is None:
            path = IRIPath()
        else:
            path = path.copy()
        if validate:
            _validator.validate_scheme(scheme)
            if authority is not None:
                _validator.validate_user(authority.user)
                _validator.validate_host(authority.host)
                _validator.validate_port(authority.port)
            _validator.validate_path(path.segments)
            _validator.validate_query(query)
            _validator.validate_fragment(fragment)
        return cls._make(scheme, authority, path, query, fragment)

    @classmethod
    def _make(cls, scheme, authority, path, query, fragment):
        # path must not be shared with another IRIRef
        rval = cls.__new__(cls)
        rval._scheme = scheme
        rval._authority = authority
        rval._path = path
        rval._query = query
        rval._fragment = fragment
        return rval

    # accessors

    @property
    def scheme(self):
        return self._scheme

    @property
    def authority(self):
        return self._authority

    @property
    def user(self):
        return None if self._authority is None else self._authority.user

    @property
    def host(self):
        return None if self._authority is None else self._authority.host

    @property
    def port(self):
        return None if self._authority is None else self._authority.port

    @property
    def path(self):
        return self._path.recompose()

    @property
    def segments(self):
        return tuple(self._path.segments)

    @property
    def query(self):
        return self._query

    @property
    def fragment(self):
        return self._fragment

    def has_scheme(self):
        return self._scheme is not None

    def has_authority(self):
        return self._authority is not None

    def has_user(self):
        return self.user is not None

    def has_host(self):
        return self._authority is not None

    def has_port(self):
        return self.port is not None

    def has_empty_path(self):
        return self._path.is_empty_path()

    def has_rooted_path(self):
        return self._path.is_rooted()

    def has_query(self):
        return self._query is not None

    def has_fragment(self):
        return self._fragment is not None

    def is_iri(self):
        """Return True if this reference has a scheme."""
        return self._scheme is not None

    def is_absolute(self):
        """Return True if this reference has a scheme and no fragment."""
        return self._scheme is not None and self._fragment is None

    def is_relative(self):
        return self._scheme is None

    # recomposition

    def recompose(self):
        rval = ''
        if self._scheme is not None:
            rval += self._scheme + ':'
        if self._authority is not None:
            rval += self._authority.recompose()
        rval += self._path.recompose()
        if self._query is not None:
            rval += '?' + self._query
        if self._fragment is not None:
            rval += '#' + self._fragment
        return rval

    def recomposition_length(self):
        length = self._path.recomposition_length()
        if self._scheme is not None:
            length += len(self._scheme) + 1
        if self._authority is not None:
            length += self._authority.recomposition_length()
        if self._query is not None:
            length += len(self._query) + 1
        if self._fragment is not None:
            length += len(self._fragment) + 1
        return length

    def __str__(self):
        return self.recompose()

    def __repr__(self):
        return f'IRIRef({self.recompose()!r})'

    def __eq__(self, other):
        if isinstance(other, IRIRef):
            return self.recompose() == other.recompose()
        if isinstance(other, str):
            return self.recompose() == other
        return NotImplemented

    def __hash__(self):
        return hash(self.recompose())

    # algorithms

    def resolve(self, base, strict=True):
        """
        Resolves this reference against a base IRI, as in RFC 3986 5.2.2.

        :param base: the absolute IRIRef to resolve against.
        :param strict: False to ignore a scheme equal to the base scheme,
          the way some old parsers do ("http:g" is then read as "g").

        :return: a new IRIRef with a scheme.
        """
        if not base.is_absolute():
            raise NonAbsoluteBaseError(
                'IRI resolution requires an absolute base (with a scheme '
                f'and no fragment). Provided: {base}')

        scheme = self._scheme
        authority = self._authority
        path = self._path.copy()
        query = self._query
        if not strict and scheme == base._scheme:
            scheme = None
        if scheme is None:
            scheme = base._scheme
            if authority is None:
                authority = base._authority
                if path.is_empty_path():
                    path = base._path.copy()
                    if query is None:
                        query = base._query
                else:
                    path.resolve_non_empty(
                        base._path, base._authority is not None)
        path.remove_dot_segments()
        return self._make(scheme, authority, path, query, self._fragment)

    def relativize(self, base):
        """
        Computes a short relative reference r such that r.resolve(base)
        is this IRI with its dot segments removed.

        When no relative form exists (different schemes for instance) the
        result is this IRI itself.

        :param base: the absolute IRIRef to relativize against.

        :return: a new IRIRef.
        """
        if not base.is_absolute():
            raise NonAbsoluteBaseError(
                'IRI relativization requires an absolute base (with a '
                f'scheme and no fragment). Provided: {base}')
        if self.is_relative():
            raise RelativeTargetError(
                'IRI relativization requires an IRI (with a scheme). '
                f'Provided: {self}')

        if (self._scheme != base._scheme or
                (self._authority is None and base._authority is not None)):
            return self._copy()

        if (self._authority is not None and
                self._authority != base._authority):
            return self._network_path()

        # nothing but the scheme can keep a relative path from being
        # merged with a rooted base path
        if (self._authority is None and not self._path.is_rooted() and
                base._path.is_rooted()):
            return self._copy()

        must_find_non_empty = self._query is None and base._query is not None
        if self._authority is not None:
            max_cost = self._authority.recomposition_length()
        else:
            max_cost = len(self._scheme) + 1

        path = self._path.relativize(
            base._path, must_find_non_empty, max_cost)
        if path is None:
            log.debug('no relative path for %s against %s', self, base)
            if self._authority is not None:
                return self._network_path()
            return self._copy()

        if (path.is_empty_path() and self._query is not None and
                self._query == base._query):
            return self._make(None, None, path, None, self._fragment)
        return self._make(None, None, path, self._query, self._fragment)

    def normalize(self, normalizer):
        """
        Returns a normalized copy of this reference.

        The normalizer decides what is changed; components are handed to it
        in order: scheme, authority, path, query and fragment.

        :param normalizer: the IRINormalizer to use.

        :return: a new IRIRef.
        """
        scheme = normalizer.normalize_scheme(self._scheme)
        authority = self._authority
        if authority is not None:
            authority = authority.normalize(normalizer, scheme)
        path = self._path.copy()
        path.normalize(normalizer, scheme, authority is not None)
        query = normalizer.normalize_query(self._query, scheme)
        fragment = normalizer.normalize_fragment(self._fragment, scheme)
        return self._make(scheme, authority, path, query, fragment)

    def remove_dot_segments(self):
        """
        Returns a copy of this IRI with the dot segments of its path
        removed, without any base.
        """
        if self.is_relative():
            raise RelativeTargetError(
                'Cannot remove dot segments of a relative IRI without a '
                f'base. Provided: {self}')
        path = self._path.copy()
        path.remove_dot_segments()
        return self._make(
            self._scheme, self._authority, path, self._query, self._fragment)

    def _copy(self):
        return self._make(
            self._scheme, self._authority, self._path.copy(), self._query,
            self._fragment)

    def _network_path(self):
        return self._make(
            None, self._authority, self._path.copy(), self._query,
            self._fragment)
