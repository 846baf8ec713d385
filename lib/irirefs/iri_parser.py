"""
Regular-expression parser for IRI references.

The raw string is split into its five components with the regular
expression of RFC 3986 Appendix B, then every component is checked
against its RFC 3987 production from :mod:`irirefs.grammar`.

.. module:: iri_parser
  :synopsis: RFC 3987 IRI reference parser
"""

import enum
import re
from collections import namedtuple

from . import grammar

__all__ = [
    'IRIError', 'IRIParseError', 'IRIType', 'IRIValidator', 'ParsedIRI',
    'parse'
]


class IRIError(ValueError):
    """
    Base class for IRI errors.
    """
    pass


class IRIParseError(IRIError):
    """
    Raised when a string does not match the requested IRI production.
    """

    def __init__(self, text, rule, position=0):
        IRIError.__init__(
            self,
            f'The string "{text}" does not represent a valid {rule}, '
            f'stopped parsing at position {position}.')
        self.text = text
        self.rule = rule
        self.position = position


class IRIType(enum.Enum):
    """
    Start rules a string can be parsed with.
    """
    # IRI-reference: full IRI or relative reference
    ANY = 'IRI reference'
    # full IRI, fragment allowed
    IRI = 'IRI'
    # absolute IRI, no fragment
    ABS = 'absolute IRI'
    # relative reference only
    REL = 'relative IRI reference'


ParsedIRI = namedtuple(
    'ParsedIRI', [
        'scheme', 'has_authority', 'user', 'host', 'port', 'rooted',
        'segments', 'query', 'fragment'
    ])

# regex from RFC 3986 Appendix B
_SPLIT = re.compile(
    r'^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$',
    re.DOTALL)

MAX_PORT = 65535


def _consumed(pattern, value):
    """Length of the longest prefix of value that pattern accepts."""
    m = pattern.match(value)
    return m.end() if m else 0


def _check(pattern, value, text, rule, offset):
    if pattern.fullmatch(value) is None:
        raise IRIParseError(text, rule, offset + _consumed(pattern, value))


def _split_authority(authority, offset, text, rule):
    """
    Splits an authority into user, host and port, validating each part.

    :param authority: the text between '//' and the path.
    :param offset: the position of the authority in text.
    :param text: the whole string, for error reports.
    :param rule: the rule name, for error reports.

    :return: a (user, host, port) tuple; user and port may be None.
    """
    user = None
    host_offset = offset
    at = authority.rfind('@')
    if at >= 0:
        user = authority[:at]
        _check(grammar.IUSERINFO_RE, user, text, rule, offset)
        authority = authority[at + 1:]
        host_offset = offset + at + 1

    port = None
    if authority.startswith('['):
        end = authority.find(']')
        if end < 0:
            raise IRIParseError(text, rule, host_offset)
        host = authority[:end + 1]
        rest = authority[end + 1:]
        if rest and not rest.startswith(':'):
            raise IRIParseError(text, rule, host_offset + end + 1)
        port = rest[1:] if rest else None
    elif ':' in authority:
        host, _, port = authority.rpartition(':')
    else:
        host = authority
    _check(grammar.IHOST_RE, host, text, rule, host_offset)

    if port is not None:
        port_offset = host_offset + len(host) + 1
        _check(grammar.PORT_RE, port, text, rule, port_offset)
        # an empty port is the same as no port at all
        if port == '':
            port = None
        else:
            port = int(port)
            if port > MAX_PORT:
                raise IRIParseError(text, rule, port_offset)
    return user, host, port


def parse(text, type=IRIType.ANY):
    """
    Parses a string into its IRI components.

    :param text: the string to parse.
    :param type: the IRIType start rule to match the whole string against.

    :return: a ParsedIRI.
    """
    rule = type.value
    m = _SPLIT.match(text)
    scheme, authority, path, query, fragment = m.groups()

    if scheme is not None:
        if type is IRIType.REL:
            raise IRIParseError(text, rule, 0)
        _check(grammar.SCHEME_RE, scheme, text, rule, 0)
    elif type in (IRIType.IRI, IRIType.ABS):
        raise IRIParseError(text, rule, 0)

    user = host = port = None
    if authority is not None:
        user, host, port = _split_authority(
            authority, m.start(2), text, rule)

    segments = path.split('/')
    rooted = len(segments) > 1 and segments[0] == ''
    offset = m.start(3)
    for index, segment in enumerate(segments):
        if index == 0 and scheme is None and ':' in segment:
            # a relative path may not look like a scheme
            raise IRIParseError(text, rule, offset + segment.index(':'))
        _check(grammar.ISEGMENT_RE, segment, text, rule, offset)
        offset += len(segment) + 1

    if query is not None:
        _check(grammar.IQUERY_RE, query, text, rule, m.start(4))
    if fragment is not None:
        if type is IRIType.ABS:
            raise IRIParseError(text, rule, m.start(5) - 1)
        _check(grammar.IFRAGMENT_RE, fragment, text, rule, m.start(5))

    return ParsedIRI(
        scheme, authority is not None, user, host, port, rooted, segments,
        query, fragment)


class IRIValidator(object):
    """
    Checks single components against their RFC 3987 productions.

    Every method returns its argument unchanged (None is always accepted)
    or raises an IRIParseError naming the offending component.
    """

    def _validate(self, pattern, value, rule):
        if value is not None:
            _check(pattern, value, value, rule, 0)
        return value

    def validate_scheme(self, scheme):
        return self._validate(grammar.SCHEME_RE, scheme, 'scheme')

    def validate_user(self, user):
        return self._validate(grammar.IUSERINFO_RE, user, 'user info')

    def validate_host(self, host):
        return self._validate(grammar.IHOST_RE, host, 'host')

    def validate_port(self, port):
        if port is not None and not 0 <= port <= MAX_PORT:
            raise IRIParseError(str(port), 'port', 0)
        return port

    def validate_path(self, segments):
        for segment in segments:
            self._validate(grammar.ISEGMENT_RE, segment, 'path segment')
        return segments

    def validate_query(self, query):
        return self._validate(grammar.IQUERY_RE, query, 'query')

    def validate_fragment(self, fragment):
        return self._validate(grammar.IFRAGMENT_RE, fragment, 'fragment')
