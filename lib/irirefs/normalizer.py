"""
Normalization of IRI components (RFC 3986 6.2 and RFC 3987 5.3).

A normalizer is built from a set of :class:`Normalization` flags, each
one turning on an independent transformation:

- CASE: lower-case the scheme and ASCII hosts, upper-case the hex digits
  of percent-encoded octets.
- CHARACTER: Unicode NFC.
- PCT: decode percent-encoded octets that do not need encoding.
- PATH: remove dot segments from the path of a full IRI.
- SCHEME: drop default ports, and write an empty path under an authority
  as '/'.
- SYNTAX: CASE, CHARACTER and PCT together.

.. module:: normalizer
  :synopsis: Composable IRI normalizers
"""

import enum
import functools
import operator
import unicodedata

from . import grammar
from .iri_ref import Part

__all__ = [
    'Normalization', 'IRINormalizer', 'StandardComposableNormalizer',
    'ExtendedComposableNormalizer', 'DEFAULT_PORTS',
    'transform_pct_and_other_chars'
]


class Normalization(enum.Flag):
    """
    The normalizations a composable normalizer can apply.
    """
    STRING = 0
    CASE = 1
    CHARACTER = 2
    PCT = 4
    PATH = 8
    SCHEME = 16
    # not used by the built-in normalizers, free for protocol specific
    # rules of subclasses
    PROTOCOL = 32
    SYNTAX = CASE | CHARACTER | PCT


DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
    'ws': 80,
    'wss': 443,
    # file transfer and remote shells
    'ftp': 21,
    'sftp': 22,
    'ssh': 22,
    'telnet': 23,
    # mail
    'smtp': 25,
    'submission': 587,
    'imap': 143,
    'imaps': 993,
    'pop3': 110,
    'pop3s': 995,
    # directory, news
    'ldap': 389,
    'ldaps': 636,
    'nntp': 119,
    'news': 119,
    'gopher': 70,
}


def transform_pct_and_other_chars(text, handler, transformer):
    """
    Rewrites a component run by run.

    Every maximal run of consecutive %HH triplets is replaced by
    handler(run); the text between runs is replaced by transformer(text).

    :param text: the component to rewrite.
    :param handler: a function from a percent-encoded run to a string.
    :param transformer: a function applied to the other characters.

    :return: the rewritten component.
    """
    if not text:
        return text
    rval = []
    last = 0
    for match in grammar.PCT_RUN.finditer(text):
        rval.append(transformer(text[last:match.start()]))
        rval.append(handler(match.group()))
        last = match.end()
    rval.append(transformer(text[last:]))
    return ''.join(rval)


def _identity(text):
    return text


def _lowercase(text):
    return text.lower()


def _uppercase_pct(run):
    return run.upper()


def _triplets(run):
    return [run[i:i + 3] for i in range(0, len(run), 3)]


def _decode_unreserved(run):
    """Decodes the octets of a run that are unreserved ASCII characters."""
    rval = []
    for triplet in _triplets(run):
        char = chr(int(triplet[1:], 16))
        if grammar.UNRESERVED_CHAR.fullmatch(char):
            rval.append(char)
        else:
            rval.append(triplet)
    return ''.join(rval)


# per UTF-8 sequence length - 1: mask of the lead octet, and smallest code
# point that needs that many octets
_LEAD_MASKS = (0x7F, 0x1F, 0x0F, 0x07)
_MIN_CODE_POINTS = (0x00, 0x80, 0x800, 0x10000)


def _extra_octets(lead):
    """Number of continuation octets announced by a UTF-8 lead octet."""
    if lead & 0x80 == 0:
        return 0
    if lead & 0xE0 == 0xC0:
        return 1
    if lead & 0xF0 == 0xE0:
        return 2
    if lead & 0xF8 == 0xF0:
        return 3
    return -1


def _is_decodable(code, extra):
    if code < _MIN_CODE_POINTS[extra]:
        # overlong form
        return False
    if 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
        return False
    return grammar.IUNRESERVED_CHAR.fullmatch(chr(code)) is not None


def _decode_iunreserved(run):
    """
    Decodes the UTF-8 sequences of a run that encode iunreserved
    characters; every other octet is kept percent-encoded.
    """
    triplets = _triplets(run)
    octets = [int(t[1:], 16) for t in triplets]
    rval = []
    i = 0
    while i < len(octets):
        extra = _extra_octets(octets[i])
        if extra < 0:
            rval.append(triplets[i])
            i += 1
            continue
        if i + extra >= len(octets):
            # truncated sequence
            rval.extend(triplets[i:])
            break
        code = octets[i] & _LEAD_MASKS[extra]
        valid = True
        for octet in octets[i + 1:i + 1 + extra]:
            if octet & 0xC0 != 0x80:
                valid = False
                break
            code = (code << 6) | (octet & 0x3F)
        if valid and _is_decodable(code, extra):
            rval.append(chr(code))
        else:
            rval.extend(triplets[i:i + 1 + extra])
        i += 1 + extra
    return ''.join(rval)


class IRINormalizer(object):
    """
    Interface of the objects handed to IRIRef.normalize().

    Every ``normalize_*`` method receives a component (None when absent)
    and the scheme of the IRI, and returns the normalized component.
    """

    def normalize_scheme(self, scheme):
        raise NotImplementedError

    def normalize_user_info(self, user, scheme):
        raise NotImplementedError

    def normalize_host(self, host, scheme):
        raise NotImplementedError

    def normalize_port(self, port, scheme):
        raise NotImplementedError

    def normalize_segment(self, segment, scheme):
        raise NotImplementedError

    def normalize_query(self, query, scheme):
        raise NotImplementedError

    def normalize_fragment(self, fragment, scheme):
        raise NotImplementedError

    def should_normalize_empty_with_slash(self, scheme, has_authority):
        """Return True if an empty path must be written '/'."""
        raise NotImplementedError

    def should_remove_dots_in_path(self, scheme):
        """Return True if dot segments must be removed from the path."""
        raise NotImplementedError


class StandardComposableNormalizer(IRINormalizer):
    """
    RFC 3986 normalizer: PCT only decodes unreserved ASCII characters.

    Example::

        normalizer = StandardComposableNormalizer(
            Normalization.SYNTAX, Normalization.SCHEME)
        IRIRef('HTTP://Example.COM:80/%7Euser').normalize(normalizer)
        # -> http://example.com/~user
    """

    # scheme -> parts of an IRI of that scheme that ignore case
    case_insensitive_parts = {}

    def __init__(self, *normalizations):
        """
        Creates a new normalizer.

        :param normalizations: any number of Normalization flags.
        """
        self.normalizations = functools.reduce(
            operator.or_, normalizations, Normalization.STRING)

    def has(self, normalization):
        """Return True if every flag of normalization is active."""
        return normalization & self.normalizations == normalization

    def __repr__(self):
        return f'{type(self).__name__}({self.normalizations!r})'

    def normalize_scheme(self, scheme):
        if scheme is not None and self.has(Normalization.CASE):
            return scheme.lower()
        return scheme

    def normalize_user_info(self, user, scheme):
        return self._normalize_component(user, Part.USERINFO, scheme)

    def normalize_host(self, host, scheme):
        return self._normalize_component(host, Part.HOST, scheme)

    def normalize_port(self, port, scheme):
        if (port is not None and self.has(Normalization.SCHEME) and
                DEFAULT_PORTS.get(scheme) == port):
            return None
        return port

    def normalize_segment(self, segment, scheme):
        return self._normalize_component(segment, Part.SEGMENT, scheme)

    def normalize_query(self, query, scheme):
        return self._normalize_component(query, Part.QUERY, scheme)

    def normalize_fragment(self, fragment, scheme):
        return self._normalize_component(fragment, Part.FRAGMENT, scheme)

    def should_normalize_empty_with_slash(self, scheme, has_authority):
        return self.has(Normalization.SCHEME) and has_authority

    def should_remove_dots_in_path(self, scheme):
        # dot segments of a relative reference matter for resolution
        return self.has(Normalization.PATH) and scheme is not None

    def _normalize_component(self, component, part, scheme):
        if not component:
            return component
        # reserved characters may be meaningful in queries and fragments
        safe = part not in (Part.QUERY, Part.FRAGMENT)
        if safe and self.has(Normalization.PCT):
            component = self.apply_pct_transformation(component)
        if self.has(Normalization.CHARACTER):
            component = unicodedata.normalize('NFC', component)
        if self.has(Normalization.CASE):
            if safe and (self._should_lowercase(part, scheme) or
                         (part is Part.HOST and component.isascii())):
                transformer = _lowercase
            else:
                transformer = _identity
            component = transform_pct_and_other_chars(
                component, _uppercase_pct, transformer)
        return component

    def _should_lowercase(self, part, scheme):
        return part in self.case_insensitive_parts.get(scheme, ())

    def apply_pct_transformation(self, component):
        """Decodes the percent-encoded octets that need no encoding."""
        return transform_pct_and_other_chars(
            component, _decode_unreserved, _identity)


class ExtendedComposableNormalizer(StandardComposableNormalizer):
    """
    RFC 3987 normalizer: PCT decodes UTF-8 sequences of iunreserved
    characters, so "%C3%A9" becomes "é".
    """

    def apply_pct_transformation(self, component):
        return transform_pct_and_other_chars(
            component, _decode_iunreserved, _identity)
