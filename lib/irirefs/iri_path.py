"""
Path component of an IRI reference.

A path is kept as the list of strings obtained by splitting its text on
'/', so the text can always be rebuilt with '/'.join(segments):

- the empty path "" is [""],
- a rooted path starts with an empty segment: "/" is ["", ""] and "/a/b"
  is ["", "a", "b"],
- the list is never empty.

.. module:: iri_path
  :synopsis: Segment list model of IRI paths
"""

import logging

__all__ = ['IRIPath', 'DOT_SEGMENT', 'DOUBLEDOT_SEGMENT', 'EMPTY_SEGMENT']

log = logging.getLogger(__name__)

EMPTY_SEGMENT = ''
DOT_SEGMENT = '.'
DOUBLEDOT_SEGMENT = '..'


def _recomposition_length(segments):
    return sum(len(s) for s in segments) + len(segments) - 1


class IRIPath(object):
    """
    A mutable list of path segments.

    IRIPath instances are private to the IRIRef that owns them; every
    algorithm of IRIRef copies a path before changing it.
    """

    def __init__(self, segments=None):
        """
        Creates a new path.

        :param segments: an iterable of segments, None or an empty iterable
          for the empty path.
        """
        self.segments = list(segments) if segments else [EMPTY_SEGMENT]

    @classmethod
    def from_string(cls, path):
        return cls(path.split('/'))

    def copy(self):
        return IRIPath(self.segments)

    def is_rooted(self):
        """Return True if the path starts with '/'."""
        return len(self.segments) > 1 and self.segments[0] == EMPTY_SEGMENT

    def starts_with_double_slash(self):
        """Return True if this path recomposes to text starting with '//'."""
        segments = self.segments
        return (len(segments) > 2 and segments[0] == EMPTY_SEGMENT and
                segments[1] == EMPTY_SEGMENT)

    def is_empty_path(self):
        """Return True for the empty path (but not for '/')."""
        return len(self.segments) == 1 and self.segments[0] == EMPTY_SEGMENT

    def recompose(self):
        return '/'.join(self.segments)

    def recomposition_length(self):
        """Length of recompose() computed without building the string."""
        return _recomposition_length(self.segments)

    def __eq__(self, other):
        if not isinstance(other, IRIPath):
            return NotImplemented
        return self.segments == other.segments

    def __repr__(self):
        return f'IRIPath({self.segments!r})'

    def resolve_non_empty(self, base, base_has_authority):
        """
        Merges this (non empty) path with the path of a base IRI, as in
        RFC 3986 5.2.3.

        :param base: the IRIPath of the base IRI.
        :param base_has_authority: True if the base IRI has an authority.
        """
        if not self.is_rooted():
            self.segments[0:0] = base.segments[:-1]
        # a path under an authority must be rooted
        if base_has_authority and not self.is_rooted():
            self.segments.insert(0, EMPTY_SEGMENT)

    def remove_dot_segments(self):
        """
        Removes '.' and '..' segments in place, as in RFC 3986 5.2.4.

        A dot segment in last position becomes an empty segment so that the
        path keeps its trailing '/'. A '..' also removes the segment before
        it, except the empty first segment of a rooted path.
        """
        segments = self.segments
        i = 0
        while i < len(segments):
            segment = segments[i]
            if segment != DOT_SEGMENT and segment != DOUBLEDOT_SEGMENT:
                i += 1
                continue
            if i < len(segments) - 1:
                del segments[i]
            else:
                segments[i] = EMPTY_SEGMENT
            if (segment == DOUBLEDOT_SEGMENT and i > 0 and
                    (i > 1 or segments[0] != EMPTY_SEGMENT)):
                del segments[i - 1]
                i -= 1

    def relativize(self, base, must_find_non_empty=False, max_cost=0):
        """
        Computes a path p such that resolving p against base gives this
        path back.

        :param base: the IRIPath to relativize against.
        :param must_find_non_empty: True if the empty path is not an
          acceptable answer (the base has a query the target lacks).
        :param max_cost: the number of characters the caller saves by
          dropping scheme or authority when a relative path is found.

        :return: a new IRIPath, or None when no relative path is worth
          using.
        """
        if self.is_rooted() and not base.is_rooted():
            # without its authority '//x' would name host x
            if self.starts_with_double_slash():
                return None
            return self.copy()
        if not self.is_rooted() and base.is_rooted():
            return None

        target = self.segments
        base_segments = base.segments
        limit = min(len(target), len(base_segments))
        common = 0
        while common < limit and target[common] == base_segments[common]:
            common += 1
        rest = target[common:]

        # one '..' per base segment after the common part, except the last
        result = [DOUBLEDOT_SEGMENT] * max(len(base_segments) - common - 1, 0)

        if not rest and len(base_segments) == common:
            # identical paths
            result.append(EMPTY_SEGMENT)
        elif not rest:
            # the target is above the base
            result.append(DOUBLEDOT_SEGMENT)
            result.append(base_segments[common - 1])
        elif len(base_segments) == common:
            # the base is a prefix of the target: its last segment is
            # dropped on resolution and has to be given back
            result.append(base_segments[common - 1])
            if result[0] == EMPTY_SEGMENT:
                result.insert(0, DOT_SEGMENT)
        elif not result and rest[0] == EMPTY_SEGMENT:
            # './/b' and not '//b'
            result.append(DOT_SEGMENT)
        result.extend(rest)

        # './' and '../' are the same as '.' and '..'
        if (len(result) > 1 and result[-1] == EMPTY_SEGMENT and
                result[-2] in (DOT_SEGMENT, DOUBLEDOT_SEGMENT)):
            result.pop()

        if must_find_non_empty and _is_empty(result):
            if self.is_empty_path():
                log.debug('no non empty relative path for %r', self)
                return None
            last = target[-1]
            result = [DOT_SEGMENT if last == EMPTY_SEGMENT else last]

        # 'a:b' would be read as a scheme
        if ':' in result[0]:
            result.insert(0, DOT_SEGMENT)

        new_length = _recomposition_length(result)
        old_length = self.recomposition_length()
        if self.is_rooted() and not self.starts_with_double_slash():
            if old_length <= new_length:
                return self.copy()
        elif old_length + max_cost <= new_length:
            log.debug(
                'relative path %r is not shorter than %r', result, target)
            return None
        return IRIPath(result)

    def normalize(self, normalizer, scheme=None, has_authority=False):
        """
        Normalizes every segment in place, then removes dot segments and
        replaces an empty path by '/' when the normalizer allows it.

        :param normalizer: the IRINormalizer to use.
        :param scheme: the scheme of the owning IRI, or None.
        :param has_authority: True if the owning IRI has an authority.
        """
        self.segments = [
            normalizer.normalize_segment(segment, scheme)
            for segment in self.segments]
        if normalizer.should_remove_dots_in_path(scheme):
            self.remove_dot_segments()
            # keep '/.' in front of '//a', which would read as an authority
            if not has_authority and self.starts_with_double_slash():
                self.segments.insert(1, DOT_SEGMENT)
        if (self.is_empty_path() and
                normalizer.should_normalize_empty_with_slash(
                    scheme, has_authority)):
            self.segments = [EMPTY_SEGMENT, EMPTY_SEGMENT]


def _is_empty(segments):
    return len(segments) == 1 and segments[0] == EMPTY_SEGMENT
