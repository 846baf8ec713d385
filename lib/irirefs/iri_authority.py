"""
Authority component of an IRI reference.

.. module:: iri_authority
  :synopsis: user info, host and port of an IRI
"""

from collections import namedtuple

__all__ = ['IRIAuthority']


class IRIAuthority(namedtuple('IRIAuthority', ['user', 'host', 'port'])):
    """
    The "[user@]host[:port]" part of an IRI.

    The host is always a string, possibly empty ("file:///etc"). The user
    info and the port may be None. Equality compares the three fields as
    they are; normalize both sides first to compare them ignoring case. An
    authority never equals a plain tuple.
    """

    __slots__ = ()

    def __new__(cls, user=None, host='', port=None):
        if host is None:
            raise ValueError('An IRI authority always has a host.')
        return super().__new__(cls, user, host, port)

    def __eq__(self, other):
        # a plain tuple would accept the comparison on its side
        if not isinstance(other, IRIAuthority):
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        if not isinstance(other, IRIAuthority):
            return True
        return tuple.__ne__(self, other)

    __hash__ = tuple.__hash__

    def recompose(self):
        rval = '//'
        if self.user is not None:
            rval += self.user + '@'
        rval += self.host
        if self.port is not None:
            rval += ':' + str(self.port)
        return rval

    def recomposition_length(self):
        length = 2 + len(self.host)
        if self.user is not None:
            length += len(self.user) + 1
        if self.port is not None:
            length += len(str(self.port)) + 1
        return length

    def normalize(self, normalizer, scheme=None):
        """
        Returns a normalized copy of this authority.

        :param normalizer: the IRINormalizer to use.
        :param scheme: the (already normalized) scheme of the owning IRI.

        :return: a new IRIAuthority.
        """
        return IRIAuthority(
            normalizer.normalize_user_info(self.user, scheme),
            normalizer.normalize_host(self.host, scheme),
            normalizer.normalize_port(self.port, scheme))

    def __str__(self):
        return self.recompose()
