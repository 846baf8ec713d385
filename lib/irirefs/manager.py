"""
Management of a base IRI and of named prefixes.

.. module:: manager
  :synopsis: Base and prefix aware IRI creation and relativization
"""

import logging
from collections import namedtuple

from .iri_ref import IRIRef, NonAbsoluteBaseError
from .normalizer import Normalization, StandardComposableNormalizer

__all__ = ['IRIManager', 'PrefixedIRI', 'DEFAULT_BASE']

log = logging.getLogger(__name__)

DEFAULT_BASE = 'http://www.boreal.inria.fr/'

PrefixedIRI = namedtuple('PrefixedIRI', ['prefix', 'iri'])


class IRIManager(object):
    """
    Creates IRIs relative to a current base IRI or to named prefixes, and
    writes IRIs back in their shortest form.

    Every IRI created by a manager is prepared with its preparator, resolved
    and then normalized with its normalizer.
    """

    def __init__(self, base=DEFAULT_BASE, preparator=None, normalizer=None):
        """
        Creates a new manager.

        :param base: the base IRI, resolved against DEFAULT_BASE.
        :param preparator: an optional StringPreparator.
        :param normalizer: the IRINormalizer to use (default: a
          StandardComposableNormalizer that changes nothing).
        """
        if normalizer is None:
            normalizer = StandardComposableNormalizer(Normalization.STRING)
        self.preparator = preparator
        self.normalizer = normalizer
        self.prefixes = {}
        self._base = IRIRef(DEFAULT_BASE)
        self._base = self._require_absolute(self.create_iri(base))

    @property
    def base(self):
        return self._base.recompose()

    def get_prefix(self, key):
        return self._get(key).recompose()

    def create_iri(self, text, prefix=None):
        """
        Creates an IRI.

        :param text: the IRI reference to create the IRI from.
        :param prefix: the key of the prefix to resolve against, None for
          the base.

        :return: the resolved and normalized IRIRef.
        """
        base = self._base if prefix is None else self._get(prefix)
        return IRIRef(text, preparator=self.preparator).resolve(
            base).normalize(self.normalizer)

    def set_base(self, text, prefix=None):
        self._base = self._require_absolute(self.create_iri(text, prefix))
        log.debug('base set to %s', self._base)

    def set_prefix(self, key, text, prefix=None):
        """
        Binds a prefix key to an IRI.

        :param key: the prefix key.
        :param text: the IRI reference bound to the key.
        :param prefix: the key of the prefix text is relative to, None for
          the base.
        """
        self.prefixes[key] = self._require_absolute(
            self.create_iri(text, prefix))
        log.debug('prefix %s set to %s', key, self.prefixes[key])

    def relativize(self, iri, prefix=None):
        base = self._base if prefix is None else self._get(prefix)
        return iri.relativize(base)

    def relativize_best(self, iri):
        """
        Finds the shortest way of writing an IRI: as is, relative to the
        base, or relative to one of the prefixes.

        A prefixed form costs the length of its key on top of its own
        length, and replaces the current best only when strictly shorter.

        :param iri: the IRIRef to write.

        :return: a PrefixedIRI whose prefix is None when no prefix is used.
        """
        best_prefix = None
        best = iri
        best_cost = iri.recomposition_length()

        candidate = self.relativize(iri)
        if candidate.recomposition_length() < best_cost:
            best = candidate
            best_cost = candidate.recomposition_length()

        for key in self.prefixes:
            candidate = self.relativize(iri, key)
            cost = len(key) + candidate.recomposition_length()
            if cost < best_cost:
                best_prefix = key
                best = candidate
                best_cost = cost
        log.debug('best form of %s: %s %s', iri, best_prefix, best)
        return PrefixedIRI(best_prefix, best)

    def _get(self, key):
        try:
            return self.prefixes[key]
        except KeyError:
            raise ValueError(f'Unknown prefix: {key}') from None

    def _require_absolute(self, iri):
        if not iri.is_absolute():
            raise NonAbsoluteBaseError(
                'Cannot create a base from a non absolute IRI, given: '
                f'{iri}')
        return iri
