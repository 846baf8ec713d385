""" The irirefs module parses, resolves, relativizes and normalizes IRIs. """
from .__about__ import __version__
from .iri_authority import IRIAuthority
from .iri_parser import IRIValidator, ParsedIRI, parse
from .iri_path import IRIPath
from .iri_ref import (
    IRIError, IRIParseError, IRIRef, IRIType, NonAbsoluteBaseError, Part,
    RelativeTargetError)
from .manager import DEFAULT_BASE, IRIManager, PrefixedIRI
from .normalizer import (
    ExtendedComposableNormalizer, IRINormalizer, Normalization,
    StandardComposableNormalizer)
from .preparator import StringPreparator

__all__ = [
    '__version__', 'IRIAuthority', 'IRIValidator', 'ParsedIRI', 'parse',
    'IRIPath', 'IRIError', 'IRIParseError', 'IRIRef', 'IRIType',
    'NonAbsoluteBaseError', 'Part', 'RelativeTargetError', 'DEFAULT_BASE',
    'IRIManager', 'PrefixedIRI', 'ExtendedComposableNormalizer',
    'IRINormalizer', 'Normalization', 'StandardComposableNormalizer',
    'StringPreparator'
]
