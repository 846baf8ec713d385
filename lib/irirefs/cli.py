#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
irirefs - command line interface for parsing, resolving, relativizing and
normalizing IRIs
"""
import logging
import sys

from .iri_parser import IRIType
from .iri_ref import IRIRef
from .manager import DEFAULT_BASE, IRIManager
from .normalizer import (
    ExtendedComposableNormalizer, Normalization, StandardComposableNormalizer)
from .preparator import DEFAULT_TRANSFORMERS, StringPreparator

log = logging.getLogger()

FLAG_NAMES = list(Normalization.__members__)


def make_normalizer(opts):
    """
    Builds the normalizer selected on the command line.

    :param opts: parsed options
    :returns: an IRINormalizer
    """
    flags = [Normalization[name] for name in opts.flags or []]
    if opts.extended:
        return ExtendedComposableNormalizer(*flags)
    return StandardComposableNormalizer(*flags)


def parse_iri(text, opts):
    """
    Lists the components of an IRI reference, one per line.
    """
    iri = IRIRef(text, IRIType[opts.type], opts.preparator)
    lines = [
        ('scheme', iri.scheme),
        ('user', iri.user),
        ('host', iri.host),
        ('port', iri.port),
        ('path', iri.path),
        ('query', iri.query),
        ('fragment', iri.fragment),
    ]
    return '\n'.join(f'{name}: {value}' for name, value in lines
                     if value is not None or name == 'path')


def resolve_iri(text, opts):
    iri = IRIRef(text, preparator=opts.preparator)
    if opts.base:
        iri = iri.resolve(IRIRef(opts.base, IRIType.ABS), opts.strict)
    else:
        iri = iri.remove_dot_segments()
    return iri.normalize(opts.normalizer).recompose()


def relativize_iri(text, opts):
    """
    Writes an IRI in its shortest form against the base and the prefixes.
    """
    manager = opts.manager
    prefix, iri = manager.relativize_best(manager.create_iri(text))
    log.debug("relativize_iri: %r -> %r, %r", text, prefix, iri)
    if prefix is None:
        return iri.recompose()
    return f'{prefix}:{iri}'


def normalize_iri(text, opts):
    return IRIRef(text, preparator=opts.preparator).normalize(
        opts.normalizer).recompose()


COMMANDS = {
    'parse': parse_iri,
    'resolve': resolve_iri,
    'relativize': relativize_iri,
    'normalize': normalize_iri,
}


def main(*argv):
    import argparse

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--base',
                        help='Base IRI to use',
                        dest='base',
                        action='store')
    common.add_argument('--strict',
                        help='Strict RFC 3986 resolution (default)',
                        dest='strict',
                        action='store_true',
                        default=True)
    common.add_argument('--non-strict',
                        help='Ignore a scheme equal to the base scheme',
                        dest='strict',
                        action='store_false')
    common.add_argument('--extended',
                        help='Decode percent-encoded UTF-8 (RFC 3987)',
                        dest='extended',
                        action='store_true',
                        default=False)
    common.add_argument('--flag',
                        help='Normalization to apply, repeatable',
                        dest='flags',
                        action='append',
                        choices=FLAG_NAMES)
    common.add_argument('--prepare',
                        help='String preparation to apply, repeatable',
                        dest='prepare',
                        action='append',
                        choices=sorted(DEFAULT_TRANSFORMERS))
    common.add_argument('--prefix',
                        help='Prefix KEY=IRI for relativize, repeatable',
                        dest='prefixes',
                        action='append',
                        default=[])
    common.add_argument('--type',
                        help='Rule to parse with [default: ANY]',
                        dest='type',
                        choices=[t.name for t in IRIType],
                        default='ANY')
    common.add_argument('-v', '--verbose',
                        dest='verbose',
                        action='store_true',)
    common.add_argument('-q', '--quiet',
                        dest='quiet',
                        action='store_true',)

    prs = argparse.ArgumentParser(prog='irirefs')
    sub = prs.add_subparsers(dest='command', required=True)
    for name in COMMANDS:
        cmd = sub.add_parser(name, parents=[common], help=f'{name} IRIs')
        cmd.add_argument('iris', nargs='+', metavar='IRI')

    if not argv:
        _argv = sys.argv[1:]
    else:
        _argv = list(argv)
    opts = prs.parse_args(args=_argv)

    if not opts.quiet:
        logging.basicConfig()

        if opts.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

    try:
        opts.preparator = StringPreparator(opts.prepare or [])
        opts.normalizer = make_normalizer(opts)
        if opts.command == 'relativize':
            opts.manager = IRIManager(
                opts.base or DEFAULT_BASE, opts.preparator, opts.normalizer)
            for binding in opts.prefixes:
                key, _, value = binding.partition('=')
                opts.manager.set_prefix(key, value)
        for text in opts.iris:
            print(COMMANDS[opts.command](text, opts))
    except ValueError as e:
        print(f'irirefs: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
