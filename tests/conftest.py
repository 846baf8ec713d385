import glob
import json
import os
from collections import namedtuple

import pytest

MANIFEST_DIR = os.path.join(os.path.dirname(__file__), 'manifests')

ManifestTest = namedtuple(
    'ManifestTest', ['manifest', 'id', 'base', 'action', 'result', 'strict'])


def pytest_addoption(parser):
    # Do only long options for pytest integration; pytest reserves
    # lowercase single-letter short options for its own CLI flags.
    parser.addoption(
        '--manifest',
        action='append',
        default=[],
        help='A resolution manifest to test (default: tests/manifests/*.json)',
    )


def load_manifest(filename):
    """
    Reads the resolution tests of a JSON manifest.

    A manifest holds a 'base' IRI and a 'sequence' of tests, each one with
    an 'id', an 'action' (the reference to resolve), the expected 'result'
    and an optional 'strict' flag (default: true).
    """
    with open(filename, encoding='utf-8') as fp:
        manifest = json.load(fp)
    name = os.path.splitext(os.path.basename(filename))[0]
    return [
        ManifestTest(
            name, entry['id'], entry.get('base', manifest['base']),
            entry['action'], entry['result'], entry.get('strict', True))
        for entry in manifest['sequence']
    ]


def pytest_generate_tests(metafunc):
    # Parametrize tests that need a `manifest_test` argument with every
    # entry of the selected manifests.
    if 'manifest_test' not in metafunc.fixturenames:
        return

    filenames = metafunc.config.getoption('manifest')
    if not filenames:
        filenames = sorted(glob.glob(os.path.join(MANIFEST_DIR, '*.json')))
    if not filenames:
        pytest.skip('No resolution manifest found (use --manifest)')

    tests = []
    for filename in filenames:
        tests.extend(load_manifest(os.path.abspath(filename)))

    metafunc.parametrize(
        'manifest_test', tests, ids=[f'{t.manifest}-{t.id}' for t in tests])
