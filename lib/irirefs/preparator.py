"""
String preparation applied to raw text before it is parsed as an IRI.

.. module:: preparator
  :synopsis: Entity unescaping of IRI strings
"""

import re
from html.entities import name2codepoint

__all__ = [
    'StringPreparator', 'unescape_html4', 'unescape_xml',
    'DEFAULT_TRANSFORMERS'
]

_ENTITY = re.compile(r'&(#[0-9]+|#[xX][0-9A-Fa-f]+|[A-Za-z][A-Za-z0-9]*);')

XML_ENTITIES = {
    'lt': '<',
    'gt': '>',
    'amp': '&',
    'quot': '"',
    'apos': "'",
}
HTML4_ENTITIES = {
    name: chr(code) for name, code in name2codepoint.items()}


def _unescape(text, entities):
    """
    Replaces character references and the named entities found in
    entities; anything else is left untouched.
    """
    def replace(match):
        name = match.group(1)
        if name[0] != '#':
            return entities.get(name, match.group())
        if name[1] in 'xX':
            code = int(name[2:], 16)
        else:
            code = int(name[1:])
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            return match.group()
        return chr(code)

    return _ENTITY.sub(replace, text)


def unescape_html4(text):
    """Unescapes the HTML 4 entities and numeric references of text."""
    return _unescape(text, HTML4_ENTITIES)


def unescape_xml(text):
    """Unescapes the five XML entities and numeric references of text."""
    return _unescape(text, XML_ENTITIES)


DEFAULT_TRANSFORMERS = {
    'html4': unescape_html4,
    'xml': unescape_xml,
}


class StringPreparator(object):
    """
    Applies a sequence of named transformers to a string.

    Transformers are looked up in a registry owned by the preparator; it
    starts as a copy of DEFAULT_TRANSFORMERS and can be extended with
    register().
    """

    def __init__(self, names=(), transformers=None):
        """
        Creates a new preparator.

        :param names: the names of the transformers to apply, in order.
        :param transformers: the registry to use, a dict of name to
          function (default: a copy of DEFAULT_TRANSFORMERS).
        """
        if transformers is None:
            transformers = DEFAULT_TRANSFORMERS
        self.transformers = dict(transformers)
        self.names = []
        for name in names:
            self._check(name)
            self.names.append(name)

    def _check(self, name):
        if name not in self.transformers:
            raise ValueError(
                f'Unknown transformer: {name}, must be part of '
                f'{sorted(self.available_transformers())}')

    def available_transformers(self):
        return set(self.transformers)

    def register(self, name, transformer):
        """
        Adds a transformer to the registry, or replaces the one with the
        same name.

        :param name: the name of the transformer.
        :param transformer: a function from str to str.
        """
        self.transformers[name] = transformer

    def transform(self, text):
        if text is None:
            return None
        for name in self.names:
            text = self.transformers[name](text)
        return text

    def __repr__(self):
        return f'StringPreparator({self.names!r})'
