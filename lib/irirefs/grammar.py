"""
Character classes and component productions of RFC 3986 and RFC 3987.

Every constant ending in a class name (``UNRESERVED``, ``SUB_DELIMS``, ...)
is a regular expression fragment meant to be placed inside ``[...]``; the
compiled patterns at the bottom match a whole component with ``fullmatch``.

.. module:: grammar
  :synopsis: RFC 3986/3987 character classes for IRI references
"""

import re

# RFC 3986 2.2 / 2.3
UNRESERVED = r'A-Za-z0-9\-._~'
SUB_DELIMS = r"!$&'()*+,;="
GEN_DELIMS = r':/?#\[\]@'
RESERVED = GEN_DELIMS + SUB_DELIMS

# RFC 3987 2.2
UCSCHAR = (
    r'\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF'
    r'\U00010000-\U0001FFFD\U00020000-\U0002FFFD\U00030000-\U0003FFFD'
    r'\U00040000-\U0004FFFD\U00050000-\U0005FFFD\U00060000-\U0006FFFD'
    r'\U00070000-\U0007FFFD\U00080000-\U0008FFFD\U00090000-\U0009FFFD'
    r'\U000A0000-\U000AFFFD\U000B0000-\U000BFFFD\U000C0000-\U000CFFFD'
    r'\U000D0000-\U000DFFFD\U000E1000-\U000EFFFD')
IPRIVATE = r'\uE000-\uF8FF\U000F0000-\U000FFFFD\U00100000-\U0010FFFD'
IUNRESERVED = UNRESERVED + UCSCHAR

PCT_ENCODED = r'%[0-9A-Fa-f]{2}'

# partial productions
_ipchar = '(?:[' + IUNRESERVED + SUB_DELIMS + ':@]|' + PCT_ENCODED + ')'
_dec_octet = '(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])'
_ipv4address = _dec_octet + (r'\.' + _dec_octet) * 3
_h16 = '[0-9A-Fa-f]{1,4}'
_ls32 = '(?:' + _h16 + ':' + _h16 + '|' + _ipv4address + ')'
_ipv6address = '(?:' + '|'.join([
    '(?:H:){6}L',
    '::(?:H:){5}L',
    '(?:H)?::(?:H:){4}L',
    '(?:(?:H:){0,1}H)?::(?:H:){3}L',
    '(?:(?:H:){0,2}H)?::(?:H:){2}L',
    '(?:(?:H:){0,3}H)?::H:L',
    '(?:(?:H:){0,4}H)?::L',
    '(?:(?:H:){0,5}H)?::H',
    '(?:(?:H:){0,6}H)?::',
]).replace('H', _h16).replace('L', _ls32) + ')'
_ipvfuture = r'v[0-9A-Fa-f]+\.[' + UNRESERVED + SUB_DELIMS + ':]+'
_ip_literal = r'\[(?:' + _ipv6address + '|' + _ipvfuture + r')\]'
_ireg_name = '(?:[' + IUNRESERVED + SUB_DELIMS + ']|' + PCT_ENCODED + ')*'

SCHEME = r'[A-Za-z][A-Za-z0-9+.\-]*'
IUSERINFO = '(?:[' + IUNRESERVED + SUB_DELIMS + ':]|' + PCT_ENCODED + ')*'
IHOST = '(?:' + _ip_literal + '|' + _ipv4address + '|' + _ireg_name + ')'
PORT = '[0-9]*'
ISEGMENT = _ipchar + '*'
ISEGMENT_NZ_NC = '(?:[' + IUNRESERVED + SUB_DELIMS + '@]|' + PCT_ENCODED + ')+'
IQUERY = '(?:' + _ipchar + '|[' + IPRIVATE + '/?])*'
IFRAGMENT = '(?:' + _ipchar + '|[/?])*'

# compiled component matchers
SCHEME_RE = re.compile(SCHEME)
IUSERINFO_RE = re.compile(IUSERINFO)
IHOST_RE = re.compile(IHOST)
PORT_RE = re.compile(PORT)
ISEGMENT_RE = re.compile(ISEGMENT)
ISEGMENT_NZ_NC_RE = re.compile(ISEGMENT_NZ_NC)
IQUERY_RE = re.compile(IQUERY)
IFRAGMENT_RE = re.compile(IFRAGMENT)

# single character matchers used by the normalizers
UNRESERVED_CHAR = re.compile('[' + UNRESERVED + ']')
IUNRESERVED_CHAR = re.compile('[' + IUNRESERVED + ']')

# a maximal run of contiguous %HH triplets
PCT_RUN = re.compile('(?:' + PCT_ENCODED + ')+')
