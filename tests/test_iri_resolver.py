import pytest
from irirefs import NonAbsoluteBaseError, RelativeTargetError
from irirefs.iri_resolver import remove_dot_segments, resolve, unresolve

COMPLEX_BASE = 'file:///a/bb/ccc/d;p?q'


# ---------- Tests for resolve() ----------
class TestResolve:
    def test_absolute_iri_no_base(self):
        assert resolve('http://example.org/') == 'http://example.org/'

    def test_absolute_iri_empty_base(self):
        assert resolve('http://example.org/', '') == 'http://example.org/'

    def test_absolute_iri_with_base(self):
        assert resolve('http://example.org/', 'http://base.org/') == 'http://example.org/'

    def test_empty_value_uses_base(self):
        assert resolve('', 'http://base.org/') == 'http://base.org/'

    def test_scheme_no_base(self):
        assert resolve('ex:abc') == 'ex:abc'

    def test_dot_segments_no_base(self):
        assert resolve('http://abc/../../') == 'http://abc/'

    def test_relative_no_base_error(self):
        with pytest.raises(RelativeTargetError,
                           match=r"Found invalid relative IRI 'abc' for a missing base IRI"):
            resolve('abc')

    def test_empty_value_no_base_error(self):
        with pytest.raises(RelativeTargetError):
            resolve('')

    def test_relative_with_base(self):
        assert resolve('abc', 'http://base.org/') == 'http://base.org/abc'

    def test_hash_relative(self):
        assert resolve('#abc', 'http://base.org/') == 'http://base.org/#abc'

    def test_same_scheme_strict(self):
        assert resolve('http:abc', 'http://base.org/') == 'http:abc'

    def test_same_scheme_non_strict(self):
        assert resolve('http:abc', 'http://base.org/', strict=False) == 'http://base.org/abc'

    def test_colon_in_value_removes_dots(self):
        assert resolve('http://abc/../../', 'http://base.org/') == 'http://abc/'

    def test_non_absolute_base_error(self):
        with pytest.raises(NonAbsoluteBaseError,
                           match=r"Found invalid base IRI 'def' for value 'abc'"):
            resolve('abc', 'def')

    def test_non_absolute_base_empty_value_error(self):
        with pytest.raises(NonAbsoluteBaseError,
                           match=r"Found invalid base IRI 'def' for value ''"):
            resolve('', 'def')

    def test_base_with_fragment_error(self):
        with pytest.raises(NonAbsoluteBaseError):
            resolve('abc', 'http://base.org/#frag')

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            resolve('abc', 'def')

    def test_scheme_from_base_if_value_starts_with_slash_slash(self):
        assert resolve('//abc', 'http://base.org/') == 'http://abc'

    def test_base_without_path_slash(self):
        assert resolve('abc', 'http://base.org') == 'http://base.org/abc'

    def test_base_without_path_dot_segments(self):
        assert resolve('abc/./', 'http://base.org') == 'http://base.org/abc/'

    def test_base_with_empty_authority(self):
        assert resolve('abc', 'http://') == 'http:///abc'

    def test_base_with_char_after_colon(self):
        assert resolve('abc', 'http:a') == 'http:abc'

    def test_base_with_char_after_colon_dot_segments(self):
        assert resolve('abc/./', 'http:a') == 'http:abc/'

    def test_base_only_scheme(self):
        assert resolve('abc', 'http:') == 'http:abc'

    def test_base_only_scheme_dot_segments(self):
        assert resolve('abc/./', 'http:') == 'http:abc/'

    def test_absolute_path_ignores_base_path(self):
        assert resolve('/abc/def/', 'http://base.org/123/456/') == 'http://base.org/abc/def/'

    def test_base_with_last_segment_replaced(self):
        assert resolve('xyz', 'http://aa/a') == 'http://aa/xyz'

    def test_base_collapse_parent_paths(self):
        assert resolve('xyz', 'http://aa/parent/parent/../../a') == 'http://aa/xyz'

    def test_base_remove_current_dir(self):
        assert resolve('xyz', 'http://aa/././a') == 'http://aa/xyz'

    @pytest.mark.parametrize('value, base, expected', [
        ('.', 'http://aa/', 'http://aa/'),
        ('..', 'http://aa/b/', 'http://aa/'),
        ('../', 'http://aa/b/', 'http://aa/'),
        ('..', 'http://aa/b', 'http://aa/'),
        ('../', 'http://aa/b', 'http://aa/'),
        ('?a=b', 'http://abc/def/ghi', 'http://abc/def/ghi?a=b'),
        ('.?a=b', 'http://abc/def/ghi', 'http://abc/def/?a=b'),
        ('..?a=b', 'http://abc/def/ghi', 'http://abc/?a=b'),
        ('xyz', 'http://abc/d:f/ghi', 'http://abc/d:f/xyz'),
        ('./xyz', 'http://abc/d:f/ghi', 'http://abc/d:f/xyz'),
        ('../xyz', 'http://abc/d:f/ghi', 'http://abc/xyz'),
    ])
    def test_dot_segments_against_base(self, value, base, expected):
        assert resolve(value, base) == expected

    @pytest.mark.parametrize('value, expected', [
        ('g:h', 'g:h'),
        ('g', 'file:///a/bb/ccc/g'),
        ('./g', 'file:///a/bb/ccc/g'),
        ('g/', 'file:///a/bb/ccc/g/'),
        ('/g', 'file:///g'),
        ('//g', 'file://g'),
        ('?y', 'file:///a/bb/ccc/d;p?y'),
        ('g?y', 'file:///a/bb/ccc/g?y'),
        ('#s', 'file:///a/bb/ccc/d;p?q#s'),
        ('g#s', 'file:///a/bb/ccc/g#s'),
        ('g?y#s', 'file:///a/bb/ccc/g?y#s'),
        (';x', 'file:///a/bb/ccc/;x'),
        ('g;x', 'file:///a/bb/ccc/g;x'),
        ('g;x?y#s', 'file:///a/bb/ccc/g;x?y#s'),
        ('', 'file:///a/bb/ccc/d;p?q'),
        ('.', 'file:///a/bb/ccc/'),
        ('./', 'file:///a/bb/ccc/'),
        ('..', 'file:///a/bb/'),
        ('../', 'file:///a/bb/'),
        ('../g', 'file:///a/bb/g'),
        ('../..', 'file:///a/'),
        ('../../', 'file:///a/'),
        ('../../g', 'file:///a/g'),
        ('../../..', 'file:///'),
        ('../../../', 'file:///'),
        ('../../../g', 'file:///g'),
        ('../../../../g', 'file:///g'),
        ('/./g', 'file:///g'),
        ('/../g', 'file:///g'),
        ('g.', 'file:///a/bb/ccc/g.'),
        ('.g', 'file:///a/bb/ccc/.g'),
        ('g..', 'file:///a/bb/ccc/g..'),
        ('..g', 'file:///a/bb/ccc/..g'),
        ('./../g', 'file:///a/bb/g'),
        ('./g/.', 'file:///a/bb/ccc/g/'),
        ('g/./h', 'file:///a/bb/ccc/g/h'),
        ('g/../h', 'file:///a/bb/ccc/h'),
        ('g;x=1/./y', 'file:///a/bb/ccc/g;x=1/y'),
        ('g;x=1/../y', 'file:///a/bb/ccc/y'),
        ('g?y/./x', 'file:///a/bb/ccc/g?y/./x'),
        ('g?y/../x', 'file:///a/bb/ccc/g?y/../x'),
        ('g#s/./x', 'file:///a/bb/ccc/g#s/./x'),
        ('g#s/../x', 'file:///a/bb/ccc/g#s/../x'),
        ('http:g', 'http:g'),
    ])
    def test_complex_base(self, value, expected):
        assert resolve(value, COMPLEX_BASE) == expected

    def test_complex_relative_with_complex_base(self):
        assert resolve(
            '//example.org/.././useless/../../scheme-relative',
            'http://example.com/some/deep/directory/and/file'
        ) == 'http://example.org/scheme-relative'

    def test_base_without_double_slash_after_scheme(self):
        assert resolve('a', 'tag:example') == 'tag:a'

    def test_base_without_double_slash_after_scheme_with_one_slash(self):
        assert resolve('a', 'tag:example/foo') == 'tag:example/a'

    def test_base_without_double_slash_after_scheme_with_two_slash(self):
        assert resolve('a', 'tag:example/foo/') == 'tag:example/foo/a'

    def test_triple_dot_segment_and_double_dot(self):
        assert resolve('../.../../', 'http://example.org/a/b/c/') == 'http://example.org/a/b/'

    def test_triple_dot_segment_and_2x_double_dot(self):
        assert resolve('../.../../../', 'http://example.org/a/b/c/') == 'http://example.org/a/'

    def test_base_path_dot_segments_removed_for_query(self):
        assert resolve('?y', 'http://a/bb/ccc/./d;p?q') == 'http://a/bb/ccc/d;p?y'


# ---------- Tests for unresolve() ----------
class TestUnresolve:
    def test_no_base(self):
        assert unresolve('http://a/b/c/g') == 'http://a/b/c/g'

    def test_empty_base_keeps_relative_value(self):
        assert unresolve('not an IRI') == 'not an IRI'

    @pytest.mark.parametrize('value, expected', [
        ('http://a/b/c/g', 'g'),
        ('http://a/b/c/', '.'),
        ('http://a/b/', '..'),
        ('http://a/b/c/d;p?q', ''),
        ('http://a/b/c/d;p?y', '?y'),
        ('http://a/b/c/d;p?q#s', '#s'),
        ('http://a/g', '/g'),
        ('http://g/x', '//g/x'),
        ('https://a/b/c/g', 'https://a/b/c/g'),
    ])
    def test_unresolve(self, value, expected):
        assert unresolve(value, 'http://a/b/c/d;p?q') == expected

    @pytest.mark.parametrize('value', [
        'http://a/b/c/g', 'http://a/b/c/', 'http://a/', 'http://a/b/c/d;p',
        'http://a/b/c/d;p?q#f', 'http://a/b:c', 'ftp://a/b',
    ])
    def test_resolves_back(self, value):
        base = 'http://a/b/c/d;p?q'
        assert resolve(unresolve(value, base), base) == value

    def test_non_absolute_base_error(self):
        with pytest.raises(NonAbsoluteBaseError,
                           match=r"Found invalid base IRI 'def' for value 'http://a/'"):
            unresolve('http://a/', 'def')

    def test_relative_value_error(self):
        with pytest.raises(RelativeTargetError):
            unresolve('g', 'http://a/b')


# ---------- Tests for remove_dot_segments() ----------
class TestRemoveDotSegments:
    @pytest.mark.parametrize('path, expected', [
        ('abc', 'abc'),
        ('abc/', 'abc/'),
        ('/abc', '/abc'),
        ('/abc/', '/abc/'),
        ('/.', '/'),
        ('/..', '/'),
        ('/abc/..', '/'),
        ('/abc/../../..', '/'),
        ('/abc/.', '/abc/'),
        ('/abc/../def/', '/def/'),
        ('mid/content=5/../6', 'mid/6'),
        ('/abc/./def/', '/abc/def/'),
        ('/abc/def/ghi/../..', '/abc/'),
        ('/abc/././.', '/abc/'),
        ('/abc/def/./ghi/../..', '/abc/'),
        ('/a/b/c/./../../g', '/a/g'),
        ('/abc//def/', '/abc//def/'),
        ('/abc//def//../', '/abc//def/'),
        ('/abc//def//./', '/abc//def//'),
        ('/a/bb/ccc/.g', '/a/bb/ccc/.g'),
        ('/a/bb/ccc/g.', '/a/bb/ccc/g.'),
        ('/a/bb/ccc/..g', '/a/bb/ccc/..g'),
        ('/a/bb/ccc/g..', '/a/bb/ccc/g..'),
        ('/a/bb/ccc/./g/.', '/a/bb/ccc/g/'),
        ('/invalid/...', '/invalid/...'),
        ('/invalid/.../..', '/invalid/'),
        ('/invalid/../..../../../.../.htaccess', '/.../.htaccess'),
        ('/invalid/../.a/../../.../.htaccess', '/.../.htaccess'),
        ('', ''),
        ('.', ''),
        ('..', ''),
    ])
    def test_remove(self, path, expected):
        assert remove_dot_segments(path) == expected
