"""Tests for type-name to page-path resolution."""

import pytest

from javadoc_paranamer.data_models import CallableDescriptor
from javadoc_paranamer.errors import UnsupportedTypeNameError
from javadoc_paranamer.path_resolver import canonical_name, resolve, resolve_for


@pytest.mark.parametrize('type_name,expected', [
    ('com.example.Foo', 'com/example/Foo.html'),
    ('Foo', 'Foo.html'),
    ('com.example.Foo[]', 'com/example/Foo[].html'),
    ('com.example.Foo[][]', 'com/example/Foo[][].html'),
    ('[Lcom.example.Foo;', 'com/example/Foo[].html'),
])
def test_resolve(type_name, expected):
    assert resolve(type_name) == expected


def test_resolve_uses_configured_suffix_and_marker():
    assert resolve('com.example.Foo[]', page_suffix='.htm', array_marker='-array') == 'com/example/Foo-array.htm'


@pytest.mark.parametrize('type_name', [
    'com.example.Outer$Inner',
    'com.example.Outer.Inner',
    'com.example.Outer$Inner[]',
])
def test_nested_types_are_unsupported(type_name):
    with pytest.raises(UnsupportedTypeNameError) as excinfo:
        canonical_name(type_name)
    assert excinfo.value.suggestions


@pytest.mark.parametrize('type_name', ['com..Foo', 'com.example.', 'com.exa mple.Foo', '[Q'])
def test_malformed_types_are_unsupported(type_name):
    with pytest.raises(UnsupportedTypeNameError):
        canonical_name(type_name)


def test_resolve_for_uses_declaring_type():
    descriptor = CallableDescriptor.method('com.example.Processor', 'process', ['java.lang.String'])
    assert resolve_for(descriptor) == 'com/example/Processor.html'
