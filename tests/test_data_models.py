"""Tests for callable descriptors."""

import pytest

from javadoc_paranamer.data_models import CallableDescriptor, CallableKind, ParanamerConfig


def test_method_descriptor():
    descriptor = CallableDescriptor.method('com.example.Processor', 'process', ['String', 'int'])
    assert descriptor.kind is CallableKind.METHOD
    assert descriptor.arity == 2
    assert descriptor.parameter_type_names == ('String', 'int')
    assert descriptor.describe() == 'com.example.Processor#process(String, int)'


def test_constructor_describes_with_type_name():
    descriptor = CallableDescriptor.constructor('com.example.Processor', ['java.lang.String'])
    assert descriptor.kind is CallableKind.CONSTRUCTOR
    assert descriptor.declaring_simple_name == 'Processor'
    assert str(descriptor) == 'com.example.Processor#Processor(java.lang.String)'


def test_descriptors_are_hashable():
    first = CallableDescriptor(CallableKind.METHOD, 'a.B', 'm', ['int'])
    second = CallableDescriptor.method('a.B', 'm', ('int',))
    assert first == second
    assert len({first, second}) == 1


@pytest.mark.parametrize('text,kind,name,types', [
    ('com.example.Processor#process(String,int)', CallableKind.METHOD, 'process', ('String', 'int')),
    ('com.example.Processor#reset()', CallableKind.METHOD, 'reset', ()),
    ('com.example.Processor#<init>(String)', CallableKind.CONSTRUCTOR, '', ('String',)),
    ('com.example.Processor#new()', CallableKind.CONSTRUCTOR, '', ()),
    (' com.example.Processor#merge(Map<String, List<Integer>>, int[]) ', CallableKind.METHOD, 'merge',
     ('Map<String, List<Integer>>', 'int[]')),
])
def test_parse(text, kind, name, types):
    descriptor = CallableDescriptor.parse(text)
    assert descriptor.kind is kind
    assert descriptor.declaring_type_name == 'com.example.Processor'
    assert descriptor.simple_name == name
    assert descriptor.parameter_type_names == types


@pytest.mark.parametrize('text', [
    'com.example.Processor.process(String)',
    'com.example.Processor#process',
    '#process()',
    'com.example.Processor#(int)',
    'com.example.Processor#process(int,,long)',
])
def test_parse_rejects_malformed_signatures(text):
    with pytest.raises(ValueError):
        CallableDescriptor.parse(text)


def test_config_defaults():
    config = ParanamerConfig()
    assert config.sentinel_filename == 'package-list'
    assert config.page_suffix == '.html'
    assert config.array_marker == '[]'
    assert config.encoding == 'utf-8'
    assert config.http_timeout is None
