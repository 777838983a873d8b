import pytest
from partial_json.services.property_path_parser import PathSegment, PropertyPathParser


def test_root_only():
    assert PropertyPathParser.parse_property_path('$') == []
    assert PropertyPathParser.parse_property_path('') == []


def test_simple_path():
    result = PropertyPathParser.parse_property_path('foo.bar')
    assert result == [PathSegment(name='foo'), PathSegment(name='bar')]
    assert PropertyPathParser.parse_property_path('$.foo.bar') == result


def test_array_index_segment():
    result = PropertyPathParser.parse_property_path('items[0].title')
    assert result == [
        PathSegment(name='items'),
        PathSegment(name='0', is_array_item=True),
        PathSegment(name='title'),
    ]


def test_wildcard_and_nested_indexes():
    result = PropertyPathParser.parse_property_path('matrix[*][3].value')
    assert result == [
        PathSegment(name='matrix'),
        PathSegment.item('*'),
        PathSegment.item(3),
        PathSegment(name='value'),
    ]


def test_leading_index():
    result = PropertyPathParser.parse_property_path('[2].name')
    assert result == [PathSegment.item(2), PathSegment(name='name')]


def test_invalid_empty_segment():
    with pytest.raises(ValueError):
        PropertyPathParser.parse_property_path('foo..bar')


def test_invalid_index():
    with pytest.raises(ValueError):
        PropertyPathParser.parse_property_path('foo[bar]')


def test_invalid_index_without_name():
    with pytest.raises(ValueError):
        PropertyPathParser.parse_property_path('foo.[0]')
