import pytest

from prettylayout import (
    append,
    bracket,
    fill,
    fill_words,
    group,
    line,
    nest,
    nil,
    text,
)
from prettylayout.doc import (
    Doc,
    Append,
    Nest,
    Text,
    Union,
    NIL,
    LINE,
    cast_doc,
    flatten,
)


SAMPLE_DOCS = [
    nil(),
    text('hello'),
    append(text('a'), append(line(), text('b'))),
    group(append(text('a'), append(line(), text('b')))),
    nest(2, group(text('let') + line() + text('x = 1')) + line() + text('in x')),
    bracket('[', text('x') + text(',') + line() + text('y'), ']'),
    fill_words('the quick brown fox'),
    fill([bracket('(', text('a'), ')'), text('bb'), text('ccc')]),
]


def test_text_requires_str():
    with pytest.raises(TypeError):
        text(1)

    with pytest.raises(TypeError):
        Text(b'bytes')


def test_text_rejects_line_breaks():
    with pytest.raises(ValueError):
        Text('a\nb')

    with pytest.raises(ValueError):
        text('a\r')


def test_cast_doc():
    assert cast_doc('') is NIL
    assert cast_doc('a') == Text('a')

    doc = text('a')
    assert cast_doc(doc) is doc

    with pytest.raises(TypeError):
        cast_doc(3)


def test_add_builds_append():
    assert 'a' + text('b') == Append(Text('a'), Text('b'))
    assert text('a') + 'b' == Append(Text('a'), Text('b'))
    assert text('a') + line() == Append(Text('a'), LINE)

    with pytest.raises(TypeError):
        text('a') + 1


def test_structural_equality():
    assert Append(Text('a'), NIL) == Append(Text('a'), NIL)
    assert Append(Text('a'), NIL) != Append(Text('a'), LINE)
    assert Nest(1, Text('a')) != Nest(2, Text('a'))
    assert Union(Text('a'), LINE) != Append(Text('a'), LINE)
    assert Text('a') != 'a'

    assert len({Text('a'), Text('a'), Text('b')}) == 2


def test_equality_of_deep_docs():
    left = NIL
    right = NIL
    for _ in range(5000):
        left = Append(left, Text('x'))
        right = Append(right, Text('x'))
    assert left == right
    assert left != Append(left, Text('x'))


def test_repr():
    assert (
        repr(group(text('a') + line()))
        == "Union(Append(Text('a'), Text(' ')), Append(Text('a'), LINE))"
    )
    assert repr(nest(2, nil())) == 'Nest(2, NIL)'


def test_flatten_primitives():
    assert flatten(NIL) is NIL
    assert flatten(Text('a')) == Text('a')
    assert flatten(LINE) == Text(' ')
    assert flatten(nest(2, line())) == Nest(2, Text(' '))
    assert (
        flatten(Append(Text('a'), LINE))
        == Append(Text('a'), Text(' '))
    )


def test_flatten_union_takes_left():
    doc = Union(Text('a') + Text(' '), Text('a') + LINE)
    assert flatten(doc) == Append(Text('a'), Text(' '))


def test_flatten_unknown_node():
    class Odd(Doc):
        __slots__ = ()

    with pytest.raises(TypeError):
        flatten(Append(Text('a'), Odd()))


@pytest.mark.parametrize('doc', SAMPLE_DOCS)
def test_flatten_idempotent(doc):
    assert flatten(flatten(doc)) == flatten(doc)


@pytest.mark.parametrize('doc', SAMPLE_DOCS)
def test_group_keeps_flattened_content(doc):
    assert flatten(group(doc)) == flatten(doc)


def test_flatten_deep_doc():
    doc = line()
    for _ in range(5000):
        doc = nest(1, doc + line())
    flat = flatten(doc)
    assert flatten(flat) == flat
