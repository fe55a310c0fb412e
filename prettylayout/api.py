from .doc import (
    Append,
    Nest,
    Text,
    Union,
    NIL,
    LINE,
    cast_doc,
    flatten,
)


def nil():
    return NIL


def append(x, y):
    """Returns ``x`` followed by ``y``. Plain strs are accepted as text."""
    return Append(cast_doc(x), cast_doc(y))


def nest(i, doc):
    """Indents the line breaks in ``doc`` by ``i`` more columns."""
    return Nest(i, cast_doc(doc))


def text(x):
    return Text(x)


def line():
    return LINE


def group(doc):
    """Lays out ``doc`` on a single line if it fits in the remaining
    width, otherwise as ``doc`` itself, where nested groups get to make
    the same decision on their own."""
    doc = cast_doc(doc)
    return Union(flatten(doc), doc)


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    return fold_doc(append, [cast_doc(doc) for doc in docs])


def space(x, y):
    return append(x, append(text(' '), y))


def newline(x, y):
    return append(x, append(line(), y))


def space_newline(x, y):
    """Joins ``x`` and ``y`` with a space, or with a line break if the
    text up to the next break doesn't fit."""
    return append(x, append(group(line()), y))


def fold_doc(fn, docs):
    """Right-folds the binary joiner ``fn`` over ``docs``."""
    docs = list(docs)
    if not docs:
        return nil()

    it = reversed(docs)
    acc = next(it)
    for doc in it:
        acc = fn(doc, acc)
    return acc


def spread(docs):
    return fold_doc(space, docs)


def stack(docs):
    return fold_doc(newline, docs)


def bracket(left, doc, right):
    """Returns ``left doc right`` on one line if it fits, otherwise with
    ``doc`` on its own lines indented by 2 and ``right`` on a line of its
    own."""
    return group(
        append(
            text(left),
            append(
                nest(2, append(line(), doc)),
                append(line(), text(right)),
            )
        )
    )


def fill_words(s):
    """Word-wraps ``s``, splitting it at each single space."""
    return fold_doc(space_newline, [text(word) for word in s.split(' ')])


def fill(docs):
    """Lays out ``docs`` separated by spaces, starting a new line only
    before a doc that doesn't fit on the current one.

    Each doc that shares a line with the one after it is flattened.
    """
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return nil()

    # Built from the end. ``as_is`` fills docs[i:] and ``flat_head``
    # fills docs[i:] with docs[i] flattened; both reuse the results
    # for docs[i + 1:].
    last = docs[-1]
    as_is, flat_head = last, flatten(last)
    for doc in reversed(docs[:-1]):
        flat = flatten(doc)
        on_one_line = space(flat, flat_head)
        as_is, flat_head = (
            Union(on_one_line, newline(doc, as_is)),
            Union(on_one_line, newline(flat, as_is)),
        )
    return as_is
