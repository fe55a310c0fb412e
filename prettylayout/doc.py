def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected 'Doc' or 'str'"
    )


class Doc:
    """Base class for the unresolved document algebra.

    Docs are immutable, so subtrees can be shared freely between
    documents; ``group`` keeps its argument as is on one side of a
    ``Union``.
    """
    __slots__ = ()

    def fields(self):
        """Returns a tuple of the plain values and a tuple of the
        child documents of this node."""
        return (), ()

    def __add__(self, other):
        return Append(self, cast_doc(other))

    def __radd__(self, other):
        return Append(cast_doc(other), self)

    def __eq__(self, other):
        if not isinstance(other, Doc):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if type(left) is not type(right):
                return False
            left_values, left_children = left.fields()
            right_values, right_children = right.fields()
            if left_values != right_values:
                return False
            pending.extend(zip(left_children, right_children))
        return True

    def __hash__(self):
        # Shallow, so equal docs always hash equal.
        return hash((type(self).__name__, self.fields()[0]))


class Nil(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Append(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right

    def fields(self):
        return (), (self.left, self.right)

    def __repr__(self):
        return f'Append({repr(self.left)}, {repr(self.right)})'


class Nest(Doc):
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        assert isinstance(indent, int)
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc

    def fields(self):
        return (self.indent, ), (self.doc, )

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if '\n' in value or '\r' in value:
            raise ValueError(
                f"Text can't contain line breaks, got {repr(value)}"
            )
        self.value = value

    def fields(self):
        return (self.value, ), ()

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Line(Doc):
    """A line break, or a single space when flattened."""
    __slots__ = ()

    def __repr__(self):
        return 'LINE'


LINE = Line()


class Union(Doc):
    """A choice between two layouts of the same content.

    ``left`` is the more horizontal layout and is preferred when its
    first line fits. Both sides must flatten to the same text; this is
    not checked.
    """
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right

    def fields(self):
        return (), (self.left, self.right)

    def __repr__(self):
        return f'Union({repr(self.left)}, {repr(self.right)})'


SPACE = Text(' ')


def flatten(doc):
    """Returns the single-line form of ``doc``: every ``Line`` becomes a
    space and every ``Union`` takes its left side."""
    # Post-order over an explicit stack; results are collected
    # on ``done`` and combined when a node's children are finished.
    todo = [(doc, False)]
    done = []
    while todo:
        node, children_done = todo.pop()
        if isinstance(node, (Nil, Text)):
            done.append(node)
        elif isinstance(node, Line):
            done.append(SPACE)
        elif isinstance(node, Union):
            todo.append((node.left, False))
        elif isinstance(node, Append):
            if children_done:
                right = done.pop()
                left = done.pop()
                done.append(Append(left, right))
            else:
                todo.append((node, True))
                todo.append((node.right, False))
                todo.append((node.left, False))
        elif isinstance(node, Nest):
            if children_done:
                done.append(Nest(node.indent, done.pop()))
            else:
                todo.append((node, True))
                todo.append((node.doc, False))
        else:
            raise TypeError(
                f"Can't flatten {repr(node)} of type {type(node).__name__}"
            )

    assert len(done) == 1
    return done[0]
