class SDoc(object):
    """An item of a resolved layout.

    A resolved layout is a stream of ``SText`` and ``SLine`` items
    without any remaining choices; the end of the stream is the
    empty layout.
    """
    __slots__ = ()


class SText(SDoc):
    __slots__ = ('value', )

    def __init__(self, value):
        assert isinstance(value, str)
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, SText):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(('SText', self.value))

    def __repr__(self):
        return f'SText({repr(self.value)})'


class SLine(SDoc):
    __slots__ = ('indent', )

    def __init__(self, indent):
        assert isinstance(indent, int)
        self.indent = indent

    def __eq__(self, other):
        if not isinstance(other, SLine):
            return NotImplemented
        return self.indent == other.indent

    def __hash__(self):
        return hash(('SLine', self.indent))

    def __repr__(self):
        return f'SLine({repr(self.indent)})'
