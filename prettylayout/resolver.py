"""Width-aware resolution of document choices.

A ``Resolver`` walks a worklist of ``(indent, doc)`` pairs, left to
right, and turns an unresolved ``Doc`` into a stream of ``SText`` and
``SLine`` items. The worklist is a linked list of ``Cell``s, and cells
are interned per resolver: the same ``(indent, doc, rest)`` always gives
the same cell, whether it is reached by the output or by a lookahead.

At a ``Union`` the left alternative is kept if its layout fits on the
current line, up to its first line break; otherwise the right one is
used. Decisions are never revisited. Whether the layout from a cell at
a given column fits is computed once and remembered, so every choice is
decided a single time no matter how many lookaheads pass over it.
"""
import logging

from .doc import (
    Append,
    Line,
    Nest,
    Nil,
    Text,
    Union,
)
from .sdoc import SLine, SText

logger = logging.getLogger(__name__)


class Cell:
    __slots__ = ('indent', 'doc', 'rest')

    def __init__(self, indent, doc, rest):
        self.indent = indent
        self.doc = doc
        self.rest = rest

    def __repr__(self):
        return f'Cell({repr(self.indent)}, {repr(self.doc)}, ...)'


class Resolver:
    def __init__(self, width):
        self.width = width
        self._cells = {}
        # (union cell, column) -> whether its layout fits
        self._fits = {}

    def cell(self, indent, doc, rest):
        key = (indent, id(doc), id(rest))
        try:
            return self._cells[key]
        except KeyError:
            cell = self._cells[key] = Cell(indent, doc, rest)
            return cell

    def worklist(self, pairs):
        """Returns the cell list for an iterable of ``(indent, doc)``
        pairs, first pair first."""
        head = None
        for indent, doc in reversed(list(pairs)):
            head = self.cell(indent, doc, head)
        return head

    def _step(self, cell):
        """Expands an ``Append`` or ``Nest`` at the head of ``cell``."""
        doc = cell.doc
        if isinstance(doc, Append):
            return self.cell(
                cell.indent,
                doc.left,
                self.cell(cell.indent, doc.right, cell.rest),
            )
        return self.cell(cell.indent + doc.indent, doc.doc, cell.rest)

    def _alternatives(self, cell):
        doc = cell.doc
        return (
            self.cell(cell.indent, doc.left, cell.rest),
            self.cell(cell.indent, doc.right, cell.rest),
        )

    def be(self, column, cell):
        while cell is not None:
            doc = cell.doc

            if isinstance(doc, Nil):
                cell = cell.rest
            elif isinstance(doc, (Append, Nest)):
                cell = self._step(cell)
            elif isinstance(doc, Text):
                yield SText(doc.value)
                column += len(doc.value)
                cell = cell.rest
            elif isinstance(doc, Line):
                yield SLine(cell.indent)
                column = cell.indent
                cell = cell.rest
            elif isinstance(doc, Union):
                cell = self.better(column, *self._alternatives(cell))
            else:
                raise TypeError(
                    f"Can't lay out {repr(doc)} of type {type(doc).__name__}"
                )

    def better(self, column, when_fits, otherwise):
        """Chooses ``when_fits`` if its layout fits in the rest of the
        line at ``column``, else ``otherwise``."""
        if self.fits_from(column, when_fits):
            return when_fits
        return otherwise

    def fits_from(self, column, cell):
        """Returns True if the layout of ``cell`` starting at ``column``
        fits in the width up to its first line break.

        The layout of a ``Union`` fits iff its left side fits, or else its
        right side does, since the left side is chosen exactly when it
        fits. The pending unions are kept on an explicit stack."""
        pending = []
        result = self._scan(column, cell)
        while True:
            if isinstance(result, tuple):
                key = result
                if key in self._fits:
                    result = self._fits[key]
                    continue
                left, _ = self._alternatives(key[0])
                pending.append((key, False))
                result = self._scan(key[1], left)
                continue

            if not pending:
                return result

            key, tried_right = pending.pop()
            if result or tried_right:
                self._fits[key] = result
            else:
                _, right = self._alternatives(key[0])
                pending.append((key, True))
                result = self._scan(key[1], right)

    def _scan(self, column, cell):
        """Advances through text up to the next line break or choice.

        Returns a bool when the answer is known, or the ``(cell, column)``
        of the ``Union`` that has to be decided first."""
        width = self.width
        if column > width:
            return False

        while cell is not None:
            doc = cell.doc

            if isinstance(doc, Nil):
                cell = cell.rest
            elif isinstance(doc, (Append, Nest)):
                cell = self._step(cell)
            elif isinstance(doc, Text):
                column += len(doc.value)
                if column > width:
                    return False
                cell = cell.rest
            elif isinstance(doc, Line):
                return True
            elif isinstance(doc, Union):
                return (cell, column)
            else:
                raise TypeError(
                    f"Can't lay out {repr(doc)} of type {type(doc).__name__}"
                )

        return True


def best(width, column, doc):
    """Resolves ``doc`` for a page ``width`` characters wide, starting
    at output column ``column`` with no indentation.

    Returns an iterator of ``SText`` and ``SLine`` items."""
    return be(width, column, [(0, doc)])


def be(width, column, pairs):
    """Resolves a worklist given as ``(indent, doc)`` pairs."""
    logger.debug('Resolving layout for width %d from column %d', width, column)
    resolver = Resolver(width)
    return resolver.be(column, resolver.worklist(pairs))


def fits(width, sdocs):
    """Returns True if the resolved ``sdocs`` can be output within
    ``width`` characters up to its first line break.

    A negative ``width`` never fits; a line break always does, since the
    next line starts with a fresh budget."""
    if width < 0:
        return False

    for sdoc in sdocs:
        if isinstance(sdoc, SLine):
            return True

        width -= len(sdoc.value)
        if width < 0:
            return False

    return True
