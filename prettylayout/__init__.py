# -*- coding: utf-8 -*-

"""Top-level package for prettylayout."""

__version__ = '0.1.0'

from .api import (
    nil,
    append,
    nest,
    text,
    line,
    group,
    concat,
    space,
    newline,
    space_newline,
    fold_doc,
    spread,
    stack,
    bracket,
    fill_words,
    fill,
)
from .doc import Doc, NIL, LINE, cast_doc, flatten
from .resolver import best
from .render import layout, render_to_stream


__all__ = [
    'pretty',
    'pformat',
    'Doc',
    'NIL',
    'LINE',
    'nil',
    'append',
    'nest',
    'text',
    'line',
    'group',
    'concat',
    'cast_doc',
    'flatten',
    'space',
    'newline',
    'space_newline',
    'fold_doc',
    'spread',
    'stack',
    'bracket',
    'fill_words',
    'fill',
    'best',
    'layout',
    'render_to_stream',
]


DEFAULT_WIDTH = 79


def pretty(width, doc):
    """Lays out ``doc`` so that its lines are at most ``width`` characters
    long where possible, and returns it as a str.

    Lines are only longer than ``width`` when a single text fragment
    doesn't fit; text is never split."""
    return layout(best(width, 0, cast_doc(doc)))


def pformat(doc, width=DEFAULT_WIDTH):
    return pretty(width, doc)
