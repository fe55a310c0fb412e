from io import StringIO

from .sdoc import (
    SText,
    SLine,
)


def render_to_stream(stream, sdocs, newline='\n', separator=' '):
    for sdoc in sdocs:
        if isinstance(sdoc, SText):
            stream.write(sdoc.value)
        elif isinstance(sdoc, SLine):
            stream.write(newline + separator * sdoc.indent)
        else:
            raise TypeError(
                f"Can't render {repr(sdoc)} of type {type(sdoc).__name__}"
            )


def layout(sdocs, newline='\n', separator=' '):
    """Renders a resolved layout to a str, writing each line break as
    ``newline`` followed by ``indent`` copies of ``separator``."""
    stream = StringIO()
    render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()
