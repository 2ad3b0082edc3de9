"""looptomd - convert Microsoft Loop HTML exports to Markdown.

Quick usage::

    from looptomd import convert_file

    result = convert_file("raw.html", "notes.md")
    print(result.line_count)

In-memory::

    from looptomd import convert_html

    print(convert_html(html).markdown)

Custom markers for a different Loop build::

    from looptomd import convert_html, load_settings

    settings = load_settings("loop.yaml")
    markdown = convert_html(html, settings).markdown
"""

from looptomd.converter import ConversionResult, convert_file, convert_html, convert_soup
from looptomd.errors import (
    ConfigError,
    ContentNotFoundError,
    InputNotFoundError,
    InputReadError,
    LoopToMdError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
    UsageError,
)
from looptomd.settings import ExtractorSettings, load_settings

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "ContentNotFoundError",
    "ConversionResult",
    "ExtractorSettings",
    "InputNotFoundError",
    "InputReadError",
    "LoopToMdError",
    "MissingArgumentError",
    "UnexpectedArgumentError",
    "UnknownOptionError",
    "UsageError",
    "convert_file",
    "convert_html",
    "convert_soup",
    "load_settings",
]
