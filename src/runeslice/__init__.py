"""runeslice — Unicode-aware text slicing by character, grapheme, or display width.

Built around a pure segmentation and range-resolution engine with a
thin, layered command-line shell.
"""

from runeslice.version import __version__

__all__: list[str] = ["__version__"]
