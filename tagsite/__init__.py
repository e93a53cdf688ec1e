"""
TagSite - A static site generator for tagged entries.

TagSite reads a directory of entries (an HTML fragment plus a whitespace-
separated tag list each), merges them into a single base template and writes
entry pages, one index page per tag, an entries listing and a home page with
a tag navigation cloud.
"""

__version__ = "1.0.0"

from .core import TagSite
from .tags import build_tag_index
from .templating import Placeholder, render

__all__ = ['TagSite', 'build_tag_index', 'Placeholder', 'render']
