"""
Page renderers for the three page families TagSite emits.

Every renderer fills the same base template through
:func:`tagsite.templating.render` and writes ``index.html`` files under the
output root. ``$NAVCLOUD`` is blank on every page except the home page.
"""

import os
import logging

from .filesystem import ensure_dir, read_text_lossy, write_page
from .tags import TagIndex, list_entry_dirs
from .templating import Placeholder, page_values, render

CONTENT_FILENAME = 'content.html'
PAGE_FILENAME = 'index.html'


def entry_title(entry_dir):
    """An entry's title is its directory name."""
    return os.path.basename(os.path.normpath(entry_dir))


def build_nav_cloud(index: TagIndex) -> str:
    """Concatenate one link per tag, sorted by tag name."""
    return ''.join(f'<a href="{tag}/{PAGE_FILENAME}">{tag}</a>' for tag in sorted(index))


def render_entry_pages(template, entries_root, output_entries_dir, logger=None):
    """
    Render ``<output_entries_dir>/<title>/index.html`` for every entry.

    Entries without a content.html are logged and skipped; their output
    directory is still created.

    Returns:
        Number of entry pages written
    """
    logger = logger or logging.getLogger('TagSite')
    try:
        entry_dirs = list_entry_dirs(entries_root)
    except (IOError, OSError) as e:
        logger.warning(f"Cannot list entries in {entries_root}: {e}")
        return 0

    written = 0
    for entry_dir in entry_dirs:
        title = entry_title(entry_dir)
        page_dir = os.path.join(output_entries_dir, title)
        ensure_dir(page_dir)

        content_path = os.path.join(entry_dir, CONTENT_FILENAME)
        if not os.path.isfile(content_path):
            logger.warning(f"No {CONTENT_FILENAME} found in {entry_dir}")
            continue

        try:
            content = read_text_lossy(content_path)
        except (IOError, OSError) as e:
            logger.warning(f"Failed to read {content_path}: {e}")
            continue

        html = render(template, page_values(content, title))
        write_page(os.path.join(page_dir, PAGE_FILENAME), html)
        logger.debug(f"Wrote entry page for {title}")
        written += 1

    return written


def render_tag_pages(template, index: TagIndex, public_dir, logger=None):
    """
    Render ``<public_dir>/<tag>/index.html`` for every tag, in sorted tag order.

    Entries are listed in the order they were indexed.

    Returns:
        Number of tag pages written
    """
    logger = logger or logging.getLogger('TagSite')
    written = 0

    for tag in sorted(index):
        tag_dir = os.path.join(public_dir, tag)
        ensure_dir(tag_dir)

        links = []
        for entry_dir in index[tag]:
            title = entry_title(entry_dir)
            links.append(f'<a href="../entries/{title}/{PAGE_FILENAME}">{title}</a><br>')

        html = render(template, page_values(''.join(links), tag))
        write_page(os.path.join(tag_dir, PAGE_FILENAME), html)
        logger.debug(f"Wrote tag page for {tag} ({len(links)} entries)")
        written += 1

    return written


def render_home_page(template, about_text, project_name, nav_cloud, public_dir, logger=None):
    """Render the home page: the about text with its nav cloud resolved."""
    logger = logger or logging.getLogger('TagSite')
    logger.info("Building home page")

    content = render(about_text, {Placeholder.NAVCLOUD: nav_cloud})
    html = render(template, page_values(content, project_name))
    write_page(os.path.join(public_dir, PAGE_FILENAME), html)


def render_entries_listing(template, entries_root, output_entries_dir, title='Entries', logger=None):
    """Render ``<output_entries_dir>/index.html`` linking every entry, sorted by title."""
    logger = logger or logging.getLogger('TagSite')
    logger.info("Building entries listing")

    try:
        titles = sorted(entry_title(d) for d in list_entry_dirs(entries_root))
    except (IOError, OSError) as e:
        logger.warning(f"Cannot list entries in {entries_root}: {e}")
        titles = []

    content = ''.join(f'<a href="{t}/{PAGE_FILENAME}">{t}</a><br>' for t in titles)
    html = render(template, page_values(content, title))
    write_page(os.path.join(output_entries_dir, PAGE_FILENAME), html)
