"""Test configuration and fixtures for TagSite tests."""

import pytest
import tempfile
import shutil
import logging
from pathlib import Path

BASE_TEMPLATE = """<html><head><title>$TITLE</title></head>
<body><nav>$NAVCLOUD</nav><main>$CONTENT</main></body></html>"""

ABOUT_PAGE = "<p>Tags: $NAVCLOUD</p>"


def write_entry(entries_dir, name, content=None, tags=None):
    """Create one entry directory; None skips the corresponding file."""
    entry_dir = Path(entries_dir) / name
    entry_dir.mkdir(parents=True, exist_ok=True)
    if content is not None:
        (entry_dir / 'content.html').write_text(content, encoding='utf-8')
    if tags is not None:
        (entry_dir / 'tags.txt').write_text(tags, encoding='utf-8')
    return entry_dir


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def logger():
    """The logger the pipeline writes diagnostics to."""
    return logging.getLogger('TagSite')


@pytest.fixture
def site_root(temp_dir):
    """Create a source tree with a template, about page, assets and two entries."""
    root = Path(temp_dir) / 'site'
    static_dir = root / 'static'
    static_dir.mkdir(parents=True)
    (static_dir / 'base.html').write_text(BASE_TEMPLATE, encoding='utf-8')
    (static_dir / 'about.html').write_text(ABOUT_PAGE, encoding='utf-8')
    (static_dir / 'style.css').write_text("body {  color : red ; }\n", encoding='utf-8')

    images_dir = root / 'images'
    (images_dir / 'icons').mkdir(parents=True)
    (images_dir / 'icons' / 'dot.png').write_bytes(b'\x89PNG\r\n\x1a\n')

    (root / 'projectname.txt').write_text('My Project', encoding='utf-8')

    entries_dir = root / 'entries'
    entries_dir.mkdir()
    write_entry(entries_dir, 'alpha', content='<p>A</p>', tags='x y')
    write_entry(entries_dir, 'beta', content='<p>B</p>', tags='y')

    return root


@pytest.fixture
def make_generator(site_root, logger):
    """Factory for a TagSite rooted at the sample source tree."""
    from tagsite.core import TagSite

    def _make(**overrides):
        options = dict(
            output_dir=str(site_root / 'public'),
            entries_dir=str(site_root / 'entries'),
            static_dir=str(site_root / 'static'),
            images_dir=str(site_root / 'images'),
            project_name_file=str(site_root / 'projectname.txt'),
            logger=logger,
        )
        options.update(overrides)
        return TagSite(**options)

    return _make
