"""
File and directory helpers used by the TagSite build.
"""

import os
import shutil
import logging
import csscompressor
import rjsmin

from .errors import SourceReadError, OutputError, AssetCopyError


def read_text(path):
    """Read a required UTF-8 source file."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, e) from e


def read_text_lossy(path):
    """Read a file as text, replacing any bytes that are not valid UTF-8."""
    with open(path, 'rb') as f:
        raw = f.read()
    return raw.decode('utf-8', errors='replace')


def ensure_dir(path):
    """Create a directory (and parents) if it doesn't exist."""
    try:
        os.makedirs(path, exist_ok=True)
    except (IOError, OSError, ValueError) as e:
        raise OutputError(path, e) from e


def write_page(path, html):
    """Write a rendered page, overwriting any previous version."""
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(html)
    except (IOError, OSError, ValueError) as e:
        raise OutputError(path, e) from e


def copy_tree(source, destination):
    """
    Recursively copy ``source`` into ``destination``.

    Existing files in the destination are overwritten; files that only exist
    in the destination are left alone.

    Raises:
        AssetCopyError: If the source is not a directory or a copy fails
    """
    if not os.path.isdir(source):
        raise AssetCopyError(source, "source is not a directory")

    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (IOError, OSError, shutil.Error) as e:
        raise AssetCopyError(source, e) from e


def minify_tree(root, logger=None):
    """
    Write .min.css / .min.js siblings for every stylesheet and script under root.

    Returns:
        Number of files minified
    """
    logger = logger or logging.getLogger('TagSite')
    minified = 0

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for file in sorted(filenames):
            if file.endswith('.css') and not file.endswith('.min.css'):
                compress = csscompressor.compress
                target = file[:-len('.css')] + '.min.css'
            elif file.endswith('.js') and not file.endswith('.min.js'):
                compress = rjsmin.jsmin
                target = file[:-len('.js')] + '.min.js'
            else:
                continue

            source_path = os.path.join(dirpath, file)
            try:
                with open(source_path, 'r', encoding='utf-8') as f:
                    content = f.read()
                with open(os.path.join(dirpath, target), 'w', encoding='utf-8') as f:
                    f.write(compress(content))
                minified += 1
                logger.debug(f"Minified {source_path}")
            except (IOError, OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to minify {source_path}: {e}")

    return minified
