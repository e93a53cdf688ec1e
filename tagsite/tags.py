"""
Tag index construction.

Every immediate subdirectory of the entries root is an entry. Its tags come
from a whitespace-separated ``tags.txt``; the index maps each tag to the
entry directories that carry it, in the order the entries were scanned.
"""

import os
import logging
from typing import Dict, List

TAGS_FILENAME = 'tags.txt'

TagIndex = Dict[str, List[str]]


def list_entry_dirs(entries_root) -> List[str]:
    """
    Return the entry directories under entries_root in directory scan order.

    Raises:
        OSError: If entries_root cannot be listed
    """
    entry_dirs = []
    for name in os.listdir(entries_root):
        path = os.path.join(entries_root, name)
        if os.path.isdir(path):
            entry_dirs.append(path)
    return entry_dirs


def parse_tags(text: str) -> List[str]:
    """Split tag file text on whitespace, dropping duplicates but keeping first-seen order."""
    tags = []
    seen = set()
    for token in text.split():
        token = token.strip()
        if token and token not in seen:
            seen.add(token)
            tags.append(token)
    return tags


def is_safe_tag(tag: str) -> bool:
    """Check that a tag can be used as a single directory name in the output."""
    if tag in ('.', '..'):
        return False
    return not any(ch in tag for ch in ('/', '\\', '\x00'))


def read_tags(tags_path, logger=None) -> List[str]:
    """Read one entry's tags file; a missing or unreadable file yields no tags."""
    logger = logger or logging.getLogger('TagSite')
    try:
        with open(tags_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (IOError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error reading tags file {tags_path}: {e}")
        return []

    tags = []
    for tag in parse_tags(text):
        if is_safe_tag(tag):
            tags.append(tag)
        else:
            logger.warning(f"Skipping tag {tag!r} in {tags_path}: not usable as a directory name")
    return tags


def build_tag_index(entries_root, logger=None) -> TagIndex:
    """
    Build the tag -> entry directories mapping for every entry under entries_root.

    A missing or unreadable entries root is logged and produces an empty index.
    Each entry appears at most once under a given tag.
    """
    logger = logger or logging.getLogger('TagSite')
    index: TagIndex = {}

    if not os.path.isdir(entries_root):
        logger.warning(f"Entries directory {entries_root} does not exist or is not a directory.")
        return index

    try:
        entry_dirs = list_entry_dirs(entries_root)
    except (IOError, OSError) as e:
        logger.warning(f"Failed to read the entries directory {entries_root}: {e}")
        return index

    for entry_dir in entry_dirs:
        for tag in read_tags(os.path.join(entry_dir, TAGS_FILENAME), logger):
            index.setdefault(tag, []).append(entry_dir)

    logger.debug(f"Indexed {len(entry_dirs)} entries under {len(index)} tags")
    return index
