#!/usr/bin/env python3
"""
Command-line interface for TagSite - tagged entry static site generator.
"""

import os
import sys
import argparse
from typing import List, Optional

from . import __version__
from .core import TagSite
from .errors import TagSiteError
from .settings import TagSiteSettings

SAMPLE_BASE_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>$TITLE</title>
    <link rel="stylesheet" href="/static/style.css">
</head>
<body>
    <header><a href="/index.html">Home</a> | <a href="/entries/index.html">Entries</a></header>
    <h1>$TITLE</h1>
    <nav>$NAVCLOUD</nav>
    <main>$CONTENT</main>
</body>
</html>
"""

SAMPLE_ABOUT_HTML = """<p>Welcome! Every entry on this site is tagged. Browse by tag:</p>
<p>$NAVCLOUD</p>
"""

SAMPLE_STYLE_CSS = """body {
    font-family: sans-serif;
    max-width: 48rem;
    margin: 0 auto;
}

nav a {
    margin-right: 0.5rem;
}
"""

SAMPLE_ENTRY_HTML = """<p>This is your first entry. Edit entries/hello-world/content.html to change it,
and entries/hello-world/tags.txt to change its tags.</p>
"""


def write_if_missing(path: str, content: str) -> None:
    """Write a starter file unless something is already there."""
    if os.path.exists(path):
        print(f"File already exists: {os.path.relpath(path)}")
        return
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    print(f"Created: {os.path.relpath(path)}")


def create_starter_structure(root: Optional[str] = None) -> None:
    """Create a starter source tree: template, about page, project name and one entry."""
    root = root or os.getcwd()

    directories = [
        'static',
        'images',
        os.path.join('entries', 'hello-world'),
    ]

    for directory in directories:
        dir_path = os.path.join(root, directory)
        if os.path.exists(dir_path):
            print(f"Directory already exists: {directory}")
        else:
            os.makedirs(dir_path, exist_ok=True)
            print(f"Created directory: {directory}")

    write_if_missing(os.path.join(root, 'static', 'base.html'), SAMPLE_BASE_HTML)
    write_if_missing(os.path.join(root, 'static', 'about.html'), SAMPLE_ABOUT_HTML)
    write_if_missing(os.path.join(root, 'static', 'style.css'), SAMPLE_STYLE_CSS)
    write_if_missing(os.path.join(root, 'projectname.txt'), "My Tagged Site")
    write_if_missing(os.path.join(root, 'entries', 'hello-world', 'content.html'), SAMPLE_ENTRY_HTML)
    write_if_missing(os.path.join(root, 'entries', 'hello-world', 'tags.txt'), "welcome getting-started\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='TagSite - Static site generator for tagged entries')
    parser.add_argument('--output', type=str,
                        help='Output directory for generated site')
    parser.add_argument('--entries', type=str,
                        help='Directory containing one subdirectory per entry')
    parser.add_argument('--static', type=str,
                        help='Static directory holding base.html, about.html and assets')
    parser.add_argument('--images', type=str,
                        help='Images directory to copy to output')
    parser.add_argument('--log-dir', type=str, dest='log_dir',
                        help='Directory for the build log file')
    parser.add_argument('--minify', action='store_true', default=None,
                        help='Write minified copies of CSS and JS assets')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file and starter content')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.init:
            settings_loader = TagSiteSettings()
            config_path = settings_loader.create_sample_config(args.init)
            print(f"Created sample configuration file: {config_path}")

            print("\nCreating starter project structure...")
            create_starter_structure()
            print("\nRun 'tagsite' to build your site.")
            return

        settings_loader = TagSiteSettings()
        settings_loader.load_settings()

        # Command line arguments take precedence
        args_dict = {k: v for k, v in vars(args).items() if v is not None}
        final_settings = settings_loader.merge_with_args(args_dict)

        generator = TagSite(
            output_dir=final_settings['output'],
            entries_dir=final_settings['entries'],
            static_dir=final_settings['static'],
            images_dir=final_settings['images'],
            project_name_file=final_settings['project_name_file'],
            entries_title=final_settings['entries_title'],
            minify=bool(final_settings['minify']),
            log_dir=final_settings['log_dir'],
        )
        generator.build()

    except TagSiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
