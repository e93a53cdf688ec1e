import os
import logging
import time
from datetime import datetime

from .filesystem import copy_tree, ensure_dir, minify_tree, read_text
from .renderers import (
    build_nav_cloud,
    render_entries_listing,
    render_entry_pages,
    render_home_page,
    render_tag_pages,
)
from .tags import build_tag_index

TEMPLATE_FILENAME = 'base.html'
ABOUT_FILENAME = 'about.html'


class ConsoleFilter(logging.Filter):
    """Let warnings through, plus the build-summary INFO messages."""
    allowed_messages = [
        "Site build completed in",
        "Total entries generated:",
        "Total tag pages generated:",
        "Building home page",
        "Building entries listing",
    ]

    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True
        return any(msg in record.getMessage() for msg in self.allowed_messages)


class TagSite:
    """
    Full-rebuild generator for a directory of tagged entries.

    Reads ``<static_dir>/base.html``, ``<static_dir>/about.html`` and the
    project name file, then writes entry pages, tag pages, the entries listing
    and the home page under ``output_dir``.
    """

    def __init__(self, output_dir='public', entries_dir='entries', static_dir='static', images_dir='images',
                 project_name_file='projectname.txt', entries_title='Entries', minify=False,
                 log_dir=None, logger=None):
        self.output_dir = output_dir
        self.entries_dir = entries_dir
        self.static_dir = static_dir
        self.images_dir = images_dir
        self.project_name_file = project_name_file
        self.entries_title = entries_title
        self.minify = minify
        self.log_dir = log_dir
        self.output_entries_dir = os.path.join(self.output_dir, 'entries')
        self.entries_generated = 0
        self.tags_generated = 0

        if logger is not None:
            self.logger = logger
        else:
            self.setup_logging()

    def setup_logging(self):
        """Set up logging configuration."""
        self.logger = logging.getLogger('TagSite')
        self.logger.setLevel(logging.DEBUG if self.log_dir else logging.INFO)

        if not self.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.addFilter(ConsoleFilter())
            console_handler.setFormatter(logging.Formatter('%(message)s'))
            self.logger.addHandler(console_handler)

            if self.log_dir:
                os.makedirs(self.log_dir, exist_ok=True)
                log_filename = datetime.now().strftime('tagsite_%Y-%m-%d_%H-%M-%S.log')
                file_handler = logging.FileHandler(os.path.join(self.log_dir, log_filename))
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(
                    logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
                self.logger.addHandler(file_handler)

    def read_sources(self):
        """Read the template, about page and project name. Any failure is fatal."""
        template = read_text(os.path.join(self.static_dir, TEMPLATE_FILENAME))
        about_text = read_text(os.path.join(self.static_dir, ABOUT_FILENAME))
        project_name = read_text(self.project_name_file)
        return template, about_text, project_name

    def create_output_dirs(self):
        """Create the output root and the entries output directory."""
        ensure_dir(self.output_dir)
        ensure_dir(self.output_entries_dir)

    def copy_assets(self):
        """Copy the static and images trees into the output root."""
        static_dest = os.path.join(self.output_dir, 'static')
        images_dest = os.path.join(self.output_dir, 'images')

        copy_tree(self.static_dir, static_dest)
        self.logger.info(f"Copied static assets from {self.static_dir}")
        copy_tree(self.images_dir, images_dest)
        self.logger.info(f"Copied images from {self.images_dir}")

        if self.minify:
            count = minify_tree(static_dest, self.logger)
            self.logger.info(f"Minified {count} CSS/JS files")

    def build(self):
        """Main build process."""
        start_time = time.time()
        self.logger.info("Starting site build...")

        template, about_text, project_name = self.read_sources()
        self.create_output_dirs()
        self.copy_assets()

        tag_index = build_tag_index(self.entries_dir, self.logger)

        self.entries_generated = render_entry_pages(
            template, self.entries_dir, self.output_entries_dir, self.logger)
        self.tags_generated = render_tag_pages(template, tag_index, self.output_dir, self.logger)

        nav_cloud = build_nav_cloud(tag_index)
        render_home_page(template, about_text, project_name, nav_cloud, self.output_dir, self.logger)
        render_entries_listing(
            template, self.entries_dir, self.output_entries_dir, self.entries_title, self.logger)

        total_time = time.time() - start_time
        self.logger.info(f"Site build completed in {total_time:.6f} seconds.")
        self.logger.info(f"Total entries generated: {self.entries_generated}")
        self.logger.info(f"Total tag pages generated: {self.tags_generated}")
