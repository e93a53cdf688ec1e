"""
Fatal error types for TagSite.

Anything raised from here aborts the whole build. Recoverable problems
(a missing tags.txt, an entry without content.html) are logged instead.
"""


class TagSiteError(Exception):
    """Base class for every error that stops a build."""


class SourceReadError(TagSiteError):
    """A required source file could not be read."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Failed to read {path}: {reason}")


class OutputError(TagSiteError):
    """An output directory or page could not be written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class AssetCopyError(TagSiteError):
    """An asset tree could not be copied into the output root."""

    def __init__(self, source, reason):
        self.source = source
        super().__init__(f"Failed to copy assets from {source}: {reason}")


class ConfigError(TagSiteError):
    """The configuration file exists but is not usable."""
