#!/usr/bin/env python3
"""
Settings loader for the TagSite generator.
Supports configuration from tagsite.yml, tagsite.yaml, or tagsite.json files.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional

from .errors import ConfigError


class TagSiteSettings:
    """Load and manage TagSite configuration settings."""

    # Default configuration; matches the fixed source layout
    DEFAULT_SETTINGS = {
        'output': 'public',
        'entries': 'entries',
        'static': 'static',
        'images': 'images',
        'project_name_file': 'projectname.txt',
        'entries_title': 'Entries',
        'log_dir': 'logs',
        'minify': False,
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['tagsite.yml', 'tagsite.yaml', 'tagsite.json']

    def __init__(self, config_dir: str = None, logger: logging.Logger = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
            logger: Where to report ignored keys. Defaults to the TagSite logger.
        """
        self.config_dir = config_dir or os.getcwd()
        self.logger = logger or logging.getLogger('TagSite')
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings

        Raises:
            ConfigError: If a config file exists but cannot be loaded
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            loaded_settings = self._load_config_file(config_file)
            if not isinstance(loaded_settings, dict):
                raise ConfigError(f"Configuration file {config_file} must contain a mapping")
            for key, value in loaded_settings.items():
                if key in self.DEFAULT_SETTINGS:
                    self.settings[key] = value
                else:
                    self.logger.warning(f"Ignoring unknown setting '{key}' in {config_file}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    return yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    return json.load(f) or {}
                else:
                    raise ConfigError(f"Unsupported config file format: {file_ext}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {config_path}: {e}") from e
        except (IOError, OSError) as e:
            raise ConfigError(f"Error reading configuration file {config_path}: {e}") from e

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        filename = f'tagsite.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    f.write("# TagSite Configuration File\n")
                    f.write("# Paths are relative to the directory you run tagsite from\n\n")
                    f.write("# Source layout\n")
                    f.write("entries: entries\n")
                    f.write("static: static  # must contain base.html and about.html\n")
                    f.write("images: images\n")
                    f.write("project_name_file: projectname.txt\n\n")
                    f.write("# Output\n")
                    f.write("output: public\n")
                    f.write("entries_title: Entries\n\n")
                    f.write("# Build settings\n")
                    f.write("log_dir: logs  # null disables the build log file\n")
                    f.write("minify: false\n")
                elif file_format == 'json':
                    json.dump(self.DEFAULT_SETTINGS, f, indent=2)
                else:
                    raise ConfigError(f"Unsupported config file format: {file_format}")
        except (IOError, OSError) as e:
            raise ConfigError(f"Error writing configuration file {config_path}: {e}") from e

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        for key, value in args_dict.items():
            if value is not None and key in self.DEFAULT_SETTINGS:
                merged[key] = value

        return merged
