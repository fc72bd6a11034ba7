"""
Crawler configuration: upstream locations and local output layout.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
from dataclasses import dataclass
from pathlib import Path

# Pinned to the master branch of the LibreOffice dictionaries repository
LIBREOFFICE_BASE_URL = "https://raw.githubusercontent.com/LibreOffice/dictionaries/master"
LIBREOFFICE_SOURCE_URL = "https://github.com/LibreOffice/dictionaries"

# Artifact names inside each dictionaries/<code>/ directory
DIC_FILENAME = 'index.dic'
AFF_FILENAME = 'index.aff'
SPDX_FILENAME = '.spdx'
SOURCE_FILENAME = '.source'
LICENSE_FILENAME = 'license'


def find_project_dir(script_dir: Path) -> Path:
    """Locate the project root from the directory holding the scripts.

    Falls back to the working directory for installed copies.
    """
    if script_dir.name == 'python':
        return script_dir.parent.parent
    return Path.cwd()


@dataclass(frozen=True)
class CrawlConfig:
    """Immutable crawler settings."""

    dictionaries_dir: Path = find_project_dir(Path(__file__).resolve().parent) / 'dictionaries'
    base_url: str = LIBREOFFICE_BASE_URL
    source_url: str = LIBREOFFICE_SOURCE_URL

    def dictionary_dir(self, code: str) -> Path:
        """Local directory for one dictionary."""
        return self.dictionaries_dir / code
