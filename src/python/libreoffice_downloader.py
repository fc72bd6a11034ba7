"""
LibreOffice dictionary downloader.

Fetches the word list, affix rules and license text of one dictionary,
normalizes them and writes them to dictionaries/<code>/ together with the
.spdx and .source stamps. A dictionary whose index.dic already exists is
skipped without touching the network.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
from pathlib import Path
from typing import Optional
import requests

from acquisition_result import AcquisitionResult, AcquisitionStatus
from content_normalizer import force_utf8_encoding, normalize_content
from crawl_config import (AFF_FILENAME, DIC_FILENAME, LICENSE_FILENAME,
                          SOURCE_FILENAME, SPDX_FILENAME, CrawlConfig)
from dictionary_catalog import DictionaryDescriptor


class FetchError(Exception):
    """A remote file could not be downloaded."""

    def __init__(self, url: str, reason: str):
        super().__init__(reason)
        self.url = url
        self.reason = reason


class LibreOfficeDownloader:
    """Download dictionaries from the LibreOffice repository."""

    def __init__(self, config: CrawlConfig):
        self.config = config

    def build_url(self, dictionary: DictionaryDescriptor, file_name: str) -> str:
        """Build the raw download URL of a file inside a dictionary folder."""
        return f"{self.config.base_url}/{dictionary.folder}/{file_name}"

    def fetch_text(self, url: str) -> str:
        """Download a text file, raising FetchError on any failure."""
        try:
            response = requests.get(url)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        if not response.ok:
            raise FetchError(url, f"HTTP {response.status_code}")

        return response.content.decode('utf-8', errors='replace')

    def fetch_optional_text(self, url: str) -> Optional[str]:
        """Download a text file, returning None if it is not available."""
        try:
            return self.fetch_text(url)
        except FetchError:
            return None

    def acquire(self, dictionary: DictionaryDescriptor) -> AcquisitionResult:
        """Download and store all artifacts of one dictionary."""
        dest_dir = self.config.dictionary_dir(dictionary.code)
        label = f"{dictionary.code} ({dictionary.name})"

        if (dest_dir / DIC_FILENAME).exists():
            print(f"  ✓ {label} - already exists")
            return AcquisitionResult(dictionary.code, dictionary.name,
                                     AcquisitionStatus.ALREADY_PRESENT)

        print(f"  Processing {label}...")
        dest_dir.mkdir(parents=True, exist_ok=True)
        result = AcquisitionResult(dictionary.code, dictionary.name,
                                   AcquisitionStatus.DONE)

        try:
            content = self.fetch_text(self.build_url(dictionary, dictionary.dic_file))
        except FetchError as e:
            return self._fetch_failed(result, '.dic', e)
        self._write(dest_dir / DIC_FILENAME, normalize_content(content), result)

        try:
            content = self.fetch_text(self.build_url(dictionary, dictionary.aff_file))
        except FetchError as e:
            return self._fetch_failed(result, '.aff', e)
        content = normalize_content(force_utf8_encoding(content))
        self._write(dest_dir / AFF_FILENAME, content, result)

        self._write(dest_dir / SPDX_FILENAME, dictionary.license + '\n', result)
        self._write(dest_dir / SOURCE_FILENAME, self.config.source_url + '\n', result)

        content = self.fetch_optional_text(
            self.build_url(dictionary, dictionary.license_file))
        if content is None:
            print("    - No license file found")
        else:
            self._write(dest_dir / LICENSE_FILENAME, normalize_content(content), result)
            result.license_found = True

        print(f"  ✓ {label} - done")
        return result

    def _write(self, path: Path, content: str, result: AcquisitionResult):
        """Write one artifact as UTF-8 with LF line endings."""
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
        result.artifacts.append(path.name)
        print(f"    ✓ {path.name}")

    def _fetch_failed(self, result: AcquisitionResult, suffix: str,
                      error: FetchError) -> AcquisitionResult:
        print(f"    ✗ Failed to download {suffix}: {error.reason}")
        result.status = AcquisitionStatus.FETCH_FAILED
        result.message = f"{suffix} {error.url}: {error.reason}"
        return result
