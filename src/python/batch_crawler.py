"""
Sequential crawl over the dictionary catalog.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
from typing import Iterable

from acquisition_result import AcquisitionResult, AcquisitionStatus, CrawlReport
from dictionary_catalog import DictionaryDescriptor
from libreoffice_downloader import LibreOfficeDownloader


class BatchCrawler:
    """Acquire every dictionary in order, isolating failures per dictionary."""

    def __init__(self, downloader: LibreOfficeDownloader):
        self.downloader = downloader

    def run(self, dictionaries: Iterable[DictionaryDescriptor]) -> CrawlReport:
        report = CrawlReport()
        for dictionary in dictionaries:
            try:
                result = self.downloader.acquire(dictionary)
            except Exception as e:
                print(f"  ✗ {dictionary.code} failed: {e}")
                result = AcquisitionResult(dictionary.code, dictionary.name,
                                           AcquisitionStatus.FAILED, message=str(e))
            report.add(result)
        return report
