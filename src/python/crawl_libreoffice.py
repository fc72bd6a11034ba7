#!/usr/bin/env python3
"""
Download Hunspell dictionaries from LibreOffice into dictionaries/<code>/.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
import sys

try:
    import requests  # noqa: F401
except ImportError:
    print("Error: requests module required. Install with: pip install requests")
    sys.exit(1)

from batch_crawler import BatchCrawler
from crawl_config import CrawlConfig
from dictionary_catalog import LIBREOFFICE_DICTIONARIES, check_unique_codes
from libreoffice_downloader import LibreOfficeDownloader


def print_banner(count: int):
    print("=" * 64)
    print("LIBREOFFICE DICTIONARIES DOWNLOADER")
    print("=" * 64)
    print()
    print(f"Adding {count} dictionaries from LibreOffice...")
    print()


def main():
    config = CrawlConfig()
    dictionaries = LIBREOFFICE_DICTIONARIES

    print_banner(len(dictionaries))
    check_unique_codes(dictionaries)

    config.dictionaries_dir.mkdir(parents=True, exist_ok=True)

    crawler = BatchCrawler(LibreOfficeDownloader(config))
    report = crawler.run(dictionaries)

    print()
    report.print_summary()
    print(f"\nDone! Dictionaries are in {config.dictionaries_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
