"""
Per-dictionary outcomes and the batch report.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class AcquisitionStatus(Enum):
    """Outcome of processing one dictionary."""

    DONE = 'done'
    ALREADY_PRESENT = 'already present'
    FETCH_FAILED = 'fetch failed'
    FAILED = 'failed'


@dataclass
class AcquisitionResult:
    """Result of acquiring a single dictionary."""

    code: str
    name: str
    status: AcquisitionStatus
    message: Optional[str] = None
    artifacts: List[str] = field(default_factory=list)
    license_found: bool = False

    @property
    def ok(self) -> bool:
        return self.status in (AcquisitionStatus.DONE,
                               AcquisitionStatus.ALREADY_PRESENT)


@dataclass
class CrawlReport:
    """Results of a whole crawl, in catalog order."""

    results: List[AcquisitionResult] = field(default_factory=list)

    def add(self, result: AcquisitionResult):
        self.results.append(result)

    def count(self, status: AcquisitionStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def succeeded(self) -> List[AcquisitionResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[AcquisitionResult]:
        return [r for r in self.results if not r.ok]

    def print_summary(self):
        """Print totals and the list of failed dictionaries."""
        print("=" * 64)
        print("SUMMARY")
        print("=" * 64)
        print(f"Dictionaries processed: {len(self.results)}")
        print(f"  Downloaded: {self.count(AcquisitionStatus.DONE)}")
        print(f"  Already present: {self.count(AcquisitionStatus.ALREADY_PRESENT)}")
        print(f"  Failed: {len(self.failed)}")
        for result in self.failed:
            print(f"    ✗ {result.code} ({result.name}): {result.message}")
        without_license = [r.code for r in self.results
                           if r.status == AcquisitionStatus.DONE and not r.license_found]
        if without_license:
            print(f"  Without license text: {', '.join(without_license)}")
        print("=" * 64)
