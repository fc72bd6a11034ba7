"""
LibreOffice dictionary catalog.

Copyright (c) 2025 John Byrd

SPDX-License-Identifier: BSD-3-Clause
"""
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class DictionaryDescriptor:
    """Immutable description of one upstream dictionary."""

    code: str
    folder: str
    name: str
    license: str
    license_file: str
    dic_path: Optional[str] = None
    aff_path: Optional[str] = None

    @property
    def dic_file(self) -> str:
        """Word list filename, relative to the source folder."""
        return self.dic_path or f"{self.folder}.dic"

    @property
    def aff_file(self) -> str:
        """Affix rules filename, relative to the source folder."""
        return self.aff_path or f"{self.folder}.aff"


# Note: zu (Zulu) is missing on purpose, LibreOffice only ships hyphenation for it
LIBREOFFICE_DICTIONARIES: Tuple[DictionaryDescriptor, ...] = (
    DictionaryDescriptor('af', 'af_ZA', 'Afrikaans', 'LGPL-3.0', 'README_af_ZA.txt'),
    DictionaryDescriptor('an', 'an_ES', 'Aragonese', 'GPL-3.0', 'LICENSES-en.txt'),
    DictionaryDescriptor('ar', 'ar', 'Arabic', 'GPL-3.0', 'COPYING.txt'),
    DictionaryDescriptor('as', 'as_IN', 'Assamese', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('be', 'be_BY', 'Belarusian', 'GPL-3.0', 'README_be_BY.txt',
                         dic_path='be-official.dic', aff_path='be-official.aff'),
    DictionaryDescriptor('bn', 'bn_BD', 'Bengali', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('bo', 'bo', 'Tibetan', 'GPL-3.0', 'LICENSE-en.txt'),
    DictionaryDescriptor('bs', 'bs_BA', 'Bosnian', 'GPL-3.0', 'registration/LICENSE'),
    DictionaryDescriptor('ckb', 'ckb', 'Central Kurdish', 'GPL-3.0', 'LICENSES-en.txt',
                         dic_path='dictionaries/ckb.dic', aff_path='dictionaries/ckb.aff'),
    DictionaryDescriptor('gu', 'gu_IN', 'Gujarati', 'GPL-3.0', 'COPYING'),
    DictionaryDescriptor('gug', 'gug', 'Guarani', 'GPL-3.0', 'LICENSE.txt'),
    DictionaryDescriptor('hi', 'hi_IN', 'Hindi', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('id', 'id', 'Indonesian', 'GPL-3.0', 'LICENSE-dict',
                         dic_path='id_ID.dic', aff_path='id_ID.aff'),
    DictionaryDescriptor('it', 'it_IT', 'Italian', 'GPL-3.0', 'README_it_IT.txt'),
    DictionaryDescriptor('kn', 'kn_IN', 'Kannada', 'GPL-3.0', 'COPYING'),
    DictionaryDescriptor('kmr-Latn', 'kmr_Latn', 'Kurmanji', 'GPL-3.0', 'gpl-3.0.txt'),
    DictionaryDescriptor('lo', 'lo_LA', 'Lao', 'GPL-3.0', 'README_lo_LA.txt'),
    DictionaryDescriptor('mr', 'mr_IN', 'Marathi', 'LGPL-3.0', 'README_mr_IN.txt'),
    DictionaryDescriptor('or', 'or_IN', 'Odia', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('pa', 'pa_IN', 'Punjabi', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('sa', 'sa_IN', 'Sanskrit', 'GPL-3.0', 'COPYING'),
    DictionaryDescriptor('si', 'si_LK', 'Sinhala', 'GPL-3.0', 'COPYING'),
    DictionaryDescriptor('sq', 'sq_AL', 'Albanian', 'GPL-3.0', 'README_sq_AL.txt'),
    DictionaryDescriptor('sw', 'sw_TZ', 'Swahili', 'LGPL-3.0', 'README_sw_TZ.txt'),
    DictionaryDescriptor('ta', 'ta_IN', 'Tamil', 'GPL-3.0', 'COPYING'),
    DictionaryDescriptor('te', 'te_IN', 'Telugu', 'GPL-2.0', 'COPYING'),
    DictionaryDescriptor('th', 'th_TH', 'Thai', 'LGPL-2.1', 'README_th_TH.txt'),
)


def check_unique_codes(dictionaries: Iterable[DictionaryDescriptor]):
    """Raise ValueError if two descriptors would share a local directory."""
    counts = Counter(d.code for d in dictionaries)
    duplicates = sorted(code for code, n in counts.items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate dictionary codes: {', '.join(duplicates)}")
