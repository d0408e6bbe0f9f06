from dataclasses import dataclass
from typing import Callable, List

from hkfetch.schemas import ResultEntry

Extractor = Callable[[str], List[ResultEntry]]

@dataclass(frozen=True)
class Source:
    key: str        # bundle field filled by this source
    label: str      # name used in console output
    url: str
    extract: Extractor
