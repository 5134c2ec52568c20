"""Domain-level results for the size comparison."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .models import SizeMeasurement


class Verdict(Enum):
    DIRECT_SMALLER = "Direct compression resulted in a smaller file."
    NESTED_SMALLER = "Compressing the non-compressed zip file resulted in a smaller file."
    EQUAL = "Both methods resulted in files of the same size."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ComparisonReport:
    uncompressed: SizeMeasurement
    direct: SizeMeasurement
    container: SizeMeasurement
    compressed: SizeMeasurement
    verdict: Verdict

    @property
    def savings_bytes(self) -> int:
        """Bytes saved by the nested strategy; negative when direct wins."""
        return self.direct.size_bytes - self.compressed.size_bytes

    def ratio(self, measurement: SizeMeasurement) -> float:
        if self.uncompressed.size_bytes == 0:
            return 0.0
        return measurement.size_bytes / self.uncompressed.size_bytes

    def winner_labels(self) -> set[str]:
        # Ties highlight both, matching the <= / >= colouring of the console report.
        labels: set[str] = set()
        if self.direct.size_bytes <= self.compressed.size_bytes:
            labels.add(self.direct.label)
        if self.direct.size_bytes >= self.compressed.size_bytes:
            labels.add(self.compressed.label)
        return labels

    def iter_measurements(self) -> Iterable[SizeMeasurement]:
        yield self.uncompressed
        yield self.direct
        yield self.container
        yield self.compressed
