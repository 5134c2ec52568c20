"""Domain services implementing the comparison rules."""
from __future__ import annotations

from pathlib import Path

from .models import SizeMeasurement
from .results import ComparisonReport, Verdict

UNCOMPRESSED_LABEL = "Total size of uncompressed files"
DIRECT_LABEL = "Directly compressed zip file size"
CONTAINER_LABEL = "Non-compressed zip file size"
COMPRESSED_LABEL = "Compressed nested non-compressed zip file size"


class SizeComparator:
    """Turns raw byte counts into a report with a verdict.

    Only the direct archive and the recompressed container take part in the
    verdict; the stored container size is informational.
    """

    def compare(
        self,
        source_directory: Path,
        uncompressed_bytes: int,
        direct_archive: Path,
        direct_bytes: int,
        container: Path,
        container_bytes: int,
        compressed: Path,
        compressed_bytes: int,
    ) -> ComparisonReport:
        return ComparisonReport(
            uncompressed=SizeMeasurement(UNCOMPRESSED_LABEL, source_directory, uncompressed_bytes),
            direct=SizeMeasurement(DIRECT_LABEL, direct_archive, direct_bytes),
            container=SizeMeasurement(CONTAINER_LABEL, container, container_bytes),
            compressed=SizeMeasurement(COMPRESSED_LABEL, compressed, compressed_bytes),
            verdict=self.verdict(direct_bytes, compressed_bytes),
        )

    @staticmethod
    def verdict(direct_bytes: int, compressed_bytes: int) -> Verdict:
        if direct_bytes < compressed_bytes:
            return Verdict.DIRECT_SMALLER
        if direct_bytes > compressed_bytes:
            return Verdict.NESTED_SMALLER
        return Verdict.EQUAL
