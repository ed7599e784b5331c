"""
Delimited-text parsing for keyword uploads.
Each line is `keyword[,volume]`.
"""
import csv
import os
from typing import List, Tuple, Optional

from config.settings import IngestionSettings, get_settings
from core.exceptions import UploadError
from core.logger import get_logger
from ingestion.validator import is_number_literal, parse_volume_field

logger = get_logger(__name__)


class CSVParser:
    """
    Parses keyword lists from CSV/TXT content and typed input.
    """

    HEADER_MARKER = "keyword"

    def __init__(self, settings: Optional[IngestionSettings] = None):
        self.settings = settings or get_settings().ingestion
        self.skipped_rows: List[str] = []
        self.header_skipped = False

    def parse_text(self, text: str) -> Tuple[List[str], List[int]]:
        """
        Parse uploaded file text into keywords and volumes.

        A first line containing "keyword" is treated as a header and
        dropped. Rows whose first field is a pure number are dropped as
        malformed. Volumes are read by their leading integer digits.

        Args:
            text: Decoded file content

        Returns:
            Tuple of (keywords, volumes)
        """
        self.skipped_rows = []
        self.header_skipped = False

        keywords = []
        volumes = []

        for index, line in enumerate(self._split_lines(text)):
            if index == 0 and self.HEADER_MARKER in line.lower():
                self.header_skipped = True
                continue

            fields = self._split_fields(line)
            first = fields[0] if fields else ""

            if not first:
                continue

            if self.is_numeric(first):
                self.skipped_rows.append(line)
                continue

            keywords.append(first)
            volumes.append(
                parse_volume_field(fields[1]) if len(fields) > 1 else 0
            )

        if self.skipped_rows:
            logger.debug(
                f"Skipped {len(self.skipped_rows)} rows with numeric keywords"
            )

        return keywords, volumes

    def parse_manual_input(self, text: str) -> Tuple[List[str], List[int]]:
        """
        Parse typed keywords, one `keyword[,volume]` per line.

        No header detection or numeric filtering is applied.

        Args:
            text: Text area content

        Returns:
            Tuple of (keywords, volumes)
        """
        keywords = []
        volumes = []

        for line in self._split_lines(text):
            fields = self._split_fields(line)
            if fields and fields[0]:
                keywords.append(fields[0])
                volumes.append(
                    parse_volume_field(fields[1]) if len(fields) > 1 else 0
                )

        return keywords, volumes

    def read_upload(self, content: bytes, filename: str) -> str:
        """
        Check and decode an uploaded keyword file.

        Args:
            content: Raw file bytes
            filename: Original file name

        Returns:
            Decoded text

        Raises:
            UploadError: On a disallowed extension, oversized or
                undecodable file
        """
        ext = os.path.splitext(filename or "")[1].lower()
        if ext not in self.settings.allowed_extensions:
            raise UploadError("Only CSV or TXT files allowed", filename)

        if len(content) > self.settings.max_upload_bytes:
            raise UploadError(
                f"File exceeds {self.settings.max_upload_mb} MB limit",
                filename
            )

        for enc in self.settings.encodings:
            try:
                return content.decode(enc)
            except UnicodeDecodeError:
                continue

        raise UploadError(
            "Could not decode file with any supported encoding",
            filename
        )

    def parse_upload(
        self,
        content: bytes,
        filename: str
    ) -> Tuple[List[str], List[int]]:
        """Decode an uploaded file and parse its rows."""
        return self.parse_text(self.read_upload(content, filename))

    @staticmethod
    def is_numeric(value: str) -> bool:
        """Whether a field is a pure number."""
        return is_number_literal(value)

    @staticmethod
    def count_keywords(text: str) -> int:
        """Preview count: non-empty lines minus one header line."""
        lines = [line for line in text.split("\n") if line.strip()]
        return max(0, len(lines) - 1)

    @staticmethod
    def _split_lines(text: str) -> List[str]:
        """Split into trimmed, non-empty lines."""
        return [
            line.strip()
            for line in (text or "").split("\n")
            if line.strip()
        ]

    @staticmethod
    def _split_fields(line: str) -> List[str]:
        """Split one line on commas, honoring CSV quoting."""
        try:
            row = next(csv.reader([line]))
        except (csv.Error, StopIteration):
            row = line.split(",")
        return [part.strip() for part in row]
