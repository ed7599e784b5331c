"""
CSV and text export for classification results.
"""
import csv
import io
from datetime import date
from typing import Optional

from labeling.intent_classifier import ClassificationResult, IntentType


class CSVExporter:
    """Exports classified keywords to CSV and plain text."""

    FIELDNAMES = ["S.N.", "Keyword", "Volume", "Intent"]

    def export_keywords(self, result: ClassificationResult) -> str:
        """
        Export keywords grouped by intent.

        Serial numbers restart at 1 for each intent.

        Args:
            result: Classification result

        Returns:
            CSV content as string
        """
        output = io.StringIO()

        writer = csv.DictWriter(
            output,
            fieldnames=self.FIELDNAMES,
            lineterminator="\n"
        )
        writer.writeheader()

        for intent in IntentType:
            for index, record in enumerate(result.bucket(intent), start=1):
                writer.writerow({
                    "S.N.": index,
                    "Keyword": record.keyword,
                    "Volume": record.volume,
                    "Intent": intent.value
                })

        return output.getvalue()

    def export_text_report(self, result: ClassificationResult) -> str:
        """
        Export a plain-text report for copying.

        Args:
            result: Classification result

        Returns:
            Report text listing every non-empty intent
        """
        lines = [
            "Keyword Analysis Results",
            "=====================",
            ""
        ]

        for intent in IntentType:
            records = result.bucket(intent)
            if not records:
                continue

            lines.append(f"{intent.value} ({len(records)}):")
            for index, record in enumerate(records, start=1):
                lines.append(
                    f"  {index}. {record.keyword} - {record.volume}"
                )
            lines.append("")

        return "\n".join(lines) + "\n"

    @staticmethod
    def default_filename(on: Optional[date] = None) -> str:
        """Download name, e.g. keywords-2024-05-01.csv."""
        on = on or date.today()
        return f"keywords-{on.isoformat()}.csv"


def create_download_link(csv_content: str) -> bytes:
    """
    Create downloadable CSV bytes.

    Args:
        csv_content: CSV content string

    Returns:
        UTF-8 encoded bytes with BOM for Excel compatibility
    """
    # Add BOM for Excel UTF-8 compatibility
    bom = b'\xef\xbb\xbf'
    return bom + csv_content.encode('utf-8')
