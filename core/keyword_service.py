"""
Keyword analysis service.
Turns typed input and uploaded files into classification responses.
"""
from typing import Any, Dict, Optional, Sequence

from clustering.pair_clusterer import PairClusterer
from core.exceptions import UploadError, ValidationError
from core.logger import get_logger
from ingestion.csv_parser import CSVParser
from labeling.intent_classifier import ClassificationResult, KeywordClassifier

logger = get_logger(__name__)

NO_KEYWORDS = "No keywords provided"
NO_FILE = "No file uploaded"


class KeywordAnalysisService:
    """
    Runs ingestion, classification and optional placeholder grouping,
    returning JSON-compatible response dicts.

    Responses:
        success: {"success": True, "keywordsByIntent", "stats",
                  "allKeywords"[, "clusters"]}
        failure: {"success": False, "error": message}
    """

    def __init__(
        self,
        classifier: Optional[KeywordClassifier] = None,
        parser: Optional[CSVParser] = None,
        clusterer: Optional[PairClusterer] = None
    ):
        self.classifier = classifier or KeywordClassifier()
        self.parser = parser or CSVParser()
        self.clusterer = clusterer or PairClusterer(
            classifier=self.classifier
        )
        self.last_result: Optional[ClassificationResult] = None

    def analyze(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None
    ) -> ClassificationResult:
        """
        Classify keywords.

        Raises:
            ValidationError: If no keywords remain after normalization
        """
        logger.info(f"Processing {len(keywords)} keywords")
        return self.classifier.analyze(keywords, volumes)

    def process_keywords(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None,
        include_clusters: bool = False
    ) -> Dict[str, Any]:
        """
        Process a keyword list with optional parallel volumes.

        Args:
            keywords: Keyword strings
            volumes: Optional volumes, used only when lengths match
            include_clusters: Add placeholder clusters to the response

        Returns:
            Response dict
        """
        if not keywords:
            return self._error(NO_KEYWORDS)

        try:
            result = self.analyze(keywords, volumes)
        except ValidationError as e:
            logger.warning(f"Rejected keyword batch: {e.message}")
            return self._error(NO_KEYWORDS)

        return self._success(result, include_clusters)

    def process_text(
        self,
        text: str,
        include_clusters: bool = False
    ) -> Dict[str, Any]:
        """Process typed `keyword[,volume]` lines."""
        keywords, volumes = self.parser.parse_manual_input(text)
        return self.process_keywords(keywords, volumes, include_clusters)

    def process_csv(
        self,
        content: Optional[bytes],
        filename: Optional[str] = None,
        include_clusters: bool = False
    ) -> Dict[str, Any]:
        """
        Process an uploaded CSV/TXT file.

        Args:
            content: Raw file bytes, None when nothing was uploaded
            filename: Original file name
            include_clusters: Add placeholder clusters to the response

        Returns:
            Response dict
        """
        if content is None:
            return self._error(NO_FILE)

        try:
            keywords, volumes = self.parser.parse_upload(content, filename)
        except UploadError as e:
            logger.warning(f"Rejected upload {filename}: {e.message}")
            return self._error(e.message)

        logger.info(f"Processing CSV with {len(keywords)} keywords")
        return self.process_keywords(keywords, volumes, include_clusters)

    def _success(
        self,
        result: ClassificationResult,
        include_clusters: bool
    ) -> Dict[str, Any]:
        self.last_result = result
        response = {"success": True}
        response.update(result.to_dict())

        if include_clusters:
            response["clusters"] = [
                c.to_dict() for c in self.clusterer.cluster_result(result)
            ]

        return response

    @staticmethod
    def _error(message: str) -> Dict[str, Any]:
        return {"success": False, "error": message}

