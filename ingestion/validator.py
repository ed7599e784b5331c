"""
Keyword validation and input normalization.
"""
import math
import numbers
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from core.exceptions import ParseWarning, ValidationError
from core.logger import get_logger

logger = get_logger(__name__)

DECIMAL_LITERAL = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')
RADIX_LITERAL = re.compile(r'^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$')
INFINITY_LITERAL = re.compile(r'^[+-]?Infinity$')
LEADING_INTEGER = re.compile(r'^[+-]?\d+')


def is_number_literal(text: str) -> bool:
    """
    Whether a whole field reads as a number.

    Accepts integer, decimal and exponent forms, unsigned hex/octal/binary
    literals and a signed "Infinity". "nan", "inf" and mixed text do not
    count.
    """
    text = text.strip()
    return bool(
        DECIMAL_LITERAL.match(text)
        or RADIX_LITERAL.match(text)
        or INFINITY_LITERAL.match(text)
    )


def coerce_volume(value: Any) -> int:
    """
    Coerce a raw list volume to a non-negative integer.

    Integers are kept exact. Other numbers are truncated toward zero.
    Strings must be a number as a whole ("500", "12.7", "1e3", "0x1A");
    "300 searches" is not. Anything else, including negatives, NaN,
    infinities and values too large for a float, becomes 0.

    Args:
        value: Raw volume from a keyword/volume list

    Returns:
        Non-negative integer volume
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, numbers.Integral):
        return max(int(value), 0)

    if isinstance(value, numbers.Real):
        return _truncate(value)

    text = str(value).strip()

    if RADIX_LITERAL.match(text):
        return int(text, 0)

    if DECIMAL_LITERAL.match(text):
        if "e" in text.lower():
            return _truncate(text)
        whole = text.split(".")[0]
        return max(int(whole), 0) if whole.lstrip("+-") else 0

    return 0


def parse_volume_field(value: Optional[str]) -> int:
    """
    Read a volume field from a delimited line.

    Only the leading integer digits count: "300 searches" is 300, "12.7"
    is 12 and "1e3" is 1. Fields without leading digits and negatives
    become 0.
    """
    if value is None:
        return 0

    match = LEADING_INTEGER.match(value.strip())
    if not match:
        return 0

    return max(int(match.group(0)), 0)


def _truncate(value: Any) -> int:
    """Truncate a real number or decimal string, 0 when not finite."""
    try:
        number = float(value)
    except OverflowError:
        return 0

    if not math.isfinite(number) or number <= 0:
        return 0

    return int(number)


@dataclass
class NormalizationResult:
    """Result of keyword input normalization."""

    pairs: List[Tuple[str, int]]
    dropped_keywords: int = 0
    volumes_defaulted: bool = False
    recovered_volumes: List[str] = field(default_factory=list)
    warnings: List[ParseWarning] = field(default_factory=list)

    @property
    def keyword_count(self) -> int:
        return len(self.pairs)

    @property
    def total_volume(self) -> int:
        return sum(volume for _, volume in self.pairs)


class KeywordValidator:
    """
    Normalizes raw keyword/volume input before classification.
    """

    def normalize(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None
    ) -> NormalizationResult:
        """
        Pair keywords with volumes, trim keywords and drop empty ones.

        Volumes pair positionally only when both lists have the same
        length; otherwise every volume is 0.

        Args:
            keywords: Raw keyword strings
            volumes: Optional parallel list of raw volumes

        Returns:
            NormalizationResult with (keyword, volume) pairs

        Raises:
            ValidationError: If no keywords remain
        """
        if not keywords:
            raise ValidationError("No keywords provided", field="keywords")

        volumes = list(volumes) if volumes is not None else []
        paired = len(volumes) == len(keywords)

        pairs = []
        dropped = 0
        recovered = []

        for index, raw in enumerate(keywords):
            keyword = str(raw).strip() if raw is not None else ""
            if not keyword:
                dropped += 1
                continue

            if paired:
                raw_volume = volumes[index]
                volume = coerce_volume(raw_volume)
                if volume == 0 and not self._is_zero(raw_volume):
                    recovered.append(keyword)
            else:
                volume = 0

            pairs.append((keyword, volume))

        warnings = [
            ParseWarning(f"Unparseable volume for '{kw}', using 0")
            for kw in recovered
        ]
        if recovered:
            logger.debug(
                f"{len(recovered)} volumes could not be parsed, using 0"
            )
        if dropped:
            logger.debug(f"Dropped {dropped} empty keywords")

        if not pairs:
            raise ValidationError(
                "No keywords provided",
                field="keywords",
                value=len(keywords)
            )

        return NormalizationResult(
            pairs=pairs,
            dropped_keywords=dropped,
            volumes_defaulted=not paired,
            recovered_volumes=recovered,
            warnings=warnings
        )

    def normalize_input(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None
    ) -> List[Tuple[str, int]]:
        """Normalize input and return only the (keyword, volume) pairs."""
        return self.normalize(keywords, volumes).pairs

    @staticmethod
    def _is_zero(value: Any) -> bool:
        """Whether a raw volume was explicitly zero or absent."""
        if value is None or value == "":
            return True
        try:
            return float(value) == 0
        except (TypeError, ValueError, OverflowError):
            return False
