"""Text normalization layer applied before skill matching.

This module provides:
- TextNormalizer: lower-cases, collapses whitespace and canonical technology names
- normalize_text: module-level helper using the default rules
- ALIAS_RULES: the ordered canonical-spelling table
"""

from .rules import ALIAS_RULES
from .service import TextNormalizer, normalize_text

__all__ = [
    "ALIAS_RULES",
    "TextNormalizer",
    "normalize_text",
]
