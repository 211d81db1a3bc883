import re
from typing import Optional

from herbafric.config import ExtractorConfig
from herbafric.patterns import ORDINAL_HEADING, Patterns
from herbafric.schemas import AnchorKind


class KeywordSectionLocator:
    """
    Locates sub-section anchors by case-insensitive keyword search.

    This is deliberately loose: "Herbs" matches anywhere in a line, so
    "Preparation & Use:" and "HERBS" both count. Swap in another object with
    the same `find` method to harden the heuristic.

    >>> loc = KeywordSectionLocator()
    >>> loc.find("preparation", "Herbs:\\n• Garlic\\nPreparation & Use:\\n")
    (16, 27)
    >>> loc.find("symptoms", "Herbs:\\n• Garlic\\n") is None
    True
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        patterns = Patterns.from_config(config or ExtractorConfig())
        self.anchors: dict[str, re.Pattern] = {
            "herbs": patterns.herbs_anchor,
            "preparation": patterns.preparation_anchor,
            "symptoms": patterns.symptoms_anchor,
            "heading": ORDINAL_HEADING,
        }

    def find(
        self, kind: AnchorKind, text: str, pos: int = 0
    ) -> Optional[tuple[int, int]]:
        try:
            pattern = self.anchors[kind]
        except KeyError:
            raise ValueError(f"Unknown anchor kind: {kind!r}") from None
        m = pattern.search(text, pos)
        return m.span() if m else None
