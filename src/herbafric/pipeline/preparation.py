"""
Attach free-text preparation lines to herbs.

Two passes run for every preparation line, in document order:

1. targeted: the first herb whose base name occurs in the line gets it;
2. broadcast: if any herb still has no preparation, all such herbs get it.

A targeted assignment is final. A broadcast assignment is a placeholder that a
later targeted match for the same herb replaces.

The broadcast re-fires for every line rather than once at the end of the
sub-section. That mirrors the data already extracted with this heuristic and
may not be what the source authors intended.
"""

import logging
from typing import Iterator, Optional

from herbafric.config import ExtractorConfig
from herbafric.patterns import Patterns
from herbafric.schemas import HerbRecord


def base_name(herb_name: str) -> str:
    """
    >>> base_name("Moringa (Moringa oleifera)")
    'moringa'
    """
    return herb_name.split("(")[0].strip().lower()


def iter_preparation_lines(
    region: str, config: Optional[ExtractorConfig] = None
) -> Iterator[str]:
    """
    Candidate preparation texts with the bullet stripped.

    >>> list(iter_preparation_lines("• Boil and drink.\\nWarning:\\nLeaves can be chewed.\\n•  "))
    ['Boil and drink.', 'Leaves can be chewed.']
    """
    config = config or ExtractorConfig()
    leading_bullet = Patterns.from_config(config).leading_bullet
    for line in region.split("\n"):
        stripped = line.strip()
        if not (
            stripped.startswith(config.bullet) or config.preparation_hint in stripped
        ):
            continue
        text = leading_bullet.sub("", stripped).strip()
        if text:
            yield text


class PreparationResolver:
    """Fills `preparation` on a list of herbs, replacing list slots in place."""

    def __init__(self, herbs: list[HerbRecord]):
        self.herbs = herbs
        # indices of herbs whose preparation came from a targeted match
        self.pinned: set[int] = set()

    def _assign(self, i: int, text: str) -> None:
        self.herbs[i] = self.herbs[i].model_copy(update={"preparation": text})

    def targeted_pass(self, text: str) -> Optional[int]:
        """Give `text` to the first unpinned herb named in it; return its index."""
        lowered = text.lower()
        for i, herb in enumerate(self.herbs):
            if i in self.pinned:
                continue
            name = base_name(herb.name)
            if name and name in lowered:
                self._assign(i, text)
                self.pinned.add(i)
                return i
        return None

    def broadcast_pass(self, text: str) -> list[int]:
        """Give `text` to every herb that still has no preparation."""
        empty = [i for i, herb in enumerate(self.herbs) if not herb.preparation]
        for i in empty:
            self._assign(i, text)
        return empty

    def resolve(self, region: str, config: Optional[ExtractorConfig] = None) -> None:
        for text in iter_preparation_lines(region, config):
            target = self.targeted_pass(text)
            filled = self.broadcast_pass(text)
            logging.debug(
                "Preparation %r: targeted=%s broadcast=%s", text, target, filled
            )


def resolve_preparations(
    region: str, herbs: list[HerbRecord], config: Optional[ExtractorConfig] = None
) -> None:
    PreparationResolver(herbs).resolve(region, config)
