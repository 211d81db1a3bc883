import logging
from typing import Optional

from herbafric.patterns import ANCHOR_TAIL, HEADING_NAME
from herbafric.schemas import DiseaseBlock, ParsedBlock, SectionLocator


def heading_name(text: str) -> Optional[str]:
    """
    Disease name from the heading line, or None when the heading is malformed.

    >>> heading_name("12. High Blood Pressure (Hypertension)  \\nHerbs:")
    'High Blood Pressure (Hypertension)'
    >>> heading_name("12.\\nHerbs:") is None
    True
    """
    m = HEADING_NAME.match(text)
    if not m:
        return None
    return m.group(1).strip() or None


def _region_start(text: str, anchor: tuple[int, int]) -> int:
    return ANCHOR_TAIL.match(text, anchor[1]).end()


def herbs_region(text: str, locator: SectionLocator, pos: int = 0) -> Optional[str]:
    """Text after the Herbs anchor up to Preparation/Symptoms/next heading."""
    anchor = locator.find("herbs", text, pos)
    if anchor is None:
        return None
    start = _region_start(text, anchor)
    ends = [
        span[0]
        for kind in ("preparation", "symptoms", "heading")
        if (span := locator.find(kind, text, start)) is not None
    ]
    return text[start : min(ends, default=len(text))]


def preparation_region(
    text: str, locator: SectionLocator, pos: int = 0
) -> Optional[str]:
    """Text after the Preparation anchor up to the next heading or block end."""
    anchor = locator.find("preparation", text, pos)
    if anchor is None:
        return None
    start = _region_start(text, anchor)
    end = locator.find("heading", text, start)
    return text[start : end[0] if end else len(text)]


def parse_block(block: DiseaseBlock, locator: SectionLocator) -> Optional[ParsedBlock]:
    """
    Pull the disease name and the raw Herbs/Preparation regions out of a block.

    Returns None for a block whose heading carries no name; that block is
    skipped without error.
    """
    name = heading_name(block.text)
    if name is None:
        logging.debug(
            "Skipping block %d at offset %d: malformed heading %r",
            block.index,
            block.start,
            block.text.split("\n", 1)[0],
        )
        return None

    # Anchors are only looked for below the heading line.
    newline = block.text.find("\n")
    body_start = len(block.text) if newline == -1 else newline + 1

    herbs_text = herbs_region(block.text, locator, body_start)
    preparation_text = preparation_region(block.text, locator, body_start)
    if herbs_text is None:
        logging.debug("No Herbs section in %r", name)
    if preparation_text is None:
        logging.debug("No Preparation section in %r", name)
    return ParsedBlock(
        name=name, herbs_text=herbs_text, preparation_text=preparation_text
    )
