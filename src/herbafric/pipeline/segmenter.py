import logging

from herbafric.patterns import ORDINAL_HEADING
from herbafric.schemas import DiseaseBlock


def segment_document(text: str) -> list[DiseaseBlock]:
    """
    Split a normalized document into disease blocks at ordinal headings.

    Text before the first heading (category titles and the like) is dropped.
    The ordinal numbers themselves are only used as boundaries.

    >>> [b.text for b in segment_document("Remedies\\n1. Cough\\nHerbs:\\n3. Fever")]
    ['1. Cough\\nHerbs:\\n', '3. Fever']
    """
    starts = [m.start() for m in ORDINAL_HEADING.finditer(text)]
    if not starts:
        logging.debug("No ordinal headings found in %d characters", len(text))
        return []
    if starts[0] > 0:
        logging.debug("Discarding %d characters of preamble", starts[0])

    blocks: list[DiseaseBlock] = []
    for start, end in zip(starts, starts[1:] + [len(text)]):
        chunk = text[start:end]
        if not chunk.strip():
            continue
        blocks.append(DiseaseBlock(text=chunk, start=start, index=len(blocks)))
    return blocks
