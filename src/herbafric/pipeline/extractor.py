import logging
from typing import Optional

from herbafric.config import ExtractorConfig
from herbafric.errors import InputTypeError
from herbafric.pipeline.block_parser import parse_block
from herbafric.pipeline.herbs import HerbParser
from herbafric.pipeline.locator import KeywordSectionLocator
from herbafric.pipeline.normalizer import normalize_document
from herbafric.pipeline.preparation import PreparationResolver
from herbafric.pipeline.segmenter import segment_document
from herbafric.schemas import DiseaseBlock, DiseaseRecord, Extraction, SectionLocator


class DiseaseExtractor:
    """
    Normalize -> segment -> parse blocks -> resolve herbs and preparations.

    Each call works on a fresh document; the extractor only holds configuration
    and compiled patterns, so one instance can be reused (and pickled for
    process pools).

    >>> doc = "1. Cough\\nHerbs:\\n• Ginger – Ata-ile (Yoruba)\\nPreparation:\\n• Boil and drink."
    >>> DiseaseExtractor()(doc).diseases[0].herbs[0].preparation
    'Boil and drink.'
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        locator: Optional[SectionLocator] = None,
    ):
        self.config = config or ExtractorConfig()
        self.locator = locator or KeywordSectionLocator(self.config)
        self.herb_parser = HerbParser(self.config)

    def parse_block(self, block: DiseaseBlock) -> Optional[DiseaseRecord]:
        parsed = parse_block(block, self.locator)
        if parsed is None:
            return None

        herbs = self.herb_parser.parse(parsed.herbs_text) if parsed.herbs_text else []
        if parsed.preparation_text and herbs:
            PreparationResolver(herbs).resolve(parsed.preparation_text, self.config)
        return DiseaseRecord(
            name=parsed.name,
            symptoms_and_signs=self.config.default_symptoms,
            herbs=tuple(herbs),
        )

    def __call__(self, document: str) -> Extraction:
        if not isinstance(document, str):
            raise InputTypeError(document)

        blocks = segment_document(normalize_document(document))
        if self.config.workers > 1 and len(blocks) > 1:
            Executor = self.config.executor()
            with Executor(max_workers=self.config.workers) as executor:
                records = list(executor.map(self.parse_block, blocks))
        else:
            records = [self.parse_block(block) for block in blocks]

        diseases = [record for record in records if record is not None]
        logging.info(
            "Extracted %d diseases (%d herbs) from %d blocks",
            len(diseases),
            sum(len(d.herbs) for d in diseases),
            len(blocks),
        )
        return Extraction(diseases=diseases)


def extract_diseases(
    document: str, config: Optional[ExtractorConfig] = None
) -> Extraction:
    """
    Extract disease records from raw document text.

    >>> extract_diseases("").diseases
    []
    """
    return DiseaseExtractor(config)(document)
