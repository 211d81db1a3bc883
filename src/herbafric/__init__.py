from herbafric.config import ExtractorConfig
from herbafric.errors import ExtractionFailure, InputTypeError
from herbafric.pipeline.extractor import DiseaseExtractor, extract_diseases
from herbafric.schemas import DiseaseRecord, Extraction, HerbRecord


def load_extractor(config_path=None, **overrides) -> DiseaseExtractor:
    """
    Build an extractor from an optional YAML config, then environment
    variables (HERBAFRIC_WORKERS, HERBAFRIC_USE_PROCESSES), then `overrides`.
    """
    if config_path is not None:
        config = ExtractorConfig.from_yaml(config_path, **overrides)
    else:
        config = ExtractorConfig.from_env(**overrides)
    return DiseaseExtractor(config)


__all__ = [
    "DiseaseExtractor",
    "DiseaseRecord",
    "ExtractionFailure",
    "Extraction",
    "ExtractorConfig",
    "HerbRecord",
    "InputTypeError",
    "extract_diseases",
    "load_extractor",
]
