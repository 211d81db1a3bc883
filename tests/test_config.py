from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from herbafric import ExtractorConfig, load_extractor


def test_defaults():
    config = ExtractorConfig()
    assert (config.bullet, config.dash) == ("•", "–")
    assert config.default_symptoms == "Not specified"
    assert config.workers == 1
    assert config.executor() is ThreadPoolExecutor


def test_from_env(monkeypatch):
    monkeypatch.setenv("HERBAFRIC_WORKERS", "3")
    monkeypatch.setenv("HERBAFRIC_USE_PROCESSES", "yes")
    config = ExtractorConfig.from_env()
    assert config.workers == 3
    assert config.use_processes
    assert config.executor() is ProcessPoolExecutor


def test_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("HERBAFRIC_WORKERS", "3")
    assert ExtractorConfig.from_env(workers=2).workers == 2


def test_from_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "herbs_anchor: Remedies\npreparation_anchor: Usage\nworkers: 2\n",
        encoding="utf-8",
    )
    config = ExtractorConfig.from_yaml(path)
    assert config.herbs_anchor == "Remedies"
    assert config.preparation_anchor == "Usage"
    assert config.workers == 2
    assert config.symptoms_anchor == "Symptoms"


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- Remedies\n- Usage\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ExtractorConfig.from_yaml(path)


@pytest.mark.parametrize(
    "field,value", [("workers", 0), ("bullet", " "), ("herbs_anchor", "")]
)
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        ExtractorConfig(**{field: value})


def test_load_extractor_from_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("herbs_anchor: Remedies\n", encoding="utf-8")
    extractor = load_extractor(path)
    (disease,) = extractor("1. Cough\nRemedies:\n• Ginger – Ata-ile (Yoruba)").diseases
    assert [h.name for h in disease.herbs] == ["Ginger"]
