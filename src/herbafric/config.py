import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractorConfig(BaseModel):
    """
    Knobs for the extraction heuristics.

    The defaults reproduce the conventions of the source documents: "•"
    bullets, "–" (en-dash) separators and "Herbs:" / "Preparation:" sub-headings.
    """

    model_config = ConfigDict(frozen=True)

    bullet: str = "•"
    dash: str = "–"
    herbs_anchor: str = "Herbs"
    preparation_anchor: str = "Preparation"
    symptoms_anchor: str = "Symptoms"
    preparation_hint: str = "can be"
    default_symptoms: str = "Not specified"
    workers: int = Field(1, ge=1)
    use_processes: bool = False

    @field_validator(
        "bullet", "dash", "herbs_anchor", "preparation_anchor", "symptoms_anchor"
    )
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Markers and anchors must not be blank")
        return v

    @classmethod
    def from_env(cls, **overrides) -> "ExtractorConfig":
        """
        Build a config, letting environment variables override parallelism:

        - HERBAFRIC_WORKERS=N: number of workers for block parsing.
        - HERBAFRIC_USE_PROCESSES=1: use ProcessPoolExecutor instead of ThreadPoolExecutor.

        Explicit keyword overrides win over the environment.
        """
        values = {}
        if "HERBAFRIC_WORKERS" in os.environ:
            values["workers"] = int(os.environ["HERBAFRIC_WORKERS"])
        if "HERBAFRIC_USE_PROCESSES" in os.environ:
            values["use_processes"] = os.environ[
                "HERBAFRIC_USE_PROCESSES"
            ].lower() in ("1", "true", "yes")
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path | str, **overrides) -> "ExtractorConfig":
        """Load a config from a YAML mapping; missing keys keep their defaults."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        data.update(overrides)
        return cls(**data)

    def executor(self) -> type[ThreadPoolExecutor | ProcessPoolExecutor]:
        return ProcessPoolExecutor if self.use_processes else ThreadPoolExecutor
