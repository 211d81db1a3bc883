from dataclasses import dataclass
from typing import Literal, Optional, Protocol, TypedDict

import orjson
from pydantic import BaseModel, ConfigDict, field_validator

AnchorKind = Literal["herbs", "preparation", "symptoms", "heading"]


@dataclass(frozen=True)
class DiseaseBlock:
    """
    A slice of the normalized document from one ordinal heading up to the
    next heading (or the end of the document).
    """

    text: str
    start: int = 0
    index: int = 0


@dataclass(frozen=True)
class ParsedBlock:
    name: str
    herbs_text: Optional[str] = None
    preparation_text: Optional[str] = None


class HerbRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    native_names: Optional[dict[str, str]] = None
    preparation: str = ""

    @field_validator("native_names")
    @classmethod
    def drop_empty_native_names(
        cls, v: Optional[dict[str, str]]
    ) -> Optional[dict[str, str]]:
        """
        Trim values, drop empty ones, and collapse an empty mapping to None.

        >>> HerbRecord(name="Moringa", native_names={"Hausa": " Zogale ", "x": " "}).native_names
        {'Hausa': 'Zogale'}
        >>> HerbRecord(name="Moringa", native_names={}).native_names is None
        True
        """
        if v is None:
            return None
        cleaned = {label: value.strip() for label, value in v.items() if value.strip()}
        return cleaned or None


class DiseaseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    symptoms_and_signs: str = "Not specified"
    herbs: tuple[HerbRecord, ...] = ()

    @field_validator("name")
    @classmethod
    def name_must_be_present(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Disease name must not be empty")
        return v


class Extraction(BaseModel):
    diseases: list[DiseaseRecord] = []

    def to_dict(self) -> dict:
        """Plain-data form with absent native names omitted rather than null."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: bool = True) -> str:
        """
        Serialize to a newline-terminated JSON string.

        >>> Extraction(diseases=[DiseaseRecord(name="Cough", herbs=[HerbRecord(name="Ginger")])]).to_json(indent=False)
        '{"diseases":[{"name":"Cough","symptoms_and_signs":"Not specified","herbs":[{"name":"Ginger","preparation":""}]}]}\\n'
        """
        option = orjson.OPT_APPEND_NEWLINE
        if indent:
            option |= orjson.OPT_INDENT_2
        return orjson.dumps(self.to_dict(), option=option).decode("utf-8")

    @staticmethod
    def from_json(json_str: str | bytes) -> "Extraction":
        return Extraction.model_validate(orjson.loads(json_str))


class SectionLocator(Protocol):
    """Finds section anchors inside a disease block."""

    def find(
        self, kind: AnchorKind, text: str, pos: int = 0
    ) -> Optional[tuple[int, int]]:
        """Return the (start, end) span of the next `kind` anchor at or after `pos`."""
        ...


class HerbRow(TypedDict):
    """One flattened herb row for tabular export."""

    disease: str
    herb: str
    native_names: str
    preparation: str
