from pathlib import Path
from typing import Union

import orjson
import polars as pl

from herbafric.schemas import Extraction, HerbRow

HERB_COLUMNS = ["disease", "herb", "native_names", "preparation"]


def export_json(extraction: Extraction, file_name: Union[str, Path]) -> None:
    """
    Write the `{"diseases": [...]}` collection as indented JSON.

    Herbs without native names are written without a `native_names` key.
    """
    Path(file_name).write_bytes(
        orjson.dumps(
            extraction.to_dict(),
            option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE,
        )
    )


def herb_rows(extraction: Extraction) -> list[HerbRow]:
    """
    One row per herb, native names joined as "Label: Name; ...".

    >>> from herbafric.schemas import DiseaseRecord, HerbRecord
    >>> ex = Extraction(diseases=[DiseaseRecord(name="Cough", herbs=[
    ...     HerbRecord(name="Ginger", native_names={"Yoruba": "Ata-ile"}, preparation="Boil.")])])
    >>> herb_rows(ex)
    [{'disease': 'Cough', 'herb': 'Ginger', 'native_names': 'Yoruba: Ata-ile', 'preparation': 'Boil.'}]
    """
    return [
        HerbRow(
            disease=disease.name,
            herb=herb.name,
            native_names="; ".join(
                f"{label}: {name}" for label, name in (herb.native_names or {}).items()
            ),
            preparation=herb.preparation,
        )
        for disease in extraction.diseases
        for herb in disease.herbs
    ]


def export_herbs_csv(extraction: Extraction, file_name: Union[str, Path]) -> None:
    """Serialize the flattened herb table to CSV via Polars."""
    df = pl.DataFrame(
        herb_rows(extraction), schema={c: pl.Utf8 for c in HERB_COLUMNS}
    )
    df.write_csv(file_name)


def export_count(file_name: Union[str, Path]) -> Path:
    """
    Count herbs by name across diseases, writing `<stem>-counts.csv` beside
    the input CSV.

    :param file_name: CSV path previously written by `export_herbs_csv`
    :return: path of the counts CSV
    """
    file_path = Path(file_name)
    df = pl.read_csv(file_path, schema_overrides={c: pl.Utf8 for c in HERB_COLUMNS})
    result_df = (
        df.group_by("herb")
        .agg(
            pl.len().alias("frequency"),
            pl.col("disease").n_unique().alias("diseases"),
        )
        .sort(["frequency", "herb"], descending=[True, False])
    )
    csv_out = file_path.parent / f"{file_path.stem}-counts.csv"
    result_df.write_csv(csv_out)
    return csv_out
