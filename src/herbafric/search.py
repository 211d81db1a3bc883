from collections.abc import Iterable

from herbafric.schemas import DiseaseRecord


def search_diseases(
    diseases: Iterable[DiseaseRecord], query: str
) -> list[DiseaseRecord]:
    """
    Case-insensitive substring lookup on disease name or symptoms text.

    An empty query matches everything, in the original order.

    >>> records = [DiseaseRecord(name="High Blood Pressure"), DiseaseRecord(name="Malaria")]
    >>> [d.name for d in search_diseases(records, "blood")]
    ['High Blood Pressure']
    """
    needle = query.strip().lower()
    return [
        disease
        for disease in diseases
        if needle in disease.name.lower()
        or needle in disease.symptoms_and_signs.lower()
    ]
