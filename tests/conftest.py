import pytest

from herbafric import DiseaseExtractor, ExtractorConfig

# Excerpt in the shape of the source documents: a category title before the
# first entry, trailing no-break spaces, "Preparation & Use:" headings and a
# second category title sitting between two entries.
SAMPLE_DOCUMENT = (
    "Remedies for Chronic Conditions\r\n"
    "\r\n"
    "1. High Blood Pressure (Hypertension)  \r\n"
    "Herbs:  \r\n"
    "• Moringa (Moringa oleifera) – Zogale (Hausa), Ewe Igbale(Yoruba)  \r\n"
    "• African Spinach (Amaranthus spp.) – Efo tete (Yoruba)  \r\n"
    "• Hibiscus (Zobo leaves – Hibiscus sabdariffa)  \r\n"
    "Preparation:  \r\n"
    "• Moringa leaves can be boiled or ground into powder and added to meals.  \r\n"
    "• Zobo drink is made by soaking dried hibiscus flowers in water with ginger.  \r\n"
    "2. Diabetes  \r\n"
    "Herbs:  \r\n"
    "• Bitter Leaf (Vernonia amygdalina)  \r\n"
    "• Mango Leaves (Mangifera indica)  \r\n"
    "• Aloe Vera  \r\n"
    "Preparation:  \r\n"
    "• Boil bitter leaf or mango leaves and drink daily.  \r\n"
    "• Aloe vera gel can be consumed raw or blended with water.  \r\n"
    "\r\n"
    "Infectious Diseases (Viral, Bacterial, Parasitic)\r\n"
    "1. Malaria & Fever  \r\n"
    "Herbs:  \r\n"
    "• Neem (Dongoyaro) – Azadirachta indica  \r\n"
    "• Bitter Leaf (Vernonia amygdalina) – Onugbu (Igbo), Ewuro(Yoruba)  \r\n"
    "Preparation & Use:  \r\n"
    "• Boil bitter leaf or neem leaves in water, strain, and drink the decoction.  \r\n"
    "Warning:  \r\n"
    "• Severe malaria requires hospital treatment.  \r\n"
)

END_TO_END_DOCUMENT = """1. High Blood Pressure
Herbs:
• Moringa (Moringa oleifera) – Zogale (Hausa), Ewe Igbale (Yoruba)
Preparation:
• Moringa leaves can be boiled or ground into powder.
"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def end_to_end_document() -> str:
    return END_TO_END_DOCUMENT


@pytest.fixture
def config() -> ExtractorConfig:
    return ExtractorConfig()


@pytest.fixture
def extractor(config) -> DiseaseExtractor:
    return DiseaseExtractor(config)
