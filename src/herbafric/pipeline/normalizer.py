from herbafric.patterns import BLANK_RUN, LINE_ENDING


def normalize_document(text: str) -> str:
    """
    Canonicalize line endings and drop blank lines.

    Paragraph gaps are discarded on purpose: everything downstream works on
    single lines and sub-heading anchors, never on blank-line separation.

    >>> normalize_document("1. Cough\\r\\n\\r\\nHerbs:\\n\\n\\n• Ginger – Ata-ile (Yoruba)\\n")
    '1. Cough\\nHerbs:\\n• Ginger – Ata-ile (Yoruba)'
    >>> normalize_document("")
    ''
    """
    return BLANK_RUN.sub("\n", LINE_ENDING.sub("\n", text)).strip()
