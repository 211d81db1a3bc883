import logging
from typing import Optional

from herbafric.config import ExtractorConfig
from herbafric.patterns import NATIVE_LABEL_VALUE, Patterns
from herbafric.schemas import HerbRecord


class HerbParser:
    """
    Turns the lines of a Herbs sub-section into HerbRecords.

    >>> parser = HerbParser()
    >>> herb = parser.parse_line("• Moringa (Moringa oleifera) – Zogale (Hausa), Ewe Igbale (Yoruba)")
    >>> herb.name, herb.native_names
    ('Moringa', {'Hausa': 'Zogale', 'Yoruba': 'Ewe Igbale'})
    >>> parser.parse_line("• Drink plenty of water") is None
    True
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()
        self.patterns = Patterns.from_config(self.config)

    def is_candidate(self, line: str) -> bool:
        return line.strip().startswith(self.config.bullet) or self.config.dash in line

    def parse_name(self, line: str) -> Optional[str]:
        """Herb name: bullet-to-dash/parenthesis first, then anything before a dash."""
        for pattern in (self.patterns.bullet_name, self.patterns.dash_name):
            m = pattern.search(line)
            if m and (name := m.group(1).strip()):
                return name
        return None

    def native_names(self, line: str) -> Optional[dict[str, str]]:
        """
        Native-language names found on a herb line.

        Both "Yoruba: Ewuro" / "Hausa=Zogale" pairs anywhere on the line and
        "Zogale (Hausa)" pairs after the first dash are recognised; an explicit
        label pair wins over a parenthetical one. Returns None, not an empty
        dict, when the line has neither.

        >>> HerbParser().native_names("• Bitter leaf – Yoruba: Ewuro, Igbo=Onugbu")
        {'Yoruba': 'Ewuro', 'Igbo': 'Onugbu'}
        >>> HerbParser().native_names("• Honey (raw, unprocessed) – Antibacterial") is None
        True
        """
        names: dict[str, str] = {}
        for m in NATIVE_LABEL_VALUE.finditer(line):
            value = m.group(2).strip()
            if value:
                names[m.group(1)] = value

        _, dash, tail = line.partition(self.config.dash)
        if dash:
            for m in self.patterns.native_value_label.finditer(tail):
                value = m.group(1).strip()
                if value:
                    names.setdefault(m.group(2), value)
        return names or None

    def parse_line(self, line: str) -> Optional[HerbRecord]:
        name = self.parse_name(line)
        if name is None:
            logging.debug("Dropping unmatched herb line %r", line)
            return None
        return HerbRecord(name=name, native_names=self.native_names(line))

    def parse(self, region: str) -> list[HerbRecord]:
        """Herbs in source line order; repeated names are kept."""
        herbs = []
        for line in region.split("\n"):
            if not self.is_candidate(line):
                continue
            herb = self.parse_line(line)
            if herb is not None:
                herbs.append(herb)
        return herbs


def parse_herbs(
    region: str, config: Optional[ExtractorConfig] = None
) -> list[HerbRecord]:
    return HerbParser(config).parse(region)
