"""
Regular expressions for the line-level heuristics.

The marker characters (bullet, en-dash) and anchor words are configurable, so
the patterns are compiled per `ExtractorConfig` rather than at import time.
"""

import re
from dataclasses import dataclass

from herbafric.config import ExtractorConfig

# A line that starts with digits and a period followed by whitespace.
ORDINAL_HEADING = re.compile(r"^\d+\.\s", re.MULTILINE)
# The disease name: rest of the heading line after "<digits>." and spaces/tabs.
HEADING_NAME = re.compile(r"\A\d+\.[^\S\n]+([^\n]*)")
# Colons and whitespace trailing a sub-heading anchor ("Herbs:  \n").
ANCHOR_TAIL = re.compile(r"[:\s]*")
# "<label>: <value>" or "<label>=<value>", value up to a comma, ")" or line end.
NATIVE_LABEL_VALUE = re.compile(r"(\w+)\s*[:=]\s*([^),\n]+)")
# CR runs before LF collapse too, so "\r\r\n" cannot leave a fresh CRLF behind.
LINE_ENDING = re.compile(r"\r+\n")
BLANK_RUN = re.compile(r"\n{2,}")


@dataclass(frozen=True)
class Patterns:
    herbs_anchor: re.Pattern
    preparation_anchor: re.Pattern
    symptoms_anchor: re.Pattern
    bullet_name: re.Pattern
    dash_name: re.Pattern
    native_value_label: re.Pattern
    leading_bullet: re.Pattern

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> "Patterns":
        """
        >>> p = Patterns.from_config(ExtractorConfig())
        >>> p.bullet_name.search("• Moringa (Moringa oleifera) – Zogale").group(1)
        'Moringa'
        >>> p.dash_name.match("Aloe vera – Eti Erin (Yoruba)").group(1)
        'Aloe vera'
        """
        bullet = re.escape(config.bullet)
        dash = re.escape(config.dash)
        return cls(
            herbs_anchor=re.compile(re.escape(config.herbs_anchor), re.IGNORECASE),
            preparation_anchor=re.compile(
                re.escape(config.preparation_anchor), re.IGNORECASE
            ),
            symptoms_anchor=re.compile(
                re.escape(config.symptoms_anchor), re.IGNORECASE
            ),
            # (a) between the bullet and the first dash or opening parenthesis
            bullet_name=re.compile(rf"{bullet}\s*(.+?)\s*(?:{dash}|\()"),
            # (b) anything before the first dash
            dash_name=re.compile(rf"(.+?)\s*{dash}"),
            # "Zogale (Hausa)": a local name followed by a capitalised label.
            # Needed for the common "Zogale (Hausa), Ewe Igbale (Yoruba)" notation;
            # without it such lines would carry no native names at all.
            native_value_label=re.compile(
                rf"([^,{dash}()]+?)\s*\(\s*([A-Z][A-Za-z' \-]*?)\s*\)"
            ),
            leading_bullet=re.compile(rf"^{bullet}\s*"),
        )
