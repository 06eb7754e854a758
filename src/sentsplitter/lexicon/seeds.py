"""Built-in abbreviation and lowercase-term lists.

Abbreviations are matched against the sentence-final token (exactly, or after
lower-casing it) and suppress a split.  Lowercase terms are matched against
the first token of the following text and force a split.
"""

from __future__ import annotations

from string import ascii_lowercase, ascii_uppercase

CIVILIAN_TITLES = ("Dr.", "Ph.D.", "Ph.", "Mr.", "Mrs.", "Ms.", "Prof.", "Esq.")
MILITARY_RANKS = (
    "Maj.",
    "Gen.",
    "Adm.",
    "Lieut.",
    "Lt.",
    "Col.",
    "Sgt.",
    "Cpl.",
    "Pte.",
    "Cap.",
    "Capt.",
)
POLITICAL_TITLES = ("Sen.", "Pres.", "Rep.")
RELIGIOUS_TITLES = ("St.", "Rev.")
PLACES = ("Mt.", "Rd.", "Cres.", "Ln.", "Ave.", "Av.", "Bd.", "Blvd.", "Co.", "co.")
COMMERCIAL = ("Ltd.", "Plc.", "PLC.", "Inc.", "Pty.", "Corp.")
ACADEMIC = ("et.", "al.", "ed.", "eds.", "Ed.", "Eds.", "Fig.", "fig.", "Ref.", "ref.")
GENERAL = ("etc.", "usu.", "e.g.", "pp.", "vs.", "v.")
MEASURES = (
    "yr.",
    "yrs.",
    "g.",
    "mg.",
    "kg.",
    "gr.",
    "lb.",
    "lbs.",
    "oz.",
    "in.",
    "mi.",
    "m.",
    "M.",
    "mt.",
    "mtr.",
    "ft.",
    "max.",
    "min.",
    "Max.",
    "Min.",
    "inc.",
    "exc.",
)
SINGLE_LETTERS = tuple(f"{ch}." for ch in ascii_uppercase + ascii_lowercase)
MONTHS = ("Jan.", "Feb.", "Mar.", "Apr.", "Jun.", "Jul.", "Aug.", "Sep.", "Sept.", "Oct.", "Nov.", "Dec.")
WEEKDAYS = ("Mon.", "Tue.", "Wed.", "Thu.", "Fri.", "Sat.", "Sun.")

DEFAULT_ABBREVIATIONS: frozenset[str] = frozenset(
    CIVILIAN_TITLES
    + MILITARY_RANKS
    + POLITICAL_TITLES
    + RELIGIOUS_TITLES
    + PLACES
    + COMMERCIAL
    + ACADEMIC
    + GENERAL
    + MEASURES
    + SINGLE_LETTERS
    + MONTHS
    + WEEKDAYS
)

NUCLEIC_ACIDS = ("mRNA", "tRNA", "cDNA")
BRANDS = ("iPad", "iPod", "iPhone", "iCloud", "iMac", "eCommerce", "eBusiness", "mCommerce")
GREEK_LETTERS = ("alpha", "beta", "gamma", "delta")
ROMAN_NUMERALS = ("i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x")

DEFAULT_LOWERCASE_TERMS: frozenset[str] = frozenset(
    NUCLEIC_ACIDS + BRANDS + GREEK_LETTERS + ("c",) + ROMAN_NUMERALS
)

__all__ = ["DEFAULT_ABBREVIATIONS", "DEFAULT_LOWERCASE_TERMS"]
