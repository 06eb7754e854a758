"""Reference passages used by the ``demo`` command and the golden tests.

Both passages come from the demonstration entry point of Piao's
segmenter: a news report exercising quotes, initials and titles, and a
biology abstract exercising figure references and a URL.
"""

from __future__ import annotations

BOSNIAN_MINISTER = (
    "The development coincided with a warning issued in London by the Bosnian "
    "Foreign Minister, Irfan Ljubijankic, that the region was \"dangerously close "
    "to a resumption of all-out war.\" He added, \"At the moment we have a "
    "diplomatic vacuum.\"\nIn the latest of a series of inconclusive Western moves "
    "to avert a renewed Balkan flareup, the American envoy, Assistant Secretary "
    "of State Richard C. Holbrooke, met with President Franjo Tudjman at the "
    "Presidential Palace in the hills above Zagreb tonight. But the meeting "
    "lasted less than 40 minutes and Mr. Holbrooke refused to answer reporters' "
    "questions when he left."
)

MYOSIN_II = (
    "Wot about Fig. 2 and (Fig. 3)? We created a myosinII-responsive FA "
    "interactome from proteins in the expected FA list by color-coding proteins "
    "according to MDR magnitude (Supplemental Fig. S4 and Table 7, "
    "http://dir.nhlbi.nih.gov/papers/lctm/focaladhesion/Home/index.html). The "
    "interactome illustrates the full range of MDR values, including proteins "
    "exhibiting minor/low confidence changes. This interactome suggests how "
    "myosinII activity may collectively modulate FA abundance of groups of "
    "proteins mediating distinct pathways."
)

PASSAGES: dict[str, str] = {"bosnian": BOSNIAN_MINISTER, "myosin": MYOSIN_II}

__all__ = ["BOSNIAN_MINISTER", "MYOSIN_II", "PASSAGES"]
