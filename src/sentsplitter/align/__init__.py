"""Mapping sentence strings back onto document offsets and paragraphs."""

from .offsets import align_sentence, end_of_sentence, start_of_sentence
from .paragraphs import number_sentences

__all__ = ["align_sentence", "end_of_sentence", "number_sentences", "start_of_sentence"]
