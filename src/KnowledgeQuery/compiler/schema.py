"""Index field layout the compiler targets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """Field prefixes, value slots and relevance cutoffs of a content index.

    The defaults match the layout written by the content indexer.
    """

    exact_title_prefix: str = "XEXACTS"
    title_prefix: str = "S"
    content_type_prefix: str = "T"
    id_prefix: str = "Q"
    tag_prefix: str = "K"

    sequence_number_slot: int = 0
    date_slot: int = 1
    alphabetical_slot: int = 2

    default_cutoff: int = 10
    title_synopsis_cutoff: int = 20

    max_term_length: int = 245


DEFAULT_SCHEMA = FieldSchema()
