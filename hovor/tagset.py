#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Positional morphological tags (Prague Dependency Treebank style, as produced by MorphoDiTa).
Each character position of a tag encodes one grammatical category, e.g. AAIS2----1A---- or NNIP7-----A----
"""
# -*- encoding: utf-8 -*-
from typing import NamedTuple

POS_INDEX = 0           # part of speech
SUBPOS_INDEX = 1        # detailed part of speech
GENDER_INDEX = 2
NUMBER_INDEX = 3
CASE_INDEX = 4
VARIANT_INDEX = 14      # style variant
MIN_TAG_LENGTH = VARIANT_INDEX + 1

POS_ADJECTIVE = 'A'
POS_NOUN = 'N'
POS_PRONOUN = 'P'
POS_VERB = 'V'
POS_PUNCTUATION = 'Z'

SUBPOS_POSSESSIVE = 'S'

GENDER_M_ANIMATE = 'M'
GENDER_M_INANIMATE = 'I'
GENDER_NEUTER = 'N'
GENDER_FEMININE = 'F'

NUMBER_SINGULAR = 'S'
NUMBER_PLURAL = 'P'

CASE_INSTRUMENTAL = '7'

VARIANT_BASIC = '-'
VARIANT_COLLOQUIAL = '6'


class TagAttributes(NamedTuple):
    pos: str
    subpos: str
    gender: str
    number: str
    case: str
    variant: str

    def is_punctuation(self) -> bool:
        return self.pos == POS_PUNCTUATION

    def is_possessive_pronoun(self) -> bool:
        return self.pos == POS_PRONOUN and self.subpos == SUBPOS_POSSESSIVE

    def is_plural_instrumental(self) -> bool:
        """e.g. 's kamarády' (with friends), where colloquial Czech prefers 's kamarádama'"""
        return self.number == NUMBER_PLURAL and self.case == CASE_INSTRUMENTAL

    def is_colloquial(self) -> bool:
        return self.variant == VARIANT_COLLOQUIAL


def check_tag(tag: str) -> None:
    """Tags come from the tagger, so a short tag means the tagger model does not use this tag set."""
    if len(tag) < MIN_TAG_LENGTH:
        raise ValueError(f"Tag '{tag}' has {len(tag)} characters, expected at least {MIN_TAG_LENGTH}")


def decode_tag(tag: str) -> TagAttributes:
    check_tag(tag)
    return TagAttributes(pos=tag[POS_INDEX],
                         subpos=tag[SUBPOS_INDEX],
                         gender=tag[GENDER_INDEX],
                         number=tag[NUMBER_INDEX],
                         case=tag[CASE_INDEX],
                         variant=tag[VARIANT_INDEX])


def with_variant(tag: str, variant: str) -> str:
    """Returns a copy of tag with the style variant replaced, e.g. AAIS2----1A---- -> AAIS2----1A---6"""
    check_tag(tag)
    if len(variant) != 1:
        raise ValueError(f"Variant must be a single character, not '{variant}'")
    return tag[:VARIANT_INDEX] + variant + tag[VARIANT_INDEX+1:]


def colloquial_tag(tag: str) -> str:
    return with_variant(tag, VARIANT_COLLOQUIAL)
