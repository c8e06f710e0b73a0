#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interfaces to the external tagger and morphological generator.
See morphodita.py for the MorphoDiTa implementation.
"""
# -*- encoding: utf-8 -*-
from typing import List, Optional
from .util import TaggedWord


class ExternalToolError(Exception):
    """The tagger or morphological generator could not be loaded or broke its contract."""


class Morphology:
    def generate(self, lemma: str, tag: str) -> List[str]:
        """Returns surface forms of lemma for tag, in the generator's order. No forms is a regular outcome.
        Backend failures are raised as ExternalToolError."""
        raise NotImplementedError


class Tagger:
    def tokenize_and_segment(self, line: str) -> Optional[List[str]]:
        """Returns the tokens of the (first) sentence in line, or None if no sentence could be found."""
        raise NotImplementedError

    def tag(self, forms: List[str]) -> List[TaggedWord]:
        """Returns one TaggedWord per form."""
        raise NotImplementedError
