#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tagger and morphological generator backed by MorphoDiTa
(https://ufal.mff.cuni.cz/morphodita), e.g. with the czech-morfflex-pdt models.
"""
# -*- encoding: utf-8 -*-
import logging as log
from pathlib import Path
from typing import List, Optional
from ufal import morphodita
from .morphology import ExternalToolError, Morphology, Tagger
from .util import TaggedWord


class MorphoditaMorphology(Morphology):
    def __init__(self, morpho, owner=None):
        self.morpho = morpho
        self.owner = owner  # a morpho obtained from a tagger lives only as long as that tagger

    @classmethod
    def load(cls, filename: Path) -> 'MorphoditaMorphology':
        morpho = morphodita.Morpho.load(str(filename))
        if morpho is None:
            raise ExternalToolError(f'Failed to load morphological dictionary from {filename}')
        return cls(morpho)

    def generate(self, lemma: str, tag: str) -> List[str]:
        lemmas_forms = morphodita.TaggedLemmasForms()
        try:
            self.morpho.generate(lemma, tag, morphodita.Morpho.GUESSER, lemmas_forms)
        except Exception as error:
            raise ExternalToolError(f'MorphoDiTa failed to generate {lemma} {tag}: {error}') from error
        return [tagged_form.form for lemma_forms in lemmas_forms for tagged_form in lemma_forms.forms]


class MorphoditaTagger(Tagger):
    def __init__(self, tagger):
        self.tagger = tagger
        self.tokenizer = tagger.newTokenizer()
        if self.tokenizer is None:
            raise ExternalToolError('Could not get a tokenizer for the supplied tagger model')
        self.text = ''

    @classmethod
    def load(cls, filename: Path) -> 'MorphoditaTagger':
        tagger = morphodita.Tagger.load(str(filename))
        if tagger is None:
            raise ExternalToolError(f'Failed to load tagger from {filename}')
        return cls(tagger)

    def morphology(self) -> MorphoditaMorphology:
        """Morphological generator of the dictionary the tagger model was built with."""
        morpho = self.tagger.getMorpho()
        if morpho is None:
            raise ExternalToolError('Tagger model does not provide a morphological dictionary')
        return MorphoditaMorphology(morpho, owner=self)

    def tokenize_and_segment(self, line: str) -> Optional[List[str]]:
        self.text = line  # tokenizer does not copy the text
        forms = morphodita.Forms()
        token_ranges = morphodita.TokenRanges()
        try:
            self.tokenizer.setText(self.text)
            found_sentence = self.tokenizer.nextSentence(forms, token_ranges)
            more_sentences = found_sentence and self.tokenizer.nextSentence(morphodita.Forms(),
                                                                            morphodita.TokenRanges())
        except Exception as error:
            raise ExternalToolError(f'MorphoDiTa failed to tokenize: {error}') from error
        if not found_sentence:
            return None
        if more_sentences:
            log.warning(f'Line contains more than one sentence, only the first one is used: {line}')
        return list(forms)

    def tag(self, forms: List[str]) -> List[TaggedWord]:
        morphodita_forms = morphodita.Forms()
        for form in forms:
            morphodita_forms.append(form)
        tagged_lemmas = morphodita.TaggedLemmas()
        try:
            self.tagger.tag(morphodita_forms, tagged_lemmas)
        except Exception as error:
            raise ExternalToolError(f'MorphoDiTa failed to tag {len(forms)} tokens: {error}') from error
        if len(tagged_lemmas) != len(forms):
            raise ExternalToolError(f'Tagger returned {len(tagged_lemmas)} tags for {len(forms)} tokens')
        return [TaggedWord(form, tagged_lemma.lemma, tagged_lemma.tag)
                for form, tagged_lemma in zip(forms, tagged_lemmas)]
