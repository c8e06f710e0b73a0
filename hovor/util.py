#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Word resources for colloquialization: replacement dictionary and filler words.
"""
# -*- encoding: utf-8 -*-
from enum import Enum
import logging as log
from pathlib import Path
import regex
from typing import Dict, List, NamedTuple, Optional, Sequence


class ResourceLoadError(Exception):
    """A resource file is missing or ill-formed. The converter must not be used with partially loaded resources."""


class TaggedWord(NamedTuple):
    form: str       # surface form, e.g. bílého
    lemma: str      # e.g. bílý
    tag: str        # e.g. AAMS4----1A----


class PositionInSentence(Enum):
    BEGINNING = 0
    MIDDLE = 1
    END = 2


class ReplacementDict:
    """Maps words (surface forms or lemmas) to colloquial replacement lemmas, e.g. peníze -> prachy"""
    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self.replacement_dict: Dict[str, str] = dict(entries) if entries else {}

    def __len__(self) -> int:
        return len(self.replacement_dict)

    def __contains__(self, key: str) -> bool:
        return key in self.replacement_dict

    def get(self, key: str) -> Optional[str]:
        return self.replacement_dict.get(key)

    def load_resource(self, filename: Path, verbose: bool = False) -> None:
        """Loads replacement entries, one per line: <word-or-lemma> TAB <replacement>
        Lines starting with '#' are comments. Later entries override earlier entries with the same key.
        Example input file: data/replacement-words.dict"""
        try:
            with open(filename, encoding='utf-8-sig') as f_in:
                line_number = 0
                n_warnings = 0
                n_entries = 0
                for line in f_in:
                    line_number += 1
                    line = line.rstrip('\r\n')
                    if line.startswith('#') or line.strip() == '':
                        continue
                    fields = line.split('\t')
                    if len(fields) != 2:
                        log.warning(f'Skipping line {line_number} in {filename}: '
                                    f'expected 2 tab-separated fields, found {len(fields)}')
                        n_warnings += 1
                        continue
                    key, replacement = fields
                    if key == '' or replacement == '':
                        log.warning(f'Skipping line {line_number} in {filename}: empty field')
                        n_warnings += 1
                        continue
                    if verbose and key in self.replacement_dict:
                        log.info(f'Replacement for {key} in line {line_number} overrides '
                                 f'earlier {self.replacement_dict[key]}')
                    self.replacement_dict[key] = replacement
                    n_entries += 1
                if verbose:
                    log.info(f'Loaded {n_entries} entries from {line_number} lines in {filename}'
                             f'{f" ({n_warnings} lines skipped)" if n_warnings else ""}')
        except OSError as error:
            raise ResourceLoadError(f'Could not read replacement word file {filename}: {error}') from error


class FillerWords:
    """Filler words by position in sentence, e.g. 'No' at the beginning, 'prostě' in the middle."""
    block_tags = (('<beginning>', '</beginning>', PositionInSentence.BEGINNING),
                  ('<middle>', '</middle>', PositionInSentence.MIDDLE),
                  ('<end>', '</end>', PositionInSentence.END))

    def __init__(self, beginning: Sequence[str] = (), middle: Sequence[str] = (), end: Sequence[str] = ()):
        self.filler_words: Dict[PositionInSentence, List[str]] = {PositionInSentence.BEGINNING: list(beginning),
                                                                  PositionInSentence.MIDDLE: list(middle),
                                                                  PositionInSentence.END: list(end)}

    def words(self, position: PositionInSentence) -> List[str]:
        return self.filler_words[position]

    def load_resource(self, filename: Path, verbose: bool = False) -> None:
        """Loads filler words, one per line, in three blocks that must appear in this order:
        <beginning> ... </beginning> <middle> ... </middle> <end> ... </end>
        Example input file: data/filler-words.xml"""
        expected_tags = [tag for opening_tag, closing_tag, _ in self.block_tags for tag in (opening_tag, closing_tag)]
        tag_to_position = {}
        for opening_tag, closing_tag, position in self.block_tags:
            tag_to_position[opening_tag] = position
            tag_to_position[closing_tag] = None
        filler_dict: Dict[PositionInSentence, List[str]] = {position: [] for position in PositionInSentence}
        try:
            with open(filename, encoding='utf-8-sig') as f_in:
                line_number = 0
                n_expected = 0          # index into expected_tags
                current_list: Optional[List[str]] = None
                for line in f_in:
                    line_number += 1
                    word = line.strip()
                    if word in tag_to_position:
                        if n_expected >= len(expected_tags) or word != expected_tags[n_expected]:
                            expected = expected_tags[n_expected] if n_expected < len(expected_tags) else 'end of file'
                            raise ResourceLoadError(f"Expected {expected} but got {word} "
                                                    f"in line {line_number} in {filename}")
                        position = tag_to_position[word]
                        current_list = None if position is None else filler_dict[position]
                        n_expected += 1
                    elif word == '':
                        continue
                    elif current_list is None:
                        expected = expected_tags[n_expected] if n_expected < len(expected_tags) else 'end of file'
                        raise ResourceLoadError(f"Filler word '{word}' outside of a block in line {line_number} "
                                                f"in {filename} (expected {expected})")
                    else:
                        current_list.append(word)
                if n_expected < len(expected_tags):
                    raise ResourceLoadError(f'Expected {expected_tags[n_expected]} but reached end of file {filename}')
        except OSError as error:
            raise ResourceLoadError(f'Could not read filler word file {filename}: {error}') from error
        self.filler_words = filler_dict
        if verbose:
            log.info(f'Loaded {len(filler_dict[PositionInSentence.BEGINNING])}/'
                     f'{len(filler_dict[PositionInSentence.MIDDLE])}/'
                     f'{len(filler_dict[PositionInSentence.END])} beginning/middle/end filler words '
                     f'from {line_number} lines in {filename}')


class LexiconStore:
    """Read-only word resources shared by all sentences."""
    def __init__(self, replacement_dict: ReplacementDict, filler_words: FillerWords):
        self.replacement_dict = replacement_dict
        self.filler_words = filler_words

    @classmethod
    def load(cls, replacement_filename: Path, filler_filename: Path, verbose: bool = False) -> 'LexiconStore':
        """Loads both resource files. Raises ResourceLoadError if either cannot be used."""
        replacement_dict = ReplacementDict()
        replacement_dict.load_resource(replacement_filename, verbose=verbose)
        filler_words = FillerWords()
        filler_words.load_resource(filler_filename, verbose=verbose)
        # Beginning and middle are the positions that get drawn for sentences.
        for position in (PositionInSentence.BEGINNING, PositionInSentence.MIDDLE):
            if not filler_words.words(position):
                raise ResourceLoadError(f'No {position.name.lower()} filler words in {filler_filename}')
        if not filler_words.words(PositionInSentence.END):
            log.warning(f'No end filler words in {filler_filename}')
        return cls(replacement_dict, filler_words)

    def has_replacement(self, form: str, lemma: str) -> bool:
        return form in self.replacement_dict or lemma in self.replacement_dict

    def lookup_replacement(self, form: str, lemma: str) -> Optional[str]:
        """Surface form takes precedence over lemma."""
        if (replacement := self.replacement_dict.get(form)) is not None:
            return replacement
        return self.replacement_dict.get(lemma)

    def filler_word(self, position: PositionInSentence, rng) -> str:
        words = self.filler_words.words(position)
        if not words:
            raise ValueError(f'No {position.name.lower()} filler words available')
        return rng.choice(words)


re_non_letter = regex.compile(r'\P{L}')
re_split_on_first_letter = regex.compile(r'(\P{L}+)(\p{L}.*)')


def adjust_capitalization(s: str, orig_s: str) -> str:
    """Adjust capitalization of s according to orig_s. Example: if s=jo orig_s=Ano then return Jo"""
    if s == orig_s:
        return s
    orig_s_letters = re_non_letter.sub('', orig_s)
    if (len(orig_s_letters) >= 1) and orig_s_letters[0].isupper():
        if (len(orig_s_letters) >= 2) and orig_s_letters.isupper():
            return s.upper()
        elif m2 := re_split_on_first_letter.match(s):
            return m2.group(1) + m2.group(2)[0].upper() + m2.group(2)[1:]
        else:
            return s[:1].upper() + s[1:]
    else:
        return s


def increment_dict_count(ht: dict, key: str, increment=1) -> int:
    """For example ht['NUMBER-OF-LINES']"""
    ht[key] = ht.get(key, 0) + increment
    return ht[key]


def join_tokens(tokens: List[str]) -> str:
    """Join tokens with space, ignoring empty tokens"""
    return ' '.join([token for token in tokens if token != ''])


def reg_plural(s: str, n: int) -> str:
    return s if n == 1 else s + 's'
