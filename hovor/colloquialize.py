#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Converts tokenized, truecased Czech sentences (one per line) into text resembling unprepared speech:
colloquial word forms (bílého -> bílýho), colloquial replacement words (peníze -> prachy),
filler words (prostě, vlastně) and occasional word repetitions.
When using STDIN and/or STDOUT, if might be necessary, particularly for older versions of Python, to do
'export PYTHONIOENCODING=UTF-8' before calling this Python script to ensure UTF-8 encoding.
"""
# -*- encoding: utf-8 -*-
import argparse
import datetime
import logging as log
from pathlib import Path
import random
import re
import sys
from typing import List, Optional, TextIO, Tuple
from . import __version__, last_mod_date
from . import tagset
from . import util
from .morphology import ExternalToolError, Morphology, Tagger
from .util import LexiconStore, PositionInSentence, TaggedWord

log.basicConfig(level=log.INFO)

FILLER_CHANCE = 30          # percent of sentences that get a filler word
REPETITION_CHANCE = 10      # percent (exclusive) of sentences in which one word is repeated
REPLACEMENT_CHANCE = 6      # out of 10 words found in the replacement dictionary
REPLACEMENT_WORDS_FILENAME = 'replacement-words.dict'
FILLER_WORDS_FILENAME = 'filler-words.xml'


def valid_chance(chance: int) -> bool:
    return isinstance(chance, int) and 0 <= chance <= 100


class Colloquializer:
    def __init__(self, lexicon: LexiconStore, morphology: Morphology, tagger: Optional[Tagger] = None,
                 rng: Optional[random.Random] = None, filler_chance: int = FILLER_CHANCE,
                 repetition_chance: int = REPETITION_CHANCE, keep_capitalization: bool = False,
                 verbose: bool = False):
        self.lexicon = lexicon
        self.morphology = morphology
        self.tagger = tagger
        # One random generator for all sentences; anything with randint(a, b) and choice(seq) will do.
        self.rng = rng if rng is not None else random.Random()
        self.filler_chance = FILLER_CHANCE
        self.repetition_chance = REPETITION_CHANCE
        if not self.set_filler_chance(filler_chance):
            raise ValueError(f'Filler chance must be an integer percentage, not {filler_chance}')
        if not self.set_repetition_chance(repetition_chance):
            raise ValueError(f'Repetition chance must be an integer percentage, not {repetition_chance}')
        self.keep_capitalization = keep_capitalization
        self.verbose = verbose
        self.number_of_lines = 0

    @staticmethod
    def default_data_dir() -> Path:
        return Path(__file__).parent / "data"

    def set_filler_chance(self, filler_chance: int) -> bool:
        if not valid_chance(filler_chance):
            return False
        self.filler_chance = filler_chance
        return True

    def set_repetition_chance(self, repetition_chance: int) -> bool:
        if not valid_chance(repetition_chance):
            return False
        self.repetition_chance = repetition_chance
        return True

    def filler_index(self, position: PositionInSentence, n_words: int) -> int:
        """Index of the word before which the filler word is inserted. Sentences are assumed to end in punctuation.
        Example: sentence 'A B C .', filler F, index 1 -> 'A F B C .'"""
        if position == PositionInSentence.BEGINNING:
            return 0
        elif position == PositionInSentence.MIDDLE:
            if n_words >= 3:
                return self.rng.randint(1, n_words - 2)
            else:
                return min(1, n_words - 1)  # 'Ano .' -> 'Ano prostě .'
        else:
            return n_words - 1

    def decide_filler(self, n_words: int) -> Tuple[Optional[str], Optional[int]]:
        """Returns filler word and its insertion index, or (None, None) if this sentence gets no filler word."""
        if self.rng.randint(1, 100) > self.filler_chance:
            return None, None
        # Only beginning and middle are drawn. End filler words are supported, but too often sound odd.
        position = PositionInSentence(self.rng.randint(0, 1))
        filler_word = self.lexicon.filler_word(position, self.rng)
        filler_index = self.filler_index(position, n_words)
        if self.verbose:
            log.info(f'Filler word {filler_word} ({position.name.lower()}) at index {filler_index}')
        return filler_word, filler_index

    def decide_repetition(self, n_words: int) -> Optional[int]:
        """Returns the index of the word to be repeated, or None. The final punctuation is never drawn."""
        if self.rng.randint(1, 100) >= self.repetition_chance:
            return None
        repeat_index = self.rng.randint(0, max(n_words - 2, 0))
        if self.verbose:
            log.info(f'Repeat word index: {repeat_index}')
        return repeat_index

    def generate_first(self, lemma: str, tag: str) -> Optional[str]:
        """First form generated for lemma and tag, if any. Further forms are ignored."""
        forms = self.morphology.generate(lemma, tag)
        if self.verbose:
            log.info(f'generate({lemma}, {tag}) -> {forms}')
        # An empty form would vanish from the output sentence.
        return forms[0] if forms and forms[0] else None

    def replacement_word(self, word: TaggedWord) -> str:
        """Inflects the replacement of word like word itself, e.g. penězi -> prachama"""
        replacement = self.lexicon.lookup_replacement(word.form, word.lemma)
        if replacement is None:
            return word.form
        pos = tagset.decode_tag(word.tag).pos
        if pos == tagset.POS_NOUN:
            # No form probably means that the replacement has a different gender. Show its lemma instead.
            return self.generate_first(replacement, word.tag) or replacement
        elif pos == tagset.POS_VERB:
            # A verb without the right person or tense is worse than no replacement.
            return self.generate_first(replacement, word.tag) or word.form
        else:
            return replacement

    def colloquial_variant(self, word: str, lemma: str, tag: str) -> str:
        """Colloquial form of lemma for tag (e.g. bílého -> bílýho), or word if there is none."""
        colloquial_form = self.generate_first(lemma, tagset.colloquial_tag(tag))
        if colloquial_form is None:
            return word
        return colloquial_form

    def colloquialize_word(self, word: TaggedWord, ht: dict) -> str:
        output_word = word.form
        replaced = False
        if self.lexicon.has_replacement(word.form, word.lemma):
            if self.rng.randint(0, 9) < REPLACEMENT_CHANCE:
                output_word = self.replacement_word(word)
                replaced = True
                util.increment_dict_count(ht, 'REPLACEMENTS')
                if self.verbose:
                    log.info(f'Replacing {word.form} with {output_word}')
            elif self.verbose:
                log.info(f'Not replacing {word.form}')
        attributes = tagset.decode_tag(word.tag)
        regenerated_word = output_word
        if attributes.pos == tagset.POS_ADJECTIVE:
            # Dictionary replacements are lemmas, so a replaced word serves as lemma.
            if replaced:
                regenerated_word = self.colloquial_variant(output_word, output_word, word.tag)
            else:
                regenerated_word = self.colloquial_variant(word.form, word.lemma, word.tag)
        elif attributes.pos == tagset.POS_NOUN:
            # Only plural instrumental for now, e.g. 's kamarády' -> 's kamarádama'
            if attributes.is_plural_instrumental():
                if replaced:
                    regenerated_word = self.colloquial_variant(output_word, output_word, word.tag)
                else:
                    regenerated_word = self.colloquial_variant(word.form, word.lemma, word.tag)
        elif attributes.is_possessive_pronoun():
            # e.g. 'mého psa' -> 'mýho psa'; uses the original lemma even after a replacement
            regenerated_word = self.colloquial_variant(output_word, word.lemma, word.tag)
        if regenerated_word != output_word:
            util.increment_dict_count(ht, 'REGENERATIONS')
            output_word = regenerated_word
        if replaced and self.keep_capitalization:
            output_word = util.adjust_capitalization(output_word, word.form)
        return output_word

    def colloquialize_sentence(self, words: List[TaggedWord], ht: Optional[dict] = None) -> List[str]:
        """Returns the output tokens for a tagged sentence."""
        if ht is None:
            ht = {}
        n_words = len(words)
        if n_words == 0:
            return []
        filler_word, filler_index = self.decide_filler(n_words)
        repeat_index = self.decide_repetition(n_words)
        output_words = []
        for i, word in enumerate(words):
            if self.verbose:
                log.info(f'form: {word.form}, lemma: {word.lemma}, tag: {word.tag}')
            output_word = self.colloquialize_word(word, ht)
            if (i == repeat_index) and tagset.decode_tag(word.tag).is_punctuation():
                # Repeat the next word instead of the punctuation.
                repeat_index += 1
            output_words.append(output_word)
        if (repeat_index is not None) and (repeat_index >= n_words):
            if self.verbose:
                log.info(f'No word left to repeat at index {repeat_index}')
            repeat_index = None
        tokens = []
        for i, output_word in enumerate(output_words):
            if i == filler_index:
                tokens.append(filler_word)
                util.increment_dict_count(ht, 'FILLERS')
            tokens.append(output_word)
            if i == repeat_index:
                tokens.append(output_word)
                util.increment_dict_count(ht, 'REPETITIONS')
        return tokens

    def colloquialize_string(self, s: str, line_id: Optional[str] = None, ht: Optional[dict] = None) -> Optional[str]:
        """Tags and converts one sentence. Returns None if the tagger could not find a sentence."""
        if self.tagger is None:
            raise ExternalToolError('No tagger available to tag raw text')
        forms = self.tagger.tokenize_and_segment(s)
        if forms is None:
            log.warning(f'Tagger found no sentence in line {line_id}: {s}')
            return None
        words = self.tagger.tag(forms)
        return util.join_tokens(self.colloquialize_sentence(words, ht))

    def colloquialize_lines(self, ht: dict, input_file: TextIO, output_file: TextIO) -> None:
        """Converts a file (or STDIN/STDOUT), one sentence per line."""
        line_number = 0
        for line in input_file:
            line_number += 1
            ht['NUMBER-OF-LINES'] = line_number
            line_id = str(line_number)
            try:
                result = self.colloquialize_string(line.rstrip("\n"), line_id, ht)
            except ExternalToolError as error:
                log.warning(f'Skipping line {line_id}: {error}')
                result = None
            if result is None:
                util.increment_dict_count(ht, 'SKIPPED-LINES')
                continue
            output_file.write(result + "\n")
        output_file.write("\n")
        self.number_of_lines = line_number


def main():
    """Wrapper around colloquialization that takes care of argument parsing and prints change stats to STDERR."""
    # parse arguments
    parser = argparse.ArgumentParser(description='Converts tokenized Czech sentences into colloquial speech')
    parser.add_argument('-i', '--input', type=argparse.FileType('r', encoding='utf-8', errors='surrogateescape'),
                        default=sys.stdin, metavar='INPUT-FILENAME', help='(default: STDIN)')
    parser.add_argument('-o', '--output', type=argparse.FileType('w', encoding='utf-8', errors='ignore'),
                        default=sys.stdout, metavar='OUTPUT-FILENAME', help='(default: STDOUT)')
    parser.add_argument('--tagger-model', type=str, required=True, metavar='TAGGER-FILE',
                        help='MorphoDiTa tagger model, e.g. czech-morfflex-pdt-161115.tagger')
    parser.add_argument('--morpho-dictionary', type=str, default=None, metavar='DICTIONARY-FILE',
                        help="MorphoDiTa dictionary, e.g. czech-morfflex-161115.dict (default: tagger's dictionary)")
    parser.add_argument('--replacement-words', type=str, default=None, metavar='REPLACEMENT-FILE',
                        help=f'words to be replaced and their colloquial equivalents '
                             f'(default: data/{REPLACEMENT_WORDS_FILENAME})')
    parser.add_argument('--filler-words', type=str, default=None, metavar='FILLER-FILE',
                        help=f'filler words to be added to sentences (default: data/{FILLER_WORDS_FILENAME})')
    parser.add_argument('--filler-chance', type=int, default=FILLER_CHANCE, metavar='0-100',
                        help=f'chance of adding a filler word to a sentence (default: {FILLER_CHANCE})')
    parser.add_argument('--repetition-chance', type=int, default=REPETITION_CHANCE, metavar='0-100',
                        help=f'chance of repeating a word in a sentence (default: {REPETITION_CHANCE})')
    parser.add_argument('--seed', type=int, default=None, help='random seed for reproducible output')
    parser.add_argument('--keep-capitalization', action='count', default=0,
                        help='replacement words take over capitalization of the words they replace')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='write decision log etc. to STDERR')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__} last modified: {last_mod_date}')
    args = parser.parse_args()
    verbose = bool(args.verbose)
    data_dir = Colloquializer.default_data_dir()
    replacement_filename = Path(args.replacement_words) if args.replacement_words \
        else data_dir / REPLACEMENT_WORDS_FILENAME
    filler_filename = Path(args.filler_words) if args.filler_words else data_dir / FILLER_WORDS_FILENAME

    from . import morphodita
    try:
        lexicon = LexiconStore.load(replacement_filename, filler_filename, verbose=verbose)
        tagger = morphodita.MorphoditaTagger.load(Path(args.tagger_model))
        if verbose:
            log.info(f'Tagger loaded from {args.tagger_model}')
        if args.morpho_dictionary:
            morphology = morphodita.MorphoditaMorphology.load(Path(args.morpho_dictionary))
            if verbose:
                log.info(f'Morphological dictionary loaded from {args.morpho_dictionary}')
        else:
            morphology = tagger.morphology()
    except (util.ResourceLoadError, ExternalToolError) as error:
        log.error(f'Could not initialize the converter: {error}')
        sys.exit(1)
    converter = Colloquializer(lexicon, morphology, tagger=tagger, rng=random.Random(args.seed),
                               keep_capitalization=bool(args.keep_capitalization), verbose=verbose)
    if not converter.set_filler_chance(args.filler_chance):
        log.warning(f'Ignoring filler chance {args.filler_chance} (must be 0-100), using {converter.filler_chance}')
    if not converter.set_repetition_chance(args.repetition_chance):
        log.warning(f'Ignoring repetition chance {args.repetition_chance} (must be 0-100), '
                    f'using {converter.repetition_chance}')

    # Open any input or output files. Make sure utf-8 encoding is properly set (in older Python3 versions).
    if args.input is sys.stdin and not re.search('utf-8', sys.stdin.encoding, re.IGNORECASE):
        log.error(f"Bad STDIN encoding '{sys.stdin.encoding}' as opposed to 'utf-8'. \
                    Suggestion: 'export PYTHONIOENCODING=UTF-8' or use '--input FILENAME' option")
    if args.output is sys.stdout and not re.search('utf-8', sys.stdout.encoding, re.IGNORECASE):
        log.error(f"Error: Bad STDIN/STDOUT encoding '{sys.stdout.encoding}' as opposed to 'utf-8'. \
                    Suggestion: 'export PYTHONIOENCODING=UTF-8' or use use '--output FILENAME' option")

    ht = {}
    start_time = datetime.datetime.now()
    if verbose:
        log_info = f'Start: {start_time}  Script: colloquialize.py'
        if args.input is not sys.stdin:
            log_info += f'  Input: {args.input.name}'
        if args.output is not sys.stdout:
            log_info += f'  Output: {args.output.name}'
        log_info += f'  Filler chance: {converter.filler_chance}  Repetition chance: {converter.repetition_chance}'
        log.info(log_info)
    converter.colloquialize_lines(ht, input_file=args.input, output_file=args.output)
    end_time = datetime.datetime.now()
    elapsed_time = end_time - start_time
    number_of_lines = ht.get('NUMBER-OF-LINES', 0)
    lines = util.reg_plural('line', number_of_lines)
    if verbose:
        log.info(f'End: {end_time}  Elapsed time: {elapsed_time}  Processed {str(number_of_lines)} {lines}')
        log.info('  '.join(f'{key}: {ht.get(key, 0)}'
                           for key in ('SKIPPED-LINES', 'REPLACEMENTS', 'REGENERATIONS', 'FILLERS', 'REPETITIONS')))
    elif elapsed_time.seconds >= 10:
        log.info(f'Elapsed time: {elapsed_time.seconds} seconds for {number_of_lines:,} {lines}')
    elif ht.get('SKIPPED-LINES'):
        log.info(f"Skipped {ht['SKIPPED-LINES']} of {number_of_lines} {lines}")


if __name__ == "__main__":
    main()
