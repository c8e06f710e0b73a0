# tests/conftest.py
import pytest

from hovor.morphology import ExternalToolError, Morphology, Tagger
from hovor.util import FillerWords, LexiconStore, ReplacementDict, TaggedWord


def make_tag(pos, subpos='-', gender='-', number='-', case='-', variant='-'):
    """15-character positional tag with the given attributes, e.g. make_tag('A', 'A', 'M', 'S', '4')"""
    return pos + subpos + gender + number + case + '-' * 9 + variant


VERB = make_tag('V', 'B', '-', 'S')
ADJ_MS4 = 'AAMS4----1A----'   # degree of comparison and negation are set for adjectives
NOUN_MS4 = make_tag('N', 'N', 'M', 'S', '4')
NOUN_MP7 = make_tag('N', 'N', 'M', 'P', '7')
PUNCT = make_tag('Z', ':')
PARTICLE = make_tag('T', 'T')
POSS_PRONOUN = make_tag('P', 'S', 'M', 'S', '4')


class ScriptedRandom:
    """Random source returning scripted values, recording every request."""
    def __init__(self, randints=(), choices=()):
        self.randints = list(randints)
        self.choices = list(choices)
        self.requests = []

    def randint(self, a, b):
        self.requests.append((a, b))
        if not self.randints:
            raise AssertionError(f'Unexpected randint({a}, {b})')
        value = self.randints.pop(0)
        assert a <= value <= b, f'scripted {value} outside of [{a}, {b}]'
        return value

    def choice(self, seq):
        return seq[self.choices.pop(0)] if self.choices else seq[0]


class StubMorphology(Morphology):
    def __init__(self, forms=None, default=None, failing=()):
        self.forms = forms or {}
        self.default = default or []
        self.failing = set(failing)   # lemmas on which the generator breaks down
        self.requests = []

    def generate(self, lemma, tag):
        self.requests.append((lemma, tag))
        if lemma in self.failing:
            raise ExternalToolError(f'generator failed on {lemma}')
        return list(self.forms.get((lemma, tag), self.default))


class StubTagger(Tagger):
    """Tags lines by whitespace tokenization, looking up words in a dict. Unknown lines fail to segment."""
    def __init__(self, sentences):
        self.sentences = sentences

    def tokenize_and_segment(self, line):
        if line not in self.sentences:
            return None
        return line.split()

    def tag(self, forms):
        words = self.sentences[' '.join(forms)]
        if words is None:
            raise ExternalToolError('tagger failure')
        return list(words)


@pytest.fixture
def lexicon():
    replacement_dict = ReplacementDict({'kamarád': 'kámoš', 'dívat': 'koukat', 'ano': 'jo', 'hezký': 'pěkný',
                                        'můj': 'náš'})
    filler_words = FillerWords(beginning=['No'], middle=['prostě'], end=['že jo'])
    return LexiconStore(replacement_dict, filler_words)


@pytest.fixture
def morphology():
    return StubMorphology()
