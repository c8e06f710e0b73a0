# tests/test_driver.py
"""
Line-by-line conversion with a stub tagger, and the MorphoDiTa binding.
"""
import io
import logging
import random

import pytest

from hovor import colloquialize
from hovor.colloquialize import Colloquializer
from hovor.morphology import ExternalToolError
from hovor.util import TaggedWord

from .conftest import ADJ_MS4, NOUN_MS4, PUNCT, VERB, ScriptedRandom, StubMorphology, StubTagger

SENTENCES = {
    'Vidím bílého psa .': [TaggedWord('Vidím', 'vidět', VERB),
                           TaggedWord('bílého', 'bílý', ADJ_MS4),
                           TaggedWord('psa', 'pes', NOUN_MS4),
                           TaggedWord('.', '.', PUNCT)],
    'Broken tagger .': None,
}


@pytest.fixture
def white_dog_morphology():
    return StubMorphology({('bílý', 'AAMS4----1A---6'): ['bílýho']})


def test_colloquialize_lines(lexicon, white_dog_morphology, caplog):
    rng = ScriptedRandom(randints=[100, 100] * 2)
    converter = Colloquializer(lexicon, white_dog_morphology, tagger=StubTagger(SENTENCES), rng=rng,
                               filler_chance=0, repetition_chance=0)
    input_file = io.StringIO('Vidím bílého psa .\nnot a sentence\nBroken tagger .\nVidím bílého psa .\n')
    output_file = io.StringIO()
    ht = {}
    with caplog.at_level(logging.WARNING):
        converter.colloquialize_lines(ht, input_file, output_file)
    assert output_file.getvalue() == 'Vidím bílýho psa .\nVidím bílýho psa .\n\n'
    assert ht['NUMBER-OF-LINES'] == 4
    assert ht['SKIPPED-LINES'] == 2
    assert converter.number_of_lines == 4
    assert 'line 2' in caplog.text
    assert 'line 3' in caplog.text


def test_colloquialize_lines_empty_input(lexicon, morphology):
    converter = Colloquializer(lexicon, morphology, tagger=StubTagger({}), rng=ScriptedRandom())
    output_file = io.StringIO()
    converter.colloquialize_lines({}, io.StringIO(''), output_file)
    assert output_file.getvalue() == '\n'


def test_colloquialize_string(lexicon, white_dog_morphology):
    rng = ScriptedRandom(randints=[100, 100])
    converter = Colloquializer(lexicon, white_dog_morphology, tagger=StubTagger(SENTENCES), rng=rng,
                               filler_chance=0, repetition_chance=0)
    assert converter.colloquialize_string('Vidím bílého psa .') == 'Vidím bílýho psa .'
    assert converter.colloquialize_string('nothing to see') is None


def test_colloquialize_string_without_tagger(lexicon, morphology):
    converter = Colloquializer(lexicon, morphology)
    with pytest.raises(ExternalToolError):
        converter.colloquialize_string('Vidím bílého psa .')


def test_one_random_generator_for_all_sentences(lexicon, white_dog_morphology, monkeypatch):
    created = []

    class CountingRandom(random.Random):
        def __init__(self, *args):
            created.append(self)
            super().__init__(*args)

    monkeypatch.setattr(colloquialize.random, 'Random', CountingRandom)
    converter = Colloquializer(lexicon, white_dog_morphology, tagger=StubTagger(SENTENCES),
                               filler_chance=50, repetition_chance=50)
    state = converter.rng.getstate()
    output_file = io.StringIO()
    converter.colloquialize_lines({}, io.StringIO('Vidím bílého psa .\n' * 20), output_file)
    assert len(created) == 1
    assert converter.rng is created[0]
    assert converter.rng.getstate() != state
    assert len(output_file.getvalue().splitlines()) == 21


def test_seeded_runs_are_reproducible(lexicon, white_dog_morphology):
    outputs = []
    for _ in range(2):
        converter = Colloquializer(lexicon, white_dog_morphology, tagger=StubTagger(SENTENCES),
                                   rng=random.Random(42), filler_chance=50, repetition_chance=50)
        output_file = io.StringIO()
        converter.colloquialize_lines({}, io.StringIO('Vidím bílého psa .\n' * 10), output_file)
        outputs.append(output_file.getvalue())
    assert outputs[0] == outputs[1]


def test_morphodita_models_must_exist(tmp_path):
    pytest.importorskip('ufal.morphodita')
    from hovor import morphodita
    with pytest.raises(ExternalToolError):
        morphodita.MorphoditaTagger.load(tmp_path / 'missing.tagger')
    with pytest.raises(ExternalToolError):
        morphodita.MorphoditaMorphology.load(tmp_path / 'missing.dict')


def test_generator_failure_affects_only_its_line(lexicon, white_dog_morphology, caplog):
    sentences = dict(SENTENCES)
    sentences['Vidím zlého psa .'] = [TaggedWord('Vidím', 'vidět', VERB),
                                      TaggedWord('zlého', 'zlý', ADJ_MS4),
                                      TaggedWord('psa', 'pes', NOUN_MS4),
                                      TaggedWord('.', '.', PUNCT)]
    white_dog_morphology.failing.add('zlý')
    converter = Colloquializer(lexicon, white_dog_morphology, tagger=StubTagger(sentences),
                               rng=ScriptedRandom(randints=[100, 100] * 2), filler_chance=0, repetition_chance=0)
    output_file = io.StringIO()
    ht = {}
    with caplog.at_level(logging.WARNING):
        converter.colloquialize_lines(ht, io.StringIO('Vidím zlého psa .\nVidím bílého psa .\n'), output_file)
    assert output_file.getvalue() == 'Vidím bílýho psa .\n\n'
    assert ht['SKIPPED-LINES'] == 1
    assert 'generator failed on zlý' in caplog.text


def test_morphodita_backend_errors_are_wrapped():
    pytest.importorskip('ufal.morphodita')
    from hovor import morphodita

    class BrokenMorpho:
        def generate(self, *args):
            raise RuntimeError('backend crashed')

    with pytest.raises(ExternalToolError):
        morphodita.MorphoditaMorphology(BrokenMorpho()).generate('bílý', 'AAMS4----1A---6')
