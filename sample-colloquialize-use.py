#!/usr/bin/env python3
# Sample hovor call with a MorphoDiTa model (to be downloaded separately).

import random
from hovor.colloquialize import Colloquializer
from hovor.morphodita import MorphoditaTagger
from hovor.util import LexiconStore

data_dir = Colloquializer.default_data_dir()
tagger = MorphoditaTagger.load('czech-morfflex-pdt-161115.tagger')  # Load tagger and its dictionary
lexicon = LexiconStore.load(data_dir / 'replacement-words.dict', data_dir / 'filler-words.xml')
converter = Colloquializer(lexicon, tagger.morphology(), tagger=tagger, rng=random.Random(1), filler_chance=50)
print(converter.colloquialize_string("Vidím bílého psa ."))
print(converter.colloquialize_string("Šel jsem s kamarády do kina ."))
