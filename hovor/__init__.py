__version__ = '0.3.1'
__description__ = 'hovor rewrites tagged Czech sentences into colloquial speech (fillers, repetitions, colloquial forms)'
last_mod_date = 'October 19, 2026'
