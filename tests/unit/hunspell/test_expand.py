import logging

from typolite.hunspell.data.aff import AffixRule, Prefix, Suffix
from typolite.hunspell.algo.expand import apply_rule, MAX_CONTINUATION_DEPTH


def test_all_matching_entries():
    rule = AffixRule(kind='SFX', flag='D', combineable=True, entries=[
        Suffix(add='ed', condition='[^e]'),
        Suffix(add='d', condition='e'),
        Suffix(add='ing', condition='[^e]'),
    ])

    assert apply_rule('play', rule, {'D': rule}) == ['played', 'playing']
    assert apply_rule('bake', rule, {'D': rule}) == ['baked']


def test_continuation():
    plural = AffixRule(kind='SFX', flag='S', combineable=True, entries=[Suffix(add='s')])
    able = AffixRule(kind='SFX', flag='X', combineable=True, entries=[
        Suffix(add='able', continuation_classes=['S'])
    ])
    re_ = AffixRule(kind='PFX', flag='R', combineable=True, entries=[
        Prefix(add='re', continuation_classes=['X'])
    ])
    rules = {'S': plural, 'X': able, 'R': re_}

    assert apply_rule('drink', able, rules) == ['drinkable', 'drinkables']
    assert apply_rule('drink', re_, rules) == ['redrink', 'redrinkable', 'redrinkables']


def test_unknown_continuation(caplog):
    rule = AffixRule(kind='SFX', flag='S', combineable=True, entries=[
        Suffix(add='s', continuation_classes=['?'])
    ])

    with caplog.at_level(logging.DEBUG, logger='typolite'):
        assert apply_rule('cat', rule, {'S': rule}) == ['cats']

    assert 'Unknown continuation class' in caplog.records[0].getMessage()


def test_cyclic_continuation(caplog):
    rule = AffixRule(kind='SFX', flag='S', combineable=True, entries=[
        Suffix(add='s', continuation_classes=['S'])
    ])

    with caplog.at_level(logging.DEBUG, logger='typolite'):
        result = apply_rule('cat', rule, {'S': rule})

    assert result == ['cat' + 's' * n for n in range(1, MAX_CONTINUATION_DEPTH + 2)]
    assert 'cut off' in caplog.records[-1].getMessage()
