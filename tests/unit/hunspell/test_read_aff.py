import logging

from typolite.hunspell.data import aff as a
from typolite.hunspell.readers import TextReader, AFF_COMMENT
from typolite.hunspell.readers.aff import read_aff


def read(text, **kwargs):
    return read_aff(TextReader(text, comment=AFF_COMMENT), **kwargs)


def test_directives():
    data, context = read("""
        # some comment
        SET UTF-8
        TRY esianrtolcdugmphbyfvkwz
        KEEPCASE K
        COMPOUNDMIN 3
        NOSUGGEST
        """)

    assert data.flags == {
        'SET': 'UTF-8',
        'TRY': 'esianrtolcdugmphbyfvkwz',
        'KEEPCASE': 'K',
        'COMPOUNDMIN': '3',
        'NOSUGGEST': '',
    }
    assert data.flag('KEEPCASE') == 'K'
    assert data.flag('NEEDAFFIX') is None
    assert context.flag_format is None


def test_affixes():
    data, _ = read("""
        PFX A Y 1
        PFX A   0     re         .

        SFX S N 3
        SFX S   y     ies        [^aeiou]y
        SFX S   0     s/M        [^sxzhy]
        SFX S   0     es
        """)

    assert data.rules['A'] == a.AffixRule(kind='PFX', flag='A', combineable=True, entries=[
        a.Prefix(add='re', strip='', condition='.')
    ])

    rule = data.rules['S']
    assert rule.kind == 'SFX'
    assert not rule.is_prefix
    assert not rule.combineable
    assert rule.entries == [
        a.Suffix(add='ies', strip='y', condition='[^aeiou]y'),
        a.Suffix(add='s', strip='', condition='[^sxzhy]', continuation_classes=['M']),
        a.Suffix(add='es', strip='', condition='.'),
    ]


def test_compound_rules():
    data, _ = read("""
        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE n*mp
        """)

    assert [rule.text for rule in data.COMPOUNDRULE] == ['n*1t', 'n*mp']
    assert data.COMPOUNDRULE[0].parts == [('n', '*'), ('1', ''), ('t', '')]
    assert data.COMPOUNDRULE[0].flags == ['n', '1', 't']


def test_rep():
    data, _ = read("""
        REP 3
        REP f ph
        REP ^alot$ a_lot
        REP tion$ shun
        """)

    assert data.REP == [
        a.RepPattern('f', 'ph'),
        a.RepPattern('^alot$', 'a_lot'),
        a.RepPattern('tion$', 'shun'),
    ]


def test_long_flags():
    data, context = read("""
        FLAG long

        SFX zx Y 1
        SFX zx 0 s/g?1G09 .

        NOSUGGEST 1G
        """)

    assert context.flag_format == 'long'
    assert data.rules['zx'].entries[0].continuation_classes == ['g?', '1G', '09']
    assert data.flag('NOSUGGEST') == '1G'


def test_num_flags():
    data, _ = read("""
        FLAG num

        SFX 101 Y 1
        SFX 101 0 s/1,23 .
        """)

    assert data.rules['101'].entries[0].continuation_classes == ['1', '23']


def test_preseeded_flags():
    data, context = read("KEEPCASE K\n", flags={'KEEPCASE': 'Q', 'NOSUGGEST': '!', 'FLAG': 'long'})

    assert data.flags == {'KEEPCASE': 'K', 'NOSUGGEST': '!', 'FLAG': 'long'}
    assert context.flag_format == 'long'


def test_malformed(caplog):
    with caplog.at_level(logging.WARNING, logger='typolite'):
        data, _ = read("""
            SFX S Y many
            SFX S   0     s          .

            SFX D Y 3
            SFX D   0     ed         [^e]
            SFX X   0     ing        .
            SFX D   0

            REP f ph oops
            KEEPCASE K
            """)

    # Broken header: rule skipped, its entry line is then read as one more broken header
    assert 'S' not in data.rules
    assert data.rules['D'].entries == [a.Suffix(add='ed', condition='[^e]')]
    assert data.REP == []
    assert data.flag('KEEPCASE') == 'K'

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 5
    assert 'malformed SFX header' in messages[0]
    assert 'malformed SFX header' in messages[1]
    assert 'malformed SFX D entry' in messages[2]
    assert 'malformed REP line' in messages[4]
    assert all(record.levelname == 'WARNING' for record in caplog.records)
