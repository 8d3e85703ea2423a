import logging

from typolite.hunspell.readers import TextReader, AFF_COMMENT, DIC_COMMENT, read_aff, read_dic


def read(aff_text, dic_text):
    aff, context = read_aff(TextReader(aff_text, comment=AFF_COMMENT))
    return read_dic(TextReader(dic_text, comment=DIC_COMMENT), aff=aff, context=context)


def test_load():
    dic = read('', "3\ncat\ndog/SM\n\tcomment\ncow\n")

    assert dic.table == {'cat': None, 'dog': [['S', 'M']], 'cow': None}
    assert len(dic) == 3
    assert 'dog' in dic
    assert dic.flags('dog') == ['S', 'M']
    assert dic.flags('cat') == []


def test_first_line_is_a_word():
    dic = read('', "cat\ndog\n")

    assert list(dic.table) == ['cat', 'dog']


def test_morphology():
    dic = read('', "cat/S po:noun\ndrink/X\tst:drink\n")

    assert dic.table == {'cat': [['S']], 'drink': [['X']]}


def test_affixes():
    dic = read("""
        SFX S Y 1
        SFX S 0 s .
        """, "1\ncat/S\n")

    assert dic.table == {'cat': [['S']], 'cats': None}


def test_repeated_words_accumulate_flags():
    dic = read('', "cat\ncat/A\ncat/B\ncat\n")

    assert dic.table == {'cat': [['A'], ['B']]}


def test_cross_product():
    dic = read("""
        PFX U Y 1
        PFX U 0 un .

        SFX D Y 1
        SFX D 0 ed [^e]

        SFX S N 1
        SFX S 0 s .
        """, "lock/UDS\n")

    assert set(dic.table) == {'lock', 'unlock', 'unlocked', 'locked', 'locks'}


def test_continuation_classes():
    dic = read("""
        SFX X Y 1
        SFX X 0 able/S .

        SFX S Y 1
        SFX S 0 s .
        """, "drink/X\n")

    assert set(dic.table) == {'drink', 'drinkable', 'drinkables'}


def test_needaffix():
    dic = read("""
        NEEDAFFIX X
        SFX S Y 1
        SFX S 0 s .
        """, "foo/XS\nbar/S\n")

    assert 'foo' not in dic
    assert 'foos' in dic
    assert 'bar' in dic


def test_long_flags():
    dic = read("""
        FLAG long
        SFX Sx Y 1
        SFX Sx 0 s .
        """, "cat/SxMx\n")

    assert dic.table == {'cat': [['Sx', 'Mx']], 'cats': None}


def test_compound_rule_codes():
    dic = read("""
        ONLYINCOMPOUND O
        COMPOUNDRULE 2
        COMPOUNDRULE AB
        COMPOUNDRULE AC?
        """, "sun/A\nshine/B\nfoo/O\nbar\n")

    # C has no words: dropped
    assert dic.compound_rule_codes == {'A': ['sun'], 'B': ['shine'], 'O': ['foo']}
    assert len(dic.compound_regexps) == 2


def test_malformed(caplog):
    with caplog.at_level(logging.WARNING, logger='typolite'):
        dic = read('', "cat\n/AB\ndog\n")

    assert list(dic.table) == ['cat', 'dog']
    assert len(caplog.records) == 1
    assert 'without a word' in caplog.records[0].getMessage()
