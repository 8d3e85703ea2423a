import logging

import pytest

from typolite.hunspell import Dictionary


def dictionary(aff_text, dic_text, **options):
    return Dictionary.from_text(aff_text, dic_text, **options)


def test_plain_words():
    d = dictionary('', "2\ncat\ndog\n")

    assert d.check('cat')
    assert d.check('dog')
    assert not d.check('cow')
    assert not d.check('')
    assert not d.check('   ')
    assert d.check('  cat ')


def test_affixed_words():
    d = dictionary("""
        SFX S Y 1
        SFX S 0 s .
        """, "1\ncat/S\n")

    assert d.check('cats')
    assert d.dic.table['cats'] is None
    assert not d.check('catss')


@pytest.mark.parametrize('word,result', [
    ('cat', True),
    ('Cat', True),
    ('CAT', True),
    ('cAT', False),
    ('Paris', True),
    ('PARIS', True),
    ('paris', False),
    ('McDonald', True),
    ('Mcdonald', False),
])
def test_capitalization(word, result):
    d = dictionary('', "cat\nParis\nMcDonald\n")

    assert d.check(word) == result


def test_check_exact():
    d = dictionary('', "cat\nParis\n")

    assert d.check_exact('cat')
    assert not d.check_exact('Cat')
    assert not d.check_exact('PARIS')


def test_keepcase():
    d = dictionary('KEEPCASE K\n', "cat/K\niPhone/K\ndog\n")

    assert d.check('cat')
    assert not d.check('Cat')
    assert not d.check('CAT')
    assert d.check('iPhone')
    assert not d.check('IPhone')
    assert not d.check('IPHONE')

    assert d.check('DOG')
    assert d.check('Dog')


def test_onlyincompound():
    d = dictionary('ONLYINCOMPOUND O\n', "foo/O\nbar/O\nbar/S\n")

    assert not d.check('foo')
    # one of the declarations allows standalone usage
    assert d.check('bar')


def test_compounds():
    aff = """
        COMPOUNDMIN 3
        COMPOUNDRULE 1
        COMPOUNDRULE AB
        """
    d = dictionary(aff, "sun/A\nmoon\nshine/B\n")

    assert d.check_exact('sunshine')
    assert not d.check_exact('moonshine')
    assert not d.check_exact('shinesun')
    assert not d.check_exact('sunshines')
    assert d.check('Sunshine')


def test_compound_min():
    aff = """
        COMPOUNDMIN 5
        COMPOUNDRULE 1
        COMPOUNDRULE A*
        """
    d = dictionary(aff, "ab/A\n")

    assert not d.check('abab')
    assert d.check('ababab')


def test_compound_one_or_more():
    d = dictionary("COMPOUNDMIN 1\nCOMPOUNDRULE 1\nCOMPOUNDRULE A+\n", "ab/A\n")

    assert len(d.dic.compound_regexps) == 1
    assert d.check_exact('abab')
    assert not d.check_exact('aba')


def test_compounds_need_compoundmin():
    d = dictionary("COMPOUNDRULE 1\nCOMPOUNDRULE AB\n", "sun/A\nshine/B\n")

    assert not d.check('sunshine')


def test_malformed_compoundmin(caplog):
    with caplog.at_level(logging.WARNING, logger='typolite'):
        d = dictionary("COMPOUNDMIN many\nCOMPOUNDRULE 1\nCOMPOUNDRULE AB\n", "sun/A\nshine/B\n")

    assert not d.check('sunshine')
    assert 'COMPOUNDMIN' in caplog.records[0].getMessage()


def test_has_flag():
    d = dictionary('KEEPCASE K\nNOSUGGEST N\n', "cat/K\ncat/N\ndog\n")

    assert d.has_flag('cat', 'KEEPCASE')
    assert d.has_flag('cat', 'NOSUGGEST')
    assert not d.has_flag('dog', 'KEEPCASE')
    assert not d.has_flag('cat', 'NEEDAFFIX')
    assert not d.has_flag('cow', 'KEEPCASE')
    assert d.lookuper.has_flag('cow', 'KEEPCASE', ['K'])


def test_flags_option():
    d = dictionary('', "cat/K\n", flags={'KEEPCASE': 'K'})

    assert not d.check('Cat')


def test_turkic():
    d = dictionary('', "istanbul\nılık\n", language='tr_TR')

    assert d.check('İSTANBUL')
    assert d.check('İstanbul')
    assert d.check('ILIK')
    assert not d.check('ISTANBUL')


def test_turkic_by_lang_directive():
    d = dictionary('LANG tr_TR\n', "istanbul\n")

    assert d.check('İSTANBUL')
