"""
The main "is this word correct?" algorithm implementation.

As all word forms are produced from stems and affixes on dictionary reading, the lookup itself is
simple:

* the word is correct if it is in the table of word forms (and is not marked as
  "only in compound")
* ...or, if it is long enough, it matches one of compound rules
* ...or one of its "case variants" (how it might've been spelled in dictionary) is correct: an
  all-uppercase "PARIS" is correct if there is "Paris" or "paris" in dictionary, a capitalized
  "Cat" is correct if there is "cat". But words with ``KEEPCASE`` flag are correct only in their
  exact dictionary case.

To follow algorithm details, start reading from :meth:`Lookup.__call__`

.. autoclass:: Lookup
"""

import logging
from typing import List, Optional

from typolite.hunspell import data
from typolite.hunspell.algo.capitalization import Casing

LOGGER = logging.getLogger(__name__)


class Lookup:
    """
    ``Lookup`` object is created on :class:`Dictionary <typolite.hunspell.dictionary.Dictionary>` reading.
    Typically, you would not use it directly, but you might want for experiments::

        >>> dictionary = Dictionary.from_files('dictionaries/en_US')
        >>> lookup = dictionary.lookuper

        >>> lookup('typolite')
        False
        >>> lookup('Spells')
        True
        >>> lookup.check_exact('Spells')
        False

    **Main methods**

    .. automethod:: __call__
    .. automethod:: check_exact

    **Utility**

    .. automethod:: has_flag
    .. automethod:: compound_match
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic, casing: Optional[Casing] = None):
        self.aff = aff
        self.dic = dic
        self.casing = casing or Casing()

        self.compound_min: Optional[int] = None
        compound_min = aff.flag('COMPOUNDMIN')
        if compound_min is not None:
            if compound_min.isdigit():
                self.compound_min = int(compound_min)
            else:
                LOGGER.warning('Malformed COMPOUNDMIN %r, compound words will not be checked', compound_min)

    def __call__(self, word: str) -> bool:
        """
        The outermost word correctness check: exact spelling, then case variants.

        Args:
            word: Word to check (surrounding spaces are ignored)
        """

        word = word.strip()
        if not word:
            return False

        if self.check_exact(word):
            return True

        if self.casing.upper(word) == word:
            # "PARIS" => "Paris" or "paris"
            for variant in (self.casing.capitalize(word), self.casing.lower(word)):
                if variant == word:
                    continue
                if self.has_flag(variant, 'KEEPCASE'):
                    return False
                if self.check_exact(variant):
                    return True

        # "Cat" => "cat"
        uncapitalized = self.casing.lowerfirst(word)
        if uncapitalized != word:
            if self.has_flag(uncapitalized, 'KEEPCASE'):
                return False
            if self.check_exact(uncapitalized):
                return True

        return False

    def check_exact(self, word: str) -> bool:
        """
        Checks exactly this spelling of the word, without case variants.

        Args:
            word: Word to check
        """

        if word not in self.dic:
            return self.compound_match(word)

        flag_sets = self.dic.table[word]
        if flag_sets is None:
            return True

        # At least one of the declarations should allow the word to be standalone
        return any(not self.has_flag(word, 'ONLYINCOMPOUND', flags) for flags in flag_sets)

    def compound_match(self, word: str) -> bool:
        """
        Checks whether the word could be produced by some compound rule (see
        :class:`CompoundRule <typolite.hunspell.data.aff.CompoundRule>`).
        """

        if self.compound_min is None or len(word) < self.compound_min:
            return False

        return any(regexp.fullmatch(word) for regexp in self.dic.compound_regexps)

    def has_flag(self, word: str, flag_name: str, flags: Optional[List[str]] = None) -> bool:
        """
        Whether the word has the flag, specified by the name of .aff directive declaring it.

        ::

            >>> lookup.has_flag('OK', 'KEEPCASE')
            True

        Args:
            word: Word to check (should be in dictionary, unless ``flags`` are passed)
            flag_name: Directive like ``KEEPCASE`` or ``NOSUGGEST``
            flags: If passed, these flags are checked instead of all the dictionary flags of the word
        """

        flag = self.aff.flag(flag_name)
        if flag is None:
            return False

        if flags is None:
            flags = self.dic.flags(word)

        return flag in flags
