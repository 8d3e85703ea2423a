"""
.. autoclass:: Type

.. autoclass:: Casing
    :members:

.. autoclass:: TurkicCasing

.. autofunction:: for_language
"""

from enum import Enum
from typing import Optional


Type = Enum('Type', 'NO INIT ALL HUHINIT HUH')
"""
Word capitalization kinds, as :meth:`Casing.guess` sees them:

* ``NO``: "kitten"
* ``INIT``: "Kitten", only the first letter is uppercase
* ``ALL``: "KITTEN"
* ``HUH``: "kitTen", mixed case starting with a lowercase letter
* ``HUHINIT``: "KitTen", mixed case starting with an uppercase letter
"""

TURKIC_LANGUAGES = ('tr', 'az', 'crh')


class Casing:
    """
    Case conversions used by lookup and suggest. Languages with special casing rules (see
    :class:`TurkicCasing`) redefine only the conversions that differ.
    """

    def guess(self, word: str) -> Type:
        """
        Guess word's capitalization.
        """

        if word.islower():
            return Type.NO
        if self.upper(word) == word:
            return Type.ALL
        if word[:1].isupper():
            return Type.INIT if word[1:].islower() else Type.HUHINIT
        return Type.HUH

    def lower(self, word: str) -> str:  # pylint: disable=no-self-use
        return word.lower()

    def upper(self, word: str) -> str:   # pylint: disable=no-self-use
        return word.upper()

    def capitalize(self, word: str) -> str:
        """
        Capitalize (first letter unchanged, the rest lowercase). Used for all-uppercase words:
        "PARIS" might be "Paris" in the dictionary.
        """
        return word[:1] + self.lower(word[1:])

    def lowerfirst(self, word: str) -> str:
        """
        Just change the case of the first letter to lower.
        """
        return self.lower(word[:1]) + word[1:]

    def coerce(self, word: str, cap: Type) -> str:
        """
        Recases a suggestion after the misspelling: for "Kiten" (``INIT``) the found "kitten" becomes
        "Kitten", for "KITEN" (``ALL``) it becomes "KITTEN". Other kinds leave the suggestion as is.
        """
        if cap == Type.INIT:
            return self.upper(word[:1]) + word[1:]
        if cap == Type.ALL:
            return self.upper(word)
        return word


class TurkicCasing(Casing):
    """
    Turkic (Turkish, Azerbaijani, Crimean Tatar) casing: dotted "i" pairs with "İ", and dotless
    "ı" pairs with "I"::

        >>> turkic = typolite.hunspell.algo.capitalization.TurkicCasing()
        >>> turkic.lower('Izmir')
        'ızmir'
        >>> turkic.upper('Izmir')
        'IZMİR'

    """

    U2L = str.maketrans('İI', 'iı')
    L2U = str.maketrans('iı', 'İI')

    def lower(self, word):
        return super().lower(word.translate(self.U2L))

    def upper(self, word):
        return super().upper(word.translate(self.L2U))


def for_language(language: Optional[str]) -> Casing:
    """
    Casing for language code like ``tr_TR`` or ``en-US`` (``None`` means generic casing).
    """
    if language and language.replace('-', '_').split('_')[0].lower() in TURKIC_LANGUAGES:
        return TurkicCasing()
    return Casing()
