"""
The main "suggest correction for this misspelling" module.

On a bird-eye view level, suggest does:

* tries replacements from the dictionary's ``REP`` table (typical misspellings): if one of them
  produces a good word, it is the only suggestion
* otherwise, produces all words one and two edits away (remove letters, insert letters, swap
  letters, replace letters) and checks (with the help of :mod:`lookup <typolite.hunspell.algo.lookup>`)
  which of them are valid
* ranks the valid ones by the number of ways they could be produced: the more edit paths lead to
  the word, the more probable it is (`Peter Norvig's scheme <http://norvig.com/spell-correct.html>`_)

Results are memoized per misspelled word.

To follow algorithm details, start reading from :meth:`Suggest.__call__`

.. autoclass:: Suggest

.. autoclass:: Memo
"""

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from typolite.hunspell import data
from typolite.hunspell.algo import permutations as pmt
from typolite.hunspell.algo.lookup import Lookup

#: Chars used for insertion and replacement edits
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'
#: How many suggestions are returned if not specified
DEFAULT_LIMIT = 5


@dataclass
class Memo:
    """
    Suggestions produced for some word, and the limit they were produced with.
    """

    suggestions: List[str]
    limit: int

    def fetch(self, limit: int) -> Optional[List[str]]:
        """
        Cached suggestions, if they are enough for the ``limit``: either it is not larger than the
        cached one, or there were less suggestions than the cached limit (so a larger limit wouldn't
        find more of them).
        """
        if limit <= self.limit or len(self.suggestions) < self.limit:
            return self.suggestions[:limit]
        return None


class Suggest:
    """
    ``Suggest`` object is created on :class:`Dictionary <typolite.hunspell.Dictionary>` reading.
    Typically, you would not use it directly, but you might want for experiments::

        >>> dictionary = Dictionary.from_files('dictionaries/en_US')
        >>> suggest = dictionary.suggester

        >>> suggest('speling')
        ['spelling', 'spewing', 'spieling']

        >>> suggest.weighted('speling')[:3]
        [('spelling', 50), ('spewing', 14), ('spieling', 12)]

    Memoization cache is guarded by a lock, so the same object can be used from several threads.

    **Main methods**

    .. automethod:: __call__
    .. automethod:: replacement
    .. automethod:: weighted
    """

    def __init__(self, aff: data.Aff, dic: data.Dic, lookup: Lookup, *, alphabet: str = ALPHABET):
        self.aff = aff
        self.dic = dic
        self.lookup = lookup
        self.alphabet = alphabet

        self.memo: Dict[str, Memo] = {}
        self.lock = threading.Lock()

    def __call__(self, word: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """
        Returns up to ``limit`` suggestions, best first. Correct words have no suggestions.

        ::

            >>> suggest('Speling', 2)
            ['Spelling', 'Spewing']

        Args:
            word: Misspelled word
            limit: Max. number of suggestions
        """

        if limit < 1:
            raise ValueError(f'limit should be positive, got {limit!r}')

        with self.lock:
            memo = self.memo.get(word)
        if memo:
            cached = memo.fetch(limit)
            if cached is not None:
                return cached

        if self.lookup(word):
            return []

        replaced = self.replacement(word)
        if replaced is not None:
            return [replaced]

        suggestions = self.select(word, self.weighted(word), limit)

        with self.lock:
            self.memo[word] = Memo(suggestions=suggestions, limit=limit)

        return suggestions

    def replacement(self, word: str) -> Optional[str]:
        """
        Tries :attr:`Aff.REP <typolite.hunspell.data.aff.Aff.REP>` table patterns in order, returns
        the first replacement producing correct word.

        Args:
            word: Misspelled word
        """

        for pattern in self.aff.REP:
            corrected = pattern.replace(word)
            if corrected is not None and self.lookup(corrected):
                return corrected

        return None

    def weighted(self, word: str) -> List[Tuple[str, int]]:
        """
        All correct words one or two edits away from ``word``, with the number of ways each of
        them was produced; most frequent first, then alphabetically.

        Note that second-edit candidates are produced from *all* first-edit ones, not only from
        correct words.

        Args:
            word: Misspelled word
        """

        known: Dict[str, bool] = {}

        def is_known(candidate):
            if candidate not in known:
                known[candidate] = self.lookup(candidate)
            return known[candidate]

        weights: Counter = Counter()

        first_edits = list(pmt.edits(word, self.alphabet))
        weights.update(candidate for candidate in first_edits if is_known(candidate))

        for edit in first_edits:
            weights.update(candidate for candidate in pmt.edits(edit, self.alphabet) if is_known(candidate))

        return sorted(weights.items(), key=lambda item: (-item[1], item[0]))

    def select(self, word: str, weighted: List[Tuple[str, int]], limit: int) -> List[str]:
        """
        Coerces candidates to the misspelling's capitalization, and takes first ``limit`` of them,
        skipping duplicates and words marked with ``NOSUGGEST``.
        """

        captype = self.lookup.casing.guess(word)

        result: List[str] = []
        for candidate, _ in weighted:
            text = self.lookup.casing.coerce(candidate, captype)
            if text in result:
                continue
            if self.nosuggest(candidate) or self.nosuggest(text):
                continue

            result.append(text)
            if len(result) >= limit:
                break

        return result

    def nosuggest(self, word: str) -> bool:
        """
        Whether the dictionary form the word is valid through has ``NOSUGGEST`` flag: the word itself,
        or the case variant :class:`Lookup <typolite.hunspell.algo.lookup.Lookup>` accepts it by
        ("Cat" is valid because of "cat", so it is not suggested if "cat" is ``NOSUGGEST``).
        """

        casing = self.lookup.casing
        for form in (word, casing.capitalize(word), casing.lower(word), casing.lowerfirst(word)):
            if form in self.dic:
                return self.lookup.has_flag(form, 'NOSUGGEST')
        return False
