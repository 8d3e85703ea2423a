"""
The module represents data from Hunspell's ``*.dic`` file, already expanded with affixes.

This text file has the following format:

.. code-block:: text

    124 # first line: number of entries

    # Each entry has form:
    cat/ABC

Where ``cat`` is the word, and ``ABC`` its flags (meaning and format of flags is defined by
``*.aff`` file). ``typolite`` doesn't keep stems and their flags for lookup time: on reading,
every stem is expanded into all word forms its affixes produce (see
:meth:`read_dic <typolite.hunspell.readers.dic.read_dic>`), and the result is one flat
table of words, :class:`Dic`.

.. autoclass:: Dic
"""

import itertools

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Pattern

from typolite.hunspell.data.aff import CompoundRule


@dataclass
class Dic:
    """
    Table of all known word forms.

    Typically, ``typolite`` user shouldn't create the instance of this class by themselves, it is
    created when the whole dictionary is read::

        >>> dictionary = Dictionary.from_files('dictionaries/en_US')

        >>> dictionary.dic
        Dic(... 149873 words ...)

        >>> dictionary.dic.table['spell']
        [['G', 'R', 'S', 'J', 'Z', 'D']]
        >>> dictionary.dic.table['spelling']
        None

    **Data contents:**

    .. autoattribute:: table
    .. autoattribute:: compound_rule_codes
    .. autoattribute:: compound_regexps
    """

    #: Word => ``None`` (word is known and has no flags), or list of flag lists. The same word may
    #: be declared several times with different flags ("spell" as a verb and as a noun), so each
    #: declaration is stored separately.
    table: Dict[str, Optional[List[List[str]]]] = field(default_factory=dict)

    #: Flag => all stems having this flag. Only flags used by compound rules (and the
    #: ``ONLYINCOMPOUND`` flag) are collected.
    compound_rule_codes: Dict[str, List[str]] = field(default_factory=dict)

    #: Compiled compound rules, see :meth:`compile_compound_rules`
    compound_regexps: List[Pattern] = field(default_factory=list)

    def add(self, word: str, flags: List[str]):
        """
        Registers word form. Once the word has some flags, it never becomes flagless again, further
        declarations just add more flag lists.
        """
        if word not in self.table:
            self.table[word] = None

        if flags:
            if self.table[word] is None:
                self.table[word] = []
            self.table[word].append(flags)

    def flags(self, word: str) -> List[str]:
        """All flags of all declarations of the word, flattened."""
        return list(itertools.chain.from_iterable(self.table.get(word) or []))

    def track_compound_flags(self, flags):
        for flag in flags:
            self.compound_rule_codes.setdefault(flag, [])

    def prune_compound_flags(self):
        """Drops flags no stem was marked with."""
        self.compound_rule_codes = {flag: words for flag, words in self.compound_rule_codes.items() if words}

    def compile_compound_rules(self, rules: List[CompoundRule]):
        self.compound_regexps = []
        for rule in rules:
            regexp = rule.compile(self.compound_rule_codes)
            if regexp is not None:
                self.compound_regexps.append(regexp)

    def __contains__(self, word):
        return word in self.table

    def __len__(self):
        return len(self.table)

    def __repr__(self):
        return f'Dic(... {len(self.table)} words ...)'
