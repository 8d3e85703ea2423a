"""
The module represents data from Hunspell's ``*.aff`` file.

This text file has the following format:

.. code-block:: text

    # comment
    DIRECTIVE_NAME value

    # directives with a table of values
    DIRECTIVE_NAME <num_of_values>
    DIRECTIVE_NAME value1_1 value1_2 value1_3
    DIRECTIVE_NAME value2_1 value2_2 value2_3
    # ...

Only a subset of directives has a special meaning for ``typolite``: affix tables (``PFX``/``SFX``),
``COMPOUNDRULE`` and ``REP``. Every other directive is stored as a plain ``name => first value``
pair in :attr:`Aff.flags`, and a handful of them (``FLAG``, ``KEEPCASE``, ``NEEDAFFIX``,
``ONLYINCOMPOUND``, ``NOSUGGEST``, ``COMPOUNDMIN``, ``LANG``) are consulted later by the reading
and checking algorithms.

``Aff``
-------

.. autoclass:: Aff

Affix rules
-----------

.. autoclass:: AffixRule
.. autoclass:: Affix
.. autoclass:: Prefix
.. autoclass:: Suffix

Pattern-alike classes
---------------------

.. autoclass:: CompoundRule
.. autoclass:: RepPattern

.. autofunction:: condition_regexp
"""

import re
import logging

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Pattern

PREFIX = 'PFX'
SUFFIX = 'SFX'

LOGGER = logging.getLogger(__name__)

# Either a character class like "[^aeiou]" or any single char
CONDITION_PART_REGEXP = re.compile(r'\[\^?[^\]]+\]|.')

# Parenthesized long/numeric flag, or any single char; then optional quantifier
COMPOUND_PART_REGEXP = re.compile(r'(?:\((\w+)\)|(.))([*?+]?)')
# Chars of compound rule that are regexp syntax unless some words have them as a flag
COMPOUND_METACHARS = frozenset('()[]{}|.^$\\*?+')


def condition_regexp(condition: str) -> str:
    """
    Converts affix condition (``[^aeiou]y``, ``.``, ``ies``) into regexp source. Only ``.`` and
    character classes have their special meaning, everything else is escaped, so weird chars in
    real-life dictionaries (``-``, ``+``, ``)``) can't produce broken patterns.
    """
    parts = []
    for part in CONDITION_PART_REGEXP.findall(condition):
        if part == '.':
            parts.append('.')
        elif len(part) > 2 and part.startswith('[') and part.endswith(']'):
            negate = '^' if part[1] == '^' else ''
            parts.append('[' + negate + re.escape(part[1 + len(negate):-1]) + ']')
        else:
            parts.append(re.escape(part))
    return ''.join(parts)


@dataclass
class Affix:
    """
    Common base for :class:`Prefix` and :class:`Suffix`: one row of the affix table.

    Affixes are stored in table looking this way:

    .. code-block:: text

        SFX S Y 4
        SFX S   y     ies        [^aeiou]y
        SFX S   0     s          [aeiou]y
        SFX S   0     es         [sxzh]
        SFX S   0     s/M        [^sxzhy]

    Meaning of the table row:

    * Suffix S (should be same as table header)
    * ...when applies, removes "y" from the end of the stem (0 means "removes nothing")
    * ...and adds "ies"
    * ...but only when the stem ends with a consonant + "y"

    In the last row, ``/M`` is the continuation class: after "cat" became "cats", the rule ``M`` is
    applied to "cats" too.
    """

    #: What is added when the affix is applied
    add: str
    #: What is stripped from the stem when the affix is applied (empty string: nothing)
    strip: str = ''
    #: Condition against which stem is checked (``.`` means "any stem")
    condition: str = '.'
    #: Codes of rules to apply to the produced word
    continuation_classes: List[str] = field(default_factory=list)

    def apply(self, word: str) -> Optional[str]:
        """
        Produces derived word, or ``None`` if the affix condition doesn't match.
        """
        raise NotImplementedError


@dataclass
class Prefix(Affix):
    """
    :class:`Affix` at the beginning of the word. Note that ``strip`` is removed at its first
    occurrence, wherever it is.
    """

    def __post_init__(self):
        self.cond_regexp = None if self.condition == '.' else re.compile('^' + condition_regexp(self.condition))

    def apply(self, word):
        if self.cond_regexp and not self.cond_regexp.search(word):
            return None
        if self.strip:
            word = word.replace(self.strip, '', 1)
        return self.add + word

    def __repr__(self):
        return f"Prefix({self.add}: on ^{self.strip}[{self.condition}])"


@dataclass
class Suffix(Affix):
    """
    :class:`Affix` at the end of the word.
    """

    def __post_init__(self):
        self.cond_regexp = None if self.condition == '.' else re.compile(condition_regexp(self.condition) + '$')
        self.strip_regexp = re.compile(re.escape(self.strip) + '$') if self.strip else None

    def apply(self, word):
        if self.cond_regexp and not self.cond_regexp.search(word):
            return None
        if self.strip_regexp:
            word = self.strip_regexp.sub('', word, count=1)
        return word + self.add

    def __repr__(self):
        return f"Suffix({self.add}: on [{self.condition}]{self.strip}$)"


@dataclass
class AffixRule:
    """
    The whole affix table designated by one flag (``SFX S Y 4`` and 4 rows below it).

    Every row matching the stem produces its own word (so "play" with two suffix rows matching
    may produce both "plays" and "played"), not just the first matching.
    """

    #: ``PFX`` or ``SFX``
    kind: str
    #: Flag (rule code) the table is designated by
    flag: str
    #: Whether forms with this affix can also take an affix of the opposite kind ("cross-product")
    combineable: bool
    #: Table rows
    entries: List[Affix] = field(default_factory=list)

    @property
    def is_prefix(self) -> bool:
        return self.kind == PREFIX

    def __repr__(self):
        return f"AffixRule({self.kind} {self.flag}{'×' if self.combineable else ''}: {len(self.entries)} entries)"


@dataclass
class CompoundRule:
    """
    Regexp-alike rule for generating compound words, content of :attr:`Aff.COMPOUNDRULE` directive.
    Rules look this way:

    .. code-block:: text

        COMPOUNDRULE A*B?CD

    ...reading: compound word might consist of any number of words with flag ``A``, then 0 or 1 words
    with flag ``B``, then words with flags ``C`` and ``D``. ``+`` means "one or more". For long and
    numeric flags, flags are parenthesized: ``(aa)*(bb)``. Other regexp syntax (``(A|B)C``) is
    kept as is, unless some dictionary words have the char as a flag.

    ``en_US.aff`` uses this feature to specify spelling of numerals:

    .. code-block:: text

        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE n*mp
    """

    text: str

    def __post_init__(self):
        self.parts: List[Tuple[str, str]] = [
            (long_flag or char, quantifier)
            for long_flag, char, quantifier in COMPOUND_PART_REGEXP.findall(self.text)
        ]

        self.flags = [flag for flag, _ in self.parts]

    def compile(self, words_by_flag: Dict[str, List[str]]) -> Optional[Pattern]:
        """
        Replaces every flag in the rule with an alternation of all words having this flag.

        Regexp metachars without words are kept as regexp syntax. Flags without words but with
        ``*``/``?`` are just dropped. Returns ``None`` (and warns) if the rule can't match anything:
        some of its mandatory flags don't have any words, or the result is not a valid regexp.

        Args:
            words_by_flag: Flag => list of dictionary words with this flag
        """

        pattern = ''
        for flag, quantifier in self.parts:
            words = words_by_flag.get(flag)
            if words:
                pattern += '(' + '|'.join(re.escape(word) for word in words) + ')' + quantifier
            elif flag in COMPOUND_METACHARS:
                pattern += flag + quantifier
            elif quantifier not in ('*', '?'):
                LOGGER.warning('Compound rule %s skipped: flag %s has no words', self.text, flag)
                return None

        if not pattern:
            LOGGER.warning('Compound rule %s skipped: none of its flags has words', self.text)
            return None

        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            LOGGER.warning('Compound rule %s skipped: %s', self.text, e)
            return None


@dataclass
class RepPattern:
    """
    Contents of the :attr:`Aff.REP` directive, pair of ``(frequent typo, its replacement)``.

    .. code-block:: text

        REP 3
        REP f ph
        REP tion$ shun
        REP ^alot$ a_lot

    ``^`` and ``$`` anchor pattern to the beginning/end of the word, everything else is taken
    literally; ``_`` in replacement stands for a space.
    """
    pattern: str
    replacement: str

    def __post_init__(self):
        # special chars should be escaped, but ^ and $ should be treated as in regexps
        pattern = re.escape(self.pattern).replace('\\^', '^').replace('\\$', '$')
        self.regexp = re.compile(pattern)

    def replace(self, word: str) -> Optional[str]:
        """Replaces the first occurrence of the pattern, or returns ``None`` if there is none."""

        match = self.regexp.search(word)
        if not match:
            return None
        return word[:match.start()] + self.replacement.replace('_', ' ') + word[match.end():]


@dataclass
class Aff:
    """
    The class contains all directives from .aff file.

    Attributes for table-alike directives are named the same as the directive (upper-case is
    un-Pythonic, but allows to unambiguously relate them to the file contents).

    .. autoattribute:: rules
    .. autoattribute:: flags
    .. autoattribute:: COMPOUNDRULE
    .. autoattribute:: REP
    """

    #: Flag => prefix or suffix rule, from ``PFX`` and ``SFX`` directives
    rules: Dict[str, AffixRule] = field(default_factory=dict)

    #: All other directives: name => first value. Flag-valued ones (``KEEPCASE``, ``NOSUGGEST``, ...)
    #: are stored as a raw flag, and compared with decoded word flags.
    flags: Dict[str, str] = field(default_factory=dict)

    #: Rules of producing compound words, see :class:`CompoundRule`
    COMPOUNDRULE: List[CompoundRule] = field(default_factory=list)

    #: Table of replacements for typical typos, see :class:`RepPattern`
    REP: List[RepPattern] = field(default_factory=list)

    def flag(self, name: str) -> Optional[str]:
        """Value of directive, if it was present in .aff file"""
        return self.flags.get(name)
