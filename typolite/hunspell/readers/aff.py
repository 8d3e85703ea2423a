"""

.. autofunction:: read_aff

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: read_affix_rule
.. autofunction:: read_compound_rules
.. autofunction:: make_affix

"""

import re
import logging
import itertools
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, List

from typolite.hunspell.data import aff

from typolite.hunspell.readers.file_reader import BaseReader

LOGGER = logging.getLogger(__name__)

SPACES_REGEXP = re.compile(r'\s+')
FLAG_LONG_REGEXP = re.compile(r'..?')


@dataclass
class Context:
    """
    Class containing reading-time context necessary for reading both .aff and .dic file: the flag
    format.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <typolite.hunspell.readers.dic.read_dic>`.
    """

    #: Flag format of dictionary, value of ``FLAG`` directive:
    #:
    #: * ``None`` (default) -- each flag is one character
    #: * ``long`` -- each flag is two characters
    #: * ``num`` -- each flag is number, set of flags separates them with ``,``
    #: * ``UTF-8`` -- each flag is one Unicode character
    #:
    #: For example, .dic file entry ``cat/ABCD`` can be considered having flags ``["A", "B", "C", "D"]``
    #: (default flag format), or ``["AB", "CD"]`` (flag format "long")
    flag_format: Optional[str] = None

    def parse_flags(self, string: Optional[str]) -> List[str]:
        """
        Parse set of flags, considering :attr:`flag_format`. Unknown formats are treated as default
        one: it is more likely to work than not returning anything at all.
        """

        if not string:
            return []

        if self.flag_format == 'long':
            return FLAG_LONG_REGEXP.findall(string)
        if self.flag_format == 'num':
            return [flag for flag in string.split(',') if flag]

        # Default and UTF-8: Python strings are already sequences of code points
        return list(string)


def read_aff(source: BaseReader, *, flags: Optional[Dict[str, str]] = None) -> Tuple[aff.Aff, Context]:
    """
    Reads .aff file and creates an :class:`Aff <typolite.hunspell.data.aff.Aff>`.

    Affix tables (``PFX``/``SFX``) and ``COMPOUNDRULE`` tables span several lines, and are read
    by :meth:`read_affix_rule` and :meth:`read_compound_rules`; ``REP`` lines are read one by one.
    Any other directive is stored as ``name => first value`` in
    :attr:`Aff.flags <typolite.hunspell.data.aff.Aff.flags>`.

    Args:
         source: "Reader" (thin wrapper around text or opened file, targeting line-by-line reading)
         flags: Pre-seeded flags; values from the file override them

    Returns:
        Aff itself and a :class:`Context` which then will be reused in
        :meth:`read_dic <typolite.hunspell.readers.dic.read_dic>`
    """

    data = aff.Aff(flags=dict(flags or {}))
    context = Context(flag_format=data.flags.get('FLAG'))

    for (num, line) in source:
        directive, *arguments = SPACES_REGEXP.split(line)

        if directive in [aff.PREFIX, aff.SUFFIX]:
            rule = read_affix_rule(source, directive, arguments, num=num, context=context)
            if rule:
                data.rules[rule.flag] = rule
        elif directive == 'COMPOUNDRULE':
            data.COMPOUNDRULE.extend(read_compound_rules(source, arguments, num=num))
        elif directive == 'REP':
            if len(arguments) == 2:
                data.REP.append(aff.RepPattern(*arguments))
            elif len(arguments) != 1:
                # "REP <count>" is a table header and safely skipped; anything else is a broken line
                LOGGER.warning('Line %d: malformed REP line %r skipped', num, line)
        else:
            data.flags[directive] = arguments[0] if arguments else ''

            # Changes further reading behavior
            if directive == 'FLAG':
                context.flag_format = data.flags['FLAG']

    return (data, context)


def read_affix_rule(source: BaseReader, kind: str, arguments: List[str], *,
                    num: int, context: Context) -> Optional[aff.AffixRule]:
    """
    Reads the affix table: the header line is already read, and is looking this way:

    .. code-block:: text

        SFX S Y 4       # kind, flag, cross-product (Y or N), count of rows
        SFX S   y     ies        [^aeiou]y
        ...

    The method consumes "count of rows" lines from ``source``.

    Args:
        source: passed from :meth:`read_aff`
        kind: ``PFX`` or ``SFX``
        arguments: Values already read from the header line
        num: Header line number, for reporting
        context: current reading context
    """

    if len(arguments) < 3 or not arguments[2].isdigit():
        LOGGER.warning('Line %d: malformed %s header %r skipped', num, kind, ' '.join([kind, *arguments]))
        return None

    flag, combineable, count, *_ = arguments
    rule = aff.AffixRule(kind=kind, flag=flag, combineable=(combineable == 'Y'))

    for entry_num, entry_line in itertools.islice(source, int(count)):
        parts = SPACES_REGEXP.split(entry_line)
        if len(parts) < 4 or parts[0] != kind or parts[1] != flag:
            LOGGER.warning('Line %d: malformed %s %s entry %r skipped', entry_num, kind, flag, entry_line)
            continue

        rule.entries.append(make_affix(kind, *parts[2:], context=context))

    return rule


def make_affix(kind: str, strip: str, add: str, *rest, context: Context) -> aff.Affix:
    """
    Produces Prefix/Suffix from raw data
    """

    kind_class = aff.Suffix if kind == aff.SUFFIX else aff.Prefix

    # Some real-life affixes don't have a condition at all
    cond = rest[0] if rest else '.'
    add, _, flags = add.partition('/')

    return kind_class(
        strip=('' if strip == '0' else strip),
        add=('' if add == '0' else add),
        condition=cond,
        continuation_classes=context.parse_flags(flags)
    )


def read_compound_rules(source: BaseReader, arguments: List[str], *, num: int) -> List[aff.CompoundRule]:
    """
    Reads the ``COMPOUNDRULE`` table, consuming as much lines from ``source`` as the header says.

    .. code-block:: text

        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE n*mp
    """

    if not arguments or not arguments[0].isdigit():
        LOGGER.warning('Line %d: malformed COMPOUNDRULE header skipped', num)
        return []

    rules = []
    for rule_num, rule_line in itertools.islice(source, int(arguments[0])):
        parts = SPACES_REGEXP.split(rule_line)
        if len(parts) < 2:
            LOGGER.warning('Line %d: malformed COMPOUNDRULE line %r skipped', rule_num, rule_line)
            continue
        rules.append(aff.CompoundRule(parts[1]))

    return rules
