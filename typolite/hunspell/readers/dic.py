"""
.. autofunction:: read_dic
"""

import re
import logging

from typolite.hunspell.data import dic
from typolite.hunspell.data.aff import Aff

from typolite.hunspell.readers.file_reader import BaseReader
from typolite.hunspell.readers.aff import Context

from typolite.hunspell.algo.expand import apply_rule

LOGGER = logging.getLogger(__name__)

COUNT_REGEXP = re.compile(r'^\d+(\s+|$)')   # should start with digits, but can have whatever further
TAG_REGEXP = re.compile(r'[ \t]\w{2}:')


def read_dic(source: BaseReader, *, aff: Aff, context: Context) -> dic.Dic:
    """
    Reads source (text or file) and creates :class:`Dic <typolite.hunspell.data.dic.Dic>` from it:
    every stem with all the forms its affixes produce.

    For each ``stem/flags`` line:

    * stem itself is registered with its flags (unless it has ``NEEDAFFIX`` flag: such stems are
      valid only with some affix)
    * for each flag which is an affix rule, all forms produced by the rule are registered (without
      flags);
    * ...and if the rule is cross-product, also forms produced by applying to them any *later*
      cross-product rule of the opposite kind (suffix after prefix and vice versa)
    * if the flag is used in compound rules, the stem is remembered for the flag

    After all lines are read, compound rules are compiled.

    Args:
        source: "Reader" (thin wrapper around text or opened file, targeting line-by-line reading)
        aff: Contents of corresponding .aff file
        context: Context created while reading .aff file (defines format of flags)
    """
    result = dic.Dic()

    needaffix = aff.flag('NEEDAFFIX')
    onlyincompound = aff.flag('ONLYINCOMPOUND')

    for rule in aff.COMPOUNDRULE:
        result.track_compound_flags(rule.flags)
    # This way the list of compound-only words is gathered too
    if onlyincompound is not None:
        result.track_compound_flags([onlyincompound])

    first = True
    forms = 0

    for num, line in source:
        if first:
            first = False
            if COUNT_REGEXP.match(line):
                continue

        # Each line is ``<stem>/<flags> <data tags>``; data tags start either with a tab, or with
        # a space, followed by text in format "xy:something"; they are not used.
        tags_match = TAG_REGEXP.search(line)
        if tags_match:
            line = line[:tags_match.start()]
        line = line.partition('\t')[0].strip()

        word, slash, flag_string = line.partition('/')
        if not word:
            LOGGER.warning('Line %d: entry without a word %r skipped', num, line)
            continue
        if not slash:
            result.add(word, [])
            continue

        flags = context.parse_flags(flag_string)

        if needaffix is None or needaffix not in flags:
            result.add(word, flags)

        for idx, flag in enumerate(flags):
            rule = aff.rules.get(flag)
            if rule:
                for new_word in apply_rule(word, rule, aff.rules):
                    result.add(new_word, [])
                    forms += 1

                    if not rule.combineable:
                        continue

                    for combine_flag in flags[idx + 1:]:
                        combine_rule = aff.rules.get(combine_flag)
                        if not combine_rule or not combine_rule.combineable or combine_rule.kind == rule.kind:
                            continue
                        for other_word in apply_rule(new_word, combine_rule, aff.rules):
                            result.add(other_word, [])
                            forms += 1

            if flag in result.compound_rule_codes:
                result.compound_rule_codes[flag].append(word)

    result.prune_compound_flags()
    result.compile_compound_rules(aff.COMPOUNDRULE)

    LOGGER.debug('%d affixed forms produced, %d compound rules compiled', forms, len(result.compound_regexps))

    return result
