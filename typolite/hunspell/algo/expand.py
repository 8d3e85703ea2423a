"""
Producing word forms from the stem and affix rules: the core of dictionary reading.

For the stem "drink" and suffix rule

.. code-block:: text

    SFX X Y 1
    SFX X   0 able/S .

:meth:`apply_rule` produces "drinkable", and then (because of ``/S`` continuation class) all the
forms rule ``S`` produces from "drinkable".

.. autofunction:: apply_rule
"""

import logging
from typing import List, Dict

from typolite.hunspell.data.aff import AffixRule

LOGGER = logging.getLogger(__name__)

#: Real-life continuation chains are 2-3 rules deep; cyclic or broken references are cut off here.
MAX_CONTINUATION_DEPTH = 8


def apply_rule(word: str, rule: AffixRule, rules: Dict[str, AffixRule], *, depth: int = 0) -> List[str]:
    """
    Applies all matching entries of the rule to the word, and then continuation classes of each
    entry to the word it produced.

    Args:
        word: Stem (or already derived word, on recursive calls)
        rule: Rule to apply
        rules: All rules of the dictionary, to look up continuation classes
        depth: Recursion depth (not to be passed by client code)
    """

    result = []

    for entry in rule.entries:
        new_word = entry.apply(word)
        if new_word is None:
            continue

        result.append(new_word)

        if not entry.continuation_classes:
            continue

        if depth >= MAX_CONTINUATION_DEPTH:
            LOGGER.debug('Continuation of %r (rule %s) cut off at depth %d', new_word, rule.flag, depth)
            continue

        for code in entry.continuation_classes:
            continuation = rules.get(code)
            if continuation is None:
                # Real-life dictionaries do reference codes they never define
                LOGGER.debug('Unknown continuation class %r in rule %s', code, rule.flag)
                continue
            result.extend(apply_rule(new_word, continuation, rules, depth=depth + 1))

    return result
