"""
Snapshot of the fully built dictionary as a JSON string, so the (slow) expansion of stems with
affixes is done once, and the result could be stored and restored quickly::

    >>> blob = dictionary.serialize()
    >>> restored = Dictionary.deserialize(blob)

Only the source data is stored: affix rules and directives, the expanded table of words and the
words by compound flags. Compound rules are recompiled from them on :meth:`load`, the ``.aff`` and
``.dic`` texts are never re-read.

.. autofunction:: dump
.. autofunction:: load
"""

import json
import dataclasses
from typing import Any, Dict, Optional, Tuple

from typolite.hunspell.data import aff, dic

FORMAT_VERSION = 1


def dump(aff_data: aff.Aff, dic_data: dic.Dic, *, language: Optional[str] = None) -> str:
    return json.dumps({
        'version': FORMAT_VERSION,
        'language': language,
        'flags': aff_data.flags,
        'rules': [dataclasses.asdict(rule) for rule in aff_data.rules.values()],
        'compound_rules': [rule.text for rule in aff_data.COMPOUNDRULE],
        'replacements': [[rep.pattern, rep.replacement] for rep in aff_data.REP],
        'table': dic_data.table,
        'compound_rule_codes': dic_data.compound_rule_codes,
    }, ensure_ascii=False)


def load(blob: str) -> Tuple[aff.Aff, dic.Dic, Optional[str]]:
    """
    Restores data produced by :meth:`dump`.

    Returns:
        ``(aff, dic, language)``

    Raises:
        ValueError: if the blob is not a snapshot (or is a snapshot of another format version)
    """

    try:
        snapshot = json.loads(blob)
    except (TypeError, json.JSONDecodeError) as e:
        raise ValueError(f'Not a dictionary snapshot: {e}') from e

    if not isinstance(snapshot, dict):
        raise ValueError('Not a dictionary snapshot: JSON object expected')
    if snapshot.get('version') != FORMAT_VERSION:
        raise ValueError(f"Unsupported snapshot version {snapshot.get('version')!r}, expected {FORMAT_VERSION}")

    try:
        aff_data = aff.Aff(
            rules={rule['flag']: load_rule(rule) for rule in snapshot['rules']},
            flags=dict(snapshot['flags']),
            COMPOUNDRULE=[aff.CompoundRule(text) for text in snapshot['compound_rules']],
            REP=[aff.RepPattern(pattern, replacement) for pattern, replacement in snapshot['replacements']]
        )
        dic_data = dic.Dic(
            table=dict(snapshot['table']),
            compound_rule_codes=dict(snapshot['compound_rule_codes'])
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ValueError(f'Malformed dictionary snapshot: {e!r}') from e

    dic_data.compile_compound_rules(aff_data.COMPOUNDRULE)

    return (aff_data, dic_data, snapshot.get('language'))


def load_rule(raw: Dict[str, Any]) -> aff.AffixRule:
    kind_class = aff.Prefix if raw['kind'] == aff.PREFIX else aff.Suffix
    return aff.AffixRule(
        kind=raw['kind'],
        flag=raw['flag'],
        combineable=raw['combineable'],
        entries=[kind_class(**entry) for entry in raw['entries']]
    )
