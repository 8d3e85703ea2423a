from __future__ import annotations

import os
import logging
from typing import Dict, List, Optional

from typolite.hunspell import data, readers, serialization
from typolite.hunspell.readers.file_reader import BaseReader, FileReader, TextReader
from typolite.hunspell.algo import capitalization, lookup, suggest
from typolite.hunspell.algo.suggest import ALPHABET, DEFAULT_LIMIT

LOGGER = logging.getLogger(__name__)


class NotLoadedError(RuntimeError):
    """Raised when an empty :class:`Dictionary` (neither read nor deserialized) is used."""


class Dictionary:
    """
    The main and only interface to ``typolite.hunspell`` as a library.

    Usage::

        from typolite.hunspell import Dictionary

        # from folder where en_US.aff and en_US.dic are present
        dictionary = Dictionary.from_files('/path/to/dictionary/en_US')
        # or, from folder with a subfolder per language: dictionaries/en_US/en_US.aff
        dictionary = Dictionary.from_folder('dictionaries', 'en_US')
        # or, from texts already in memory
        dictionary = Dictionary.from_text(aff_text, dic_text, language='en_US')

        print(dictionary.check('typolite'))
        # False
        print(dictionary.suggest('speling'))
        # ['spelling', 'spewing', 'spieling']

    Reading a big dictionary takes a while (all word forms are produced at once), so the read
    dictionary can be stored as a JSON snapshot and restored later::

        blob = dictionary.serialize()
        dictionary = Dictionary.deserialize(blob)

    ``Dictionary()`` without data is valid, but any check on it raises :class:`NotLoadedError`.

    Internal algorithm implementations :attr:`lookuper` and :attr:`suggester` are exposed in order
    to allow experimenting with the implementation::

        >>> dictionary.suggester.weighted('speling')[:2]
        [('spelling', 50), ('spewing', 14)]

    **Dictionary creation**

    .. automethod:: from_text
    .. automethod:: from_files
    .. automethod:: from_folder
    .. automethod:: deserialize

    **Dictionary usage**

    .. automethod:: check
    .. automethod:: check_exact
    .. automethod:: suggest
    .. automethod:: has_flag
    .. automethod:: serialize

    **Data objects**

    .. autoattribute:: aff
    .. autoattribute:: dic

    **Algorithms**

    .. autoattribute:: lookuper
    .. autoattribute:: suggester
    """

    #: Contents of ``*.aff``
    aff: Optional[data.aff.Aff]
    #: Contents of ``*.dic``, expanded with affixes
    dic: Optional[data.dic.Dic]

    #: Instance of ``Lookup``, can be used for experimenting, see :mod:`algo.lookup <typolite.hunspell.algo.lookup>`.
    lookuper: Optional[lookup.Lookup]
    #: Instance of ``Suggest``, can be used for experimenting, see :mod:`algo.suggest <typolite.hunspell.algo.suggest>`.
    suggester: Optional[suggest.Suggest]

    @classmethod
    def from_text(cls, aff_text: str, dic_text: str, *,
                  language: Optional[str] = None,
                  flags: Optional[Dict[str, str]] = None,
                  alphabet: str = ALPHABET) -> Dictionary:
        """
        Read dictionary from contents of ``.aff`` and ``.dic`` files.

        Args:
            aff_text: Affix rules
            dic_text: Word list
            language: Language code like ``en_US``; affects casing rules (Turkic languages)
            flags: Directives to use when ``aff_text`` doesn't define them, like ``{'KEEPCASE': 'K'}``
            alphabet: Characters to insert/replace when producing suggestions
        """

        return cls.read(
            TextReader(aff_text, comment=readers.AFF_COMMENT),
            lambda: TextReader(dic_text, comment=readers.DIC_COMMENT),
            language=language, flags=flags, alphabet=alphabet
        )

    @classmethod
    def from_files(cls, path: str, *, encoding: str = 'ISO8859-1', **options) -> Dictionary:
        """
        Read dictionary from pair of files ``/some/path/some_name.aff`` and ``/some/path/some_name.dic``.

        Args:
            path: Should be just ``/some/path/some_name``.
            encoding: Encoding of both files
            options: Same as for :meth:`from_text`
        """

        return cls.read(
            FileReader(path + '.aff', encoding=encoding, comment=readers.AFF_COMMENT),
            lambda: FileReader(path + '.dic', encoding=encoding, comment=readers.DIC_COMMENT),
            **options
        )

    @classmethod
    def from_folder(cls, folder: str, language: str, **options) -> Dictionary:
        """
        Read dictionary from ``<folder>/<language>/<language>.aff`` and ``.dic``.

        Args:
            folder: Folder with dictionaries, one subfolder per language
            language: Language code, like ``en_US``
            options: Same as for :meth:`from_files`
        """

        options.setdefault('language', language)
        return cls.from_files(os.path.join(folder, language, language), **options)

    @classmethod
    def read(cls, aff_source: BaseReader, dic_source, *,
             language: Optional[str] = None,
             flags: Optional[Dict[str, str]] = None,
             alphabet: str = ALPHABET) -> Dictionary:
        aff, context = readers.read_aff(aff_source, flags=flags)
        dic = readers.read_dic(dic_source(), aff=aff, context=context)

        LOGGER.info('Dictionary %s read: %d affix rules, %d word forms',
                    language or aff.flag('LANG') or '(unnamed)', len(aff.rules), len(dic))

        return cls(aff, dic, language=language, alphabet=alphabet)

    @classmethod
    def deserialize(cls, blob: str, *, alphabet: str = ALPHABET) -> Dictionary:
        """
        Restore dictionary from :meth:`serialize` result.

        Raises:
            ValueError: if blob is not a dictionary snapshot
        """

        aff, dic, language = serialization.load(blob)
        return cls(aff, dic, language=language, alphabet=alphabet)

    def __init__(self, aff: Optional[data.aff.Aff] = None, dic: Optional[data.dic.Dic] = None, *,
                 language: Optional[str] = None, alphabet: str = ALPHABET):
        self.aff = aff
        self.dic = dic
        self.language = language
        self.lookuper = None
        self.suggester = None

        if aff is None or dic is None:
            return

        casing = capitalization.for_language(language or aff.flag('LANG'))
        self.lookuper = lookup.Lookup(aff, dic, casing)
        self.suggester = suggest.Suggest(aff, dic, self.lookuper, alphabet=alphabet)

    @property
    def loaded(self) -> bool:
        return self.lookuper is not None

    def check(self, word: str) -> bool:
        """
        Checks if the word is correct (considering all the ways it could be capitalized).

        ::

            >>> dictionary.check('typolite')
            False
            >>> dictionary.check('Spells')
            True

        Args:
            word: Word to check
        """

        return self.ensure_loaded().lookuper(word)

    def check_exact(self, word: str) -> bool:
        """
        Checks if exactly this spelling is correct: known word form, or a compound word.

        Args:
            word: Word to check
        """

        return self.ensure_loaded().lookuper.check_exact(word)

    def suggest(self, word: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """
        Suggests corrections for the misspelled word (in order of probability, best suggestions first).

        ::

            >>> dictionary.suggest('speling', 2)
            ['spelling', 'spewing']

        Args:
            word: Misspelled word
            limit: Max. number of suggestions
        """

        return self.ensure_loaded().suggester(word, limit)

    def has_flag(self, word: str, flag_name: str) -> bool:
        """
        Whether the word has the flag declared by directive ``flag_name`` in ``.aff`` file.

        ::

            >>> dictionary.has_flag('OK', 'KEEPCASE')
            True
        """

        return self.ensure_loaded().lookuper.has_flag(word, flag_name)

    def serialize(self) -> str:
        """
        JSON snapshot of the dictionary, to be restored with :meth:`deserialize`.
        """

        self.ensure_loaded()
        return serialization.dump(self.aff, self.dic, language=self.language)

    def ensure_loaded(self) -> Dictionary:
        if not self.loaded:
            raise NotLoadedError('Dictionary is not loaded: read it from files/text or deserialize it first')
        return self

    def __repr__(self):
        if not self.loaded:
            return 'Dictionary(not loaded)'
        return f'Dictionary({self.language or self.aff.flag("LANG") or "unnamed"}: {self.dic!r})'
