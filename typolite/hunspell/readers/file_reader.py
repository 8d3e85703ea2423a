"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: TextReader
.. autoclass:: FileReader
"""

import io
import re
from typing import Optional, Pattern

BOM = '\ufeff'

#: Comment lines of .aff file: starting with "#", possibly indented. Note that "#" *inside* the
#: line is not a comment: some dictionaries use it as a flag (``COMPOUNDRULE #*0{`` in en_GB).
AFF_COMMENT = re.compile(r'^\s*#')
#: Comment lines of .dic file: tab-indented (de_DE dictionary uses them this way)
DIC_COMMENT = re.compile(r'^\t')


class BaseReader:
    """
    Common base for :class:`TextReader` and :class:`FileReader`. In fact, it is a very thin wrapper
    around ``IO``-alike object, to read it line by line and:

    * strip lines transparently
    * skip empty lines and comments
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)

    Readers are iterators, so the code reading some directive can consume several more lines
    from the same reader (that's how affix tables are read).
    """

    def __init__(self, obj, *, comment: Optional[Pattern] = None):
        self.io = obj
        self.line_no = 0
        self.comment = comment
        self.iter = self.readlines()

    def __iter__(self):
        return self

    def __next__(self):
        return self.iter.__next__()

    def readlines(self):
        for ln in self.io:
            self.line_no += 1
            if self.line_no == 1 and ln.startswith(BOM):
                ln = ln[len(BOM):]
            if self.comment and self.comment.match(ln):
                continue
            ln = ln.strip()
            if ln:
                yield (self.line_no, ln)


class TextReader(BaseReader):
    """
    Reader implementation for text already in memory.
    """

    def __init__(self, text: str, **kwargs):
        super().__init__(io.StringIO(text), **kwargs)


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file. File is read eagerly and closed immediately.
    """

    def __init__(self, path, encoding='ISO8859-1', **kwargs):
        self.path = path
        # errors='surrogateescape': some real-life dictionaries have invalid bytes in flags
        with open(path, 'r', encoding=encoding, errors='surrogateescape') as file:
            text = file.read()
        super().__init__(io.StringIO(text), **kwargs)
