from .file_reader import TextReader, FileReader, AFF_COMMENT, DIC_COMMENT
from .aff import read_aff
from .dic import read_dic

__all__ = [
    "TextReader",
    "FileReader",
    "AFF_COMMENT",
    "DIC_COMMENT",
    "read_aff",
    "read_dic"
]
