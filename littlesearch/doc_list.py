import abc
import os
from typing import Iterator, Optional

from .tokenize import tokenize


class DocumentNotFound(LookupError):

    def __init__(self, name: str):
        super().__init__(f"document not found: {name}")
        self.name = name


def read_words(filename: str) -> list[str]:
    with open(filename, 'r', encoding='utf-8') as f:
        return tokenize(f.read())


def read_noise_words(filename: str) -> frozenset[str]:
    return frozenset(read_words(filename))


class DocList(abc.ABC):

    @abc.abstractmethod
    def names(self) -> list[str]:
        pass

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


class MemoryDocList(DocList):

    def __init__(self, names=None):
        self.doc_list: list[str] = list(names or [])

    def add(self, name: str) -> int:
        idx = len(self.doc_list)
        self.doc_list.append(name)
        return idx

    def names(self) -> list[str]:
        return list(self.doc_list)

    def clear(self):
        self.doc_list = []


class FileDocList(DocList):

    def __init__(self, filename: str):
        self.filename = filename

    def names(self) -> list[str]:
        return read_words(self.filename)


class DocReader(abc.ABC):

    @abc.abstractmethod
    def tokens(self, name: str) -> Iterator[str]:
        """Yield the whitespace delimited tokens of the named document."""
        pass


class MemoryDocReader(DocReader):

    def __init__(self, texts=None):
        self.texts: dict[str, str] = dict(texts or {})

    def add(self, name: str, text: str):
        self.texts[name] = text

    def tokens(self, name: str) -> Iterator[str]:
        if name not in self.texts:
            raise DocumentNotFound(name)
        return iter(tokenize(self.texts[name]))

    def clear(self):
        self.texts = {}


class FileDocReader(DocReader):

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = base_dir

    def get_doc_filename(self, name: str) -> str:
        if self.base_dir:
            return os.path.join(self.base_dir, name)
        return name

    def tokens(self, name: str) -> Iterator[str]:
        try:
            f = open(self.get_doc_filename(name), 'r', encoding='utf-8')
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise DocumentNotFound(name) from None
        return self._read(f)

    @staticmethod
    def _read(f) -> Iterator[str]:
        with f:
            for line in f:
                yield from line.split()
