import logging
from collections import Counter
from types import MappingProxyType
from typing import AbstractSet, Iterable

from .doc_list import DocReader
from .inverted_index import InvertedIndex
from .occurrence_list import Occurrence, insert_sorted, top_n_or
from .tokenize import keywords

logger = logging.getLogger(__name__)


def count_keywords(name: str, tokens: Iterable[str],
                   noise_words: AbstractSet[str] = frozenset()) -> dict[str, Occurrence]:
    counts = Counter(keywords(tokens, noise_words))
    return {word: Occurrence(name, freq) for word, freq in counts.items()}


def extract(name: str, reader: DocReader, noise_words: AbstractSet[str] = frozenset()) -> dict[str, Occurrence]:
    """
    Load the keywords of one document into a keyword -> Occurrence map.

    Tokens that are not keywords are skipped. Raises DocumentNotFound if the
    reader does not know the document.
    """
    return count_keywords(name, reader.tokens(name), noise_words)


class MemoryInvertedIndex(InvertedIndex):

    def __init__(self, noise_words=frozenset()):
        self.noise_words = frozenset(noise_words)
        self.data = {}
        self.docs = set()
        self.frozen = False

    def has_document(self, name: str) -> bool:
        return name in self.docs

    def add(self, name: str, tokens: Iterable[str]):
        self._check_new(name)
        self.merge(count_keywords(name, tokens, self.noise_words))
        self.docs.add(name)

    def index_document(self, name: str, reader: DocReader):
        self._check_new(name)
        self.merge(extract(name, reader, self.noise_words))
        self.docs.add(name)

    def _check_new(self, name: str):
        if self.frozen:
            raise RuntimeError("index is read-only once built")
        if name in self.docs:
            raise ValueError(f"document already indexed: {name}")

    def merge(self, kws: dict[str, Occurrence]):
        if self.frozen:
            raise RuntimeError("index is read-only once built")
        indexed = {o.doc for o in kws.values()} & self.docs
        if indexed:
            raise ValueError(f"document already indexed: {', '.join(sorted(indexed))}")
        for keyword, occurrence in kws.items():
            self.docs.add(occurrence.doc)
            occs = self.data.get(keyword)
            if occs is None:
                self.data[keyword] = [occurrence]
                continue
            occs.append(occurrence)
            probes = insert_sorted(occs)
            logger.debug("insert %s %r probes=%s", keyword, occurrence, probes)

    def freeze(self):
        if self.frozen:
            return
        self.data = MappingProxyType({k: tuple(v) for k, v in self.data.items()})
        self.frozen = True

    def get(self, keyword: str):
        return self.data.get(keyword, ())

    def search_or(self, keyword1: str, keyword2: str, limit: int) -> list[str]:
        return top_n_or(self.get(keyword1), self.get(keyword2), limit)

    def keywords(self) -> list[str]:
        return sorted(self.data.keys())

    def __len__(self):
        return len(self.data)

    def clear(self):
        self.data = {}
        self.docs = set()
        self.frozen = False
