import abc
from typing import Sequence

from .occurrence_list import Occurrence


class InvertedIndex(abc.ABC):

    @abc.abstractmethod
    def add(self, name, tokens):
        pass

    @abc.abstractmethod
    def merge(self, kws):
        pass

    @abc.abstractmethod
    def get(self, keyword) -> Sequence[Occurrence]:
        pass

    @abc.abstractmethod
    def search_or(self, keyword1, keyword2, limit) -> list[str]:
        pass

    @abc.abstractmethod
    def freeze(self):
        pass

    @abc.abstractmethod
    def clear(self):
        pass
