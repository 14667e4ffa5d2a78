from .search_engine import (
    build_index,
    clear_index,
    count,
    freeze,
    get,
    index,
    init,
    make_index,
    search,
    top5,
)
from .tokenize import normalize, tokenize
from .doc_list import (
    DocList,
    DocReader,
    DocumentNotFound,
    FileDocList,
    FileDocReader,
    MemoryDocList,
    MemoryDocReader,
    read_noise_words,
)
from .occurrence_list import Occurrence, insert_sorted, top_n_or
from .inverted_index import InvertedIndex
from .memory_inverted_index import MemoryInvertedIndex, extract


VERSION = '0.1.0'
