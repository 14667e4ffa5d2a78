import logging

from .doc_list import (
    FileDocList,
    FileDocReader,
    MemoryDocList,
    MemoryDocReader,
    read_noise_words,
)
from .memory_inverted_index import MemoryInvertedIndex


logger = logging.getLogger(__name__)

TOP_N = 5

BASE_DIR = None
DOC_LIST = None
DOC_READER = None
NOISE_WORDS = frozenset()
INVERTED_INDEX = None


def init(base_dir=None):
    global BASE_DIR, DOC_LIST, DOC_READER, NOISE_WORDS, INVERTED_INDEX
    BASE_DIR = base_dir
    DOC_LIST = MemoryDocList()
    DOC_READER = FileDocReader(base_dir)
    NOISE_WORDS = frozenset()
    INVERTED_INDEX = MemoryInvertedIndex()


def _index():
    if INVERTED_INDEX is None:
        raise RuntimeError("search engine is not initialized, call init() first")
    return INVERTED_INDEX


def load_noise_words(noise_words):
    global NOISE_WORDS, INVERTED_INDEX
    index = _index()
    if len(index) or DOC_LIST.names():
        raise RuntimeError("noise words must be loaded before any document is indexed")
    NOISE_WORDS = frozenset(noise_words)
    INVERTED_INDEX = MemoryInvertedIndex(NOISE_WORDS)


def build_index(doc_names, noise_words, reader=None):
    """
    Index the given documents in order, then make the index read-only.

    Parameters
    ----------
    doc_names: Iterable[str]
        document names, in the order they are merged
    noise_words: Iterable[str]
        words that are never indexed
    reader: DocReader, optional
        where document tokens come from, DOC_READER by default
    """
    global DOC_LIST, INVERTED_INDEX
    load_noise_words(noise_words)
    reader = reader or DOC_READER
    doc_list = MemoryDocList()
    inverted_index = MemoryInvertedIndex(NOISE_WORDS)
    for name in doc_names:
        if inverted_index.has_document(name):
            logger.warning("document %s is listed twice, skipped", name)
            continue
        inverted_index.index_document(name, reader)
        doc_list.add(name)
        logger.info("indexed %s", name)
    inverted_index.freeze()
    DOC_LIST = doc_list
    INVERTED_INDEX = inverted_index
    logger.info("index built: %d documents, %d keywords", len(doc_list.names()), len(inverted_index))


def make_index(docs_file, noise_words_file):
    build_index(FileDocList(docs_file), read_noise_words(noise_words_file))


def index(name, text):
    """Index an in-memory document. The index stays writable until freeze()."""
    reader = MemoryDocReader({name: text})
    _index().index_document(name, reader)
    DOC_LIST.add(name)


def freeze():
    _index().freeze()


def clear_index():
    global NOISE_WORDS, INVERTED_INDEX
    DOC_LIST.clear()
    NOISE_WORDS = frozenset()
    INVERTED_INDEX = MemoryInvertedIndex()


def get(keyword):
    return tuple(_index().get(keyword.lower()))


def top5(kw1, kw2):
    return _index().search_or(kw1.lower(), kw2.lower(), TOP_N)


def parse_query(query):
    terms = [t for t in query.split() if t.lower() != 'or']
    if not terms or len(terms) > 2:
        raise ValueError(f"expected one or two keywords: {query!r}")
    if len(terms) == 1:
        return terms[0], terms[0]
    return terms[0], terms[1]


def search(query):
    kw1, kw2 = parse_query(query)
    return top5(kw1, kw2)


def count():
    return len(_index())


def documents():
    return DOC_LIST.names() if DOC_LIST is not None else []
