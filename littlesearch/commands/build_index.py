import logging
import os
import sys

import littlesearch as ls
from littlesearch import search_engine


def main(docs_file, noise_words_file):
    logging.basicConfig(level=os.environ.get('LITTLESEARCH_LOG_LEVEL', 'WARNING'))
    ls.init(os.path.dirname(docs_file))
    ls.make_index(docs_file, noise_words_file)
    for keyword in search_engine.INVERTED_INDEX.keywords():
        occs = ls.get(keyword)
        sys.stdout.write(keyword + '\t' + ' '.join(map(repr, occs)) + '\n')


if __name__ == '__main__':
    main(sys.argv[1], sys.argv[2])
