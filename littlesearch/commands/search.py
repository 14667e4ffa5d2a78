import logging
import os
import sys

import littlesearch as ls


def answer(line):
    if '\t' in line:
        kw1, kw2 = line.split('\t', maxsplit=1)
        return ls.top5(kw1.strip(), kw2.strip())
    return ls.search(line)


def main(docs_file, noise_words_file):
    logging.basicConfig(level=os.environ.get('LITTLESEARCH_LOG_LEVEL', 'WARNING'))
    ls.init(os.path.dirname(docs_file))
    ls.make_index(docs_file, noise_words_file)
    for line in sys.stdin:
        line = line.rstrip('\n')
        if not line.strip():
            continue
        try:
            docs = answer(line)
        except ValueError as e:
            sys.stderr.write(f"{e}\n")
            docs = []
        sys.stdout.write(','.join(docs) + '\n')
        sys.stdout.flush()


if __name__ == '__main__':
    main(sys.argv[1], sys.argv[2])
