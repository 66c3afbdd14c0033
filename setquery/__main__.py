
import argparse
from pathlib import Path
import sys
from typing import Iterator, List, Optional

from . import CASEFOLD, Reporter, Query, QueryInvalidArgument
from . import union, intersect, except_, concat, distinct

_BINARY = {
    'union': union,
    'intersect': intersect,
    'except': except_,
}

class Lines:
    """
    The lines of a text file, read again at each iteration.
    """
    def __init__(self, path: Path) -> None:
        self.path = path

    def __iter__(self) -> Iterator[str]:
        with self.path.open(encoding='utf-8') as f:
            for line in f:
                yield line.rstrip('\r\n')

def build_query(operator: str, files: List[Path], ignore_case: bool = False) -> 'Query[str]':
    sources = [Lines(p) for p in files]
    equality = CASEFOLD if ignore_case else None
    if operator == 'distinct':
        if len(sources) != 1:
            raise QueryInvalidArgument('files', 'distinct takes exactly one file')
        return distinct(sources[0], equality)
    if len(sources) != 2:
        raise QueryInvalidArgument('files', f'{operator} takes exactly two files')
    if operator == 'concat':
        return concat(*sources)
    return _BINARY[operator](*sources, equality)

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Playground frontend for the library: '
                                     'applies a set operator to the lines of text files.',
                                     prog='python3 -m setquery',
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument('operator', choices=sorted([*_BINARY, 'concat', 'distinct']),
                        help='set operator to apply')
    parser.add_argument('files', metavar='FILE', type=Path, nargs='+',
                        help='one file for distinct, two for the other operators')
    parser.add_argument('-i', '--ignore-case', action='store_true',
                        help='compare lines case-insensitively')
    parser.add_argument('-v', '--verbose', dest='verbosity', action='count', help='increase verbosity', )

    args = parser.parse_args(argv)
    for p in args.files:
        if not p.is_file():
            parser.error(f'file {str(p)!r} doesn\'t exist')

    reporter = Reporter(verbosity=args.verbosity or 0, outstream=sys.stdout)
    try:
        q = build_query(args.operator, args.files, ignore_case=args.ignore_case)
    except QueryInvalidArgument as e:
        parser.error(str(e))
    reporter.msg(f'query plan: {q.describe()}', thresh=1)

    for line in reporter.timed(q):
        print(line)

if __name__ == "__main__":
    main()
