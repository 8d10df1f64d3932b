import sys
from json import JSONEncoder
from docopt import docopt
from foldfuse.transducer import LEFT, RIGHT, mapping, filtering, taking
from foldfuse.transduce import compose, into
from foldfuse.source import Dense, ConsList, cons_list
from foldfuse.perf import CASES, performance_compare, perf_table, isEven, square
from foldfuse.util import pipeline

json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)
json_printr = pipeline(list, json_encode, print)

UI_USAGE = """
FoldFuse

Usage:
  foldfuse run [--right] [--cons] [--even] [--square] [--take=<n>] <value>...
  foldfuse perf [--size=<n>] [--number=<n>] [--quiet]

Options:
  --right       Fold right associatively, starting from the last value.
  --cons        Fold a cons list instead of a dense sequence.
  --even        Keep only even values.
  --square      Square each value that is kept.
  --take=<n>    Stop the fold after n values.
  --size=<n>    Number of values each perf case folds [default: 10000].
  --number=<n>  Number of times each perf case runs [default: 10].
  --quiet       Hide the progress bar.
"""

def build_xform(args):
    """Pipeline stages in data order: filter, then square, then take."""
    xforms = []
    if args['--even']:
        xforms.append(filtering(isEven))
    if args['--square']:
        xforms.append(mapping(square))
    if args['--take'] is not None:
        xforms.append(taking(int(args['--take'])))
    return compose(*xforms)

def ui_main():
    result = foldfuse_ui(sys.argv[1:])
    sys.exit(result)

def foldfuse_ui(argv):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    if args['run']:
        try:
            values = [int(v) for v in args['<value>']]
            xform = build_xform(args)
        except ValueError as e:
            print("Invalid argument: %s" % e, file=sys.stderr)
            return 1
        assoc = RIGHT if args['--right'] else LEFT
        if args['--cons']:
            kind, source = ConsList, cons_list(values)
        else:
            kind, source = Dense, Dense(values)
        json_printr(into(kind, xform, source, assoc))
    elif args['perf']:
        try:
            size = int(args['--size'])
            number = int(args['--number'])
        except ValueError as e:
            print("Invalid argument: %s" % e, file=sys.stderr)
            return 1
        rows = performance_compare(
            *CASES,
            case_args=[list(range(size))],
            timeit_kwargs={'number': number},
            quiet=args['--quiet'])
        print(perf_table(rows))
    return exitcode
