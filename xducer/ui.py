from docopt import docopt
from func_prototypes import typed, returned
from json import JSONEncoder, loads
from xducer import \
    XducerError,   \
    array_of,      \
    compose,       \
    filtering,     \
    joined_with,   \
    mapping,       \
    reduce,        \
    sum_of,        \
    transduce
import logging
import sys

log = logging.getLogger(__name__)

json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)

UI_USAGE = """
xducer

Usage:
  xducer reduce [-v] [--seed=<seed>] (sum|array|join <sep>) [<value>...]
  xducer transduce [-v] [--seed=<seed>] [--xf=<xf>]... (sum|array|join <sep>) [<value>...]
  xducer xforms

Options:
  --seed=<seed>  Starting accumulator, as JSON.
  --xf=<xf>      Transform, map:<name> or filter:<name>. Applied in order.
  -v --verbose   Debug logging on stderr.

Integer values are read from stdin, one per line, when none are given.
"""

MAPPERS = {
    'inc': lambda x: x + 1,
    'dec': lambda x: x - 1,
    'double': lambda x: x * 2,
    'square': lambda x: x * x,
    'identity': lambda x: x,
    'negate': lambda x: -x,
}

PREDICATES = {
    'even': lambda x: x % 2 == 0,
    'odd': lambda x: x % 2 == 1,
    'positive': lambda x: x > 0,
    'negative': lambda x: x < 0,
}

XFORM_KINDS = {
    'map': (mapping, MAPPERS),
    'filter': (filtering, PREDICATES),
}

@returned(int)
@typed(str)
def parse_value(s):
    return int(s.strip())

@typed(str)
def parse_xform(xf):
    """Turn 'map:inc' or 'filter:even' into a transducer."""
    kind, sep, name = xf.partition(':')
    if not sep or kind not in XFORM_KINDS:
        raise ValueError("Transform '%s' should look like map:<name> or filter:<name>" % xf)
    (build, registry) = XFORM_KINDS[kind]
    if name not in registry:
        raise ValueError("Unknown %s transform '%s'" % (kind, name))
    return build(registry[name])

def select_step(args):
    if args['sum']:
        return sum_of
    elif args['array']:
        return array_of
    elif args['join']:
        return joined_with(args['<sep>'])
    raise ValueError("No reducer selected")

def read_values(args, stdin):
    raw = args['<value>']
    if not raw:
        raw = [line for line in stdin if line.strip()]
    return map(parse_value, raw)

def xducer_ui(argv, stdin=None):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    if stdin is None:
        stdin = sys.stdin
    if args['--verbose']:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")
    try:
        if args['xforms']:
            for (kind, (_, registry)) in sorted(XFORM_KINDS.items()):
                for name in sorted(registry):
                    print("%s:%s" % (kind, name))
            return exitcode
        step = select_step(args)
        values = read_values(args, stdin)
        seed = args['--seed']
        if seed is not None:
            seed = loads(seed)
        if args['reduce']:
            if seed is None and args['sum']:
                result = reduce(step, values)
            else:
                result = reduce(step, step.init() if seed is None else seed, values)
        elif args['transduce']:
            xform = compose(*[parse_xform(xf) for xf in args['--xf']])
            result = transduce(xform, step, step.init() if seed is None else seed, values)
        log.debug("result %r", result)
        print(json_encode(result))
    except (ValueError, XducerError) as e:
        print("xducer: %s" % e, file=sys.stderr)
        exitcode = exitcode | 2
    return exitcode

def main():
    return xducer_ui(sys.argv[1:])
