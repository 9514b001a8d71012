import pyperf

from pcomb.text import number, parse
from tests.parsers.expr import eval

EXPR = " + ".join("({0} * {0} - 1)".format(n) for n in range(1000))
NUMBERS = ["{}.{}e-{}".format(n, n * 7, n % 10) for n in range(1000)]


runner = pyperf.Runner()
runner.bench_func("expr_parser", lambda: eval(EXPR))
runner.bench_func(
    "number_parser", lambda: [parse(number, s).unwrap() for s in NUMBERS]
)
