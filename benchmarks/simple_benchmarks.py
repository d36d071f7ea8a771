from timeit import timeit

from tailscheme.builtin.env_builtin import primitive_environment
from tailscheme.evaluation.evaluator import evaluate
from tailscheme.reader.parser import read
from tailscheme.types.environment import Environment
from tailscheme.types.symbol import Symbol


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: parse once, then evaluate the same tree repeatedly."""
    expr = read(code)
    # Warmup
    evaluate(expr, primitive_environment())
    return timeit(lambda: evaluate(expr, primitive_environment()), number=rounds)


# Micro-benchmark: lookup through a chain of frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    key = Symbol("answer")
    env = Environment.empty().extend([key], [42])
    for i in range(n_envs):
        env = env.extend([Symbol(f"v{i}")], [i])
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

TAIL_RECURSION_CODE = r"""
(letrec ((fact (lambda (n acc)
                 (if (< n 2) acc (fact (- n 1) (* n acc))))))
  (fact 12 1))
"""

# Sum 1..N in tail position
ARITH_SUM_CODE = r"""
(letrec ((sum-n (lambda (n acc)
                  (if (< n 1) acc (sum-n (- n 1) (+ acc n))))))
  (sum-n 500 0))
"""

MUTUAL_RECURSION_CODE = r"""
(letrec ((even (lambda (n) (if (== n 0) t (odd (- n 1)))))
         (odd (lambda (n) (if (== n 0) nil (even (- n 1))))))
  (even 1000))
"""


def _print_bench(name: str, code: str, rounds: int) -> None:
    t = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  evaluator: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_bench("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_bench("tail recursion (factorial)", TAIL_RECURSION_CODE, rounds=2000)
    _print_bench("arithmetic sum 1..500 (tail-rec)", ARITH_SUM_CODE, rounds=200)
    _print_bench("mutual recursion even/odd 1000", MUTUAL_RECURSION_CODE, rounds=100)
