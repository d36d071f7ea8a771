import inspect

import pytest

from tailscheme.evaluation.evaluator import evaluate
from tailscheme.reader.parser import read
from tailscheme.types.primitive import Primitive
from tailscheme.types.symbol import Symbol


def test_tail_recursive_sum_runs_in_bounded_stack(run):
    """A naive recursive evaluator overflows the Python stack long before this."""
    source = """
    (letrec ((sum (lambda (n acc)
                    (if (== n 0) acc (sum (- n 1) (+ acc n))))))
      (sum 60000 0))
    """
    assert run(source) == 1800030000


def test_tail_call_through_if(run):
    source = """
    (letrec ((loop (lambda (n) (if (== n 0) (quote done) (loop (- n 1))))))
      (loop 200000))
    """
    assert run(source) == Symbol("done")


def test_tail_call_through_prog2(run):
    source = """
    (letrec ((loop (lambda (n) (prog2 n (if (< n 1) n (loop (- n 1)))))))
      (loop 100000))
    """
    assert run(source) == 0


def test_tail_call_through_letrec_body(run):
    source = """
    (letrec ((loop (lambda (n)
                     (letrec ((m (- n 1)))
                       (if (< m 0) (quote ok) (loop m))))))
      (loop 100000))
    """
    assert run(source) == Symbol("ok")


def test_mutual_tail_recursion_is_bounded(run):
    source = """
    (letrec ((even (lambda (n) (if (== n 0) t (odd (- n 1)))))
             (odd (lambda (n) (if (== n 0) nil (even (- n 1))))))
      (odd 100001))
    """
    assert run(source) == Symbol("t")


def test_python_stack_depth_is_constant_across_tail_calls(env):
    depths = []

    def probe(args):
        depths.append(len(inspect.stack(0)))
        return args[0]

    env = env.extend([Symbol("probe")], [Primitive("probe", probe)])
    source = """
    (letrec ((loop (lambda (n) (prog2 (probe n) (if (== n 0) n (loop (- n 1)))))))
      (loop 50))
    """
    assert evaluate(read(source), env) == 0
    assert len(depths) == 51
    assert len(set(depths)) == 1


def test_non_tail_recursion_is_fine_when_shallow(run):
    source = """
    (letrec ((sum (lambda (n) (if (== n 0) 0 (+ n (sum (- n 1)))))))
      (sum 100))
    """
    assert run(source) == 5050


def test_non_tail_recursion_is_not_bounded(run):
    """Only syntactic tail positions are constant-stack."""
    source = """
    (letrec ((sum (lambda (n) (if (== n 0) 0 (+ n (sum (- n 1)))))))
      (sum 100000))
    """
    with pytest.raises(RecursionError):
        run(source)
