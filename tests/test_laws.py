# tests/test_laws.py
from hypothesis import given, strategies as st
from bitparsec.Parsec import State
from bitparsec.Prim import pure, fail
from bitparsec.Char import letters

from conftest import assert_state_eq

# Strategy to generate arbitrary values
vals = st.integers() | st.text()

def run_p(p, input_str=""):
    """Helper to run a parser on a fresh state"""
    return p(State.initial(input_str))

# 1. Left Identity: return a >>= f  === f a
@given(vals)
def test_monad_left_identity(v):
    f = lambda x: pure([x, x])

    lhs = pure(v).chain(f)
    rhs = f(v)

    res_lhs = run_p(lhs)
    res_rhs = run_p(rhs)

    assert_state_eq(res_lhs, res_rhs)

# 2. Right Identity: m >>= return === m
@given(st.text(alphabet="abc1", max_size=10))
def test_monad_right_identity(text):
    m = letters()

    lhs = m.chain(pure)

    assert_state_eq(run_p(lhs, text), run_p(m, text))

# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers())
def test_monad_associativity(v):
    m = pure(v)
    f = lambda x: pure(x + 1)
    g = lambda y: pure(y * 2) if y % 2 else fail("odd one out")

    lhs = m.chain(f).chain(g)
    rhs = m.chain(lambda x: f(x).chain(g))

    assert_state_eq(run_p(lhs), run_p(rhs))

# 4. Functor identity and composition
@given(st.text(alphabet="abc1", max_size=10))
def test_functor_laws(text):
    m = letters()
    f = len
    g = lambda n: n * 3

    assert run_p(m.map(lambda x: x), text) == run_p(m, text)
    assert run_p(m.map(f).map(g), text) == run_p(m.map(lambda x: g(f(x))), text)
