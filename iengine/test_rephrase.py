"""
Tests of the rewriting rules and of the Horn and CNF normalizations.
"""
import numpy as np
import pytest

from iengine.logic.common import NodeArena, Connective
from iengine.logic.grammar import Grammar
from iengine.logic.rephrase import Rephraser
from iengine.logic.truth import evaluate, truth_rows
from iengine.prover.base import KnowledgeBase
from iengine.prover.constants import CNF, HORN
from iengine.prover.errors import NotHornClause


def rephraser():
    arena = NodeArena()
    return arena, Grammar(arena), Rephraser(arena)


def horn(text):
    arena, grammar, r = rephraser()
    return arena.tostring(r.horn(grammar.parse(text)))


def test_demorgan_is_self_inverse():
    for text in ('~(a&b)', '(~a||~b)', '~(~(a&c)&~b)'):
        arena, grammar, r = rephraser()
        head = grammar.parse(text)
        r.demorgan(head)
        assert arena.tostring(head) != text
        r.demorgan(head)
        assert arena.tostring(head) == text


def test_demorgan():
    arena, grammar, r = rephraser()
    head = grammar.parse('~(a&~b)')
    r.demorgan(head)
    assert arena.tostring(head) == '(~a||b)'
    head = grammar.parse('~(~(a&c)&~b)')
    r.demorgan(head)
    assert arena.tostring(head) == '((a&c)||b)'


def test_horn():
    assert horn('a') == 'a'
    assert horn('~a') == '~a'
    assert horn('(a)') == 'a'
    assert horn('a=>b') == 'a=>b'
    assert horn('a||b=>c') == '(a||b)=>c'
    assert horn('a&b=>c') == '(a&b)=>c'
    assert horn('~a||b||~c') == '(a&c)=>b'
    assert horn('~a||~b||~c') == '(a&b&c)=>false'
    assert horn('~a||b') == 'a=>b'
    assert horn('b||~a') == 'a=>b'
    assert horn('~a||~b') == '(a&b)=>false'
    assert horn('a=>~b') == '(a&b)=>false'
    assert horn('a&c=>~b') == '(a&c&b)=>false'


def test_horn_rejects():
    for text in ('a||b', 'a=>b=>c', '~a=>b', 'a&b', '(a=>b)||c', 'a=>b&c'):
        with pytest.raises(NotHornClause):
            horn(text)


def test_implication():
    arena, grammar, r = rephraser()
    impl = Connective('=>')
    disj = Connective('||')
    head = r.implication(arena.literal('a'), impl, arena.literal('b'))
    assert arena.tostring(head) == '~a||b'
    head = r.implication(arena.literal('a', negated=True), disj, arena.literal('b'))
    assert arena.tostring(head) == 'a=>b'
    head = r.implication(arena.literal('b'), disj, arena.literal('a', negated=True))
    assert arena.tostring(head) == 'a=>b'
    head = r.implication(arena.literal('a'), disj, arena.literal('b'))
    assert arena.tostring(head) == 'a||b'


def test_biconditional():
    arena, grammar, r = rephraser()
    head = r.biconditional(arena.literal('a'), Connective('<=>'), arena.literal('b'))
    assert arena.tostring(head) == '(~a&~b)||(a&b)'
    head = r.biconditional(arena.literal('a'), Connective('&'), arena.literal('b'))
    assert arena.tostring(head) == 'a&b'


def test_distribute():
    arena, grammar, r = rephraser()
    disj = Connective('||')
    head = r.distribute(arena.literal('a'), disj, grammar.parse('(b&c)'))
    assert arena.tostring(head) == '(a||b)&(a||c)'
    head = r.distribute(grammar.parse('(b&c)'), disj, arena.literal('a'))
    assert arena.tostring(head) == '(b||a)&(c||a)'
    head = r.distribute(grammar.parse('(a&b)'), disj, grammar.parse('(c&d)'))
    assert arena.tostring(head) == '(a||c)&(a||d)&(b||c)&(b||d)'
    head = r.distribute(arena.literal('a'), Connective('&'), grammar.parse('(b||c)'))
    assert arena.tostring(head) == '(a&b)||(a&c)'
    # nothing to distribute over
    head = r.distribute(arena.literal('a'), disj, grammar.parse('(b||c)'))
    assert arena.tostring(head) == 'a||(b||c)'


def test_truthful():
    arena, grammar, r = rephraser()
    conj = Connective('&')
    disj = Connective('||')
    lit = arena.literal
    assert arena.tostring(r.truthful(lit('a'), conj, lit('a', negated=True))) == 'false'
    assert arena.tostring(r.truthful(lit('a'), disj, lit('a', negated=True))) == 'true'
    assert arena.tostring(r.truthful(lit('a'), conj, lit('true'))) == 'a'
    assert arena.tostring(r.truthful(lit('false'), disj, lit('a'))) == 'a'
    assert arena.tostring(r.truthful(lit('a'), disj, lit('true'))) == 'true'
    assert arena.tostring(r.truthful(lit('false'), conj, lit('a'))) == 'false'
    assert arena.tostring(r.truthful(lit('a'), conj, lit('a'))) == 'a'
    assert arena.tostring(r.truthful(lit('a'), conj, lit('b'))) == 'a&b'
    assert arena.tostring(r.truthful(lit('a'), Connective('=>'), lit('a'))) == 'a=>a'


def test_associate():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.associate(grammar.parse('a&(b&a)'))) == 'a&b'
    assert arena.tostring(r.associate(grammar.parse('a||(~a||b)'))) == 'true'
    assert arena.tostring(r.associate(grammar.parse('a&(b&~a)'))) == 'false'
    assert arena.tostring(r.associate(grammar.parse('a&true'))) == 'a'
    assert arena.tostring(r.associate(grammar.parse('false||a||(b||c)'))) == 'a||b||c'
    assert arena.tostring(r.associate(grammar.parse('(a||b)&(b||a)&(a||b)'))) == '(a||b)&(b||a)'
    # groups of the dual connective stay intact
    assert arena.tostring(r.associate(grammar.parse('a&b||c'))) == '(a&b)||c'


def test_rewrite_at():
    arena, grammar, r = rephraser()
    head = grammar.parse('a=>b')
    op = arena.next(head)
    head = r.rewrite_at(head, op, r.implication)
    assert head == op
    assert arena.tostring(head) == '(~a||b)'


def test_eliminate():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.eliminate(grammar.parse('a=>b'))) == '(~a||b)'
    assert arena.tostring(r.eliminate(grammar.parse('a<=>b'))) == '((~a&~b)||(a&b))'
    assert arena.tostring(r.eliminate(grammar.parse('c&(a=>b)'))) == 'c&((~a||b))'


def test_nnf():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.nnf(grammar.parse('~(a&~b)||c'))) == '(~a||b)||c'
    assert arena.tostring(r.nnf(grammar.parse('~(~(a||b)&c)'))) == '((a||b)||~c)'


def test_flatten():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.flatten(grammar.parse('~(a&~b)||c'))) == '~a||b||c'
    assert arena.tostring(r.flatten(grammar.parse('(a||b)||(c||~d)'))) == 'a||b||c||~d'


def test_cnf():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.cnf(grammar.parse('a=>b'))) == '~a||b'
    assert arena.tostring(r.cnf(grammar.parse('a||(b&c)'))) == '(a||b)&(a||c)'
    assert arena.tostring(r.cnf(grammar.parse('(a&b)||(c&d)'))) == '(a||c)&(a||d)&(b||c)&(b||d)'
    assert arena.tostring(r.cnf(grammar.parse('a'))) == 'a'
    assert arena.tostring(r.cnf(grammar.parse('a||~a'))) == 'true'


def _values(arena, head, symbols):
    n = len(symbols)
    table = truth_rows(n, 0, 1 << n)
    columns = dict((s, table[:, i]) for i, s in enumerate(symbols))
    return np.broadcast_to(evaluate(arena, head, columns.__getitem__), (table.shape[0],))


def test_cnf_preserves_truth_table():
    for text in ('a<=>b',
                 '~(a&b)||c',
                 '(a=>b)&(b=>c)',
                 '~(a<=>(b||~c))',
                 'a&(b||(c&d))',
                 '(a||b)&~(c=>d)',
                 '~(~(a&c)&~b)',
                 '(a&~a)||b'):
        arena, grammar, r = rephraser()
        head = grammar.parse(text)
        symbols = arena.symbols(head)
        expected = _values(arena, head, symbols)
        cnf = r.cnf(arena.copy(head))
        assert np.array_equal(_values(arena, cnf, symbols), expected), text
        # the parsed ring is left untouched by rewriting its copy
        assert arena.tostring(head) == str(grammar.parse_formula(text))


def test_rephrase_modes():
    arena, grammar, r = rephraser()
    assert arena.tostring(r.rephrase(grammar.parse('~a||b'), HORN)) == 'a=>b'
    assert arena.tostring(r.rephrase(grammar.parse('a=>b'), CNF)) == '~a||b'
    with pytest.raises(ValueError):
        r.rephrase(grammar.parse('a'), 'dnf')


def test_knowledge_base_rephrase():
    kb = KnowledgeBase('~a||b; c=>d')
    horn = kb.rephrase(HORN)
    assert str(horn) == 'a=>b;c=>d'
    cnf = kb.rephrase(CNF)
    assert str(cnf) == '~a||b;~c||d'
    assert str(kb) == '~a||b;c=>d'
