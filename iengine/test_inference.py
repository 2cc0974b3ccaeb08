"""
Tests of the inference engines on small knowledge bases.
"""
import io

import pytest

from iengine.logic.cnf import CNFClause
from iengine.logic.common import Formula
from iengine.logic.sat import remove_symbol, DPLL, EMPTY
from iengine.logic.truth import truth_rows
from iengine.prover.base import KnowledgeBase, split_clauses
from iengine.prover.horn import HornClauseIndex
from iengine.prover.inference import TruthTable, ForwardChaining, BackwardChaining, DPLLSolver, ResolutionSolver
from iengine.prover.methods import InferenceMethods
from iengine.prover.errors import (UnsupportedAskMode, SymbolLimitExceeded, UnrecognizedSymbol, UnsupportedQuery,
                                   NotHornClause, UnknownMethod)


HORN_KB = 'p2=>p3; p3=>p1; c=>e; b&e=>f; f&g=>h; p1=>d; p1&p3=>c; a; b; p2;'

SAT_KBS = ('a;~a',
           'a||b;~a;~b',
           'a=>b;a;~b',
           'a<=>b;b||c;~c',
           '(a&b)||(c&~d);~a||~c;d=>a',
           'a&~a||b',
           'a=>b;b=>c;c=>~a;a||c',
           'p<=>~q;q<=>~r;r<=>~p',
           'a||b||c;~a||~b;~b||~c;~a||~c;~a||b',
           'a;b;c;d;e;f;g;~h')


def prove(method, tell, ask, **params):
    return InferenceMethods.clazz(method)(**params).prove(KnowledgeBase(tell), ask)


def test_knowledge_base():
    kb = KnowledgeBase(' a & b ;\n b&c;;c || d ')
    assert len(kb) == 3
    assert str(kb) == 'a&b;b&c;c||d'
    assert kb.symbols == ['a', 'b', 'c', 'd']
    assert split_clauses('a;;b;') == ['a', 'b']
    kb2 = kb.copy()
    assert str(kb2) == str(kb)
    assert kb2.arena is kb.arena
    assert kb2.clauses[0].head != kb.clauses[0].head
    stream = io.StringIO()
    kb.write(stream)
    assert stream.getvalue().splitlines()[0] == '  0: a&b'


def test_truth_rows():
    rows = truth_rows(2, 0, 4)
    assert rows.tolist() == [[True, True], [True, False], [False, True], [False, False]]
    assert truth_rows(3, 5, 6).tolist() == [[False, True, False]]
    with pytest.raises(SymbolLimitExceeded):
        truth_rows(63, 0, 1)


def test_truthtable():
    assert prove('tt', 'a&b;b&c;c||d', 'd') == 'YES: 1'
    assert prove('tt', 'a&b;b&c;c||d', 'a') == 'YES: 2'
    assert prove('tt', 'a;a=>b', '~b') == 'NO'
    # the ask mentions a symbol the knowledge base does not know
    assert prove('tt', 'a;a=>b', 'z') == 'NO'
    assert prove('tt', 'a;~a', 'a') == 'NO'


def test_truthtable_strict():
    assert prove('tt', 'a&b;b&c;c||d', 'd', strict=True) == 'NO'
    assert prove('tt', 'a&b;b&c;c||d', 'c', strict=True) == 'YES: 2'
    assert prove('tt', 'a||b;~b', 'a', strict=True) == 'YES: 1'


def test_truthtable_constants():
    assert prove('tt', 'a||false;true', 'a') == 'YES: 1'
    tt = TruthTable()
    assert tt.count_models(KnowledgeBase('true')) == 1
    assert tt.count_models(KnowledgeBase('false')) == 0


def test_truthtable_symbol_limit():
    with pytest.raises(SymbolLimitExceeded):
        prove('tt', 'a&b&c&d', 'a', max_symbols=3)
    assert prove('tt', 'a&b&c', 'a', max_symbols=3) == 'YES: 1'


def test_count_models():
    tt = TruthTable()
    assert tt.count_models(KnowledgeBase('a||b')) == 3
    assert tt.count_models(KnowledgeBase('a<=>b')) == 2
    assert tt.count_models(KnowledgeBase('a;~a')) == 0
    # two chunks of rows
    names = ['s%d' % i for i in range(17)]
    assert tt.count_models(KnowledgeBase('||'.join(names))) == (1 << 17) - 1


def test_models():
    tt = TruthTable()
    models = list(tt.models(['a', 'b']))
    assert [str(m) for m in models] == ['Model #0: TT', 'Model #1: TF', 'Model #2: FT', 'Model #3: FF']
    m = models[1]
    assert m['a'] is True
    assert m['b'] is False
    assert m['true'] is True
    with pytest.raises(UnrecognizedSymbol):
        m['c']
    kb = KnowledgeBase('a=>b')
    assert not tt.check_clause(kb.clauses[0], m)
    assert tt.check_clause(kb.clauses[0], models[0])


def test_truthtable_write():
    tt = TruthTable()
    kb = KnowledgeBase('a;a=>b')
    tt.prove(kb, 'b')
    stream = io.StringIO()
    tt.write(stream)
    out = stream.getvalue()
    assert out.startswith('YES: 1\n')
    assert 'TRUTH TABLE' in out
    assert out.splitlines()[-4].split() == ['0', 'T', 'T', 'T', 'T']


def test_forward_chaining():
    assert prove('fc', 'a;a=>b;b=>c', 'c') == 'YES: a, b, c'
    assert prove('fc', 'a;a=>b;b=>c', 'a') == 'YES: a'
    assert prove('fc', 'a;a=>b;b=>c', 'd') == 'NO'
    assert prove('fc', HORN_KB, 'd') == 'YES: a, b, p2, p3, p1, d'


def test_backward_chaining():
    assert prove('bc', 'a;a=>b;b=>c', 'c') == 'YES: a, b, c'
    assert prove('bc', 'a;a=>b;b=>c', 'd') == 'NO'
    assert prove('bc', HORN_KB, 'd') == 'YES: p2, p3, p1, d'
    # cyclic implications terminate
    assert prove('bc', 'a=>b;b=>a', 'a') == 'NO'
    assert prove('bc', 'a=>b;b=>a;c=>a;c', 'b') == 'YES: c, a, b'


def test_chaining_disjunctive_antecedent():
    assert prove('fc', 'a||b=>c;b', 'c') == 'YES: b, c'
    assert prove('bc', 'a||b=>c;b', 'c') == 'YES: b, a, c'
    assert prove('bc', '~a||c;~b||c;b', 'c') == 'YES: b, a, c'


def test_chaining_with_constraints():
    kb = 'a; a=>~b; a=>c; c=>d'
    assert HornClauseIndex(KnowledgeBase(kb)).implications['false'] == [['a', 'b']]
    for method in ('fc', 'bc'):
        assert prove(method, kb, 'd') == 'YES: a, c, d'
        assert prove(method, kb, 'b') == 'NO'
    assert prove('fc', 'a;b;a=>~b;c', 'c') == 'YES: c'
    assert prove('bc', 'a;b;a=>~b;c', 'c') == 'YES: c'


def test_chaining_agree():
    for ask in ('a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'p1', 'p2', 'p3', 'z'):
        fc = prove('fc', HORN_KB, ask)
        bc = prove('bc', HORN_KB, ask)
        assert fc.startswith('YES') == bc.startswith('YES'), ask
    assert prove('fc', HORN_KB, 'f').startswith('YES')
    assert prove('fc', HORN_KB, 'h') == 'NO'


def test_chaining_rejects():
    with pytest.raises(UnsupportedQuery):
        prove('fc', 'a', '~a')
    with pytest.raises(UnsupportedQuery):
        prove('bc', 'a;b', 'a&b')
    with pytest.raises(NotHornClause):
        prove('fc', 'a||b', 'a')


def test_chaining_keeps_index():
    kb = KnowledgeBase('a;a=>b;b=>c')
    bc = BackwardChaining()
    assert bc.prove(kb, 'c') == 'YES: a, b, c'
    assert bc.prove(kb, 'c') == 'YES: a, b, c'
    assert bc.index.implications == {'b': [['a']], 'c': [['b']]}
    assert str(kb) == 'a;a=>b;b=>c'


def test_horn_index():
    index = HornClauseIndex(KnowledgeBase('a&b;~c;a||b=>d;~a||~b||~c'))
    assert index.facts == ['a', 'b']
    assert index.implications['d'] == [['a'], ['b']]
    assert index.implications['false'] == [['c'], ['a', 'b', 'c']]
    assert index.isfact('a')
    copy = index.copy()
    assert copy.get_clause('d') == [['a'], ['b']]
    assert copy.get_clause('d') is None
    assert 'd' in index.implications
    stream = io.StringIO()
    index.write(stream)
    assert 'a&b => d' not in stream.getvalue()
    assert 'b => d' in stream.getvalue()


def test_cnf_clause():
    kb = KnowledgeBase('a=>b;a<=>b;a||~a;false')
    assert str(CNFClause(kb.clauses[0])) == '(~a||b)'
    assert [str(c) for c in CNFClause(kb.clauses[1])] == ['~a||b', 'a||~b']
    assert len(CNFClause(kb.clauses[2])) == 0
    assert CNFClause(kb.clauses[3]).conjunctions == [EMPTY]


def clause(arena, *literals):
    nodes = []
    for l in literals:
        if nodes:
            nodes.append(arena.op('||'))
        nodes.append(arena.literal(l.lstrip('~'), negated=l.startswith('~')))
    return Formula(arena, arena.ring(*nodes))


def test_remove_symbol():
    kb = KnowledgeBase()
    a = kb.arena
    clauses = [clause(a, 'a', 'b', 'c'), clause(a, '~b'), clause(a, 'c', '~b'), clause(a, 'b', 'd'), clause(a, 'c', 'b'), clause(a, 'b'), clause(a, 'x')]
    result = remove_symbol(a, clauses, 'b', True)
    assert [str(c) for c in result] == ['a||c', 'd', 'c', '{}', 'x']
    assert result[3] is EMPTY
    assert result[4] is clauses[6]
    assert str(clauses[0]) == 'a||b||c'
    assert str(clauses[3]) == 'b||d'


def test_dpll():
    kb = KnowledgeBase()
    a = kb.arena
    assert DPLL(a, [clause(a, 'a'), clause(a, '~a', 'b')]) == ['a', 'b']
    assert DPLL(a, [clause(a, 'a', 'b'), clause(a, '~a', '~b')]) == ['a', '~b']
    assert DPLL(a, [clause(a, 'a'), clause(a, '~a')]) is None
    assert DPLL(a, []) == []
    assert DPLL(a, [EMPTY]) is None


def test_dpll_solver():
    dpll = DPLLSolver()
    kb = KnowledgeBase('a;~a')
    assert dpll.get_result(kb, 'unsatisfiable') == 'YES'
    assert dpll.get_result(kb, 'satisfiable') == 'NO'
    assert dpll.get_result(kb, 'raw') == 'unsatisfiable'
    kb = KnowledgeBase('a;a=>b')
    assert dpll.get_result(kb, 'Satisfiable') == 'YES'
    assert dpll.get_result(kb, 'RAW') == 'satisfiable'
    assert dpll.path == ['a', 'b']
    with pytest.raises(UnsupportedAskMode):
        dpll.get_result(kb, 'maybe')
    assert prove('dpll', 'a||b;~a', 'satisfiable') == 'YES'


def test_dpll_agrees_with_truthtable():
    tt = TruthTable()
    for tell in SAT_KBS:
        kb = KnowledgeBase(tell)
        satisfiable = tt.count_models(kb) > 0
        assert DPLLSolver().get_result(kb, 'satisfiable') == ('YES' if satisfiable else 'NO'), tell
        assert DPLLSolver().get_result(kb, 'unsatisfiable') == ('NO' if satisfiable else 'YES'), tell


def test_resolution():
    assert prove('rs', 'a;~a', 'b') == 'YES'
    assert prove('rs', 'a;a=>b;b=>c', 'c') == 'YES'
    assert prove('rs', 'a;a=>b;b=>c', 'd') == 'NO'
    assert prove('rs', 'a||b;~a', 'b') == 'YES'
    assert prove('rs', 'a||b', 'a') == 'NO'
    assert prove('rs', 'a<=>b;b', 'a&b') == 'YES'
    kb = KnowledgeBase('a;a=>b')
    ResolutionSolver().prove(kb, 'b')
    assert str(kb) == 'a;a=>b'
    assert len(kb) == 2


def test_resolution_agrees_with_backward_chaining():
    for ask in ('a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'p1', 'p2', 'p3', 'z'):
        rs = prove('rs', HORN_KB, ask)
        bc = prove('bc', HORN_KB, ask)
        assert rs.startswith('YES') == bc.startswith('YES'), ask


def test_methods():
    assert InferenceMethods.clazz('tt') is TruthTable
    assert InferenceMethods.clazz('FC') is ForwardChaining
    assert InferenceMethods.clazz('BackwardChaining') is BackwardChaining
    assert InferenceMethods.clazz(ResolutionSolver) is ResolutionSolver
    assert InferenceMethods.name('rs') == 'Resolution (DPLL refutation)'
    assert InferenceMethods.clazz('Truth table') is TruthTable
    assert set(InferenceMethods.selectors()) == {'tt', 'fc', 'bc', 'rs', 'dpll'}
    with pytest.raises(UnknownMethod):
        InferenceMethods.clazz('xy')


def test_engine_write():
    fc = ForwardChaining()
    fc.prove(KnowledgeBase('a;a=>b'), 'b')
    stream = io.StringIO()
    fc.write(stream)
    assert stream.getvalue() == 'YES: a, b\npath: a -> b\n'
    stream = io.StringIO()
    fc.write_elapsed_time(stream)
    assert 'inference: ' in stream.getvalue()
