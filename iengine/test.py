"""
Smoke run of all inference methods on the worked examples.
"""
import time

from iengine import query, KnowledgeBase
from iengine.prover.methods import InferenceMethods


HORN_KB = 'p2=>p3; p3=>p1; c=>e; b&e=>f; f&g=>h; p1=>d; p1&p3=>c; a; b; p2;'
GENERAL_KB = '(a<=>(c=>~d))&b&(b=>a); c; ~f||g;'


def test_inference_horn():
    for method in ('tt', 'fc', 'bc', 'rs'):
        print('=== INFERENCE TEST:', InferenceMethods.name(method), '===')
        r = query(tell=HORN_KB, ask='d', method=method, verbose=True).run()
        assert r.startswith('YES')


def test_inference_general():
    for method in ('tt', 'rs'):
        print('=== INFERENCE TEST:', InferenceMethods.name(method), '===')
        r = query(tell=GENERAL_KB, ask='~d&(~g=>~f)', method=method, verbose=True).run()
        assert r.startswith('YES')


def test_satisfiability():
    kb = KnowledgeBase(GENERAL_KB)
    for ask in ('satisfiable', 'unsatisfiable', 'raw'):
        print('=== SATISFIABILITY TEST:', ask, '===')
        print(query(tell=kb, ask=ask, method='dpll').run())


def runall():
    start = time.time()
    test_inference_horn()
    test_inference_general()
    test_satisfiability()
    print()
    print('all test finished after', time.time() - start, 'secs')


def main():
    runall()


if __name__ == '__main__':
    main()
