#
# PROPOSITIONAL LOGIC -- SATISFIABILITY REASONING
#
# (C) 2021 by the iengine developers
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
from dnutils import logs

from .common import Formula


logger = logs.getlogger(__name__)


class EmptyClause(object):
    '''The clause without literals, which no model satisfies.'''

    def __str__(self):
        return '{}'

    def __repr__(self):
        return '<EmptyClause>'


EMPTY = EmptyClause()


def remove_symbol(arena, clauses, name, negated):
    """
    Simplifies a list of disjunctive clauses under the assumption that the
    literal (``name``, ``negated``) is true. Clauses holding the literal are
    dropped, clauses holding its complement lose that literal (an emptied
    clause turns into ``EMPTY``) and all other clauses are passed on as they
    are. Clauses are never modified in place: a clause that loses a literal
    is copied first, so the input list stays valid for backtracking.
    """
    result = []
    for clause in clauses:
        if clause is EMPTY:
            result.append(clause)
            continue
        hits = [n for n in clause if arena.isoperand(n) and arena.name(n) == name]
        if not hits:
            result.append(clause)
        elif any(arena.negated(n) == negated for n in hits):
            continue
        else:
            result.append(_strip(arena, clause, name))
    return result


def _strip(arena, clause, name):
    head = arena.copy(clause.head)
    for n in arena.nodes(head):
        if arena.isop(n) or arena.name(n) != name:
            continue
        if arena.issingleton(n):
            return EMPTY
        if n == head:
            head = arena.next(arena.next(n))
            arena.isolate(arena.next(n))
        else:
            arena.isolate(arena.prev(n))
        arena.isolate(n)
    return Formula(arena, head)


def DPLL(arena, clauses, path=None):
    """
    Implementation of the Davis-Putnam-Logemann-Loveland (DPLL) algorithm for
    proving satisfiability of a sentence in CNF in propositional logic.
    Returns the list of literals that were fixed on the way to a satisfying
    assignment, or None if the clauses are unsatisfiable.
    - arena:     the NodeArena the clause rings live in.
    - clauses:   list of disjunction-only Formulas (or EMPTY).
    - path:      the literals fixed so far.
    """
    path = list(path or [])
    while True:
        if any(c is EMPTY for c in clauses):
            logger.debug('empty clause => backtracking')
            return None
        unit = next((c for c in clauses if arena.issingleton(c.head)), None)
        if unit is None:
            break
        path.append(str(unit))
        logger.debug('unit propagation of %s' % unit)
        clauses = remove_symbol(arena, clauses, arena.name(unit.head), arena.negated(unit.head))
    if not clauses:
        return path
    name = arena.name(clauses[0].head)
    for value in (True, False):
        logger.debug('branching on %s=%s' % (name, value))
        unit = Formula(arena, arena.literal(name, negated=not value))
        result = DPLL(arena, clauses + [unit], path)
        if result is not None:
            return result
    return None
