# -*- coding: utf-8 -*-
#
# Propositional Inference Engine
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
import sys

from dnutils import logs

from .infer import InferenceEngine, verdict
from ..base import KnowledgeBase
from ..constants import ASK_MODES, SATISFIABLE, UNSATISFIABLE, RAW
from ..errors import UnsupportedAskMode
from ...logic.cnf import CNFClause
from ...logic.sat import DPLL


logger = logs.getlogger(__name__)


class DPLLSolver(InferenceEngine):
    """
    Satisfiability of a knowledge base by the DPLL algorithm. The clauses
    are brought into CNF clause by clause using their truth tables.

    The "ask" of this engine is the question to answer:
    ``satisfiable`` and ``unsatisfiable`` yield YES or NO, ``raw`` yields
    the plain outcome of the search.
    """

    def __init__(self, **params):
        InferenceEngine.__init__(self, **params)
        self.path = None
        self.clauses = None


    def cnf(self, kb):
        clauses = []
        for clause in kb:
            clauses.extend(CNFClause(clause).conjunctions)
        return clauses


    def main(self, kb):
        '''Returns whether ``kb`` is satisfiable.'''
        self.clauses = self.cnf(kb)
        logger.debug('searching %d CNF clauses' % len(self.clauses))
        self.path = DPLL(kb.arena, self.clauses)
        return self.path is not None


    def get_result(self, kb, ask):
        mode = ask.strip().lower()
        if mode not in ASK_MODES:
            raise UnsupportedAskMode('Ask mode "%s" is not supported, use one of %s' % (ask, ', '.join(ASK_MODES)))
        satisfiable = self.main(kb)
        if mode == RAW:
            return SATISFIABLE if satisfiable else UNSATISFIABLE
        return verdict(satisfiable == (mode == SATISFIABLE))


    def _prove(self, kb, ask):
        return self.get_result(kb, ask)


    def write(self, stream=sys.stdout):
        InferenceEngine.write(self, stream)
        if self.path is not None:
            stream.write('fixed literals: %s\n' % ', '.join(self.path))


class ResolutionSolver(InferenceEngine):
    """
    Entailment by refutation: the knowledge base entails the ask iff the
    knowledge base together with the negated ask is unsatisfiable.
    """

    def __init__(self, **params):
        InferenceEngine.__init__(self, **params)
        self.solver = None


    def _prove(self, kb, ask):
        refutation = KnowledgeBase(arena=kb.arena)
        refutation.tell(kb.parse(ask).negate())
        for clause in kb:
            refutation.tell(clause.copy())
        logger.debug('refuting %s' % refutation)
        self.solver = DPLLSolver(**self._params)
        return self.solver.get_result(refutation, UNSATISFIABLE)


    def write(self, stream=sys.stdout):
        InferenceEngine.write(self, stream)
        if self.solver is not None and self.solver.path is not None:
            stream.write('counter model: %s\n' % ', '.join(self.solver.path))
