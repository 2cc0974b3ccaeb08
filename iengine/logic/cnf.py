# -*- coding: utf-8 -*-
# PROPOSITIONAL LOGIC -- CONJUNCTIVE NORMAL FORM
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
import numpy as np

from .common import Formula
from .sat import EMPTY
from .truth import evaluate, propositions, truth_rows
from ..prover.constants import OR


class CNFClause(object):
    """
    The conjunctive normal form of a single formula, read off the formula's
    own truth table: every row that falsifies the formula contributes the
    disjunction that is false in exactly that row.
    """

    def __init__(self, formula):
        self.formula = formula
        self.arena = formula.arena
        self.symbols = propositions(formula.symbols())
        self.conjunctions = self._convert()


    def _convert(self):
        a = self.arena
        n = len(self.symbols)
        table = truth_rows(n, 0, 1 << n)
        columns = dict((s, table[:, i]) for i, s in enumerate(self.symbols))
        values = np.broadcast_to(evaluate(a, self.formula.head, columns.__getitem__), (table.shape[0],))
        clauses = []
        for row in np.flatnonzero(np.logical_not(values)):
            nodes = []
            for i, s in enumerate(self.symbols):
                if nodes:
                    nodes.append(a.op(OR))
                nodes.append(a.literal(s, negated=bool(table[row, i])))
            clauses.append(Formula(a, a.ring(*nodes)) if nodes else EMPTY)
        return clauses


    def __iter__(self):
        return iter(self.conjunctions)


    def __len__(self):
        return len(self.conjunctions)


    def __str__(self):
        return '&'.join('(%s)' % c for c in self.conjunctions)
