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

import numpy as np
from dnutils import logs
from tabulate import tabulate

from .infer import InferenceEngine, verdict
from ..constants import TRUE, FALSE, MAX_SYMBOLS, CHUNK_SIZE, MAX_PRINT_ROWS
from ..errors import SymbolLimitExceeded, UnrecognizedSymbol
from ..util import truthstr, headline
from ...logic.truth import evaluate, propositions, truth_rows


logger = logs.getlogger(__name__)


class Model(object):
    """
    One row of a truth table: an assignment of truth values to symbols.
    """

    def __init__(self, id_, symbols, values):
        self.id = id_
        self.symbols = symbols
        self.values = [bool(v) for v in values]
        self._index = dict((s, i) for i, s in enumerate(symbols))


    def __getitem__(self, symbol):
        if symbol in (TRUE, FALSE):
            return symbol == TRUE
        i = self._index.get(symbol)
        if i is None:
            raise UnrecognizedSymbol('Model #%d has no value for symbol "%s"' % (self.id, symbol))
        return self.values[i]


    def items(self):
        return zip(self.symbols, self.values)


    def __str__(self):
        return 'Model #%d: %s' % (self.id, ''.join(map(truthstr, self.values)))


    def __repr__(self):
        return '<Model #%d: %s>' % (self.id, dict(self.items()))


class TruthTable(InferenceEngine):
    """
    Entailment by enumeration of all models over the symbols of the knowledge
    base.

    Rows are generated in chunks and each formula is evaluated on a whole
    chunk at once, so the memory needed does not grow with the table.

    :param strict:        answer YES only if every model of the KB satisfies
                          the ask. By default, one model satisfying both the
                          KB and the ask suffices.
    :param max_symbols:   largest symbol universe that is enumerated.
    """

    def __init__(self, **params):
        InferenceEngine.__init__(self, **params)
        self.symbols = None
        self.count = 0
        self.kbcount = 0
        self.kb = None
        self.ask = None


    @property
    def strict(self):
        return self._params.get('strict', False)


    @property
    def max_symbols(self):
        return min(int(self._params.get('max_symbols', MAX_SYMBOLS)), MAX_SYMBOLS)


    def universe(self, kb):
        symbols = propositions(kb.symbols)
        if len(symbols) > self.max_symbols:
            raise SymbolLimitExceeded('The knowledge base has %d symbols, the truth table supports at most %d' % (len(symbols), self.max_symbols))
        return symbols


    def _prove(self, kb, ask):
        self.kb = kb
        self.ask = kb.parse(ask)
        self.symbols = self.universe(kb)
        missing = [s for s in propositions(self.ask.symbols()) if s not in self.symbols]
        if missing:
            logger.debug('%s does not occur in the knowledge base' % ', '.join(missing))
            self.count = self.kbcount = 0
            return verdict(False)
        self.kbcount, self.count = self._count(kb, self.symbols, self.ask)
        logger.debug('%d of %d models satisfy the KB, %d of them the ask as well' % (self.kbcount, 1 << len(self.symbols), self.count))
        if self.strict:
            return verdict(self.kbcount > 0 and self.count == self.kbcount, self.count)
        return verdict(self.count > 0, self.count)


    def count_models(self, kb):
        '''Returns the number of models that satisfy every clause of ``kb``.'''
        return self._count(kb, self.universe(kb))[0]


    def _count(self, kb, symbols, ask=None):
        n = len(symbols)
        kbcount = askcount = 0
        for table in self.chunks(n):
            lookup = self._lookup(symbols, table)
            kbvals = np.ones(table.shape[0], dtype=bool)
            for clause in kb:
                kbvals = np.logical_and(kbvals, evaluate(kb.arena, clause.head, lookup))
            kbcount += int(np.count_nonzero(kbvals))
            if ask is not None:
                askcount += int(np.count_nonzero(np.logical_and(kbvals, evaluate(kb.arena, ask.head, lookup))))
        return kbcount, askcount


    def chunks(self, n):
        rows = 1 << n
        for start in range(0, rows, CHUNK_SIZE):
            yield truth_rows(n, start, min(start + CHUNK_SIZE, rows))


    def _lookup(self, symbols, table):
        index = dict((s, i) for i, s in enumerate(symbols))
        def lookup(symbol):
            i = index.get(symbol)
            if i is None:
                raise UnrecognizedSymbol('The truth table has no column for symbol "%s"' % symbol)
            return table[:, i]
        return lookup


    def models(self, symbols):
        '''Iterates over all models over ``symbols`` in truth table order.'''
        idx = 0
        for table in self.chunks(len(symbols)):
            for row in table:
                yield Model(idx, symbols, row)
                idx += 1


    def check_clause(self, formula, model):
        '''Returns the truth value of ``formula`` in ``model``.'''
        return bool(evaluate(formula.arena, formula.head, model.__getitem__))


    def write(self, stream=sys.stdout):
        InferenceEngine.write(self, stream)
        if self.kb is None or self.symbols is None:
            return
        if (1 << len(self.symbols)) > MAX_PRINT_ROWS:
            stream.write('(%d models, table omitted)\n' % (1 << len(self.symbols)))
            return
        stream.write(headline('TRUTH TABLE', self.color))
        stream.write('\n')
        known = all(s in self.symbols for s in propositions(self.ask.symbols()))
        rows = []
        for model in self.models(self.symbols):
            kbval = all(self.check_clause(c, model) for c in self.kb)
            askval = truthstr(self.check_clause(self.ask, model)) if known else '?'
            rows.append([model.id] + [truthstr(v) for v in model.values] + [truthstr(kbval), askval])
        stream.write(tabulate(rows, headers=['#'] + self.symbols + ['KB', str(self.ask)]))
        stream.write('\n')
