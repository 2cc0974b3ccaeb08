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
from ..errors import UnsupportedQuery
from ..horn import HornClauseIndex


logger = logs.getlogger(__name__)


class ChainingEngine(InferenceEngine):
    """
    Abstract super class for inference over the Horn clause index of a
    knowledge base. The justification of a positive verdict is the path of
    symbols the engine went through.
    """

    def __init__(self, **params):
        InferenceEngine.__init__(self, **params)
        self.path = []
        self.index = None


    def _prove(self, kb, ask):
        formula = kb.parse(ask)
        if not formula.isliteral or kb.arena.negated(formula.head):
            raise UnsupportedQuery('Chaining can only be asked for a single symbol, got "%s"' % formula)
        self.index = HornClauseIndex(kb)
        self.path = []
        success = self.chain(self.index.copy(), kb.arena.name(formula.head))
        return verdict(success, ', '.join(self.path))


    def chain(self, index, symbol):
        raise Exception('%s does not implement chain()' % self.__class__.__name__)


    def write(self, stream=sys.stdout):
        InferenceEngine.write(self, stream)
        if self.index is not None:
            stream.write('path: %s\n' % ' -> '.join(self.path))


class ForwardChaining(ChainingEngine):
    """
    Derives new facts from the known ones until the asked symbol shows up or
    nothing new can be derived.
    """

    def chain(self, index, symbol):
        facts = index.facts
        implications = index.implications
        if symbol in facts:
            self.path = [symbol]
            return True
        i = 0
        while i < len(facts):
            fact = facts[i]
            self.path.append(fact)
            for implied, reqlists in list(implications.items()):
                if not any(fact in reqs and all(r in facts for r in reqs) for reqs in reqlists):
                    continue
                del implications[implied]
                index.add_fact(implied)
                logger.debug('%s derived from %s' % (implied, fact))
                if implied == symbol:
                    self.path.append(symbol)
                    return True
            i += 1
        return False


class BackwardChaining(ChainingEngine):
    """
    Works backwards from the asked symbol through the implications that
    conclude it. The implications of a symbol are consumed on first use, so
    every symbol is expanded at most once per query.
    """

    def chain(self, index, symbol):
        if symbol not in self.path:
            self.path.insert(0, symbol)
        if index.isfact(symbol):
            return True
        clause = index.get_clause(symbol)
        if clause is None:
            logger.debug('no implications (left) for %s' % symbol)
            return False
        if any(all(self.chain(index, r) for r in reqs) for reqs in clause):
            index.add_fact(symbol)
            return True
        return False
