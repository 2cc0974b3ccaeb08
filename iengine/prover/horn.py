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

from ..logic.rephrase import Rephraser
from .constants import FALSE, AND


logger = logs.getlogger(__name__)


class HornClauseIndex(object):
    """
    Facts and implications of a Horn knowledge base.

    ``facts`` lists the symbols known to be true, in the order they became
    known. ``implications`` maps an implied symbol to a list of requirement
    lists; each requirement list holds symbols whose conjunction implies the
    key. A constraint such as ``~a`` is stored as an implication of ``false``.

    :param kb:    the ``KnowledgeBase`` to index. Its clauses are not modified.
    """

    def __init__(self, kb=None):
        self.facts = []
        self.implications = {}
        if kb is not None:
            self.build(kb)


    def build(self, kb):
        a = kb.arena
        rephraser = Rephraser(a)
        for clause in kb:
            for head in self._conjuncts(a, a.copy(clause.head)):
                self._index(a, rephraser.horn(head))
        logger.debug('indexed %d facts and %d implied symbols' % (len(self.facts), len(self.implications)))


    def _conjuncts(self, a, head):
        # a conjunction of clauses is indexed clause by clause
        while a.issingleton(head) and a.isgroup(head) and not a.negated(head):
            head = a.content(head)
        conns = a.connectives(head)
        if not conns or not all(c.isconj for c in conns):
            return [head]
        result = []
        for n in a.operands(head):
            result.extend(self._conjuncts(a, a.isolate(n)))
        return result


    def _index(self, a, head):
        if a.issingleton(head):
            if a.negated(head):
                self.add_implication(FALSE, [a.name(head)])
            else:
                self.add_fact(a.name(head))
            return
        consequent = a.name(a.last(head))
        for requirements in self._requirements(a, head):
            self.add_implication(consequent, requirements)


    def _requirements(self, a, h):
        """
        Expands the antecedent ``h`` into the list of symbol lists any of
        which suffices to establish it.
        """
        if a.issymbol(h):
            return [[a.name(h)]]
        lists = None
        conn = None
        for n in a.iter(a.content(h)):
            if a.isop(n):
                conn = a.connective(n)
                continue
            sub = self._requirements(a, n)
            if lists is None:
                lists = sub
            elif conn.isconj:
                lists = [l + [s for s in r if s not in l] for l in lists for r in sub]
            else:
                lists = lists + sub
        return lists


    def add_fact(self, symbol):
        if symbol not in self.facts:
            self.facts.append(symbol)


    def add_implication(self, symbol, requirements):
        self.implications.setdefault(symbol, []).append(list(requirements))


    def isfact(self, symbol):
        return symbol in self.facts


    def get_clause(self, symbol):
        """
        Removes and returns the requirement lists of ``symbol``, or None if
        there are none (left). Every symbol's implications can therefore be
        fetched only once, which keeps backward chaining from running in
        circles on cyclic implications.
        """
        return self.implications.pop(symbol, None)


    def copy(self):
        index = HornClauseIndex()
        index.facts = list(self.facts)
        index.implications = dict((s, [list(r) for r in reqs]) for s, reqs in self.implications.items())
        return index


    def write(self, stream=sys.stdout):
        for fact in self.facts:
            stream.write('%s\n' % fact)
        for symbol, reqs in self.implications.items():
            for r in reqs:
                stream.write('%s => %s\n' % (AND.join(r), symbol))
