# -*- coding: utf-8 -*-
# PROPOSITIONAL LOGIC -- REWRITING RULES
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
from collections import OrderedDict

from dnutils import logs

from .common import Connective, Group, Op
from ..prover.constants import AND, OR, IMPLIES, TRUE, FALSE, CNF, HORN
from ..prover.errors import NotHornClause


logger = logs.getlogger(__name__)


class Rephraser(object):
    """
    Algebraic rewriting of formula rings.

    The binary rules (``implication``, ``biconditional``, ``distribute``,
    ``truthful``) take two operand nodes that have already been isolated
    from their ring together with a connective and return the head of a
    replacement ring. ``rewrite_at`` applies such a rule in place of a
    connective node. ``demorgan`` and ``associate`` work on a node and on a
    whole ring, respectively. ``horn`` and ``cnf`` compose the rules into
    complete normalizations; ``rephrase`` selects one of them by mode.
    """

    def __init__(self, arena):
        self.arena = arena


    def rephrase(self, head, mode):
        if mode == CNF:
            return self.cnf(head)
        elif mode == HORN:
            return self.horn(head)
        raise ValueError('Unknown rephrasing mode: %s' % mode)


    def rewrite_at(self, head, op, rule):
        """
        Replaces the connective node ``op`` and its two neighbours by a group
        holding ``rule(left, connective, right)``. Returns the head of the
        rewritten ring.
        """
        a = self.arena
        conn = a.connective(op)
        left = a.isolate(a.prev(op))
        right = a.isolate(a.next(op))
        a.set_payload(op, Group(rule(left, conn, right)))
        a.set_negated(op, False)
        return op if left == head else head

# ------------------------------------------------------------------------------
# binary rules
# ------------------------------------------------------------------------------

    def implication(self, left, conn, right):
        '''A=>B becomes ~A||B. ~A||B (or B||~A) becomes A=>B.'''
        a = self.arena
        if conn.isimpl:
            a.toggle(left)
            return a.ring(left, a.op(OR), right)
        if conn.isdisj and a.negated(left) != a.negated(right):
            antecedent, consequent = (left, right) if a.negated(left) else (right, left)
            a.toggle(antecedent)
            return a.ring(antecedent, a.op(IMPLIES), consequent)
        return a.ring(left, a.op(conn), right)


    def biconditional(self, left, conn, right):
        '''A<=>B becomes (~A&~B)||(A&B).'''
        a = self.arena
        if not conn.isbicond:
            return a.ring(left, a.op(conn), right)
        left2, right2 = a.copy_node(left), a.copy_node(right)
        a.toggle(left)
        a.toggle(right)
        neg = a.group(a.ring(left, a.op(AND), right))
        pos = a.group(a.ring(left2, a.op(AND), right2))
        return a.ring(neg, a.op(OR), pos)


    def distribute(self, left, conn, right):
        """
        Distributes ``conn`` over a group whose own connective is the dual of
        ``conn``, e.g. a||(b&c) becomes (a||b)&(a||c). If both operands are
        such groups, every operand of the left one is paired with every
        operand of the right one.
        """
        a = self.arena
        dual = conn.invert()
        if self._isflat(right, dual):
            rights = a.operands(a.content(right))
            if self._isflat(left, dual):
                lefts = a.operands(a.content(left))
            else:
                lefts = [left]
        elif self._isflat(left, dual):
            lefts = a.operands(a.content(left))
            rights = [right]
        else:
            return a.ring(left, a.op(conn), right)
        nodes = []
        for x in lefts:
            for y in rights:
                if nodes:
                    nodes.append(a.op(dual))
                pair = a.ring(a.copy_node(x), a.op(conn), a.copy_node(y))
                nodes.append(a.group(pair))
        return a.ring(*nodes)


    def truthful(self, left, conn, right):
        """
        Simplifies a conjunction or disjunction of two literals by
        complement, idempotence, identity and annulment.
        """
        a = self.arena
        if not (conn.isconj or conn.isdisj) or not (a.issymbol(left) and a.issymbol(right)):
            return a.ring(left, a.op(conn), right)
        lt, rt = a.truth(left), a.truth(right)
        # the value that decides the whole construct on its own
        dominant = not conn.isconj
        if lt is dominant or rt is dominant:
            return a.literal(TRUE if dominant else FALSE)
        if lt is not None:
            return right
        if rt is not None:
            return left
        if a.name(left) == a.name(right):
            if a.negated(left) == a.negated(right):
                return left
            return a.literal(TRUE if dominant else FALSE)
        return a.ring(left, a.op(conn), right)

# ------------------------------------------------------------------------------
# node and ring rules
# ------------------------------------------------------------------------------

    def demorgan(self, h):
        """
        Flips the negation of the group node ``h``, inverts every connective
        of the group's ring and flips the negation of every operand in it.
        Deeper groups are left alone. Returns ``h``.
        """
        a = self.arena
        if not a.isgroup(h):
            return h
        a.toggle(h)
        for n in a.iter(a.content(h)):
            if a.isop(n):
                a.set_payload(n, Op(a.connective(n).invert()))
            else:
                a.toggle(n)
        return h


    def associate(self, head):
        """
        Regroups a ring built from one kind of connective (& or ||): nested
        groups of the same connective are spliced in, operands on the same
        symbol (or the same group) are merged by idempotence and complement,
        and truth constants are absorbed. Returns the head of the new ring.
        """
        a = self.arena
        conns = set(a.connectives(head))
        if len(conns) != 1:
            return head
        conn = conns.pop()
        if not (conn.isconj or conn.isdisj):
            return head
        dominant = not conn.isconj
        buckets = OrderedDict()
        for n in self._gather(head, conn):
            a.isolate(n)
            buckets.setdefault(self._key(n), []).append(n)
        operands = []
        for members in buckets.values():
            if len({a.negated(m) for m in members}) > 1:
                operands.append(a.literal(TRUE if dominant else FALSE))
            else:
                operands.append(members[0])
        truths = [a.truth(n) for n in operands]
        if dominant in truths:
            return a.literal(TRUE if dominant else FALSE)
        operands = [n for n, t in zip(operands, truths) if t is None]
        if not operands:
            return a.literal(FALSE if dominant else TRUE)
        nodes = [operands[0]]
        for n in operands[1:]:
            nodes.extend((a.op(conn), n))
        return a.ring(*nodes)


    def _isflat(self, h, conn):
        # an un-negated group whose own ring only uses conn
        a = self.arena
        if not a.isgroup(h) or a.negated(h):
            return False
        return all(c == conn for c in a.connectives(a.content(h)))


    def _gather(self, head, conn):
        a = self.arena
        result = []
        for n in a.nodes(head):
            if a.isop(n):
                continue
            if self._isflat(n, conn):
                result.extend(self._gather(a.content(n), conn))
            else:
                result.append(n)
        return result


    def _key(self, h):
        a = self.arena
        if a.issymbol(h):
            return a.name(h)
        return '(%s)' % a.tostring(a.content(h))

# ------------------------------------------------------------------------------
# normalizations
# ------------------------------------------------------------------------------

    def eliminate(self, head):
        '''Rewrites every => and <=> of the ring and its groups into & and ||.'''
        a = self.arena
        for n in a.nodes(head):
            if a.isgroup(n):
                a.set_payload(n, Group(self.eliminate(a.content(n))))
        while True:
            op = next((n for n in a.iter(head) if a.isop(n) and (a.connective(n).isimpl or a.connective(n).isbicond)), None)
            if op is None:
                return head
            if a.connective(op).isimpl:
                head = self.rewrite_at(head, op, self.implication)
            else:
                head = self.rewrite_at(head, op, self.biconditional)


    def flatten(self, head):
        '''
        Splices every group into its parent ring, applying De Morgan to
        negated groups first. Expects a ring free of => and <=>.
        '''
        a = self.arena
        for n in a.nodes(head):
            if not a.isgroup(n):
                continue
            if a.negated(n):
                self.demorgan(n)
            inner = self.flatten(a.content(n))
            a.extend_front(n, inner)
            a.isolate(n)
            if n == head:
                head = inner
        return head


    def nnf(self, head):
        '''Pushes all negations of groups down to the symbols.'''
        a = self.arena
        for n in a.nodes(head):
            if a.isgroup(n):
                if a.negated(n):
                    self.demorgan(n)
                a.set_payload(n, Group(self.nnf(a.content(n))))
        return head


    def horn(self, head):
        """
        Brings a clause into implication form: a single literal is returned
        unchanged, a single implication with a conjunctive or disjunctive
        antecedent of positive symbols and a positive symbol as consequent
        is returned unchanged, and everything else is flattened into a
        disjunction that must hold at most one positive literal. That
        disjunction is emitted as ``negatives=>positive``, or
        ``negatives=>false`` if there is no positive literal.
        """
        a = self.arena
        text = a.tostring(head)
        if a.issingleton(head):
            if a.issymbol(head):
                return head
            if not a.negated(head):
                return self.horn(a.content(head))
        impls = [n for n in a.iter(head) if a.isop(n) and a.connective(n).isimpl]
        if len(impls) > 1:
            raise NotHornClause('"%s" holds more than one implication' % text)
        if impls and self._isdefinite(head, impls[0]):
            return head
        flat = self.flatten(self.eliminate(head))
        if any(not c.isdisj for c in a.connectives(flat)):
            raise NotHornClause('"%s" does not reduce to a disjunction' % text)
        positives = [n for n in a.iter(flat) if a.isoperand(n) and not a.negated(n)]
        if len(positives) > 1:
            raise NotHornClause('"%s" has more than one positive literal: %s' % (text, ', '.join(a.name(n) for n in positives)))
        if not positives:
            consequent = a.literal(FALSE)
        else:
            consequent = positives[0]
            if a.issingleton(flat):
                return flat
            if consequent == flat:
                flat = a.next(a.next(consequent))
                a.isolate(a.next(consequent))
            else:
                a.isolate(a.prev(consequent))
            a.isolate(consequent)
        if a.issingleton(flat):
            a.toggle(flat)
            antecedent = flat
        else:
            antecedent = self.demorgan(a.group(flat, negated=True))
        result = a.ring(antecedent, a.op(IMPLIES), consequent)
        logger.debug('horn form of %s: %s' % (text, a.tostring(result)))
        return result


    def _isdefinite(self, head, impl):
        # positive antecedent => positive symbol, already in implication form
        a = self.arena
        if len(a.nodes(head)) != 3:
            return False
        consequent = a.next(impl)
        if not a.issymbol(consequent) or a.negated(consequent):
            return False
        return self._positive(a.prev(impl))


    def _positive(self, h):
        # only un-negated symbols joined by & and ||
        a = self.arena
        if a.negated(h):
            return False
        if a.issymbol(h):
            return True
        for n in a.iter(a.content(h)):
            if a.isop(n):
                if not (a.connective(n).isconj or a.connective(n).isdisj):
                    return False
            elif not self._positive(n):
                return False
        return True


    def cnf(self, head):
        '''Rewrites the ring into a conjunction of disjunctions of literals.'''
        a = self.arena
        head = self._cnf(self.nnf(self.eliminate(head)))
        while a.issingleton(head) and a.isgroup(head) and not a.negated(head):
            head = a.content(head)
        return head


    def _cnf(self, head):
        a = self.arena
        for n in a.nodes(head):
            if a.isgroup(n):
                a.set_payload(n, Group(self._cnf(a.content(n))))
        head = self.associate(head)
        if a.issingleton(head) or not a.connective(a.next(head)).isdisj:
            return head
        operands = [a.isolate(n) for n in a.operands(head)]
        disj = Connective(OR)
        acc = operands[0]
        for x in operands[1:]:
            ring = self._clauses(self.distribute(acc, disj, x))
            acc = ring if a.issingleton(ring) else a.group(ring)
        if a.isgroup(acc) and not a.negated(acc):
            return a.content(acc)
        return acc


    def _clauses(self, head):
        # simplifies the output of distribute into a flat conjunction of clauses
        a = self.arena
        for n in a.nodes(head):
            if not a.isgroup(n):
                continue
            inner = self.associate(a.content(n))
            if a.issingleton(inner) and a.issymbol(inner):
                a.swap(n, inner)
                if n == head:
                    head = inner
            else:
                a.set_payload(n, Group(inner))
        return self.associate(head)
