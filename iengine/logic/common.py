# -*- coding: utf-8 -*-
#
# PROPOSITIONAL LOGIC -- FORMULA RINGS
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
from collections import namedtuple

from dnutils import logs

from ..prover.constants import AND, OR, IMPLIES, IFF, NEGATION, TRUE, FALSE
from ..prover.errors import UnsupportedConnective


logger = logs.getlogger(__name__)


# payload variants of a ring node
Symbol = namedtuple('Symbol', ['name'])
Group = namedtuple('Group', ['head'])
Op = namedtuple('Op', ['connective'])


class Connective(object):
    """
    One of the four binary connectives of propositional logic.

    Connectives compare equal to each other and to their spelling, i.e.
    ``Connective('&') == '&'`` holds.
    """

    SPELLINGS = (AND, OR, IMPLIES, IFF)

    def __init__(self, symbol):
        if symbol not in Connective.SPELLINGS:
            raise UnsupportedConnective('Unsupported connective: "%s"' % symbol)
        self._symbol = symbol


    @property
    def symbol(self):
        return self._symbol


    @property
    def isconj(self):
        return self._symbol == AND


    @property
    def isdisj(self):
        return self._symbol == OR


    @property
    def isimpl(self):
        return self._symbol == IMPLIES


    @property
    def isbicond(self):
        return self._symbol == IFF


    def invert(self):
        """
        Returns the De Morgan dual of this connective. Only conjunction and
        disjunction have one.
        """
        if self.isconj:
            return Connective(OR)
        if self.isdisj:
            return Connective(AND)
        raise ValueError('Connective "%s" cannot be inverted' % self._symbol)


    def __eq__(self, other):
        if isinstance(other, Connective):
            return self._symbol == other._symbol
        return self._symbol == other


    def __ne__(self, other):
        return not self == other


    def __hash__(self):
        return hash(self._symbol)


    def __str__(self):
        return self._symbol


    def __repr__(self):
        return '<Connective: %s>' % self._symbol


class Node(object):
    """
    A record in the node arena. ``prev`` and ``next`` are handles of the
    neighbours in the node's ring; a fully isolated node has ``None`` links.
    """
    __slots__ = ('payload', 'negated', 'prev', 'next')

    def __init__(self, payload, negated, prev, next_):
        self.payload = payload
        self.negated = negated
        self.prev = prev
        self.next = next_


class NodeArena(object):
    """
    Storage for formula rings.

    A ring is a circular doubly linked sequence of nodes that alternates
    operand nodes (``Symbol`` or ``Group`` payloads) with connective nodes
    (``Op`` payloads). Nodes are addressed by integer handles into the arena,
    so rewriting a ring never leaves a dangling reference behind: a handle
    stays valid for the whole lifetime of its arena, only its links change.
    A ``Group`` node owns the ring its payload points to.
    """

    def __init__(self):
        self._nodes = []


    def __len__(self):
        return len(self._nodes)


    def new(self, payload, negated=False):
        '''Creates a single-node ring holding ``payload``.'''
        h = len(self._nodes)
        self._nodes.append(Node(payload, bool(negated), h, h))
        return h


    def literal(self, name, negated=False):
        return self.new(Symbol(name), negated)


    def group(self, head, negated=False):
        return self.new(Group(head), negated)


    def op(self, connective):
        if not isinstance(connective, Connective):
            connective = Connective(connective)
        return self.new(Op(connective))


    def ring(self, *handles):
        '''Links the given single nodes, in order, into one ring and returns its head.'''
        head = handles[0]
        for h in handles[1:]:
            self.insert_before(head, h)
        return head

# ------------------------------------------------------------------------------
# node accessors
# ------------------------------------------------------------------------------

    def payload(self, h):
        return self._nodes[h].payload


    def set_payload(self, h, payload):
        self._nodes[h].payload = payload


    def negated(self, h):
        return self._nodes[h].negated


    def set_negated(self, h, negated):
        self._nodes[h].negated = bool(negated)


    def toggle(self, h):
        self._nodes[h].negated = not self._nodes[h].negated


    def next(self, h):
        return self._nodes[h].next


    def prev(self, h):
        return self._nodes[h].prev


    def issymbol(self, h):
        return isinstance(self._nodes[h].payload, Symbol)


    def isgroup(self, h):
        return isinstance(self._nodes[h].payload, Group)


    def isop(self, h):
        return isinstance(self._nodes[h].payload, Op)


    def isoperand(self, h):
        return not self.isop(h)


    def name(self, h):
        return self._nodes[h].payload.name


    def connective(self, h):
        return self._nodes[h].payload.connective


    def content(self, h):
        '''Returns the head of the sub-ring owned by the group node ``h``.'''
        return self._nodes[h].payload.head


    def issingleton(self, h):
        return self._nodes[h].next == h


    def truth(self, h):
        '''
        Returns the truth value of a constant literal node, taking its
        negation into account, or ``None`` if the node is not a constant.
        '''
        if not self.issymbol(h):
            return None
        name = self.name(h)
        if name not in (TRUE, FALSE):
            return None
        return (name == TRUE) != self.negated(h)

# ------------------------------------------------------------------------------
# structural editing
# ------------------------------------------------------------------------------

    def _link(self, a, b):
        self._nodes[a].next = b
        self._nodes[b].prev = a


    def insert_after(self, h, new):
        '''Splices the single node ``new`` into the ring of ``h`` right behind ``h``.'''
        n = self._nodes[h].next
        self._link(h, new)
        self._link(new, n)
        return new


    def insert_before(self, h, new):
        '''Splices the single node ``new`` into the ring of ``h`` right in front of ``h``.'''
        p = self._nodes[h].prev
        self._link(p, new)
        self._link(new, h)
        return new


    def isolate(self, h, full=False):
        """
        Removes ``h`` from its ring. The node becomes a singleton ring, or, if
        ``full`` is set, loses its links entirely so that it cannot be taken
        for a ring member anymore.
        """
        node = self._nodes[h]
        if node.prev is not None and node.prev != h:
            self._link(node.prev, node.next)
        if full:
            node.prev = node.next = None
        else:
            node.prev = node.next = h
        return h


    def remove_front(self, h, full=False):
        '''Isolates the node in front of ``h`` and returns it.'''
        return self.isolate(self._nodes[h].prev, full)


    def remove_back(self, h, full=False):
        '''Isolates the node behind ``h`` and returns it.'''
        return self.isolate(self._nodes[h].next, full)


    def swap(self, h, other):
        """
        Exchanges the ring positions of ``h`` and ``other``. Both nodes may
        live in the same ring or in different ones.
        """
        if h == other:
            return h
        hp, hn = self.prev(h), self.next(h)
        op, on = self.prev(other), self.next(other)
        if hn == h and on == other:
            return h
        if hn == h:
            self._link(op, h)
            self._link(h, on)
            self._nodes[other].prev = self._nodes[other].next = other
        elif on == other:
            self._link(hp, other)
            self._link(other, hn)
            self._nodes[h].prev = self._nodes[h].next = h
        elif hn == other and on == h:
            # a ring of two is symmetric under exchange
            pass
        elif hn == other:
            self._link(hp, other)
            self._link(other, h)
            self._link(h, on)
        elif on == h:
            self._link(op, h)
            self._link(h, other)
            self._link(other, hn)
        else:
            self._link(hp, other)
            self._link(other, hn)
            self._link(op, h)
            self._link(h, on)
        return h


    def extend_front(self, h, head):
        '''Splices the whole ring starting at ``head`` in front of ``h``.'''
        tail = self.prev(head)
        self._link(self.prev(h), head)
        self._link(tail, h)
        return head


    def extend_back(self, h, head):
        '''Splices the whole ring starting at ``head`` right behind ``h``.'''
        tail = self.prev(head)
        n = self.next(h)
        self._link(h, head)
        self._link(tail, n)
        return head

# ------------------------------------------------------------------------------
# traversal
# ------------------------------------------------------------------------------

    def iter(self, h):
        '''Iterates over the handles of the ring of ``h``, starting at ``h``.'''
        cur = h
        while True:
            yield cur
            cur = self._nodes[cur].next
            if cur == h or cur is None:
                break


    def nodes(self, h):
        return list(self.iter(h))


    def operands(self, h):
        return [n for n in self.iter(h) if not self.isop(n)]


    def connectives(self, h):
        return [self.connective(n) for n in self.iter(h) if self.isop(n)]


    def last(self, h):
        return self._nodes[h].prev


    def nodestr(self, h):
        node = self._nodes[h]
        neg = NEGATION if node.negated else ''
        if isinstance(node.payload, Symbol):
            return neg + node.payload.name
        if isinstance(node.payload, Group):
            return '%s(%s)' % (neg, self.tostring(node.payload.head))
        return str(node.payload.connective)


    def tostring(self, h):
        return ''.join(map(self.nodestr, self.iter(h)))


    def symbols(self, h, symbols=None):
        '''Returns the symbol names of the ring of ``h`` in order of appearance.'''
        if symbols is None:
            symbols = []
        for n in self.iter(h):
            if self.issymbol(n):
                if self.name(n) not in symbols:
                    symbols.append(self.name(n))
            elif self.isgroup(n):
                self.symbols(self.content(n), symbols)
        return symbols


    def copy_node(self, h):
        '''Returns a deep copy of the node ``h`` as a singleton ring.'''
        node = self._nodes[h]
        payload = node.payload
        if isinstance(payload, Group):
            payload = Group(self.copy(payload.head))
        return self.new(payload, node.negated)


    def copy(self, h):
        '''Returns the head of a deep copy of the ring of ``h``.'''
        head = None
        for n in self.iter(h):
            c = self.copy_node(n)
            if head is None:
                head = c
            else:
                self.insert_before(head, c)
        return head


class Formula(object):
    """
    A handle on one formula ring living in a ``NodeArena``.
    """

    def __init__(self, arena, head):
        self.arena = arena
        self.head = head


    def __iter__(self):
        return self.arena.iter(self.head)


    def __len__(self):
        return len(self.arena.nodes(self.head))


    def __str__(self):
        return self.arena.tostring(self.head)


    def __repr__(self):
        return '<Formula: %s>' % str(self)


    def __eq__(self, other):
        return isinstance(other, Formula) and str(self) == str(other)


    def __hash__(self):
        return hash(str(self))


    @property
    def issingleton(self):
        return self.arena.issingleton(self.head)


    @property
    def isliteral(self):
        return self.issingleton and self.arena.issymbol(self.head)


    def symbols(self):
        return self.arena.symbols(self.head)


    def copy(self):
        return Formula(self.arena, self.arena.copy(self.head))


    def negate(self):
        """
        Returns a negated copy of this formula: a single operand is toggled,
        anything larger is wrapped into a negated group.
        """
        head = self.arena.copy(self.head)
        if self.arena.issingleton(head):
            self.arena.toggle(head)
            return Formula(self.arena, head)
        return Formula(self.arena, self.arena.group(head, negated=True))
