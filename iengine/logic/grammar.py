# -*- coding: utf-8 -*-
# PROPOSITIONAL LOGIC -- PARSING AND GRAMMAR
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
from pyparsing import Literal, Regex, ZeroOrMore, StringEnd, one_of, ParseException
from dnutils import logs, ifnone

from .common import NodeArena, Formula, Group
from ..prover.constants import AND, OR, IMPLIES, IFF, NEGATION, BACKREF
from ..prover.errors import ParseError, MalformedNesting, UnsupportedConnective
from ..prover.util import balanced_parentheses


logger = logs.getlogger(__name__)

# binding strength, strongest first. Chains of one connective group to the
# left, so a=>b=>c reads (a=>b)=>c and a=>b<=>c reads (a=>b)<=>c.
PRECEDENCE = (AND, OR, IMPLIES, IFF)

CONNECTIVE_CHARS = '&|<=>'


class TreeBuilder(object):
    """
    Assembles the tokens of one parenthesis-free formula into a flat ring.
    """

    def __init__(self, grammar):
        self.grammar = grammar
        self.reset()


    def trigger(self, s, loc, toks, op):
        arena = self.grammar.arena
        if op == '~':
            if not self.expect_operand:
                raise ParseError('Negation at position %d follows an operand in "%s"' % (loc, s))
            self.negated = not self.negated
            return
        if op in ('symbol', 'ref'):
            if not self.expect_operand:
                raise ParseError('Operand "%s" at position %d follows another operand in "%s"' % (toks[0], loc, s))
            if op == 'symbol':
                node = arena.literal(toks[0], self.negated)
            else:
                idx = int(toks[0][len(BACKREF):])
                if idx >= len(self.refs):
                    raise ParseError('Unknown sub-formula reference "%s" in "%s"' % (toks[0], s))
                node = arena.group(self.refs[idx], self.negated)
            self.negated = False
        elif op == 'connective':
            if self.expect_operand:
                raise ParseError('Connective "%s" at position %d lacks a left operand in "%s"' % (toks[0], loc, s))
            node = arena.op(toks[0])
        if self.head is None:
            self.head = node
        else:
            arena.insert_before(self.head, node)
        self.expect_operand = op == 'connective'


    def reset(self, refs=None):
        self.head = None
        self.negated = False
        self.expect_operand = True
        self.refs = ifnone(refs, [])


    def getformula(self, s):
        if self.head is None:
            raise ParseError('Empty formula: "%s"' % s)
        if self.expect_operand:
            raise ParseError('Formula "%s" ends without an operand' % s)
        return self.head


class Grammar(object):
    """
    Parser for propositional formulas over the connectives ``~``, ``&``,
    ``||``, ``=>`` and ``<=>``.

    Parenthesized sub-formulas are parsed innermost first; each one is
    replaced in the text by a back-reference token (``@@<index>``) that
    points to its already parsed ring. What remains is a flat sequence of
    operands and connectives, which is assembled into a ring and then
    grouped by connective precedence (see ``PRECEDENCE``).
    """

    def __init__(self, arena=None):
        self.arena = ifnone(arena, NodeArena())
        negation = Literal(NEGATION)
        connective = one_of([IFF, IMPLIES, OR, AND])
        ref = Regex(r'%s\d+' % BACKREF)
        symbol = Regex(r'[^&|<=>~()@\s]+')
        token = ref | connective | negation | symbol
        self.formula = ZeroOrMore(token) + StringEnd()

        def neg_parse_action(a, b, c): tree.trigger(a, b, c, '~')
        def ref_parse_action(a, b, c): tree.trigger(a, b, c, 'ref')
        def symbol_parse_action(a, b, c): tree.trigger(a, b, c, 'symbol')
        def connective_parse_action(a, b, c): tree.trigger(a, b, c, 'connective')

        tree = TreeBuilder(self)
        negation.set_parse_action(neg_parse_action)
        ref.set_parse_action(ref_parse_action)
        symbol.set_parse_action(symbol_parse_action)
        connective.set_parse_action(connective_parse_action)
        self.tree = tree


    def parse_formula(self, s):
        '''Parses ``s`` and returns it as a ``Formula`` in this grammar's arena.'''
        return Formula(self.arena, self.parse(s))


    def parse(self, s):
        '''Parses ``s`` and returns the head handle of its ring.'''
        bad = balanced_parentheses(s)
        if bad is not None:
            raise MalformedNesting('Unbalanced parenthesis at position %d in "%s"' % (bad, s))
        refs = []
        text = s
        while True:
            close = text.find(')')
            if close < 0:
                break
            open_ = text.rfind('(', 0, close)
            inner = text[open_ + 1:close]
            if not inner.strip():
                raise MalformedNesting('Empty parentheses in "%s"' % s)
            refs.append(self._assemble(inner, refs))
            text = '%s%s%d%s' % (text[:open_], BACKREF, len(refs) - 1, text[close + 1:])
        head = self._assemble(text, refs)
        logger.debug('parsed "%s" as %s' % (s, self.arena.tostring(head)))
        return head


    def _assemble(self, text, refs):
        self.tree.reset(refs)
        try:
            self.formula.parse_string(text)
        except ParseException as e:
            if e.loc < len(text) and text[e.loc] in CONNECTIVE_CHARS:
                end = e.loc
                while end < len(text) and text[end] in CONNECTIVE_CHARS:
                    end += 1
                raise UnsupportedConnective('Unsupported connective "%s" at position %d in "%s"' % (text[e.loc:end], e.loc, text))
            raise ParseError('Cannot parse "%s" at position %d' % (text, e.loc))
        return self.apply_precedence(self.tree.getformula(text))


    def apply_precedence(self, head):
        """
        Groups the connectives of the ring ``head`` by binding strength until
        the ring holds at most one connective. Nested rings are handled first.
        Returns the (possibly new) head of the ring.
        """
        arena = self.arena
        for n in arena.nodes(head):
            if arena.isgroup(n):
                arena.set_payload(n, Group(self.apply_precedence(arena.content(n))))
        for conn in PRECEDENCE:
            while True:
                ops = [n for n in arena.iter(head) if arena.isop(n)]
                if len(ops) < 2:
                    return head
                op = next((n for n in ops if arena.connective(n) == conn), None)
                if op is None:
                    break
                head = self._collapse(head, op)
        return head


    def _collapse(self, head, op):
        # the connective node turns into a group owning "left op right"
        arena = self.arena
        left = arena.isolate(arena.prev(op))
        right = arena.isolate(arena.next(op))
        inner = arena.ring(left, arena.op(arena.connective(op)), right)
        arena.set_payload(op, Group(inner))
        arena.set_negated(op, False)
        return op if left == head else head


def parse_formula(s, arena=None):
    return Grammar(arena).parse_formula(s)
