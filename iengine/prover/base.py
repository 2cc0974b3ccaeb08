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
import re
import sys

from dnutils import logs, ifnone

from ..logic.common import NodeArena, Formula
from ..logic.grammar import Grammar
from ..logic.rephrase import Rephraser
from .constants import CLAUSE_SEPARATOR


logger = logs.getlogger(__name__)


def strip_whitespace(text):
    return re.sub(r'\s+', '', text)


def split_clauses(text):
    '''Splits TELL text into its non-empty clause strings, whitespace removed.'''
    return [c for c in strip_whitespace(text).split(CLAUSE_SEPARATOR) if c]


class KnowledgeBase(object):
    '''
    The ordered list of formulas told to the prover. All formulas of a
    knowledge base live in the same node arena.

    :param tell:    clause text, clauses separated by ``;``. Whitespace is
                    insignificant.
    :param arena:   the ``NodeArena`` to build the formula rings in.
    '''

    def __init__(self, tell=None, arena=None):
        self.arena = ifnone(arena, NodeArena())
        self.grammar = Grammar(self.arena)
        self.clauses = []
        if tell is not None:
            for text in split_clauses(tell):
                self.tell(text)
            logger.debug('knowledge base with %d clauses over %s' % (len(self.clauses), self.symbols))


    def parse(self, text):
        return self.grammar.parse_formula(strip_whitespace(text))


    def tell(self, formula):
        '''Adds a formula (text or ``Formula`` of this KB's arena) and returns it.'''
        if isinstance(formula, str):
            formula = self.parse(formula)
        elif formula.arena is not self.arena:
            raise ValueError('Formula %s lives in a foreign arena' % formula)
        self.clauses.append(formula)
        return formula


    @property
    def symbols(self):
        '''The unique symbol names of all clauses in order of first appearance.'''
        symbols = []
        for clause in self.clauses:
            self.arena.symbols(clause.head, symbols)
        return symbols


    def copy(self):
        kb = KnowledgeBase(arena=self.arena)
        kb.clauses = [c.copy() for c in self.clauses]
        return kb


    def rephrase(self, mode):
        '''Returns a copy of this KB with every clause rewritten in the given mode.'''
        kb = self.copy()
        rephraser = Rephraser(self.arena)
        kb.clauses = [Formula(self.arena, rephraser.rephrase(c.head, mode)) for c in kb.clauses]
        return kb


    def __iter__(self):
        return iter(self.clauses)


    def __len__(self):
        return len(self.clauses)


    def __str__(self):
        return CLAUSE_SEPARATOR.join(map(str, self.clauses))


    def write(self, stream=sys.stdout):
        for i, clause in enumerate(self.clauses):
            stream.write('%3d: %s\n' % (i, clause))
