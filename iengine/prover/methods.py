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

from .inference.truthtable import TruthTable
from .inference.chaining import ForwardChaining, BackwardChaining
from .inference.dpll import DPLLSolver, ResolutionSolver
from .errors import UnknownMethod


class Enum(object):
    """
    Registry of engine classes, addressable by class, class name, selector
    (case-insensitive) or description.
    """

    def __init__(self, items):
        self.id2name = dict([(clazz.__name__, name) for (clazz, _, name) in items])
        self.name2id = dict([(name, clazz.__name__) for (clazz, _, name) in items])
        self.id2clazz = dict([(clazz.__name__, clazz) for (clazz, _, _) in items])
        self.selector2id = dict([(sel, clazz.__name__) for (clazz, sel, _) in items])


    def __getattr__(self, id_):
        if id_ in self.__dict__.get('id2clazz', {}):
            return self.id2clazz[id_]
        raise AttributeError('Enum does not define %s' % id_)


    def clazz(self, key):
        return self.id2clazz[self.id(key)]


    def id(self, key):
        if isinstance(key, type):
            key = key.__name__
        if key in self.id2clazz:
            return key
        if key in self.name2id:
            return self.name2id[key]
        if str(key).lower() in self.selector2id:
            return self.selector2id[str(key).lower()]
        raise UnknownMethod('The method named "%s" is not supported by this program!' % key)


    def name(self, key):
        return self.id2name[self.id(key)]


    def selectors(self):
        return list(self.selector2id.keys())


InferenceMethods = Enum(
    (
     (TruthTable, 'tt', 'Truth table'),
     (ForwardChaining, 'fc', 'Forward chaining'),
     (BackwardChaining, 'bc', 'Backward chaining'),
     (ResolutionSolver, 'rs', 'Resolution (DPLL refutation)'),
     (DPLLSolver, 'dpll', 'DPLL satisfiability'),
    ))
