# -*- coding: utf-8 -*-
# PROPOSITIONAL LOGIC -- TRUTH FUNCTIONS
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

from ..prover.constants import TRUE, FALSE, MAX_SYMBOLS
from ..prover.errors import SymbolLimitExceeded


def verify(a, conn, b):
    """
    Applies the truth function of ``conn`` to ``a`` and ``b``. The operands
    may be booleans or boolean arrays of the same shape.
    """
    if conn.isconj:
        return np.logical_and(a, b)
    if conn.isdisj:
        return np.logical_or(a, b)
    if conn.isimpl:
        return np.logical_or(np.logical_not(a), b)
    return np.equal(a, b)


def evaluate(arena, head, lookup):
    """
    Evaluates the ring ``head`` by folding its operands from left to right,
    each connective combining the value so far with the next operand.
    Groups are evaluated before they are combined. ``lookup`` maps a symbol
    name to its value (a boolean or a column of a truth table).
    """
    value = None
    conn = None
    for n in arena.iter(head):
        if arena.isop(n):
            conn = arena.connective(n)
            continue
        if arena.isgroup(n):
            v = evaluate(arena, arena.content(n), lookup)
        else:
            name = arena.name(n)
            if name == TRUE:
                v = np.True_
            elif name == FALSE:
                v = np.False_
            else:
                v = lookup(name)
        if arena.negated(n):
            v = np.logical_not(v)
        value = v if value is None else verify(value, conn, v)
    return value


def propositions(symbols):
    '''Drops the truth constants from a list of symbol names.'''
    return [s for s in symbols if s not in (TRUE, FALSE)]


def truth_rows(n, start, stop):
    """
    Returns rows ``start`` to ``stop`` of the truth table over ``n``
    symbols as a boolean matrix. Row 0 assigns true to every symbol and the
    symbol in column ``i`` flips its value every ``2^(n-1-i)`` rows.
    """
    if n > MAX_SYMBOLS:
        raise SymbolLimitExceeded('Cannot enumerate %d symbols, at most %d are supported' % (n, MAX_SYMBOLS))
    rows = np.arange(start, stop, dtype=np.int64)
    shifts = np.arange(n - 1, -1, -1, dtype=np.int64)
    return ((rows[:, None] >> shifts) & 1) == 0
