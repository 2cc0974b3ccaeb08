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

# connective spellings
NEGATION = '~'
AND = '&'
OR = '||'
IMPLIES = '=>'
IFF = '<=>'

# truth constants
TRUE = 'true'
FALSE = 'false'

CLAUSE_SEPARATOR = ';'

# prefix of the placeholders that stand in for parenthesized sub-formulas
BACKREF = '@@'

# rewriting modes
CNF = 'cnf'
HORN = 'horn'

# ask modes of the DPLL engine
SATISFIABLE = 'satisfiable'
UNSATISFIABLE = 'unsatisfiable'
RAW = 'raw'
ASK_MODES = (SATISFIABLE, UNSATISFIABLE, RAW)

YES = 'YES'
NO = 'NO'

# the truth table row index is a signed 64 bit integer
MAX_SYMBOLS = 62
# number of truth table rows evaluated at once
CHUNK_SIZE = 1 << 16
# tables larger than this are not printed
MAX_PRINT_ROWS = 256

HEADLINE_COLOR = (None, None, True)
