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

from ..constants import YES, NO
from ..util import StopWatch, headline, elapsed_time_str


logger = logs.getlogger(__name__)


def verdict(success, justification=None):
    if not success:
        return NO
    if justification is None:
        return YES
    return '%s: %s' % (YES, justification)


class InferenceEngine(object):
    """
    Abstract super class for all entailment checkers.

    Subclasses implement ``_prove(kb, ask)``, which returns the verdict
    string: ``"YES: <justification>"``, ``"YES"`` or ``"NO"``.

    :param verbose:    print progress and timing information.
    """

    def __init__(self, **params):
        self._params = dict(params)
        self.watch = StopWatch()
        self.result = None


    @property
    def verbose(self):
        return self._params.get('verbose', False)


    @property
    def color(self):
        return self._params.get('color', False)


    def prove(self, kb, ask):
        """
        Decides whether the knowledge base ``kb`` entails ``ask`` and returns
        the verdict string.
        """
        self.watch.tag('inference', self.verbose)
        try:
            self.result = self._prove(kb, ask)
        finally:
            self.watch.finish('inference')
        logger.debug('%s: %s' % (self.__class__.__name__, self.result))
        return self.result


    def _prove(self, kb, ask):
        raise Exception('%s does not implement _prove()' % self.__class__.__name__)


    def write(self, stream=sys.stdout):
        stream.write('%s\n' % self.result)


    def write_elapsed_time(self, stream=sys.stdout):
        stream.write(headline('INFERENCE RUNTIME STATISTICS', self.color))
        stream.write('\n')
        for tag in sorted(self.watch.tags.values(), key=lambda t: t.starttime):
            stream.write('%s: %s\n' % (tag.label, elapsed_time_str(tag.elapsedtime)))
