#!/usr/bin/python
# -*- coding: utf-8 -*-

# Inference Engine Query Tool
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
import argparse
import sys

from dnutils import logs
from tabulate import tabulate

from .prover.base import KnowledgeBase
from .prover.constants import MAX_SYMBOLS
from .prover.errors import ProverError, InputFormatError
from .prover.methods import InferenceMethods
from .prover.util import headline, StopWatch
from .utils.config import IEngineConfig


logger = logs.getlogger(__name__)

QUERY_SETTINGS = ['tell', 'ask', 'method', 'debug']
FORMAT_EXAMPLE = 'TELL\na&b;b&c;c||d;\nASK\nd'


class IEngineQuery(object):

    def __init__(self, config=None, verbose=None, **params):
        '''
        Class for answering a query against a propositional knowledge base
        :param config:  an ``IEngineConfig`` or a dict of settings
        :param verbose: boolean value whether verbosity logs will be
                        printed or not
        :param params:  dictionary of additional settings
        '''
        self.configfile = None
        if config is None:
            self._config = {}
        elif isinstance(config, IEngineConfig):
            self._config = dict(config.config)
            self.configfile = config
        else:
            self._config = dict(config)
        if verbose is not None:
            self._verbose = verbose
        else:
            self._verbose = self._config.get('verbose', False)
        self._config.update(params)
        self.engine = None


    @property
    def tell(self):
        return self._config.get('tell')


    @property
    def ask(self):
        return self._config.get('ask')


    @property
    def method(self):
        return InferenceMethods.clazz(self._config.get('method', 'tt'))


    @property
    def strict(self):
        return self._config.get('strict', False)


    @property
    def max_symbols(self):
        return self._config.get('max_symbols', MAX_SYMBOLS)


    @property
    def color(self):
        return self._config.get('color', False)


    @property
    def verbose(self):
        return self._verbose


    def run(self):
        watch = StopWatch()
        watch.tag('inference', self.verbose)
        if self.tell is None:
            raise Exception('No knowledge base specified')
        if self.ask is None:
            raise Exception('No query specified')
        if isinstance(self.tell, KnowledgeBase):
            kb = self.tell
        else:
            kb = KnowledgeBase(self.tell)
        # expand the parameters
        params = dict(self._config)
        for s in QUERY_SETTINGS:
            if s in params: del params[s]
        params['verbose'] = self.verbose
        params['strict'] = self.strict
        params['max_symbols'] = self.max_symbols
        if self.verbose:
            print(tabulate(sorted(params.items(), key=lambda k_v: str(k_v[0])), headers=('Parameter:', 'Value:')))
        # set the debug level
        olddebug = logger.level
        logger.level = getattr(logs, str(self._config.get('debug', 'WARNING')).upper())
        try:
            self.engine = self.method(**params)
            if self.verbose:
                print()
                print(headline('KNOWLEDGE BASE', self.color))
                print()
                kb.write()
            result = self.engine.prove(kb, self.ask)
            if self.verbose:
                print()
                print(headline('INFERENCE RESULTS', self.color))
                print()
                self.engine.write()
                print()
                self.engine.write_elapsed_time()
        finally:
            # reset the debug level
            logger.level = olddebug
        if self.verbose:
            print()
            watch.finish()
            watch.print_steps(self.color)
        return result


def read_input(content):
    '''
    Splits the content of an input file into its TELL and ASK parts:

    TELL
    a&b;b&c;c||d;
    ASK
    d
    '''
    tell, ask = [], []
    found_tell = found_ask = False
    for line in content.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        if line.lower() == 'tell':
            found_tell = True
            continue
        if line.lower() == 'ask':
            found_ask = True
            continue
        if found_ask:
            ask.append(line)
        elif found_tell:
            tell.append(line)
    if not found_tell or not found_ask:
        raise InputFormatError("File content's format is not supported! Here is an example:\n%s" % FORMAT_EXAMPLE)
    return ''.join(tell), ''.join(ask)


def main(args=None):
    usage = 'Propositional Inference Engine'

    parser = argparse.ArgumentParser(description=usage)
    parser.add_argument('method', help='the inference method: %s' % ', '.join(InferenceMethods.selectors()))
    parser.add_argument('file', help='the file holding the TELL and ASK sections')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=None, help='print the knowledge base, the inference details and timings')
    parser.add_argument('-c', '--config', dest='config', help='JSON file with default settings')
    parser.add_argument('--strict', dest='strict', action='store_true', default=None, help='truth table: require every model of the KB to satisfy the query')
    parser.add_argument('--debug', dest='debug', help='the log level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--color', dest='color', action='store_true', default=None, help='colorize the verbose output')

    args = parser.parse_args(args)
    opts = dict((k, v) for k, v in vars(args).items() if k in ('strict', 'debug', 'color') and v is not None)

    conf = IEngineConfig(args.config) if args.config else None
    try:
        with open(args.file) as f:
            tell, ask = read_input(f.read())
        query = IEngineQuery(conf, verbose=args.verbose, tell=tell, ask=ask, method=args.method, **opts)
        print(query.run())
    except ProverError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
