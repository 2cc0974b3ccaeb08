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
import time

import colored
from dnutils import ifnone

from .constants import HEADLINE_COLOR


def elapsed_time_str(elapsed):
    hours = int(elapsed / 3600)
    elapsed -= hours * 3600
    minutes = int(elapsed / 60)
    elapsed -= minutes * 60
    secs = int(elapsed)
    msecs = int((elapsed - secs) * 1000)
    return '{}:{:02d}:{:02d}.{:03d}'.format(hours, minutes, secs, msecs)


def balanced_parentheses(s):
    '''
    Returns the index of the first parenthesis that has no partner in ``s``,
    or ``None`` if all parentheses are balanced.
    '''
    opened = []
    for i, c in enumerate(s):
        if c == '(':
            opened.append(i)
        elif c == ')':
            if not opened:
                return i
            opened.pop()
    return opened[0] if opened else None


def colorize(message, format, color=False):
    '''
    Returns the given message in a colorized format
    string with ANSI escape codes for colorized console outputs:
    - message:   the message to be formatted.
    - format:    triple containing format information:
                 (bg-color, fg-color, bf-boolean) supported colors are
                 'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'
    - color:     boolean determining whether or not the colorization
                 is to be actually performed.
    '''
    if color is False: return message
    (bg, fg, bold) = format
    params = []
    if bold:
        params.append(colored.attr('bold'))
    if bg:
        params.append(colored.bg(bg))
    if fg:
        params.append(colored.fg(fg))
    return colored.stylize(message, ''.join(params))


def headline(s, color=False):
    line = ''.ljust(len(s), '=')
    return '{}\n{}\n{}'.format(colorize(line, HEADLINE_COLOR, color),
                               colorize(s, HEADLINE_COLOR, color),
                               colorize(line, HEADLINE_COLOR, color))


def truthstr(value):
    return 'T' if value else 'F'


class StopWatchTag:

    def __init__(self, label, starttime, stoptime=None):
        self.label = label
        self.starttime = starttime
        self.stoptime = stoptime

    @property
    def elapsedtime(self):
        return ifnone(self.stoptime, time.time()) - self.starttime

    @property
    def finished(self):
        return self.stoptime is not None


class StopWatch(object):
    '''
    Simple tagging of time spans.
    '''

    def __init__(self):
        self.tags = {}


    def tag(self, label, verbose=True):
        if verbose:
            print('{}...'.format(label))
        tag = self.tags.get(label)
        now = time.time()
        if tag is None:
            tag = StopWatchTag(label, now)
        else:
            tag.starttime = now
            tag.stoptime = None
        self.tags[label] = tag


    def finish(self, label=None):
        now = time.time()
        if label is None:
            for tag in self.tags.values():
                tag.stoptime = ifnone(tag.stoptime, now)
        else:
            tag = self.tags.get(label)
            if tag is None:
                raise KeyError('Unknown tag: {}'.format(label))
            tag.stoptime = now


    def print_steps(self, color=False):
        for tag in sorted(self.tags.values(), key=lambda ta: ta.starttime):
            if tag.finished:
                print('{} took {}'.format(colorize(tag.label, HEADLINE_COLOR, color), elapsed_time_str(tag.elapsedtime)))
            else:
                print('{} is running for {} now...'.format(colorize(tag.label, HEADLINE_COLOR, color), elapsed_time_str(tag.elapsedtime)))
