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
import json
import os

from dnutils import logs


logger = logs.getlogger(__name__)


class IEngineConfig(object):
    """
    Settings of the query tool, stored as a JSON object.

    Nested settings can be addressed with slices, i.e. ``conf['tt':'strict']``
    reads the entry ``strict`` of the section ``tt``.
    """

    def __init__(self, filepath=None):
        self.config_file = filepath
        self.config = {}
        self._dirty = False
        if self.config_file is not None and os.path.exists(self.config_file):
            with open(self.config_file) as f:
                self.config = json.load(f)
            logger.debug('loaded %s config' % self.config_file)


    @property
    def dirty(self):
        return self._dirty


    def get(self, k, d=None):
        return self.config.get(k, d)


    def update(self, d):
        self.config.update(d)
        self._dirty = True


    def __getitem__(self, s):
        if type(s) is slice:
            section = self.config.get(s.start)
            if section is not None:
                return section.get(s.stop)
            return None
        return self.config.get(s)


    def __setitem__(self, s, v):
        if type(s) is slice:
            section = self.config.get(s.start)
            if section is None:
                section = {}
                self.config[s.start] = section
            section[s.stop] = v
        else:
            self.config[s] = v
        self._dirty = True


    def dump(self):
        if self.config_file is None:
            raise Exception('no filename specified')
        with open(self.config_file, 'w+') as cf:
            cf.write(json.dumps(self.config, indent=4))
        self._dirty = False


    def dumps(self):
        self._dirty = False
        return json.dumps(self.config, indent=4)
