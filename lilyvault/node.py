# -*- coding: utf-8 -*-
#
# This file is part of `lilyvault`, a library to build LilyPond scores from notes
#
# Copyright © 2026 by the lilyvault authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
This module defines the :class:`Node` class and its four variants, that
together build a renderable tree of text fragments.

Every node implements :meth:`Node.render`, that returns the text of the node:

* :class:`Text` is a leaf that renders its text unmodified.
* :class:`Composite` renders all children, each followed by a newline.
* :class:`Selection` renders one randomly chosen child.
* :class:`Repeat` renders its single node :data:`REPEAT_COUNT` times.

A Composite (and thus a Selection) is based on a Python list; the children
are the list items. For example::

    >>> from lilyvault.node import *
    >>> c = Composite(Text("c4"), Repeat(Text("d8 ")))
    >>> c.dump()
    <Composite (2 children)>
     ├╴<Text 'c4'>
     ╰╴<Repeat x32 (1 child)>
        ╰╴<Text 'd8 '>

"""

import random
import reprlib


__all__ = ('REPEAT_COUNT', 'Node', 'Text', 'Composite', 'Selection', 'Repeat')


#: How many times a :class:`Repeat` renders its node.
REPEAT_COUNT = 32


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
}

DUMP_STYLE_DEFAULT = "round"


# process-local random source used by Selection nodes by default
_random = random.Random()


class Node:
    """Base class for all nodes.

    A node always evaluates to True, even a Composite without children.
    Subclasses must implement :meth:`render`, and :meth:`children` if they
    contain other nodes.

    """
    __slots__ = ()

    def __bool__(self):
        """Always True."""
        return True

    def render(self):
        """Return the text of this node. Must be implemented by subclasses."""
        raise NotImplementedError

    def children(self):
        """Return the sequence of child nodes; the default has none."""
        return ()

    def copy(self):
        """Return a copy of this node, including copies of child nodes."""
        raise NotImplementedError

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        """
        return type(self) is type(other) and \
            len(self.children()) == len(other.children()) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self.children(), other.children()))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def lines(node, prefix):
            children = node.children()
            for i, n in enumerate(children):
                last = i == len(children) - 1
                yield prefix + d[3 if last else 2] + repr(n)
                yield from lines(n, prefix + d[1 if last else 0])
        print(repr(self), file=file)
        for line in lines(self, ''):
            print(line, file=file)


class Text(Node):
    """A leaf node holding a piece of text, rendered unmodified.

    The text can be changed by setting the :attr:`text` attribute.

    """
    __slots__ = ('text',)

    def __init__(self, text):
        self.text = text

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, reprlib.repr(self.text))

    def copy(self):
        """Return a copy of this Text node."""
        return type(self)(self.text)

    def body_equals(self, other):
        """Compare the text."""
        return self.text == other.text

    def render(self):
        """Return the text."""
        return self.text


class Composite(Node, list):
    """An ordered list of nodes.

    Renders every child, each followed by a newline. Children compare by
    identity, so ``index()`` and ``remove()`` always find the very child
    object, even if the list contains equivalent nodes. The same node may
    be added more than once.

    """
    __slots__ = ()

    def __init__(self, *children):
        list.__init__(self, children)

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Composite.index and Composite.remove robust."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Composite.index and Composite.remove robust."""
        return self is not other

    def children(self):
        """Return ourselves, the list of children."""
        return self

    def copy(self):
        """Return a copy of this Composite, with copies of the children."""
        return type(self)(*(n.copy() for n in self))

    def render(self):
        """Return the concatenated text of all children, each on a line."""
        return ''.join(node.render() + '\n' for node in self)


class Selection(Composite):
    """A Composite that renders only one of its children, chosen at random.

    An empty Selection renders to the empty string. Every call to
    :meth:`render` draws anew.

    The ``random`` argument can be any object having a ``randrange(n)``
    method returning an integer in ``range(n)``; by default a process-local
    :class:`random.Random` instance is used. The optional ``title`` is the
    heading the selection was created for; it does not influence rendering.

    """
    __slots__ = ('title', '_random')

    def __init__(self, *children, title=None, random=None):
        super().__init__(*children)
        self.title = title
        self._random = random or _random

    def __repr__(self):
        r = super().__repr__()
        if self.title:
            r = r[:-1] + ' {}>'.format(reprlib.repr(self.title))
        return r

    def copy(self):
        """Return a copy, keeping the title and random source."""
        return type(self)(*(n.copy() for n in self), title=self.title, random=self._random)

    def body_equals(self, other):
        """Compare the title."""
        return self.title == other.title

    def render(self):
        """Return the text of one randomly chosen child, or the empty string."""
        if not len(self):
            return ''
        return self[self._random.randrange(len(self))].render()


class Repeat(Node):
    """Wraps exactly one node and renders it ``count`` times, without separator.

    The ``count`` defaults to :data:`REPEAT_COUNT`. The wrapped node is
    rendered anew every time, so a wrapped :class:`Selection` draws for every
    repetition.

    """
    __slots__ = ('_node', 'count')

    def __init__(self, node, count=REPEAT_COUNT):
        if not isinstance(node, Node):
            raise TypeError("Repeat needs a Node to wrap, got {}".format(repr(node)))
        self._node = node
        self.count = count

    def __repr__(self):
        return '<{} x{} (1 child)>'.format(type(self).__name__, self.count)

    @property
    def node(self):
        """The wrapped node."""
        return self._node

    def children(self):
        """Return a tuple with the wrapped node."""
        return (self._node,)

    def copy(self):
        """Return a copy, with a copy of the wrapped node."""
        return type(self)(self._node.copy(), self.count)

    def body_equals(self, other):
        """Compare the count."""
        return self.count == other.count

    def render(self):
        """Return the text of the wrapped node, rendered ``count`` times."""
        return ''.join(self._node.render() for _ in range(self.count))
