#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# sgfparse.py (Smart Game Format grammar parser)
# Copyright © 2000-2021 David John Goodger (goodger@python.org)
#
# This library is free software; you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published by the
# Free Software Foundation; either version 2 of the License, or (at your
# option) any later version.
#
# This library is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU Lesser General Public License
# for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# (lgpl.txt) along with this library; if not, write to the Free Software
# Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA
# The license is currently available on the Internet at:
#     http://www.gnu.org/copyleft/lesser.html

"""
============================================
 Smart Game Format Grammar Parser: sgfparse
============================================

version 1.0

Description
===========

This module contains a recursive-descent parser for SGF, the Smart Game
Format. SGF is a text only, tree based file format designed to store game
records of board games for two players, most commonly for the game of Go.
(See `the official SGF specification <https://www.red-bean.com/sgf/>`_.)

Given a string containing a complete SGF data instance, `parse()` returns a
`Collection` of root `Node` objects, one per game tree in the data. Each
`Node` is a mapping of property IDs to lists of raw (still escaped) value
strings, and carries an ordered list of child nodes in `Node.children`. A
linear sequence of nodes ``;A[1];B[2]`` becomes a chain of single children;
variations ``(;C[3])(;D[4])`` become sibling children of the last node of the
sequence before them.

The grammar comes in two profiles:

* ``tolerant`` (the default, `Parser`): whitespace between tokens is skipped,
  property IDs may have any number of upper-case letters, and a property ID
  repeated within one node is an error (`DuplicatePropertiesError`). The
  result is a `Collection`.

* ``strict`` (`StrictParser`): no whitespace is allowed between tokens,
  property IDs have one or two letters, and a repeated property ID silently
  replaces the earlier values. The result is a plain `list`.

The parser checks SGF syntax only. It does not validate property values, and
it does not write SGF back out.

Typed access to property values (numbers, reals, points, text, composed
values) is provided by `Node` methods such as `Node.get_number()` and
`Node.get_text()`, backed by the text helpers `decode_text()`,
`decode_simple_text()`, `encode_text()` and `split_compose()`.

A command-line checker is provided by `CheckCLI` (``sgfcheck``).
"""


import sys
import warnings
import argparse
import datetime
import re
import textwrap
import collections


TEXT_ENCODING = 'UTF-8'
"""Encoding tried first when decoding SGF bytes."""

FALLBACK_ENCODING = 'latin-1'
"""Encoding used when SGF bytes are not valid UTF-8."""

DUPLICATED_PROPERTIES = 'duplicated properties'
"""Failure cause recorded when a node repeats a property ID."""


class Error(Exception):
    """Base class for sgfparse exceptions."""
    pass

# Parsing Exceptions

class ParseError(Error):

    """
    Base class for parsing exceptions, raised by `Parser.parse()`.

    Instance attributes:

    - offset : integer -- Index into the data of the furthest position the
      parser reached before failing.
    - line, column : integer -- 1-based location of `offset`.
    - expected : frozenset of string -- What the grammar would have accepted
      at `offset`.
    """

    cause = 'syntax error'

    def __init__(self, offset, line, column, expected):
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = frozenset(expected)
        super().__init__(str(self))

    def __str__(self):
        expected = sorted(self.expected)
        if not expected:
            description = 'EOF'
        elif len(expected) == 1:
            description = f'`{expected[0]}`'
        else:
            description = 'one of ' + ', '.join(
                f'`{item}`' for item in expected)
        return f'error at {self.line}:{self.column}: expected {description}'

class SGFSyntaxError(ParseError):
    """Raised when the data does not match the SGF grammar."""
    pass

class DuplicatePropertiesError(ParseError):

    """
    Raised by the tolerant profile when a node repeats a property ID,
    e.g. ``;A[1]A[2]``.
    """

    cause = DUPLICATED_PROPERTIES

    def __str__(self):
        return f'error at {self.line}:{self.column}: {self.cause}'

# Configuration Exceptions

class ProfileError(Error):
    """Raised by `get_parser_class()` for an unknown profile name."""
    pass

# Miscellaneous Exceptions

class PropertyError(Error):
    """Raised by `Node` setters."""
    pass


_property_id_pattern = re.compile(r'[A-Z]+\Z')

_number_pattern = re.compile(r'[+-]?[0-9]+')
"""SGF Number: optional sign, ASCII digits."""

_text_escape_pattern = re.compile(r'\\(\r\n|\n\r|\n|\r|.)', re.DOTALL)

_line_break_pattern = re.compile(r'\r\n|\n\r|\n|\r')

_compose_pattern = re.compile(
    r'( (?: [^\\:] | \\. )* ) :', re.VERBOSE | re.DOTALL)

chars_to_escape = ['\\', ']', ':']
"""List of characters that `encode_text()` backslash-escapes."""

_chars_to_escape_pattern = re.compile(
    '(' + '|'.join(re.escape(char) for char in chars_to_escape) + ')')


def decode_text(text):
    """
    Convert a raw Text property value to the string it represents.

    A backslash followed by a line break (LF, CR, LFCR or CRLF) disappears
    along with the line break (a "soft" line break). Any other backslash
    disappears, and the character following it is kept as is.
    """
    def unescape(match):
        escaped = match.group(1)
        if _line_break_pattern.fullmatch(escaped):
            return ''
        return escaped
    return _text_escape_pattern.sub(unescape, text)


def decode_simple_text(text):
    """
    Convert a raw SimpleText property value: like `decode_text()`, but
    remaining line breaks become single spaces.
    """
    return _line_break_pattern.sub(' ', decode_text(text))


def encode_text(text):
    """Add backslash-escapes to property value characters that need them."""
    return ''.join(
        # escapable characters are at all odd indexes:
        ('\\' if index % 2 else '') + part
        for (index, part) in enumerate(_chars_to_escape_pattern.split(text)))


def split_compose(value):
    """
    Split a raw Compose value at its first unescaped ":".

    Return a pair of strings, or ``(value, None)`` if there is no
    delimiter. Backslash escapes are left in place in both parts.
    """
    match = _compose_pattern.match(value)
    if not match:
        return value, None
    return match.group(1), value[match.end():]


def to_number(value):
    """
    Return the integer of a raw SGF Number value, or `None` if `value` is
    not one (signs allowed; no spaces, separators or non-ASCII digits).
    """
    if value is None or not _number_pattern.fullmatch(value):
        return None
    return int(value)


def decode(data):
    """
    Return SGF `data` as a string. Bytes are decoded as UTF-8 (a leading
    byte order mark is dropped); if that fails, a warning is issued and
    latin-1 is used instead.
    """
    if isinstance(data, str):
        return data
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError as error:
        warnings.warn(
            f'SGF data is not valid {TEXT_ENCODING} ({error}); '
            f'decoding as {FALLBACK_ENCODING}.')
        return data.decode(FALLBACK_ENCODING)


class Node(dict):

    """
    An SGF node (one move or play, or initial setup): a mapping of property
    IDs to lists of raw value strings, plus an ordered list of child nodes.

    Example: Let ``node`` be the root `Node` parsed from
    '(;B[aa]BL[250]AB[ab][ac];W[bb])':

    * node['B']  =>  ['aa']
    * node['AB'] =>  ['ab', 'ac']
    * node.children  =>  [Node(W=['bb'])]
    """

    def __init__(self, properties=None):
        """
        Arguments:

        - properties : mapping of property ID to list of values, or `None`.
        """
        super().__init__(properties or {})
        self.children = []
        """Child `Node` objects, in SGF order; the first is the main line."""

    def __eq__(self, other):
        """
        Nodes are equal if their properties are equal and their subtrees
        have the same shape and properties. Other mappings are compared by
        properties only.
        """
        if not isinstance(other, Node):
            return super().__eq__(other)
        # Pairs of nodes still to compare; trees may be very deep.
        pairs = [(self, other)]
        while pairs:
            (mine, theirs) = pairs.pop()
            if (  not dict.__eq__(mine, theirs)
                  or len(mine.children) != len(theirs.children)):
                return False
            pairs.extend(zip(mine.children, theirs.children))
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __str__(self):
        """
        Return a readable listing of the properties, one per line. Values of
        multi-valued properties are shown bracketed.
        """
        lines = ['{']
        for (property_id, values) in self.items():
            if len(values) == 1:
                text = values[0]
            else:
                text = ''.join(f'[{value}]' for value in values)
            lines.append(f'    {property_id}: {text}')
        lines.append('}')
        return '\n'.join(lines)

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join('{}={!r}'.format(name, value)
                      for name, value in self.items()))

    def leaf(self):
        """
        Return the node reached by following the last child until there are
        no more children (`self` if there are none).
        """
        node = self
        while node.children:
            node = node.children[-1]
        return node

    def walk(self):
        """Iterate over `self` and all its descendants, in SGF order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _first_value(self, property_id):
        values = self.get(property_id)
        if not values:
            return None
        return values[0]

    def _composed_values(self, property_id):
        value = self._first_value(property_id)
        if value is None:
            return None
        first, second = split_compose(value)
        if second is None:
            return None
        return first, second

    # Getters. All return `None` if the property is missing or its value
    # can't be interpreted.

    def get_point(self, property_id):
        return self._first_value(property_id)

    def get_points(self, property_id):
        values = self.get(property_id)
        if values is None:
            return None
        return list(values)

    def get_number(self, property_id):
        return to_number(self._first_value(property_id))

    def get_real(self, property_id):
        value = self._first_value(property_id)
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    def get_color(self, property_id):
        """Return the first character of the value ('B' or 'W')."""
        value = self._first_value(property_id)
        return value[0] if value else None

    # Double values ('1' normal, '2' emphasized) are read the same way.
    get_double = get_color

    def get_text(self, property_id):
        value = self._first_value(property_id)
        if value is None:
            return None
        return decode_text(value)

    def get_simple_text(self, property_id):
        value = self._first_value(property_id)
        if value is None:
            return None
        return decode_simple_text(value)

    def get_point_point(self, property_id):
        return self._composed_values(property_id)

    def get_point_simple_text(self, property_id):
        values = self._composed_values(property_id)
        if values is None:
            return None
        point, text = values
        return point, decode_simple_text(text)

    def get_simple_text_simple_text(self, property_id):
        values = self._composed_values(property_id)
        if values is None:
            return None
        return tuple(decode_simple_text(value) for value in values)

    def get_number_number(self, property_id):
        values = self._composed_values(property_id)
        if values is None:
            return None
        numbers = tuple(to_number(value) for value in values)
        if None in numbers:
            return None
        return numbers

    def get_number_simple_text(self, property_id):
        values = self._composed_values(property_id)
        if values is None:
            return None
        number, text = values
        number = to_number(number)
        if number is None:
            return None
        return number, decode_simple_text(text)

    # Setters. Each replaces any existing values of the property.

    def set_property(self, property_id, values):
        """
        Store `values` (a list of raw value strings) under `property_id`.

        Raise `PropertyError` if `property_id` is not made of upper-case
        letters.
        """
        if not _property_id_pattern.match(property_id):
            raise PropertyError(
                f'Invalid SGF property ID: {property_id!r}')
        self[property_id] = list(values)

    def set_point(self, property_id, point):
        self.set_property(property_id, [point])

    def set_points(self, property_id, points):
        self.set_property(property_id, points)

    def set_number(self, property_id, number):
        self.set_property(property_id, [str(number)])

    def set_real(self, property_id, real):
        self.set_property(property_id, [str(real)])

    def set_color(self, property_id, color):
        self.set_property(property_id, [str(color)])

    set_double = set_color

    def set_text(self, property_id, text):
        self.set_property(property_id, [encode_text(text)])

    # SimpleText is escaped the same way as Text.
    set_simple_text = set_text

    def set_point_point(self, property_id, points):
        first, second = points
        self.set_property(property_id, [f'{first}:{second}'])

    def set_point_simple_text(self, property_id, value):
        point, text = value
        self.set_property(property_id, [f'{point}:{encode_text(text)}'])

    def set_simple_text_simple_text(self, property_id, texts):
        first, second = texts
        self.set_property(
            property_id, [f'{encode_text(first)}:{encode_text(second)}'])

    def set_number_number(self, property_id, numbers):
        first, second = numbers
        self.set_property(property_id, [f'{first}:{second}'])

    def set_number_simple_text(self, property_id, value):
        number, text = value
        self.set_property(property_id, [f'{number}:{encode_text(text)}'])


class Collection(list):

    """
    A `Collection` is a `list` of one or more root `Node` objects, one per
    game tree.
    """

    path = None

    def __repr__(self):
        """
        The canonical string representation of the `Collection`.
        """
        if not self:
            return f'{self.__class__.__name__}()'
        return '{}({}, ...)'.format(self.__class__.__name__, repr(self[0]))

    @classmethod
    def load(cls, path=None, data=None, profile='tolerant'):
        """
        Return a `Collection` loaded from a filesystem `path` (`None` or "-"
        reads from <stdin>) or from `data` (string or bytes), parsed with the
        named `profile`.
        """
        if data is None:
            if path == '-':
                path = None
            if path:
                with open(path, 'rb') as src:
                    data = src.read()
            else:
                # read bytestring from <stdin>:
                data = sys.stdin.buffer.read()
        collection = cls(parse(decode(data), profile))
        collection.path = path
        return collection

    def node_count(self):
        """Return the total number of nodes in all game trees."""
        return sum(1 for root in self for node in root.walk())


Match = collections.namedtuple('Match', 'end value')
"""Successful rule result: `end` is the index just past the match."""


class Parser:

    """
    Parser for SGF data, tolerant profile. `Parser.parse()` returns a
    `Collection` of root `Node` objects for the entire data.

    Each ``parse_*`` rule method takes a start index and returns a `Match`,
    or `None` on failure. Failures are recorded (see `mark_failure()`) so
    that the furthest position reached can be reported. Repetitions are
    greedy and never backtracked into.

    Subclasses configure the grammar with the class attributes below.
    """

    skip_whitespace = True
    """Allow whitespace around tokens."""

    reject_duplicate_properties = True
    """Fail on a property ID repeated within a node, instead of keeping the
    later values."""

    collection_class = Collection
    """Type of the value returned by `parse()`."""

    node_class = Node

    class patterns:
        """Regular expression text matching patterns."""
        whitespace = re.compile(r'[ \t\r\n\v]*')
        prop_ident = re.compile(r'[A-Z]+')
        # "\]" is tried before any other character, so a backslash directly
        # before "]" always escapes it:
        prop_value_text = re.compile(r'(?:\\\]|[^\]])*')

    def __init__(self, data):
        """
        Arguments:

        - data : string -- Complete SGF source text.
        """
        self.data = data
        """The SGF source text."""

        self.datalen = len(data)

        self.failure_offset = 0
        """Furthest index at which a rule failed."""

        self.expected = set()
        """Descriptions of what was expected at `self.failure_offset`."""

    def parse(self):
        """
        Parse the SGF data stored in `self.data`, and return a `Collection`
        (or an instance of `self.collection_class`).

        Raise `DuplicatePropertiesError` if a node repeats a property ID
        (tolerant profile only). Raise `SGFSyntaxError` for anything else
        that does not match the grammar, including empty data and data left
        over after the last game tree.
        """
        self.failure_offset = 0
        self.expected = set()
        match = self.parse_collection(0)
        if match is not None:
            if match.end == self.datalen:
                return match.value
            self.mark_failure(match.end, 'EOF')
        raise self.error()

    def error(self):
        """Return the exception describing the furthest failure."""
        offset = self.failure_offset
        line = self.data.count('\n', 0, offset) + 1
        column = offset - (self.data.rfind('\n', 0, offset) + 1) + 1
        if DUPLICATED_PROPERTIES in self.expected:
            error_class = DuplicatePropertiesError
        else:
            error_class = SGFSyntaxError
        return error_class(offset, line, column, self.expected)

    def mark_failure(self, index, expected):
        """
        Record that `expected` was not found at `index`, keeping only the
        expectations at the furthest index seen. Return `None` (failure).
        """
        if index > self.failure_offset:
            self.failure_offset = index
            self.expected.clear()
        if index == self.failure_offset:
            self.expected.add(expected)
        return None

    def skip(self, index):
        """Return the index past any whitespace at `index`, if allowed."""
        if self.skip_whitespace:
            return self.patterns.whitespace.match(self.data, index).end()
        return index

    def match_literal(self, index, literal):
        """Return the index past `literal` at `index`, or `None`."""
        if self.data.startswith(literal, index):
            return index + len(literal)
        return self.mark_failure(index, literal)

    def parse_collection(self, index):
        """Collection = GameTree+"""
        games = []
        while (match := self.parse_game_tree(index)) is not None:
            index = match.end
            games.append(match.value)
        if not games:
            return None
        return Match(index, self.collection_class(games))

    def parse_game_tree(self, index):
        """
        GameTree = "(" Sequence GameTree* ")"

        The nested game trees become children of the last node of the
        sequence. The match value is the first node of the sequence.

        Nested game trees are tracked on an explicit stack of open trees,
        each a (sequence root, branches) pair, so nesting depth is not
        limited by the interpreter's recursion limit. A failure anywhere
        inside the tree fails the whole tree.
        """
        open_trees = []
        while True:
            start = self.match_literal(self.skip(index), '(')
            if start is not None:
                match = self.parse_sequence(start)
                if match is None:
                    return None
                index, root = match
                open_trees.append((root, []))
                continue
            # no further branch here; the innermost open tree must end:
            if not open_trees:
                return None
            index = self.match_literal(index, ')')
            if index is None:
                return None
            root, branches = open_trees.pop()
            root.leaf().children.extend(branches)
            index = self.skip(index)
            if not open_trees:
                return Match(index, root)
            open_trees[-1][1].append(root)

    def parse_sequence(self, index):
        """
        Sequence = Node+

        The nodes are chained, each one the only child of the one before it.
        The match value is the first node.
        """
        nodes = []
        while (match := self.parse_node(index)) is not None:
            index = match.end
            nodes.append(match.value)
        if not nodes:
            return None
        nodes.reverse()
        head = nodes[0]
        for node in nodes[1:]:
            node.children.append(head)
            head = node
        return Match(self.skip(index), head)

    def parse_node(self, index):
        """
        Node = ";" Property*

        If `self.reject_duplicate_properties` is set, a repeated property ID
        fails the node with a `DUPLICATED_PROPERTIES` expectation, recorded
        just past the node.
        """
        index = self.match_literal(self.skip(index), ';')
        if index is None:
            return None
        properties = []
        while (match := self.parse_property(index)) is not None:
            index = match.end
            properties.append(match.value)
        index = self.skip(index)
        node = self.node_class()
        for (property_id, values) in properties:
            if property_id in node and self.reject_duplicate_properties:
                return self.mark_failure(index, DUPLICATED_PROPERTIES)
            node[property_id] = values
        return Match(index, node)

    def parse_property(self, index):
        """Property = PropIdent PropValue+"""
        match = self.parse_prop_ident(self.skip(index))
        if match is None:
            return None
        index, property_id = match
        values = []
        while (match := self.parse_prop_value(index)) is not None:
            index = match.end
            values.append(match.value)
        if not values:
            return None
        return Match(self.skip(index), (property_id, values))

    def parse_prop_ident(self, index):
        match = self.patterns.prop_ident.match(self.data, index)
        if not match:
            return self.mark_failure(index, '[A-Z]')
        return Match(match.end(), match.group())

    def parse_prop_value(self, index):
        """
        PropValue = "[" ( "\\]" / [^\\]] )* "]"

        The match value is the text between the brackets, escapes included.
        """
        index = self.match_literal(self.skip(index), '[')
        if index is None:
            return None
        text = self.patterns.prop_value_text.match(self.data, index)
        end = self.match_literal(text.end(), ']')
        if end is None:
            return None
        return Match(self.skip(end), text.group())


class StrictParser(Parser):

    """
    Parser for SGF data, strict profile: tokens must be adjacent, property
    IDs are one or two letters long, and a repeated property ID replaces the
    earlier values. `StrictParser.parse()` returns a plain `list` of root
    `Node` objects.
    """

    skip_whitespace = False
    reject_duplicate_properties = False
    collection_class = list

    class patterns(Parser.patterns):
        prop_ident = re.compile(r'[A-Z]{1,2}')


parser_classes = {
    'tolerant': Parser,
    'strict': StrictParser,
    }
"""Mapping of profile name to parser class."""


def get_parser_class(profile):
    """Return the parser class for `profile`; raise `ProfileError`."""
    try:
        return parser_classes[profile]
    except KeyError:
        raise ProfileError(
            f'Unknown SGF parser profile: {profile!r} (choose from '
            f'{", ".join(sorted(parser_classes))})') from None


def parse(text, profile='tolerant'):
    """
    Parse the complete SGF source `text` with the named `profile`. Return a
    `Collection` (tolerant) or `list` (strict) of root `Node` objects.
    """
    return get_parser_class(profile)(text).parse()


class CLI:

    """
    Abstract base class that supports command-line interface tools.
    Subclasses must define:

    * An ``execute`` method returning the exit status::

          def execute(self):
              # do everything here
              return 0

    * `argument_specs`, the CLI arguments & options specifications, used as
      the arguments to `argparse.add_argument`::

          argument_specs = (
              (# Argument name or option flags (a tuple):
               ('name',),
               # Keyword arguments (a dictionary):
               {'default': None,
                'metavar': 'NAME',
                'help': ('Name that name.')}),
              # ...
              )

    * A class docstring that will be used as the description for the CLI
      --help.
    """

    def __init__(self, settings=None, argv=None):
        """Instantiate to process the command-line arguments."""
        if settings is None:
            settings = self.process_command_line(argv)
        self.settings = settings

    def run(self):
        """Execute, and return the exit status."""
        try:
            return self.execute()
        except Exception:
            print(
                '\n{}'.format(
                    datetime.datetime.now().isoformat(
                        sep=' ', timespec='seconds')),
                file=sys.stderr)
            raise

    help_option_spec = (
        ('--help', '-h',),
        {'action': 'help', 'help': 'Show this help message.'})

    @classmethod
    def process_command_line(cls, argv=None):
        """
        Return `settings`, a namespace of options & arguments to their values.

        `argv` is a list of arguments; pass `None` (the default) to use the
        command-line arguments (``sys.argv[1:]``).
        """
        parser = argparse.ArgumentParser(
            description=textwrap.dedent(cls.__doc__),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            # Help option added manually (below) for consistency:
            add_help=False,)
        for names, params in cls.argument_specs:
            parser.add_argument(*names, **params)
        names, params = cls.help_option_spec
        parser.add_argument(*names, **params)
        if argv is None:
            argv = sys.argv[1:]
        settings = parser.parse_args(argv)
        return settings


class CheckCLI(CLI):

    # Command-Line Interface implementation.

    """
    Check that one or more SGF (Smart Game Format) files parse. For each
    file, one tab-delimited line is written to standard output:

        path    OK      games   nodes

    or, if the file could not be read or parsed:

        path    ERROR   message

    The exit status is 1 if any file failed, 0 otherwise.
    """

    def execute(self):
        failures = 0
        for path in self.settings.source_paths:
            try:
                collection = Collection.load(
                    path, profile=self.settings.profile)
            except (ParseError, OSError) as error:
                failures += 1
                print(f'{path}\tERROR\t{error}')
                continue
            if not self.settings.quiet:
                print(f'{path}\tOK\t{len(collection)}\t'
                      f'{collection.node_count()}')
        return 1 if failures else 0

    argument_specs = (
        (('source_paths',),
         {'type': str,
          'nargs': '+',
          'metavar': 'source_path',
          'help': ('Paths to SGF files to check. Use "-" to read from the '
                   'standard input.')}),
        (('--profile', '-p',),
         {'choices': sorted(parser_classes),
          'default': 'tolerant',
          'help': ('Grammar profile: "tolerant" skips whitespace and rejects '
                   'repeated properties (default); "strict" does neither.')}),
        (('--quiet', '-q',),
         {'action': 'store_true',
          'default': False,
          'help': 'Only report files that fail.'}),
        )


def main(argv=None):
    """Entry point of the ``sgfcheck`` command."""
    sys.exit(CheckCLI(argv=argv).run())


if __name__ == '__main__':
    main()
