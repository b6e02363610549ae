#!/usr/bin/env python3

import os
import tempfile
import unittest
import pyparsing as pp

import pldast
import pldparser

from pldast import Push, Pop, Swap, Combine, Duplicate, JumpIfNonzero

class TestPldParser(unittest.TestCase):
    def _test(self, input: str, expected: list[pldast.Operation]):
        self.assertEqual(pldparser.parse(input), expected)

    def test_op_symbol(self):
        for symbol in ['🥺', '💖', '👉👈', '💓', '✨', '🫂']:
            res, = pldparser.op_symbol.parse_string(symbol, parse_all=True)
            self.assertEqual(res, symbol)

    def test_argument_stops_at_whitespace(self):
        res, = pldparser.argument.parse_string('12 34')
        self.assertEqual(res, '12')
        with self.assertRaises(pp.ParseException):
            pldparser.argument.parse_string(' 12')

    def test_instruction(self):
        res, = pldparser.instruction.parse_string('💖12', parse_all=True)
        self.assertIsInstance(res, Pop)
        self.assertEqual(res.arg, 12)

    def test_every_operation(self):
        self._test('🥺1 💖2 👉👈3 💓4 ✨5 🫂6', [
            Push(1), Pop(2), Swap(3), Combine(4), Duplicate(5), JumpIfNonzero(6),
        ])

    def test_adjacent_operators(self):
        self._test('🥺3🥺4💓0', [Push(3), Push(4), Combine(0)])
        self._test('🥺0🥺5🫂2', [Push(0), Push(5), JumpIfNonzero(2)])

    def test_missing_argument(self):
        self._test('🥺', [Push(0)])
        self._test('🥺 3', [Push(0)])
        self._test('✨✨', [Duplicate(0), Duplicate(0)])

    def test_filler_counts_code_points(self):
        self._test('🥺👈👈👈', [Push(3)])
        self._test('🥺👉👉', [Push(2)])
        self._test('🥺1👈', [Push(2)])
        self._test('🥺-', [Push(0)])

    def test_stray_half_before_swap(self):
        self._test('🥺👈👉👈2', [Push(1), Swap(2)])
        self._test('🥺👉👉👈', [Push(1), Swap(0)])

    def test_minus_ends_argument(self):
        self._test('🥺-7 👉👈-1', [Push(0), Swap(0)])
        self._test('💖-2', [Pop(0)])
        self._test('🥺4-2', [Push(4)])

    def test_out_of_range_literal(self):
        self._test('🥺9223372036854775807', [Push(2**63 - 1)])
        self._test('🥺9223372036854775808', [Push(19)])

    def test_ignores_comments(self):
        program = '''
        please 🥺10 (ten) and 🥺 then 42
        uwu 💓0
        '''
        self._test(program, [Push(10), Push(0), Combine(0)])
        self._test('no operators here 123', [])
        self._test('', [])

    def test_locations(self):
        src = 'x\n  🥺5\n💖2'
        push, pop = pldparser.parse(src)
        self.assertEqual(push.where(), '2:3')
        self.assertEqual(pop.where(), '3:1')
        self.assertEqual(push.excerpt(), '  🥺5\n  ^')

    def test_parse_file(self):
        with tempfile.TemporaryDirectory() as tmpdirname:
            source = os.path.join(tmpdirname, 'prog.🥺')
            with open(source, 'w', encoding='utf-8') as f:
                f.write('🥺3🥺4💓0')
            self.assertEqual(pldparser.parse_file(source), [Push(3), Push(4), Combine(0)])

if __name__ == '__main__':
    unittest.main()
