#!/usr/bin/env python3

import pyparsing as pp
from pldast import *

pp.ParserElement.enable_packrat()

INT64_MAX = 2**63 - 1

def parse_argument(text: str) -> int:
    # non-numeric or out of range text counts its own code points
    try:
        value = int(text, 10)
    except ValueError:
        return len(text)
    if value > INT64_MAX:
        return len(text)
    return value

def operation_ctor(src: str, loc: int, toks: pp.ParseResults) -> Operation:
    symbol, text = toks
    assert isinstance(symbol, str)
    assert isinstance(text, str)
    return operations[symbol](parse_argument(text), src, loc)

op_symbol = pp.one_of(list(operations))
op_symbol.set_name('operator')

# digits, plus stray halves of 👉👈 that do not start a full swap symbol
argument = pp.Regex('(?:[0-9]|👉(?!👈)|👈)+').leave_whitespace()
argument.set_name('argument')

instruction = op_symbol + pp.Opt(argument, '').leave_whitespace()
instruction.set_parse_action(operation_ctor)
instruction.set_name('instruction')

def parse(source: str) -> list[Operation]:
    return [toks[0] for toks, _, _ in instruction.scan_string(source)]

def parse_file(filename: str) -> list[Operation]:
    with open(filename, encoding='utf-8') as f:
        return parse(f.read())
