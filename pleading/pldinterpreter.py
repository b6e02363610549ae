#!/usr/bin/env python3

import logging

from typing import Callable, Optional

import pldparser

from pldast import *
from pldunstack import Unstack

logger = logging.getLogger(__name__)

HALF_N = 2**63
N = HALF_N * 2
INT64_MIN = -HALF_N

def wrap(value: int) -> int:
    return (value + HALF_N) % N - HALF_N

def trunc_div(x: int, d: int) -> int:
    q = abs(x) // abs(d)
    return wrap(q if (x < 0) == (d < 0) else -q)

class Vm:
    def __init__(self, prog: list[Operation]):
        self.prog = prog

    def run(self, limit: Optional[int] = None) -> list[int]:
        prog = self.prog
        unstack = Unstack()
        ip = 0
        steps = 0
        length = len(prog)
        def require(n: int, what: str):
            if n < 0:
                raise MalformedArgument(f'negative {what} {n}')
        def require_len(n: int):
            if len(unstack) < n:
                raise Underflow(f'unstack too small (expected at least {n}, had {len(unstack)})')
        def push():
            unstack.push(wrap(op.arg))
        def pop():
            if unstack.is_empty():
                raise EmptyUnstack('empty unstack')
            if op.arg == 0:
                raise DivisionByZero('division by zero')
            value = unstack.pop()
            if value == INT64_MIN and op.arg == -1:
                raise IntegerOverflow('attempt to divide with overflow')
            unstack.push(trunc_div(value, op.arg))
        def swap():
            require(op.arg, 'depth')
            require_len(op.arg)
            unstack.swap_with_bottom(op.arg)
        def combine():
            require(op.arg, 'discard count')
            require_len(op.arg + 2)
            value = unstack.pop() * unstack.pop()
            for _ in range(op.arg):
                unstack.pop()
            unstack.push(wrap(value))
        def duplicate():
            require(op.arg, 'count')
            require_len(op.arg)
            unstack.duplicate_near_bottom(op.arg)
        def jump_if_nonzero():
            nonlocal ip
            require(op.arg, 'distance')
            if unstack.is_empty():
                raise EmptyUnstack('empty unstack')
            if unstack.pop() == 0:
                return
            if op.arg == 0:
                raise CounterOutOfRange('jump distance 0 cannot move backwards')
            target = ip - (op.arg - 1)
            if target < 0:
                raise CounterOutOfRange(f'jump target {target} is before the first instruction')
            ip = target
        code: dict[type[Operation], Callable[[], None]] = {
            Push: push,
            Pop: pop,
            Swap: swap,
            Combine: combine,
            Duplicate: duplicate,
            JumpIfNonzero: jump_if_nonzero,
        }
        while ip < length:
            op = prog[ip]
            if limit is not None and steps >= limit:
                raise StepLimitExceeded(f'{op.symbol}: step limit of {limit} exceeded at {ip}', ip, op)
            logger.debug('%04x %s unstack=%r', ip, op, unstack)
            try:
                code[type(op)]()
            except ExecutionError as e:
                e.args = (f'{op.symbol}: {e.args[0]} at {ip}',)
                e.index = ip
                e.op = op
                raise
            ip += 1
            steps += 1
        out = unstack.drain()
        logger.info('output: %s', out)
        return out

def execute(source: str, limit: Optional[int] = None) -> list[int]:
    return Vm(pldparser.parse(source)).run(limit)
