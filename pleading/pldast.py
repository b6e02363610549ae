#!/usr/bin/env python3

import dataclasses
import pyparsing

from abc import ABC
from dataclasses import dataclass, field
from operator import attrgetter
from typing import ClassVar, Optional

@dataclass(frozen=True, repr=False)
class Operation(ABC):
    symbol: ClassVar[str]

    arg: int
    src: str = field(default='', compare=False)
    loc: int = field(default=0, compare=False)

    def where(self) -> str:
        if not self.src:
            return '?:?'
        lineno = pyparsing.lineno(self.loc, self.src)
        col = pyparsing.col(self.loc, self.src)
        return f'{lineno}:{col}'

    def excerpt(self) -> str:
        if not self.src:
            return ''
        col = pyparsing.col(self.loc, self.src)
        line = pyparsing.line(self.loc, self.src)
        ptr = f'{" " * (col-1)}^'
        return f'{line}\n{ptr}'

    def __repr__(self) -> str:
        pairs = (((f.name, attrgetter(f.name)(self))
                  for f in dataclasses.fields(self)
                    if not f.name in {'src', 'loc'}
                  ))
        as_str = ', '.join(f'{k}={repr(v)}' for k, v in pairs)
        return f'{self.__class__.__name__}({as_str})'

    def __str__(self) -> str:
        return f'{self.symbol}{self.arg}'

class Push(Operation):
    symbol = '🥺'

class Pop(Operation):
    symbol = '💖'

class Swap(Operation):
    symbol = '👉👈'

class Combine(Operation):
    symbol = '💓'

class Duplicate(Operation):
    symbol = '✨'

class JumpIfNonzero(Operation):
    symbol = '🫂'

operations: dict[str, type[Operation]] = {
    op.symbol: op for op in (Push, Pop, Swap, Combine, Duplicate, JumpIfNonzero)
}

class PldError(RuntimeError):
    pass

class ExecutionError(PldError):
    def __init__(self, msg: str, index: Optional[int] = None, op: Optional[Operation] = None):
        super().__init__(msg)
        self.index = index
        self.op = op

    def describe(self) -> str:
        if self.op is None:
            return f'error: {self.args[0]}'
        msg = f'{self.op.where()}: error: {self.args[0]}'
        excerpt = self.op.excerpt()
        return f'{msg}\n{excerpt}' if excerpt else msg

class EmptyUnstack(ExecutionError):
    pass

class Underflow(ExecutionError):
    pass

class DivisionByZero(ExecutionError):
    pass

class CounterOutOfRange(ExecutionError):
    pass

class MalformedArgument(ExecutionError):
    pass

class IntegerOverflow(ExecutionError):
    pass

class StepLimitExceeded(ExecutionError):
    pass
