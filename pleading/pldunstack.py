#!/usr/bin/env python3

from typing import Iterator

from pldast import EmptyUnstack, MalformedArgument, Underflow

class Unstack:
    '''
    It's like a stack but you push to the bottom.

    Values live in a list with the bottom at the end, so depth `d` is
    index `-1 - d`. Nothing outside this class sees the list.
    '''

    def __init__(self):
        # oldest first
        self._values: list[int] = []

    def push(self, value: int):
        self._values.append(value)

    def pop(self) -> int:
        if not self._values:
            raise EmptyUnstack('empty unstack')
        return self._values.pop()

    def peek_bottom(self) -> int:
        if not self._values:
            raise EmptyUnstack('empty unstack')
        return self._values[-1]

    def is_empty(self) -> bool:
        return not self._values

    def swap_with_bottom(self, depth: int):
        '''Exchange the value `depth` away from the bottom with the bottom.'''
        if depth < 0:
            raise MalformedArgument(f'negative depth {depth}')
        if depth >= len(self._values):
            raise Underflow(f'unstack too small (expected more than {depth}, had {len(self._values)})')
        if depth == 0:
            return
        values = self._values
        values[-1], values[-1 - depth] = values[-1 - depth], values[-1]

    def duplicate_near_bottom(self, count: int):
        '''Duplicate each of the `count` values nearest the bottom in place.'''
        if count < 0:
            raise MalformedArgument(f'negative count {count}')
        if count > len(self._values):
            raise Underflow(f'unstack too small (expected at least {count}, had {len(self._values)})')
        if count == 0:
            return
        tail = self._values[-count:]
        del self._values[-count:]
        for value in tail:
            self._values.append(value)
            self._values.append(value)

    def drain(self) -> list[int]:
        out = []
        while self._values:
            out.append(self.pop())
        return out

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._values)

    def __repr__(self) -> str:
        if not self._values:
            return '[]'
        return f'[ {", ".join(map(str, self._values))} ]'
