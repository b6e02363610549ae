#!/usr/bin/env python3

import pldast
import pldinterpreter
import pldparser

import logging
import optparse
import sys

from typing import NamedTuple, Optional

Config = NamedTuple('Config', [
    ('filename', str),
    ('ascii', bool),
    ('dis', bool),
    ('trace', bool),
    ('limit', Optional[int]),
])

def parse_args(argv: list[str]) -> tuple[optparse.Values, list[str]]:
    usage = 'usage: %prog [options] filename'
    p = optparse.OptionParser(usage=usage,
                              description='see 🥺 https://esolangs.org/wiki/%F0%9F%A5%BA for documentation')
    p.add_option('-a', '--ascii',
                 action='store_true',
                 default=False,
                 help='display output as ascii'
                 )
    p.add_option('--dis',
                 action='store_true',
                 default=False,
                 help='print the tokenized program instead of running it'
                 )
    p.add_option('--trace',
                 action='store_true',
                 default=False,
                 help='log every executed instruction'
                 )
    p.add_option('--limit',
                 metavar='N',
                 action='store',
                 type='int',
                 help='abort after N executed instructions'
                 )
    return p.parse_args(argv)

def render(output: list[int], ascii: bool) -> str:
    if ascii:
        return ''.join(chr(value & 0xff) for value in output)
    return repr(output)

def run(config: Config) -> Optional[int]:
    prog = pldparser.parse_file(config.filename)
    vm = pldinterpreter.Vm(prog)
    try:
        output = vm.run(config.limit)
    except pldast.ExecutionError as e:
        print(f'{config.filename}:{e.describe()}', file=sys.stderr)
        return 1
    print(render(output, config.ascii))

def dis(config: Config) -> Optional[int]:
    prog = pldparser.parse_file(config.filename)
    for i, op in enumerate(prog):
        print(f'{i:04x} {op.where()} {op.symbol} {op.arg}')

def main(argv: list[str]) -> Optional[int]:
    options, args = parse_args(argv)
    try:
        filename = args[1]
    except IndexError:
        print('error: no file provided', file=sys.stderr)
        return 1
    config = Config(filename, options.ascii, options.dis, options.trace, options.limit)
    if config.trace:
        logging.basicConfig(format='%(message)s', level=logging.DEBUG)
    try:
        if config.dis:
            return dis(config)
        return run(config)
    except OSError as os_err:
        print(f'error: {os_err.filename}: {os_err.strerror}', file=sys.stderr)
        return 1
    except UnicodeDecodeError as ue:
        print(f'error: {filename}: {ue.reason}', file=sys.stderr)
        return 1

def cli():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    status = main(sys.argv)
    sys.exit(status)
