"""Calculator command table.

A command line is `NAME` or `NAME ARG`.  COMMANDS is scanned in order and
the first name that is a prefix of the line wins, so DEG_BY is listed
before DEG.  Argument handling:

  NAME            -- any trailing character is WRONG COMMAND
  NAME ARG        -- name alone, or followed by \\t \\r \\v \\f: argument error
                     followed by anything but one space: WRONG COMMAND
                     malformed / out-of-range / trailing text: argument error

Stack effects (top of stack is p, the one below is q):

  ZERO       push 0                 IS_COEFF  print 1/0 for top
  CLONE      push copy of p         IS_ZERO   print 1/0 for top
  ADD        pop p, q; push p + q   IS_EQ     print 1/0 for p == q
  MUL        pop p, q; push p * q   DEG       print deg(p)
  SUB        pop p, q; push p - q   DEG_BY i  print deg_by(p, i)
  NEG        negate p in place      PRINT     print p
  AT x       pop p; push p(x, ...)  POP       discard p
  COMPOSE k  pop p, then q[k-1] .. q[0]; push compose(p, q)

Operands are popped only after the result has been computed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Tuple

from ..config import Config
from ..core.algebra import add, mul, neg_in_place, sub
from ..core.poly import Const, clone, format_poly
from ..core.queries import at_in_place, compose, deg, deg_by, is_eq
from .errors import WrongArgument, WrongCommand
from .parser import parse_coeff, parse_index
from .stack import PolyStack

logger = logging.getLogger(__name__)

CMD_ZERO = "ZERO"
CMD_IS_COEFF = "IS_COEFF"
CMD_IS_ZERO = "IS_ZERO"
CMD_CLONE = "CLONE"
CMD_ADD = "ADD"
CMD_MUL = "MUL"
CMD_NEG = "NEG"
CMD_SUB = "SUB"
CMD_IS_EQ = "IS_EQ"
CMD_DEG = "DEG"
CMD_DEG_BY = "DEG_BY"
CMD_AT = "AT"
CMD_PRINT = "PRINT"
CMD_POP = "POP"
CMD_COMPOSE = "COMPOSE"

# Characters that make an argument-taking command report a bad argument
# rather than a bad command.
_BAD_WHITESPACE = "\t\r\v\f"


@dataclass(frozen=True)
class Command:
    """One entry of the command table.

    Attributes:
        name:      Text that starts the command line.
        execute:   Called as execute(stack, arg, out); checks the stack depth.
        read_arg:  Argument parser (raises ValueError), or None.
        arg_error: Message for a missing or invalid argument.
    """

    name: str
    execute: Callable[[PolyStack, Optional[int], TextIO], None]
    read_arg: Optional[Callable[[str, Config], int]] = None
    arg_error: str = ""


def _print_flag(flag: bool, out: TextIO) -> None:
    print(1 if flag else 0, file=out)


def _zero(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.push(Const(0))


def _is_coeff(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    _print_flag(stack.peek().is_coeff(), out)


def _is_zero(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    _print_flag(stack.peek().is_zero(), out)


def _clone(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    stack.push(clone(stack.peek()))


def _binary(op):
    def execute(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
        stack.require(2)
        result = op(stack.get(1), stack.get(2))
        stack.pop()
        stack.pop()
        stack.push(result)
    return execute


def _neg(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    neg_in_place(stack.peek())


def _is_eq(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(2)
    _print_flag(is_eq(stack.get(1), stack.get(2)), out)


def _deg(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    print(deg(stack.peek()), file=out)


def _deg_by(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    print(deg_by(stack.peek(), arg), file=out)


def _at(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    result = at_in_place(stack.peek(), arg)
    stack.pop()
    stack.push(result)


def _print(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    print(format_poly(stack.peek()), file=out)


def _pop(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(1)
    stack.pop()


def _compose(stack: PolyStack, arg: Optional[int], out: TextIO) -> None:
    stack.require(arg + 1)
    subs = [stack.get(pos) for pos in range(arg + 1, 1, -1)]
    result = compose(stack.peek(), subs)
    for _ in range(arg + 1):
        stack.pop()
    stack.push(result)


COMMANDS: Tuple[Command, ...] = (
    Command(CMD_ZERO, _zero),
    Command(CMD_SUB, _binary(sub)),
    Command(CMD_PRINT, _print),
    Command(CMD_POP, _pop),
    Command(CMD_NEG, _neg),
    Command(CMD_MUL, _binary(mul)),
    Command(CMD_IS_ZERO, _is_zero),
    Command(CMD_IS_EQ, _is_eq),
    Command(CMD_IS_COEFF, _is_coeff),
    Command(CMD_DEG_BY, _deg_by, parse_index, "DEG BY WRONG VARIABLE"),
    Command(CMD_DEG, _deg),
    Command(CMD_COMPOSE, _compose, parse_index, "COMPOSE WRONG PARAMETER"),
    Command(CMD_CLONE, _clone),
    Command(CMD_AT, _at, parse_coeff, "AT WRONG VALUE"),
    Command(CMD_ADD, _binary(add)),
)


def find_command(line: str) -> Command:
    """Return the first command whose name starts the line."""
    for command in COMMANDS:
        if line.startswith(command.name):
            return command
    raise WrongCommand()


def parse_command(line: str, config: Config) -> Tuple[Command, Optional[int]]:
    """Split a command line into its table entry and parsed argument.

    Raises WrongCommand or WrongArgument following the rules in the module
    docstring.
    """
    command = find_command(line)
    rest = line[len(command.name):]
    if command.read_arg is None:
        if rest:
            raise WrongCommand()
        return command, None

    if not rest or rest[0] in _BAD_WHITESPACE:
        raise WrongArgument(command.arg_error)
    if rest[0] != " ":
        raise WrongCommand()
    try:
        arg = command.read_arg(rest[1:], config)
    except ValueError as e:
        logger.debug("%s argument rejected: %s", command.name, e)
        raise WrongArgument(command.arg_error) from e
    return command, arg


def execute_line(line: str, stack: PolyStack, out: TextIO, config: Config) -> None:
    """Parse and run one command line against the stack."""
    command, arg = parse_command(line, config)
    logger.debug("executing %s (arg=%s, depth=%d)", command.name, arg, len(stack))
    command.execute(stack, arg, out)
