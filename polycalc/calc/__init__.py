from .errors import CalcError, StackUnderflow, WrongPoly, WrongCommand, WrongArgument, NestingTooDeep
from .parser import PolyParser, parse_poly, parse_index, parse_coeff
from .stack import PolyStack
from .commands import Command, COMMANDS, find_command, parse_command, execute_line
from .driver import Calculator, read_lines, recursion_limit, run
