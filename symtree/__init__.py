# Symbolic algebra on single letter variables: exact and complex numbers, term combining parser, simplification and differentiation.

from .svalue import Value, Rational, Float, SymConst, DivideByZeroError, IncompatibleOperandsError, set_tolerance
from .snumber import Number, ZERO, ONE, I, PI, E, PHI
from .stree import Op, Node, VariableNotAllowedError, IncompleteBindingError, ParseError, num_leaf, var_leaf, op_node
from .sparser import Parser, parse, set_exact, set_peephole
from .ssimp import combine, simplify, simplify_atomic, set_search_depth
from .seval import evaluate, try_fold
from .sdiff import differentiate
from .sym import tree2nat, tree2spt, spt2tree, to_display_string, set_spaces
from .sfunc import Function
from .cli import _VERSION as __version__
