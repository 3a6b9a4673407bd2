# Expression tree, tuple based, and the operator table.
#
# ('#', num)                 - number leaf, num is a Number
# ('@', 'x', mult, pow)      - variable monomial leaf mult * x ^ pow, mult is a Number and pow a Value
# (op, left, right)          - operator node, op is an Op, absent child is None:
#                              binary ops and '=' have both, '!' only left, named functions only right

from types import MappingProxyType

from .svalue import Value
from .snumber import Number, ZERO, ONE

class VariableNotAllowedError (NameError):
	def __init__ (self, name):
		NameError.__init__ (self, f'The variable "{name}" is not allowed to be in the tree')

		self.name = name

class IncompleteBindingError (NameError):
	def __init__ (self, name):
		NameError.__init__ (self, f'no value given for the variable "{name}"')

		self.name = name

class ParseError (SyntaxError): pass

#...............................................................................................
class Op (str):
	__slots__ = ['name', 'prec', 'arity', 'inv']

	def __new__ (cls, sym, name, prec, arity):
		self       = str.__new__ (cls, sym)
		self.name  = name
		self.prec  = prec
		self.arity = arity
		self.inv   = None

		return self

	def __repr__ (self):
		return f'Op.{self.name}'

	is_func     = property (lambda self: self.prec == 5)
	is_additive = property (lambda self: self.prec == 1)
	is_multiple = property (lambda self: self.prec == 2)
	is_commute  = property (lambda self: self in {'+', '*', '='})

_OPS = (
	('(',     'OPR',   -1, 0),
	(')',     'CPR',   -1, 0),
	('=',     'EQU',   0,  2),
	('+',     'ADD',   1,  2),
	('-',     'SUB',   1,  2),
	('*',     'MUL',   2,  2),
	('/',     'DIV',   2,  2),
	('^',     'POW',   3,  2),
	('!',     'FAC',   4,  1),
	('ln',    'LN',    5,  1),
	('e^',    'EXP',   5,  1),
	('abs',   'ABS',   5,  1),
	('sin',   'SIN',   5,  1),
	('cos',   'COS',   5,  1),
	('tan',   'TAN',   5,  1),
	('asin',  'ASIN',  5,  1),
	('acos',  'ACOS',  5,  1),
	('atan',  'ATAN',  5,  1),
	('sinh',  'SINH',  5,  1),
	('cosh',  'COSH',  5,  1),
	('tanh',  'TANH',  5,  1),
	('asinh', 'ASINH', 5,  1),
	('acosh', 'ACOSH', 5,  1),
	('atanh', 'ATANH', 5,  1),
)

for _sym, _name, _prec, _arity in _OPS:
	setattr (Op, _name, Op (_sym, _name, _prec, _arity))

for _f, _g in (('LN', 'EXP'), ('SIN', 'ASIN'), ('COS', 'ACOS'), ('TAN', 'ATAN'), ('SINH', 'ASINH'), ('COSH', 'ACOSH'), ('TANH', 'ATANH')):
	getattr (Op, _f).inv, getattr (Op, _g).inv = getattr (Op, _g), getattr (Op, _f)

Op.BY_SYMBOL = MappingProxyType ({getattr (Op, n): getattr (Op, n) for _, n, _, _ in _OPS})
Op.FUNCS     = frozenset (op for op in Op.BY_SYMBOL if op.is_func)
Op.NAMES     = tuple (sorted ((op for op in Op.BY_SYMBOL if len (op) > 1), key = len, reverse = True)) # longest first for tokenizing

#...............................................................................................
class Node (tuple):
	op      = None
	is_num  = False
	is_var  = False
	is_oper = False

	def __new__ (cls, *args):
		cls  = Node_Num if args [0] == '#' else Node_Var if args [0] == '@' else Node_Op
		self = tuple.__new__ (cls, args)

		self._init (*args [1:])

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	is_leaf = property (lambda self: not self.is_oper)
	is_zero = property (lambda self: False)
	is_one  = property (lambda self: False)

class Node_Num (Node):
	op, is_num = '#', True

	def _init (self, num):
		self.num = num

	is_zero    = property (lambda self: self.num.is_zero)
	is_one     = property (lambda self: self.num == 1)

	_size      = lambda self: 1
	_is_const  = lambda self: True
	_vars      = lambda self: frozenset ()
	_sgn       = lambda self: self.num.sgn ()

	def neg (self):
		return Node ('#', self.num.neg ())

class Node_Var (Node):
	op, is_var = '@', True

	def _init (self, var, mult, pow):
		self.var  = var
		self.mult = mult
		self.pow  = pow

	is_zero    = property (lambda self: self.mult.is_zero)

	_size      = lambda self: 1
	_is_const  = lambda self: False
	_vars      = lambda self: frozenset ((self.var,))
	_sgn       = lambda self: self.mult.sgn ()

	def neg (self):
		return Node ('@', self.var, self.mult.neg (), self.pow)

	def compatible (self, other, mul = False): # same variable, and same power unless combining multiplicatively
		return other.is_var and other.var == self.var and (mul or other.pow == self.pow)

class Node_Op (Node):
	is_oper = True

	def _init (self, left, right):
		self.op    = self [0]
		self.left  = left
		self.right = right

	_size      = lambda self: 1 + sum (n.size for n in (self.left, self.right) if n is not None)
	_is_const  = lambda self: all (n.is_const for n in (self.left, self.right) if n is not None)
	_vars      = lambda self: frozenset ().union (*(n.vars for n in (self.left, self.right) if n is not None))
	_sgn       = lambda self: self.left.sgn if self.op.is_multiple or (self.op.is_additive and self.left is not None) else 1

#...............................................................................................
def num_leaf (num):
	return Node ('#', Number.of (num))

def var_leaf (var, mult = 1, pow = 1):
	return Node ('@', var, Number.of (mult), Value.of (pow))

def op_node (op, left = None, right = None):
	return Node (op, left, right)

Node.Zero   = num_leaf (ZERO)
Node.One    = num_leaf (ONE)
Node.NegOne = num_leaf (-1)
