# Convert between internal trees and native text or SymPy expressions.

import math

import sympy as sp

from .svalue import Rational, Float
from .snumber import I, PI, E, PHI
from .stree import Op, num_leaf, var_leaf
from .ssimp import combine

_SPACES = False # spaces around '*', '/' and '^' in native text

_FUNC2SPT = {
	Op.LN:    sp.log,
	Op.EXP:   sp.exp,
	Op.ABS:   sp.Abs,
	Op.SIN:   sp.sin,
	Op.COS:   sp.cos,
	Op.TAN:   sp.tan,
	Op.ASIN:  sp.asin,
	Op.ACOS:  sp.acos,
	Op.ATAN:  sp.atan,
	Op.SINH:  sp.sinh,
	Op.COSH:  sp.cosh,
	Op.TANH:  sp.tanh,
	Op.ASINH: sp.asinh,
	Op.ACOSH: sp.acosh,
	Op.ATANH: sp.atanh,
}

_SPT2FUNC = {f: op for op, f in _FUNC2SPT.items ()}

def _text_prec (s): # how tightly the text of a leaf binds if dropped into an expression
	if ' ' in s:
		return 1
	if s [:1] == '-' or '/' in s or '*' in s or (len (s) > 1 and any (c.isalpha () for c in s) and not s.isalpha ()):
		return 2
	if '^' in s or (len (s) > 1 and s.isalpha ()):
		return 3

	return 9

#...............................................................................................
class tree2nat: # tree -> native text
	def __new__ (cls, node):
		self = super ().__new__ (cls)

		return self._tree2nat (node)

	def _tree2nat (self, node):
		return self._tree2nat_funcs [node.op if not node.is_oper or not node.op.is_func else None] (self, node)

	def _prec (self, node, s):
		if node.is_leaf:
			return _text_prec (s)

		return 9 if node.op.is_func else node.op.prec

	def _wrap (self, node, s, paren):
		return f'({s})' if paren else s

	def _tree2nat_num (self, node):
		return str (node.num)

	def _tree2nat_var (self, node):
		pow = node.pow

		if pow == 1:
			core = node.var
		elif pow.is_int or isinstance (pow, Float):
			core = f'{node.var}^{pow}'
		else:
			core = f'{node.var}^({pow})'

		m = node.mult

		if m == 1:
			return core
		if m == -1:
			return f'-{core}'

		if m.is_real and isinstance (m.re, Rational):
			r = m.re.reduce ()

			if isinstance (r, Rational):
				num = '' if r.num == 1 else '-' if r.num == -1 else str (r.num)

				return f'{num}{core}' if r.den == 1 else f'{num}{core}/{r.den}'

		s = str (m)

		return f'{s}{core}' if _text_prec (s) == 9 or (s [:1] == '-' and _text_prec (s [1:]) == 9) else f'({s}){core}'

	def _tree2nat_func (self, node):
		arg = self._tree2nat (node.right)

		return f'e^({arg})' if node.op is Op.EXP else f'{node.op}({arg})'

	def _tree2nat_fac (self, node):
		s = self._tree2nat (node.left)

		return self._wrap (node.left, s, self._prec (node.left, s) < 9) + '!'

	def _tree2nat_binop (self, node):
		op, l, r = node.op, node.left, node.right
		ls, rs   = self._tree2nat (l), self._tree2nat (r)
		lp, rp   = self._prec (l, ls), self._prec (r, rs)

		if op is Op.MUL and l.is_num and l.num == -1:
			return '-' + self._wrap (r, rs, rp < 2 or rs [:1] == '-')

		lparen = lp < op.prec or (op is Op.POW and lp <= 3)
		rparen = rp < op.prec or (rp == op.prec and op in (Op.SUB, Op.DIV)) or (op is not Op.EQU and rs [:1] == '-')
		sep    = f' {op} ' if op.prec < 2 or _SPACES else str (op)

		return f'{self._wrap (l, ls, lparen)}{sep}{self._wrap (r, rs, rparen)}'

	_tree2nat_funcs = {
		'#':    _tree2nat_num,
		'@':    _tree2nat_var,
		None:   _tree2nat_func,
		Op.FAC: _tree2nat_fac,
		Op.EQU: _tree2nat_binop,
		Op.ADD: _tree2nat_binop,
		Op.SUB: _tree2nat_binop,
		Op.MUL: _tree2nat_binop,
		Op.DIV: _tree2nat_binop,
		Op.POW: _tree2nat_binop,
	}

#...............................................................................................
def _flt2spt (v): # float argument of a symbolic constant
	return sp.Integer (int (v)) if float (v).is_integer () else sp.Float (v)

def _base2spt (v):
	return sp.pi if v == math.pi else sp.E if v == math.e else sp.GoldenRatio if v == PHI.re.args [0] else _flt2spt (v)

def _value2spt (v):
	if isinstance (v, Rational):
		return sp.Rational (v.num, v.den)

	if isinstance (v, Float):
		return sp.Float (v.v) if math.isfinite (v.v) else sp.nan if v.v != v.v else sp.oo if v.v > 0 else -sp.oo

	if v.op == '^':
		core = _base2spt (v.args [0]) ** _flt2spt (v.args [1])
	elif v.op == 'ln':
		core = sp.log (_flt2spt (v.args [0]))
	else:
		core = sp.exp (_flt2spt (v.args [0]))

	return _value2spt (v.mult) * core

class tree2spt: # tree -> sympy expression
	def __new__ (cls, node):
		self = super ().__new__ (cls)

		return self._tree2spt (node)

	def _tree2spt (self, node):
		if node.is_num:
			return _value2spt (node.num.re) + _value2spt (node.num.im) * sp.I

		if node.is_var:
			return self._tree2spt (num_leaf (node.mult)) * sp.Symbol (node.var) ** _value2spt (node.pow)

		op = node.op

		if op.is_func:
			return _FUNC2SPT [op] (self._tree2spt (node.right))

		if op is Op.FAC:
			return sp.factorial (self._tree2spt (node.left))

		l, r = self._tree2spt (node.left), self._tree2spt (node.right)

		return \
				sp.Eq (l, r, evaluate = False) if op is Op.EQU else \
				l + r  if op is Op.ADD else \
				l - r  if op is Op.SUB else \
				l * r  if op is Op.MUL else \
				l / r  if op is Op.DIV else \
				l ** r

#...............................................................................................
class spt2tree: # sympy expression -> tree, rebuilt through combine () so the result is simplified
	def __new__ (cls, spt):
		self = super ().__new__ (cls)

		return self._spt2tree (spt)

	def _spt2tree (self, spt):
		for cls in spt.__class__.__mro__:
			func = spt2tree._spt2tree_funcs.get (cls)

			if func:
				return func (self, spt)

		func = _SPT2FUNC.get (spt.func) if isinstance (spt, sp.Function) else None

		if func:
			return combine (func, None, self._spt2tree (spt.args [0]))

		raise TypeError (f'can not convert {spt.__class__.__name__} {spt!r} to a tree')

	def _spt2tree_fold (self, op, spt):
		res = self._spt2tree (spt.args [0])

		for arg in spt.args [1:]:
			res = combine (op, res, self._spt2tree (arg))

		return res

	def _spt2tree_Symbol (self, spt):
		if len (spt.name) != 1:
			raise TypeError (f'variable names are single letters, not {spt.name!r}')

		return var_leaf (spt.name)

	_spt2tree_funcs = {
		sp.Rational: lambda self, spt: num_leaf (Rational.make (spt.p, spt.q)),
		sp.Float: lambda self, spt: num_leaf (Float (float (spt))),
		sp.core.numbers.Infinity: lambda self, spt: num_leaf (math.inf),
		sp.core.numbers.NegativeInfinity: lambda self, spt: num_leaf (-math.inf),
		sp.core.numbers.NaN: lambda self, spt: num_leaf (math.nan),
		sp.core.numbers.ImaginaryUnit: lambda self, spt: num_leaf (I),
		sp.core.numbers.Pi: lambda self, spt: num_leaf (PI),
		sp.core.numbers.Exp1: lambda self, spt: num_leaf (E),
		sp.core.numbers.GoldenRatio: lambda self, spt: num_leaf (PHI),
		sp.Symbol: _spt2tree_Symbol,

		sp.Add: lambda self, spt: self._spt2tree_fold (Op.ADD, spt),
		sp.Mul: lambda self, spt: self._spt2tree_fold (Op.MUL, spt),
		sp.Pow: lambda self, spt: combine (Op.POW, self._spt2tree (spt.base), self._spt2tree (spt.exp)),
		sp.Eq: lambda self, spt: combine (Op.EQU, self._spt2tree (spt.lhs), self._spt2tree (spt.rhs)),
		sp.factorial: lambda self, spt: combine (Op.FAC, self._spt2tree (spt.args [0]), None),
	}

#...............................................................................................
def to_display_string (node):
	return tree2nat (node)

def set_spaces (state):
	global _SPACES
	_SPACES = state
