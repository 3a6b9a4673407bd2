# Numeric evaluation of trees under variable bindings.

from .svalue import IncompatibleOperandsError
from .snumber import Number
from .stree import Op, IncompleteBindingError

_FUNCS = {
	Op.LN:    Number.ln,
	Op.EXP:   Number.exp,
	Op.ABS:   Number.abs,
	Op.SIN:   Number.sin,
	Op.COS:   Number.cos,
	Op.TAN:   Number.tan,
	Op.ASIN:  Number.asin,
	Op.ACOS:  Number.acos,
	Op.ATAN:  Number.atan,
	Op.SINH:  Number.sinh,
	Op.COSH:  Number.cosh,
	Op.TANH:  Number.tanh,
	Op.ASINH: Number.asinh,
	Op.ACOSH: Number.acosh,
	Op.ATANH: Number.atanh,
}

_BINOPS = {
	Op.ADD: Number.add,
	Op.SUB: Number.sub,
	Op.MUL: Number.mul,
	Op.DIV: Number.div,
	Op.POW: Number.pow,
	Op.EQU: Number.sub, # an equation evaluates to its residual left - right
}

def _eval (node, bindings):
	if node.is_num:
		return node.num

	if node.is_var:
		val = bindings.get (node.var)

		if val is None:
			raise IncompleteBindingError (node.var)

		return node.mult.mul (val.pow (Number (node.pow)))

	if node.op is Op.FAC:
		return _eval (node.left, bindings).factorial ()

	func = _FUNCS.get (node.op)

	if func:
		return func (_eval (node.right, bindings))

	return _BINOPS [node.op] (_eval (node.left, bindings), _eval (node.right, bindings))

def evaluate (node, bindings = None):
	"""Value of the tree with each variable replaced by its binding. Bindings
	map single letter names to anything Number.of () accepts, a variable
	missing from them raises IncompleteBindingError."""

	return _eval (node, {var: Number.of (val) for var, val in (bindings or {}).items ()})

def try_fold (node): # Number for a constant subtree whose evaluation succeeds, else None
	if not node.is_const:
		return None

	try:
		num = _eval (node, {})
	except (ArithmeticError, IncompatibleOperandsError, ValueError):
		return None

	return num if num.re.dbl () == num.re.dbl () and num.im.dbl () == num.im.dbl () else None # no nan
