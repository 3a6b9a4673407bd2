# Symbolic differentiation, every result is built through ssimp.combine () so it comes back simplified.

from .svalue import IncompatibleOperandsError
from .snumber import Number
from .stree import Op, Node, num_leaf
from .ssimp import combine, negate

_HALF = num_leaf (Number.of (1).div (2))
_TWO  = num_leaf (2)

def _add (a, b):
	return combine (Op.ADD, a, b)

def _sub (a, b):
	return combine (Op.SUB, a, b)

def _mul (*factors):
	res = factors [0]

	for f in factors [1:]:
		res = combine (Op.MUL, res, f)

	return res

def _div (a, b):
	return combine (Op.DIV, a, b)

def _pow (a, b):
	return combine (Op.POW, a, b)

def _func (op, arg):
	return combine (op, None, arg)

def _sq (u):
	return _pow (u, _TWO)

# d/dx f (u) = u' * _CHAIN [f] (u)

_CHAIN = {
	Op.LN:    lambda u: _div (Node.One, u),
	Op.EXP:   lambda u: _func (Op.EXP, u),
	Op.ABS:   lambda u: _div (_func (Op.ABS, u), u),
	Op.SIN:   lambda u: _func (Op.COS, u),
	Op.COS:   lambda u: negate (_func (Op.SIN, u)),
	Op.TAN:   lambda u: _div (Node.One, _sq (_func (Op.COS, u))),
	Op.ASIN:  lambda u: _div (Node.One, _pow (_sub (Node.One, _sq (u)), _HALF)),
	Op.ACOS:  lambda u: negate (_div (Node.One, _pow (_sub (Node.One, _sq (u)), _HALF))),
	Op.ATAN:  lambda u: _div (Node.One, _add (Node.One, _sq (u))),
	Op.SINH:  lambda u: _func (Op.COSH, u),
	Op.COSH:  lambda u: _func (Op.SINH, u),
	Op.TANH:  lambda u: _div (Node.One, _sq (_func (Op.COSH, u))),
	Op.ASINH: lambda u: _div (Node.One, _pow (_add (_sq (u), Node.One), _HALF)),
	Op.ACOSH: lambda u: _div (Node.One, _mul (_pow (_sub (u, Node.One), _HALF), _pow (_add (u, Node.One), _HALF))),
	Op.ATANH: lambda u: _div (Node.One, _sub (Node.One, _sq (u))),
}

def _diff_mul (u, v, var):
	du = differentiate (u, var)
	dv = differentiate (v, var)

	if du.is_zero:
		return _mul (u, dv)
	if dv.is_zero:
		return _mul (du, v)

	return _add (_mul (du, v), _mul (u, dv))

def _diff_pow (u, v, var):
	du = differentiate (u, var)
	dv = differentiate (v, var)

	if dv.is_zero: # n u^(n-1) u'
		return _mul (v, _pow (u, _sub (v, Node.One)), du)

	if du.is_zero: # u^v ln (u) v'
		return _mul (_pow (u, v), _func (Op.LN, u), dv)

	return _mul (_pow (u, v), _add (_mul (dv, _func (Op.LN, u)), _div (_mul (v, du), u)))

def differentiate (node, var):
	"""Derivative of the tree with respect to the single letter variable var."""

	if node.is_num:
		return Node.Zero

	if node.is_var:
		if node.var != var or node.pow.is_zero:
			return Node.Zero

		mult = node.mult.mul (Number (node.pow))
		pow  = node.pow.sub (1)

		return num_leaf (mult) if pow.is_zero else Node ('@', var, mult, pow)

	op = node.op

	if op is Op.ADD or op is Op.SUB or op is Op.EQU:
		return combine (op, differentiate (node.left, var), differentiate (node.right, var))

	if op is Op.MUL:
		return _diff_mul (node.left, node.right, var)

	if op is Op.DIV: # u / base^n -> u * base^-n
		den = node.right

		if den.is_oper and den.op is Op.POW and den.right.is_num:
			recip = _pow (den.left, num_leaf (den.right.num.neg ()))
		else:
			recip = _pow (den, Node.NegOne)

		return _diff_mul (node.left, recip, var)

	if op is Op.POW:
		return _diff_pow (node.left, node.right, var)

	if op is Op.FAC:
		if var in node.left.vars:
			raise IncompatibleOperandsError (f'can not differentiate the factorial of an expression in "{var}"')

		return Node.Zero

	u  = node.right
	du = differentiate (u, var)

	return Node.Zero if du.is_zero else _mul (du, _CHAIN [op] (u))
