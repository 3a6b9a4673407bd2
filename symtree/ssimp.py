# Simplification: leaf algebra, term combination during tree construction and global normalization of rational expressions.

import math

from .svalue import Float, DivideByZeroError, IncompatibleOperandsError
from .snumber import ZERO
from .stree import Op, Node, num_leaf
from .seval import try_fold

_SEARCH_DEPTH = 2 # depth of candidate rewrites explored by simplify ()
_MAX_PASSES   = 8 # simplify () passes before giving up on reaching a fixpoint

def set_search_depth (depth):
	global _SEARCH_DEPTH
	_SEARCH_DEPTH = depth

def _mono (var, mult, pow):
	if mult.is_zero:
		return Node.Zero
	if pow.is_zero:
		return num_leaf (mult)

	return Node ('@', var, mult, pow)

def _flip (op):
	return {Op.ADD: Op.SUB, Op.SUB: Op.ADD, Op.MUL: Op.DIV, Op.DIV: Op.MUL} [op]

def _in_chain (node, op): # node continues a chain of op's precedence (+- or */)
	return node.is_oper and node.op.prec == op.prec and op.prec in (1, 2)

#...............................................................................................
def _leaf_op (op, l, r): # Node or None if the leaves do not combine
	if l.is_num and r.is_num:
		a, b = l.num, r.num

		if op is Op.ADD:
			return num_leaf (a.add (b))
		if op is Op.SUB:
			return num_leaf (a.sub (b))
		if op is Op.MUL:
			return num_leaf (a.mul (b))
		if op is Op.DIV:
			return num_leaf (a.div (b))
		if op is Op.POW:
			return num_leaf (a.pow (b))

		return None

	if op is Op.ADD or op is Op.SUB:
		if l.is_var and l.compatible (r):
			mult = l.mult.add (r.mult) if op is Op.ADD else l.mult.sub (r.mult)

			return Node.Zero if mult.is_zero else Node ('@', l.var, mult, l.pow)

	elif op is Op.MUL:
		if l.is_num:
			l, r = r, l

		if r.is_num:
			return _mono (l.var, l.mult.mul (r.num), l.pow)
		if l.compatible (r, True):
			return _mono (l.var, l.mult.mul (r.mult), l.pow.add (r.pow))

	elif op is Op.DIV:
		if l.is_var:
			if r.is_num:
				return None if r.num.is_zero else _mono (l.var, l.mult.div (r.num), l.pow)
			if l.compatible (r, True):
				return _mono (l.var, l.mult.div (r.mult), l.pow.sub (r.pow))

	elif op is Op.POW:
		if l.is_var and r.is_num and r.num.is_real:
			return _mono (l.var, l.mult.pow (r.num), l.pow.mul (r.num.re))

	return None

def leaf_op (op, l, r):
	res = _leaf_op (op, l, r)

	if res is None:
		raise IncompatibleOperandsError (f'can not combine {l!r} {op} {r!r}')

	return res

def negate (node):
	if node.is_leaf:
		return node.neg ()

	if node.op is Op.MUL or node.op is Op.DIV:
		return combine (node.op, negate (node.left), node.right)
	if node.op is Op.ADD:
		return combine (Op.SUB, negate (node.left), node.right)
	if node.op is Op.SUB:
		return combine (Op.SUB, node.right, node.left)

	return combine (Op.MUL, Node.NegOne, node)

def _inf_over_zero (node): # node / 0 with node nonzero
	if node.is_num:
		return num_leaf (node.num.div (ZERO))

	return num_leaf (Float (math.copysign (math.inf, node.sgn or 1)))

#...............................................................................................
def simplify_atomic (node):
	op = node.op

	if not (node.is_oper and op.arity == 2 and op is not Op.EQU):
		return node

	l, r = node.left, node.right

	if op is Op.ADD or op is Op.SUB:
		if r.is_num and r.is_zero:
			return l
		if l.is_num and l.is_zero:
			return r if op is Op.ADD else negate (r)
		if r == l:
			return combine (Op.MUL, num_leaf (2), l) if op is Op.ADD else Node.Zero
		if r.sgn < 0 and (r.is_leaf or r.op.is_multiple):
			return combine (_flip (op), l, negate (r))

	elif op is Op.MUL:
		if l.is_zero or r.is_zero:
			return Node.Zero
		if l.is_one:
			return r
		if r.is_one:
			return l
		if r == l and r.is_oper:
			return combine (Op.POW, l, num_leaf (2))
		if r.is_num and l.is_oper: # coefficient leads
			return Node (Op.MUL, r, l)

	elif op is Op.DIV:
		if r.is_zero:
			if l.is_zero:
				raise DivideByZeroError ('0/0 is undefined')

			return _inf_over_zero (l)

		if l.is_zero:
			return Node.Zero
		if r.is_one:
			return l
		if r.is_num and r.num == -1:
			return negate (l)
		if r == l:
			return Node.One

	elif op is Op.POW:
		if r.is_num and r.is_zero:
			return Node.One
		if r.is_one or l.is_one:
			return l
		if l.is_num and l.is_zero and r.is_num and r.num.re.sgn () > 0:
			return Node.Zero

	if l.is_leaf and r.is_leaf:
		res = _leaf_op (op, l, r)

		if res is not None:
			return res

	return node

#...............................................................................................
def _merge (t, leaf, sign, mul): # combine leaf into chain leaf t with effective sign or exponent
	if not mul:
		return _leaf_op (Op.ADD if sign > 0 else Op.SUB, t, leaf)

	if sign > 0:
		return _leaf_op (Op.MUL, t, leaf)

	if (leaf.is_num and leaf.is_zero) or (t.is_num and not leaf.is_num):
		return None

	return _leaf_op (Op.DIV, t, leaf)

def _splice (chain, leaf, sign): # combine leaf into first compatible leaf of chain, rebuilding the path, or None
	prec = chain.op.prec
	mul  = prec == 2

	def visit (n, s):
		if n.is_leaf:
			return _merge (n, leaf, s * sign, mul)

		if not (n.is_oper and n.op.prec == prec):
			return None

		res = visit (n.left, s)

		if res is not None:
			return simplify_atomic (Node (n.op, res, n.right))

		res = visit (n.right, -s if n.op in (Op.SUB, Op.DIV) else s)

		if res is not None:
			return simplify_atomic (Node (n.op, n.left, res))

		return None

	return visit (chain, 1)

def _reassociate (op, left, right): # l + (a - b) -> (l + a) - b, l / (a * b) -> (l / a) / b, ...
	second = right.op if op in (Op.ADD, Op.MUL) else _flip (right.op)

	return combine (second, combine (op, left, right.left), right.right)

def combine (op, left, right):
	"""Build the node for left op right, combining like terms on the way. This
	is the reduce step of the parser and the constructor used by every other
	rewrite so trees stay in simplified form."""

	if op.arity == 1 or op is Op.EQU:
		return Node (op, left, right)

	if left.is_leaf and right.is_leaf:
		return simplify_atomic (Node (op, left, right))

	if op.prec in (1, 2):
		if right.is_leaf and _in_chain (left, op):
			res = _splice (left, right, -1 if op in (Op.SUB, Op.DIV) else 1)

			if res is not None:
				return res

		if left.is_leaf and op.is_commute and _in_chain (right, op):
			res = _splice (right, left, 1)

			if res is not None:
				return res

		if _in_chain (right, op):
			return _reassociate (op, left, right)

	return simplify_atomic (Node (op, left, right))

#...............................................................................................
# rewrites of nested fractions, each returns an equivalent raw node or None

def _factors (node, exp = 1): # [(factor, +-1), ...] of a * / chain
	if node.is_oper and node.op.is_multiple:
		return _factors (node.left, exp) + _factors (node.right, -exp if node.op is Op.DIV else exp)

	return [(node, exp)]

def _product (factors):
	numer = [f for f, e in factors if e > 0]
	denom = [f for f, e in factors if e < 0]
	res   = numer [0] if numer else Node.One

	for f in numer [1:]:
		res = Node (Op.MUL, res, f)

	for f in denom:
		res = Node (Op.DIV, res, f)

	return res

def _rw_sum_over (node): # (a +- b) / c -> a/c +- b/c
	if node.op is Op.DIV and node.left.is_oper and node.left.op.is_additive:
		a, b, c = node.left.left, node.left.right, node.right

		return Node (node.left.op, Node (Op.DIV, a, c), Node (Op.DIV, b, c))

def _rw_prod_over_left (node): # (a * b) / c -> a * (b / c)
	if node.op is Op.DIV and node.left.is_oper and node.left.op is Op.MUL:
		return Node (Op.MUL, node.left.left, Node (Op.DIV, node.left.right, node.right))

def _rw_prod_over_right (node): # (a * b) / c -> (a / c) * b
	if node.op is Op.DIV and node.left.is_oper and node.left.op is Op.MUL:
		return Node (Op.MUL, Node (Op.DIV, node.left.left, node.right), node.left.right)

def _rw_frac_over (node): # (a / b) / c -> a / (b * c)
	if node.op is Op.DIV and node.left.is_oper and node.left.op is Op.DIV:
		return Node (Op.DIV, node.left.left, Node (Op.MUL, node.left.right, node.right))

def _rw_over_frac (node): # a / (b / c) -> (a * c) / b
	if node.op is Op.DIV and node.right.is_oper and node.right.op is Op.DIV:
		return Node (Op.DIV, Node (Op.MUL, node.left, node.right.right), node.right.left)

def _rw_add_fracs (node): # a/c +- b/c -> (a +- b)/c, a/b +- c/d -> (a*d +- c*b)/(b*d), a +- b/c -> (a*c +- b)/c
	if not node.op.is_additive:
		return None

	l, r = node.left, node.right
	ld   = l.is_oper and l.op is Op.DIV
	rd   = r.is_oper and r.op is Op.DIV

	if ld and rd:
		if l.right == r.right:
			return Node (Op.DIV, Node (node.op, l.left, r.left), l.right)

		return Node (Op.DIV, Node (node.op, Node (Op.MUL, l.left, r.right), Node (Op.MUL, r.left, l.right)), Node (Op.MUL, l.right, r.right))

	if rd:
		return Node (Op.DIV, Node (node.op, Node (Op.MUL, l, r.right), r.left), r.right)
	if ld:
		return Node (Op.DIV, Node (node.op, l.left, Node (Op.MUL, r, l.right)), l.right)

def _rw_mul_frac (node): # a * (b / c) -> (a * b) / c, (b / c) * a -> (b * a) / c, (a / b) * (c / d) -> (a * c) / (b * d)
	if node.op is not Op.MUL:
		return None

	l, r = node.left, node.right
	ld   = l.is_oper and l.op is Op.DIV
	rd   = r.is_oper and r.op is Op.DIV

	if ld and rd:
		return Node (Op.DIV, Node (Op.MUL, l.left, r.left), Node (Op.MUL, l.right, r.right))
	if rd:
		return Node (Op.DIV, Node (Op.MUL, l, r.left), r.right)
	if ld:
		return Node (Op.DIV, Node (Op.MUL, l.left, r), l.right)

def _rw_cancel (node): # (a * b) / (b * c) -> a / c for structurally equal factors
	if not (node.op.is_multiple and any (e < 0 for _, e in _factors (node))):
		return None

	factors = _factors (node)

	for i, (f, e) in enumerate (factors):
		for j in range (i + 1, len (factors)):
			g, d = factors [j]

			if e != d and f == g:
				return _product ([fe for k, fe in enumerate (factors) if k not in (i, j)])

	return None

_EQUIVALENCES = (
	_rw_sum_over,
	_rw_prod_over_left,
	_rw_prod_over_right,
	_rw_frac_over,
	_rw_over_frac,
	_rw_add_fracs,
	_rw_mul_frac,
	_rw_cancel,
)

def _candidates (node):
	for rw in _EQUIVALENCES:
		cand = rw (node)

		if cand is not None:
			yield cand

#...............................................................................................
def _simplify (node, depth):
	if node.is_leaf:
		return node

	if node.is_const:
		num = try_fold (node)

		if num is not None:
			return num_leaf (num)

	l = _simplify (node.left, depth) if node.left is not None else None
	r = _simplify (node.right, depth) if node.right is not None else None

	try:
		best = combine (node.op, l, r)
	except ArithmeticError:
		return node

	if best.is_oper and depth < _SEARCH_DEPTH:
		for cand in _candidates (best):
			try:
				cand = _simplify (cand, depth + 1)
			except ArithmeticError:
				continue

			if cand.size < best.size:
				best = cand

	return best

def simplify (node):
	"""Normalize a tree: fold constant subtrees to numbers and rewrite nested
	fractions into whichever equivalent shape has the fewest nodes. Repeated
	until the tree stops changing so that simplify (simplify (t)) == simplify (t)."""

	for _ in range (_MAX_PASSES):
		res = _simplify (node, 0)

		if res == node:
			break

		node = res

	return node
