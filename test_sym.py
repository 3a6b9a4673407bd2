#!/usr/bin/env python
# python 3.6+

# Randomized CONSISTENCY testing of writing vs. parsing: tree -> nat -> tree -> value, plus SymPy conversions.

from getopt import getopt
import math
import random
import re
import sys
import unittest

import sympy as sp

from symtree.svalue import Rational
from symtree.snumber import I, PI
from symtree.stree import Op, num_leaf, var_leaf
from symtree.sparser import parse
from symtree.ssimp import combine, negate, simplify
from symtree.seval import evaluate
from symtree import sym
from symtree.sym import tree2nat, tree2spt, spt2tree

n = lambda text: tree2nat (parse (text))

X = sp.Symbol ('x')
Y = sp.Symbol ('y')

_FUNCS = (Op.SIN, Op.COS, Op.EXP, Op.LN, Op.SINH, Op.COSH)

#...............................................................................................
RND = random.Random (0)

def term_num ():
	return num_leaf (Rational.make (RND.randint (-9, 9), RND.choice ((1, 1, 1, 2, 3))))

def term_var ():
	return var_leaf (RND.choice ('xy'), RND.choice ((1, 1, 2, -1, -3, Rational (1, 2))), RND.choice ((1, 1, 2, -1)))

def expr_add ():
	return combine (Op.ADD, expr (), expr ())

def expr_sub ():
	return combine (Op.SUB, expr (), expr ())

def expr_mul ():
	return combine (Op.MUL, expr (), expr ())

def expr_div ():
	return combine (Op.DIV, expr (), expr ())

def expr_pow ():
	return combine (Op.POW, expr (), num_leaf (RND.choice ((2, 3, -1))))

def expr_func ():
	op  = RND.choice (_FUNCS)
	arg = expr ()

	if arg.is_oper and arg.op is op.inv: # the parser cancels inverse pairs
		return arg.right

	return combine (op, None, arg)

def expr_minus ():
	return negate (expr ())

#...............................................................................................
EXPRS = [va [1] for va in filter (lambda va: va [0] [:5] == 'expr_', globals ().items ())]
TERMS = [va [1] for va in filter (lambda va: va [0] [:5] == 'term_', globals ().items ())]
DEPTH = 3

def expr (depth = None):
	global DEPTH

	if depth is not None:
		DEPTH = depth

	if DEPTH <= 0:
		return RND.choice (TERMS) ()

	DEPTH -= 1

	try:
		return RND.choice (EXPRS) ()
	except ArithmeticError: # 0/0 built by chance
		return RND.choice (TERMS) ()
	finally:
		DEPTH += 1

def _close (a, b):
	a, b = complex (a), complex (b)

	return abs (a - b) <= 1e-6 * max (1, abs (a), abs (b))

def _finite (v):
	return math.isfinite (v.re.dbl ()) and math.isfinite (v.im.dbl ())

def consistent (tree, bindings): # None if tree can not be evaluated at bindings, else whether its text evaluates the same
	try:
		v1 = evaluate (tree, bindings)
	except ArithmeticError:
		return None

	if not _finite (v1):
		return None

	text = tree2nat (tree)

	if re.search (r'inf|nan', text): # float overflow does not read back
		return None

	v2 = evaluate (parse (text), bindings)

	return _close (v1, v2)

def check_consistency (count = 200, depth = 3, seed = 0, show = False):
	RND.seed (seed)

	for _ in range (count):
		tree     = expr (depth)
		bindings = {'x': RND.uniform (0.5, 1.5), 'y': RND.uniform (0.5, 1.5)}

		if show:
			print (tree2nat (tree))

		if consistent (tree, bindings) is False:
			raise ValueError (f"doesn't match: {tree2nat (tree)}")

#...............................................................................................
class Test (unittest.TestCase):
	def tearDown (self):
		sym.set_spaces (False)

	def test_nat (self):
		self.assertEqual (n ('x'), 'x')
		self.assertEqual (n ('-x^2'), '-x^2')
		self.assertEqual (n ('3x^2/2'), '3x^2/2')
		self.assertEqual (n ('-x/2'), '-x/2')
		self.assertEqual (n ('x^-1'), 'x^-1')
		self.assertEqual (n ('(1+2i)x'), '(1 + 2i)x')
		self.assertEqual (n ('ix'), 'ix')
		self.assertEqual (n ('-ix'), '-ix')
		self.assertEqual (n ('2πx'), '(2π)x')
		self.assertEqual (n ('e^x^2'), 'e^(x)^2')
		self.assertEqual (n ('2^-x'), '2^(-x)')
		self.assertEqual (n ('2^(2x)'), '2^(2x)')
		self.assertEqual (n ('(x+1)^y'), '(x + 1)^y')
		self.assertEqual (n ('x - (y + 1)'), 'x - y - 1')
		self.assertEqual (n ('x/(y*sin(x))'), 'x/y/sin(x)')
		self.assertEqual (n ('-(x + y)*2'), '2*(-x - y)')
		self.assertEqual (n ('sin(x)/(-3)'), 'sin(x)/(-3)')

	def test_float_text (self):
		self.assertEqual (n ('10^20'), '100000000000000000000')

		for text in ('10^20', '-10^17 + x', 'sin(1/100000)', 'x*ln(1.00001)'):
			t  = simplify (parse (text))
			s  = tree2nat (t)
			b  = {'x': 1.5}

			self.assertNotIn ('e+', s, text)
			self.assertNotIn ('e-', s, text)
			self.assertTrue (_close (evaluate (parse (s), b), evaluate (t, b)), text)

	def test_spaces (self):
		sym.set_spaces (True)

		self.assertEqual (n ('x*y/z'), 'x * y / z')
		self.assertEqual (n ('x^y'), 'x ^ y')
		self.assertEqual (n ('3x^2'), '3x^2')
		self.assertEqual (n ('x + y'), 'x + y')

	def test_tree2spt (self):
		self.assertEqual (tree2spt (parse ('x^2 + 2x')), X**2 + 2*X)
		self.assertEqual (tree2spt (parse ('sin(x)/2')), sp.sin (X) / 2)
		self.assertEqual (tree2spt (parse ('e^y')), sp.exp (Y))
		self.assertEqual (tree2spt (parse ('x!')), sp.factorial (X))
		self.assertEqual (tree2spt (num_leaf (I)), sp.I)
		self.assertEqual (tree2spt (num_leaf (PI)), sp.pi)
		self.assertEqual (tree2spt (num_leaf (Rational (1, 3))), sp.Rational (1, 3))

		eq = tree2spt (parse ('x = 3'))

		self.assertIsInstance (eq, sp.Eq)
		self.assertEqual ((eq.lhs, eq.rhs), (X, 3))

	def test_spt2tree (self):
		self.assertEqual (tree2nat (spt2tree (sp.sin (X)**2)), 'sin(x)^2')
		self.assertEqual (tree2nat (spt2tree (X / 2)), 'x/2')
		self.assertEqual (tree2nat (spt2tree (sp.pi)), 'π')
		self.assertEqual (tree2nat (spt2tree (sp.Integer (3))), '3')
		self.assertEqual (tree2nat (spt2tree (sp.Eq (X, 3))), 'x = 3')
		self.assertEqual (spt2tree (sp.oo).num.re.dbl (), float ('inf'))
		self.assertEqual (spt2tree (X + X), var_leaf ('x', 2))
		self.assertRaises (TypeError, spt2tree, sp.Symbol ('ab'))
		self.assertRaises (TypeError, spt2tree, sp.gamma (X))

	def test_spt_round_trip (self):
		for text in ('x^2 + 2x + 1', 'sin(x)*cos(y)', 'e^(2x)/y', 'ln(x^2 + y)', 'atan(x)/(x + y)', '(x + 1)^3', 'x^(1/2) - 3y'):
			t  = parse (text)
			t2 = spt2tree (tree2spt (t))
			b  = {'x': 0.7, 'y': 1.3}

			self.assertEqual (evaluate (t2, b), evaluate (t, b), text)
			self.assertTrue (_close (evaluate (t, b), complex (sp.N (tree2spt (t).subs ({X: 0.7, Y: 1.3})))), text)

	def test_consistency (self):
		check_consistency (count = 200, depth = 3, seed = 0)

#...............................................................................................
def main (argv = None):
	count, depth, seed = 1000, 3, 0
	opts, _            = getopt (sys.argv [1:] if argv is None else argv, 'sc:d:r:', ['show', 'count=', 'depth=', 'seed='])

	for opt, arg in opts:
		if opt in ('-c', '--count'):
			count = int (arg)
		elif opt in ('-d', '--depth'):
			depth = int (arg)
		elif opt in ('-r', '--seed'):
			seed = int (arg)

	check_consistency (count, depth, seed, ('-s', '') in opts or ('--show', '') in opts)

if __name__ == '__main__':
	main ()
