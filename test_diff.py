#!/usr/bin/env python

import random
import unittest

import sympy as sp

from symtree.svalue import IncompatibleOperandsError
from symtree.stree import VariableNotAllowedError, IncompleteBindingError
from symtree.sparser import parse
from symtree.seval import evaluate
from symtree.sdiff import differentiate
from symtree.sfunc import Function
from symtree.sym import to_display_string, tree2spt

p = parse
d = lambda text, var = 'x': to_display_string (differentiate (parse (text), var))

_EXPRS = (
	'x^3 - 2x + 1',
	'sin(x)*cos(x)',
	'x*e^(x^2)',
	'ln(x^2 + 1)',
	'tan(3x)',
	'asin(x)',
	'acos(x)',
	'atan(x^2)',
	'sinh(x)/x',
	'cosh(2x)',
	'tanh(x)',
	'asinh(x)',
	'acosh(x + 2)',
	'atanh(x/2)',
	'x^x',
	'2^x',
	'(x + y)/(x - y)',
	'x^(1/2)',
	'x*y^2 + y',
	'1/(x^2 + 1)',
	'(x^2 + 1)^3',
	'e^(sin(x))',
	'x^2/(x + 1)^2',
)

class Test (unittest.TestCase):
	def test_basic (self):
		self.assertEqual (d ('5'), '0')
		self.assertEqual (d ('x'), '1')
		self.assertEqual (d ('y'), '0')
		self.assertEqual (d ('x^2', 'y'), '0')
		self.assertEqual (d ('x^3'), '3x^2')
		self.assertEqual (d ('3x^2 + 2x + 1'), '6x + 2')
		self.assertEqual (d ('1/x'), '-x^-2')
		self.assertEqual (d ('x^(1/2)'), 'x^(-1/2)/2')
		self.assertEqual (d ('x = 3'), '1 = 0')

	def test_functions (self):
		self.assertEqual (d ('sin(x)'), 'cos(x)')
		self.assertEqual (d ('cos(x)'), '-sin(x)')
		self.assertEqual (d ('ln(x)'), '1/x')
		self.assertEqual (d ('e^x'), 'e^(x)')
		self.assertEqual (d ('sin(2x)'), '2*cos(2x)')
		self.assertEqual (d ('sin(y)'), '0')

	def test_rules (self):
		self.assertEqual (d ('x*sin(x)'), 'sin(x) + x*cos(x)')
		self.assertEqual (d ('sin(x)^2'), '2*sin(x)*cos(x)')
		self.assertEqual (d ('x^x'), 'x^x*(ln(x) + 1)')
		self.assertEqual (d ('2^x'), '2^x*ln(2)')

	def test_factorial (self):
		self.assertRaises (IncompatibleOperandsError, differentiate, p ('x!'), 'x')
		self.assertRaises (IncompatibleOperandsError, differentiate, p ('(2x + 1)!'), 'x')
		self.assertEqual (d ('y!'), '0')
		self.assertEqual (d ('3!*x'), '3!')

	def test_against_sympy (self):
		rnd = random.Random (2)
		X   = sp.Symbol ('x')
		Y   = sp.Symbol ('y')

		for text in _EXPRS:
			t  = p (text)
			dt = differentiate (t, 'x')
			ds = sp.diff (tree2spt (t), X)

			for _ in range (3):
				x, y = rnd.uniform (0.2, 0.8), rnd.uniform (1.5, 2.5)
				want = complex (sp.N (ds.subs ({X: x, Y: y})))
				got  = complex (evaluate (dt, {'x': x, 'y': y}))

				self.assertLess (abs (got - want), 1e-7 * max (1, abs (want)), text)

	def test_central_difference (self):
		rnd = random.Random (4)
		h   = 1e-5

		for text in _EXPRS:
			t  = p (text)
			dt = differentiate (t, 'x')

			for _ in range (3):
				x, y = rnd.uniform (0.2, 0.8), rnd.uniform (1.5, 2.5)
				f    = lambda x: complex (evaluate (t, {'x': x, 'y': y}))
				want = (f (x + h) - f (x - h)) / (2 * h)
				got  = complex (evaluate (dt, {'x': x, 'y': y}))

				self.assertLess (abs (got - want), 1e-5 * max (1, abs (want)), text)

	def test_function (self):
		f = Function ('f', 'x', 'x^2 + 1')

		self.assertEqual (str (f), 'f(x) = x^2 + 1')
		self.assertEqual (f (3), 10)
		self.assertEqual (f.of (x = 2), 5)
		self.assertEqual (str (f.derive ()), "f'(x) = 2x")
		self.assertEqual (f.derive () (3), 6)
		self.assertEqual (str (f.derive ().derive ()), "f''(x) = 2")

		g = Function ('g', 'xy', 'x*y + y')

		self.assertEqual (g (2, 3), 9)
		self.assertEqual (g (x = 2, y = 3), 9)
		self.assertEqual (g (2, y = 3), 9)
		self.assertEqual (str (g.derive ('y')), "g'(x, y) = x + 1")
		self.assertRaises (IncompleteBindingError, g, 2)
		self.assertRaises (TypeError, g, 1, 2, 3)
		self.assertRaises (VariableNotAllowedError, Function, 'h', 'x', 'x + y')

if __name__ == '__main__':
	unittest.main ()
