#!/usr/bin/env python

import cmath
import math
import unittest

from symtree.svalue import Value, Rational, Float, SymConst, DivideByZeroError, IncompatibleOperandsError, approx_eq
from symtree.snumber import Number, ZERO, ONE, I, PI, E, PHI

class Test (unittest.TestCase):
	def test_rational (self):
		self.assertEqual (str (Rational.make (2, 4)), '1/2')
		self.assertEqual (str (Rational.make (6, -3)), '-2')
		self.assertEqual (str (Rational (1, 3).add (Rational (1, 6))), '1/2')
		self.assertEqual (str (Rational (2, 3).mul (Rational (3, 4))), '1/2')
		self.assertEqual (str (Rational (1, 2).div (Rational (1, 4))), '2')
		self.assertEqual (str (Rational (2, 3).pow (Rational (-2))), '9/4')
		self.assertEqual (str (Rational (4, 9).pow (Rational (1, 2))), '2/3')
		self.assertEqual (str (Rational (8).pow (Rational (2, 3))), '4')
		self.assertIsInstance (Rational (1, 3).add (Rational (1, 6)), Rational)
		self.assertIsInstance (Rational.make (2 ** 60, 3), Float)
		self.assertRaises (DivideByZeroError, Rational (1).div, Rational (0))
		self.assertRaises (DivideByZeroError, Rational.make, 1, 0)
		self.assertRaises (DivideByZeroError, Rational, 1, 0)
		self.assertRaises (DivideByZeroError, Rational (0).pow, Rational (-1))
		self.assertEqual (Rational (0).pow (Rational (0)), 1)

	def test_float (self):
		self.assertEqual (Float (0.1).add (Float (0.2)), Float (0.3))
		self.assertEqual (Float (1e-12), 0)
		self.assertEqual (str (Float (2.5)), '2.5')
		self.assertEqual (str (Float (3.0)), '3')
		self.assertEqual (str (Float (math.inf)), 'inf')
		self.assertEqual (str (Float (1e20)), '100000000000000000000')
		self.assertEqual (str (Float (-1.5e17)), '-150000000000000000')
		self.assertEqual (str (Float (-2.5e-6)), '-0.0000025')
		self.assertEqual (str (Float (1.25e-5)), '0.0000125')
		self.assertEqual (str (Float (0.5).as_rational ()), '1/2')
		self.assertEqual (str (Float (0.125).as_rational ()), '1/8')
		self.assertEqual (str (Float (-1 / 3).as_rational ()), '-1/3')
		self.assertIsNone (Float (math.inf).as_rational ())
		self.assertIsInstance (Rational (1, 3).add (Float (0.5)), Float)

	def test_approx (self):
		self.assertTrue (approx_eq (1.0, 1.0 + 1e-9))
		self.assertTrue (approx_eq (0.0, 1e-12))
		self.assertFalse (approx_eq (1.0, 1.001))
		self.assertTrue (approx_eq (math.inf, math.inf))
		self.assertFalse (approx_eq (math.inf, -math.inf))
		self.assertEqual (Value.of (1), Value.of (1.0))
		self.assertNotEqual (Value.of (1), Value.of (2))

	def test_symconst (self):
		r2 = Rational (2).pow (Rational (1, 2))

		self.assertIsInstance (r2, SymConst)
		self.assertAlmostEqual (r2.dbl (), math.sqrt (2))
		self.assertEqual (str (r2.mul (r2)), '2')
		self.assertIsInstance (r2.mul (r2), Rational)
		self.assertEqual (str (PI.re), 'π')
		self.assertEqual (str (PI.re.mul (Rational (2))), '2π')
		self.assertEqual (str (PI.re.div (Rational (2))), 'π/2')
		self.assertEqual (str (PI.re.add (PI.re)), '2π')
		self.assertEqual (str (PI.re.div (PI.re)), '1')
		self.assertEqual (str (E.re), 'e')
		self.assertAlmostEqual (E.re.dbl (), math.e)
		self.assertAlmostEqual (PHI.re.dbl (), (1 + math.sqrt (5)) / 2)
		self.assertEqual (PI.re.mul (Rational (0)), 0)

	def test_number_arith (self):
		self.assertEqual (I.mul (I), -1)
		self.assertEqual (str (Number (1, 2)), '1 + 2i')
		self.assertEqual (str (Number (1, -2)), '1 - 2i')
		self.assertEqual (str (Number (0, -1)), '-i')
		self.assertEqual (str (Number (0, 3)), '3i')
		self.assertEqual (Number (1, 2).mul (Number (1, -2)), 5)
		self.assertEqual (Number (1, 1).div (Number (1, -1)), I)
		self.assertEqual (Number (3, 4).length (), 5)
		self.assertEqual (Number (3, 4).abs (), 5)
		self.assertEqual (Number (2).pow (10), 1024)
		self.assertEqual (Number (2).pow (-2), Number (Rational (1, 4)))
		self.assertEqual (Number (1, 1).pow (2), Number (0, 2))
		self.assertEqual (ZERO.pow (ZERO), ONE)
		self.assertEqual (complex (Number (1, 2)), 1 + 2j)

	def test_number_div_zero (self):
		self.assertEqual (ONE.div (ZERO).re.dbl (), math.inf)
		self.assertEqual (Number (-3).div (ZERO).re.dbl (), -math.inf)
		self.assertEqual (Number (-3).div (ZERO).im, 0)
		self.assertEqual (Number (0, 2).div (ZERO).im.dbl (), math.inf)
		self.assertEqual (Number (0, 2).div (ZERO).re, 0)
		self.assertEqual (ONE.div (ONE.div (ZERO)), ZERO)
		self.assertRaises (DivideByZeroError, ZERO.div, ZERO)
		self.assertRaises (DivideByZeroError, ONE.div (ZERO).div, ONE.div (ZERO))
		self.assertTrue (issubclass (DivideByZeroError, ZeroDivisionError))

	def test_number_roots (self):
		self.assertEqual (Number (-1).sqrt (), I)
		self.assertEqual (Number (-4).sqrt (), Number (0, 2))
		self.assertEqual (Number (4).sqrt (), 2)
		self.assertEqual (len (Number (8).nth_root (3)), 3)

		for z in Number (8).nth_root (3):
			self.assertEqual (z.pow (3), 8)

		for z in Number (1, 1).nth_root (4):
			self.assertEqual (z.pow (4), Number (1, 1))

		self.assertEqual (Number (4).nth_root (-2) [0], Number (Rational (1, 2)))
		self.assertRaises (ValueError, Number (4).nth_root, 0)

	def test_number_polar (self):
		self.assertEqual (I.argument (), PI.re.div (Rational (2)))
		self.assertEqual (Number (-1).argument (), PI.re)
		self.assertEqual (Number (1, 1).argument (), PI.re.div (Rational (4)))
		self.assertEqual (Number.from_polar (2, PI.re), -2)
		self.assertEqual (Number.from_polar (1, PI.re.div (Rational (2))), I)
		self.assertEqual (Number.from_polar (2, PI.re.div (Rational (3))), Number (1, math.sqrt (3)))
		self.assertEqual (Number.from_polar (1, 1.0), Number (math.cos (1), math.sin (1)))

		for z in (Number (3, 4), Number (-1, 1), Number (0, -2), Number (-5), Number (0.3, -0.7), I, Number (Rational (1, 2), Rational (-3, 2))):
			self.assertEqual (Number.from_polar (z.length (), z.argument ()), z)

	def test_number_funcs (self):
		self.assertEqual (PI.sin (), 0)
		self.assertEqual (PI.cos (), -1)
		self.assertEqual (PI.mul (Rational (1, 6)).sin (), Number (Rational (1, 2)))
		self.assertEqual (Number (1).sin (), math.sin (1))
		self.assertEqual (Number (1).cos (), math.cos (1))
		self.assertEqual (Number (1).tan (), math.tan (1))
		self.assertEqual (Number (1).sinh (), math.sinh (1))
		self.assertEqual (Number (1).cosh (), math.cosh (1))
		self.assertEqual (Number (1).tanh (), math.tanh (1))
		self.assertEqual (ONE.exp (), E)
		self.assertEqual (E.ln (), 1)
		self.assertEqual (Number (-1).ln (), Number (0, math.pi))
		self.assertEqual (I.mul (PI).exp (), -1)
		self.assertEqual (Number (0.5).asin (), math.asin (0.5))
		self.assertEqual (Number (0.5).acos (), math.acos (0.5))
		self.assertEqual (Number (2).atan (), math.atan (2))
		self.assertEqual (Number (2).asinh (), math.asinh (2))
		self.assertEqual (Number (2).acosh (), math.acosh (2))
		self.assertEqual (Number (0.5).atanh (), math.atanh (0.5))

		z = Number (0.3, 0.7)

		for f, g in (('sin', 'asin'), ('cos', 'acos'), ('tan', 'atan'), ('sinh', 'asinh'), ('tanh', 'atanh'), ('exp', 'ln')):
			self.assertEqual (getattr (getattr (z, g) (), f) (), z)

		self.assertAlmostEqual (complex (z.sin ()), cmath.sin (0.3 + 0.7j))
		self.assertAlmostEqual (complex (z.cosh ()), cmath.cosh (0.3 + 0.7j))

	def test_factorial (self):
		self.assertEqual (Number (5).factorial (), 120)
		self.assertEqual (Number (0).factorial (), 1)
		self.assertEqual (Number (171).factorial ().re.dbl (), math.inf)
		self.assertRaises (IncompatibleOperandsError, Number (-1).factorial)
		self.assertRaises (IncompatibleOperandsError, Number (1.5).factorial)
		self.assertRaises (IncompatibleOperandsError, I.factorial)

if __name__ == '__main__':
	unittest.main ()
