# Complex numbers as pairs of Values with polar form, roots and transcendental functions.

import math

from .svalue import Value, Rational, Float, SymConst, DivideByZeroError, IncompatibleOperandsError, approx_eq, _const, _fmt

_R0      = Rational (0)
_R1      = Rational (1)
_HALF    = Rational (1, 2)
_PI      = SymConst (_R1, '^', (math.pi, 1))
_SQRT2_2 = SymConst (_HALF, '^', (2, .5))
_SQRT3_2 = SymConst (_HALF, '^', (3, .5))

_NICE    = { # exact (cos, sin) of first quadrant angles, keyed by (num, den) of the fraction of pi
	(0, 1): (_R1, _R0),
	(1, 6): (_SQRT3_2, _HALF),
	(1, 4): (_SQRT2_2, _SQRT2_2),
	(1, 3): (_HALF, _SQRT3_2),
}

def _inf (v): # component of nonzero / 0
	return _R0 if v.is_zero else Float (math.copysign (math.inf, v.dbl ()))

def _fcall (f, x): # float function with overflow going to signed infinity
	try:
		return Float (f (x))
	except OverflowError:
		return Float (math.copysign (math.inf, x) if f is not math.cosh else math.inf)

def _ln (v): # natural log of a non-negative Value
	if v.is_zero:
		return Float (-math.inf)

	if v.__class__ is Rational:
		return _const (_R1, 'ln', (v.dbl (),))

	if v.__class__ is SymConst and v.op == 'exp' and v.mult == 1:
		a = v.args [0]

		return Rational (int (a)) if a.is_integer () else Float (a)

	return Float (math.log (v.dbl ()))

def _exp (v):
	if v.__class__ is Rational:
		return _const (_R1, 'exp', (v.dbl (),))

	if v.__class__ is SymConst and v.op == 'ln': # e^(m ln a) = a^m
		return _const (_R1, '^', (v.args [0], v.mult.dbl ()))

	return _fcall (math.exp, v.dbl ())

#...............................................................................................
class Number:
	__slots__ = ('re', 'im')
	__hash__  = None

	def __init__ (self, re = 0, im = 0):
		self.re = Value.of (re)
		self.im = Value.of (im)

	@staticmethod
	def of (v):
		if isinstance (v, Number):
			return v
		if isinstance (v, complex):
			return Number (v.real, v.imag)

		return Number (Value.of (v))

	def __eq__ (self, other):
		if isinstance (other, (int, float, complex, Value)):
			other = Number.of (other)
		elif not isinstance (other, Number):
			return NotImplemented

		return self.re == other.re and self.im == other.im

	def __str__ (self):
		if self.im.is_zero:
			return str (self.re)

		im  = self.im.abs ()
		ims = 'i' if im == 1 else f'{im}*i' if im.__class__ is Float and not im.is_finite else f'{im}i'

		if self.re.is_zero:
			return ims if self.im.sgn () > 0 else f'-{ims}'

		return f'{self.re} {"+" if self.im.sgn () > 0 else "-"} {ims}'

	def __repr__ (self):
		return f'Number ({str (self)!r})'

	def __complex__ (self):
		return complex (self.re.dbl (), self.im.dbl ())

	__neg__     = lambda self: self.neg ()
	__abs__     = lambda self: self.abs ()
	__add__     = lambda self, other: self.add (other)
	__radd__    = lambda self, other: Number.of (other).add (self)
	__sub__     = lambda self, other: self.sub (other)
	__rsub__    = lambda self, other: Number.of (other).sub (self)
	__mul__     = lambda self, other: self.mul (other)
	__rmul__    = lambda self, other: Number.of (other).mul (self)
	__truediv__ = lambda self, other: self.div (other)
	__pow__     = lambda self, other: self.pow (other)

	is_real     = property (lambda self: self.im.is_zero)
	is_imag     = property (lambda self: self.re.is_zero and not self.im.is_zero)
	is_zero     = property (lambda self: self.re.is_zero and self.im.is_zero)
	is_finite   = property (lambda self: self.re.is_finite and self.im.is_finite)
	is_int      = property (lambda self: self.im.is_zero and self.re.is_int)

	def sgn (self): # sign of leading component for display and normalization
		return self.re.sgn () if not self.re.is_zero else self.im.sgn ()

	def neg (self):
		return Number (self.re.neg (), self.im.neg ())

	def conj (self):
		return Number (self.re, self.im.neg ())

	def add (self, other):
		other = Number.of (other)

		return Number (self.re.add (other.re), self.im.add (other.im))

	def sub (self, other):
		other = Number.of (other)

		return Number (self.re.sub (other.re), self.im.sub (other.im))

	def mul (self, other):
		a, b = self, Number.of (other)

		if b.is_real:
			return Number (a.re.mul (b.re), a.im.mul (b.re))
		if a.is_real:
			return Number (b.re.mul (a.re), b.im.mul (a.re))

		return Number (a.re.mul (b.re).sub (a.im.mul (b.im)), a.re.mul (b.im).add (a.im.mul (b.re)))

	def div (self, other):
		b = Number.of (other)

		if b.is_zero:
			if self.is_zero:
				raise DivideByZeroError ('0/0 is undefined')

			return Number (_inf (self.re), _inf (self.im))

		if not b.is_finite:
			if not self.is_finite:
				raise DivideByZeroError ('inf/inf is undefined')

			return ZERO

		if b.is_real:
			return Number (self.re.div (b.re), self.im.div (b.re))

		d = b.re.mul (b.re).add (b.im.mul (b.im))
		n = self.mul (b.conj ())

		return Number (n.re.div (d), n.im.div (d))

	def _pow_int (self, n):
		if n < 0:
			return ONE.div (self._pow_int (-n))

		res, base = ONE, self

		while n:
			if n & 1:
				res = res.mul (base)

			n >>= 1

			if n:
				base = base.mul (base)

		return res

	def pow (self, other):
		w = Number.of (other)

		if w.is_zero:
			return ONE

		if self.is_zero:
			if w.re.sgn () > 0:
				return ZERO

			return ONE.div (ZERO)

		if w.is_real:
			e = w.re

			if e.is_int and abs (e.dbl ()) <= 4096:
				return self._pow_int (int (e.dbl ()))

			if self.is_real and self.re.sgn () > 0:
				return Number (self.re.pow (e))

			r = e if e.__class__ is Rational else Float (e.dbl ()).as_rational ()

			if r is not None and r.__class__ is Rational:
				r = r.reduce ()

				if r.den <= 64 and approx_eq (r.dbl (), e.dbl ()):
					return self._pow_int (r.num).nth_root (r.den) [0]

		return w.mul (self.ln ()).exp ()

	#...............................................................................................
	def length (self):
		return math.hypot (self.re.dbl (), self.im.dbl ())

	def _length_pow (self, p): # |z| ^ p as exact a Value as possible
		if self.im.is_zero:
			return self.re.abs ().pow (p)
		if self.re.is_zero:
			return self.im.abs ().pow (p)

		return self.re.mul (self.re).add (self.im.mul (self.im)).pow (p.mul (_HALF))

	def argument (self):
		if self.im.is_zero:
			return _R0 if self.re.sgn () >= 0 else _PI
		if self.re.is_zero:
			return _PI.mul (_HALF if self.im.sgn () > 0 else _HALF.neg ())

		theta = math.atan2 (self.im.dbl (), self.re.dbl ())
		k     = Float (theta / math.pi).as_rational ()

		if k is not None and k.__class__ is Rational and k.den in (1, 2, 3, 4, 6) and approx_eq (k.dbl (), theta / math.pi):
			return _PI.mul (k)

		return Float (theta)

	@staticmethod
	def from_polar (r, theta):
		r, theta = Value.of (r), Value.of (theta)

		if r.is_zero:
			return ZERO

		if not theta.is_finite:
			return Number (Float (math.nan), Float (math.nan))

		k = theta.div (_PI)

		if k.__class__ is not Rational and k.is_finite:
			k = Float (k.dbl ()).as_rational ()

			if k is not None and (k.__class__ is not Rational or not approx_eq (k.dbl (), theta.dbl () / math.pi)):
				k = None

		if k is not None and k.__class__ is Rational:
			k    = k.reduce ()
			k2   = Rational.make (k.num % (2 * k.den), k.den) # [0, 2)
			quad = (2 * k2.num) // k2.den
			rest = k2.sub (Rational (quad, 2)).reduce ()
			cs   = _NICE.get ((rest.num, rest.den))

			if cs:
				c, s = cs
				c, s = (c, s) if quad == 0 else (s.neg (), c) if quad == 1 else (c.neg (), s.neg ()) if quad == 2 else (s, c.neg ())

				return Number (r.mul (c), r.mul (s))

		t, rd = theta.dbl (), r.dbl ()

		return Number (Float (rd * math.cos (t)), Float (rd * math.sin (t)))

	def nth_root (self, n): # all n roots, negative n gives the roots of the reciprocal
		if n == 0:
			raise ValueError ('zeroth root is undefined')

		if n < 0:
			return [ONE.div (z) for z in self.nth_root (-n)]

		if n == 1:
			return [self]

		if self.is_zero:
			return [ZERO] * n

		r   = self._length_pow (Rational (1, n))
		arg = self.argument ()

		return [Number.from_polar (r, arg.add (_PI.mul (Rational (2 * k))).div (Rational (n))) for k in range (n)]

	def polar_str (self):
		length = _fmt (self.length ())
		arg    = self.argument ()

		if arg.is_zero:
			return length

		return f'{"" if length == "1" else length + "*"}e^({arg}*i)'

	#...............................................................................................
	def abs (self):
		return Number (self._length_pow (_R1))

	def factorial (self):
		if not self.is_int or self.re.sgn () < 0:
			raise IncompatibleOperandsError (f'factorial of {self} is undefined')

		n = int (round (self.re.dbl ()))

		return Number (Rational.make (math.factorial (n), 1) if n <= 170 else Float (math.inf))

	def ln (self):
		if self.is_zero:
			return Number (Float (-math.inf))

		if self.im.is_zero:
			re = _ln (self.re.abs ())
		else:
			re = _ln (self.re.mul (self.re).add (self.im.mul (self.im))).mul (_HALF)

		return Number (re, self.argument ())

	def exp (self):
		return Number.from_polar (_exp (self.re), self.im)

	def _cis (self): # (cos, sin) of the real part, exact on nice angles
		return Number.from_polar (_R1, self.re)

	def sin (self):
		cs = self._cis ()

		if self.im.is_zero:
			return Number (cs.im)

		y = self.im.dbl ()

		return Number (cs.im.mul (_fcall (math.cosh, y)), cs.re.mul (_fcall (math.sinh, y)))

	def cos (self):
		cs = self._cis ()

		if self.im.is_zero:
			return Number (cs.re)

		y = self.im.dbl ()

		return Number (cs.re.mul (_fcall (math.cosh, y)), cs.im.mul (_fcall (math.sinh, y)).neg ())

	def tan (self):
		return self.sin ().div (self.cos ())

	def sinh (self):
		x = self.re.dbl ()

		if self.im.is_zero:
			return Number (_fcall (math.sinh, x) if not self.re.is_zero else _R0)

		cs = Number.from_polar (_R1, self.im)

		return Number (cs.re.mul (_fcall (math.sinh, x)), cs.im.mul (_fcall (math.cosh, x)))

	def cosh (self):
		x = self.re.dbl ()

		if self.im.is_zero:
			return Number (_fcall (math.cosh, x) if not self.re.is_zero else _R1)

		cs = Number.from_polar (_R1, self.im)

		return Number (cs.re.mul (_fcall (math.cosh, x)), cs.im.mul (_fcall (math.sinh, x)))

	def tanh (self):
		return self.sinh ().div (self.cosh ())

	def sqrt (self):
		return self.nth_root (2) [0]

	def asin (self): # -i ln (iz + sqrt (1 - z^2))
		return I.mul (self).add (ONE.sub (self.mul (self)).sqrt ()).ln ().mul (I.neg ())

	def acos (self):
		return Number (_PI.mul (_HALF)).sub (self.asin ())

	def atan (self): # i/2 (ln (1 - iz) - ln (1 + iz))
		iz = I.mul (self)

		return ONE.sub (iz).ln ().sub (ONE.add (iz).ln ()).mul (Number (_R0, _HALF))

	def asinh (self): # ln (z + sqrt (z^2 + 1))
		return self.add (self.mul (self).add (ONE).sqrt ()).ln ()

	def acosh (self): # ln (z + sqrt (z + 1) sqrt (z - 1))
		return self.add (self.add (ONE).sqrt ().mul (self.sub (ONE).sqrt ())).ln ()

	def atanh (self): # 1/2 (ln (1 + z) - ln (1 - z))
		return ONE.add (self).ln ().sub (ONE.sub (self).ln ()).mul (_HALF)

#...............................................................................................
ZERO = Number (_R0)
ONE  = Number (_R1)
I    = Number (_R0, _R1)
PI   = Number (_PI)
E    = Number (SymConst (_R1, 'exp', (1,)))
PHI  = Number (SymConst (_R1, '^', ((1 + math.sqrt (5)) / 2, 1)))
