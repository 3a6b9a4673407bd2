# Scalar values: exact rational, floating point and symbolic constant representations.
#
# Rational (num, den)          - exact fraction, escapes to Float when either part grows past _INT_LIMIT
# Float (v)                    - double, magnitudes below _FLOAT_EPS snap to zero
# SymConst (mult, '^', (a, b)) - mult * a ^ b
# SymConst (mult, 'ln', (a,))  - mult * ln (a)
# SymConst (mult, 'exp', (a,)) - mult * e ^ a

import math

_TOLERANCE = 1e-7 # relative error below which two values compare equal
_FLOAT_EPS = 1e-9 # floats smaller in magnitude than this are zero
_INT_LIMIT = 2 ** 53 # largest numerator or denominator a Rational may carry
_POW_LIMIT = 256 # largest bit length of an exact integer power

class DivideByZeroError (ZeroDivisionError): pass # undefined quotient, 0/0 or inf/inf
class IncompatibleOperandsError (TypeError): pass # operands which can not be combined by the requested operation

def set_tolerance (tol):
	global _TOLERANCE
	_TOLERANCE = tol

def approx_eq (a, b): # a, b are floats
	if a == b:
		return True

	if not (math.isfinite (a) and math.isfinite (b)):
		return False

	d = abs (a - b)

	return d < _FLOAT_EPS or d < _TOLERANCE * max (abs (a), abs (b))

def _ratio (n, d): # big int true division without OverflowError
	try:
		return n / d
	except OverflowError:
		return math.copysign (math.inf, n) * (1 if d > 0 else -1)

def _fpow (x, y):
	if x < 0 and not float (y).is_integer ():
		if approx_eq (y, 1 / 3):
			return -((-x) ** (1 / 3))

		return math.nan

	try:
		return x ** y
	except OverflowError:
		return math.inf if x > 0 or float (y) % 2 == 0 else -math.inf
	except ZeroDivisionError:
		return math.inf

def _fmt (v): # float -> text
	if math.isnan (v):
		return 'nan'
	if math.isinf (v):
		return 'inf' if v > 0 else '-inf'
	if v.is_integer () and abs (v) < 1e16:
		return str (int (v))

	text = '%.15g' % v

	if 'e' not in text:
		return text

	mant, exp      = text.split ('e') # exponent notation would read back as the constant e
	sign           = '-' if mant [0] == '-' else ''
	whole, _, frac = mant.lstrip ('-').partition ('.')
	digits         = whole + frac
	point          = len (whole) + int (exp)

	if point <= 0:
		return f'{sign}0.{"0" * -point}{digits}'
	if point >= len (digits):
		return f'{sign}{digits}{"0" * (point - len (digits))}'

	return f'{sign}{digits [:point]}.{digits [point:]}'

_NAMED = ((math.pi, 'π'), (math.e, 'e'), ((1 + math.sqrt (5)) / 2, 'φ'))

def _fmt_base (v):
	for c, s in _NAMED:
		if approx_eq (v, c):
			return s

	return _fmt (v)

#...............................................................................................
class Value:
	__slots__ = ()
	__hash__  = None

	@staticmethod
	def of (v):
		if isinstance (v, Value):
			return v
		if isinstance (v, bool):
			return Rational (int (v))
		if isinstance (v, int):
			return Rational (v)
		if isinstance (v, float):
			return Float (v)

		raise TypeError (f'can not make a Value from {type (v).__name__!r}')

	def __eq__ (self, other):
		if isinstance (other, (int, float)):
			other = Value.of (other)
		elif not isinstance (other, Value):
			return NotImplemented

		return self._eq (other)

	def _eq (self, other):
		return approx_eq (self.dbl (), other.dbl ())

	def __float__ (self):
		return self.dbl ()

	def __repr__ (self):
		return f'{self.__class__.__name__} ({str (self)!r})'

	__neg__     = lambda self: self.neg ()
	__abs__     = lambda self: self.abs ()
	__add__     = lambda self, other: self.add (other)
	__radd__    = lambda self, other: Value.of (other).add (self)
	__sub__     = lambda self, other: self.sub (other)
	__rsub__    = lambda self, other: Value.of (other).sub (self)
	__mul__     = lambda self, other: self.mul (other)
	__rmul__    = lambda self, other: Value.of (other).mul (self)
	__truediv__ = lambda self, other: self.div (other)
	__pow__     = lambda self, other: self.pow (other)

	is_zero     = property (lambda self: self.dbl () == 0)
	is_finite   = property (lambda self: math.isfinite (self.dbl ()))
	is_int      = property (lambda self: self.dbl ().is_integer ())

	def sgn (self):
		v = self.dbl ()

		return (v > 0) - (v < 0)

	def compare (self, other):
		other = Value.of (other)

		return 0 if self == other else -1 if self.dbl () < other.dbl () else 1

	def abs (self):
		return self.neg () if self.sgn () < 0 else self

	def sub (self, other):
		return self.add (Value.of (other).neg ())

	def add (self, other):
		a, b = self, Value.of (other)

		if a.__class__ is Rational and b.__class__ is Rational:
			return Rational.make (a.num * b.den + b.num * a.den, a.den * b.den)

		if b.is_zero and a.is_finite:
			return a
		if a.is_zero and b.is_finite:
			return b

		if a.__class__ is SymConst and b.__class__ is SymConst:
			res = a._add_const (b)

			if res is not None:
				return res

		return Float (a.dbl () + b.dbl ())

	def mul (self, other):
		a, b = self, Value.of (other)

		if (a.__class__ is Rational and a.num == 0) or (b.__class__ is Rational and b.num == 0): # exact zero, even against inf
			return Rational (0)

		if a.__class__ is Rational and b.__class__ is Rational:
			return Rational.make (a.num * b.num, a.den * b.den)

		if a.__class__ is SymConst:
			if b.__class__ is not SymConst:
				return a.scale (b)

			res = a._mul_const (b, 1)

			if res is not None:
				return res

		elif b.__class__ is SymConst:
			return b.scale (a)

		return Float (a.dbl () * b.dbl ())

	def div (self, other):
		a, b = self, Value.of (other)

		if b.dbl () == 0:
			raise DivideByZeroError ('division by zero')

		if a.__class__ is Rational and b.__class__ is Rational:
			return Rational.make (a.num * b.den, a.den * b.num)

		if a.__class__ is SymConst:
			if b.__class__ is not SymConst:
				return a.scale (b.inv ())

			res = a._mul_const (b, -1)

			if res is not None:
				return res

		elif b.__class__ is SymConst:
			inv = b.inv ()

			if inv.__class__ is SymConst:
				return inv.scale (a)

		return Float (a.dbl () / b.dbl ())

	def inv (self):
		return Rational (1).div (self)

	def pow (self, other):
		a, b = self, Value.of (other)

		if b.is_zero:
			return Rational (1)

		if a.__class__ is Rational:
			res = a._pow_rat (b)

			if res is not None:
				return res

		elif a.__class__ is SymConst and b.__class__ is not SymConst:
			res = a._pow_plain (b)

			if res is not None:
				return res

		if a.is_zero and b.sgn () < 0:
			raise DivideByZeroError ('zero raised to a negative power')

		return Float (_fpow (a.dbl (), b.dbl ()))

#...............................................................................................
class Rational (Value):
	__slots__ = ('num', 'den')

	def __init__ (self, num, den = 1):
		if den == 0:
			raise DivideByZeroError ('zero denominator')

		self.num = int (num)
		self.den = int (den)

	@staticmethod
	def make (num, den): # reduced result of arithmetic, Float if too wide
		if den == 0:
			raise DivideByZeroError ('division by zero')

		g = math.gcd (num, den)

		if den < 0:
			g = -g

		num, den = num // g, den // g

		if abs (num) > _INT_LIMIT or den > _INT_LIMIT:
			return Float (_ratio (num, den))

		return Rational (num, den)

	def reduce (self):
		return Rational.make (self.num, self.den)

	def __str__ (self):
		r = self.reduce ()

		if r.__class__ is not Rational:
			return str (r)

		return str (r.num) if r.den == 1 else f'{r.num}/{r.den}'

	def _eq (self, other):
		if other.__class__ is Rational:
			return self.num * other.den == other.num * self.den

		return Value._eq (self, other)

	is_zero = property (lambda self: self.num == 0)
	is_int  = property (lambda self: self.num % self.den == 0)

	def dbl (self):
		return _ratio (self.num, self.den)

	def sgn (self):
		s = (self.num > 0) - (self.num < 0)

		return s if self.den > 0 else -s

	def neg (self):
		return Rational (-self.num, self.den)

	def _pow_rat (self, b):
		if b.__class__ is not Rational:
			return None

		b = b.reduce ()

		if b.den == 1:
			n = abs (b.num)

			if n * max (self.num.bit_length (), self.den.bit_length ()) > _POW_LIMIT:
				return None

			if b.num < 0:
				if self.num == 0:
					raise DivideByZeroError ('zero raised to a negative power')

				return Rational.make (self.den ** n, self.num ** n)

			return Rational.make (self.num ** n, self.den ** n)

		if self.sgn () < 0:
			return None

		r      = self.reduce ()
		sn, sd = _iroot (r.num, b.den), _iroot (r.den, b.den)

		if sn is not None and sd is not None: # exact root
			return Rational (sn, sd).pow (Rational (b.num))

		if b.den == 2: # symbolic square root
			return _const (Rational (1), '^', (r.dbl (), b.dbl ()))

		return None

def _iroot (n, k): # exact integer k-th root of n >= 0 or None
	if n < 2:
		return n

	r = round (n ** (1 / k)) if n.bit_length () < 1000 else None

	if r is None:
		return None

	for c in (r - 1, r, r + 1):
		if c >= 0 and c ** k == n:
			return c

	return None

#...............................................................................................
class Float (Value):
	__slots__ = ('v',)

	def __init__ (self, v):
		v      = float (v)
		self.v = 0. if abs (v) < _FLOAT_EPS else v

	def __str__ (self):
		return _fmt (self.v)

	def dbl (self):
		return self.v

	def neg (self):
		return Float (-self.v)

	def as_rational (self): # Stern-Brocot walk taken a full run at a time (continued fraction convergents)
		v = self.v

		if not math.isfinite (v):
			return None

		x, h0, h1, k0, k1 = abs (v), 0, 1, 1, 0

		for _ in range (30):
			a      = math.floor (x)
			h0, h1 = h1, a * h1 + h0
			k0, k1 = k1, a * k1 + k0

			if approx_eq (h1 / k1, abs (v)) or x == a:
				break

			x = 1 / (x - a)

		return Rational.make (h1 if v >= 0 else -h1, k1)

#...............................................................................................
class SymConst (Value):
	__slots__ = ('mult', 'op', 'args')

	def __init__ (self, mult, op, args):
		self.mult = _plain (Value.of (mult))
		self.op   = op
		self.args = tuple (float (a) for a in args)

	def __str__ (self):
		if self.op == '^':
			base, exp = self.args
			core      = _fmt_base (base) if exp == 1 else f'{_fmt_base (base)}^{_fmt (exp)}'
		elif self.op == 'ln':
			core      = f'ln({_fmt (self.args [0])})'
		else: # 'exp'
			core      = 'e' if self.args [0] == 1 else f'e^{_fmt (self.args [0])}'

		m = self.mult

		if m == 1:
			return core
		if m == -1:
			return f'-{core}'

		if m.__class__ is Rational and not m.is_int:
			r   = m.reduce ()
			num = '' if r.num == 1 else '-' if r.num == -1 else f'{r.num}*' if core [:1].isdigit () else str (r.num)

			return f'{num}{core}/{r.den}'

		return f'{m}*{core}' if core [:1].isdigit () else f'{m}{core}'

	def _eq (self, other):
		if other.__class__ is SymConst and self.op == other.op and self._same_args (other):
			return self.mult == other.mult

		return Value._eq (self, other)

	def _same_args (self, other):
		return all (approx_eq (a, b) for a, b in zip (self.args, other.args))

	def dbl (self):
		m = self.mult.dbl ()

		if self.op == '^':
			return m * _fpow (*self.args)
		elif self.op == 'ln':
			return m * (math.log (self.args [0]) if self.args [0] > 0 else -math.inf if self.args [0] == 0 else math.nan)

		try:
			return m * math.exp (self.args [0])
		except OverflowError:
			return math.copysign (math.inf, m)

	def neg (self):
		return _const (self.mult.neg (), self.op, self.args)

	def scale (self, v):
		return _const (self.mult.mul (v), self.op, self.args)

	def inv (self):
		if self.op == '^':
			return _const (self.mult.inv (), '^', (self.args [0], -self.args [1]))
		elif self.op == 'exp':
			return _const (self.mult.inv (), 'exp', (-self.args [0],))

		return Float (1 / self.dbl ())

	def _add_const (self, other):
		if self.op == other.op and self._same_args (other):
			return _const (self.mult.add (other.mult), self.op, self.args)

		if self.op == other.op == 'ln' and self.mult.abs () == other.mult.abs (): # m ln a +- m ln b = m ln (a * b or a / b)
			a, b = self.args [0], other.args [0]

			return _const (self.mult, 'ln', (a * b if self.mult == other.mult else a / b,))

		return None

	def _mul_const (self, other, sign): # sign 1 multiplies, -1 divides
		mult = self.mult.mul (other.mult) if sign > 0 else self.mult.div (other.mult)

		if self.op == other.op == 'exp':
			return _const (mult, 'exp', (self.args [0] + sign * other.args [0],))

		if self.op == other.op == '^' and approx_eq (self.args [0], other.args [0]):
			return _const (mult, '^', (self.args [0], self.args [1] + sign * other.args [1]))

		if sign < 0 and self.op == other.op == 'ln' and self._same_args (other):
			return mult

		return None

	def _pow_plain (self, b):
		if self.op == 'ln' or not b.is_finite:
			return None

		mult = _plain (self.mult.pow (b))

		if self.op == '^':
			return _const (mult, '^', (self.args [0], self.args [1] * b.dbl ()))

		return _const (mult, 'exp', (self.args [0] * b.dbl (),))

def _plain (v): # multiplier of a SymConst is always Rational or Float
	return v if v.__class__ in (Rational, Float) else Float (v.dbl ())

def _const (mult, op, args): # SymConst or the simpler Value it collapses to
	mult = _plain (Value.of (mult))

	if mult.is_zero:
		return Rational (0)

	if op == '^':
		base, exp = (float (a) for a in args)

		if exp == 0 or base == 1:
			return mult

		if exp.is_integer () and not any (approx_eq (base, c) for c, _ in _NAMED):
			rat = Float (base).as_rational ()

			if rat is not None and rat.__class__ is Rational and rat.dbl () == base and \
					abs (exp) * max (rat.num.bit_length (), rat.den.bit_length ()) <= _POW_LIMIT:
				return mult.mul (rat.pow (Rational (int (exp))))

	elif op == 'exp':
		if args [0] == 0:
			return mult

	elif op == 'ln':
		if args [0] == 1:
			return Rational (0)
		if approx_eq (args [0], math.e):
			return mult

	return SymConst (mult, op, args)

if __name__ == '__main__': # DEBUG!
	print (Rational (2).pow (Rational (1, 2)).mul (Rational (1, 2)))
