# Tokenizes text and builds a simplified tree with an operator precedence parser, terms are combined on each reduction.

import os
import sys

from .svalue import Rational, Float
from .snumber import Number, I, PI, E, PHI
from .stree import Op, VariableNotAllowedError, ParseError, num_leaf, var_leaf
from . import ssimp

_EXACT    = True # decimal literals are exact rationals, else floats
_PEEPHOLE = True # cancel inverse function pairs while parsing
_DEBUG    = os.environ.get ('SYMTREE_DEBUG')

_NEG      = Op ('-', 'NEG', 2, 1) # prefix negation, lives only on the parser stack
_CONSTS   = {'e': E, 'π': PI, 'φ': PHI, 'i': I}
_SINGLES  = '+-*/^!()='

def set_exact (state):
	global _EXACT
	_EXACT = state

def set_peephole (state):
	global _PEEPHOLE
	_PEEPHOLE = state

def set_debug (state):
	global _DEBUG
	_DEBUG = state

def _literal (text, neg, pos):
	if text.count ('.') > 1 or text == '.':
		raise ParseError (f'invalid number {text!r} at position {pos}')

	if _EXACT:
		whole, _, frac = text.partition ('.')
		den            = 10 ** len (frac)
		val            = Rational.make (int (whole or '0') * den + int (frac or '0'), den)
	else:
		val            = Float (float (text))

	return Number (val.neg () if neg else val)

#...............................................................................................
class Token (str):
	__slots__ = ['kind', 'val', 'pos']

	def __new__ (cls, str_, kind, val = None, pos = None): # kind = 'NUM', 'VAR', 'CONST', 'OP' or 'NEG'
		self      = str.__new__ (cls, str_)
		self.kind = kind
		self.val  = val
		self.pos  = pos

		return self

	def __repr__ (self):
		return f'{self.kind}:{str (self)}'

	is_operand = property (lambda self: self.kind in {'NUM', 'VAR', 'CONST'})
	is_func    = property (lambda self: self.kind == 'OP' and self.val.is_func)
	ends_term  = property (lambda self: self.is_operand or (self.kind == 'OP' and self in {')', '!'})) # may be followed by implicit '*'

class Parser:
	def __init__ (self, allowed = None): # allowed = iterable of variable names or None for any
		self.allowed = None if allowed is None else frozenset (allowed)

	def _peephole (self, toks): # f f^-1 -> nothing
		if len (toks) >= 2 and toks [-2].is_func and toks [-2].val.inv is toks [-1].val:
			del toks [-2:]

	def tokenize (self, text):
		text  = ''.join (text.split ())
		toks  = []
		depth = 0
		i     = 0

		while i < len (text):
			c    = text [i]
			prev = toks [-1] if toks else None

			if c == '-' and not (prev and prev.ends_term):
				if i + 1 < len (text) and (text [i + 1].isdigit () or text [i + 1] == '.'):
					j = i + 1

					while j < len (text) and (text [j].isdigit () or text [j] == '.'):
						j += 1

					toks.append (Token (text [i : j], 'NUM', _literal (text [i + 1 : j], True, i), i))

					i = j

				else:
					toks.append (Token ('-', 'NEG', _NEG, i))

					i += 1

				continue

			if c.isdigit () or c == '.':
				j = i

				while j < len (text) and (text [j].isdigit () or text [j] == '.'):
					j += 1

				toks.append (Token (text [i : j], 'NUM', _literal (text [i : j], False, i), i))

				i = j

				continue

			if c in _SINGLES:
				if c == '(':
					depth += 1

				elif c == ')':
					if not depth:
						raise ParseError (f'unbalanced parentheses at position {i}')

					depth -= 1

				toks.append (Token (c, 'OP', Op.BY_SYMBOL [c], i))

				i += 1

				continue

			if not c.isalpha ():
				raise ParseError (f'unexpected character {c!r} at position {i}')

			for name in Op.NAMES:
				if text.startswith (name, i):
					toks.append (Token (name, 'OP', Op.BY_SYMBOL [name], i))

					if _PEEPHOLE:
						self._peephole (toks)

					i += len (name)

					break

			else:
				if c in _CONSTS:
					toks.append (Token (c, 'CONST', _CONSTS [c], i))

				else:
					if self.allowed is not None and c not in self.allowed:
						raise VariableNotAllowedError (c)

					toks.append (Token (c, 'VAR', c, i))

				i += 1

		return toks

	#...............................................................................................
	def _reduce (self, nodes, ops):
		op = ops.pop ()

		if len (nodes) < (2 if op.arity == 2 else 1):
			raise ParseError (f'missing operand for {op!r}')

		if op is _NEG:
			nodes.append (ssimp.negate (nodes.pop ()))

		elif op.arity == 1:
			arg = nodes.pop ()

			if op is Op.FAC:
				nodes.append (ssimp.combine (op, arg, None))
			elif _PEEPHOLE and arg.is_oper and arg.op is op.inv: # f (f^-1 (u)) -> u, only when f^-1 spans the whole argument
				nodes.append (arg.right)
			else:
				nodes.append (ssimp.combine (op, None, arg))

		else:
			r = nodes.pop ()
			l = nodes.pop ()

			nodes.append (ssimp.combine (op, l, r))

	def _push (self, op, nodes, ops): # binary or postfix operator, reduce what binds at least as tightly first
		while ops and ops [-1] is not Op.OPR and ops [-1].prec >= op.prec and not (op is Op.POW and ops [-1] is Op.POW):
			self._reduce (nodes, ops)

		ops.append (op)

	def parse (self, text):
		toks  = self.tokenize (text)
		nodes = []
		ops   = []
		prev  = None

		if not toks:
			raise ParseError ('empty expression')

		for tok in toks:
			implicit = prev is not None and prev.ends_term

			if tok.is_operand:
				if implicit:
					self._push (Op.MUL, nodes, ops)

				nodes.append (var_leaf (tok.val) if tok.kind == 'VAR' else num_leaf (tok.val))

			elif tok.kind == 'NEG':
				ops.append (_NEG)

			elif tok == '(' or tok.is_func:
				if implicit:
					self._push (Op.MUL, nodes, ops)

				ops.append (tok.val) # prefix, never reduces on push

			elif not implicit:
				raise ParseError (f'missing operand before {str (tok)!r} at position {tok.pos}')

			elif tok == ')':
				while ops [-1] is not Op.OPR:
					self._reduce (nodes, ops)

				ops.pop ()

			else:
				self._push (tok.val, nodes, ops)

			prev = tok

		if not prev.ends_term:
			raise ParseError ('missing operand at end of expression')

		while ops:
			if ops [-1] is Op.OPR: # close unclosed '('
				ops.pop ()
			else:
				self._reduce (nodes, ops)

		if len (nodes) != 1:
			raise ParseError ('malformed expression')

		if _DEBUG:
			print ('parse:', repr (nodes [0]), file = sys.stderr)

		return nodes [0]

def parse (text, allowed = None):
	return Parser (allowed).parse (text)

if __name__ == '__main__': # DEBUG!
	p = Parser ()
	t = p.tokenize ('ln(e^x) + 3sin x')
	print (t)
	print (p.parse ('3x^2 + 5 - 20 + 4x^2'))
