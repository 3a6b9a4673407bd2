# Named function of declared variables wrapping a parsed tree.

from .stree import IncompleteBindingError
from .sparser import parse
from .seval import evaluate
from .sdiff import differentiate
from .sym import tree2nat

class Function:
	def __init__ (self, name, variables, expr):
		self.name      = name
		self.variables = tuple (variables)
		self.tree      = parse (expr, self.variables) if isinstance (expr, str) else expr

	def __repr__ (self):
		return f'Function ({self.name!r}, {self.variables!r}, {tree2nat (self.tree)!r})'

	def __str__ (self):
		return f'{self.name}({", ".join (self.variables)}) = {tree2nat (self.tree)}'

	def of (self, *args, **kw): # positional values bind the declared variables in order
		if len (args) > len (self.variables):
			raise TypeError (f'{self.name} takes {len (self.variables)} arguments, {len (args)} given')

		bindings = dict (zip (self.variables, args))

		bindings.update (kw)

		for var in self.variables:
			if var not in bindings:
				raise IncompleteBindingError (var)

		return evaluate (self.tree, bindings)

	__call__ = of

	def derive (self, var = None):
		if var is None:
			var = self.variables [0]

		return Function (f"{self.name}'", self.variables, differentiate (self.tree, var))
