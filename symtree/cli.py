# Command line front end: parse, simplify, differentiate and evaluate expressions given as arguments or on stdin.

import getopt
import os
import sys
import time
import traceback

from . import sparser, ssimp, seval, sdiff, sym
from .stree import ParseError

_VERSION = '1.0.0'

_HELP    = f'usage: symtree [options] [expression ...]' '''

  -h, --help                 - Show help information
  -v, --version              - Show version string
  -d, --debug                - Dump debug info to stderr
  -s, --simplify             - Run global simplification on the parsed tree
  -p, --py                   - Also print the expression as SymPy sees it
  -x VAR, --diff=VAR         - Differentiate with respect to VAR, repeat for higher derivatives
  -e BINDS, --eval=BINDS     - Evaluate with bindings given as "x=1,y=2i"
  -a VARS, --allow=VARS      - Only allow the variables named in VARS, e.g. "xy"
  --exact, --noexact         - Read decimal literals as exact rationals or as floats
  --peephole, --nopeephole   - Cancel adjacent inverse function pairs while parsing

Expressions are read one per line from stdin if none are given on the command line.
'''.lstrip ()

_MONTHS  = ('', 'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
_DEBUG   = bool (os.environ.get ('SYMTREE_DEBUG'))

def log_message (msg):
	y, m, d, hh, mm, ss, _, _, _ = time.localtime (time.time ())

	sys.stderr.write (f'[{"%02d/%3s/%04d %02d:%02d:%02d" % (d, _MONTHS [m], y, hh, mm, ss)}] {msg}\n')

def _parse_bindings (text): # "x=1,y=2" -> {'x': Number, ...}
	bindings = {}

	for bind in filter (None, (s.strip () for s in text.split (','))):
		var, eq, expr = bind.partition ('=')
		var           = var.strip ()

		if not eq or len (var) != 1 or not var.isalpha ():
			raise ValueError (f'invalid binding {bind!r}')

		bindings [var] = seval.evaluate (sparser.parse (expr))

	return bindings

def _process (text, opts):
	tree = sparser.parse (text, opts ['allow'])

	if opts ['simplify']:
		tree = ssimp.simplify (tree)

	if _DEBUG:
		log_message (f'tree: {tree!r}')

	print (sym.to_display_string (tree))

	if opts ['py']:
		print (sym.tree2spt (tree))

	for var in opts ['diff']:
		tree = sdiff.differentiate (tree, var)

		if opts ['simplify']:
			tree = ssimp.simplify (tree)

		print (sym.to_display_string (tree))

	if opts ['eval'] is not None:
		print (seval.evaluate (tree, opts ['eval']))

def main (argv = None):
	global _DEBUG

	try:
		opts, args = getopt.getopt (sys.argv [1:] if argv is None else argv, 'hvdspx:e:a:',
				['help', 'version', 'debug', 'simplify', 'py', 'diff=', 'eval=', 'allow=', 'exact', 'noexact', 'peephole', 'nopeephole'])
	except getopt.GetoptError as e:
		sys.stderr.write (f'{e}\n\n{_HELP}')

		return 2

	state = {'simplify': False, 'py': False, 'diff': [], 'eval': None, 'allow': None}

	for opt, arg in opts:
		if opt in ('-h', '--help'):
			print (_HELP)

			return 0

		if opt in ('-v', '--version'):
			print (_VERSION)

			return 0

		if opt in ('-d', '--debug'):
			_DEBUG = True

			sparser.set_debug (True)

		elif opt in ('-s', '--simplify'):
			state ['simplify'] = True
		elif opt in ('-p', '--py'):
			state ['py'] = True
		elif opt in ('-x', '--diff'):
			state ['diff'].append (arg)
		elif opt in ('-a', '--allow'):
			state ['allow'] = arg
		elif opt in ('--exact', '--noexact'):
			sparser.set_exact (opt == '--exact')
		elif opt in ('--peephole', '--nopeephole'):
			sparser.set_peephole (opt == '--peephole')

	try:
		for opt, arg in opts: # after --exact and friends so the bindings parse the same way as the expressions
			if opt in ('-e', '--eval'):
				state ['eval'] = _parse_bindings (arg)

	except (ValueError, NameError, ArithmeticError, ParseError) as e:
		log_message (f'error: {e}')

		return 2

	lines  = args if args else (line.strip () for line in sys.stdin)
	status = 0

	for text in lines:
		if not text:
			continue

		try:
			_process (text, state)

		except Exception:
			etype, exc, tb = sys.exc_info ()

			log_message (f'error: {etype.__name__}: {exc}')

			if _DEBUG:
				sys.stderr.write (''.join (traceback.format_exception (etype, exc, tb)))

			status = 1

	return status
