#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "symtree",
  version                       = "1.0.0",
  license                       = 'BSD',
  keywords                      = "Math CAS symbolic differentiation simplification",
  description                   = "Symbolic algebra on expression trees with exact rational, symbolic constant and complex arithmetic",
  long_description              = "SymTree parses infix expressions over single letter variables into trees which combine like terms as they are built. "
    "Numbers are exact rationals, symbolic constants such as pi and ln(2), or floats, in real and complex form. "
    "Trees can be simplified, differentiated, evaluated under variable bindings, printed back as native text or converted to and from SymPy.",
  long_description_content_type = "text/plain",
  packages                      = ['symtree'],
  scripts                       = ['bin/symtree'],
  classifiers                   = [
    'Intended Audience :: Education',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4'],
  extras_require                = {'test': ['pytest']},
  python_requires               = '>=3.6',
)
