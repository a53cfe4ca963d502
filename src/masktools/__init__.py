"""Hashcat-style mask tooling for password-candidate research.

The package converts literal text into class-token masks, scores masks and
recombines tokens into masked templates.  The command line interface lives in
:mod:`masktools.cli`; the building blocks are importable on their own.
"""

__version__ = "0.1.0"
