"""cas2trn: CSV account statement to transactions.

Translates financial transactions from an arbitrary, configured CSV layout to
one canonical CSV layout.
"""

__version__ = "0.1.0"
