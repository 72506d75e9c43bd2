"""
Payroll Core

Deterministic payroll calculation engine: gross pay, social contributions,
net pay, employer cost, paid leave and annual cumulation.
"""

__version__ = "1.0.0"
