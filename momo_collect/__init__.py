"""
momo-collect - Mobile Money Collection Client

A command-line client that submits a mobile-money collection request
to a payment gateway and polls the transaction until it settles.
"""

__version__ = "0.1.0"
