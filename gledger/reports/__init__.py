"""
Reporting module for GLEDGER.

Provides text, CSV and JSON renderings of account balances and of
per-account posting histories.
"""
