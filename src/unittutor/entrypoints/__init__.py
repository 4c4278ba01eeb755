"""Entrypoints (inbound adapters) for UNITTUTOR.

Expose the checker and lesson catalog on the command line. Parse and validate
inputs, call `unittutor.doccheck`, and present results.
"""
