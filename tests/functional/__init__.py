"""Functional tests.

Purpose
- Exercise the ``unittutor`` command the way a user runs it (via
  ``click.testing.CliRunner``) and check the shipped lesson documents.

Guidelines
- Assert user-observable results: output, exit codes, files written.
- Minimal mocking; build document trees with the ``make_docs`` fixture.
"""
