"""The ``unittutor`` command-line interface."""
