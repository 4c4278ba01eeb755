"""UNITTUTOR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested at the CLI boundary, including a
                  full check of the shipped lesson documents.

General guidance
- Keep unit fast and deterministic; documents under test are written to
  ``tmp_path`` by the ``make_docs`` fixture.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
