"""SUNDRY test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``sundry`` command invoked through Click's test runner.

General guidance
- Keep unit tests deterministic: pass ``now=`` explicitly instead of reading the clock.
- Host capabilities are exercised through the in-memory adapters, never mocks.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
