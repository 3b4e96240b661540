"""COFFEEMAKER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.

General guidance
- Keep tests fast and deterministic; the library performs no I/O.
- Fixtures hand out fresh recipes and books per test; never share state.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit (added automatically under unit/), property
"""
