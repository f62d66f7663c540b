"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    from klaw_outcome import AsyncOutcome, Failure, Helpers, Nothing, Outcome, Some, Success

    assert Success is not None
    assert Failure is not None
    assert Outcome is not None
    assert AsyncOutcome is not None
    assert Helpers is not None
    assert Some is not None
    assert Nothing is not None


def test_import_decorators():
    from klaw_outcome import lazy, safe

    assert safe is not None
    assert lazy is not None


def test_import_async_collections():
    from klaw_outcome.async_ import all_, errs, oks, sequence

    assert all_ is not None
    assert errs is not None
    assert oks is not None
    assert sequence is not None


def test_all_exports_resolve():
    import klaw_outcome

    for name in klaw_outcome.__all__:
        assert hasattr(klaw_outcome, name), name
