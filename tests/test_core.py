import core


def test_facade_exports_resolve():
    for name in core.__all__:
        assert getattr(core, name) is not None


def test_facade_builds_sessions():
    session = core.get_session(2, "D")
    assert session.title == "Pull + Core + Light"
    assert core.exercise_title(session.items[1].exercise_id) == "Table row (inverted row)"
