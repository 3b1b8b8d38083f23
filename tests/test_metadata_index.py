"""Tests for the metadata index."""

from model_builders import make_index, member_raw, type_raw


def _index(**kwargs):
    return make_index(
        type_raw("com.example.Derived", superclass="com.example.Base", interfaces=("com.example.Shape",)),
        type_raw("com.example.Base"),
        type_raw("com.example.Shape", "interface"),
        type_raw("com.example.Hidden", access="package"),
        type_raw("com.example.Hidden.Impl", parent="com.example.Hidden"),
        member_raw("com.example.Derived.run()", overrides=("com.example.Base.run()", "com.example.Gone.run()")),
        member_raw("com.example.Base.run()"),
        member_raw("com.example.Base.help()", access="protected"),
        **kwargs,
    )


def test_get_base_class() -> None:
    """Verify that the immediate base class is correctly identified."""
    idx = _index()
    assert idx.get_base_class("com.example.Derived") == "com.example.Base"
    assert idx.get_base_class("com.example.Base") is None
    assert idx.get_base_class("Unknown") is None


def test_get_interfaces() -> None:
    """Verify that implemented interfaces are correctly retrieved."""
    idx = _index()
    assert idx.get_interfaces("com.example.Derived") == ["com.example.Shape"]
    assert idx.get_interfaces("com.example.Base") == []
    assert idx.get_interfaces("Unknown") == []


def test_members_in_source_order() -> None:
    """Verify that members are listed in declaration order."""
    idx = _index()
    base = idx.get("com.example.Base")
    assert [m.name for m in idx.members_of(base)] == ["run", "help"]


def test_overridden_methods_skip_missing() -> None:
    """Verify that overridden methods outside the model are skipped."""
    idx = _index()
    run = idx.get("com.example.Derived.run()")
    assert [m.uid for m in idx.overridden_methods(run)] == ["com.example.Base.run()"]


def test_effective_access_of_nested_type() -> None:
    """Verify that a public type inside a package-private one is package-private."""
    idx = _index()
    impl = idx.get("com.example.Hidden.Impl")
    assert idx.is_public(impl)
    assert idx.effective_access(impl) == "package"
    assert idx.is_package_private(impl)
    assert not idx.is_linkable(impl)


def test_linkable_external() -> None:
    """Verify that configured external types are linkable."""
    idx = _index(linkable_external=["com.example.Hidden"])
    assert idx.is_linkable(idx.get("com.example.Hidden"))
    assert not idx.is_linkable(idx.get("com.example.Hidden.Impl"))


def test_documented_types_follow_min_access() -> None:
    """Verify that the access threshold decides which types get pages."""
    uids = {t.uid for t in _index().documented_types()}
    assert uids == {"com.example.Derived", "com.example.Base", "com.example.Shape"}

    uids = {t.uid for t in _index(min_access="package").documented_types()}
    assert {"com.example.Hidden", "com.example.Hidden.Impl"} <= uids
