"""Tests for the member summary builder entry point."""

import pytest

from member_summary.build_link_targets import build_link_targets
from member_summary.member_kind import MemberKind
from member_summary.member_summary_builder import (
    ANNOTATION_TYPE,
    GENERAL_TYPE,
    MemberSummaryBuilder,
)
from member_summary.naming_convention import NamingConvention
from member_summary.summary_writer import MarkdownSummaryWriter, SummaryWriterFactory

from model_builders import make_comments, make_index, member_raw, type_raw


def _builder(index, uid="com.example.Widget", **kwargs):
    comments = make_comments()
    factory = SummaryWriterFactory(
        index, build_link_targets(index, "/api"), comments, NamingConvention()
    )
    return MemberSummaryBuilder.get_instance(index.get(uid), index, comments, factory, **kwargs)


def _widget_index():
    return make_index(
        type_raw("com.example.Widget", superclass="com.example.Base"),
        type_raw("com.example.Widget.Part", parent="com.example.Widget"),
        type_raw("com.example.Base"),
        member_raw("com.example.Widget.count", "field", returns="int"),
        member_raw("com.example.Widget.Widget()", "constructor"),
        member_raw("com.example.Widget.xProperty()", returns="DoubleProperty"),
        member_raw("com.example.Widget.getX()", returns="double"),
        member_raw("com.example.Base.NAME", "field", returns="String"),
    )


def test_heading_order() -> None:
    """Verify that sections follow the fixed kind order."""
    tree: list[str] = []
    _builder(_widget_index()).build(tree)
    headings = [line for line in tree if line.startswith("## ")]
    assert headings == [
        "## Property Summary",
        "## Nested Class Summary",
        "## Field Summary",
        "## Constructor Summary",
        "## Method Summary",
    ]


def test_build_returns_row_groups() -> None:
    """Verify the row groups returned by a build."""
    groups = _builder(_widget_index()).build([])
    assert [(g.kind, g.origin.name, g.inherited) for g in groups] == [
        (MemberKind.PROPERTIES, "Widget", False),
        (MemberKind.NESTED_TYPES, "Widget", False),
        (MemberKind.FIELDS, "Widget", False),
        (MemberKind.FIELDS, "Base", True),
        (MemberKind.CONSTRUCTORS, "Widget", False),
        (MemberKind.METHODS, "Widget", False),
    ]


def test_variant_selection() -> None:
    """Verify that annotation types use the annotation variant."""
    index = make_index(
        type_raw("com.example.Widget"),
        type_raw("com.example.Marker", "annotation"),
    )
    assert _builder(index).variant is GENERAL_TYPE
    assert _builder(index, "com.example.Marker").variant is ANNOTATION_TYPE


def test_annotation_headings() -> None:
    """Verify the sections of an annotation type."""
    index = make_index(
        type_raw("com.example.Marker", "annotation"),
        member_raw("com.example.Marker.value()", "annotation_element", returns="String"),
        member_raw("com.example.Marker.level()", "annotation_element", returns="int", default="1"),
    )
    builder = _builder(index, "com.example.Marker")
    assert builder.has_members_to_document()

    tree: list[str] = []
    builder.build(tree)
    assert [line for line in tree if line.startswith("## ")] == [
        "## Required Element Summary",
        "## Optional Element Summary",
    ]
    assert "| Modifier and Type | Required Element | Description |" in tree[2]


def test_annotation_without_elements() -> None:
    """Verify that an annotation with only constants has nothing to document."""
    index = make_index(
        type_raw("com.example.Marker", "annotation"),
        member_raw("com.example.Marker.NAME", "field", returns="String"),
    )
    assert not _builder(index, "com.example.Marker").has_members_to_document()


def test_member_summary_writers() -> None:
    """Verify writers exist only for kinds with visible members."""
    builder = _builder(_widget_index())
    assert isinstance(builder.get_member_summary_writer(MemberKind.METHODS), MarkdownSummaryWriter)
    assert builder.get_member_summary_writer(MemberKind.ENUM_CONSTANTS) is None


def test_member_summary_writer_rejects_other_keys() -> None:
    """Verify that only MemberKind values are accepted."""
    builder = _builder(_widget_index())
    with pytest.raises(KeyError):
        builder.get_member_summary_writer("methods")


def test_members_and_table() -> None:
    """Verify the per-kind member queries."""
    builder = _builder(_widget_index())
    assert [m.name for m in builder.members(MemberKind.FIELDS)] == ["count"]
    assert builder.has_members(MemberKind.CONSTRUCTORS)
    assert not builder.has_members(MemberKind.ENUM_CONSTANTS)
    assert builder.get_visible_member_table().type_elem.name == "Widget"


def test_empty_type() -> None:
    """Verify that a type without members has nothing to document."""
    index = make_index(type_raw("com.example.Widget"))
    builder = _builder(index)
    assert not builder.has_members_to_document()
    tree: list[str] = []
    assert builder.build(tree) == []
    assert tree == []


def test_properties_disabled() -> None:
    """Verify that property methods are plain methods when properties are off."""
    builder = _builder(_widget_index(), properties_enabled=False)
    assert builder.get_member_summary_writer(MemberKind.PROPERTIES) is None
    assert [m.name for m in builder.members(MemberKind.METHODS)] == ["getX", "xProperty"]
