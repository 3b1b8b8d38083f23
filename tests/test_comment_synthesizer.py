"""Tests for synthesized property comments and inherited documentation."""

from member_summary.comment_synthesizer import CommentSynthesizer
from member_summary.doc_comment import DocTag
from member_summary.doc_finder import DocFinder
from member_summary.property_helper import PropertyHelper
from member_summary.visible_member_table import VisibleMemberTable

from model_builders import make_comments, make_index, member_raw, property_model, type_raw

FIELD_COMMENT = "The x coordinate of the widget.\n@since 2.0\n@defaultValue 0.0"


def _synthesizer(index, uid="com.example.Widget"):
    comments = make_comments()
    table = VisibleMemberTable(index.get(uid), index)
    helper = PropertyHelper(table, comments)
    return CommentSynthesizer(comments, helper, DocFinder(index, comments), table.naming), comments


def test_getter_comment() -> None:
    """Verify that a getter gets a templated sentence and the field description."""
    index = property_model(field_comment=FIELD_COMMENT)
    synthesizer, _ = _synthesizer(index)
    record = synthesizer.synthesize(index.get("com.example.Widget.getX()"))

    assert record.first_sentence == "Gets the value of the property x."
    assert record.tags == (
        DocTag("propertyDescription", "The x coordinate of the widget."),
        DocTag("since", "2.0"),
        DocTag("defaultValue", "0.0"),
    )
    assert record.donor is None


def test_setter_comment() -> None:
    """Verify the setter sentence."""
    index = property_model(field_comment=FIELD_COMMENT)
    synthesizer, comments = _synthesizer(index)
    setter = index.get("com.example.Widget.setX(double)")
    synthesizer.synthesize(setter)
    assert comments.get_full_body(setter) == "Sets the value of the property x."


def test_existing_property_description_is_not_repeated() -> None:
    """Verify that a source with its own property description adds none to accessors."""
    index = property_model(
        field_comment="Body text.\n@propertyDescription Explicit description."
    )
    synthesizer, _ = _synthesizer(index)
    record = synthesizer.synthesize(index.get("com.example.Widget.getX()"))
    assert [t for t in record.tags if t.name == "propertyDescription"] == []


def test_empty_source_still_gets_description() -> None:
    """Verify that an uncommented source yields an empty property description."""
    index = property_model()
    synthesizer, _ = _synthesizer(index)
    record = synthesizer.synthesize(index.get("com.example.Widget.setX(double)"))
    assert record.first_sentence == "Sets the value of the property x."
    assert record.tags == (DocTag("propertyDescription", ""),)


def test_property_method_comment() -> None:
    """Verify that the property method gets the body and see tags for its accessors."""
    index = property_model(field_comment=FIELD_COMMENT)
    synthesizer, _ = _synthesizer(index)
    record = synthesizer.synthesize(index.get("com.example.Widget.xProperty()"))

    assert record.first_sentence == "The x coordinate of the widget."
    assert record.body == "The x coordinate of the widget."
    assert record.tags == (
        DocTag("since", "2.0"),
        DocTag("defaultValue", "0.0"),
        DocTag("see", "#getX()", "com.example.Widget.getX()"),
        DocTag("see", "#setX(double)", "com.example.Widget.setX(double)"),
    )


def test_type_variable_setter_see_tag() -> None:
    """Verify that a setter taking a type variable is referenced by name only."""
    index = property_model(
        field_comment=FIELD_COMMENT,
        setter_params=({"name": "value", "type": "T", "typeVariable": True},),
    )
    synthesizer, _ = _synthesizer(index)
    record = synthesizer.synthesize(index.get("com.example.Widget.xProperty()"))
    assert [t.text for t in record.tags if t.name == "see"] == ["#getX()", "#setX"]


def test_synthesis_is_idempotent() -> None:
    """Verify that building twice gives the same comments."""
    index = property_model(field_comment=FIELD_COMMENT)
    synthesizer, comments = _synthesizer(index)
    getter = index.get("com.example.Widget.getX()")
    prop = index.get("com.example.Widget.xProperty()")

    first = (synthesizer.synthesize(getter), synthesizer.synthesize(prop))
    second = (synthesizer.synthesize(getter), synthesizer.synthesize(prop))
    assert first == second
    assert comments.get_original_comment(getter) is None


def test_inherited_documentation_depth_first() -> None:
    """Verify that the first documented method along the override chain is used."""
    index = make_index(
        type_raw("com.example.Impl", superclass="com.example.Mid", interfaces=("com.example.Api",)),
        type_raw("com.example.Mid", superclass="com.example.Top"),
        type_raw("com.example.Top"),
        type_raw("com.example.Api", "interface"),
        member_raw(
            "com.example.Impl.run()",
            overrides=("com.example.Mid.run()", "com.example.Api.run()"),
        ),
        member_raw("com.example.Mid.run()", overrides=("com.example.Top.run()",)),
        member_raw("com.example.Top.run()", comment="Runs from the top. More."),
        member_raw("com.example.Api.run()", comment="Runs from the interface."),
    )
    synthesizer, comments = _synthesizer(index, "com.example.Impl")
    impl_run = index.get("com.example.Impl.run()")
    record = synthesizer.synthesize(impl_run)

    assert record.first_sentence == "Runs from the top."
    assert record.donor is index.get("com.example.Top.run()")
    assert comments.get_override_element(impl_run) is record.donor


def test_no_inherited_documentation() -> None:
    """Verify that an undocumented member without overrides has an empty sentence."""
    index = make_index(type_raw("com.example.Impl"), member_raw("com.example.Impl.run()"))
    synthesizer, _ = _synthesizer(index, "com.example.Impl")
    record = synthesizer.synthesize(index.get("com.example.Impl.run()"))
    assert record.first_sentence == ""
    assert record.donor is None
