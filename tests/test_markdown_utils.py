"""Tests for Markdown and path helpers."""

from pathlib import Path

from member_summary.build_link_targets import build_link_targets
from member_summary.dot_safe import dot_safe
from member_summary.header_slug import header_slug, member_anchor
from member_summary.md_table import md_table
from member_summary.output_file_for_page import output_file_for_page
from member_summary.page_path_for_fullname import page_path_for_fullname
from member_summary.rewrite_links import rewrite_links

from model_builders import make_index, member_raw, property_model, type_raw


def test_dot_safe() -> None:
    """Verify nested type separators and type arguments in file names."""
    assert dot_safe("Outer.Inner") == "Outer-Inner"
    assert dot_safe("Outer$Inner") == "Outer-Inner"
    assert dot_safe("Map<K, List<V>>") == "Map"
    assert dot_safe("") == "Unknown"


def test_header_slug() -> None:
    """Verify anchor slugs for headings and members."""
    assert header_slug("Hello World!") == "hello-world"
    assert header_slug("  ") == "section"

    index = property_model()
    assert member_anchor(index.get("com.example.Widget.setX(double)")) == "setx-double"
    assert member_anchor(index.get("com.example.Widget.x")) == "x"


def test_md_table() -> None:
    """Verify table layout and cell escaping."""
    assert md_table(["A", "B"], []) == ""
    assert md_table(["A", "B"], [["x|y", "multi\nline"]]) == (
        "| A | B |\n|---|---|\n| x\\|y | multi line |"
    )


def test_page_path_for_fullname() -> None:
    """Verify that packages become folders and nested types one page."""
    assert page_path_for_fullname("/api", "com.example.Outer.Inner", "com.example") == (
        "/api/com/example/Outer-Inner"
    )
    assert page_path_for_fullname("/api/", "Map.Entry") == "/api/Map-Entry"


def test_output_file_for_page(tmp_path: Path) -> None:
    """Verify the output file for a page path with an anchor."""
    out = output_file_for_page(tmp_path, "/api/com/example/Widget#run")
    assert out == tmp_path / "api" / "com" / "example" / "Widget.md"
    assert out.parent.is_dir()


def test_rewrite_links() -> None:
    """Verify inline link and code tags."""
    index = make_index(
        type_raw("com.example.Widget", superclass="com.example.Base"),
        type_raw("com.example.Base"),
        member_raw("com.example.Widget.getX()", returns="double"),
        member_raw("com.example.Base.run()"),
    )
    targets = build_link_targets(index, "/api")
    widget = index.get("com.example.Widget")

    def rewrite(text: str) -> str:
        return rewrite_links(text, widget, index, targets)

    assert rewrite("See {@link #getX()}.") == "See [getX()](/api/com/example/Widget#getx)."
    assert rewrite("{@link Base}") == "[Base](/api/com/example/Base)"
    assert rewrite("{@link Base#run() the run method}") == (
        "[the run method](/api/com/example/Base#run)"
    )
    assert rewrite("{@link Missing#thing}") == "`Missing.thing`"
    assert rewrite("Use {@code a < b}.") == "Use `a < b`."
    assert rewrite("") == ""
