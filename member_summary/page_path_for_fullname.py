"""Utility for determining the page path of a type."""

from member_summary.dot_safe import dot_safe


def page_path_for_fullname(api_root: str, full_name: str, package: str = "") -> str:
    """Generate the wiki page path for a type.

    Package segments become folders; the rest of the name is one page:
    com.example.Outer.Inner -> /api/com/example/Outer-Inner
    """
    if package and full_name.startswith(package + "."):
        local = full_name[len(package) + 1 :]
        folders = [dot_safe(p) for p in package.split(".")]
    else:
        local = full_name
        folders = []
    return "/".join([api_root.rstrip("/"), *folders, dot_safe(local)])
