"""Search for inherited documentation along the override chain."""

import logging

from member_summary.comment_utils import CommentUtils
from member_summary.item_info import ItemInfo
from member_summary.metadata_index import MetadataIndex

logger = logging.getLogger(__name__)


class DocFinder:
    """Finds the nearest overridden or implemented method that has a comment."""

    def __init__(self, index: MetadataIndex, comments: CommentUtils) -> None:
        self.index = index
        self.comments = comments

    def search(self, method: ItemInfo) -> ItemInfo | None:
        """Depth-first search in override order; None when nothing is documented."""
        seen = {method.uid}
        stack = list(reversed(self.index.overridden_methods(method)))
        while stack:
            candidate = stack.pop()
            if candidate.uid in seen:
                continue
            seen.add(candidate.uid)
            if self.comments.get_first_sentence(candidate):
                return candidate
            stack.extend(reversed(self.index.overridden_methods(candidate)))
        logger.debug("No inherited documentation for %s", method.uid)
        return None
