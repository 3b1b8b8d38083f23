"""Builds the documentation shown for a member in the summary tables."""

from member_summary.comment_utils import PROPERTY_DESCRIPTION, CommentUtils
from member_summary.doc_comment import DocComment, DocTag
from member_summary.doc_finder import DocFinder
from member_summary.documentation_record import DocumentationRecord
from member_summary.item_info import ItemInfo
from member_summary.naming_convention import NamingConvention, PropertyRole
from member_summary.property_helper import PropertyHelper


class CommentSynthesizer:
    """Derives summary documentation for members, including property accessors.

    Property methods, getters and setters without their own comment get one
    built from their property's comment source. Methods with no first
    sentence of their own borrow one from the method they override.
    """

    def __init__(
        self,
        comments: CommentUtils,
        properties: PropertyHelper,
        doc_finder: DocFinder,
        naming: NamingConvention,
    ) -> None:
        self.comments = comments
        self.properties = properties
        self.doc_finder = doc_finder
        self.naming = naming

    def synthesize(self, member: ItemInfo) -> DocumentationRecord:
        """Return the documentation record for one member."""
        source = self.properties.get_property_element(member)
        if source is not None:
            self.process_property(member, source)

        first = self.comments.get_first_sentence(member)
        donor = None
        if member.is_executable and not first:
            holder = self.doc_finder.search(member)
            if holder is not None:
                self.comments.set_override_element(member, holder)
                first = self.comments.get_first_sentence(holder)
                donor = holder

        comment = self.comments.get_doc_comment(member) or DocComment()
        return DocumentationRecord(
            member=member,
            first_sentence=first,
            body=comment.body,
            tags=comment.tags,
            donor=donor,
        )

    def process_property(self, member: ItemInfo, source: ItemInfo) -> DocComment:
        """Install a comment on a property accessor built from its source.

        Getters and setters get a "Gets/Sets the value of the property"
        sentence and, unless the source already has a property description, the
        source text as one. The property
        method itself gets the source text plus see tags for its accessors.
        Only the source's original comment is read, so repeated calls give the
        same result.
        """
        role = self.naming.classify(member)
        original = self.comments.get_original_comment(source) or DocComment()
        tags: list[DocTag] = []

        if role in (PropertyRole.GETTER, PropertyRole.SETTER):
            key = (
                "property_setter_with_name"
                if role is PropertyRole.SETTER
                else "property_getter_with_name"
            )
            text = self.comments.get_text(key, self.naming.property_name(member))
            body = self.comments.make_first_sentence(text)
            if not original.block_tags(PROPERTY_DESCRIPTION):
                tags.append(self.comments.make_property_description(original.body))
        else:
            body = original.body

        tags.extend(original.block_tags("since"))
        tags.extend(t for t in original.tags if t.is_unknown and t.name == "defaultValue")

        if role is PropertyRole.PROPERTY:
            tags.extend(self._accessor_see_tags(member))

        return self.comments.set_doc_comment(member, body, tags)

    def _accessor_see_tags(self, property_method: ItemInfo) -> list[DocTag]:
        tags = []
        getter = self.properties.get_getter_for_property(property_method)
        if getter is not None:
            tags.append(self.comments.make_see(f"#{getter.name}()", getter))

        setter = self.properties.get_setter_for_property(property_method)
        if setter is not None:
            param = setter.parameters[0]
            signature = f"#{setter.name}"
            if not param.type_variable:
                signature += f"({param.type})"
            tags.append(self.comments.make_see(signature, setter))
        return tags
