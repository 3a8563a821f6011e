"""
Composable input filters for user-submitted text.

A website can render comments raw, strip every tag, or translate markdown and
then drop dangerous HTML. Each step is a decorator over the previous format.
"""

import re
from typing import List, Pattern

TAG = re.compile(r"<[^>]*>")


class InputFormat:
    def format_text(self, text: str) -> str:
        raise NotImplementedError


class TextInput(InputFormat):
    def format_text(self, text: str) -> str:
        return text


class TextFormat(InputFormat):
    def __init__(self, input_format: InputFormat):
        self._input_format = input_format

    def format_text(self, text: str) -> str:
        return self._input_format.format_text(text)


class PlainTextFilter(TextFormat):
    def format_text(self, text: str) -> str:
        return TAG.sub("", super().format_text(text))


class DangerousHTMLTagsFilter(TextFormat):
    dangerous_tag_patterns: List[Pattern] = [
        re.compile(r"<script.*?>[\s\S]*?</script>", re.IGNORECASE),
    ]
    dangerous_attributes = ["onclick", "onkeypress"]

    def format_text(self, text: str) -> str:
        text = super().format_text(text)
        for pattern in self.dangerous_tag_patterns:
            text = pattern.sub("", text)

        for attribute in self.dangerous_attributes:
            attribute_pattern = re.compile(f"{attribute}=", re.IGNORECASE)
            text = re.sub(
                r"<(.*?)>",
                lambda match: f"<{attribute_pattern.sub('', match.group(1))}>",
                text,
            )
        return text


class MarkdownFormat(TextFormat):
    def format_text(self, text: str) -> str:
        text = super().format_text(text)

        chunks = text.split("\n\n")
        for index, chunk in enumerate(chunks):
            if chunk.startswith("#"):
                chunks[index] = re.sub(
                    r"^(#+)(.*?)$", self._header, chunk, flags=re.MULTILINE
                )
            else:
                chunks[index] = f"<p>{chunk}</p>"
        text = "\n\n".join(chunks)

        text = re.sub(r"__(.*?)__", r"<strong>\1</strong>", text)
        text = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", text)
        text = re.sub(r"\b_(.*?)_\b", r"<em>\1</em>", text)
        text = re.sub(r"\*(.*?)\*", r"<em>\1</em>", text)
        return text

    @staticmethod
    def _header(match) -> str:
        level = len(match.group(1))
        return f"<h{level}>{match.group(2).strip()}</h{level}>"


DANGEROUS_COMMENT = """Hello! Nice blog post!
Please visit my <a href='http://www.iwillhackyou.com'>homepage</a>.
<script src="http://www.iwillhackyou.com/script.js">
  performXSSAttack();
</script>"""

DANGEROUS_FORUM_POST = """# Welcome
This is my first post on this **gorgeous** forum.
<script src="http://www.iwillhackyou.com/script.js">
  performXSSAttack();
</script>"""


def display_comment_as_a_website(input_format: InputFormat, text: str) -> None:
    print(input_format.format_text(text))


def main() -> None:
    naive_input = TextInput()
    print("Website renders comments without filtering (unsafe):")
    display_comment_as_a_website(naive_input, DANGEROUS_COMMENT)
    print("\n")

    print("Website renders comments after stripping all tags (safe):")
    display_comment_as_a_website(PlainTextFilter(naive_input), DANGEROUS_COMMENT)
    print("\n")

    print("Website renders a forum post without filtering and formatting (unsafe, ugly):")
    display_comment_as_a_website(naive_input, DANGEROUS_FORUM_POST)
    print("\n")

    print(
        "Website renders a forum post after translating markdown markup "
        "and filtering some dangerous HTML tags and attributes (safe, pretty):"
    )
    display_comment_as_a_website(
        DangerousHTMLTagsFilter(MarkdownFormat(TextInput())), DANGEROUS_FORUM_POST
    )


if __name__ == "__main__":
    main()
