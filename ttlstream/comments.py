"""Tail-comment trimming.

Turtle allows a `#` comment after the last token of a line:

    @base <http://example.org/Agent> . # agent ontology

The comment must be removed before classification so that its characters
never look like terminal punctuation. A `#` only starts a comment when it is
not the first character of the line (whole-line comments are classified,
not trimmed) and is followed by a space or another `#`; a `#` inside an IRI
(`<http://example.org/ns#>`) or a quoted literal is never a comment.
"""


def _tail_comment_index(line: str) -> int | None:
    quote: str | None = None
    in_iri = False
    i = 0
    while i < len(line):
        ch = line[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif in_iri:
            if ch == ">":
                in_iri = False
        elif ch in ('"', "'"):
            quote = ch
        elif ch == "<":
            in_iri = True
        elif ch == "#" and i > 0 and line[i + 1 : i + 2] in (" ", "#"):
            return i
        i += 1
    return None


def has_tail_comment(line: str) -> bool:
    if not line or line.startswith("#"):
        return False
    return _tail_comment_index(line) is not None


def trim_tail_comment(line: str) -> str:
    """Return `line` without its trailing comment, or unchanged if it has none.

    The text before the comment is right-trimmed. Trimming is idempotent:
    trimming an already trimmed line returns it unchanged.
    """
    if not line or line.startswith("#"):
        return line
    idx = _tail_comment_index(line)
    if idx is None:
        return line
    return line[:idx].rstrip()
