from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceSpan:
    """Location of a declaration in its source file.

    `line` and `column` are 1-based. `text` is the source line holding the
    declaration, used to render a highlight in diagnostics.
    """
    uri: str
    line: int
    column: int
    length: int = 1
    text: Optional[str] = None

    def tool_string(self):
        return "{}:{}:{}".format(self.uri, self.line, self.column)

    def highlight(self):
        if self.text is None:
            return ''
        marker = ' ' * (self.column - 1) + '^' * max(self.length, 1)
        return "{}\n{}".format(self.text, marker)

    def __str__(self):
        return self.tool_string()
