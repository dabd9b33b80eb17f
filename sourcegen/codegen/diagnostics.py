from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, List, Optional
import json

from sourcegen.ir.span import SourceSpan
from sourcegen.utils import Logger


class Severity(str, Enum):
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'


@dataclass
class Diagnostic:
    """A message about the type model, optionally pointing at a source
    location."""
    severity: Severity
    message: str
    span: Optional[SourceSpan] = None

    def __str__(self):
        if self.span is None:
            return "{}: {}".format(self.severity.value, self.message)
        return "{}: {} ({})".format(self.severity.value, self.message,
                                    self.span.tool_string())


class DiagnosticSink:
    """Collects the diagnostics reported while generating code.

    If a logger is given, every diagnostic is also written to it.
    """
    def __init__(self, enabled: bool = True, logger: Logger = None):
        self.enabled = enabled
        self.logger = logger
        self.records: List[Diagnostic] = []

    def report(self, severity: Severity, message: str,
               span: Optional[SourceSpan] = None) -> Optional[Diagnostic]:
        if not self.enabled:
            return None
        diagnostic = Diagnostic(severity, message, span)
        self.records.append(diagnostic)
        if self.logger is not None:
            self.logger.log(str(diagnostic))
        return diagnostic

    def warning(self, message: str, span: Optional[SourceSpan] = None):
        return self.report(Severity.WARNING, message, span)

    def get_records(self) -> List[Diagnostic]:
        return self.records

    def get_warnings(self) -> List[Diagnostic]:
        return [d for d in self.records if d.severity == Severity.WARNING]

    def to_json_string(self) -> str:
        """Serializes the records to a JSON string."""
        return json.dumps([asdict(rec) for rec in self.records], indent=2)

    def clear(self):
        self.records = []


UNDEFINED_TYPE_MESSAGE = ("This element has an undefined type. It may cause "
                          "issues when generated code.")


def warn_undefined_elements(elements: Iterable, sink: DiagnosticSink = None):
    """Report a warning for every field or parameter whose type could not be
    resolved. Generation goes on: the generated code is expected to fail
    to compile later on.
    """
    if sink is None:
        return
    for element in elements:
        if not element.get_type().is_undefined():
            continue
        span = element.span
        if span is None:
            sink.warning("{}\n{}".format(UNDEFINED_TYPE_MESSAGE,
                                         element.name))
            continue
        lines = [UNDEFINED_TYPE_MESSAGE, span.tool_string()]
        highlight = span.highlight()
        if highlight:
            lines.append(highlight)
        sink.warning("\n".join(lines), span)
