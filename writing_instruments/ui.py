from __future__ import annotations

from typing import Iterable, List, Optional

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from .io import IOInterface
from .models import Marker, Pen, Pencil, WritingInstrument

REPORT_STYLE = Style.from_dict(
    {
        "report.pen": "#89c6ff",
        "report.pencil": "#a0a0a0",
        "report.marker": "#8ef58e",
        "report.empty": "italic #888888",
        "report.index": "#5c5c5c",
    }
)


def _style_for(instrument: WritingInstrument) -> str:
    if instrument.remainder < instrument.next_cost():
        return "class:report.empty"
    if isinstance(instrument, Pencil):
        return "class:report.pencil"
    if isinstance(instrument, Marker):
        return "class:report.marker"
    if isinstance(instrument, Pen):
        return "class:report.pen"
    return ""


def render_report(instruments: Iterable[WritingInstrument]) -> List[tuple[str, str]]:
    """Build prompt_toolkit fragments, one line per instrument."""
    fragments: List[tuple[str, str]] = []
    for idx, instrument in enumerate(instruments):
        if idx:
            fragments.append(("", "\n"))
        fragments.append(("class:report.index", f"{idx + 1:>2}. "))
        fragments.append((_style_for(instrument), instrument.describe()))
    return fragments


class StyledReportIO(IOInterface):
    """prompt_toolkit-backed output that colours the final report."""

    def __init__(self, output: Optional[Output] = None, style: Style = REPORT_STYLE) -> None:
        self._output = output
        self._style = style

    def write(self, text: str = "") -> None:
        print_formatted_text(text, output=self._output)

    def write_report(self, instruments: Iterable[WritingInstrument]) -> None:
        fragments = render_report(instruments)
        if not fragments:
            return
        print_formatted_text(FormattedText(fragments), style=self._style, output=self._output)
