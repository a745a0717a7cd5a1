# render.py
# Markdown rendering of a built truth table.

from enum import Enum
from typing import List, Tuple

from truthtable import TruthTable


class ValueStyle(Enum):
    """Glyph pairs for false/true. The label lists the true glyph first ("T/F")."""
    ONE_ZERO = ("0", "1")
    TF = ("F", "T")
    TRUE_FALSE = ("false", "true")
    TRUE_FALSE_TITLE = ("False", "True")
    YN = ("N", "Y")
    YES_NO = ("no", "yes")
    YES_NO_TITLE = ("No", "Yes")

    @property
    def label(self) -> str:
        false_glyph, true_glyph = self.value
        return f"{true_glyph}/{false_glyph}"

    def glyph(self, value: bool) -> str:
        return self.value[1] if value else self.value[0]

    @classmethod
    def from_label(cls, label: str) -> "ValueStyle":
        for style in cls:
            if style.label == label:
                return style
        raise ValueError(f"Unknown value format '{label}' (choose from {', '.join(STYLE_LABELS)})")


STYLE_LABELS: List[str] = [style.label for style in ValueStyle]
DEFAULT_STYLE = ValueStyle.TF


def _line(cells: List[str]) -> str:
    return "|" + "".join(f" {c} |" for c in cells) + "\n"


def render_table(table: TruthTable, style: ValueStyle = DEFAULT_STYLE) -> str:
    header = list(table.inputs) + table.labels
    # A literal | inside a cell would start a new column
    out = [_line([c.replace("|", "\\|") for c in header]), "|" + " - |" * len(header) + "\n"]
    for row in table.rows:
        out.append(_line([style.glyph(v) for v in row.values(table.inputs)]))
    return "".join(out)


def style_choices() -> List[Tuple[str, str]]:
    """(label, example) pairs, e.g. ('T/F', 'F T')."""
    return [(s.label, f"{s.glyph(False)} {s.glyph(True)}") for s in ValueStyle]


__all__ = ["ValueStyle", "STYLE_LABELS", "DEFAULT_STYLE", "render_table", "style_choices"]
