from __future__ import annotations

from .models import GridLayout

RESET = "\033[0m"

# 256-color codes for bands 1..9
FOREGROUND_CODES = (22, 28, 34, 40, 46, 82, 118, 154, 191)
BACKGROUND_CODES = (191, 154, 118, 82, 46, 40, 34, 28, 22)

DAY_LABELS = ("Mon", "", "Wed", "", "Fri", "", "Sun")


def band_for_count(count: int) -> int:
    if count <= 0:
        return 0
    return min(int(count), 9)


def colorize(count: int, background: bool = False) -> str:
    band = band_for_count(count)
    if band == 0:
        return "-"
    if background:
        return f"\033[30;48;5;{BACKGROUND_CODES[band - 1]}m{band}{RESET}"
    return f"\033[38;5;{FOREGROUND_CODES[band - 1]}m{band}{RESET}"


def cell_glyph(count: int | None) -> str:
    if not count or count <= 0:
        return " "
    return colorize(count)


def render_month_header(layout: GridLayout) -> str:
    """
    Labels are 4 characters wide while a cell is 2 (glyph + space), so a
    labeled column also consumes the column after it.
    """
    out = ["    "]
    w = 0
    while w < layout.week_count:
        label = layout.month_labels.get(w, "")
        if label:
            out.append(f"{label:>4}")
            w += 2
        else:
            out.append("  ")
            w += 1
    return "".join(out)


def render_rows(matrix: list[list[int | None]], weekday_totals: list[int]) -> list[str]:
    lines: list[str] = []
    for i, day in enumerate(DAY_LABELS):
        cells = "".join(f"{cell_glyph(c)} " for c in matrix[i])
        lines.append(f"{day:>4} {cells}   {weekday_totals[i]:>2} {day}")
    return lines


def render_heatmap(layout: GridLayout, matrix: list[list[int | None]], weekday_totals: list[int]) -> str:
    lines = [""]
    lines.append(render_month_header(layout))
    lines.extend(render_rows(matrix, weekday_totals))
    return "\n".join(lines)
