"""Plain-text rendering of hands, score cards and category options."""
from typing import Iterable, List

from fivedice.game.categories import LOWER, UPPER
from fivedice.game.scorecard import ScoreCard, ValuedCategory

STRIKE = "\x1b[9m"
RESET = "\x1b[0m"

LABEL_WIDTH = 15
COLUMN_WIDTH = 23


def render_hand(hand) -> str:
    return " ".join(face.glyph for face in hand)


def _cell(scorecard: ScoreCard, category, strike: bool) -> str:
    label = category.label.ljust(LABEL_WIDTH)
    value = scorecard.get_score(category)
    if value is None:
        return label + "     "
    if strike:
        label = f"{STRIKE}{label}{RESET}"
    return f"{label} ({value:2})"


def render_scorecard(scorecard: ScoreCard, strike: bool = True) -> str:
    """Upper section on the left, lower section on the right, score line below."""
    rows = []
    for i, lower in enumerate(LOWER):
        left = _cell(scorecard, UPPER[i], strike) if i < len(UPPER) else ""
        # pad on the visible width; escape codes take no columns
        visible = len(left) - (len(STRIKE) + len(RESET) if STRIKE in left else 0)
        rows.append(left + " " * max(COLUMN_WIDTH - visible, 1) + _cell(scorecard, lower, strike))
    rows.append("")
    rows.append(str(scorecard.score()))
    return "\n".join(row.rstrip() for row in rows)


def sorted_options(options: Iterable[ValuedCategory]) -> List[ValuedCategory]:
    """Highest value first; equal values keep category order."""
    return sorted(options, key=lambda vc: -vc.value)


def render_options(options: Iterable[ValuedCategory], numbered=False, skip_zero=False) -> str:
    lines = []
    for i, option in enumerate(sorted_options(options), start=1):
        if skip_zero and option.value == 0:
            break
        prefix = f"{i:2}) " if numbered else ""
        lines.append(prefix + str(option))
    return "\n".join(lines)
