"""Human-readable renderings of a mathematical program."""

from __future__ import annotations

import math
from typing import List

import pandas as pd

from mathprog.model.base import ReadableMP

__all__ = ["describe", "variables_frame"]


def describe(mp: ReadableMP) -> str:
    """Return a multi-line description of ``mp``.

    The text lists the name, the objective, the constraints, the finite
    variable bounds and the variable kinds, in that order. Kinds and bounds
    are read through the program accessors, so views are rendered as seen.

    Example:
        ```
        Problem OneFourThree
        MAX
         143*x + 60*y
        Subject To
        	c1: 120*x + 210*y ≤ 15000
        Bounds
        	0 ≤ x
        Variables
        	x INT
        ```
    """
    lines: List[str] = ["Problem" + (f" {mp.name}" if mp.name else "")]

    objective = mp.objective
    if objective.is_zero:
        lines.append("Find one solution")
    else:
        lines.append(objective.sense.name)
        lines.append(f" {objective.function}")

    lines.append("Subject To")
    lines.extend(f"\t{constraint}" for constraint in mp.constraints)

    lines.append("Bounds")
    for variable in mp.variables:
        lower, upper = mp.variable_bounds(variable)
        if lower == -math.inf and upper == math.inf:
            continue
        text = str(variable)
        if lower != -math.inf:
            text = f"{lower:g} ≤ {text}"
        if upper != math.inf:
            text = f"{text} ≤ {upper:g}"
        lines.append(f"\t{text}")

    lines.append("Variables")
    lines.extend(
        f"\t{variable} {mp.variable_kind(variable).name}" for variable in mp.variables
    )
    return "\n".join(lines) + "\n"


def variables_frame(mp: ReadableMP) -> pd.DataFrame:
    """Tabulate the variables of ``mp`` in insertion order.

    Returns:
        DataFrame indexed by description with columns ``name``, ``kind``,
        ``lower`` and ``upper``. Kinds and bounds are those reported by ``mp``.
    """
    rows = []
    for variable in mp.variables:
        lower, upper = mp.variable_bounds(variable)
        rows.append(
            {
                "description": variable.description,
                "name": variable.name,
                "kind": mp.variable_kind(variable).name,
                "lower": lower,
                "upper": upper,
            }
        )
    columns = ["description", "name", "kind", "lower", "upper"]
    return pd.DataFrame(rows, columns=columns).set_index("description")
