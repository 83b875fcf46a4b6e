# Response tables, summary metrics, animation lead-in frames

from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .model import SampledPoint
from .serialize import points_to_records

PRELOAD_FRAMES = 8


def series_to_dataframe(points: Sequence[SampledPoint]) -> pd.DataFrame:
    """
    One curve as a DataFrame with columns t, value, load.

    Rows keep emission order, so the two points injected at the removal
    time appear as consecutive rows with the same t.
    """
    return pd.DataFrame(points_to_records(points), columns=["t", "value", "load"])


def responses_to_dataframe(creep: Sequence[SampledPoint], relax: Sequence[SampledPoint]) -> pd.DataFrame:
    """Both curves stacked, with a 'mode' column ('creep' / 'relax')."""
    df_creep = series_to_dataframe(creep)
    df_creep.insert(0, "mode", "creep")
    df_relax = series_to_dataframe(relax)
    df_relax.insert(0, "mode", "relax")
    return pd.concat([df_creep, df_relax], ignore_index=True)


def response_summary(points: Sequence[SampledPoint], t_removal: Optional[float] = None) -> Dict[str, float]:
    """
    Key numbers of one curve.

    Returns:
    --------
    dict with:
    - initial: value at t=0
    - peak: largest |value| (signed)
    - final: last value
    - at_removal: value just before removal (NaN without removal)
    - recovered_fraction: 1 - final/at_removal, how much of the response
      disappeared after unloading (NaN without removal). 1.0 = full
      recovery (solid), < 1 = permanent set (viscous flow).
    """
    if len(points) == 0:
        raise ValueError("Cannot summarize an empty response.")
    values = np.array([p.value for p in points], dtype=float)
    peak = float(values[np.argmax(np.abs(values))])

    at_removal = float("nan")
    recovered = float("nan")
    if t_removal is not None:
        loaded = [p for p in points if p.load != 0 and p.t <= t_removal]
        if loaded:
            at_removal = loaded[-1].value
            if at_removal != 0:
                recovered = 1.0 - points[-1].value / at_removal

    return {
        "initial": points[0].value,
        "peak": peak,
        "final": points[-1].value,
        "at_removal": at_removal,
        "recovered_fraction": recovered,
    }


def with_preload_frames(
    points: Sequence[SampledPoint],
    n_frames: int = PRELOAD_FRAMES,
    span: float = 0.5,
) -> List[SampledPoint]:
    """
    Prefix a curve with idle frames before t=0 for animation playback.

    Frames run from t = -span up to (but not including) 0 with value 0 and
    no load, so an animated schematic shows the unloaded network before the
    step is applied.
    """
    if not points:
        return []
    pre = [
        SampledPoint(t=round(-((n_frames - i) / n_frames) * span, 4), value=0.0, load=0.0)
        for i in range(n_frames)
    ]
    return pre + list(points)
