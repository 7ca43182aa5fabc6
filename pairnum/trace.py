# pairnum/trace.py
"""
Canonical reduction trace events.

Every applied rewrite step produces one event; a reduction ends with a
single "reduction.normal" event. Events are plain dicts so they can be
emitted as JSON lines.

    {"v": 1, "type": "reduction.explode", "i": 0, "t": "15",
     "mu": "[[[[0,7],4],[7,[[8,4],9]]],[1,1]]", "meta": {"height": 6}}
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

TRACE_EVENT_V1 = 1
TRACE_EVENT_KEY_ORDER: Tuple[str, ...] = ("v", "type", "i", "t", "mu", "meta")

EVENT_EXPLODE = "reduction.explode"
EVENT_SPLIT = "reduction.split"
EVENT_NORMAL = "reduction.normal"
EVENT_TYPES = frozenset([EVENT_EXPLODE, EVENT_SPLIT, EVENT_NORMAL])


def _deep_sort_json(x: Any) -> Any:
    if isinstance(x, dict):
        return {str(k): _deep_sort_json(x[k]) for k in sorted(x.keys())}
    if isinstance(x, list):
        return [_deep_sort_json(v) for v in x]
    return x


def make_event(
    typ: str,
    i: int,
    mu: str,
    index: Optional[int] = None,
    height: Optional[int] = None,
) -> Dict[str, Any]:
    """Build (and canonicalize) one reduction event."""
    ev: Dict[str, Any] = {"v": TRACE_EVENT_V1, "type": typ, "i": i, "mu": mu}
    if index is not None:
        ev["t"] = str(index)
    if height is not None:
        ev["meta"] = {"height": height}
    return canon_event(ev)


def canon_event(ev: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Canonicalize a single trace event to a deterministic dict.

    Required:
    - v: const 1
    - type: one of EVENT_TYPES
    - i: integer >= 0

    Optional:
    - t: slot index tag (string)
    - mu: serialized tree after the step
    - meta: metadata (deep-sorted)

    Optional keys set to None are dropped, unknown keys are ignored, and
    the top-level key order is fixed.
    """
    if not isinstance(ev, Mapping):
        raise TypeError(f"event must be a mapping, got {type(ev)}")

    v = ev.get("v", TRACE_EVENT_V1)
    if v != TRACE_EVENT_V1:
        raise ValueError(f"event.v must be {TRACE_EVENT_V1}, got {v!r}")

    typ = ev.get("type")
    if typ not in EVENT_TYPES:
        raise ValueError(f"event.type must be one of {sorted(EVENT_TYPES)}, got {typ!r}")

    i = ev.get("i")
    if not isinstance(i, int) or isinstance(i, bool) or i < 0:
        raise ValueError("event.i must be an integer >= 0")

    t = ev.get("t", None)
    if t is not None and (not isinstance(t, str) or not t.strip()):
        raise ValueError("event.t must be a non-empty string when provided")

    mu = ev.get("mu", None)
    if mu is not None and not isinstance(mu, str):
        raise ValueError("event.mu must be a string when provided")

    meta = ev.get("meta", None)
    if meta is not None:
        if not isinstance(meta, Mapping):
            raise ValueError("event.meta must be an object/dict when provided")
        meta = _deep_sort_json(dict(meta))

    fields = {"v": v, "type": typ, "i": i, "t": t, "mu": mu, "meta": meta}
    # Stable key order (dict insertion order); None optionals dropped
    return {k: fields[k] for k in TRACE_EVENT_KEY_ORDER if fields[k] is not None}


def canon_events(events: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Canonicalize a sequence of events and check that `i` runs 0..n-1.
    Indices are not renumbered.
    """
    out = [canon_event(ev) for ev in events]
    got = [e["i"] for e in out]
    expected = list(range(len(out)))
    if got != expected:
        raise ValueError(f"event.i must be contiguous 0..n-1 in-order; got {got}, expected {expected}")
    return out


def canon_event_json(ev: Mapping[str, Any]) -> str:
    """Compact, deterministic JSON for one event."""
    return json.dumps(canon_event(ev), ensure_ascii=False, separators=(",", ":"))
