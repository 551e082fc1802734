import traceback
import time
from typing import Any, Dict

from flag_bus import FlagBus


def add_traceback(obj, step: str, info: str, *, with_stack: bool = False) -> None:
    """
    Append a trace event to `obj.traceback_info`.

    Parameters
    ----------
    obj        : any object that owns a `traceback_info` list.
    step, info : short label and free-form description.
    with_stack : include trimmed call-stack (default False; the
                 'trace_stack' flag forces it on).

    Does nothing while the 'tracing' flag is off. Only the newest
    'trace_limit' events are kept.
    """
    if not FlagBus.get('tracing', True):
        return
    if not hasattr(obj, "traceback_info"):
        raise AttributeError(f"{obj!r} has no attribute 'traceback_info'")

    event: Dict[str, Any] = {
        "step":       step,
        "info":       info,
        "timestamp":  time.time(),
    }
    if with_stack or FlagBus.get('trace_stack', False):
        # omit the last frame (this helper)
        event["stack"] = traceback.format_stack()[:-1]

    obj.traceback_info.append(event)

    limit = FlagBus.get('trace_limit')
    if limit is not None and len(obj.traceback_info) > limit:
        del obj.traceback_info[:len(obj.traceback_info) - limit]
