"""
Global flag registry for the number modules.

Any module can do:
    from flag_bus import FlagBus
    FlagBus.set('tracing', False)
    if FlagBus.get('tracing'):
        ...
A tiny layer around a class-level dict; reset() restores the seeded
defaults (tests use it between cases).
"""
from typing import Any, Dict

_DEFAULTS: Dict[str, Any] = {
    'tracing': True,       # record step-wise trace events on numbers
    'trace_limit': 256,    # keep at most this many events per object
    'trace_stack': False,  # attach a trimmed call-stack to every event
}


class _FlagBusImpl:
    _flags: Dict[str, Any] = dict(_DEFAULTS)

    # ––– basic get/set –––
    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        return cls._flags.get(key, default)

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        cls._flags[key] = value

    @classmethod
    def reset(cls) -> None:
        cls._flags = dict(_DEFAULTS)


# public alias
FlagBus = _FlagBusImpl
