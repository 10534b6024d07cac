"""Per-class taint summaries.

A summary configures the taint state of values returned from methods or
produced by casts to a class, and whether arguments of that class can have
their taint state mutated by a call. The textual form is::

    [STATE][#IMMUTABLE]

where at least one of the two parts is present, e.g. ``SAFE#IMMUTABLE`` for
``Ljava/lang/Boolean;``, ``#IMMUTABLE`` for ``Ljava/lang/String;`` and
``SAFE`` for ``Ljava/util/concurrent/atomic/AtomicBoolean;``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Type

from taintconf.dataflow.tags import TaintState
from taintconf.util.descriptors import is_type_descriptor

DEFAULT_TAINT_STATE = TaintState.NULL
IMMUTABLE = "#IMMUTABLE"

STATE_NAME_RE = re.compile(r"[A-Z_]+")
SUMMARY_RE = re.compile(r"([A-Z_]+|#IMMUTABLE|[A-Z_]+#IMMUTABLE)")


class TaintConfigError(Exception):
    pass


class InputMissingError(TaintConfigError, TypeError):
    pass


class FormatError(TaintConfigError, ValueError):
    pass


class UnknownStateError(TaintConfigError, ValueError):
    def __init__(self, state: str) -> None:
        super().__init__(f"Unknown taint state: {state!r}")
        self.state = state


def accepts(type_descriptor: Optional[str], summary: Optional[str]) -> bool:
    """Pre-flight check of a ``descriptor: summary`` catalog entry. Never raises."""
    if not isinstance(summary, str):
        return False
    return is_type_descriptor(type_descriptor) and SUMMARY_RE.fullmatch(summary) is not None


class TaintTypeConfig:
    @classmethod
    def load(cls, summary: Optional[str]) -> "TaintTypeConfig":
        raise NotImplementedError


@dataclass(frozen=True)
class TaintClassConfig(TaintTypeConfig):
    taint_state: Enum = DEFAULT_TAINT_STATE
    immutable: bool = False
    default_state: Enum = field(default=DEFAULT_TAINT_STATE, repr=False)

    accepts = staticmethod(accepts)

    @classmethod
    def load(
        cls,
        summary: Optional[str],
        states: Type[Enum] = TaintState,
        default_state: Enum = DEFAULT_TAINT_STATE,
    ) -> "TaintClassConfig":
        """Parse a summary such as ``SAFE#IMMUTABLE`` into a frozen config.

        *states* is the enumeration state names are resolved against and
        *default_state* its member meaning "not configured".

        Raises ``InputMissingError`` for ``None``, ``FormatError`` when nothing
        but whitespace is given and ``UnknownStateError`` when the state part
        does not name a member of *states*.
        """
        if summary is None:
            raise InputMissingError("Summary is None")
        summary = summary.strip()
        if not summary:
            raise FormatError("No taint class summary specified")

        immutable = False
        if summary.endswith(IMMUTABLE):
            immutable = True
            summary = summary[: -len(IMMUTABLE)]

        taint_state = default_state
        if summary:
            if STATE_NAME_RE.fullmatch(summary) is None:
                raise UnknownStateError(summary)
            try:
                taint_state = states[summary]
            except KeyError:
                raise UnknownStateError(summary) from None

        return cls(taint_state=taint_state, immutable=immutable, default_state=default_state)

    @property
    def has_explicit_state(self) -> bool:
        return self.taint_state != self.default_state

    def get_taint_state(self, default_state: Enum) -> Enum:
        """Configured state, or *default_state* when none was configured."""
        if not self.has_explicit_state:
            return default_state
        return self.taint_state


def load_class_config(summary: Optional[str]) -> TaintClassConfig:
    return TaintClassConfig.load(summary)
