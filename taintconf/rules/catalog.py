from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import yaml

from taintconf.dataflow.class_config import TaintClassConfig, TaintConfigError, accepts
from taintconf.util.descriptors import class_descriptor

_log = logging.getLogger(__name__)

_RULES_DIR = Path(__file__).resolve().parent

_DEFAULT_FILE = "classes.yml"


class _SummaryLoader(yaml.SafeLoader):
    """Safe loader that keeps ``NULL``, ``~`` and ``yes``/``no`` as plain strings."""


_SummaryLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:bool")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class RuleError(Exception):
    pass


def _validate_rules(obj, key: str) -> Union[List[str], Dict]:
    if not isinstance(obj, dict) or key not in obj:
        raise RuleError(f"Missing {key} rules")
    value = obj[key]
    if isinstance(value, list) or isinstance(value, dict):
        return value
    raise RuleError(f"Invalid {key} rules")


def _iter_entries(entries: Union[List[str], Dict]) -> Iterator[Tuple[object, object]]:
    if isinstance(entries, dict):
        yield from entries.items()
        return
    for line in entries:
        if not isinstance(line, str) or ":" not in line:
            yield line, None
            continue
        type_desc, summary = line.rsplit(":", 1)
        yield type_desc.strip(), summary.strip()


def load_class_summaries(path: Optional[str] = None, *, strict: bool = False) -> Dict[str, TaintClassConfig]:
    """Load class taint summaries keyed by type descriptor.

    When *path* is ``None`` the ``classes.yml`` bundled alongside this module
    is loaded. Entries that fail validation are logged and skipped, or raise
    ``RuleError`` when *strict* is set.
    """
    if path is None:
        path = str(_RULES_DIR / _DEFAULT_FILE)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.load(f, Loader=_SummaryLoader) or {}
    entries = _validate_rules(data, "classes")

    catalog: Dict[str, TaintClassConfig] = {}
    for type_desc, summary in _iter_entries(entries):
        if not accepts(type_desc, summary):
            message = f"Invalid class summary entry {type_desc!r}: {summary!r}"
            if strict:
                raise RuleError(message)
            _log.warning("%s, skipped", message)
            continue
        try:
            config = TaintClassConfig.load(summary)
        except TaintConfigError as exc:
            if strict:
                raise RuleError(f"Bad class summary for {type_desc}: {exc}") from exc
            _log.warning("Bad class summary for %s: %s, skipped", type_desc, exc)
            continue
        if type_desc in catalog:
            _log.debug("Duplicate class summary for %s, keeping last", type_desc)
        catalog[type_desc] = config

    _log.debug("Loaded %d class summaries from %s", len(catalog), path)
    return catalog


def summary_for(catalog: Dict[str, TaintClassConfig], type_name: str) -> Optional[TaintClassConfig]:
    """Look up *type_name* given as a descriptor or a dotted/slashed class name."""
    return catalog.get(class_descriptor(type_name))
