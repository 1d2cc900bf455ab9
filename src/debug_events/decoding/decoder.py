"""Log cleaner driven by the event schema index.

This module turns one `LogEntry` into a `CleanedRecord`: every named
argument is looked up in the `EventSchemaIndex` and normalized for its
declared type; the event name is stored under the reserved key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from debug_events.core.config import ExtractorConfig
from debug_events.core.errors import UnknownFieldError
from debug_events.core.interfaces import ILogEntry, TextDecoder
from debug_events.core.models import CleanedRecord
from debug_events.decoding.registry import get_field_spec
from debug_events.decoding.specs import EventSchemaIndex
from debug_events.decoding.utils import hex_to_utf8, normalize_value

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ExtractorConfig()


def filter_logs(logs: Iterable[ILogEntry], event_name: str | None = None) -> list[ILogEntry]:
    """Keep logs whose event equals `event_name` exactly; no name keeps all. Order is preserved."""
    if not event_name:
        return list(logs)
    return [log for log in logs if log.event == event_name]


def clean_log(
    log: ILogEntry,
    index: EventSchemaIndex,
    *,
    config: ExtractorConfig = _DEFAULT_CONFIG,
    text_decoder: TextDecoder = hex_to_utf8,
) -> CleanedRecord:
    """Clean one log into a record or raise on the first unknown field."""
    record: CleanedRecord = {}
    for field_name, raw in log.args.items():
        try:
            spec = get_field_spec(index, log.event, field_name)
        except UnknownFieldError:
            if config.strict_fields:
                raise
            logger.warning("skipping field %r not declared for event %r", field_name, log.event)
            continue
        record[field_name] = normalize_value(
            raw,
            spec.type or config.default_type,
            text_decoder=text_decoder,
        )

    if config.event_key in record:
        logger.warning(
            "field %r of event %r is shadowed by the event name key", config.event_key, log.event
        )
    record[config.event_key] = log.event
    return record


def clean_logs(
    logs: Sequence[ILogEntry],
    index: EventSchemaIndex,
    *,
    config: ExtractorConfig = _DEFAULT_CONFIG,
    text_decoder: TextDecoder = hex_to_utf8,
) -> list[CleanedRecord]:
    return [clean_log(log, index, config=config, text_decoder=text_decoder) for log in logs]
