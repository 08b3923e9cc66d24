"""Line codec for the flat API key file.

Each record is written as a comment line::

    # API_KEY_<id>=<name>|<service>|<key>|<createdAt>

followed, after all record lines, by one ``<ENV_VAR_NAME>=<key>`` line per
record. Only the comment lines are read back; the plain assignment lines are a
derived artifact for tools that source the file.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ...domain.models import ApiKeyRecord

FILE_HEADER = "# API Keys"
RECORD_PREFIX = "# API_KEY_"
FIELD_SEPARATOR = "|"

_RECORD_PATTERN = re.compile(r"^#\s*API_KEY_([a-zA-Z0-9_-]+)=(.+?)\|(.+?)\|(.+?)\|(.+)$")


def encode_record(record: ApiKeyRecord) -> str:
    fields = FIELD_SEPARATOR.join((record.name, record.service, record.key, record.created_at))
    return f"{RECORD_PREFIX}{record.id}={fields}"


def decode_record(line: str) -> Optional[ApiKeyRecord]:
    """Parse a single record line, returning ``None`` for anything else."""
    match = _RECORD_PATTERN.match(line.rstrip("\r"))
    if not match:
        return None
    record_id, name, service, key, created_at = match.groups()
    return ApiKeyRecord(id=record_id, name=name, service=service, key=key, created_at=created_at)


def render_document(records: Iterable[ApiKeyRecord]) -> str:
    records = list(records)
    lines = [FILE_HEADER]
    lines.extend(encode_record(record) for record in records)
    lines.extend(f"{record.env_var}={record.key}" for record in records)
    return "\n".join(lines) + "\n"


def parse_document(text: str) -> List[ApiKeyRecord]:
    records: List[ApiKeyRecord] = []
    for line in text.split("\n"):
        record = decode_record(line)
        if record is not None:
            records.append(record)
    return records
