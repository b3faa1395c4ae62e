"""Build a Registry snapshot from the gh listing."""

import json
import logging

from ghcs.core.codespace.parser import parse_codespace_record
from ghcs.core.codespace.types import Codespace, Registry
from ghcs.errors import InvalidResponse
from ghcs.gateway.codespace_cli.abc import CodespaceCli

logger = logging.getLogger(__name__)

LIST_FIELDS = ("name", "displayName", "repository", "state", "gitStatus", "lastUsedAt")


def fetch_codespaces(cli: CodespaceCli) -> list[Codespace]:
    """Fetch and parse all codespaces in the order gh returns them.

    Makes exactly one gh invocation.

    Raises:
        SourceUnavailable: If gh cannot be run or fails
        InvalidResponse: If gh's output is not a JSON array of objects
        MalformedRecord: If any record lacks a required field
    """
    output = cli.list_codespaces_json(LIST_FIELDS)

    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise InvalidResponse(f"gh codespace list returned invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise InvalidResponse(
            f"gh codespace list returned {type(data).__name__}, expected a JSON array"
        )

    codespaces = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise InvalidResponse(
                f"gh codespace list entry {index} is {type(record).__name__}, expected an object"
            )
        codespaces.append(parse_codespace_record(record))
    return codespaces


def build_registry(cli: CodespaceCli) -> Registry:
    """Fetch all codespaces and key them by display key.

    When two codespaces share a display key, the later one in fetch order
    wins. Raises the same errors as fetch_codespaces.
    """
    entries: dict[str, Codespace] = {}
    for codespace in fetch_codespaces(cli):
        key = codespace.display_key
        if key in entries:
            logger.debug(
                "display key %r of %s overrides %s", key, codespace.name, entries[key].name
            )
        entries[key] = codespace
    return Registry(entries)
