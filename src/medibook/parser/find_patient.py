"""Parser for the ``find`` command's multi-field search arguments."""

from __future__ import annotations

import logging

from medibook.commands import FindPatientCommand
from medibook.model.predicates import PatientSearchPredicate
from medibook.parser.exceptions import InvalidCommandFormatError
from medibook.parser.field_parsers import parse_address, parse_name, parse_remark, parse_tags
from medibook.parser.syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_TAG,
)
from medibook.parser.tokenizer import tokenize

logger = logging.getLogger(__name__)

SEARCH_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG, PREFIX_REMARK)


class FindPatientCommandParser:
    """Builds a FindPatientCommand from ``find`` arguments.

    Holds no state between calls; each ``parse`` builds its filters locally.
    """

    def parse(self, args: str) -> FindPatientCommand:
        if args is None:
            raise TypeError("args must not be None")
        arg_map = tokenize(args, *SEARCH_PREFIXES)

        if not any(arg_map.is_present(p) for p in SEARCH_PREFIXES) or arg_map.preamble:
            raise InvalidCommandFormatError(FindPatientCommand.USAGE)

        name = phone = email = address = remark = None
        tags = None

        raw = arg_map.get_value(PREFIX_NAME)
        if raw is not None:
            name = collapse_whitespace(parse_name(_require_value(raw)).full_name)

        raw = arg_map.get_value(PREFIX_PHONE)
        if raw is not None:
            phone = _require_value(raw)

        raw = arg_map.get_value(PREFIX_EMAIL)
        if raw is not None:
            email = collapse_whitespace(_require_value(raw))

        raw = arg_map.get_value(PREFIX_ADDRESS)
        if raw is not None:
            address = collapse_whitespace(parse_address(_require_value(raw)).value)

        raw = arg_map.get_value(PREFIX_REMARK)
        if raw is not None:
            remark = collapse_whitespace(parse_remark(_require_value(raw)).value)

        tag_values = arg_map.get_all_values(PREFIX_TAG)
        if tag_values:
            tags = parse_tags(_require_value(v) for v in tag_values)

        predicate = PatientSearchPredicate(
            name=name, phone=phone, email=email, address=address, remark=remark, tags=tags
        )
        logger.debug("Parsed find arguments %r into %s", args, predicate)
        return FindPatientCommand(predicate)


def collapse_whitespace(text: str) -> str:
    """Trim and join whitespace-separated tokens with single spaces."""
    return " ".join(text.split())


def _require_value(raw: str) -> str:
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidCommandFormatError(FindPatientCommand.USAGE)
    return trimmed
