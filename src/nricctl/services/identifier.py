"""IdentifierService: complete, validate, and inspect NRIC/FIN numbers.

Wraps the domain constructors so callers get a :class:`ServiceResult`
instead of catching :class:`NRICError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog

from nricctl.domain.errors import InvalidCharacterError, NRICError
from nricctl.domain.identifier import Identifier, construct, parse
from nricctl.services.base import BaseService
from nricctl.services.result import ServiceResult

logger = structlog.get_logger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


class IdentifierService(BaseService):
    """Identifier operations driven by the ``[input]`` and ``[output]`` config."""

    # ── Input handling ────────────────────────────────────────────────

    def _normalize(self, text: str) -> str:
        if self._settings.input.normalize:
            return text.strip().upper()
        return text

    def _digits_from(self, digits: str) -> list[int]:
        """Reduce a digit string to integers.

        With ``ignore_separators`` every non-digit character is dropped,
        so ``"123-4567"`` and ``"123 4567"`` both give seven digits.
        """
        if self._settings.input.ignore_separators:
            return [int(ch) for ch in digits if ch in _ASCII_DIGITS]
        for ch in digits:
            if ch not in _ASCII_DIGITS:
                msg = f"{digits!r} contains non-digit character {ch!r}"
                raise InvalidCharacterError(msg)
        return [int(ch) for ch in digits]

    def _check_fields(self, identifier: Identifier) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "identifier": str(identifier),
            "valid": identifier.is_valid(),
            "check_digit": identifier.check_digit,
        }
        if self._settings.output.show_expected:
            fields["expected_check_digit"] = identifier.expected_check_digit()
        return fields

    # ── Operations ────────────────────────────────────────────────────

    def complete(self, prefix: str, digits: str) -> ServiceResult:
        """Compute the check digit for *prefix* and a 7-digit body string."""
        op = "complete"
        if self._settings.input.normalize:
            prefix = prefix.strip().upper()
        try:
            identifier = construct(prefix, self._digits_from(digits))
        except NRICError as exc:
            logger.debug("identifier.complete.failed", prefix=prefix, code=exc.code)
            return self._failure(op, exc, prefix=prefix, digits=digits)

        logger.debug("identifier.complete", identifier=str(identifier))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "prefix": identifier.prefix.value,
                "digits": "".join(str(d) for d in identifier.digits),
                "check_digit": identifier.check_digit,
                "identifier": str(identifier),
            },
        )

    def validate(self, text: str) -> ServiceResult:
        """Parse *text* and report whether its check digit is correct.

        A well-formed identifier with the wrong check digit is a successful
        result with ``valid=False``; only malformed input fails.
        """
        op = "validate"
        normalized = self._normalize(text)
        try:
            identifier = parse(normalized)
        except NRICError as exc:
            logger.debug("identifier.validate.failed", input=text, code=exc.code)
            return self._failure(op, exc, input=text)

        warnings: list[str] = []
        if normalized != text:
            warnings.append(f"Input {text!r} normalized to {normalized!r}")

        data = self._check_fields(identifier)
        logger.debug("identifier.validate", identifier=data["identifier"], valid=data["valid"])
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def validate_batch(self, texts: Iterable[str]) -> ServiceResult:
        """Validate many identifiers; malformed entries are reported, not raised."""
        items: list[dict[str, Any]] = []
        for text in texts:
            try:
                identifier = parse(self._normalize(text))
            except NRICError as exc:
                items.append({"input": text, "valid": False, "error": exc.code})
                continue
            items.append({"input": text, **self._check_fields(identifier)})

        valid_count = sum(1 for item in items if item["valid"])
        logger.debug("identifier.validate_batch", count=len(items), valid=valid_count)
        return ServiceResult(
            ok=True,
            op="validate_batch",
            data={
                "items": items,
                "count": len(items),
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
            },
        )

    def inspect(self, text: str) -> ServiceResult:
        """Parse *text* and report every field of the identifier."""
        op = "inspect"
        try:
            identifier = parse(self._normalize(text))
        except NRICError as exc:
            return self._failure(op, exc, input=text)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "identifier": str(identifier),
                "prefix": identifier.prefix.value,
                "family": identifier.family.value,
                "offset": identifier.prefix.offset,
                "digits": list(identifier.digits),
                "check_digit": identifier.check_digit,
                "expected_check_digit": identifier.expected_check_digit(),
                "valid": identifier.is_valid(),
            },
        )
