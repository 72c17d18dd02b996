"""Exception raised when a schema cannot be turned into a tree."""

from __future__ import annotations

from device_schema.result import ValidationReport

__all__ = ["SchemaValidationError"]


class SchemaValidationError(ValueError):
    """Raised when descriptor validation or tree construction fails.

    Carries the complete ``ValidationReport`` so callers can show every
    problem at once instead of only the first one.
    """

    def __init__(
        self,
        report: ValidationReport,
        message: str = "Could not create, because some fields are invalid.",
    ) -> None:
        self.report = report
        details = "; ".join(report.messages)
        super().__init__(f"{message} {details}" if details else message)

    @property
    def invalid_fields(self) -> dict[str, list[str]]:
        return self.report.as_dict()
