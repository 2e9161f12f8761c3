"""
Format result models.

Defines the value returned by a successful invocation and the JSON
envelope the CLI prints for both success and failure.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUCCESS_REPORT = "ok"


class FormatResult(BaseModel):
	"""Outcome of a successful formatter invocation."""

	model_config = ConfigDict(frozen=True)

	report: str = SUCCESS_REPORT


class CommandResponse(BaseModel):
	"""CLI response envelope: exactly one of Result or Error."""

	model_config = ConfigDict(populate_by_name=True)

	result: Optional[str] = Field(default=None, alias="Result")
	error: Optional[str] = Field(default=None, alias="Error")

	@model_validator(mode="after")
	def check_exclusive(self) -> "CommandResponse":
		if (self.result is None) == (self.error is None):
			raise ValueError("exactly one of Result or Error must be set")
		return self

	@classmethod
	def success(cls, result: FormatResult) -> "CommandResponse":
		return cls(result=result.report)

	@classmethod
	def failure(cls, exc: Exception) -> "CommandResponse":
		return cls(error=str(exc))

	@property
	def exit_code(self) -> int:
		return 0 if self.error is None else 1

	def to_json(self) -> str:
		"""Serialize with the envelope key names, omitting the unset side."""
		return self.model_dump_json(by_alias=True, exclude_none=True)


__all__ = ["FormatResult", "CommandResponse", "SUCCESS_REPORT"]
