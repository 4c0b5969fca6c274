# Standard Library


#============================================


class NotFoundError(LookupError):
	"""An identifier or file is absent from the corpus."""

	def __init__(self, identifier: str, message: str | None = None) -> None:
		self.identifier = identifier
		if message is None:
			message = f"Question not found: {identifier}"
		super().__init__(message)


#============================================


class MalformedQuestionError(ValueError):
	"""A question block has no ::title:: / body delimiter pair."""

	def __init__(self, raw_text: str, line: int | None = None) -> None:
		self.raw_text = raw_text
		self.line = line
		preview = " ".join(raw_text.split())
		if len(preview) > 60:
			preview = preview[:57] + "..."
		where = f" at line {line}" if line is not None else ""
		super().__init__(f"Malformed question block{where} (missing ::title:: or body): {preview!r}")


#============================================


class CountMismatchError(ValueError):
	"""Submitted answer count disagrees with what the exam expects."""

	def __init__(self, what: str, expected: int, actual: int) -> None:
		self.what = what
		self.expected = expected
		self.actual = actual
		super().__init__(f"{what}: expected {expected}, got {actual}")
