# Standard Library
import dataclasses
import re

# Local modules
import gift_analyze.classify
import gift_analyze.tokenize


CORRECT_RX = re.compile(r"=([^~=]*)")
FIRST_CORRECT_RX = re.compile(r"=([^~]*)")


#============================================


@dataclasses.dataclass(frozen=True)
class AnswerUnit:
	"""One {...} answer span, tagged with its question's type."""
	content: str
	question_type: str


#============================================


def validatable_blocks(
	blocks: list[gift_analyze.tokenize.QuestionBlock],
) -> list[tuple[gift_analyze.tokenize.QuestionBlock, str]]:
	"""
	Return (block, type) pairs for questions with a checkable answer key.
	"""
	pairs: list[tuple[gift_analyze.tokenize.QuestionBlock, str]] = []
	for block in blocks:
		question_type = gift_analyze.classify.classify(block)
		if gift_analyze.classify.is_validatable(question_type):
			pairs.append((block, question_type))
	return pairs


#============================================


def extract(pairs: list[tuple[gift_analyze.tokenize.QuestionBlock, str]]) -> list[AnswerUnit]:
	"""
	Flatten every answer construct of every question into one ordered list.
	"""
	units: list[AnswerUnit] = []
	for block, question_type in pairs:
		for content in gift_analyze.classify.answer_constructs(block.raw_text):
			units.append(AnswerUnit(content=content, question_type=question_type))
	return units


#============================================


def correct_choice(content: str) -> str | None:
	"""
	Text after the first '=' up to the next '~', trimmed.
	"""
	m = FIRST_CORRECT_RX.search(content)
	if not m:
		return None
	return m.group(1).strip()


#============================================


def accepted_variants(content: str) -> list[str]:
	"""
	Every '='-prefixed variant, trimmed.
	"""
	return [m.group(1).strip() for m in CORRECT_RX.finditer(content)]
