# Standard Library
import re
import typing

# Local modules
import gift_analyze.tokenize


TRUE_FALSE = "true_false"
NUMERICAL = "numerical"
MATCHING = "matching"
SHORT_ANSWER = "short_answer"
MULTIPLE_CHOICE = "multiple_choice"
ESSAY = "essay"
DESCRIPTION = "description"

# Display order; matches classification priority with the fallback last.
QUESTION_TYPES: tuple[str, ...] = (
	TRUE_FALSE,
	NUMERICAL,
	MATCHING,
	SHORT_ANSWER,
	MULTIPLE_CHOICE,
	ESSAY,
	DESCRIPTION,
)

# Types with no answer key to check.
UNVALIDATED_TYPES = frozenset({ESSAY, DESCRIPTION})

ANSWER_CONSTRUCT_RX = re.compile(r"\{([^{}]*)\}")


#============================================


def _is_true_false(content: str) -> bool:
	return content.strip() in ("T", "F")


def _is_numerical(content: str) -> bool:
	return content.lstrip().startswith("#")


def _is_matching(content: str) -> bool:
	return "->" in content


def _is_short_answer(content: str) -> bool:
	return ("=" in content) and ("~" not in content)


def _is_multiple_choice(content: str) -> bool:
	return (("~" in content) or ("=" in content)) and ("->" not in content)


def _is_essay(content: str) -> bool:
	return content.strip() == ""


# First match wins; later shapes overlap earlier ones, so order is significant.
CLASSIFICATION_RULES: tuple[tuple[typing.Callable[[str], bool], str], ...] = (
	(_is_true_false, TRUE_FALSE),
	(_is_numerical, NUMERICAL),
	(_is_matching, MATCHING),
	(_is_short_answer, SHORT_ANSWER),
	(_is_multiple_choice, MULTIPLE_CHOICE),
	(_is_essay, ESSAY),
)


#============================================


def answer_constructs(text: str) -> list[str]:
	"""
	Return the contents of every {...} construct, in document order.

	Constructs may span lines.
	"""
	return [m.group(1) for m in ANSWER_CONSTRUCT_RX.finditer(text)]


#============================================


def classify(block: gift_analyze.tokenize.QuestionBlock | str) -> str:
	"""
	Return the question type of one block.
	"""
	text = block.raw_text if isinstance(block, gift_analyze.tokenize.QuestionBlock) else block
	constructs = answer_constructs(text)
	for predicate, question_type in CLASSIFICATION_RULES:
		for content in constructs:
			if predicate(content):
				return question_type
	return DESCRIPTION


#============================================


def is_validatable(question_type: str) -> bool:
	return question_type not in UNVALIDATED_TYPES
