# Standard Library

# Local modules
import gift_analyze.classify
import gift_analyze.errors
import gift_analyze.extract_answers
import gift_analyze.tokenize


#============================================


def validate(exam_text: str, answers: list[str]) -> list[bool | None]:
	"""
	Check submitted answers against the exam's embedded answer keys.

	Essay and description questions take no answer. Each remaining question
	contributes one answer unit per {...} construct. Returns one entry per
	answer: True, False, or None when the type has no comparison rule.

	Raises:
		CountMismatchError: answer count differs from the validatable question
			count, or from the flattened answer-unit count.
	"""
	blocks = gift_analyze.tokenize.tokenize(exam_text)
	pairs = gift_analyze.extract_answers.validatable_blocks(blocks)
	if len(pairs) != len(answers):
		raise gift_analyze.errors.CountMismatchError(
			"Answer count does not match question count", len(pairs), len(answers)
		)

	units = gift_analyze.extract_answers.extract(pairs)
	if len(units) != len(answers):
		raise gift_analyze.errors.CountMismatchError(
			"Answer count does not match answer-key count", len(units), len(answers)
		)

	return [check_answer(answer, unit) for answer, unit in zip(answers, units)]


#============================================


def check_answer(answer: str, unit: gift_analyze.extract_answers.AnswerUnit) -> bool | None:
	question_type = unit.question_type
	if question_type == gift_analyze.classify.TRUE_FALSE:
		return answer == unit.content.strip()
	if question_type == gift_analyze.classify.MULTIPLE_CHOICE:
		correct = gift_analyze.extract_answers.correct_choice(unit.content)
		if correct is None:
			return None
		return answer == correct
	if question_type == gift_analyze.classify.SHORT_ANSWER:
		variants = gift_analyze.extract_answers.accepted_variants(unit.content)
		if not variants:
			return None
		return answer in variants
	# matching and numerical keys are extracted but not judged
	return None
