# Standard Library
import dataclasses

# Local modules
import gift_analyze.classify
import gift_analyze.config
import gift_analyze.corpus
import gift_analyze.errors
import gift_analyze.tokenize


#============================================


def empty_counts() -> dict[str, int]:
	return {question_type: 0 for question_type in gift_analyze.classify.QUESTION_TYPES}


def _inc(counter: dict[str, int], key: str, amount: int = 1) -> None:
	counter[key] = counter.get(key, 0) + amount


#============================================


def type_counts(text: str) -> dict[str, int]:
	"""
	Count questions per type in one document; all types present, zero-filled.
	"""
	counts = empty_counts()
	for block in gift_analyze.tokenize.tokenize(text):
		_inc(counts, gift_analyze.classify.classify(block))
	return counts


#============================================


class RunningAverage:
	"""
	Incremental per-type mean over files folded in one at a time.
	"""

	def __init__(self) -> None:
		self.means: dict[str, float] = {t: 0.0 for t in gift_analyze.classify.QUESTION_TYPES}
		self.n = 0

	def add(self, counts: dict[str, int]) -> None:
		self.n += 1
		n = self.n
		for question_type in self.means:
			count = counts.get(question_type, 0)
			self.means[question_type] = (self.means[question_type] * (n - 1) + count) / n

	def snapshot(self) -> dict[str, float]:
		return dict(self.means)


#============================================


def type_averages(corpus: list[gift_analyze.corpus.CorpusEntry]) -> dict[str, float]:
	"""
	Mean question count per type across the corpus, in corpus order.

	An empty corpus gives all-zero averages.
	"""
	running = RunningAverage()
	for entry in corpus:
		running.add(type_counts(entry.text))
	return running.snapshot()


#============================================


@dataclasses.dataclass(frozen=True)
class TypeComparison:
	question_type: str
	exam_count: int
	corpus_average: float

	@property
	def difference(self) -> float:
		return self.exam_count - self.corpus_average

	@property
	def in_both(self) -> bool:
		return self.exam_count > 0 and self.corpus_average > 0.0


def compare_profile(
	exam_counts: dict[str, int],
	averages: dict[str, float],
) -> list[TypeComparison]:
	"""
	Line up an exam's type counts against corpus averages, in display order.
	"""
	rows: list[TypeComparison] = []
	for question_type in gift_analyze.classify.QUESTION_TYPES:
		rows.append(
			TypeComparison(
				question_type=question_type,
				exam_count=int(exam_counts.get(question_type, 0)),
				corpus_average=float(averages.get(question_type, 0.0)),
			)
		)
	return rows


#============================================


def check_question_bounds(count: int, config: gift_analyze.config.AnalyzeConfig) -> None:
	"""
	Raise CountMismatchError when an exam size falls outside the configured bounds.
	"""
	if count < config.min_questions:
		raise gift_analyze.errors.CountMismatchError(
			"Too few questions for an exam (minimum)", config.min_questions, count
		)
	if count > config.max_questions:
		raise gift_analyze.errors.CountMismatchError(
			"Too many questions for an exam (maximum)", config.max_questions, count
		)
