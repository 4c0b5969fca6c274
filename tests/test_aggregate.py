# Standard Library
import pytest

# Local modules
import gift_analyze.aggregate
import gift_analyze.classify
import gift_analyze.config
import gift_analyze.corpus
import gift_analyze.errors
import gift_analyze.tokenize


EXAM = (
	"$CATEGORY: demo\n"
	"::Q1:: Water is wet. {T}\n"
	"::Q2:: How many? {#4}\n"
	"::Q3:: Match. {=a -> 1 =b -> 2}\n"
	"::Q4:: Name it. {=x =y}\n"
	"::Q5:: Pick. {=a ~b}\n"
	"::Q6:: Pick again. {~c =d}\n"
	"::Q7:: Discuss. {}\n"
	"::Q8:: Intro text only.\n"
)


#============================================


def test_type_counts_all_keys_zero_filled() -> None:
	counts = gift_analyze.aggregate.type_counts("")
	assert list(counts) == list(gift_analyze.classify.QUESTION_TYPES)
	assert set(counts.values()) == {0}


def test_type_counts_tally() -> None:
	counts = gift_analyze.aggregate.type_counts(EXAM)
	assert counts == {
		"true_false": 1,
		"numerical": 1,
		"matching": 1,
		"short_answer": 1,
		"multiple_choice": 2,
		"essay": 1,
		"description": 1,
	}


@pytest.mark.parametrize(
	"text",
	[
		"",
		EXAM,
		"::A:: {T}\n// skipped\n::B:: {}\n::C:: no braces\n",
		"stray preamble\n::A:: {=1}\n",
	],
)
def test_type_counts_sum_equals_block_count(text: str) -> None:
	counts = gift_analyze.aggregate.type_counts(text)
	assert sum(counts.values()) == len(gift_analyze.tokenize.tokenize(text))


#============================================


def test_type_averages_identical_files_equal_single_counts() -> None:
	corpus = [gift_analyze.corpus.CorpusEntry(path=f"{i}.gift", text=EXAM) for i in range(5)]
	averages = gift_analyze.aggregate.type_averages(corpus)
	counts = gift_analyze.aggregate.type_counts(EXAM)
	assert averages == {k: float(v) for k, v in counts.items()}


def test_type_averages_matches_batch_mean() -> None:
	texts = [
		"::A:: {T}\n::B:: {T}\n::C:: {}\n",
		"::A:: {F}\n",
		"::A:: {=x}\n::B:: {=y}\n::C:: {=z}\n::D:: {T}\n",
	]
	corpus = [gift_analyze.corpus.CorpusEntry(path=str(i), text=t) for i, t in enumerate(texts)]
	averages = gift_analyze.aggregate.type_averages(corpus)
	assert averages["true_false"] == pytest.approx(4 / 3)
	assert averages["short_answer"] == pytest.approx(1.0)
	assert averages["essay"] == pytest.approx(1 / 3)
	assert averages["matching"] == 0.0


def test_type_averages_empty_corpus() -> None:
	averages = gift_analyze.aggregate.type_averages([])
	assert averages == {t: 0.0 for t in gift_analyze.classify.QUESTION_TYPES}


def test_running_average_tracks_file_count() -> None:
	running = gift_analyze.aggregate.RunningAverage()
	running.add({"essay": 2})
	running.add({"essay": 4})
	assert running.n == 2
	assert running.snapshot()["essay"] == 3.0


#============================================


def test_compare_profile_rows() -> None:
	exam = gift_analyze.aggregate.type_counts("::A:: {T}\n::B:: {}\n")
	averages = {t: 0.0 for t in gift_analyze.classify.QUESTION_TYPES}
	averages["true_false"] = 2.5
	averages["numerical"] = 1.0
	rows = {r.question_type: r for r in gift_analyze.aggregate.compare_profile(exam, averages)}
	assert rows["true_false"].exam_count == 1
	assert rows["true_false"].difference == -1.5
	assert rows["true_false"].in_both
	assert not rows["essay"].in_both
	assert not rows["numerical"].in_both


#============================================


def test_check_question_bounds() -> None:
	config = gift_analyze.config.AnalyzeConfig(min_questions=2, max_questions=3)
	gift_analyze.aggregate.check_question_bounds(2, config)
	gift_analyze.aggregate.check_question_bounds(3, config)
	with pytest.raises(gift_analyze.errors.CountMismatchError) as too_few:
		gift_analyze.aggregate.check_question_bounds(1, config)
	assert too_few.value.expected == 2
	assert too_few.value.actual == 1
	with pytest.raises(gift_analyze.errors.CountMismatchError):
		gift_analyze.aggregate.check_question_bounds(4, config)
