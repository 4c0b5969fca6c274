# Standard Library
import pytest

# Local modules
import gift_analyze.corpus
import gift_analyze.errors
import gift_analyze.locate


FILE_A = (
	"// unit 1\n"
	"::Q1:: The cat sat on the mat. {T}\n"
	"\n"
	"::Q2:: Which category? {=one ~two}\n"
	"::Q(3)+:: Special title {=x}\n"
)
FILE_B = (
	"::Q1:: Duplicate title in another file. {F}\n"
	"::CAT:: CAT is an acronym here. {}\n"
	"::Lang:: Who writes C++ daily? {~me =you}\n"
)


def _corpus() -> list[gift_analyze.corpus.CorpusEntry]:
	return [
		gift_analyze.corpus.CorpusEntry(path="a.gift", text=FILE_A),
		gift_analyze.corpus.CorpusEntry(path="b.gift", text=FILE_B),
	]


#============================================


def test_find_by_id_one_match_per_file() -> None:
	matches = gift_analyze.locate.find_by_id("Q1", _corpus())
	assert [(b.title, b.body) for b in matches] == [
		("Q1", "The cat sat on the mat. {T}"),
		("Q1", "Duplicate title in another file. {F}"),
	]


def test_find_by_id_is_idempotent() -> None:
	corpus = _corpus()
	first = gift_analyze.locate.find_by_id("Q2", corpus)
	second = gift_analyze.locate.find_by_id("Q2", corpus)
	assert first == second
	assert len(first) == 1


def test_find_by_id_escapes_special_characters() -> None:
	matches = gift_analyze.locate.find_by_id("Q(3)+", _corpus())
	assert len(matches) == 1
	assert matches[0].body == "Special title {=x}"


def test_find_by_id_requires_exact_title() -> None:
	assert gift_analyze.locate.find_by_id("Q", _corpus()) == []
	assert gift_analyze.locate.find_by_id("Q(3)", _corpus()) == []


def test_find_by_id_raw_returns_untouched_block_text() -> None:
	matches = gift_analyze.locate.find_by_id("Q2", _corpus(), raw=True)
	assert matches == ["::Q2:: Which category? {=one ~two}"]


def test_find_by_id_malformed_match_is_surfaced() -> None:
	corpus = [gift_analyze.corpus.CorpusEntry(path="bad.gift", text="::Empty::\n::Other:: fine {T}\n")]
	with pytest.raises(gift_analyze.errors.MalformedQuestionError):
		gift_analyze.locate.find_by_id("Empty", corpus)


#============================================


def test_find_by_query_whole_word_case_insensitive() -> None:
	matches = gift_analyze.locate.find_by_query("cat", _corpus())
	assert [b.title for b in matches] == ["Q1", "CAT"]


def test_find_by_query_does_not_match_inside_words() -> None:
	matches = gift_analyze.locate.find_by_query("categ", _corpus())
	assert matches == []


def test_find_by_query_escapes_special_characters() -> None:
	matches = gift_analyze.locate.find_by_query("c++", _corpus())
	assert [b.title for b in matches] == ["Lang"]


#============================================


def test_export_raw_round_trip() -> None:
	corpus = _corpus()
	raw = gift_analyze.locate.find_by_id("Q2", corpus, raw=True)[0]
	result = gift_analyze.locate.export_raw(["Q2"], corpus)
	assert result.ok
	assert result.text.strip() == raw.strip()


def test_export_raw_separates_blocks_with_two_blank_lines() -> None:
	result = gift_analyze.locate.export_raw(["Q2", "CAT"], _corpus())
	assert result.text == "::Q2:: Which category? {=one ~two}\n\n\n::CAT:: CAT is an acronym here. {}"


def test_export_raw_reports_first_missing_identifier() -> None:
	result = gift_analyze.locate.export_raw(["Q2", "missing-1", "missing-2"], _corpus())
	assert not result.ok
	assert result.text is None
	assert isinstance(result.error, gift_analyze.errors.NotFoundError)
	assert result.error.identifier == "missing-1"


def test_find_by_query_malformed_match_aborts() -> None:
	corpus = [gift_analyze.corpus.CorpusEntry(path="bad.gift", text="::Q1:: the cat {T}\n::broken cat {F}\n")]
	with pytest.raises(gift_analyze.errors.MalformedQuestionError):
		gift_analyze.locate.find_by_query("cat", corpus)


def test_find_by_query_ignores_malformed_non_matches() -> None:
	corpus = [gift_analyze.corpus.CorpusEntry(path="mixed.gift", text="::Q1:: the cat {T}\n::broken dog {F}\n")]
	assert [b.title for b in gift_analyze.locate.find_by_query("cat", corpus)] == ["Q1"]


def test_find_by_id_with_double_colon_requires_whole_title() -> None:
	corpus = [gift_analyze.corpus.CorpusEntry(path="c.gift", text="::a::b:: body {T}\n")]
	assert gift_analyze.locate.find_by_id("a::b", corpus) == []
	matches = gift_analyze.locate.find_by_id("a", corpus)
	assert [b.title for b in matches] == ["a"]
