# Local modules
import gift_analyze
import gift_analyze.classify
import gift_analyze.tokenize
import gift_analyze.validate


def test_submodules_stay_reachable_after_package_import() -> None:
	blocks = gift_analyze.tokenize.tokenize("::Q1:: Sky is blue. {T}\n")
	assert gift_analyze.classify.classify(blocks[0]) == gift_analyze.classify.TRUE_FALSE
	assert gift_analyze.validate.validate("::Q1:: Sky is blue. {T}\n", ["T"]) == [True]


def test_package_reexports() -> None:
	assert gift_analyze.type_counts("::Q1:: {}")["essay"] == 1
	assert gift_analyze.find_by_id is gift_analyze.locate.find_by_id
