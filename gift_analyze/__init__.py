"""GIFT exam analysis package."""

from gift_analyze.aggregate import type_counts, type_averages, compare_profile
from gift_analyze.classify import QUESTION_TYPES
from gift_analyze.config import AnalyzeConfig, load_config
from gift_analyze.corpus import CorpusEntry, load_corpus, scan_gift_files
from gift_analyze.errors import CountMismatchError, MalformedQuestionError, NotFoundError
from gift_analyze.locate import export_raw, find_by_id, find_by_query
from gift_analyze.tokenize import QuestionBlock, strip_comments

__all__ = [
	"type_counts",
	"type_averages",
	"compare_profile",
	"QUESTION_TYPES",
	"AnalyzeConfig",
	"load_config",
	"CorpusEntry",
	"load_corpus",
	"scan_gift_files",
	"CountMismatchError",
	"MalformedQuestionError",
	"NotFoundError",
	"export_raw",
	"find_by_id",
	"find_by_query",
	"QuestionBlock",
	"strip_comments",
]
