# Standard Library
import dataclasses
import re

# Local modules
import gift_analyze.corpus
import gift_analyze.errors
import gift_analyze.tokenize


EXPORT_SEPARATOR = "\n\n\n"


#============================================


@dataclasses.dataclass(frozen=True)
class ExportResult:
	"""Concatenated raw text, or the first identifier that was not found."""
	text: str | None = None
	error: gift_analyze.errors.NotFoundError | None = None

	@property
	def ok(self) -> bool:
		return self.error is None


#============================================


def _compile_title_rx(identifier: str) -> re.Pattern:
	return re.compile(r"\A::\s*" + re.escape(identifier) + r"\s*::")


def _compile_query_rx(query: str) -> re.Pattern:
	return re.compile(r"(?<!\w)" + re.escape(query) + r"(?!\w)", re.IGNORECASE)


#============================================


def find_block_by_id(
	identifier: str,
	entry: gift_analyze.corpus.CorpusEntry,
) -> gift_analyze.tokenize.QuestionBlock | None:
	"""
	Return the first block in one file whose title equals identifier.

	Raises:
		MalformedQuestionError: the matching block has an empty body.
	"""
	title_rx = _compile_title_rx(identifier)
	for block in gift_analyze.tokenize.tokenize(entry.text):
		if not title_rx.match(block.raw_text):
			continue
		title, _body = block.parse()
		# an id containing :: can match a shorter title
		if title != identifier.strip():
			continue
		return block
	return None


#============================================


def find_by_id(
	identifier: str,
	corpus: list[gift_analyze.corpus.CorpusEntry],
	*,
	raw: bool = False,
) -> list:
	"""
	Locate a question by exact title across a corpus.

	At most one match per file. Returns QuestionBlocks, or their raw text
	when raw is True.
	"""
	matches: list = []
	for entry in corpus:
		block = find_block_by_id(identifier, entry)
		if block is None:
			continue
		matches.append(block.raw_text if raw else block)
	return matches


#============================================


def find_by_query(
	query: str,
	corpus: list[gift_analyze.corpus.CorpusEntry],
) -> list[gift_analyze.tokenize.QuestionBlock]:
	"""
	Return every block containing query as a case-insensitive whole word.

	Raises:
		MalformedQuestionError: a matching block has no title or body.
	"""
	query_rx = _compile_query_rx(query)
	matches: list[gift_analyze.tokenize.QuestionBlock] = []
	for entry in corpus:
		for block in gift_analyze.tokenize.tokenize(entry.text):
			if not query_rx.search(block.raw_text):
				continue
			block.parse()
			matches.append(block)
	return matches


#============================================


def export_raw(
	identifiers: list[str],
	corpus: list[gift_analyze.corpus.CorpusEntry],
) -> ExportResult:
	"""
	Concatenate the raw text of each identified question, in identifier order.

	Blocks are separated by two blank lines. The first identifier absent from
	the corpus is returned as the result's error instead of text.
	"""
	parts: list[str] = []
	for identifier in identifiers:
		found = find_by_id(identifier, corpus, raw=True)
		if not found:
			return ExportResult(error=gift_analyze.errors.NotFoundError(identifier))
		parts.append(found[0])
	return ExportResult(text=EXPORT_SEPARATOR.join(parts))
