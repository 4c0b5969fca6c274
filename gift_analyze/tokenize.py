# Standard Library
import dataclasses
import re

# Local modules
import gift_analyze.errors


COMMENT_MARKER = "//"
CATEGORY_MARKER = "$CATEGORY:"
SENTINEL_RX = re.compile(r"^::", re.MULTILINE)
TITLE_BODY_RX = re.compile(r"::(.*?)::(.*?)(?=^::|\Z)", re.DOTALL | re.MULTILINE)


#============================================


@dataclasses.dataclass(frozen=True)
class QuestionBlock:
	"""
	One question, from its title sentinel to the next sentinel or end of text.

	title and body are parsed on access and raise MalformedQuestionError
	when the block has no ::title:: / body pair.
	"""
	raw_text: str
	line: int | None = None

	def parse(self) -> tuple[str, str]:
		return split_title_body(self.raw_text, line=self.line)

	@property
	def title(self) -> str:
		return self.parse()[0]

	@property
	def body(self) -> str:
		return self.parse()[1]


#============================================


def strip_comments(text: str) -> str:
	"""
	Drop // comment lines and $CATEGORY: directives; other lines are kept verbatim.
	"""
	kept: list[str] = []
	for line in text.split("\n"):
		if _is_dropped_line(line):
			continue
		kept.append(line)
	return "\n".join(kept)


def _is_dropped_line(line: str) -> bool:
	trimmed = line.strip()
	return trimmed.startswith(COMMENT_MARKER) or trimmed.startswith(CATEGORY_MARKER)


#============================================


def tokenize(text: str) -> list[QuestionBlock]:
	"""
	Split raw GIFT text into question blocks, in file order.

	Comments are stripped first. Text before the first sentinel is not a block.
	"""
	clean = strip_comments(text)
	return tokenize_stripped(clean)


def tokenize_stripped(clean: str) -> list[QuestionBlock]:
	blocks: list[QuestionBlock] = []
	for start, end in _iter_block_spans(clean):
		chunk = clean[start:end]
		raw_text = chunk.strip()
		if not raw_text:
			continue
		blocks.append(QuestionBlock(raw_text=raw_text, line=clean.count("\n", 0, start) + 1))
	return blocks


def _iter_block_spans(clean: str) -> list[tuple[int, int]]:
	starts = [m.start() for m in SENTINEL_RX.finditer(clean)]
	spans: list[tuple[int, int]] = []
	for i, start in enumerate(starts):
		end = starts[i + 1] if i + 1 < len(starts) else len(clean)
		spans.append((start, end))
	return spans


#============================================


def split_title_body(raw_text: str, line: int | None = None) -> tuple[str, str]:
	"""
	Return the trimmed (title, body) of a block.

	Raises:
		MalformedQuestionError: no ::title:: pair, or an empty title or body.
	"""
	m = TITLE_BODY_RX.search(raw_text)
	if not m:
		raise gift_analyze.errors.MalformedQuestionError(raw_text, line=line)
	title = m.group(1).strip()
	body = m.group(2).strip()
	if not title or not body:
		raise gift_analyze.errors.MalformedQuestionError(raw_text, line=line)
	return title, body
