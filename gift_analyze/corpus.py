# Standard Library
import dataclasses
import os
import typing

# Local modules
import gift_analyze.config


@dataclasses.dataclass(frozen=True)
class CorpusEntry:
	path: str
	text: str


#============================================


def scan_gift_files(roots: list[str], config: gift_analyze.config.AnalyzeConfig) -> list[str]:
	"""
	Return a sorted list of exam file paths under the given roots.

	Roots may be files or directories; missing roots are skipped.
	"""
	extensions = tuple(config.extensions)
	found: list[str] = []
	for root in roots:
		if not os.path.exists(root):
			continue
		if os.path.isfile(root):
			if root.endswith(extensions):
				found.append(root)
			continue
		for dirpath, dirnames, filenames in os.walk(root):
			dirnames[:] = [d for d in dirnames if d != ".git"]
			for filename in filenames:
				if not filename.endswith(extensions):
					continue
				found.append(os.path.join(dirpath, filename))
	return sorted(set(found))


#============================================


def read_text(path: str) -> str:
	with open(path, "r", encoding="utf-8") as f:
		return f.read()


#============================================


def load_corpus(
	paths: list[str],
	read: typing.Callable[[str], str] = read_text,
) -> list[CorpusEntry]:
	"""
	Read every path into a CorpusEntry, preserving order.

	OSError from read propagates unchanged.
	"""
	return [CorpusEntry(path=path, text=read(path)) for path in paths]
