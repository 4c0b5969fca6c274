# Standard Library
import csv
import io
import os

# Local modules
import gift_analyze.aggregate


#============================================


def render_type_tsv(values: dict[str, int] | dict[str, float], *, value_name: str = "count") -> str:
	"""
	Render a type map as a two-column TSV, keeping the map's order.
	"""
	buf = io.StringIO()
	w = csv.writer(buf, dialect="excel-tab", lineterminator="\n")
	w.writerow(["type", value_name])
	for question_type, value in values.items():
		if isinstance(value, float):
			w.writerow([question_type, f"{value:.2f}"])
		else:
			w.writerow([question_type, value])
	return buf.getvalue()


#============================================


def render_comparison_tsv(rows: list[gift_analyze.aggregate.TypeComparison]) -> str:
	buf = io.StringIO()
	w = csv.writer(buf, dialect="excel-tab", lineterminator="\n")
	w.writerow(["type", "exam_count", "corpus_average", "difference", "in_both"])
	for row in rows:
		w.writerow([
			row.question_type,
			row.exam_count,
			f"{row.corpus_average:.2f}",
			f"{row.difference:+.2f}",
			1 if row.in_both else 0,
		])
	return buf.getvalue()


#============================================


def write_tsv(tsv_out_file: str, content: str) -> None:
	out_dir = os.path.dirname(tsv_out_file)
	if out_dir:
		os.makedirs(out_dir, exist_ok=True)
	with open(tsv_out_file, "w", encoding="utf-8", newline="") as f:
		f.write(content)
