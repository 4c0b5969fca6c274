#!/usr/bin/env python3

# Standard Library
import argparse
import dataclasses
import os
import sys

# Local modules
import gift_analyze.aggregate
import gift_analyze.chart
import gift_analyze.config
import gift_analyze.corpus
import gift_analyze.errors
import gift_analyze.locate
import gift_analyze.report_tsv
import gift_analyze.validate
import gift_analyze.vcard


def main(argv: list[str] | None = None) -> int:
	args = parse_args(argv)
	try:
		config = gift_analyze.config.load_config(args.config_file)
		if args.data_dir:
			config = dataclasses.replace(config, data_dir=args.data_dir)
		return args.handler(args, config)
	except (gift_analyze.errors.NotFoundError, OSError, ValueError) as exc:
		_log(f"gift_analyze: error: {exc}")
		return 1


#============================================


def _log(msg: str) -> None:
	print(msg, file=sys.stderr, flush=True)


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(prog="gift_analyze")
	parser.add_argument(
		"-c",
		"--config",
		dest="config_file",
		help="Optional JSON file overriding the default configuration.",
	)
	parser.add_argument(
		"-d",
		"--data-dir",
		dest="data_dir",
		help="Question database directory (default: from config, 'data').",
	)
	sub = parser.add_subparsers(dest="command", required=True)

	p = sub.add_parser("find", help="Find questions by exact id or by text query.")
	group = p.add_mutually_exclusive_group(required=True)
	group.add_argument("--id", dest="question_id", help="Exact question title.")
	group.add_argument("--query", dest="query", help="Whole-word, case-insensitive text query.")
	p.set_defaults(handler=cmd_find)

	p = sub.add_parser("generate", help="Build a GIFT exam file from question ids.")
	p.add_argument("-o", "--out", dest="out_file", required=True, help="Output .gift file.")
	p.add_argument("ids", nargs="+", help="Question ids, in exam order.")
	p.set_defaults(handler=cmd_generate)

	p = sub.add_parser("profile", help="Show question type counts for one exam file.")
	p.add_argument("exam", help="Path to the exam file.")
	p.set_defaults(handler=cmd_profile)

	p = sub.add_parser("visualize", help="Chart average question type counts over the database.")
	p.add_argument("-o", "--out", dest="out_file", help="Optional chart image path (.png, .svg, .pdf).")
	p.add_argument("--tsv", dest="tsv_file", help="Optional TSV output path.")
	p.set_defaults(handler=cmd_visualize)

	p = sub.add_parser("compare", help="Compare an exam profile with the database averages.")
	p.add_argument("exam", help="Path to the exam file.")
	p.set_defaults(handler=cmd_compare)

	p = sub.add_parser("evaluate", help="Validate a list of answers against an exam.")
	p.add_argument("exam", help="Path to the exam file.")
	p.add_argument("answers", help="Comma separated answers, one per question.")
	p.set_defaults(handler=cmd_evaluate)

	p = sub.add_parser("contact", help="Generate a vCard for a teacher.")
	p.add_argument("name", help="Teacher full name.")
	p.add_argument("--email", dest="email", help="Email address.")
	p.add_argument("--tel", dest="tel", help="Telephone number.")
	p.add_argument("-o", "--out", dest="out_file", help="Optional .vcf output path.")
	p.set_defaults(handler=cmd_contact)

	return parser.parse_args(argv)


#============================================


def _load_database(config: gift_analyze.config.AnalyzeConfig) -> list[gift_analyze.corpus.CorpusEntry]:
	paths = gift_analyze.corpus.scan_gift_files([config.data_dir], config)
	_log(f"gift_analyze: found {len(paths)} files under {config.data_dir}")
	return gift_analyze.corpus.load_corpus(paths)


def split_answers(answers_text: str) -> list[str]:
	"""
	Split a comma separated answer list; an empty string gives no answers.
	"""
	if not answers_text.strip():
		return []
	return [a.strip() for a in answers_text.split(",")]


def _format_result(result: bool | None) -> str:
	if result is None:
		return "null"
	return "true" if result else "false"


#============================================


def cmd_find(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	corpus = _load_database(config)
	if args.question_id is not None:
		blocks = gift_analyze.locate.find_by_id(args.question_id, corpus)
		if not blocks:
			raise gift_analyze.errors.NotFoundError(args.question_id)
	else:
		blocks = gift_analyze.locate.find_by_query(args.query, corpus)
		_log(f"gift_analyze: {len(blocks)} questions match {args.query!r}")
	for block in blocks:
		print(f"{block.title}\n\t{block.body}\n")
	return 0


def cmd_generate(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	gift_analyze.aggregate.check_question_bounds(len(args.ids), config)
	corpus = _load_database(config)
	result = gift_analyze.locate.export_raw(args.ids, corpus)
	if not result.ok:
		_log(f"gift_analyze: error: {result.error}")
		return 1
	out_dir = os.path.dirname(args.out_file)
	if out_dir:
		os.makedirs(out_dir, exist_ok=True)
	with open(args.out_file, "w", encoding="utf-8") as f:
		f.write(result.text + "\n")
	_log(f"gift_analyze: wrote {len(args.ids)} questions to {args.out_file}")
	return 0


def cmd_profile(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	text = gift_analyze.corpus.read_text(args.exam)
	counts = gift_analyze.aggregate.type_counts(text)
	sys.stdout.write(gift_analyze.report_tsv.render_type_tsv(counts))
	return 0


def cmd_visualize(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	corpus = _load_database(config)
	averages = gift_analyze.aggregate.type_averages(corpus)
	content = gift_analyze.report_tsv.render_type_tsv(averages, value_name="average")
	sys.stdout.write(content)
	if args.tsv_file:
		gift_analyze.report_tsv.write_tsv(args.tsv_file, content)
		_log(f"gift_analyze: wrote {args.tsv_file}")
	if args.out_file:
		gift_analyze.chart.plot_type_averages(averages, args.out_file)
		_log(f"gift_analyze: wrote {args.out_file}")
	return 0


def cmd_compare(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	exam_counts = gift_analyze.aggregate.type_counts(gift_analyze.corpus.read_text(args.exam))
	averages = gift_analyze.aggregate.type_averages(_load_database(config))
	rows = gift_analyze.aggregate.compare_profile(exam_counts, averages)
	sys.stdout.write(gift_analyze.report_tsv.render_comparison_tsv(rows))
	return 0


def cmd_evaluate(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	text = gift_analyze.corpus.read_text(args.exam)
	answers = split_answers(args.answers)
	results = gift_analyze.validate.validate(text, answers)
	for i, (answer, result) in enumerate(zip(answers, results), start=1):
		print(f"{i}\t{answer}\t{_format_result(result)}")
	return 0


def cmd_contact(args: argparse.Namespace, config: gift_analyze.config.AnalyzeConfig) -> int:
	card = gift_analyze.vcard.build_vcard(args.name, email=args.email, tel=args.tel)
	if not args.out_file:
		print(card)
		return 0
	with open(args.out_file, "w", encoding="utf-8") as f:
		f.write(card + "\n")
	_log(f"gift_analyze: wrote {args.out_file}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
