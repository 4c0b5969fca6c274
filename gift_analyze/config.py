# Standard Library
import dataclasses
import json


DEFAULT_DATA_DIR = "data"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".gift",)
DEFAULT_MIN_QUESTIONS = 15
DEFAULT_MAX_QUESTIONS = 20


#============================================


@dataclasses.dataclass(frozen=True)
class AnalyzeConfig:
	data_dir: str = DEFAULT_DATA_DIR
	extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
	min_questions: int = DEFAULT_MIN_QUESTIONS
	max_questions: int = DEFAULT_MAX_QUESTIONS


#============================================


def load_config(config_file: str | None) -> AnalyzeConfig:
	"""
	Load configuration from JSON or fall back to defaults.

	Args:
		config_file: Optional path to a JSON object overriding defaults.

	Returns:
		AnalyzeConfig: Resolved configuration.
	"""
	if config_file is None:
		return AnalyzeConfig()
	with open(config_file, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	return config_from_dict(data)


#============================================


def config_from_dict(data: dict) -> AnalyzeConfig:
	"""
	Build a config from a dict of overrides.

	Args:
		data: Mapping of field name to value.

	Returns:
		AnalyzeConfig: Defaults with the given fields replaced.
	"""
	if not isinstance(data, dict):
		raise ValueError("Config must be a JSON object")
	known = {field.name for field in dataclasses.fields(AnalyzeConfig)}
	unknown = sorted(set(data) - known)
	if unknown:
		raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

	overrides: dict[str, object] = dict(data)
	if "extensions" in overrides:
		extensions = overrides["extensions"]
		if isinstance(extensions, str):
			extensions = [extensions]
		overrides["extensions"] = tuple(str(ext) for ext in extensions)
	for key in ("min_questions", "max_questions"):
		if key in overrides:
			overrides[key] = int(overrides[key])

	config = dataclasses.replace(AnalyzeConfig(), **overrides)
	if config.min_questions > config.max_questions:
		raise ValueError(
			f"min_questions ({config.min_questions}) exceeds max_questions ({config.max_questions})"
		)
	return config
