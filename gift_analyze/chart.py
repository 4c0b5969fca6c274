# Standard Library
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


BAR_COLOR = "#5a9b6a"


#============================================


def plot_type_averages(averages: dict[str, float], out_path: str, *, title: str = "Average questions per exam") -> str:
	"""
	Write a bar chart of per-type averages as an image.

	Args:
		averages: Type to mean count, plotted in map order.
		out_path: Image path; the format follows the extension.
		title: Chart title.

	Returns:
		str: The written path.
	"""
	labels = [label.replace("_", " ") for label in averages]
	values = list(averages.values())

	fig, ax = plt.subplots(figsize=(8, 4.5))
	x = list(range(len(labels)))
	ax.bar(x, values, color=BAR_COLOR)
	ax.set_title(title)
	ax.set_ylabel("Questions")
	ax.set_xlabel("Question type")
	ax.set_xticks(x)
	ax.set_xticklabels(labels, rotation=30)
	for i, value in enumerate(values):
		ax.text(i, value, f"{value:.2f}", ha="center", va="bottom", fontsize=8)
	fig.tight_layout()

	out_dir = os.path.dirname(out_path)
	if out_dir:
		os.makedirs(out_dir, exist_ok=True)
	fig.savefig(out_path, dpi=160)
	plt.close(fig)
	return out_path
