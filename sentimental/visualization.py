from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns


def make_contribution_fig(matches, cfg, name="contributions.png", title=None):
    """Bar per matched phrase, height = effective weight after influence."""
    hits = [m for m in matches if m.matched]
    labels = [f"{i}:{m.phrase}" for i, m in enumerate(hits)]
    weights = [m.effective for m in hits]
    path = Path(cfg["out_dir"], "figs", name)
    plt.figure()
    if hits:
        sns.barplot(x=labels, y=weights, color="steelblue")
        plt.axhline(0, color="black", linewidth=0.8)
        plt.xticks(rotation=45, ha="right")
    plt.ylabel("effective weight")
    plt.title(title or "Match contributions")
    plt.tight_layout()
    plt.savefig(path, dpi=cfg["fig_dpi"])
    plt.close()
    return path


def make_sentiment_fig(records, cfg, name="sentiment_counts.png"):
    labels = [str(r["sentiment"]) for r in records]
    path = Path(cfg["out_dir"], "figs", name)
    plt.figure()
    sns.countplot(x=labels, order=["negative", "neutral", "positive"])
    plt.title("Sentiment distribution")
    plt.savefig(path, dpi=cfg["fig_dpi"])
    plt.close()
    return path
