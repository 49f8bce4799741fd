from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

import pandas as pd

from cleanfeed.pipeline.keywords import KeywordDetector
from cleanfeed.pipeline.verdict import Verdict


@dataclass
class EvalSummary:
    total_rows: int
    processed_rows: int
    skipped_rows: int
    label_counts: Dict[str, int]
    reason_histogram: Dict[str, int]
    metrics: Dict[str, float]


def load_dataset(csv_path: Path) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    return df


def compute_dataset_stats(df: pd.DataFrame) -> Dict[str, object]:
    stats: Dict[str, object] = {}
    stats["num_rows"] = int(len(df))
    stats["columns"] = list(df.columns)
    stats["missing_per_column"] = {
        c: int(df[c].isna().sum()) + int((df[c] == "").sum() if df[c].dtype == object else 0)
        for c in df.columns
    }

    if "label" in df.columns:
        label_counts = df["label"].value_counts(dropna=False).to_dict()
        stats["label_distribution"] = {str(k): int(v) for k, v in label_counts.items()}
    else:
        stats["label_distribution"] = {}

    if "text" in df.columns:
        lengths = df["text"].fillna("").astype(str).str.len()
        stats["text_length"] = {
            "min": float(lengths.min()),
            "p25": float(lengths.quantile(0.25)),
            "mean": float(lengths.mean()),
            "p75": float(lengths.quantile(0.75)),
            "max": float(lengths.max()),
        }
    else:
        stats["text_length"] = {"min": 0, "p25": 0, "mean": 0, "p75": 0, "max": 0}

    if "identifier" in df.columns:
        stats["with_identifier"] = int(df["identifier"].fillna("").astype(str).str.strip().ne("").sum())
    else:
        stats["with_identifier"] = 0

    return stats


def _reason_bucket(verdict: Verdict) -> str:
    # "Contains keyword: leak" -> "Contains keyword"
    if not verdict.should_filter:
        return "clean"
    return (verdict.reason or "").split(":", 1)[0]


def evaluate_detector(
    df: pd.DataFrame,
    limit: Optional[int] = None,
    detector: Optional[KeywordDetector] = None,
) -> Tuple[pd.DataFrame, EvalSummary]:
    """
    Score each labelled row: identifier heuristics first, then text rules.
    Rows without a 0/1 label are skipped.
    """
    detector = detector or KeywordDetector()
    empty = pd.Series([""] * len(df), dtype=object)
    identifier_series = df.get("identifier", empty).fillna("").astype(str)
    text_series = df.get("text", empty).fillna("").astype(str)
    label_series = df.get("label")

    n = len(df) if limit is None else min(limit, len(df))
    results = []
    processed = 0
    skipped = 0
    label_counts: Dict[str, int] = {"0": 0, "1": 0, "missing": 0}

    for i in range(n):
        label_val = None
        if label_series is not None:
            v = label_series.iloc[i]
            if pd.notna(v) and str(v).strip() in ("0", "1", "0.0", "1.0"):
                label_val = int(float(v))

        if label_val is None:
            skipped += 1
            label_counts["missing"] += 1
            continue

        label_counts[str(label_val)] += 1

        identifier = identifier_series.iloc[i].strip()
        text = text_series.iloc[i]

        verdict = detector.detect_identifier(identifier)
        if not verdict.should_filter:
            verdict = detector.detect_text(text)

        results.append(
            {
                "identifier": identifier,
                "text": text,
                "label": label_val,
                "pred_label": int(verdict.should_filter),
                "confidence": verdict.confidence,
                "reason": verdict.reason or "",
                "reason_bucket": _reason_bucket(verdict),
            }
        )
        processed += 1

    out_df = pd.DataFrame(results)
    if not out_df.empty:
        hist = out_df["reason_bucket"].value_counts().sort_index().to_dict()
        reason_hist = {str(k): int(v) for k, v in hist.items()}
        tp = int(((out_df["label"] == 1) & (out_df["pred_label"] == 1)).sum())
        tn = int(((out_df["label"] == 0) & (out_df["pred_label"] == 0)).sum())
        fp = int(((out_df["label"] == 0) & (out_df["pred_label"] == 1)).sum())
        fn = int(((out_df["label"] == 1) & (out_df["pred_label"] == 0)).sum())
        total = tp + tn + fp + fn
        accuracy = (tp + tn) / total if total else 0.0
        precision = tp / (tp + fp) if (tp + fp) else 0.0
        recall = tp / (tp + fn) if (tp + fn) else 0.0
        f1 = (2 * precision * recall) / (precision + recall) if (precision + recall) else 0.0
    else:
        tp = tn = fp = fn = 0
        accuracy = precision = recall = f1 = 0.0
        reason_hist = {}

    summary = EvalSummary(
        total_rows=int(len(df)),
        processed_rows=int(processed),
        skipped_rows=int(skipped),
        label_counts=label_counts,
        reason_histogram=reason_hist,
        metrics={
            "tp": float(tp),
            "tn": float(tn),
            "fp": float(fp),
            "fn": float(fn),
            "accuracy": float(accuracy),
            "precision": float(precision),
            "recall": float(recall),
            "f1": float(f1),
        },
    )

    return out_df, summary


def write_outputs(
    *,
    out_base_dir: Path,
    dataset_name: str,
    dataset_stats: Dict[str, object],
    eval_df: pd.DataFrame,
    summary: EvalSummary,
) -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = out_base_dir / "evaluation_results" / f"evaluation_results_{ts}"
    out_dir.mkdir(parents=True, exist_ok=True)

    (out_dir / f"{dataset_name}_stats.json").write_text(
        json.dumps(dataset_stats, indent=2), encoding="utf-8"
    )

    eval_df.to_csv(out_dir / f"{dataset_name}_evaluation.csv", index=False)
    eval_df.to_json(
        out_dir / f"{dataset_name}_evaluation.json", orient="records", indent=2, force_ascii=False
    )

    (out_dir / f"{dataset_name}_summary.json").write_text(
        json.dumps({**dataset_stats, "summary": asdict(summary)}, indent=2), encoding="utf-8"
    )

    return out_dir
