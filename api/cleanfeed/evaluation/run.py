"""
Evaluation runner:
- Computes dataset stats (pandas) for a labelled CSV (identifier, text, label)
- Runs the keyword detector on every labelled row
- Saves detailed outputs (CSV + JSON) under <out-dir>/evaluation_results_[timestamp]

Run from the api/ directory:
    python -m cleanfeed.evaluation.run datasets/labelled.csv
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .pandas_eval import compute_dataset_stats, evaluate_detector, load_dataset, write_outputs

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate the CleanFeed keyword detector on a labelled CSV")
    parser.add_argument("csv_path", type=Path, help="CSV with columns identifier, text, label (0/1)")
    parser.add_argument("--limit", type=int, default=None, help="Only evaluate the first N rows")
    parser.add_argument("--out-dir", type=Path, default=None, help="Output base directory (default: CSV's folder)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    if not args.csv_path.exists():
        logger.error(f"Dataset not found: {args.csv_path}")
        return 1

    df = load_dataset(args.csv_path)
    stats = compute_dataset_stats(df)
    eval_df, summary = evaluate_detector(df, limit=args.limit)
    out_dir = write_outputs(
        out_base_dir=args.out_dir or args.csv_path.parent,
        dataset_name=args.csv_path.stem,
        dataset_stats=stats,
        eval_df=eval_df,
        summary=summary,
    )
    m = summary.metrics
    logger.info(
        f"Processed {summary.processed_rows}/{summary.total_rows} rows: "
        f"precision={m['precision']:.3f} recall={m['recall']:.3f} f1={m['f1']:.3f}"
    )
    logger.info(f"Wrote evaluation results to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
