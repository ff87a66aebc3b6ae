"""
Train the two-layer classifier on moons and extract its decision boundary.

This script:
    - generates parametric training moons (separated and rotated)
    - builds the test set from the reference moons or a second draw
    - trains one classifier per seed with accuracy-based early stopping
    - evaluates each trained classifier on a grid around the test data
    - saves per-epoch metrics, a run summary, and figures

Usage (example):
    python -m moonlab.experiments.run_moons --output-root reports/moons --offset 1.0
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tqdm.auto import tqdm

from moonlab.boundary import evaluate_decision_boundary
from moonlab.boundary.visualizations import (
    save_dataset_plot,
    save_decision_boundary_plot,
    save_training_curves,
)
from moonlab.data import build_moon_splits, resolve_dataset_seed
from moonlab.experiments import train_model
from moonlab.models import build_mlp_from_config
from moonlab.utils.configs import (
    BoundaryConfig,
    DatasetConfig,
    ExperimentConfig,
    ModelConfig,
    TrainingConfig,
)

logger = logging.getLogger(__name__)


def _save_json(payload: Sequence[Dict[str, Any]], output_path: Path) -> None:
    """
    Save a list of dictionaries as JSON.

    Args:
        payload (Sequence[Dict[str, Any]]): JSON-serializable records.
        output_path (Path): File path to write JSON to.

    Returns:
        None
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(list(payload), f, indent=2)


def run_experiment(config: ExperimentConfig, output_root: Path, save_figures: bool = True) -> List[Dict[str, Any]]:
    """
    Run one experiment per training seed.

    Args:
        config (ExperimentConfig): Full experiment configuration.
        output_root (Path): Directory for metrics, summaries and figures.
        save_figures (bool): Whether to render figures.

    Returns:
        List[Dict[str, Any]]: One summary record per seed.
    """
    output_root.mkdir(parents=True, exist_ok=True)
    dataset_cfg = resolve_dataset_seed(config.dataset)
    train_dataset, test_dataset = build_moon_splits(dataset_cfg)

    if save_figures:
        save_dataset_plot(train_dataset, output_root, name="train_data")
        save_dataset_plot(test_dataset, output_root, name="test_data")

    summaries: List[Dict[str, Any]] = []
    for seed in tqdm(list(config.seeds), desc="Moons runs", unit="run"):
        run_dir = output_root / f"seed={seed}"
        training_cfg = TrainingConfig(**{**asdict(config.training), "seed": seed})

        model = build_mlp_from_config(config.model, seed=seed)
        model, history = train_model(model, train_dataset, test_dataset, training_cfg)
        result = evaluate_decision_boundary(test_dataset, model, config.boundary)

        _save_json([state.as_dict() for state in history], run_dir / "metrics.json")
        if save_figures:
            save_training_curves(history, run_dir)
            save_decision_boundary_plot(result, run_dir, dataset=test_dataset)

        final = history[-1]
        summary = {
            "seed": seed,
            "dataset": asdict(dataset_cfg),
            "model": asdict(config.model),
            "training": asdict(training_cfg),
            "boundary": asdict(config.boundary),
            "epochs_run": final.epoch,
            "stopped_early": final.stopped_early,
            "final_test_accuracy": final.test_accuracy,
            "boundary_segments": len(result.boundary),
        }
        _save_json([summary], run_dir / "summary.json")
        summaries.append(summary)

    logger.info("Completed %d moons run(s) under %s", len(summaries), output_root)
    return summaries


def _config_from_args(args: argparse.Namespace) -> ExperimentConfig:
    """
    Translate parsed CLI arguments into an ``ExperimentConfig``.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        ExperimentConfig: Experiment configuration.
    """
    return ExperimentConfig(
        dataset=DatasetConfig(
            n=args.n,
            noise=args.noise,
            offset=args.offset,
            rotation_degrees=args.rotation_degrees,
            seed=args.data_seed,
            test_source=args.test_source,
            reference_offset=args.reference_offset,
            coordinate_downscale=args.coordinate_downscale,
        ),
        model=ModelConfig(hidden_size=args.hidden_size),
        training=TrainingConfig(
            learning_rate=args.learning_rate,
            epochs=args.max_epochs,
            batch_size=args.batch_size,
            accuracy_stop_threshold=args.accuracy_stop_threshold,
            shuffle=not args.no_shuffle,
            log_interval=args.log_interval,
        ),
        boundary=BoundaryConfig(resolution=args.grid_resolution),
        seeds=list(args.seeds),
    )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the moons experiment script.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Train a classifier on moons and plot its decision boundary.")
    parser.add_argument(
        "--output-root",
        type=str,
        default="reports/moons",
        help="Root directory for metrics and figures.",
    )
    parser.add_argument("--n", type=int, default=300, help="Number of training samples.")
    parser.add_argument("--noise", type=float, default=0.09, help="Gaussian noise level.")
    parser.add_argument(
        "--offset",
        type=float,
        default=1.0,
        help="Vertical class separation (about 1.0 is linearly separable, 0.5 is not).",
    )
    parser.add_argument(
        "--rotation-degrees",
        type=float,
        default=90.0,
        help="Counter-clockwise rotation applied after separation.",
    )
    parser.add_argument("--data-seed", type=int, default=42, help="Seed for dataset generation.")
    parser.add_argument(
        "--test-source",
        choices=["reference", "parametric"],
        default="reference",
        help="Evaluate on the fixed reference moons or a second parametric draw.",
    )
    parser.add_argument(
        "--reference-offset",
        type=float,
        default=0.0,
        help="Per-class horizontal shift of the reference moons.",
    )
    parser.add_argument(
        "--coordinate-downscale",
        type=float,
        default=1.0,
        help="Divisor applied to the reference moons coordinates.",
    )
    parser.add_argument(
        "--seeds",
        type=int,
        nargs="+",
        default=[0],
        help="Training seeds; one run per seed.",
    )
    parser.add_argument("--hidden-size", type=int, default=500, help="Hidden layer width.")
    parser.add_argument("--learning-rate", type=float, default=0.01, help="Adam learning rate.")
    parser.add_argument("--batch-size", type=int, default=50, help="Mini-batch size.")
    parser.add_argument("--max-epochs", type=int, default=100, help="Maximum number of epochs.")
    parser.add_argument(
        "--accuracy-stop-threshold",
        type=float,
        default=0.90,
        help="Stop once test accuracy exceeds this value.",
    )
    parser.add_argument("--no-shuffle", action="store_true", help="Disable per-epoch reshuffling.")
    parser.add_argument("--log-interval", type=int, default=0, help="Log every N batches (0 disables).")
    parser.add_argument("--grid-resolution", type=int, default=100, help="Decision boundary grid size.")
    parser.add_argument("--no-figures", action="store_true", help="Skip figure rendering.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Entry point for CLI execution of the moons experiment.

    Returns:
        None
    """
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)
    config = _config_from_args(args)
    run_experiment(config, Path(args.output_root).resolve(), save_figures=not args.no_figures)


if __name__ == "__main__":
    main()
