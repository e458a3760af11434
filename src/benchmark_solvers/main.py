import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from benchmark_solvers.analysis.metrics import (
    add_gap_column,
    compute_best_per_matrix,
    stability_stats,
)
from benchmark_solvers.benchmark.runner import BenchmarkRunner
from benchmark_solvers.config import load_settings
from benchmark_solvers.loaders.loader import load_matrices, random_matrix
from benchmark_solvers.tsp import SOLVERS, TSPError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark des solveurs TSP sur des matrices de coûts")
    parser.add_argument("matrices", nargs="*", type=Path, help="Fichiers .parquet, .csv ou .json")
    parser.add_argument("--random", type=int, metavar="N", action="append", default=[],
                        help="Ajoute une instance aléatoire de N villes (répétable)")
    parser.add_argument("--seed", type=int, default=0, help="Graine des instances aléatoires")
    parser.add_argument("--asymmetric", action="store_true", help="Instances aléatoires orientées")
    parser.add_argument("--solver", "-s", action="append", choices=sorted(SOLVERS),
                        help="Solveur à lancer (répétable, défaut : tous)")
    parser.add_argument("--repeat", "-r", type=int, default=1, help="Nombre de runs par solveur")
    parser.add_argument("--output", "-o", type=Path, help="Export des résultats (.parquet ou .csv)")
    parser.add_argument("--env-file", help="Fichier .env à charger")
    return parser


def save_results(df: pd.DataFrame, path: Path) -> None:
    if path.suffix.lower() == ".parquet":
        df.to_parquet(path)
    else:
        df.to_csv(path, index=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    try:
        # 1. Charger les matrices
        matrices = load_matrices(args.matrices)
        for i, n in enumerate(args.random):
            matrices[f"random_{n}_{i}"] = random_matrix(
                n, symmetric=not args.asymmetric, seed=args.seed + i
            )
        if not matrices:
            logger.error("Aucune matrice : passer des fichiers ou --random N.")
            return 1

        # 2. Lancer le benchmark
        solver_classes = [SOLVERS[name] for name in (args.solver or sorted(SOLVERS))]
        runner = BenchmarkRunner(settings)
        runner.run_on_multiple_matrices(matrices, solver_classes, repeat=args.repeat)
    except (TSPError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    # 3. Gap et statistiques
    df = runner.to_dataframe()
    df = add_gap_column(df, compute_best_per_matrix(df))

    print("\n=== Résultats ===")
    print(df[["matrix", "solver", "run", "n", "cost", "gap", "time_sec", "route"]].to_string(index=False))
    print("\n=== Stabilité globale ===")
    print(stability_stats(df).to_string(index=False))

    if args.output:
        save_results(df, args.output)
        logger.info("Résultats enregistrés dans %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
