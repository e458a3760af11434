import numpy as np
import pandas as pd


def compute_best_per_matrix(df: pd.DataFrame) -> pd.Series:
    """
    Meilleur coût (tous solveurs confondus) par matrice, runs ignorés exclus.
    """
    return df[~df["skipped"]].groupby("matrix")["cost"].min()


def add_gap_column(df: pd.DataFrame, best_per_matrix: pd.Series) -> pd.DataFrame:
    """
    Ajoute une colonne 'gap' = (cost - best_matrix) / best_matrix

    Si le meilleur coût vaut 0, un coût égal donne un gap nul (et non NaN).
    """
    df = df.copy()
    df = df.join(best_per_matrix.rename("best_matrix"), on="matrix")
    cost = df["cost"].astype(float)
    best = df["best_matrix"].astype(float)
    with np.errstate(divide="ignore", invalid="ignore"):
        gap = (cost - best) / best
    df["gap"] = np.where(cost == best, 0.0, gap)
    df.loc[df["skipped"], "gap"] = np.nan
    return df


def stability_stats(df: pd.DataFrame) -> pd.DataFrame:
    """
    Stabilité : moyenne, min, max, écart-type du coût, du gap et du temps par solver.
    """
    if "gap" not in df.columns:
        raise ValueError("La colonne 'gap' est manquante. Calcule-la avant.")

    agg = df[~df["skipped"]].groupby("solver").agg(
        cost_mean=("cost", "mean"),
        cost_min=("cost", "min"),
        cost_max=("cost", "max"),
        cost_std=("cost", "std"),
        gap_mean=("gap", "mean"),
        gap_max=("gap", "max"),
        time_mean=("time_sec", "mean"),
        time_std=("time_sec", "std"),
    )
    return agg.reset_index()
