"""
Stable Fluids runner - Hydra + MLflow entry point.

Usage:
    uv run python main.py
    uv run python main.py scenario=walled_box n_steps=500
    uv run python main.py solver.size=128 solver.viscosity=0.0
    uv run python main.py -m scenario=jet,walled_box solver.dt=0.05,0.1

MLflow modes:
    files  - file-based ./mlruns (default)
    remote - tracking server from MLFLOW_TRACKING_URI (.env supported)
"""

import logging
import os
import sys
from pathlib import Path

import hydra
import mlflow
from dotenv import load_dotenv
from hydra.core.hydra_config import HydraConfig
from hydra.utils import instantiate
from mlflow.tracking import MlflowClient
from omegaconf import DictConfig, OmegaConf

load_dotenv()
sys.path.insert(0, str(Path(__file__).parent / "src"))

log = logging.getLogger(__name__)


def get_experiment_name(cfg: DictConfig) -> str:
    """Build full experiment name with optional prefix."""
    name = cfg.experiment_name
    prefix = cfg.mlflow.get("project_prefix", "")
    if prefix and not name.startswith("/"):
        return f"{prefix}/{name}"
    return name


def setup_mlflow(cfg: DictConfig) -> str:
    """Setup MLflow tracking and return experiment name."""
    if str(cfg.mlflow.get("mode", "")).lower() in ("files", "local"):
        tracking_uri = cfg.mlflow.get("tracking_uri", "./mlruns")
        os.environ["MLFLOW_TRACKING_URI"] = str(tracking_uri)
    else:
        tracking_uri = os.environ.get("MLFLOW_TRACKING_URI", cfg.mlflow.get("tracking_uri"))
    mlflow.set_tracking_uri(tracking_uri)

    experiment_name = get_experiment_name(cfg)
    try:
        mlflow.set_experiment(experiment_name)
    except Exception as exc:
        experiment_name = f"{experiment_name}-restored"
        log.warning(f"MLflow set_experiment failed ({exc}); using '{experiment_name}'")
        mlflow.set_experiment(experiment_name)

    return experiment_name


def build_scenario(solver, scenario: DictConfig):
    """Place obstacles and return the run callback injecting the sources."""
    from solvers.stable_fluids.scenario import (
        SourceInjector,
        build_obstacles,
        sources_from_config,
    )

    container = OmegaConf.to_container(scenario, resolve=True)
    build_obstacles(solver, container.get("obstacles"))
    sources = sources_from_config(container.get("sources"))
    log.info(f"Scenario '{container.get('name')}': {len(sources)} source(s)")
    return SourceInjector(sources, until_step=container.get("inject_until"))


def log_metrics_and_timeseries(solver, run_id: str):
    """Log final metrics and timeseries to MLflow."""
    mlflow.log_metrics(solver.metrics.to_mlflow())

    batch_metrics = solver.time_series.to_mlflow_batch()
    if batch_metrics:
        MlflowClient().log_batch(run_id=run_id, metrics=batch_metrics)


def generate_plots(solver, output_dir: Path) -> list:
    """Write field and diagnostics plots; returns the written paths."""
    from shared.plotting import plot_diagnostics, plot_fields

    paths = [
        plot_fields(solver.snapshot(), output_dir, title=solver.params.method),
        plot_diagnostics(solver.time_series.to_dataframe(), output_dir),
    ]
    return [p for p in paths if p is not None]


@hydra.main(config_path="conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    from cli.console import console, header, ok, summary_table

    log.info(f"Solver: {cfg.solver.method}, N={cfg.solver.size}, scenario={cfg.scenario.name}")
    log.info(f"MLflow experiment: {setup_mlflow(cfg)}")

    solver = instantiate(cfg.solver, _convert_="partial")
    injector = build_scenario(solver, cfg.scenario)

    run_name = f"{cfg.solver.method}_N{cfg.solver.size}_{cfg.scenario.name}"
    parent_run_id = os.environ.get("MLFLOW_PARENT_RUN_ID")
    tags = {"solver": cfg.solver.method, "scenario": cfg.scenario.name}
    if parent_run_id:
        tags.update({"mlflow.parentRunId": parent_run_id, "parent_run_id": parent_run_id, "sweep": "child"})

    with mlflow.start_run(run_name=run_name, tags=tags, nested=bool(parent_run_id)) as run:
        mlflow.log_params(solver.params.to_mlflow())
        mlflow.log_dict(OmegaConf.to_container(cfg), "config.yaml")

        header(f"Running {run_name} for {cfg.n_steps} steps")
        solver.run(cfg.n_steps, callback=injector, log_every=cfg.log_every)
        log_metrics_and_timeseries(solver, run.info.run_id)

        if cfg.get("plot", True):
            output_dir = Path(HydraConfig.get().runtime.output_dir)
            for path in generate_plots(solver, output_dir):
                mlflow.log_artifact(str(path))
                ok(f"Plot: {path.name}")

        console.print(summary_table(solver.params, solver.metrics))
        log.info(
            f"Done: {solver.metrics.steps} steps, "
            f"mass={solver.metrics.final_mass:.4e}, "
            f"time={solver.metrics.wall_time_seconds:.2f}s"
        )


if __name__ == "__main__":
    main()
