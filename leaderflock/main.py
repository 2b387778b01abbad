"""
Main entry point for the leader + flock simulation.

Run with:
    python -m leaderflock.main                   # Interactive simulation
    python -m leaderflock.main --headless        # Single headless run
    python -m leaderflock.main --compare-modes   # Snapshot vs sequential flock updates
"""

import logging
import os
from typing import List, Optional

from .core.config import DEFAULT_CONFIG, FLOCK_MODES, HEADLESS_CONFIG, SimulationConfig


# Set dummy video driver for headless runs
def set_headless():
    """Enable headless mode for batch runs."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def build_config(boids: Optional[int] = None, mode: Optional[str] = None,
                 max_speed: Optional[float] = None, grid: bool = False,
                 batch: bool = False) -> SimulationConfig:
    """
    Create a config from command-line overrides.

    Batch runs start from HEADLESS_CONFIG, interactive runs from DEFAULT_CONFIG.
    """
    preset = HEADLESS_CONFIG if batch else DEFAULT_CONFIG
    config = SimulationConfig.from_dict(preset.to_dict())
    if boids is not None:
        config.boidCount = boids
    if mode:
        config.flockMode = mode
    if max_speed is not None:
        config.boidMaxSpeed = max_speed
    if grid:
        config.useSpatialGrid = True
    return config.validate()


def run_interactive(config: SimulationConfig, seed: Optional[int] = None):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Follow the Leader - Boids Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  UP/DOWN     - Accelerate / brake the leader")
    print("  LEFT/RIGHT  - Turn the leader")
    print("  + / -       - Add / remove a boid")
    print("  P           - Pause / resume")
    print("  F           - Toggle flock update mode (snapshot/sequential)")
    print("  H           - Toggle stats overlay")
    print("  SPACE       - Save state to JSON")
    print("  ESC         - Quit")
    print("\nStarting simulation...")

    sim = Simulation(config, seed=seed)
    sim.run()


def run_headless(config: SimulationConfig, frames: int, dt: float, seed: Optional[int] = None,
                 record_video: bool = False, plot: bool = True) -> dict:
    """
    Run a single headless simulation and export its time series.

    Args:
        config: Simulation configuration
        frames: Number of frames to simulate
        dt: Fixed frame duration in seconds
        seed: Random seed
        record_video: Whether to record video
        plot: Whether to plot the time series

    Returns:
        Run results dictionary
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import export_timeseries_to_csv, export_report
    from .analysis.plotting import plot_run_timeseries

    print("=" * 60)
    print("HEADLESS RUN")
    print("=" * 60)

    video_file = f"leaderflock_{config.flockMode}_seed{seed}.mp4" if record_video else None
    sim = HeadlessSimulation(config, seed=seed, dt=dt, enable_video=record_video,
                             video_filename=video_file)
    result = sim.run(frames)

    export_timeseries_to_csv(result)
    export_report({"config": config.to_dict(), "result": result}, "leaderflock_run.json")

    print(f"\nFinal boids: {result['final_boid_count']}")
    print(f"Avg cohesion: {result['avg_cohesion']:.1f}")
    print(f"Avg boid speed: {result['avg_speed']:.1f}")
    print(f"Peak boid speed: {result['peak_speed']:.1f}")

    if plot:
        plot_run_timeseries(result)
    return result


def run_mode_comparison(config: SimulationConfig, trials: int, frames: int, dt: float,
                        base_seed: int = 42) -> dict:
    """
    Run both flock update modes on the same seeds and compare them.

    Args:
        config: Base configuration (its flock mode is overridden)
        trials: Number of seeds per mode
        frames: Frames per run
        dt: Fixed frame duration in seconds
        base_seed: Seed of the first trial

    Returns:
        Report dictionary with per-mode results and aggregates
    """
    set_headless()

    from dataclasses import replace
    from .simulation.headless import HeadlessSimulation
    from .analysis.export import calculate_aggregate_stats, export_report, export_results_to_csv
    from .analysis.plotting import plot_mode_comparison

    print("=" * 60)
    print("FLOCK MODE COMPARISON")
    print("=" * 60)
    print(f"Frames per run: {frames}")
    print(f"Trials per mode: {trials}")
    print()

    results = {}
    for mode in FLOCK_MODES:
        print(f"\n{'=' * 60}")
        print(f"Mode: {mode}")
        print(f"{'=' * 60}")

        runs = []
        for trial in range(trials):
            sim = HeadlessSimulation(replace(config, flockMode=mode), seed=base_seed + trial, dt=dt)
            result = sim.run(frames)
            result["trial"] = trial + 1
            runs.append(result)
        results[mode] = runs

    report = {
        "comparison_config": {"frames": frames, "trials": trials, "dt": dt, "base_seed": base_seed},
        "config": config.to_dict(),
        "modes": {
            mode: {"trial_results": runs, "aggregates": calculate_aggregate_stats(runs)}
            for mode, runs in results.items()
        },
    }

    export_report(report, "flock_mode_comparison.json")
    export_results_to_csv(results)

    print("\n" + "=" * 60)
    print("COMPARISON SUMMARY")
    print("=" * 60)
    for mode, entry in report["modes"].items():
        agg = entry["aggregates"]
        print(f"\n{mode.upper()}:")
        print(f"   Cohesion: {agg.get('avg_cohesion_mean', 0):.1f} +/- {agg.get('avg_cohesion_std', 0):.1f}")
        print(f"   Avg speed: {agg.get('avg_speed_mean', 0):.1f} +/- {agg.get('avg_speed_std', 0):.1f}")
        print(f"   Leader distance: {agg.get('avg_leader_distance_mean', 0):.1f}")

    print("\nGenerating comparison plot...")
    plot_mode_comparison(results)
    return report


def parse_args(argv: Optional[List[str]] = None):
    import argparse

    parser = argparse.ArgumentParser(description="Leader + flock boids simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--compare-modes", action="store_true",
                        help="Compare snapshot and sequential flock updates")
    parser.add_argument("--frames", type=int, default=3000, help="Frames per headless run")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="Fixed frame duration (s)")
    parser.add_argument("--trials", type=int, default=5, help="Seeds per mode when comparing")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--boids", type=int, default=None, help="Initial number of boids")
    parser.add_argument("--mode", choices=FLOCK_MODES, default=None, help="Flock update mode")
    parser.add_argument("--max-speed", type=float, default=None, help="Optional boid speed cap")
    parser.add_argument("--grid", action="store_true", help="Use the spatial grid for neighbor scans")
    parser.add_argument("--record-video", action="store_true", help="Record video of the headless run")
    parser.add_argument("--no-plot", action="store_true", help="Skip plotting")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    batch = args.headless or args.compare_modes
    config = build_config(args.boids, args.mode, args.max_speed, args.grid, batch=batch)

    if args.compare_modes:
        run_mode_comparison(config, args.trials, args.frames, args.dt,
                            base_seed=42 if args.seed is None else args.seed)
    elif args.headless:
        run_headless(config, args.frames, args.dt, seed=args.seed,
                     record_video=args.record_video, plot=not args.no_plot)
    else:
        run_interactive(config, seed=args.seed)


if __name__ == "__main__":
    main()
