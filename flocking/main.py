"""
Main entry point for the flocking simulation.

Run with:
    python -m flocking.main              # Interactive simulation
    python -m flocking.main --benchmark  # Run headless benchmark trials
"""

import os
from dataclasses import replace
from typing import Optional


# Set dummy video driver for headless benchmarking
def set_headless():
    """Enable headless mode for benchmarking."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(boids: Optional[int] = None, seed: Optional[int] = None):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation
    from .core.config import FlockConfig
    
    print("=" * 60)
    print("Boids Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  P     - Pause / resume")
    print("  R     - Respawn the flock")
    print("  S     - Toggle statistics overlay")
    print("  SPACE - Save statistics to JSON")
    print("\nStarting simulation...")
    
    config = FlockConfig(seed=seed)
    if boids is not None:
        config.boidCount = boids
    sim = Simulation(config)
    sim.run()


def run_benchmark(num_trials: int = 5, duration: int = 2000, boids: Optional[int] = None,
                  seed: int = 42, record_video: bool = False, video_trial: int = 1):
    """
    Run headless benchmark trials and export their results.
    
    Args:
        num_trials: Number of trials
        duration: Duration in frames per trial
        boids: Population override (config default if None)
        seed: Base seed; trial N uses seed + N - 1
        record_video: Whether to record video
        video_trial: Which trial to record
    """
    set_headless()
    
    from .simulation.benchmark import BenchmarkSimulation
    from .analysis.export import (
        export_results_to_csv, export_metrics_timeseries_to_csv,
        export_benchmark_report, calculate_aggregate_stats
    )
    from .analysis.plotting import plot_metrics_over_time, plot_trial_comparison
    from .core.config import BENCHMARK_CONFIG
    
    base_config = BENCHMARK_CONFIG
    if boids is not None:
        base_config = replace(base_config, boidCount=boids)
    
    print("=" * 60)
    print("FLOCK BENCHMARK")
    print("=" * 60)
    print(f"Boids: {base_config.boidCount}")
    print(f"Duration per trial: {duration} frames")
    print(f"Trials: {num_trials}")
    if record_video:
        print(f"Video recording: ENABLED (trial {video_trial})")
    print()
    
    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        
        config = replace(base_config, seed=seed + trial)
        
        enable_video = record_video and (trial + 1) == video_trial
        video_file = None
        if enable_video:
            video_file = f"recording_flock_trial{trial + 1}.mp4"
        
        sim = BenchmarkSimulation(config, enable_video=enable_video, video_filename=video_file)
        result = sim.run_benchmark(duration)
        result["trial"] = trial + 1
        result["seed"] = config.seed
        if enable_video:
            result["video_file"] = video_file
        results.append(result)
    
    aggregates = calculate_aggregate_stats(results)
    
    report = {
        "benchmark_config": {
            "duration_frames": duration,
            "trials": num_trials,
            "base_seed": seed,
            "flock": base_config.to_dict(),
        },
        "trial_results": results,
        "aggregates": aggregates,
    }
    
    export_benchmark_report(report)
    export_results_to_csv(results)
    export_metrics_timeseries_to_csv(results[0])
    
    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Cohesion: {aggregates.get('avg_cohesion_mean', 0):.2f} ± {aggregates.get('avg_cohesion_std', 0):.2f}")
    print(f"   Polarization: {aggregates.get('avg_polarization_mean', 0):.3f} ± {aggregates.get('avg_polarization_std', 0):.3f}")
    print(f"   Avg Neighbors: {aggregates.get('avg_neighbors_mean', 0):.2f}")
    print(f"   Ticks/s: {aggregates.get('ticks_per_second_mean', 0):.1f}")
    
    print("\nGenerating plots...")
    plot_metrics_over_time(results[0])
    if len(results) > 1:
        plot_trial_comparison(results)
    
    return report


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--benchmark", action="store_true", help="Run headless benchmark trials")
    parser.add_argument("--trials", type=int, default=5, help="Number of benchmark trials")
    parser.add_argument("--duration", type=int, default=2000, help="Simulation duration in frames")
    parser.add_argument("--boids", type=int, default=None, help="Number of boids")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for boid placement")
    parser.add_argument("--record-video", action="store_true", help="Record video during benchmark")
    
    args = parser.parse_args()
    
    if args.benchmark:
        if args.trials < 1:
            parser.error("--trials must be at least 1")
        run_benchmark(
            num_trials=args.trials,
            duration=args.duration,
            boids=args.boids,
            seed=args.seed if args.seed is not None else 42,
            record_video=args.record_video
        )
    else:
        run_interactive(boids=args.boids, seed=args.seed)


if __name__ == "__main__":
    main()
