from dataclasses import replace

from flocking.core.config import BENCHMARK_CONFIG
from flocking.simulation import benchmark
from flocking.simulation.benchmark import BenchmarkSimulation


def test_headless_run_collects_samples():
    config = replace(BENCHMARK_CONFIG, boidCount=15, width=200.0, height=150.0)
    results = BenchmarkSimulation(config).run_benchmark(35)

    assert results["frames"] == 35
    assert results["boid_count"] == 15
    assert [s["frame"] for s in results["metrics_over_time"]] == [10, 20, 30]
    assert 0.0 <= results["avg_polarization"] <= 1.0
    assert results["final_cohesion"] == results["metrics_over_time"][-1]["cohesion"]


def test_same_seed_gives_same_results():
    config = replace(BENCHMARK_CONFIG, boidCount=10, width=200.0, height=150.0)

    first = BenchmarkSimulation(config).run_benchmark(20)
    second = BenchmarkSimulation(config).run_benchmark(20)

    assert first["metrics_over_time"] == second["metrics_over_time"]


def test_empty_flock_has_no_samples():
    config = replace(BENCHMARK_CONFIG, boidCount=0)
    results = BenchmarkSimulation(config).run_benchmark(20)

    assert results["metrics_over_time"] == []
    assert results["final_cohesion"] is None
    assert results["avg_cohesion"] == 0


def test_video_disabled_without_support(monkeypatch, capsys):
    monkeypatch.setattr(benchmark, "VIDEO_SUPPORT", False)
    config = replace(BENCHMARK_CONFIG, boidCount=3)

    sim = BenchmarkSimulation(config, enable_video=True, video_filename="unused.mp4")

    assert sim.enable_video is False
    assert sim.video_writer is None
    assert "Video recording disabled" in capsys.readouterr().out
