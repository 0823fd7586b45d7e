"""
Export functions for saving benchmark results to CSV and JSON.
"""

import csv
import json
import math
from typing import Dict, List, Any

METRIC_FIELDS = ["avg_speed", "cohesion", "polarization", "avg_neighbors"]


def export_results_to_csv(trial_results: List[Dict], filename: str = "benchmark_results.csv") -> str:
    """
    Export one row of summary statistics per benchmark trial.
    
    Args:
        trial_results: Results from BenchmarkSimulation.run_benchmark, with a 'trial' key
        filename: Output filename
        
    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['simulation_id', 'frames', 'boid_count', 'avg_speed',
                      'avg_cohesion', 'avg_polarization', 'avg_neighbors',
                      'elapsed_time_seconds']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        
        writer.writeheader()
        
        for result in trial_results:
            writer.writerow({
                'simulation_id': f"trial{result['trial']}",
                'frames': result['frames'],
                'boid_count': result['boid_count'],
                'avg_speed': result['avg_speed'],
                'avg_cohesion': result['avg_cohesion'],
                'avg_polarization': result['avg_polarization'],
                'avg_neighbors': result['avg_neighbors'],
                'elapsed_time_seconds': result['elapsed_time_seconds'],
            })
    
    print(f"\nCSV results saved to: {filename}")
    return filename


def export_metrics_timeseries_to_csv(result: Dict, filename: str = None) -> str:
    """
    Export the sampled metrics of a single run to CSV.
    
    Args:
        result: Results dictionary containing 'metrics_over_time'
        filename: Output filename (auto-generated from the trial number if None)
        
    Returns:
        Path to saved CSV file
    """
    if filename is None:
        filename = f"metrics_timeseries_trial{result.get('trial', 1)}.csv"
    
    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['frame'] + METRIC_FIELDS
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()
        
        for sample in result["metrics_over_time"]:
            row = {'frame': sample['frame']}
            for metric in METRIC_FIELDS:
                row[metric] = f"{sample[metric]:.4f}"
            writer.writerow(row)
    
    print(f"  Metrics time-series saved to: {filename}")
    return filename


def export_benchmark_report(results: Dict[str, Any], filename: str = "flock_benchmark_results.json") -> str:
    """
    Export full benchmark report to JSON.
    
    Args:
        results: Complete benchmark results dictionary
        filename: Output filename
        
    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)
    
    print(f"\nBenchmark report saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.
    
    Args:
        trial_results: List of result dictionaries from multiple trials
        
    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}
    
    metrics = [
        "avg_speed", "avg_cohesion", "avg_polarization", "avg_neighbors",
        "final_cohesion", "final_polarization", "ticks_per_second",
        "elapsed_time_seconds",
    ]
    
    aggregates = {}
    
    for metric in metrics:
        values = [r[metric] for r in trial_results if metric in r and r[metric] is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0
    
    return aggregates
