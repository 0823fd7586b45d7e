"""
Plotting functions for visualizing benchmark results.
"""

from typing import Dict, List

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


TRIAL_COLORS = ['#FF6B6B', '#4ECDC4', '#FFB347', '#95E1D3', '#A78BFA']


def plot_metrics_over_time(result: Dict, output_file: str = "flock_metrics_over_time.png",
                           show: bool = True) -> str:
    """
    Plot cohesion, polarization and neighbor count over time for one run.
    
    Args:
        result: Results dictionary containing 'metrics_over_time'
        output_file: Output filename for the plot
        show: Whether to open a plot window after saving
        
    Returns:
        Path to saved plot file
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""
    
    samples = result["metrics_over_time"]
    frames = [s["frame"] for s in samples]
    
    panels = [
        ("cohesion", "Cohesion (avg dist to centroid)", '#FF6B6B'),
        ("polarization", "Polarization (0-1)", '#4ECDC4'),
        ("avg_neighbors", "Avg Neighbors", '#FFB347'),
    ]
    
    fig, axes = plt.subplots(len(panels), 1, figsize=(12, 10), sharex=True)
    
    for ax, (key, label, color) in zip(axes, panels):
        values = [s[key] for s in samples]
        ax.plot(frames, values, linewidth=2, color=color)
        ax.set_ylabel(label, fontsize=10)
        ax.grid(True, alpha=0.3, linestyle='--')
        
        if values:
            ax.annotate(f'{values[-1]:.2f}', xy=(frames[-1], values[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=8, color=color)
    
    axes[-1].set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    fig.suptitle('Flock Formation Over Time', fontsize=14, fontweight='bold')
    plt.tight_layout()
    
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")
    
    if show:
        plt.show()
    plt.close(fig)
    return output_file


def plot_trial_comparison(trial_results: List[Dict], metric: str = "polarization",
                          output_file: str = "flock_trial_comparison.png",
                          show: bool = True) -> str:
    """
    Overlay one metric across several benchmark trials.
    
    Args:
        trial_results: Results from multiple trials, each with 'metrics_over_time'
        metric: Sampled metric to plot
        output_file: Output filename for the plot
        show: Whether to open a plot window after saving
        
    Returns:
        Path to saved plot file
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""
    
    fig = plt.figure(figsize=(12, 7))
    
    for idx, result in enumerate(trial_results):
        samples = result["metrics_over_time"]
        frames = [s["frame"] for s in samples]
        values = [s[metric] for s in samples]
        plt.plot(frames, values, label=f"Trial {result.get('trial', idx + 1)}",
                 linewidth=2, alpha=0.8, color=TRIAL_COLORS[idx % len(TRIAL_COLORS)])
    
    plt.xlabel('Frame Number', fontsize=12, fontweight='bold')
    plt.ylabel(metric.replace('_', ' ').title(), fontsize=12, fontweight='bold')
    plt.title(f'{metric.replace("_", " ").title()} Across Trials',
              fontsize=14, fontweight='bold', pad=20)
    plt.legend(fontsize=11, loc='lower right', framealpha=0.9)
    plt.grid(True, alpha=0.3, linestyle='--')
    
    plt.tight_layout()
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    print(f"\nComparison plot saved to: {output_file}")
    
    if show:
        plt.show()
    plt.close(fig)
    return output_file
