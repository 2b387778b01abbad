"""
Plotting functions for visualizing run results.
"""

from typing import Dict, List

try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


MODE_COLORS = {
    'snapshot': '#4ECDC4',
    'sequential': '#FF6B6B',
}


def plot_run_timeseries(result: Dict, output_file: str = "flock_timeseries.png") -> str:
    """
    Plot cohesion and boid speed over time for a single run.

    Args:
        result: Run result containing ``stats_over_time``
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" when matplotlib is missing
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    samples = result["stats_over_time"]
    frames = [s["frame"] for s in samples]

    fig, (ax_coh, ax_speed) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    ax_coh.plot(frames, [s["flock_cohesion"] for s in samples], linewidth=2,
                color='#4ECDC4', label='Cohesion (avg dist to centroid)')
    ax_coh.plot(frames, [s["leader_distance"] for s in samples], linewidth=2,
                color='#FFB347', label='Avg dist to leader')
    ax_coh.set_ylabel('Distance (px)', fontsize=10)
    ax_coh.legend(fontsize=9, loc='upper right')
    ax_coh.grid(True, alpha=0.3, linestyle='--')

    ax_speed.plot(frames, [s["avg_speed"] for s in samples], linewidth=2,
                  color='#FF6B6B', label='Avg boid speed')
    ax_speed.plot(frames, [s["leader_speed"] for s in samples], linewidth=2,
                  color='#777777', label='Leader speed')
    ax_speed.set_xlabel('Frame Number', fontsize=10)
    ax_speed.set_ylabel('Speed (px/s)', fontsize=10)
    ax_speed.legend(fontsize=9, loc='upper right')
    ax_speed.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle(f"Flock run ({result.get('flock_mode')} mode, seed {result.get('seed')})",
                 fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"\nPlot saved to: {output_file}")
    return output_file


def plot_mode_comparison(results: Dict[str, List[Dict]],
                         output_file: str = "flock_mode_comparison.png") -> str:
    """
    Compare cohesion over time between flock update modes.

    Each mode gets one faint line per trial and a bold mean line.

    Args:
        results: Mapping of flock mode to its list of run results
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" when matplotlib is missing
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    fig, ax = plt.subplots(figsize=(12, 7))

    for mode, runs in results.items():
        color = MODE_COLORS.get(mode, '#95E1D3')
        series = []
        for run in runs:
            samples = run["stats_over_time"]
            frames = [s["frame"] for s in samples]
            values = [s["flock_cohesion"] for s in samples]
            ax.plot(frames, values, color=color, alpha=0.2, linewidth=1)
            series.append(values)

        if series and series[0]:
            length = min(len(v) for v in series)
            mean_values = [sum(v[i] for v in series) / len(series) for i in range(length)]
            frames = [s["frame"] for s in runs[0]["stats_over_time"]][:length]
            ax.plot(frames, mean_values, color=color, linewidth=2.5, label=f'{mode} (mean)')
            ax.annotate(f'{mean_values[-1]:.0f}', xy=(frames[-1], mean_values[-1]),
                        xytext=(5, 0), textcoords='offset points', fontsize=9, color=color)

    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel('Cohesion (avg dist to centroid)', fontsize=12, fontweight='bold')
    ax.set_title('Snapshot vs Sequential Flock Updates\n(Lower values = tighter flock)',
                 fontsize=14, fontweight='bold', pad=20)
    ax.legend(fontsize=11, loc='upper right', framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"\nComparison plot saved to: {output_file}")
    return output_file
