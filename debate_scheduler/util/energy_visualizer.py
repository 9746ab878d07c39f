import matplotlib.pyplot as plt
import numpy as np


def plot_energy_trace(logger, output_path: str, title: str = "Simulated Annealing: Energy Trace"):
    """
    Plot the energy of every logged step, the running best energy and the
    temperature (on a second axis) and save the figure to output_path.

    Args:
        logger: A SimulatedAnnealingLogger holding the states of one run
        output_path: Where to write the image, format taken from the suffix

    Returns:
        The matplotlib Figure
    """
    iterations = logger.iterations()
    energies = logger.energies()
    temperatures = logger.temperatures()
    running_best = logger.running_best()

    fig, ax_energy = plt.subplots(figsize=(12, 7))

    ax_energy.plot(iterations, energies, color='steelblue', linewidth=1, alpha=0.6, label='Current energy')
    ax_energy.plot(iterations, running_best, 'r-', linewidth=2.5, label='Best energy')

    restarts = np.array([s.event_type == 'restart' for s in logger.states], dtype=bool)
    if np.any(restarts):
        ax_energy.scatter(iterations[restarts], energies[restarts], color='orange', s=30, zorder=3, label='Restart')

    ax_energy.set_xlabel('Step', fontsize=14)
    ax_energy.set_ylabel('Energy (higher is better)', fontsize=14)

    ax_temperature = ax_energy.twinx()
    ax_temperature.plot(iterations, temperatures, 'g--', linewidth=1.5, alpha=0.7, label='Temperature')
    ax_temperature.set_ylabel('Temperature', fontsize=14)
    ax_temperature.set_ylim(0, max(1.0, float(temperatures.max()) if temperatures.size else 1.0))

    lines, labels = ax_energy.get_legend_handles_labels()
    lines_t, labels_t = ax_temperature.get_legend_handles_labels()
    ax_energy.legend(lines + lines_t, labels + labels_t, loc='lower right', fontsize=11, framealpha=0.9)

    ax_energy.set_title(title, fontsize=16)
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)

    print(f"Energy trace written to {output_path}")
    return fig
