"""
Booster Landing Trajectory Visualization Module.

Plots the telemetry recorded in a SimulationLog: altitude and velocity,
fuel and engine schedule, and the ground track toward the landing beacon.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
from matplotlib.patches import Circle
import numpy as np

from .config import SimulationConfig, create_default_config


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Container for processed trajectory data used in plotting.

    Attributes:
        time: Time array in seconds
        altitude: Altitude array in kilometers
        vertical_velocity: Vertical velocity in m/s
        mass: Stored vehicle mass in kg
        fuel_mass: Remaining fuel in kg
        active_engines: Engines firing
        lateral_x: Lateral X in meters
        lateral_y: Lateral Y in meters
        distance_to_beacon: Horizontal distance to beacon in meters
        phase_name: Flight phase name per sample
    """
    time: np.ndarray
    altitude: np.ndarray
    vertical_velocity: np.ndarray
    mass: np.ndarray
    fuel_mass: np.ndarray
    active_engines: np.ndarray
    lateral_x: np.ndarray
    lateral_y: np.ndarray
    distance_to_beacon: np.ndarray
    phase_name: List[str]


# =============================================================================
# Configuration
# =============================================================================

def configure_plot_style() -> None:
    """Configure matplotlib defaults for the telemetry plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
    })


# =============================================================================
# Data Processing
# =============================================================================

def extract_log_data(log) -> TrajectoryData:
    """Convert a SimulationLog into plotting arrays.

    Raises:
        ValueError: If the log is empty
    """
    if len(log.time) == 0:
        raise ValueError("Cannot plot an empty simulation log")

    return TrajectoryData(
        time=np.asarray(log.time, dtype=float),
        altitude=np.asarray(log.altitude, dtype=float) / 1000.0,
        vertical_velocity=np.asarray(log.vertical_velocity, dtype=float),
        mass=np.asarray(log.mass, dtype=float),
        fuel_mass=np.asarray(log.fuel_mass, dtype=float),
        active_engines=np.asarray(log.active_engines, dtype=int),
        lateral_x=np.asarray(log.lateral_x, dtype=float),
        lateral_y=np.asarray(log.lateral_y, dtype=float),
        distance_to_beacon=np.asarray(log.distance_to_beacon, dtype=float),
        phase_name=list(log.phase_name),
    )


def find_phase_changes(data: TrajectoryData) -> List[int]:
    """Indices where the flight phase differs from the previous sample."""
    return [i for i in range(1, len(data.phase_name))
            if data.phase_name[i] != data.phase_name[i - 1]]


def _mark_phase_changes(ax, data: TrajectoryData) -> None:
    for idx in find_phase_changes(data):
        ax.axvline(data.time[idx], color='gray', linestyle='--', linewidth=1.0)
        ax.annotate(data.phase_name[idx], (data.time[idx], 1.0),
                    xycoords=('data', 'axes fraction'),
                    rotation=90, va='top', ha='right', fontsize=8, color='gray')


# =============================================================================
# Plots
# =============================================================================

def plot_altitude_velocity(data: TrajectoryData, output_dir: str) -> str:
    """Generate altitude and vertical velocity vs time.

    Returns:
        Path to saved plot file
    """
    fig, (ax_h, ax_v) = plt.subplots(2, 1, sharex=True)

    ax_h.plot(data.time, data.altitude, 'b-', label='Altitude')
    ax_h.set_ylabel('Altitude (km)')
    ax_h.set_title('Altitude and Vertical Velocity', fontweight='bold')
    _mark_phase_changes(ax_h, data)

    ax_v.plot(data.time, data.vertical_velocity, 'r-', label='Vertical velocity')
    ax_v.axhline(0.0, color='black', linewidth=0.8)
    ax_v.set_xlabel('Time (s)')
    ax_v.set_ylabel('Velocity (m/s)')
    _mark_phase_changes(ax_v, data)

    plt.tight_layout()
    path = os.path.join(output_dir, '01_altitude_velocity.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_propellant(data: TrajectoryData, output_dir: str) -> str:
    """Generate fuel, mass and engine count vs time.

    Returns:
        Path to saved plot file
    """
    fig, ax_m = plt.subplots()

    ax_m.plot(data.time, data.mass / 1000.0, 'k-', label='Vehicle mass')
    ax_m.plot(data.time, data.fuel_mass / 1000.0, 'g-', label='Fuel')
    ax_m.set_xlabel('Time (s)')
    ax_m.set_ylabel('Mass (t)')
    ax_m.set_title('Propellant and Engine Schedule', fontweight='bold')

    ax_n = ax_m.twinx()
    ax_n.step(data.time, data.active_engines, 'm-', where='post', label='Active engines')
    ax_n.set_ylabel('Active engines')
    ax_n.grid(False)

    lines = ax_m.get_lines() + ax_n.get_lines()
    ax_m.legend(lines, [line.get_label() for line in lines], loc='upper right')

    plt.tight_layout()
    path = os.path.join(output_dir, '02_propellant.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_ground_track(data: TrajectoryData, output_dir: str,
                      config: SimulationConfig) -> str:
    """Generate the lateral path toward the beacon.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()

    ax.plot(data.lateral_x, data.lateral_y, 'b-', label='Ground track')
    ax.scatter([data.lateral_x[0]], [data.lateral_y[0]],
               c='green', s=60, marker='o', zorder=5, label='Start')
    ax.scatter([data.lateral_x[-1]], [data.lateral_y[-1]],
               c='darkorange', s=90, marker='*', zorder=5,
               label=f'Touchdown ({data.distance_to_beacon[-1]:.2f} m)')
    ax.scatter([config.beacon_x], [config.beacon_y],
               c='red', s=80, marker='^', zorder=6, label='Beacon')
    tolerance = Circle((config.beacon_x, config.beacon_y), config.landing_tolerance,
                       color='red', fill=False, linestyle=':')
    ax.add_patch(tolerance)

    ax.set_xlabel('X (m)')
    ax.set_ylabel('Y (m)')
    ax.set_title('Ground Track', fontweight='bold')
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend(loc='best')

    plt.tight_layout()
    path = os.path.join(output_dir, '03_ground_track.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def generate_all_plots(log, output_dir: str = "plots",
                       config: Optional[SimulationConfig] = None) -> List[str]:
    """Generate all trajectory and telemetry plots.

    Args:
        log: SimulationLog from run_simulation()
        output_dir: Directory to save plots (created if doesn't exist)
        config: Configuration used for the run (beacon, tolerance)

    Returns:
        List of paths to saved plot files
    """
    if config is None:
        config = create_default_config()

    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    return [
        plot_altitude_velocity(data, output_dir),
        plot_propellant(data, output_dir),
        plot_ground_track(data, output_dir, config),
    ]
