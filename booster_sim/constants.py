"""
Booster Landing Simulation - Physical Constants and Vehicle Parameters

This module defines the default physical constants, vehicle specifications,
guidance parameters and driver settings. SimulationConfig reads its defaults
from here; the phase controller and driver also read a few names directly.
"""

# =============================================================================
# ENVIRONMENT
# =============================================================================

# Gravitational acceleration (m/s^2)
GRAVITY = 9.81

# Atmospheric parameters (exponential model)
RHO_0 = 1.225  # Sea level density (kg/m^3)
H_SCALE = 8500.0  # Scale height (m)

# =============================================================================
# VEHICLE PARAMETERS
# =============================================================================

# Propulsion
MAX_THRUST_PER_ENGINE = 2_000_000.0  # N
FUEL_BURN_RATE = 250.0  # kg/s per engine
TOTAL_ENGINES = 33

# Mass properties
EMPTY_MASS = 120_000.0  # kg (first stage, no propellant)
INITIAL_FUEL_MASS = 300_000.0  # kg
SECOND_STAGE_MASS = 50_000.0  # kg
INITIAL_MASS = EMPTY_MASS + INITIAL_FUEL_MASS  # 420,000 kg (stored mass excludes S2)

# Aerodynamics
DRAG_COEFFICIENT = 0.5
CROSS_SECTIONAL_AREA = 10.0  # m^2

# =============================================================================
# MISSION PARAMETERS
# =============================================================================

# Launch phase ends when either threshold is exceeded
ORBITAL_HEIGHT = 80_000.0  # m
ORBITAL_VELOCITY = 27_000.0  # m/s

# Landing beacon (tower) position and acceptance radius
BEACON_X = 0.0  # m
BEACON_Y = 0.0  # m
LANDING_TOLERANCE = 0.1  # m

# Off-axis starting point (1 km from the tower on each axis)
INITIAL_X = -1000.0  # m
INITIAL_Y = -1000.0  # m

# Lateral position drifts with vertical velocity while powered
LATERAL_DRIFT_FACTOR = 0.1

# =============================================================================
# ENGINE SCHEDULE & GUIDANCE
# =============================================================================

# Engine count divisors: total // divisor
BOOSTBACK_ENGINE_DIVISOR = 3
LANDING_ENGINE_DIVISOR = 10
FINAL_LANDING_ENGINE_DIVISOR = 15
MIN_LANDING_ENGINES = 1

# Below this altitude the final-landing engine count applies (m)
LANDING_THROTTLE_ALTITUDE = 100.0

# Proportional lateral correction
GUIDANCE_GAIN = 0.1
GUIDANCE_DEADBAND = 1.0  # m, no correction inside this radius

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

DT = 0.1  # Time step (s)
MAX_TIME = 7200.0  # Safety cap on simulated time (s)
PRINT_INTERVAL = 1.0  # Seconds of simulated time between status rows

# Termination: the run ends the first tick altitude drops below this (m)
GROUND_ALTITUDE = 0.0
