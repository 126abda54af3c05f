"""
Global optimisation settings for battery dispatch.

These settings define numerical constants shared by model construction,
the LP solve and the post-solution metrics.
"""

# Absolute threshold [kWh] below which a change in stored energy between two
# time steps is treated as solver noise when counting cycles.
CYCLE_TOLERANCE = 1e-6

# Absolute threshold [kWh] on the energy balance residual of a solved
# trajectory. Larger residuals are logged as warnings.
FEASIBILITY_TOLERANCE = 1e-6

# scipy.optimize.linprog method (HiGHS chooses simplex or IPM internally).
LP_METHOD = 'highs'

# Wall-clock limit for one solve [s]. None = no limit.
DEFAULT_TIME_LIMIT_S = None
