"""
traffic — Simulation core
=========================

Modules
-------
scenario
    :class:`Scenario` population owner and substep scheduler.
car
    :class:`Car` kinematics and its frozen :class:`CarSnapshot`.
drivers
    :class:`Driver` base and :class:`DriveHomeDriver` strategy.
waypoint
    :class:`Waypoint` value type.
driving_policy
    :class:`DrivingPolicy` tunable constants.
physics
    Low-level angle and unit helpers.
"""
