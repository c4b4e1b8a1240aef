# -- Physical Constants for Float Simulation -- #

'''
Physical constants for the float buoyancy and damping model.

Values are in the scaled units of the host rigid-body engine the model
was tuned against: densities are relative (water ~ 1), so a float with
collider density 0.2 sits mostly above the surface.
'''

######################################################################
# -- Liquid Properties -- #
######################################################################

# Liquid density (seawater, engine-scaled)
# Used for buoyancy and quadratic drag
liquidDensity: float = 1.025

# Gravitational acceleration [m/s^2]
gravity: float = 9.807

######################################################################
# -- Float Properties -- #
######################################################################

# Drag coefficient of a smooth sphere (subcritical Reynolds number)
sphereDragCoefficient: float = 0.47

# Default float radius [m]
defaultFloatRadius: float = 0.5

# Default float material density (engine-scaled, same units as liquidDensity)
defaultFloatDensity: float = 0.2

######################################################################
# -- Simulation Defaults -- #
######################################################################

# Fixed host time step [s]
defaultTimeStep: float = 1.0 / 60.0

# Height above still water at which floats are spawned [m]
defaultSpawnHeight: float = 5.0

# Half the spacing between raft buoys along x and z [m]
raftHalfSize: float = 1.0
