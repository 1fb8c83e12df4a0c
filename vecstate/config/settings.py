import numpy as np

### COORDINATES ###
COORD_DTYPE = np.float64  # storage type of every coordinate buffer

### HISTORY ###
DEFAULT_HISTORY_LENGTH = 0  # number of past snapshots kept per vector (0 disables history)
