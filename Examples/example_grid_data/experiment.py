#!/usr/bin/env python3

import numpy as np
from FunctionApproximators import *

# model parameters of a locally weighted regression with three basis functions in 1d
# (normally these are the result of training a function approximator)
lwr = ModelParametersLWR(
    centers=[[0.0], [0.5], [1.0]],
    widths=[[0.2], [0.2], [0.2]],
    slopes=[[1.0], [-2.0], [0.5]],
    offsets=[0.0, 1.0, 2.0],
    lines_pivot_at_max_activation=True)

print(lwr)

# sample the activations and line segments on 101 points between 0 and 1
# existing files in the folder will not be overwritten
if not lwr.saveGridData(np.array([0.0]), np.array([1.0]), np.array([101]), "grid_lwr"):
    print("Not all grid data was written, see functionApproximators.log")

# the same, using the unified representation
unified = lwr.toModelParametersUnified()
unified.saveGridData(np.array([0.0]), np.array([1.0]), np.array([101]), "grid_unified", overwrite=True)

# store the parameters and read them back in
saveModelParameters("lwr.json", lwr)
restored = loadModelParameters("lwr.json")
print(restored)
