import numpy as np
from FunctionApproximators.modelparameters.modelParameters import ModelParameters
from FunctionApproximators.modelparameters.modelParametersUnified import ModelParametersUnified
from FunctionApproximators.basisfunctions.basisFunctions import gaussianKernelActivations, linesResponse, generateInputsGrid
from FunctionApproximators.serialization.modelParametersArchive import registerModelParameters


@registerModelParameters
class ModelParametersLWR(ModelParameters):
    """Model parameters of locally weighted regression.

    The output is a blend of local line segments, weighted with normalized Gaussian activations.
    If lines_pivot_at_max_activation is set, each line is expressed relative to the center of
    its basis function, i.e. slopes_b . (x - centers_b) + offsets_b, so that the offset is the
    value of the line where its basis function is maximally active.
    """

    def __init__(self, centers, widths, slopes, offsets, lines_pivot_at_max_activation=False):
        """Class constructor. All arrays are copied.

        :param centers: centers of the basis functions
        :type centers: numpy array, shape (n_basis, n_dims)
        :param widths: widths of the basis functions
        :type widths: numpy array, shape (n_basis, n_dims)
        :param slopes: slopes of the line segments
        :type slopes: numpy array, shape (n_basis, n_dims)
        :param offsets: offsets of the line segments
        :type offsets: numpy array, shape (n_basis,)
        :param lines_pivot_at_max_activation: whether the lines pivot around the centers
        :type lines_pivot_at_max_activation: bool, optional
        :raises ValueError: if the shapes of the arrays do not match
        """
        self.centers = np.array(centers, dtype=float, ndmin=2)
        self.widths = np.array(widths, dtype=float, ndmin=2)
        self.slopes = np.array(slopes, dtype=float, ndmin=2)
        self.offsets = np.array(offsets, dtype=float).ravel()
        self.lines_pivot_at_max_activation = bool(lines_pivot_at_max_activation)

        if self.widths.shape != self.centers.shape or self.slopes.shape != self.centers.shape:
            raise ValueError("centers, widths and slopes must have the same shape, got "
                             + str(self.centers.shape) + ", " + str(self.widths.shape) + " and "
                             + str(self.slopes.shape))
        if len(self.offsets) != self.centers.shape[0]:
            raise ValueError("Expected " + str(self.centers.shape[0]) + " offsets, got "
                             + str(len(self.offsets)))

    def getExpectedInputDim(self):
        return self.centers.shape[1]

    def _absoluteOffsets(self):
        # offsets of the same lines, pivoting around the origin
        if self.lines_pivot_at_max_activation:
            return self.offsets - np.sum(self.slopes * self.centers, axis=1)
        return self.offsets

    def kernelActivations(self, inputs):
        inputs = self.checkInputs(inputs)
        return gaussianKernelActivations(self.centers, self.widths, inputs, normalized=True)

    def getLines(self, inputs):
        inputs = self.checkInputs(inputs)
        return linesResponse(self.slopes, self._absoluteOffsets(), inputs)

    def getOutput(self, inputs):
        return np.sum(self.kernelActivations(inputs) * self.getLines(inputs), axis=1)

    def clone(self):
        cloned = ModelParametersLWR(self.centers, self.widths, self.slopes, self.offsets,
                                    self.lines_pivot_at_max_activation)
        self.copySelectionTo(cloned)
        return cloned

    def toString(self):
        return ("ModelParametersLWR("
                + self.arrayToString("centers", self.centers) + ", "
                + self.arrayToString("widths", self.widths) + ", "
                + self.arrayToString("slopes", self.slopes) + ", "
                + self.arrayToString("offsets", self.offsets) + ", "
                + "lines_pivot_at_max_activation=" + str(self.lines_pivot_at_max_activation) + ")")

    def toModelParametersUnified(self):
        return ModelParametersUnified(self.centers, self.widths, self.slopes,
                                      self._absoluteOffsets(), normalized_basis_functions=True)

    def saveGridData(self, min, max, n_samples_per_dim, directory, overwrite=False):
        if not self.checkGridDimensions(min, max, n_samples_per_dim):
            return False

        inputs = generateInputsGrid(min, max, n_samples_per_dim)
        activations = self.kernelActivations(inputs)
        lines = self.getLines(inputs)

        return self.writeGridFiles(directory, [
            ("n_samples_per_dim.txt", np.asarray(n_samples_per_dim, dtype=int)),
            ("inputs_grid.txt", inputs),
            ("activations.txt", activations),
            ("lines.txt", lines),
            ("predictions.txt", np.sum(activations * lines, axis=1)),
        ], overwrite)

    def getSelectableParameters(self):
        return {"centers", "widths", "slopes", "offsets"}

    def getParameterVectorAll(self):
        return np.concatenate([self.centers.ravel(), self.widths.ravel(),
                               self.slopes.ravel(), self.offsets])

    def setParameterVectorAll(self, values):
        self.centers, self.widths, self.slopes, self.offsets = self._splitVector(
            values, [self.centers.shape, self.widths.shape, self.slopes.shape, self.offsets.shape])

    def getParameterVectorMask(self, selected_labels):
        return self._maskFromSizes(selected_labels, [("centers", self.centers.size),
                                                     ("widths", self.widths.size),
                                                     ("slopes", self.slopes.size),
                                                     ("offsets", self.offsets.size)])

    def toDict(self):
        dictionary = super().toDict()
        dictionary.update({
            "centers": self.centers.tolist(),
            "widths": self.widths.tolist(),
            "slopes": self.slopes.tolist(),
            "offsets": self.offsets.tolist(),
            "lines_pivot_at_max_activation": self.lines_pivot_at_max_activation,
        })
        return dictionary

    @classmethod
    def fromDict(cls, dictionary):
        model_parameters = cls(dictionary["centers"], dictionary["widths"], dictionary["slopes"],
                               dictionary["offsets"], dictionary["lines_pivot_at_max_activation"])
        model_parameters.restoreFromDict(dictionary)
        return model_parameters
