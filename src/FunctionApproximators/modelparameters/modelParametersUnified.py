import numpy as np
from FunctionApproximators.modelparameters.modelParameters import ModelParameters
from FunctionApproximators.basisfunctions.basisFunctions import gaussianKernelActivations, linesResponse, generateInputsGrid
from FunctionApproximators.serialization.modelParametersArchive import registerModelParameters


@registerModelParameters
class ModelParametersUnified(ModelParameters):
    """Unified representation of the model parameters of many function approximators.

    A model consists of n_basis Gaussian basis functions, each with a line segment. The output for
    an input x is

    .. code-block:: none

        y(x) = sum_b a_b(x) * (slopes_b . x + offsets_b)

    where a_b are the (optionally normalized) activations of the basis functions. A radial basis
    function network for instance has zero slopes and its weights as offsets.
    """

    def __init__(self, centers, widths, slopes, offsets, normalized_basis_functions=False):
        """Class constructor. All arrays are copied.

        :param centers: centers of the basis functions
        :type centers: numpy array, shape (n_basis, n_dims)
        :param widths: widths of the basis functions
        :type widths: numpy array, shape (n_basis, n_dims)
        :param slopes: slopes of the line segments
        :type slopes: numpy array, shape (n_basis, n_dims)
        :param offsets: offsets of the line segments
        :type offsets: numpy array, shape (n_basis,)
        :param normalized_basis_functions: whether the activations are normalized to sum to one
        :type normalized_basis_functions: bool, optional
        :raises ValueError: if the shapes of the arrays do not match
        """
        self.centers = np.array(centers, dtype=float, ndmin=2)
        self.widths = np.array(widths, dtype=float, ndmin=2)
        self.slopes = np.array(slopes, dtype=float, ndmin=2)
        self.offsets = np.array(offsets, dtype=float).ravel()
        self.normalized_basis_functions = bool(normalized_basis_functions)

        if self.widths.shape != self.centers.shape or self.slopes.shape != self.centers.shape:
            raise ValueError("centers, widths and slopes must have the same shape, got "
                             + str(self.centers.shape) + ", " + str(self.widths.shape) + " and "
                             + str(self.slopes.shape))
        if len(self.offsets) != self.centers.shape[0]:
            raise ValueError("Expected " + str(self.centers.shape[0]) + " offsets, got "
                             + str(len(self.offsets)))

    def getExpectedInputDim(self):
        return self.centers.shape[1]

    def getNumberOfBasisFunctions(self):
        return self.centers.shape[0]

    def kernelActivations(self, inputs):
        inputs = self.checkInputs(inputs)
        return gaussianKernelActivations(self.centers, self.widths, inputs,
                                         self.normalized_basis_functions)

    def getLines(self, inputs):
        inputs = self.checkInputs(inputs)
        return linesResponse(self.slopes, self.offsets, inputs)

    def getOutput(self, inputs):
        """Computes the output of the model.

        :param inputs: input points
        :type inputs: numpy array, shape (n_samples, n_dims)
        :return: outputs
        :rtype: numpy array, shape (n_samples,)
        """
        return np.sum(self.kernelActivations(inputs) * self.getLines(inputs), axis=1)

    def clone(self):
        cloned = ModelParametersUnified(self.centers, self.widths, self.slopes, self.offsets,
                                        self.normalized_basis_functions)
        self.copySelectionTo(cloned)
        return cloned

    def toString(self):
        return ("ModelParametersUnified("
                + self.arrayToString("centers", self.centers) + ", "
                + self.arrayToString("widths", self.widths) + ", "
                + self.arrayToString("slopes", self.slopes) + ", "
                + self.arrayToString("offsets", self.offsets) + ", "
                + "normalized_basis_functions=" + str(self.normalized_basis_functions) + ")")

    def toModelParametersUnified(self):
        return self.clone()

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
            "normalized_basis_functions": self.normalized_basis_functions,
        })
        return dictionary

    @classmethod
    def fromDict(cls, dictionary):
        model_parameters = cls(dictionary["centers"], dictionary["widths"], dictionary["slopes"],
                               dictionary["offsets"], dictionary["normalized_basis_functions"])
        model_parameters.restoreFromDict(dictionary)
        return model_parameters
