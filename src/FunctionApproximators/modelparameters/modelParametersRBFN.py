import numpy as np
from FunctionApproximators.modelparameters.modelParameters import ModelParameters
from FunctionApproximators.modelparameters.modelParametersUnified import ModelParametersUnified
from FunctionApproximators.basisfunctions.basisFunctions import gaussianKernelActivations, generateInputsGrid
from FunctionApproximators.serialization.modelParametersArchive import registerModelParameters


@registerModelParameters
class ModelParametersRBFN(ModelParameters):
    """Model parameters of a radial basis function network: a weighted sum of Gaussian kernels."""

    def __init__(self, centers, widths, weights):
        """Class constructor. All arrays are copied.

        :param centers: centers of the kernels
        :type centers: numpy array, shape (n_basis, n_dims)
        :param widths: widths of the kernels
        :type widths: numpy array, shape (n_basis, n_dims)
        :param weights: weight of each kernel
        :type weights: numpy array, shape (n_basis,)
        :raises ValueError: if the shapes of the arrays do not match
        """
        self.centers = np.array(centers, dtype=float, ndmin=2)
        self.widths = np.array(widths, dtype=float, ndmin=2)
        self.weights = np.array(weights, dtype=float).ravel()

        if self.widths.shape != self.centers.shape:
            raise ValueError("centers and widths must have the same shape, got "
                             + str(self.centers.shape) + " and " + str(self.widths.shape))
        if len(self.weights) != self.centers.shape[0]:
            raise ValueError("Expected " + str(self.centers.shape[0]) + " weights, got "
                             + str(len(self.weights)))

    def getExpectedInputDim(self):
        return self.centers.shape[1]

    def kernelActivations(self, inputs):
        inputs = self.checkInputs(inputs)
        return gaussianKernelActivations(self.centers, self.widths, inputs)

    def getOutput(self, inputs):
        return self.kernelActivations(inputs) @ self.weights

    def clone(self):
        cloned = ModelParametersRBFN(self.centers, self.widths, self.weights)
        self.copySelectionTo(cloned)
        return cloned

    def toString(self):
        return ("ModelParametersRBFN("
                + self.arrayToString("centers", self.centers) + ", "
                + self.arrayToString("widths", self.widths) + ", "
                + self.arrayToString("weights", self.weights) + ")")

    def toModelParametersUnified(self):
        # the weights are the offsets of horizontal lines
        return ModelParametersUnified(self.centers, self.widths, np.zeros(self.centers.shape),
                                      self.weights, normalized_basis_functions=False)

    def saveGridData(self, min, max, n_samples_per_dim, directory, overwrite=False):
        if not self.checkGridDimensions(min, max, n_samples_per_dim):
            return False

        inputs = generateInputsGrid(min, max, n_samples_per_dim)
        activations = self.kernelActivations(inputs)

        return self.writeGridFiles(directory, [
            ("n_samples_per_dim.txt", np.asarray(n_samples_per_dim, dtype=int)),
            ("inputs_grid.txt", inputs),
            ("activations.txt", activations),
            ("predictions.txt", activations @ self.weights),
        ], overwrite)

    def getSelectableParameters(self):
        return {"centers", "widths", "weights"}

    def getParameterVectorAll(self):
        return np.concatenate([self.centers.ravel(), self.widths.ravel(), self.weights])

    def setParameterVectorAll(self, values):
        self.centers, self.widths, self.weights = self._splitVector(
            values, [self.centers.shape, self.widths.shape, self.weights.shape])

    def getParameterVectorMask(self, selected_labels):
        return self._maskFromSizes(selected_labels, [("centers", self.centers.size),
                                                     ("widths", self.widths.size),
                                                     ("weights", self.weights.size)])

    def toDict(self):
        dictionary = super().toDict()
        dictionary.update({
            "centers": self.centers.tolist(),
            "widths": self.widths.tolist(),
            "weights": self.weights.tolist(),
        })
        return dictionary

    @classmethod
    def fromDict(cls, dictionary):
        model_parameters = cls(dictionary["centers"], dictionary["widths"], dictionary["weights"])
        model_parameters.restoreFromDict(dictionary)
        return model_parameters
