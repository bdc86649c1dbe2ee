import numpy as np
from FunctionApproximators.modelparameters.modelParameters import ModelParameters
from FunctionApproximators.modelparameters.modelParametersUnified import ModelParametersUnified
from FunctionApproximators.basisfunctions.basisFunctions import squaredExponentialCovariance, generateInputsGrid
from FunctionApproximators.serialization.modelParametersArchive import registerModelParameters


@registerModelParameters
class ModelParametersGPR(ModelParameters):
    """Model parameters of Gaussian process regression with a squared exponential covariance
    function.

    The mean prediction is sum_i k(x, x_i) * weights_i, where x_i are the training inputs and
    weights = K^-1 y was computed when the process was trained. The training inputs are stored,
    but are not part of the parameter vector.
    """

    def __init__(self, train_inputs, weights, max_covar, length_scales):
        """Class constructor. All arrays are copied.

        :param train_inputs: inputs the process was trained on
        :type train_inputs: numpy array, shape (n_train, n_dims)
        :param weights: inverse covariance matrix times the training targets
        :type weights: numpy array, shape (n_train,)
        :param max_covar: maximum covariance, i.e. k(x, x)
        :type max_covar: float
        :param length_scales: length scale along each dimension
        :type length_scales: numpy array, shape (n_dims,)
        :raises ValueError: if the shapes of the arrays do not match
        """
        self.train_inputs = np.array(train_inputs, dtype=float, ndmin=2)
        self.weights = np.array(weights, dtype=float).ravel()
        self.max_covar = float(max_covar)
        self.length_scales = np.array(length_scales, dtype=float).ravel()

        if len(self.weights) != self.train_inputs.shape[0]:
            raise ValueError("Expected " + str(self.train_inputs.shape[0]) + " weights, got "
                             + str(len(self.weights)))
        if len(self.length_scales) != self.train_inputs.shape[1]:
            raise ValueError("Expected " + str(self.train_inputs.shape[1]) + " length scales, got "
                             + str(len(self.length_scales)))

    def getExpectedInputDim(self):
        return self.train_inputs.shape[1]

    def kernelActivations(self, inputs):
        """Covariance between each input and each training input.

        :rtype: numpy array, shape (n_samples, n_train)
        """
        inputs = self.checkInputs(inputs)
        return squaredExponentialCovariance(inputs, self.train_inputs, self.max_covar, self.length_scales)

    def getOutput(self, inputs):
        return self.kernelActivations(inputs) @ self.weights

    def clone(self):
        cloned = ModelParametersGPR(self.train_inputs, self.weights, self.max_covar, self.length_scales)
        self.copySelectionTo(cloned)
        return cloned

    def toString(self):
        return ("ModelParametersGPR("
                + self.arrayToString("train_inputs", self.train_inputs) + ", "
                + self.arrayToString("weights", self.weights) + ", "
                + self.arrayToString("max_covar", self.max_covar) + ", "
                + self.arrayToString("length_scales", self.length_scales) + ")")

    def toModelParametersUnified(self):
        # one unnormalized kernel per training input, scaled by max_covar
        widths = np.tile(self.length_scales, (self.train_inputs.shape[0], 1))
        return ModelParametersUnified(self.train_inputs, widths, np.zeros(self.train_inputs.shape),
                                      self.weights * self.max_covar, normalized_basis_functions=False)

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
        return {"weights", "max_covar", "length_scales"}

    def getParameterVectorAll(self):
        return np.concatenate([self.weights, [self.max_covar], self.length_scales])

    def setParameterVectorAll(self, values):
        self.weights, max_covar, self.length_scales = self._splitVector(
            values, [self.weights.shape, (1,), self.length_scales.shape])
        self.max_covar = float(max_covar[0])

    def getParameterVectorMask(self, selected_labels):
        return self._maskFromSizes(selected_labels, [("weights", self.weights.size),
                                                     ("max_covar", 1),
                                                     ("length_scales", self.length_scales.size)])

    def toDict(self):
        dictionary = super().toDict()
        dictionary.update({
            "train_inputs": self.train_inputs.tolist(),
            "weights": self.weights.tolist(),
            "max_covar": self.max_covar,
            "length_scales": self.length_scales.tolist(),
        })
        return dictionary

    @classmethod
    def fromDict(cls, dictionary):
        model_parameters = cls(dictionary["train_inputs"], dictionary["weights"],
                               dictionary["max_covar"], dictionary["length_scales"])
        model_parameters.restoreFromDict(dictionary)
        return model_parameters
