import numpy as np
from FunctionApproximators.modelparameters.modelParameters import ModelParameters
from FunctionApproximators.serialization.modelParametersArchive import registerModelParameters


@registerModelParameters
class ModelParametersPolynomialRegression(ModelParameters):
    """Model parameters of a polynomial without cross terms.

    The features of an input x are [1, x_1, ..., x_d, x_1^2, ..., x_d^2, ..., x_d^order], so there
    are 1 + order * d coefficients.

    There are no basis functions, hence no unified representation and no grid data.
    """

    def __init__(self, coefficients, order, input_dim=1):
        self.coefficients = np.array(coefficients, dtype=float).ravel()
        self.order = int(order)
        self.input_dim = int(input_dim)

        if self.order < 0 or self.input_dim < 0:
            raise ValueError("order and input_dim must not be negative")
        if len(self.coefficients) != 1 + self.order * self.input_dim:
            raise ValueError("Expected " + str(1 + self.order * self.input_dim) + " coefficients for order "
                             + str(self.order) + " in " + str(self.input_dim) + " dimensions, got "
                             + str(len(self.coefficients)))

    def getExpectedInputDim(self):
        return self.input_dim

    def getFeatures(self, inputs):
        inputs = self.checkInputs(inputs)
        features = [np.ones((inputs.shape[0], 1))]
        for power in range(1, self.order + 1):
            features.append(inputs**power)
        return np.hstack(features)

    def getOutput(self, inputs):
        return self.getFeatures(inputs) @ self.coefficients

    def clone(self):
        cloned = ModelParametersPolynomialRegression(self.coefficients, self.order, self.input_dim)
        self.copySelectionTo(cloned)
        return cloned

    def toString(self):
        return ("ModelParametersPolynomialRegression("
                + self.arrayToString("coefficients", self.coefficients) + ", "
                + "order=" + str(self.order) + ", "
                + "input_dim=" + str(self.input_dim) + ")")

    def toModelParametersUnified(self):
        return None

    def getSelectableParameters(self):
        return {"coefficients"}

    def getParameterVectorAll(self):
        return np.copy(self.coefficients)

    def setParameterVectorAll(self, values):
        self.coefficients, = self._splitVector(values, [self.coefficients.shape])

    def getParameterVectorMask(self, selected_labels):
        return self._maskFromSizes(selected_labels, [("coefficients", self.coefficients.size)])

    def toDict(self):
        dictionary = super().toDict()
        dictionary.update({
            "coefficients": self.coefficients.tolist(),
            "order": self.order,
            "input_dim": self.input_dim,
        })
        return dictionary

    @classmethod
    def fromDict(cls, dictionary):
        model_parameters = cls(dictionary["coefficients"], dictionary["order"], dictionary["input_dim"])
        model_parameters.restoreFromDict(dictionary)
        return model_parameters
