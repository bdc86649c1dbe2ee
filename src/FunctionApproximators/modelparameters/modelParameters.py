import os
import sys
import numpy as np
from abc import abstractmethod
from typing import Optional
from FunctionApproximators import setup_logger
from FunctionApproximators.parametermanagement.parameterizable import Parameterizable

griddata_logger = setup_logger.logger.getChild("gridData")


class ModelParameters(Parameterizable):
    """Base class for all model parameters of function approximators.

    Model parameters are the fitted numeric state of one function approximator (weights, centers,
    widths, ...). Generic code, such as serialization or visualization, only relies on the methods
    defined here and never on the concrete type.

    Apart from the Parameterizable interface, which an optimizer may use to change the values,
    model parameters are read-only: they are cloned, printed, converted and saved, but never
    modified by these methods.

    This class can not be instantiated directly.
    """

    # number of digits after the decimal point used in toString()
    string_precision = 6

    @abstractmethod
    def clone(self):
        """Returns a deep copy of these model parameters. The copy shares no mutable state with
        the original.

        :return: deep copy
        :rtype: ModelParameters
        """
        pass

    @abstractmethod
    def toString(self):
        """Returns a deterministic, human readable representation of the parameter values.

        :return: string representation
        :rtype: string
        """
        pass

    @abstractmethod
    def getExpectedInputDim(self):
        """The expected dimensionality of the input data. Constant for the lifetime of the object.

        :return: expected dimensionality of the input data
        :rtype: int
        """
        pass

    @abstractmethod
    def toModelParametersUnified(self) -> Optional["ModelParametersUnified"]:
        """Converts these model parameters to the unified representation.

        :return: unified model parameters, or None if no such conversion exists for this subclass
        :rtype: ModelParametersUnified or None
        """
        pass

    def saveGridData(self, min, max, n_samples_per_dim, directory, overwrite=False):
        """Generates a grid of inputs, and saves the response of the basis functions and line
        segments for these inputs to the directory.

        This default implementation only checks the dimensions of the arguments and writes
        nothing, because a grid visualization does not make sense for every subclass.

        :param min: minimum values for the grid, one for each dimension
        :type min: numpy array, 1d
        :param max: maximum values for the grid, one for each dimension
        :type max: numpy array, 1d
        :param n_samples_per_dim: number of samples in the grid along each dimension
        :type n_samples_per_dim: numpy array of ints, 1d
        :param directory: directory to save the results to
        :type directory: string
        :param overwrite: whether to overwrite existing files. If False, existing files are kept,
            a warning is logged and False is returned.
        :type overwrite: bool, optional
        :return: whether saving the data was successful. False if the dimensions do not match
            getExpectedInputDim().
        :rtype: bool
        """
        return self.checkGridDimensions(min, max, n_samples_per_dim)

    def checkInputs(self, inputs):
        """Converts inputs to a 2d array with one sample per row.

        :raises ValueError: if the number of columns differs from getExpectedInputDim()
        :rtype: numpy array, shape (n_samples, n_dims)
        """
        inputs = np.asarray(inputs, dtype=float)
        if inputs.ndim == 1:
            if self.getExpectedInputDim() == 1:
                inputs = inputs.reshape(-1, 1)
            else:
                inputs = inputs.reshape(1, -1)

        if inputs.ndim != 2 or inputs.shape[1] != self.getExpectedInputDim():
            raise ValueError("Inputs of shape " + str(inputs.shape) + " do not match the expected input "
                             + "dimensionality " + str(self.getExpectedInputDim()))
        return inputs

    def checkGridDimensions(self, min, max, n_samples_per_dim):
        """Checks that min, max and n_samples_per_dim all have getExpectedInputDim() entries, and
        that there is a whole number of at least one sample along each dimension. Logs a warning if not.

        :return: whether the arguments are valid
        :rtype: bool
        """
        dim = self.getExpectedInputDim()
        for name, values in [("min", min), ("max", max), ("n_samples_per_dim", n_samples_per_dim)]:
            size = np.size(values)
            if size != dim:
                griddata_logger.warning("Length of %s (%s) does not match the expected input dimensionality (%s) of %s. "
                                        "Not saving grid data.", name, size, dim, type(self).__name__)
                return False

        n_samples_per_dim = np.asarray(n_samples_per_dim)
        if np.any(n_samples_per_dim != np.round(n_samples_per_dim)):
            griddata_logger.warning("n_samples_per_dim must contain whole numbers, got %s. Not saving grid data.",
                                    n_samples_per_dim)
            return False

        if np.any(n_samples_per_dim < 1):
            griddata_logger.warning("n_samples_per_dim must be at least 1 along each dimension, got %s. "
                                    "Not saving grid data.", n_samples_per_dim)
            return False

        return True

    @staticmethod
    def writeGridFiles(directory, files, overwrite=False):
        """Writes arrays as whitespace separated text files to a directory, which is created if
        necessary.

        :param directory: directory to write to
        :type directory: string
        :param files: filenames and the arrays to write to them
        :type files: list of tuples (string, numpy array)
        :param overwrite: whether to overwrite existing files. If False, existing files are skipped
            and a warning is logged.
        :type overwrite: bool, optional
        :return: True if all files were written, False if at least one was skipped
        :rtype: bool
        """
        os.makedirs(directory, exist_ok=True)

        success = True
        for filename, data in files:
            path = os.path.join(directory, filename)
            if os.path.exists(path) and not overwrite:
                griddata_logger.warning("File %s already exists, not overwriting it.", path)
                success = False
                continue

            np.savetxt(path, np.atleast_1d(data))
            griddata_logger.debug("Saved %s", path)

        return success

    def toDict(self):
        """Returns the state shared by all model parameters, i.e. the Parameterizable selection,
        as a dictionary. Subclasses extend the returned dictionary with their own values.

        :return: serializable state
        :rtype: dict
        """
        dictionary = {"selected_parameters": sorted(self.getSelectedParameters())}
        if dictionary["selected_parameters"]:
            dictionary["reference_parameter_vector"] = self._initial_values.tolist()
        return dictionary

    def restoreFromDict(self, dictionary):
        """Restores the state written by ModelParameters.toDict()."""
        selected = dictionary.get("selected_parameters", [])
        if selected:
            self.setSelectedParameters(selected)
            if "reference_parameter_vector" in dictionary:
                reference = np.array(dictionary["reference_parameter_vector"], dtype=float).ravel()
                if len(reference) != self.getParameterVectorAllSize():
                    raise ValueError("Expected a reference parameter vector of length "
                                     + str(self.getParameterVectorAllSize()) + ", got " + str(len(reference)))
                self._initial_values = reference

    def copySelectionTo(self, other):
        """Copies the Parameterizable selection, including the normalization reference values,
        to another instance of the same class.
        """
        if getattr(self, "_selected_labels", None) is None:
            return
        other._selected_labels = set(self._selected_labels)
        other._selected_mask = np.copy(self._selected_mask)
        other._initial_values = np.copy(self._initial_values)

    def arrayToString(self, name, values):
        return name + "=" + np.array2string(np.asarray(values),
                                            precision=self.string_precision,
                                            separator=", ",
                                            max_line_width=sys.maxsize,
                                            threshold=sys.maxsize).replace("\n", "")

    def __str__(self):
        return self.toString()


def render(sink, model_parameters):
    """Writes the string representation of any model parameters to a sink, e.g. an open file or
    an io.StringIO object.

    :param sink: object with a write method
    :param model_parameters: model parameters to write
    :type model_parameters: ModelParameters
    :return: the sink
    """
    sink.write(model_parameters.toString())
    return sink
