import numpy as np
from abc import ABC, abstractmethod
from FunctionApproximators import setup_logger

parameterizable_logger = setup_logger.logger.getChild("parameterizable")


class Parameterizable(ABC):
    """Base class for all objects whose numeric state can be accessed as one parameter vector,
    e.g. by an optimizer.

    The full parameter vector is split into groups, each identified by a label (for instance
    "centers" or "weights"). A subset of these groups can be selected, after which only the
    selected part of the vector is read and written by the *Selected methods.

    Values of the selected vector can optionally be normalized to [0, 1], using the minimum
    and maximum value of each label group at the time the selection was made.
    """

    class WrongSizeError(Exception):
        pass

    @abstractmethod
    def getSelectableParameters(self):
        """Returns the labels of all parameter groups that can be selected.

        :return: selectable labels
        :rtype: set of strings
        """
        pass

    @abstractmethod
    def getParameterVectorAll(self):
        """Returns all parameters as one 1d numpy array

        :return: all parameters
        :rtype: numpy array, 1d
        """
        pass

    @abstractmethod
    def setParameterVectorAll(self, values):
        """Sets all parameters from one 1d numpy array.

        :param values: new values, same layout as returned by getParameterVectorAll
        :type values: numpy array, 1d
        """
        pass

    @abstractmethod
    def getParameterVectorMask(self, selected_labels):
        """Returns a mask over the full parameter vector.

        Entries belonging to a selected group contain the 1-based index of the group's label in the
        sorted list of selectable labels, all other entries contain 0.

        :param selected_labels: labels of the selected groups
        :type selected_labels: set of strings
        :return: the mask
        :rtype: numpy array of ints, same length as getParameterVectorAll()
        """
        pass

    def getParameterVectorAllSize(self):
        return len(self.getParameterVectorAll())

    def _labelIndices(self):
        return {label: i + 1 for i, label in enumerate(sorted(self.getSelectableParameters()))}

    def _maskFromSizes(self, selected_labels, sizes):
        """Helper for subclasses storing their groups consecutively, in the order of 'sizes'.

        :param selected_labels: labels of the selected groups
        :type selected_labels: set of strings
        :param sizes: label and number of entries of each group, in storage order
        :type sizes: list of tuples (string, int)
        :return: the mask
        :rtype: numpy array of ints
        """
        indices = self._labelIndices()
        mask = []
        for label, size in sizes:
            value = indices[label] if label in selected_labels else 0
            mask.extend([value] * size)
        return np.array(mask, dtype=int)

    def _splitVector(self, values, shapes):
        """Helper for subclasses storing their groups consecutively: splits a full parameter vector
        into arrays of the given shapes.

        :raises WrongSizeError: if values does not contain exactly the number of entries needed
        """
        values = np.asarray(values, dtype=float)
        sizes = [int(np.prod(shape)) for shape in shapes]
        if values.ndim != 1 or len(values) != sum(sizes):
            raise Parameterizable.WrongSizeError("Expected " + str(sum(sizes)) + " parameters, got "
                                                 + str(np.size(values)))

        arrays = []
        start = 0
        for shape, size in zip(shapes, sizes):
            arrays.append(np.copy(values[start:start + size]).reshape(shape))
            start += size
        return arrays

    def setSelectedParameters(self, selected_labels):
        """Selects the parameter groups accessed by the *Selected methods.
        The current values are stored as reference for normalization.

        :param selected_labels: labels to select. Unknown labels are ignored.
        :type selected_labels: iterable of strings
        """
        selectable = self.getSelectableParameters()
        selected = set()
        for label in selected_labels:
            if label not in selectable:
                parameterizable_logger.warning("Cannot select unknown parameter '%s' in %s, ignoring it.",
                                               label, type(self).__name__)
                continue
            selected.add(label)

        self._selected_labels = selected
        self._selected_mask = self.getParameterVectorMask(selected)
        self._initial_values = np.copy(self.getParameterVectorAll())

    def getSelectedParameters(self):
        return set(getattr(self, "_selected_labels", set()))

    def _getSelectedMask(self):
        if getattr(self, "_selected_mask", None) is None:
            return np.zeros(self.getParameterVectorAllSize(), dtype=int)
        return self._selected_mask

    def getParameterVectorSelectedSize(self):
        return int(np.count_nonzero(self._getSelectedMask()))

    def getParameterVectorSelectedMinMax(self):
        """Returns the minimum and maximum value of the label group of each selected entry, taken
        from the values at the time of selection.

        :return: minimum and maximum values
        :rtype: tuple of two 1d numpy arrays
        """
        mask = self._getSelectedMask()
        initial = getattr(self, "_initial_values", None)
        if initial is None:
            return (np.zeros(0), np.zeros(0))

        minimums = np.zeros(len(mask))
        maximums = np.zeros(len(mask))
        for group in np.unique(mask[mask > 0]):
            minimums[mask == group] = np.min(initial[mask == group])
            maximums[mask == group] = np.max(initial[mask == group])
        return (minimums[mask > 0], maximums[mask > 0])

    def getParameterVectorSelected(self, normalized=False):
        """Returns the selected part of the parameter vector.

        :param normalized: whether to map each value to [0, 1] using its group's min and max
        :type normalized: bool, optional
        :return: selected values
        :rtype: numpy array, 1d
        """
        mask = self._getSelectedMask()
        values = self.getParameterVectorAll()[mask > 0]

        if normalized:
            minimums, maximums = self.getParameterVectorSelectedMinMax()
            ranges = maximums - minimums
            scalable = ranges != 0
            values = np.copy(values)
            values[scalable] = (values[scalable] - minimums[scalable]) / ranges[scalable]

        return values

    def setParameterVectorSelected(self, values, normalized=False):
        """Sets the selected part of the parameter vector. Unselected values are left untouched.

        :param values: new selected values
        :type values: numpy array, 1d
        :param normalized: whether the values are normalized, see getParameterVectorSelected
        :type normalized: bool, optional
        :raises WrongSizeError: if values does not have getParameterVectorSelectedSize() entries
        """
        values = np.asarray(values, dtype=float)
        if len(values) != self.getParameterVectorSelectedSize():
            raise Parameterizable.WrongSizeError("Expected " + str(self.getParameterVectorSelectedSize())
                                                 + " selected values, got " + str(len(values)))

        if normalized:
            minimums, maximums = self.getParameterVectorSelectedMinMax()
            ranges = maximums - minimums
            scalable = ranges != 0
            values = np.copy(values)
            values[scalable] = values[scalable] * ranges[scalable] + minimums[scalable]

        mask = self._getSelectedMask()
        all_values = np.copy(self.getParameterVectorAll())
        all_values[mask > 0] = values
        self.setParameterVectorAll(all_values)
